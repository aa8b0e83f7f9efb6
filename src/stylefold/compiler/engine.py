"""Compilation engine: runs one template through every stage."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stylefold.compiler.markers import EncodedTemplate, encode_segments
from stylefold.compiler.optimizer import optimize
from stylefold.compiler.pipeline import CssPipeline, compile_css
from stylefold.compiler.segments import extract_segments
from stylefold.compiler.splitter import split_rules
from stylefold.config import CompilerConfig
from stylefold.model.output import CompiledOutput
from stylefold.model.segment import Segment
from stylefold.model.template import TemplateNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Compilation:
    """Every intermediate artifact of one compilation, for inspection."""

    segments: list[Segment]
    encoded: EncodedTemplate
    css: str
    blocks: list[str]
    output: CompiledOutput
    keyframe_body: bool = False


class Compiler:
    """Compiles templates against one CSS pipeline and configuration.

    A Compiler holds no per-template state, so one instance may be shared by
    any number of concurrent compilations.
    """

    def __init__(
        self,
        pipeline: CssPipeline | None = None,
        config: CompilerConfig | None = None,
    ) -> None:
        self.config = config or CompilerConfig()
        if pipeline is None:
            from stylefold.css import NestingPipeline

            pipeline = NestingPipeline(vendor_prefixes=self.config.vendor_prefixes)
        self.pipeline = pipeline

    def run(self, template: TemplateNode, keyframe_body: bool = False) -> Compilation:
        """Compile *template*, keeping every intermediate result."""
        segments = extract_segments(template)
        encoded = encode_segments(segments, base=self.config.marker_base)
        logger.debug("Flat template text: %r", encoded.table.reveal(encoded.text))

        css = compile_css(
            self.pipeline,
            encoded.text,
            encoded.table.class_marker,
            keyframe_body=keyframe_body,
            keyframes_name=self.config.keyframes_name,
        )
        logger.debug("Processed css: %r", encoded.table.reveal(css))

        blocks = split_rules(css, keyframe_body)
        output = optimize(blocks, encoded.table, keyframe_body=keyframe_body, config=self.config)
        logger.info(
            "Compiled template: shape=%s rules=%d slots=%d",
            output.shape.value,
            len(output.rules),
            len(output.slots),
        )
        return Compilation(
            segments=segments,
            encoded=encoded,
            css=css,
            blocks=blocks,
            output=output,
            keyframe_body=keyframe_body,
        )

    def compile(self, template: TemplateNode, keyframe_body: bool = False) -> CompiledOutput:
        return self.run(template, keyframe_body).output


def compile_template(
    template: TemplateNode,
    keyframe_body: bool = False,
    *,
    pipeline: CssPipeline | None = None,
    config: CompilerConfig | None = None,
) -> CompiledOutput:
    """Compile *template* into its most compact output shape."""
    return Compiler(pipeline, config).compile(template, keyframe_body)
