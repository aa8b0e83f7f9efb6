"""Rewrite a styling tagged template into a plain call."""

from __future__ import annotations

from dataclasses import dataclass

from stylefold.compiler.engine import Compilation, Compiler
from stylefold.host.tags import TagKind, classify_tag
from stylefold.model.output import CompiledOutput
from stylefold.model.template import TaggedTemplate


class NotAStyledTemplateError(Exception):
    """Raised when a tagged template's tag is not a styling call."""

    def __init__(self, tag: str | None) -> None:
        self.tag = tag
        super().__init__(f"Not a styled template tag: {tag!r}")


@dataclass(frozen=True)
class RewrittenCall:
    """``tag(template, *arguments)`` replacing ``tag`...```."""

    tag: str
    output: CompiledOutput
    compilation: Compilation | None = None

    @property
    def arguments(self) -> list[object]:
        return self.output.arguments


def rewrite_tagged(
    tagged: TaggedTemplate,
    compiler: Compiler | None = None,
    *,
    keyframes: bool | None = None,
) -> RewrittenCall:
    """Compile *tagged* the way its tag requires.

    The ``keyframes`` tag compiles in keyframe mode, recognized styled tags
    in rule mode. *keyframes* overrides the tag for untagged templates only.
    """
    compiler = compiler or Compiler()
    kind = classify_tag(tagged.tag)
    if tagged.tag is None:
        kind = TagKind.KEYFRAMES if keyframes else TagKind.STYLED
    elif kind is None:
        raise NotAStyledTemplateError(tagged.tag)

    compilation = compiler.run(tagged.template, keyframe_body=kind is TagKind.KEYFRAMES)
    return RewrittenCall(
        tag=tagged.tag or kind.value,
        output=compilation.output,
        compilation=compilation,
    )
