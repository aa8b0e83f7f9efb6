"""CSS pipeline adapter: runs flat template text through preprocess/prefix."""

from __future__ import annotations

from typing import Protocol

from stylefold.errors import UnexpectedKeyframeOutputError

__all__ = ["CssPipeline", "compile_css", "keyframes_wrapper"]


class CssPipeline(Protocol):
    """A nesting preprocessor plus a vendor prefixer.

    Both steps must be pure and deterministic, and must not reorder marker
    characters.
    """

    def preprocess(self, context: str, css: str) -> str: ...

    def prefix(self, css: str) -> str: ...


def keyframes_wrapper(name: str = "x") -> str:
    return f"@keyframes {name}{{"


def compile_css(
    pipeline: CssPipeline,
    text: str,
    class_marker: str,
    *,
    keyframe_body: bool = False,
    keyframes_name: str = "x",
) -> str:
    """Preprocess *text* under the class marker context, then prefix it.

    A keyframe body is wrapped in a synthetic ``@keyframes`` rule first so the
    preprocessor does not scope its percentage selectors to the class; the
    wrapper must come back unchanged and is stripped again.
    """
    wrapper = keyframes_wrapper(keyframes_name)
    if keyframe_body:
        text = wrapper + text + "}"

    out = pipeline.preprocess(class_marker, text)

    if keyframe_body:
        if not out.startswith(wrapper) or not out.endswith("}"):
            raise UnexpectedKeyframeOutputError(out)
        out = out[len(wrapper):-1]

    return pipeline.prefix(out)
