"""Segment model: convert between a template tree and its flat segment list."""

from __future__ import annotations

from collections import deque

from stylefold.errors import MalformedTemplateError, SegmentMismatchError
from stylefold.model.segment import ExprSegment, LiteralSegment, Segment
from stylefold.model.template import TemplateNode, TemplateSpan

__all__ = ["extract_segments", "recreate_template"]


def extract_segments(template: TemplateNode) -> list[Segment]:
    """Flatten *template* into literal and expression segments in source order.

    Every head/middle/tail literal yields a segment, even when empty, so a
    template with N substitutions always produces N + 1 literal segments.
    """
    segments: list[Segment] = []

    def walk(node: object) -> None:
        if isinstance(node, TemplateNode):
            walk(node.head)
            for span in node.spans:
                walk(span)
        elif isinstance(node, TemplateSpan):
            segments.append(ExprSegment(node.expression))
            walk(node.literal)
        elif isinstance(node, str):
            segments.append(LiteralSegment(node))
        else:
            raise MalformedTemplateError(
                f"Unknown template node: {type(node).__name__}", detail=repr(node)
            )

    walk(template)
    return segments


def recreate_template(shape: TemplateNode, segments: list[Segment]) -> TemplateNode:
    """Rebuild a template with the structure of *shape* from *segments*.

    Literal text may differ from the original (e.g. after minification), but
    every expression must be the one *shape* holds at that position, and the
    segment list must be consumed exactly.
    """
    queue: deque[Segment] = deque(segments)

    def take_literal() -> str:
        if not queue:
            raise SegmentMismatchError("Ran out of segments while expecting a literal")
        seg = queue.popleft()
        if not isinstance(seg, LiteralSegment):
            raise SegmentMismatchError(f"Expected a literal segment, got {seg!r}")
        return seg.text

    def take_span(span: TemplateSpan) -> TemplateSpan:
        if not queue:
            raise SegmentMismatchError("Ran out of segments while expecting an expression")
        seg = queue.popleft()
        if not isinstance(seg, ExprSegment):
            raise SegmentMismatchError(f"Expected an expression segment, got {seg!r}")
        if seg.ref != span.expression:
            raise SegmentMismatchError(
                f"Expression {seg.ref!r} does not match template expression {span.expression!r}"
            )
        return TemplateSpan(span.expression, take_literal())

    if not isinstance(shape, TemplateNode):
        raise MalformedTemplateError(f"Unknown template node: {type(shape).__name__}")

    head = take_literal()
    spans = tuple(take_span(span) for span in shape.spans)
    if queue:
        raise SegmentMismatchError(f"{len(queue)} segment(s) left over after recreation")
    return TemplateNode(head, spans)
