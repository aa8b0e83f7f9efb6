"""Segment model: the flat literal/expression form of a template."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LiteralSegment:
    """A run of literal template text (possibly empty)."""

    text: str


@dataclass(frozen=True)
class ExprSegment:
    """One occurrence of an embedded expression."""

    ref: object


Segment = LiteralSegment | ExprSegment


def expr_segments(segments: list[Segment]) -> list[ExprSegment]:
    """Return the expression segments in order."""
    return [s for s in segments if isinstance(s, ExprSegment)]
