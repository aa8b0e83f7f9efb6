"""Marker codec: stand-in characters for expressions and the class name.

The class name takes the base code point; expression occurrences take
base + 1, base + 2, ... in order. A table lives for exactly one compilation.
"""

from __future__ import annotations

from dataclasses import dataclass

from stylefold.errors import MalformedTemplateError, ReservedCharacterError, ShapeInvariantError
from stylefold.model.output import CLASS_NAME, ClassName
from stylefold.model.segment import ExprSegment, LiteralSegment, Segment

__all__ = ["DEFAULT_MARKER_BASE", "EncodedTemplate", "MarkerTable", "encode_segments"]

DEFAULT_MARKER_BASE = 230

_SURROGATE_START = 0xD800


class MarkerTable:
    """Allocates markers and maps them back to what they stand for."""

    def __init__(self, base: int = DEFAULT_MARKER_BASE) -> None:
        self.base = base
        self.class_marker = chr(base)
        self._occurrences: list[ExprSegment] = []

    def allocate(self, segment: ExprSegment) -> str:
        """Assign the next marker to *segment* and return it."""
        code = self.base + len(self._occurrences) + 1
        if code >= _SURROGATE_START:
            raise MalformedTemplateError(
                f"Too many substitutions: marker code point U+{code:04X} is out of range"
            )
        self._occurrences.append(segment)
        return chr(code)

    @property
    def occurrences(self) -> tuple[ExprSegment, ...]:
        return tuple(self._occurrences)

    def marker_for(self, index: int) -> str:
        """Return the marker of the *index*-th expression occurrence."""
        if not 0 <= index < len(self._occurrences):
            raise IndexError(index)
        return chr(self.base + index + 1)

    def is_marker(self, char: str) -> bool:
        return self.base <= ord(char) <= self.base + len(self._occurrences)

    def is_class_marker(self, char: str) -> bool:
        return char == self.class_marker

    def decode(self, char: str) -> ClassName | ExprSegment:
        """Return the class-name sentinel or the occurrence behind *char*."""
        if char == self.class_marker:
            return CLASS_NAME
        index = ord(char) - self.base - 1
        if not 0 <= index < len(self._occurrences):
            raise ShapeInvariantError(f"Unknown marker character U+{ord(char):04X}")
        return self._occurrences[index]

    def label(self, char: str) -> str:
        """Human-readable name of a marker: ``<cls>`` or ``<eN>``."""
        if char == self.class_marker:
            return "<cls>"
        return f"<e{ord(char) - self.base - 1}>"

    def reveal(self, text: str) -> str:
        """Replace every marker in *text* with its label."""
        return "".join(self.label(c) if self.is_marker(c) else c for c in text)


@dataclass(frozen=True)
class EncodedTemplate:
    """Flat text ready for the CSS pipeline, plus its marker table."""

    text: str
    table: MarkerTable

    @property
    def occurrences(self) -> tuple[ExprSegment, ...]:
        return self.table.occurrences


def encode_segments(segments: list[Segment], base: int = DEFAULT_MARKER_BASE) -> EncodedTemplate:
    """Join *segments* into one string, one marker per expression occurrence.

    Raises :class:`ReservedCharacterError` when literal text already contains
    a character from the allocated marker range.
    """
    table = MarkerTable(base)
    parts: list[str] = []
    for seg in segments:
        if isinstance(seg, LiteralSegment):
            parts.append(seg.text)
        elif isinstance(seg, ExprSegment):
            parts.append(table.allocate(seg))
        else:
            raise MalformedTemplateError(f"Unknown segment: {seg!r}")

    offset = 0
    for seg in segments:
        if isinstance(seg, LiteralSegment):
            for i, char in enumerate(seg.text):
                if table.is_marker(char):
                    raise ReservedCharacterError(char, offset + i)
            offset += len(seg.text)
        else:
            offset += 1

    return EncodedTemplate("".join(parts), table)
