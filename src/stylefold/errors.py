"""Error hierarchy for template compilation.

Two tiers: :class:`StructuralError` means a caller contract was broken or a
collaborator produced unexpected output; :class:`UnsupportedConstructError`
means the template uses something the compiler deliberately rejects. Both
abort the current template only.
"""

from __future__ import annotations


class CompileError(Exception):
    """Base error for all stylefold compilation failures."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


# ---------------------------------------------------------------------------
# Structural faults
# ---------------------------------------------------------------------------


class StructuralError(CompileError):
    """Caller contract violation or unexpected collaborator output."""


class MalformedTemplateError(StructuralError):
    """The template tree contains a node of unknown shape."""


class ReservedCharacterError(MalformedTemplateError):
    """Literal text contains a code point reserved for markers."""

    def __init__(self, char: str, offset: int) -> None:
        super().__init__(
            f"Literal text contains reserved character U+{ord(char):04X} at offset {offset}",
            detail=char,
        )
        self.char = char
        self.offset = offset


class SegmentMismatchError(StructuralError):
    """Segments do not line up with the template they are recreating."""


class UnbalancedRulesError(StructuralError):
    """Processed CSS does not split into brace-balanced rule blocks."""

    def __init__(self, message: str, *, remainder: str = "") -> None:
        super().__init__(message, detail=remainder or None)
        self.remainder = remainder


class ShapeInvariantError(StructuralError):
    """A structural assumption failed while building the output shape."""


class UnexpectedKeyframeOutputError(StructuralError):
    """The preprocessor did not return the keyframes wrapper intact."""

    def __init__(self, output: str) -> None:
        preview = output[:60] + "..." if len(output) > 60 else output
        super().__init__(f"Unexpected keyframe compilation output: {preview!r}", detail=output)
        self.output = output


class CssPipelineError(StructuralError):
    """The CSS pipeline could not process its input."""


# ---------------------------------------------------------------------------
# Semantic-policy faults
# ---------------------------------------------------------------------------


class UnsupportedConstructError(CompileError):
    """The template uses a construct the compiler does not support."""


class UnsupportedKeyframeReferenceError(UnsupportedConstructError):
    """An expression is used as a selector or animation name inside keyframes."""

    def __init__(self, expressions: list[str]) -> None:
        shown = ", ".join(f"${{{e}}}" for e in expressions)
        super().__init__(
            "Expressions cannot be used as keyframe selectors or animation names: "
            f"{shown}; inline the value or move it into a declaration",
            detail=shown,
        )
        self.expressions = expressions


class NestedAtRuleError(UnsupportedConstructError):
    """An at-rule is nested inside another at-rule within one rule block."""
