"""Shape optimizer: turn classified rule blocks into the most compact output.

Shapes are tried in order: KEYFRAME (keyframe mode only), then
STATIC_ARRAY / SINGLE_COLLAPSED when no expressions are present and every
block starts with the class marker, and FUNCTIONAL otherwise.
"""

from __future__ import annotations

from stylefold.compiler.classifier import MarkerHit, MarkerUse, classify_marker, scan_block
from stylefold.compiler.markers import MarkerTable
from stylefold.config import CompilerConfig
from stylefold.errors import ShapeInvariantError, UnsupportedKeyframeReferenceError
from stylefold.model.output import (
    CLASS_NAME,
    CompiledOutput,
    CompiledTerm,
    Rule,
    Shape,
    Slot,
    Text,
    ValueRef,
)
from stylefold.model.segment import ExprSegment

__all__ = ["SlotTable", "build_rule_terms", "optimize"]


class SlotTable:
    """Named parameter slots, keyed by marker character."""

    def __init__(self, prefix: str = "expr") -> None:
        self.prefix = prefix
        self._by_marker: dict[str, Slot] = {}

    def get(self, marker: str) -> Slot | None:
        return self._by_marker.get(marker)

    def bind(self, marker: str, occurrence: ExprSegment) -> Slot:
        """Return the slot for *marker*, allocating the next one if needed."""
        slot = self._by_marker.get(marker)
        if slot is None:
            slot = Slot(f"{self.prefix}{len(self._by_marker)}", occurrence)
            self._by_marker[marker] = slot
        return slot

    @property
    def slots(self) -> tuple[Slot, ...]:
        # dicts keep insertion order, i.e. first-binding order
        return tuple(self._by_marker.values())

    def __len__(self) -> int:
        return len(self._by_marker)


def build_rule_terms(block: str, table: MarkerTable, slots: SlotTable) -> list[CompiledTerm]:
    """Render one rule block as text and value-reference terms."""
    terms: list[CompiledTerm] = []
    pending = ""

    for piece in scan_block(block, table):
        if not isinstance(piece, MarkerHit):
            pending += piece
            continue

        use = classify_marker(piece, table)
        if use is MarkerUse.CLASS_NAME:
            if pending:
                terms.append(Text(pending))
                pending = ""
            terms.append(ValueRef(CLASS_NAME))
            continue

        # selector references are class names without the leading dot
        if use is MarkerUse.CLASS_REFERENCE and not pending.endswith("."):
            pending += "."
        if pending:
            terms.append(Text(pending))
            pending = ""

        occurrence = table.decode(piece.char)
        if not isinstance(occurrence, ExprSegment):
            raise ShapeInvariantError(f"Marker {table.label(piece.char)} is not an expression")
        slot = slots.get(piece.char)
        if slot is None and use.needs_slot:
            slot = slots.bind(piece.char, occurrence)
        terms.append(ValueRef(slot if slot is not None else occurrence))

    if pending:
        terms.append(Text(pending))
    return terms


def optimize(
    blocks: list[str],
    table: MarkerTable,
    *,
    keyframe_body: bool = False,
    config: CompilerConfig | None = None,
) -> CompiledOutput:
    """Choose and build the output shape for the classified *blocks*."""
    config = config or CompilerConfig()
    slots = SlotTable(config.slot_prefix)
    blocks = [block for block in blocks if block]
    rules = [build_rule_terms(block, table, slots) for block in blocks]

    if keyframe_body:
        return _keyframe_shape(rules, slots)

    if not table.occurrences:
        static = _static_shape(blocks, rules, table)
        if static is not None:
            return static

    return CompiledOutput(
        shape=Shape.FUNCTIONAL,
        rules=tuple(tuple(terms) for terms in rules),
        parameters=(config.class_param,) + tuple(slot.name for slot in slots.slots),
        slots=slots.slots,
    )


def _keyframe_shape(rules: list[list[CompiledTerm]], slots: SlotTable) -> CompiledOutput:
    if len(slots):
        raise UnsupportedKeyframeReferenceError(
            [str(slot.occurrence.ref) for slot in slots.slots]
        )
    if len(rules) != 1:
        raise ShapeInvariantError(f"Expected exactly one keyframes rule, got {len(rules)}")
    for term in rules[0]:
        if isinstance(term, ValueRef) and term.handle is CLASS_NAME:
            raise ShapeInvariantError("Class name marker found in keyframes output")
    return CompiledOutput(shape=Shape.KEYFRAME, rules=(tuple(rules[0]),))


def _static_shape(
    blocks: list[str], rules: list[list[CompiledTerm]], table: MarkerTable
) -> CompiledOutput | None:
    """Build STATIC_ARRAY or SINGLE_COLLAPSED, or return None if not applicable."""
    marker = table.class_marker
    for block in blocks:
        if not block.startswith(marker) or block.rfind(marker) != 0:
            return None
    collapse = len(blocks) == 1 and blocks[0][1:2] == "{"

    static_rules: list[Rule] = []
    for terms in rules:
        if not terms or terms[0] != ValueRef(CLASS_NAME):
            raise ShapeInvariantError("Static rule does not start with the class name")
        rest = list(terms[1:])
        if not all(isinstance(t, Text) for t in rest):
            raise ShapeInvariantError("Static rule contains a value reference")
        if collapse:
            rest = _strip_braces(rest)
        static_rules.append(tuple(rest))

    if collapse:
        return CompiledOutput(shape=Shape.SINGLE_COLLAPSED, rules=(static_rules[0],))
    return CompiledOutput(shape=Shape.STATIC_ARRAY, rules=tuple(static_rules))


def _strip_braces(terms: list[CompiledTerm]) -> list[CompiledTerm]:
    """Drop the leading '{' and trailing '}' of a collapsed rule body."""
    if not terms:
        raise ShapeInvariantError("Collapsed rule is empty")
    first = terms[0]
    if not isinstance(first, Text) or not first.value.startswith("{"):
        raise ShapeInvariantError("Collapsed rule does not open with '{'")
    terms[0] = Text(first.value[1:])
    last = terms[-1]
    if not isinstance(last, Text) or not last.value.endswith("}"):
        raise ShapeInvariantError("Collapsed rule does not close with '}'")
    terms[-1] = Text(last.value[:-1])
    return [t for t in terms if not (isinstance(t, Text) and not t.value)]
