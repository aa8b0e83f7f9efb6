"""Compiled output model: terms, slots, and the four output shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stylefold.model.segment import ExprSegment


class Shape(Enum):
    """The output representations, from most to least specialised."""

    KEYFRAME = "keyframe"
    STATIC_ARRAY = "static_array"
    SINGLE_COLLAPSED = "single_collapsed"
    FUNCTIONAL = "functional"


class ClassName:
    """Placeholder for the generated class name, supplied by the caller."""

    _instance: ClassName | None = None

    def __new__(cls) -> ClassName:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CLASS_NAME"


CLASS_NAME = ClassName()


@dataclass(frozen=True)
class Slot:
    """A named function parameter bound to one expression occurrence."""

    name: str
    occurrence: ExprSegment


@dataclass(frozen=True)
class Text:
    """A literal piece of rule text."""

    value: str


@dataclass(frozen=True)
class ValueRef:
    """A value substituted at runtime.

    ``handle`` is :data:`CLASS_NAME`, a :class:`Slot` (named parameter), or an
    :class:`ExprSegment` inlined at its position.
    """

    handle: ClassName | Slot | ExprSegment


CompiledTerm = Text | ValueRef
Rule = tuple[CompiledTerm, ...]


@dataclass(frozen=True)
class CompiledOutput:
    """The result of compiling one template.

    Attributes:
        shape: Which representation was chosen.
        rules: One term sequence per rule. KEYFRAME and SINGLE_COLLAPSED
            always carry exactly one.
        parameters: Formal parameters of the FUNCTIONAL shape (class-name
            parameter first); empty for the other shapes.
        slots: Named slots in first-binding order.
    """

    shape: Shape
    rules: tuple[Rule, ...]
    parameters: tuple[str, ...] = ()
    slots: tuple[Slot, ...] = ()

    def __post_init__(self) -> None:
        if self.shape in (Shape.KEYFRAME, Shape.SINGLE_COLLAPSED) and len(self.rules) != 1:
            raise ValueError(f"{self.shape.value} output must have exactly one rule")
        if self.shape is not Shape.FUNCTIONAL and (self.parameters or self.slots):
            raise ValueError(f"{self.shape.value} output takes no parameters")

    @property
    def is_function(self) -> bool:
        return self.shape is Shape.FUNCTIONAL

    @property
    def arguments(self) -> list[object]:
        """Expression values to pass after the template, in parameter order."""
        return [slot.occurrence.ref for slot in self.slots]

    @property
    def single_rule(self) -> Rule:
        """Return the only rule of a KEYFRAME or SINGLE_COLLAPSED output."""
        if len(self.rules) != 1:
            raise ValueError(f"{self.shape.value} output has {len(self.rules)} rules")
        return self.rules[0]
