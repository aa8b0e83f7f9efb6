"""Position classifier: where inside a rule block does each marker sit?

A four-state machine walks one block character by character:

    NONE --'@'--> MEDIA_SELECTOR --'{'--> SELECTOR --'{'--> DECLARATION_BODY
    NONE --other--> SELECTOR                DECLARATION_BODY --'}'--> NONE

Spaces and '}' in NONE are the tail of a nested rule that just closed.
Media rules are assumed not to nest; an at-rule opening a statement in
SELECTOR state is rejected. A bare ``@`` inside a value (``url(a@2x.png)``)
is not an at-rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from stylefold.compiler.markers import MarkerTable
from stylefold.errors import NestedAtRuleError

__all__ = [
    "MarkerHit",
    "MarkerUse",
    "Position",
    "classify_marker",
    "positions",
    "scan_block",
    "step",
]


class Position(Enum):
    NONE = "none"
    SELECTOR = "selector"
    DECLARATION_BODY = "declaration_body"
    MEDIA_SELECTOR = "media_selector"


class MarkerUse(Enum):
    """How a marker must be materialised in the output."""

    CLASS_NAME = "class_name"
    CLASS_REFERENCE = "class_reference"
    ANIMATION_NAME = "animation_name"
    INLINE_VALUE = "inline_value"

    @property
    def needs_slot(self) -> bool:
        return self in (MarkerUse.CLASS_REFERENCE, MarkerUse.ANIMATION_NAME)


_ANIMATION_RE = re.compile(r"animation(-name)?:\s*$", re.IGNORECASE)

# characters after which a new statement (and so an at-rule) may begin
_STATEMENT_START = ("", "{", "}", ";")


def step(state: Position, char: str, prev: str = "") -> Position:
    """Return the state after reading *char* in *state*.

    Leaving NONE and the following transition both apply to the same
    character, so ``{`` read in NONE lands directly in DECLARATION_BODY.
    *prev* is the last non-space character before *char*; an ``@`` only
    opens a nested at-rule when it starts a statement.
    """
    if state is Position.NONE:
        if char == "@":
            state = Position.MEDIA_SELECTOR
        elif char not in "} ":
            state = Position.SELECTOR

    if state is Position.MEDIA_SELECTOR:
        if char == "{":
            return Position.SELECTOR
    elif state is Position.SELECTOR:
        if char == "{":
            return Position.DECLARATION_BODY
        if char == "@" and prev in _STATEMENT_START:
            raise NestedAtRuleError(
                "Nested at-rules are not supported inside a single rule block"
            )
    elif state is Position.DECLARATION_BODY:
        if char == "}":
            return Position.NONE
    return state


def positions(block: str) -> list[Position]:
    """Return the state after each character of *block*."""
    result: list[Position] = []
    state = Position.NONE
    prev = ""
    for char in block:
        state = step(state, char, prev)
        result.append(state)
        if not char.isspace():
            prev = char
    return result


@dataclass(frozen=True)
class MarkerHit:
    """A marker character found in a block.

    ``preceding`` is the text between the previous marker (or the start of
    the block) and this one.
    """

    char: str
    position: Position
    preceding: str


def scan_block(block: str, table: MarkerTable) -> list[str | MarkerHit]:
    """Split *block* into text runs and classified marker hits."""
    pieces: list[str | MarkerHit] = []
    text: list[str] = []
    state = Position.NONE
    prev = ""
    for char in block:
        state = step(state, char, prev)
        if not char.isspace():
            prev = char
        if table.is_marker(char):
            preceding = "".join(text)
            if preceding:
                pieces.append(preceding)
            text = []
            pieces.append(MarkerHit(char, state, preceding))
        else:
            text.append(char)
    if text:
        pieces.append("".join(text))
    return pieces


def classify_marker(hit: MarkerHit, table: MarkerTable) -> MarkerUse:
    if table.is_class_marker(hit.char):
        return MarkerUse.CLASS_NAME
    if hit.position is Position.SELECTOR:
        return MarkerUse.CLASS_REFERENCE
    if hit.position is Position.DECLARATION_BODY and _ANIMATION_RE.search(hit.preceding.strip()):
        return MarkerUse.ANIMATION_NAME
    return MarkerUse.INLINE_VALUE
