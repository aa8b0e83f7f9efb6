from __future__ import annotations

import re
from dataclasses import dataclass

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")

# Markers must stay clear of ASCII CSS syntax and of the surrogate block.
_MIN_MARKER_BASE = 0x80
_MAX_MARKER_BASE = 0xD000


@dataclass(frozen=True)
class CompilerConfig:
    marker_base: int = 230
    class_param: str = "cls"
    slot_prefix: str = "expr"
    keyframes_name: str = "x"
    vendor_prefixes: bool = True

    def __post_init__(self) -> None:
        if not _MIN_MARKER_BASE <= self.marker_base < _MAX_MARKER_BASE:
            raise ValueError(
                f"marker_base must be in [{_MIN_MARKER_BASE}, {_MAX_MARKER_BASE}), "
                f"got {self.marker_base}"
            )
        for name in ("class_param", "slot_prefix", "keyframes_name"):
            value = getattr(self, name)
            if not _IDENTIFIER_RE.match(value):
                raise ValueError(f"{name} must be an identifier, got {value!r}")
        if re.fullmatch(re.escape(self.slot_prefix) + r"\d+", self.class_param):
            raise ValueError(
                f"class_param {self.class_param!r} collides with slot names {self.slot_prefix}N"
            )
