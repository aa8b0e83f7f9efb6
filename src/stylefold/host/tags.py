"""Tag recognition: which tagged templates are styling calls?

Recognized tags:

    styled.tag
    Component.extend
    styled(Component)
    <styled tag>.attrs(attributes)
    keyframes
"""

from __future__ import annotations

import re
from enum import Enum

__all__ = ["TagKind", "classify_tag", "is_styled_tag"]

_NAME = r"[A-Za-z_$][\w$]*"
_STYLED_MEMBER_RE = re.compile(rf"^styled\s*\.\s*{_NAME}$")
_EXTEND_RE = re.compile(rf"^(?P<component>{_NAME})\s*\.\s*extend$")
_STYLED_CALL_RE = re.compile(r"^styled\s*\((?P<arg>[\s\S]*)\)$")
_ATTRS_RE = re.compile(r"^(?P<inner>[\s\S]+?)\s*\.\s*attrs\s*\((?P<args>[\s\S]*)\)$")


class TagKind(Enum):
    STYLED = "styled"
    KEYFRAMES = "keyframes"


def classify_tag(tag: str | None) -> TagKind | None:
    """Return the kind of styling call *tag* is, or None if it is not one."""
    if tag is None:
        return None
    tag = tag.strip()
    if tag == "keyframes":
        return TagKind.KEYFRAMES
    if is_styled_tag(tag):
        return TagKind.STYLED
    return None


def is_styled_tag(tag: str) -> bool:
    tag = tag.strip()
    if _STYLED_MEMBER_RE.match(tag):
        return True

    match = _EXTEND_RE.match(tag)
    if match:
        component = match.group("component")
        return component[0] == component[0].upper()

    match = _STYLED_CALL_RE.match(tag)
    if match and _is_single_argument(match.group("arg")):
        return True

    match = _ATTRS_RE.match(tag)
    if match:
        return _is_single_argument(match.group("args")) and is_styled_tag(match.group("inner"))

    return False


def _is_single_argument(text: str) -> bool:
    """True if *text* is exactly one call argument (no top-level comma)."""
    if not text.strip():
        return False
    depth = 0
    quote = ""
    escaped = False
    for char in text:
        if quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = ""
        elif char in "\"'`":
            quote = char
        elif char in "([{":
            depth += 1
        elif char in ")]}":
            depth -= 1
            if depth < 0:
                return False
        elif char == "," and depth == 0:
            return False
    return depth == 0 and not quote
