"""Rule splitter: cut processed CSS into top-level rule blocks."""

from __future__ import annotations

from stylefold.errors import UnbalancedRulesError

__all__ = ["split_rules"]


def split_rules(css: str, keyframe_body: bool = False) -> list[str]:
    """Split *css* wherever the brace depth returns to zero.

    A keyframe body is always a single block. Otherwise the blocks
    concatenate back to *css* exactly; trailing text outside any block, or a
    stray closing brace, raises :class:`UnbalancedRulesError`.
    """
    if keyframe_body:
        return [css]

    blocks: list[str] = []
    start = 0
    depth = 0
    for i, char in enumerate(css):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                raise UnbalancedRulesError(
                    f"Unmatched '}}' at offset {i}", remainder=css[start:]
                )
            if depth == 0:
                blocks.append(css[start:i + 1])
                start = i + 1

    if start != len(css):
        raise UnbalancedRulesError(
            f"Failed to parse css rules: {len(css) - start} character(s) outside a rule block",
            remainder=css[start:],
        )
    return blocks
