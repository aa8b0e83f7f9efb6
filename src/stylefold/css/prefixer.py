"""Vendor prefixer: add prefixed copies of properties that still need them.

Works on the minified output of :func:`flatten_nesting` and re-emits it in
the same form, so unprefixed input passes through unchanged.
"""

from __future__ import annotations

from typing import Any

import tinycss2

from stylefold.css.serialize import bare_statement, block_statements, compact, declaration_text
from stylefold.errors import CssPipelineError

__all__ = ["PREFIXED_PROPERTIES", "add_vendor_prefixes"]

PREFIXED_PROPERTIES: dict[str, tuple[str, ...]] = {
    "appearance": ("-webkit-", "-moz-"),
    "backdrop-filter": ("-webkit-",),
    "background-clip": ("-webkit-",),
    "box-decoration-break": ("-webkit-",),
    "hyphens": ("-webkit-", "-ms-"),
    "mask": ("-webkit-",),
    "mask-image": ("-webkit-",),
    "tab-size": ("-moz-",),
    "text-size-adjust": ("-webkit-", "-moz-", "-ms-"),
    "user-select": ("-webkit-", "-moz-", "-ms-"),
}

_RULE_LIST_AT_RULES = {"media", "supports", "container", "document", "layer"}


def add_vendor_prefixes(css: str) -> str:
    """Return *css* with vendor-prefixed declarations inserted."""
    rules = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    return "".join(_emit_rule(rule) for rule in rules)


def _emit_rule(rule: Any) -> str:
    if rule.type == "error":
        raise CssPipelineError(f"Invalid CSS: {rule.message}")
    if rule.type == "qualified-rule":
        return f"{compact(rule.prelude)}{{{_emit_declarations(rule.content)}}}"
    if rule.type != "at-rule":
        raise CssPipelineError(f"Unexpected {rule.type} in processed CSS")

    head = f"@{rule.at_keyword}"
    prelude = compact(rule.prelude)
    if prelude:
        head += f" {prelude}"
    if rule.content is None:
        return f"{head};"
    if rule.lower_at_keyword in _RULE_LIST_AT_RULES or rule.lower_at_keyword.endswith("keyframes"):
        inner = tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True)
        return f"{head}{{{''.join(_emit_rule(r) for r in inner)}}}"
    return f"{head}{{{_emit_declarations(rule.content)}}}"


def _emit_declarations(content: list[Any]) -> str:
    parts: list[str] = []
    for statement in block_statements(content):
        bare = bare_statement(statement)
        if bare is not None:
            parts.append(bare)
            continue
        for decl in tinycss2.parse_blocks_contents(
            statement, skip_comments=True, skip_whitespace=True
        ):
            if decl.type != "declaration":
                raise CssPipelineError(f"Unexpected {decl.type} inside a flattened rule")
            for vendor in PREFIXED_PROPERTIES.get(decl.lower_name, ()):
                parts.append(declaration_text(vendor + decl.name, decl.value, decl.important))
            parts.append(declaration_text(decl.name, decl.value, decl.important))
    return "".join(parts)
