"""Nesting preprocessor: flatten nested rules into minified plain CSS.

Behaves like stylis run with a selector context: the input is treated as the
body of ``context { ... }``, ``&`` is replaced by the parent selector, nested
selectors without ``&`` become descendants, selector lists multiply out,
conditional at-rules bubble up around the rules they contain, and
``@keyframes`` blocks pass through unscoped.

    >>> flatten_nesting(".a", "color: red; &:hover { color: blue; }")
    '.a{color:red;}.a:hover{color:blue;}'
"""

from __future__ import annotations

from typing import Any, Iterator

import tinycss2

from stylefold.css.serialize import (
    bare_statement,
    block_statements,
    compact,
    declaration_text,
    has_ampersand,
    split_selector_list,
)
from stylefold.errors import CssPipelineError

__all__ = ["flatten_nesting"]

# At-rules whose body holds rules and which bubble around nested selectors.
_CONDITIONAL_AT_RULES = {"media", "supports", "container", "document", "layer"}


def flatten_nesting(context: str, css: str) -> str:
    """Flatten *css* nested under the selector *context*."""
    source = f"{context}{{{css}}}"
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    for node in nodes:
        if node.type == "error":
            raise CssPipelineError(f"Invalid CSS: {node.message}")
    if len(nodes) != 1 or nodes[0].type != "qualified-rule":
        raise CssPipelineError("Unbalanced braces in template CSS", detail=css)

    out: list[str] = []
    _flatten_block([context], nodes[0].content, out)
    return "".join(out)


def resolve_selectors(parents: list[str], prelude: list[Any]) -> list[str]:
    """Combine parent selectors with a nested selector list."""
    resolved: list[str] = []
    for parent in parents:
        for part in split_selector_list(prelude):
            if has_ampersand(part):
                resolved.append(compact(part, ampersand=parent))
            elif parent:
                resolved.append(f"{parent} {compact(part)}")
            else:
                resolved.append(compact(part))
    return resolved


def _flatten_block(selectors: list[str], content: list[Any], out: list[str]) -> None:
    """Emit the rule for *selectors* followed by everything nested in it."""
    declarations: list[str] = []
    nested: list[str] = []

    for item in _block_items(content, declarations):
        if item.type == "declaration":
            declarations.append(declaration_text(item.name, item.value, item.important))
        elif item.type == "qualified-rule":
            _flatten_block(resolve_selectors(selectors, item.prelude), item.content, nested)
        elif item.type == "at-rule":
            nested.append(_flatten_at_rule(selectors, item))
        elif item.type == "error":
            raise CssPipelineError(f"Invalid CSS: {item.message}")

    if declarations:
        out.append(f"{','.join(selectors)}{{{''.join(declarations)}}}")
    out.extend(nested)


def _block_items(content: list[Any], declarations: list[str]) -> Iterator[Any]:
    """Parse *content* statement by statement.

    Bare identifier statements go straight to *declarations*; everything
    else is parsed by tinycss2.
    """
    for statement in block_statements(content):
        bare = bare_statement(statement)
        if bare is not None:
            declarations.append(bare)
            continue
        yield from tinycss2.parse_blocks_contents(
            statement, skip_comments=True, skip_whitespace=True
        )


def _flatten_at_rule(selectors: list[str], rule: Any) -> str:
    keyword = rule.lower_at_keyword
    head = f"@{rule.at_keyword}"
    prelude = compact(rule.prelude)
    if prelude:
        head += f" {prelude}"

    if rule.content is None:
        raise CssPipelineError(f"Statement at-rule {head!r} is not allowed inside a template")

    if keyword in _CONDITIONAL_AT_RULES:
        inner: list[str] = []
        _flatten_block(selectors, rule.content, inner)
        return f"{head}{{{''.join(inner)}}}"

    if keyword.endswith("keyframes"):
        frames: list[str] = []
        for frame in tinycss2.parse_blocks_contents(
            rule.content, skip_comments=True, skip_whitespace=True
        ):
            if frame.type != "qualified-rule":
                raise CssPipelineError(f"Unexpected {frame.type} inside {head}")
            _flatten_block([compact(frame.prelude)], frame.content, frames)
        return f"{head}{{{''.join(frames)}}}"

    # @font-face, @page and friends: declarations only, never scoped
    body: list[str] = []
    _flatten_block([head], rule.content, body)
    return "".join(body) or f"{head}{{}}"
