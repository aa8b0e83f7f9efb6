"""Minified serialization helpers for tinycss2 component values."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from tinycss2.serializer import serialize_identifier

from stylefold.errors import CssPipelineError

__all__ = [
    "bare_statement",
    "block_statements",
    "compact",
    "declaration_text",
    "has_ampersand",
    "split_selector_list",
]


def compact(nodes: Iterable[Any], ampersand: str | None = None) -> str:
    """Serialize *nodes* with comments dropped and whitespace collapsed.

    When *ampersand* is given, every ``&`` token is replaced by it.
    """
    parts: list[str] = []
    for node in nodes:
        kind = node.type
        if kind == "comment":
            continue
        if kind == "whitespace":
            if parts and parts[-1] != " ":
                parts.append(" ")
            continue
        if kind == "literal" and node.value == "&" and ampersand is not None:
            parts.append(ampersand)
        elif kind == "function":
            name = serialize_identifier(node.name)
            parts.append(f"{name}({compact(node.arguments, ampersand)})")
        elif kind == "() block":
            parts.append(f"({compact(node.content, ampersand)})")
        elif kind == "[] block":
            parts.append(f"[{compact(node.content, ampersand)}]")
        elif kind == "error":
            raise CssPipelineError(f"Invalid CSS: {node.message}")
        else:
            parts.append(node.serialize())
    return "".join(parts).strip()


def has_ampersand(nodes: Iterable[Any]) -> bool:
    """True if a nesting selector ``&`` appears anywhere in *nodes*."""
    for node in nodes:
        kind = node.type
        if kind == "literal" and node.value == "&":
            return True
        if kind == "function" and has_ampersand(node.arguments):
            return True
        if kind in ("() block", "[] block") and has_ampersand(node.content):
            return True
    return False


def split_selector_list(prelude: list[Any]) -> list[list[Any]]:
    """Split a selector prelude at its top-level commas."""
    groups: list[list[Any]] = [[]]
    for node in prelude:
        if node.type == "literal" and node.value == ",":
            groups.append([])
        else:
            groups[-1].append(node)
    return [g for g in groups if compact(g)]


def declaration_text(name: str, value: list[Any], important: bool = False) -> str:
    """Render one declaration as ``name:value;``."""
    text = f"{name}:{compact(value)}"
    if important:
        text += "!important"
    return text + ";"


def block_statements(content: Iterable[Any]) -> Iterator[list[Any]]:
    """Split block contents after every top-level ``;`` and ``{}`` block."""
    statement: list[Any] = []
    for node in content:
        statement.append(node)
        if node.type == "{} block" or (node.type == "literal" and node.value == ";"):
            yield statement
            statement = []
    if statement:
        yield statement


def bare_statement(statement: list[Any]) -> str | None:
    """Render a lone identifier statement (``mixin;``) as ``mixin;``.

    Interpolated mixins reach the pipeline as a single identifier in
    statement position; they pass through like declarations. Returns None
    for anything else.
    """
    significant = [n for n in statement if n.type not in ("whitespace", "comment")]
    if significant and significant[-1].type == "literal" and significant[-1].value == ";":
        significant.pop()
    if len(significant) == 1 and significant[0].type == "ident":
        return significant[0].serialize() + ";"
    return None
