"""Lark Transformer that converts tagged template source into a TaggedTemplate."""

from __future__ import annotations

import re
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput, VisitError

from stylefold.model.template import SourceExpression, TaggedTemplate, TemplateNode, TemplateSpan
from stylefold.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# statement terminator after the closing backtick
_TRAILER = " \t\r\n;"

_ESCAPE_RE = re.compile(r"\\([\s\S])")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def cook(raw: str) -> str:
    """Apply template-literal escapes to a raw chunk of literal text."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), raw)


class TemplateTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into template model objects."""

    def __init__(self, source: str) -> None:
        super().__init__()
        self._source = source

    def literal(self, items: list[Token]) -> str:
        return cook(str(items[0]))

    @v_args(meta=True)
    def expression(self, meta: object, items: list[object]) -> str:
        text = self._source[meta.start_pos:meta.end_pos].strip()  # type: ignore[attr-defined]
        if not text:
            raise ParseError(
                "Empty substitution",
                line=getattr(meta, "line", None),
                column=getattr(meta, "column", None),
            )
        return text

    def substitution(self, items: list[object]) -> SourceExpression:
        return SourceExpression(str(items[1]))

    def braced(self, items: list[object]) -> None:
        return None

    def template(self, items: list[object]) -> TemplateNode:
        head = ""
        spans: list[tuple[SourceExpression, str]] = []
        for item in items:
            if isinstance(item, Token):
                continue
            if isinstance(item, SourceExpression):
                spans.append((item, ""))
            elif spans:
                expr, text = spans[-1]
                spans[-1] = (expr, text + str(item))
            else:
                head += str(item)
        return TemplateNode(head, tuple(TemplateSpan(e, text) for e, text in spans))

    def start(self, items: list[object]) -> TaggedTemplate:
        tag: str | None = None
        template: TemplateNode | None = None
        for item in items:
            if isinstance(item, TemplateNode):
                template = item
            elif isinstance(item, Token) and item.type == "TAG":
                tag = str(item).strip() or None
        if template is None:
            raise ParseError("No template literal found")  # pragma: no cover
        return TaggedTemplate(tag=tag, template=template)


def parse_template(source: str) -> TaggedTemplate:
    """Parse ``tag`...``` source text into a TaggedTemplate.

    Whitespace and semicolons after the closing backtick are ignored.
    """
    source = source.rstrip(_TRAILER)
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column) from e
    try:
        return TemplateTransformer(source).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from e
        raise
