"""Template model: the native tree form of a tagged template."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceExpression:
    """An embedded expression, kept as its source text.

    The compiler never looks inside it; it only carries it from the
    template to the rewritten call.
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("SourceExpression text must be non-empty")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TemplateSpan:
    """An embedded expression followed by the literal text after it."""

    expression: object
    literal: str = ""


@dataclass(frozen=True)
class TemplateNode:
    """A head literal followed by zero or more expression spans.

    ``TemplateNode("color: red;")`` is a template without substitutions;
    ``TemplateNode("color: ", (TemplateSpan(expr, ";"),))`` has one.
    """

    head: str = ""
    spans: tuple[TemplateSpan, ...] = ()


@dataclass(frozen=True)
class TaggedTemplate:
    """A template together with the tag expression it was invoked with."""

    tag: str | None
    template: TemplateNode
