"""Render compiled output as JavaScript source text."""

from __future__ import annotations

import json
import re

from stylefold.config import CompilerConfig
from stylefold.host.rewrite import RewrittenCall
from stylefold.model.output import (
    CLASS_NAME,
    CompiledOutput,
    CompiledTerm,
    Rule,
    Shape,
    Slot,
    Text,
)
from stylefold.model.segment import ExprSegment

__all__ = ["render_call", "render_output", "render_rule", "render_term"]

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*$")


def render_term(term: CompiledTerm, config: CompilerConfig | None = None) -> str:
    config = config or CompilerConfig()
    if isinstance(term, Text):
        return json.dumps(term.value, ensure_ascii=False)
    handle = term.handle
    if handle is CLASS_NAME:
        return config.class_param
    if isinstance(handle, Slot):
        return handle.name
    if isinstance(handle, ExprSegment):
        return _expression(handle.ref)
    raise TypeError(f"Cannot render value handle {handle!r}")


def render_rule(rule: Rule, config: CompilerConfig | None = None) -> str:
    """Join a rule's terms with ``+``; an empty rule renders as ``""``."""
    if not rule:
        return '""'
    return " + ".join(render_term(t, config) for t in rule)


def render_output(output: CompiledOutput, config: CompilerConfig | None = None) -> str:
    """Render the template argument of the rewritten call."""
    if output.shape in (Shape.KEYFRAME, Shape.SINGLE_COLLAPSED):
        return render_rule(output.single_rule, config)
    array = "[" + ", ".join(render_rule(r, config) for r in output.rules) + "]"
    if not output.is_function:
        return array
    return f"({', '.join(output.parameters)}) => {array}"


def render_call(call: RewrittenCall, config: CompilerConfig | None = None) -> str:
    """Render ``tag(template, arg0, ...)``."""
    args = [render_output(call.output, config)]
    args.extend(_expression(a) for a in call.arguments)
    return f"{call.tag}({', '.join(args)})"


def _expression(ref: object) -> str:
    text = str(ref).strip()
    if _IDENTIFIER_RE.match(text):
        return text
    return f"({text})"
