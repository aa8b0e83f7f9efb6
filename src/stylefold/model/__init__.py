from stylefold.model.output import (
    CLASS_NAME,
    ClassName,
    CompiledOutput,
    CompiledTerm,
    Rule,
    Shape,
    Slot,
    Text,
    ValueRef,
)
from stylefold.model.segment import ExprSegment, LiteralSegment, Segment
from stylefold.model.template import (
    SourceExpression,
    TaggedTemplate,
    TemplateNode,
    TemplateSpan,
)

__all__ = [
    "CLASS_NAME",
    "ClassName",
    "CompiledOutput",
    "CompiledTerm",
    "ExprSegment",
    "LiteralSegment",
    "Rule",
    "Segment",
    "Shape",
    "Slot",
    "SourceExpression",
    "TaggedTemplate",
    "TemplateNode",
    "TemplateSpan",
    "Text",
    "ValueRef",
]
