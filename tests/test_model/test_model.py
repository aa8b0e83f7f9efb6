"""Tests for the template, segment and output models."""

import dataclasses

import pytest

from stylefold.model import (
    CLASS_NAME,
    ClassName,
    CompiledOutput,
    ExprSegment,
    LiteralSegment,
    Shape,
    Slot,
    SourceExpression,
    TemplateNode,
    TemplateSpan,
    Text,
    ValueRef,
)
from stylefold.model.segment import expr_segments


class TestTemplateModel:
    def test_source_expression_must_not_be_blank(self):
        with pytest.raises(ValueError):
            SourceExpression("  ")

    def test_source_expression_str(self):
        assert str(SourceExpression("a.b")) == "a.b"

    def test_span_defaults(self):
        a = SourceExpression("a")
        node = TemplateNode("x", (TemplateSpan(a),))
        assert node.spans[0].literal == ""
        assert TemplateNode().head == ""

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            TemplateNode("x").head = "y"  # type: ignore[misc]


class TestSegments:
    def test_expr_segments_in_order(self):
        e = ExprSegment(SourceExpression("e"))
        segments = [LiteralSegment("a"), e, LiteralSegment("b")]
        assert expr_segments(segments) == [e]


class TestCompiledOutput:
    def test_class_name_is_singleton(self):
        assert ClassName() is CLASS_NAME
        assert repr(CLASS_NAME) == "CLASS_NAME"

    def test_single_rule_shapes_need_one_rule(self):
        with pytest.raises(ValueError):
            CompiledOutput(Shape.KEYFRAME, ((Text("a"),), (Text("b"),)))
        with pytest.raises(ValueError):
            CompiledOutput(Shape.SINGLE_COLLAPSED, ())

    def test_only_functional_takes_parameters(self):
        with pytest.raises(ValueError):
            CompiledOutput(Shape.STATIC_ARRAY, ((Text("a"),),), parameters=("cls",))

    def test_arguments_in_slot_order(self):
        a = ExprSegment(SourceExpression("a"))
        b = ExprSegment(SourceExpression("b"))
        slots = (Slot("expr0", b), Slot("expr1", a))
        output = CompiledOutput(
            Shape.FUNCTIONAL,
            ((ValueRef(CLASS_NAME), ValueRef(slots[0]), ValueRef(slots[1])),),
            parameters=("cls", "expr0", "expr1"),
            slots=slots,
        )
        assert output.is_function
        assert output.arguments == [SourceExpression("b"), SourceExpression("a")]

    def test_single_rule(self):
        output = CompiledOutput(Shape.KEYFRAME, ((Text("a"),),))
        assert output.single_rule == (Text("a"),)
        with pytest.raises(ValueError):
            CompiledOutput(Shape.STATIC_ARRAY, ((Text("a"),), (Text("b"),))).single_rule
