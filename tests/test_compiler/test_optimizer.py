"""Tests for shape selection and slot binding."""

import pytest

from stylefold.compiler.markers import encode_segments
from stylefold.compiler.optimizer import SlotTable, build_rule_terms, optimize
from stylefold.config import CompilerConfig
from stylefold.errors import ShapeInvariantError, UnsupportedKeyframeReferenceError
from stylefold.model import (
    CLASS_NAME,
    ExprSegment,
    LiteralSegment,
    Shape,
    Slot,
    SourceExpression,
    Text,
    ValueRef,
)

CLS = ValueRef(CLASS_NAME)


def _table(count: int = 0):
    segments = [LiteralSegment("")]
    for i in range(count):
        segments += [ExprSegment(SourceExpression(f"v{i}")), LiteralSegment("")]
    return encode_segments(segments).table


def _occ(i: int) -> ExprSegment:
    return ExprSegment(SourceExpression(f"v{i}"))


# ---------------------------------------------------------------------------
# Static shapes
# ---------------------------------------------------------------------------


class TestStaticShapes:
    def test_single_collapsed(self):
        table = _table()
        c = table.class_marker
        output = optimize([f"{c}{{color:red;}}"], table)
        assert output.shape is Shape.SINGLE_COLLAPSED
        assert output.rules == ((Text("color:red;"),),)
        assert output.parameters == ()

    def test_static_array(self):
        table = _table()
        c = table.class_marker
        output = optimize([f"{c}{{color:red;}}", f"{c}:hover{{color:blue;}}"], table)
        assert output.shape is Shape.STATIC_ARRAY
        assert output.rules == (
            (Text("{color:red;}"),),
            (Text(":hover{color:blue;}"),),
        )

    def test_single_block_with_selector_suffix_does_not_collapse(self):
        table = _table()
        c = table.class_marker
        output = optimize([f"{c} a{{color:red;}}"], table)
        assert output.shape is Shape.STATIC_ARRAY
        assert output.rules == ((Text(" a{color:red;}"),),)

    @pytest.mark.parametrize(
        "suffixes",
        [["{a:b;}"], [" p{a:b;}"], ["{a:b;}", "::after{content:'';}"], [">li{a:b;}", "+p{c:d;}"]],
    )
    def test_static_detection(self, suffixes):
        table = _table()
        blocks = [table.class_marker + s for s in suffixes]
        output = optimize(blocks, table)
        assert output.shape in (Shape.STATIC_ARRAY, Shape.SINGLE_COLLAPSED)
        assert not output.is_function

    def test_class_name_twice_is_functional(self):
        table = _table()
        c = table.class_marker
        output = optimize([f"{c}+{c}{{margin:0;}}"], table)
        assert output.shape is Shape.FUNCTIONAL
        assert output.parameters == ("cls",)
        assert output.rules == ((CLS, Text("+"), CLS, Text("{margin:0;}")),)

    def test_media_block_is_functional(self):
        table = _table()
        c = table.class_marker
        output = optimize([f"@media (x){{{c}{{color:red;}}}}"], table)
        assert output.shape is Shape.FUNCTIONAL
        assert output.rules == ((Text("@media (x){"), CLS, Text("{color:red;}}")),)

    def test_empty_blocks_are_dropped(self):
        table = _table()
        c = table.class_marker
        output = optimize(["", f"{c}{{a:b;}}"], table)
        assert output.shape is Shape.SINGLE_COLLAPSED
        assert output.rules == ((Text("a:b;"),),)


# ---------------------------------------------------------------------------
# Functional shape
# ---------------------------------------------------------------------------


class TestFunctionalShape:
    def test_inline_value(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c}{{color:{e0};}}"], table)
        assert output.shape is Shape.FUNCTIONAL
        assert output.parameters == ("cls",)
        assert output.slots == ()
        assert output.arguments == []
        assert output.rules == ((CLS, Text("{color:"), ValueRef(_occ(0)), Text(";}")),)

    def test_class_reference_after_dot(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c}.{e0}{{color:red;}}"], table)
        slot = Slot("expr0", _occ(0))
        assert output.parameters == ("cls", "expr0")
        assert output.rules == ((CLS, Text("."), ValueRef(slot), Text("{color:red;}")),)
        assert output.arguments == [SourceExpression("v0")]

    def test_class_reference_gets_dot(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c} {e0}{{color:red;}}"], table)
        assert output.rules[0][1] == Text(" .")

    def test_class_reference_at_block_start(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{e0} {c}{{color:red;}}"], table)
        assert output.rules == (
            (Text("."), ValueRef(Slot("expr0", _occ(0))), Text(" "), CLS, Text("{color:red;}")),
        )

    def test_animation_name_gets_slot(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c}{{animation:{e0} 1s;}}"], table)
        assert output.parameters == ("cls", "expr0")
        assert output.rules[0][2] == ValueRef(Slot("expr0", _occ(0)))

    def test_slot_reused_across_rules(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c} {e0}{{color:red;}}", f"{c}:hover {e0}{{color:blue;}}"], table)
        slot = Slot("expr0", _occ(0))
        assert len(output.slots) == 1
        assert ValueRef(slot) in output.rules[0]
        assert ValueRef(slot) in output.rules[1]

    def test_inline_use_after_binding_refers_to_slot(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c} {e0}{{a:b;}}", f"{c}{{content:{e0};}}"], table)
        assert output.rules[1][2] == ValueRef(Slot("expr0", _occ(0)))

    def test_inline_use_before_binding_is_inlined(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        output = optimize([f"{c}{{content:{e0};}}", f"{c} {e0}{{a:b;}}"], table)
        assert output.rules[0][2] == ValueRef(_occ(0))
        assert output.parameters == ("cls", "expr0")

    def test_slots_in_first_binding_order(self):
        table = _table(2)
        c, e0, e1 = table.class_marker, table.marker_for(0), table.marker_for(1)
        output = optimize([f"{c} {e1} {e0}{{x:1;}}"], table)
        assert output.parameters == ("cls", "expr0", "expr1")
        assert output.slots[0].occurrence == _occ(1)
        assert output.arguments == [SourceExpression("v1"), SourceExpression("v0")]

    def test_configured_names(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        config = CompilerConfig(class_param="className", slot_prefix="arg")
        output = optimize([f"{c}.{e0}{{a:b;}}"], table, config=config)
        assert output.parameters == ("className", "arg0")


# ---------------------------------------------------------------------------
# Keyframe shape
# ---------------------------------------------------------------------------


class TestKeyframeShape:
    def test_plain_body(self):
        body = "0%{opacity:0;}100%{opacity:1;}"
        output = optimize([body], _table(), keyframe_body=True)
        assert output.shape is Shape.KEYFRAME
        assert output.rules == ((Text(body),),)

    def test_inline_value(self):
        table = _table(1)
        e0 = table.marker_for(0)
        output = optimize([f"0%{{opacity:{e0};}}"], table, keyframe_body=True)
        assert output.shape is Shape.KEYFRAME
        assert output.rules == ((Text("0%{opacity:"), ValueRef(_occ(0)), Text(";}")),)

    def test_expression_as_selector(self):
        table = _table(1)
        e0 = table.marker_for(0)
        with pytest.raises(UnsupportedKeyframeReferenceError) as exc_info:
            optimize([f"{e0}{{opacity:0;}}"], table, keyframe_body=True)
        assert exc_info.value.expressions == ["v0"]
        assert "${v0}" in str(exc_info.value)

    def test_expression_as_animation_name(self):
        table = _table(1)
        e0 = table.marker_for(0)
        with pytest.raises(UnsupportedKeyframeReferenceError):
            optimize([f"to{{animation-name:{e0};}}"], table, keyframe_body=True)

    def test_empty_body(self):
        with pytest.raises(ShapeInvariantError):
            optimize([""], _table(), keyframe_body=True)

    def test_class_name_in_keyframes(self):
        table = _table()
        with pytest.raises(ShapeInvariantError):
            optimize([f"{table.class_marker}{{a:b;}}"], table, keyframe_body=True)


class TestSlotTable:
    def test_bind_is_idempotent(self):
        slots = SlotTable()
        first = slots.bind("x", _occ(0))
        assert slots.bind("x", _occ(0)) is first
        assert len(slots) == 1

    def test_build_rule_terms_shares_slots(self):
        table = _table(1)
        c, e0 = table.class_marker, table.marker_for(0)
        slots = SlotTable()
        build_rule_terms(f"{c} {e0}{{a:b;}}", table, slots)
        terms = build_rule_terms(f"{c}{{a:{e0};}}", table, slots)
        assert terms[2] == ValueRef(slots.slots[0])
