"""Tests for the CSS pipeline adapter."""

import pytest

from stylefold.compiler.pipeline import compile_css, keyframes_wrapper
from stylefold.errors import UnexpectedKeyframeOutputError


class TestCompileCss:
    def test_preprocess_then_prefix(self, wrap_pipeline):
        out = compile_css(wrap_pipeline, "color: red;", "æ")
        assert out == "æ{color: red;}"
        assert wrap_pipeline.calls == [
            ("preprocess", "æ", "color: red;"),
            ("prefix", "æ{color: red;}"),
        ]

    def test_keyframe_body_is_wrapped_and_unwrapped(self, wrap_pipeline):
        out = compile_css(wrap_pipeline, "0%{opacity:0;}", "æ", keyframe_body=True)
        assert out == "0%{opacity:0;}"
        assert wrap_pipeline.calls[0] == ("preprocess", "æ", "@keyframes x{0%{opacity:0;}}")
        assert wrap_pipeline.calls[1] == ("prefix", "0%{opacity:0;}")

    def test_custom_keyframes_name(self, wrap_pipeline):
        compile_css(wrap_pipeline, "to{top:0;}", "æ", keyframe_body=True, keyframes_name="anim")
        assert wrap_pipeline.calls[0][2] == "@keyframes anim{to{top:0;}}"

    def test_keyframe_wrapper_must_survive(self, fixed_pipeline):
        pipeline = fixed_pipeline("æ{0%{opacity:0;}}")
        with pytest.raises(UnexpectedKeyframeOutputError) as exc_info:
            compile_css(pipeline, "0%{opacity:0;}", "æ", keyframe_body=True)
        assert exc_info.value.output == "æ{0%{opacity:0;}}"

    def test_wrapper_text(self):
        assert keyframes_wrapper() == "@keyframes x{"
