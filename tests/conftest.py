"""Shared fixtures: stub CSS pipelines for compiler tests."""

from __future__ import annotations

import pytest

from stylefold.css import NestingPipeline


class WrapPipeline:
    """Stub pipeline: wraps the text in the context selector, nothing else.

    Keyframes input comes back untouched, as a real preprocessor would
    return an unscoped ``@keyframes`` rule.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def preprocess(self, context: str, css: str) -> str:
        self.calls.append(("preprocess", context, css))
        if css.startswith("@keyframes"):
            return css
        return f"{context}{{{css}}}"

    def prefix(self, css: str) -> str:
        self.calls.append(("prefix", css))
        return css


class FixedPipeline:
    """Stub pipeline that always produces the same preprocessed text."""

    def __init__(self, output: str) -> None:
        self.output = output

    def preprocess(self, context: str, css: str) -> str:
        return self.output

    def prefix(self, css: str) -> str:
        return css


@pytest.fixture()
def wrap_pipeline() -> WrapPipeline:
    return WrapPipeline()


@pytest.fixture()
def fixed_pipeline():
    return FixedPipeline


@pytest.fixture()
def nesting_pipeline() -> NestingPipeline:
    return NestingPipeline(vendor_prefixes=False)
