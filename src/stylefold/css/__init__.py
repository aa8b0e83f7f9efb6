"""Default CSS pipeline: nesting flattener plus vendor prefixer."""

from __future__ import annotations

from stylefold.css.nesting import flatten_nesting
from stylefold.css.prefixer import PREFIXED_PROPERTIES, add_vendor_prefixes

__all__ = ["NestingPipeline", "PREFIXED_PROPERTIES", "add_vendor_prefixes", "flatten_nesting"]


class NestingPipeline:
    """The CSS pipeline used when a caller does not supply one."""

    def __init__(self, vendor_prefixes: bool = True) -> None:
        self.vendor_prefixes = vendor_prefixes

    def preprocess(self, context: str, css: str) -> str:
        return flatten_nesting(context, css)

    def prefix(self, css: str) -> str:
        if not self.vendor_prefixes:
            return css
        return add_vendor_prefixes(css)
