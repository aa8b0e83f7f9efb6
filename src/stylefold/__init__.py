"""Stylefold: compile tagged CSS templates into compact rule builders."""

__version__ = "0.1.0"

from stylefold.compiler import Compilation, Compiler, compile_template  # noqa: E402
from stylefold.config import CompilerConfig  # noqa: E402
from stylefold.css import NestingPipeline  # noqa: E402
from stylefold.errors import (  # noqa: E402
    CompileError,
    MalformedTemplateError,
    NestedAtRuleError,
    ReservedCharacterError,
    SegmentMismatchError,
    ShapeInvariantError,
    StructuralError,
    UnbalancedRulesError,
    UnexpectedKeyframeOutputError,
    UnsupportedConstructError,
    UnsupportedKeyframeReferenceError,
)
from stylefold.model import CompiledOutput, Shape, TemplateNode, TemplateSpan  # noqa: E402

__all__ = [
    "Compilation",
    "CompileError",
    "CompiledOutput",
    "Compiler",
    "CompilerConfig",
    "MalformedTemplateError",
    "NestedAtRuleError",
    "NestingPipeline",
    "ReservedCharacterError",
    "SegmentMismatchError",
    "Shape",
    "ShapeInvariantError",
    "StructuralError",
    "TemplateNode",
    "TemplateSpan",
    "UnbalancedRulesError",
    "UnexpectedKeyframeOutputError",
    "UnsupportedConstructError",
    "UnsupportedKeyframeReferenceError",
    "__version__",
    "compile_template",
]
