from stylefold.compiler.engine import Compilation, Compiler, compile_template
from stylefold.compiler.pipeline import CssPipeline, compile_css
from stylefold.compiler.segments import extract_segments, recreate_template

__all__ = [
    "Compilation",
    "Compiler",
    "CssPipeline",
    "compile_css",
    "compile_template",
    "extract_segments",
    "recreate_template",
]
