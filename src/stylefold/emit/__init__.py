from stylefold.emit.javascript import render_call, render_output, render_rule, render_term

__all__ = ["render_call", "render_output", "render_rule", "render_term"]
