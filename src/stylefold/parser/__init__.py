from stylefold.parser.errors import ParseError
from stylefold.parser.transformer import parse_template

__all__ = ["ParseError", "parse_template"]
