"""Errors raised while reading tagged template source."""


class ParseError(Exception):
    """Source text is not a single ``tag`...``` template literal.

    ``line`` and ``column`` locate the offending input when it is known.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column

