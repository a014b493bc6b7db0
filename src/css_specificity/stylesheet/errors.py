"""Stylesheet error types."""


class StylesheetError(ValueError):
    """Raised when CSS source cannot be split into rules."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
