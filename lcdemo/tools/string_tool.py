"""String manipulation tool."""

from .base import StringInputTool
from .errors import InvalidFormatError, UnknownOperationError

OPERATIONS = ("uppercase", "lowercase", "reverse", "length")


class StringTool(StringInputTool):
    """Applies one of uppercase, lowercase, reverse, length to a text
    given as 'operation:text'. Only the operation is trimmed and
    matched case-insensitively; the text is used as is."""

    name: str = "StringManipulation"
    description: str = (
        "Useful for manipulating strings.\n"
        "Input format: operation:text\n"
        "Operations: uppercase, lowercase, reverse, length\n"
        "Example: uppercase:hello"
    )

    def call(self, tool_input: str) -> str:
        operation, sep, text = tool_input.partition(":")
        if not sep:
            raise InvalidFormatError(
                "invalid input format, use operation:text"
            )

        match operation.strip().lower():
            case "uppercase":
                return text.upper()
            case "lowercase":
                return text.lower()
            case "reverse":
                return text[::-1]
            case "length":
                return str(len(text))
            case other:
                raise UnknownOperationError(
                    f"unknown operation: {other}"
                )
