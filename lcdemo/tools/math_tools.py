"""Arithmetic tools: square root, power, absolute value. The results
are formatted with two decimal digits."""

import math

from .base import StringInputTool, format_number, parse_number
from .errors import (
    InvalidFormatError,
    InvalidNumberError,
    NegativeInputError,
)


class SquareRootTool(StringInputTool):
    name: str = "SquareRoot"
    description: str = (
        "Calculates the square root of a number. "
        "Input should be a single number."
    )

    def call(self, tool_input: str) -> str:
        value = parse_number(tool_input)
        if value < 0:
            raise NegativeInputError(
                "cannot calculate square root of negative number"
            )
        return format_number(math.sqrt(value))


class PowerTool(StringInputTool):
    name: str = "Power"
    description: str = (
        "Raises a number to a power. "
        "Input should be two numbers separated by a comma: "
        "base,exponent. Example: 2,10"
    )

    def call(self, tool_input: str) -> str:
        fields = tool_input.split(",")
        if len(fields) != 2:
            raise InvalidFormatError(
                "invalid input format, use base,exponent"
            )
        base, exponent = (parse_number(f) for f in fields)
        try:
            result = math.pow(base, exponent)
        except (ValueError, OverflowError) as e:
            # negative base with fractional exponent, zero to a
            # negative power, or overflow
            raise InvalidNumberError(
                f"{base} ^ {exponent} is not a real number: {e}"
            ) from e
        return format_number(result)


class AbsoluteTool(StringInputTool):
    name: str = "Absolute"
    description: str = (
        "Calculates the absolute value of a number. "
        "Input should be a single number."
    )

    def call(self, tool_input: str) -> str:
        return format_number(abs(parse_number(tool_input)))
