"""
Common base of the tools: a Langchain tool taking a single string
argument, whose logic is given by the `call` member function.

`call` is the direct interface, and raises the errors in
lcdemo.tools.errors. When the tool is run by Langchain (for example
by an agent through `invoke`), the error message is returned as the
tool output instead.
"""

import math
from abc import abstractmethod

from pydantic import BaseModel, Field

from langchain_core.callbacks import CallbackManagerForToolRun
from langchain_core.tools import BaseTool

from .errors import InvalidNumberError


class ToolInput(BaseModel):
    """The single string argument of the tools."""

    tool_input: str = Field(
        description="The input string, in the format given in the "
        "tool description"
    )


class StringInputTool(BaseTool):
    """A stateless tool mapping one string to one string."""

    args_schema: type[BaseModel] = ToolInput
    handle_tool_error: bool = True

    @abstractmethod
    def call(self, tool_input: str) -> str:
        """Apply the tool to the input.

        Raises:
            ToolError: if the input is not valid for the tool.
        """

    def _run(
        self,
        tool_input: str,
        run_manager: CallbackManagerForToolRun | None = None,
    ) -> str:
        return self.call(tool_input)


def parse_number(text: str) -> float:
    """Parse a real number, ignoring surrounding whitespace.

    Raises:
        InvalidNumberError: if the text is not a finite real number.
    """
    cleaned = text.strip()
    # float() also accepts digit separators
    if "_" in cleaned:
        raise InvalidNumberError(f"invalid number: '{cleaned}'")
    try:
        value = float(cleaned)
    except ValueError as e:
        raise InvalidNumberError(f"invalid number: '{cleaned}'") from e
    if not math.isfinite(value):
        raise InvalidNumberError(f"invalid number: '{cleaned}'")
    return value


def format_number(value: float) -> str:
    """Two decimal digits; values rounding to zero are printed without
    a sign."""
    if abs(value) < 0.005:
        value = 0.0
    return f"{value:.2f}"
