"""
Tools that an agent may call. Each tool has a name, a description
telling the model how to format the input, and a `call` member
function mapping an input string to an output string.

    ```python
    from lcdemo.tools import SquareRootTool, InvalidNumberError

    tool = SquareRootTool()
    tool.call("16")     # '4.00'
    try:
        tool.call("notanumber")
    except InvalidNumberError as e:
        print(e)
    ```
"""

# pyright: reportUnusedImport=false
# flake8: noqa

from langchain_core.tools import BaseTool

from .base import StringInputTool
from .errors import (
    ToolError,
    InvalidFormatError,
    UnknownOperationError,
    InvalidNumberError,
    NegativeInputError,
)
from .string_tool import StringTool
from .math_tools import SquareRootTool, PowerTool, AbsoluteTool


def default_tools() -> list[BaseTool]:
    """One instance of each tool."""
    return [StringTool(), SquareRootTool(), PowerTool(), AbsoluteTool()]
