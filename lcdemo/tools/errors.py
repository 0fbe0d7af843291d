"""
Errors raised by the tools. They derive from Langchain's
ToolException, so that an agent receives the error message as the
result of the tool call instead of aborting the run.
"""

from langchain_core.tools import ToolException


class ToolError(ToolException):
    """Base class of the errors raised by the tools."""


class InvalidFormatError(ToolError):
    """The input does not have the structure the tool expects."""


class UnknownOperationError(ToolError):
    """The requested operation is not supported by the tool."""


class InvalidNumberError(ToolError):
    """The input is not a real number, or the result is not one."""


class NegativeInputError(ToolError):
    """The input is negative where only non-negative values are
    accepted."""
