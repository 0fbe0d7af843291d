"""
Iterators that generate canned messages. Used to feed messages through
the fake language model of the 'Debug' provider, so that the examples
may be run without contacting a model provider.
"""

from typing import Iterator


class MessageIterator:
    """
    An infinite iterator of numbered messages, "{prefix} {counter}",
    with counter starting at 1.
    """

    def __init__(self, prefix: str = "Message") -> None:
        self.prefix = prefix
        self.counter = 1

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        message = f"{self.prefix} {self.counter}"
        self.counter += 1
        return message


class ConstantMessageIterator:
    """
    An infinite iterator repeating the message with which it was
    initialized.
    """

    def __init__(self, message: str = "Message") -> None:
        self.message = message
        self.counter = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        self.counter += 1
        return self.message


def yield_message(prefix: str = "Message") -> MessageIterator:
    """
    Create an iterator generating sequential messages.

    Example:
        >>> iterator = yield_message("Alert")
        >>> next(iterator)
        'Alert 1'
        >>> next(iterator)
        'Alert 2'
    """
    return MessageIterator(prefix)


def yield_constant_message(
    message: str = "Message",
) -> ConstantMessageIterator:
    """
    Create an iterator generating the same message repeatedly.

    Example:
        >>> iterator = yield_constant_message('{"name": "John"}')
        >>> next(iterator)
        '{"name": "John"}'
    """
    return ConstantMessageIterator(message)
