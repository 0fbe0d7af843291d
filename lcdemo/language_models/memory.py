"""
Conversation memory for the chain and memory examples.

The memory objects store the exchanges of a conversation in a
Langchain in-memory chat message history, and render them as a
'history' variable to be substituted in a prompt template. Two
variants are provided:

- ConversationBufferMemory keeps all the exchanges
- ConversationWindowMemory keeps only the last k exchanges

Both expose the load/save interface used by the examples:

    ```python
    memory = ConversationWindowMemory(k=2)
    variables = memory.load_memory_variables()    # {'history': ...}
    memory.save_context({'input': question}, {'output': answer})
    ```

The memory lives for the duration of one example run and is not
persisted.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from langchain_core.chat_history import InMemoryChatMessageHistory
from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    get_buffer_string,
)

MEMORY_KEY = "history"
INPUT_KEY = "input"
OUTPUT_KEY = "output"


class Turn(BaseModel):
    """One exchange of a conversation."""

    human: str
    assistant: str

    model_config = ConfigDict(frozen=True, extra='forbid')

    def render(self) -> str:
        return f"Human: {self.human}\nAssistant: {self.assistant}\n"


def render_turns(turns: list[Turn]) -> str:
    """Concatenate the rendered turns of a conversation."""
    return "".join(t.render() for t in turns)


class ConversationBufferMemory:
    """Keeps the whole conversation."""

    def __init__(self) -> None:
        self.chat_memory = InMemoryChatMessageHistory()

    def _visible_messages(self) -> list[BaseMessage]:
        return list(self.chat_memory.messages)

    def load_memory_variables(
        self, inputs: Mapping[str, Any] | None = None
    ) -> dict[str, str]:
        """The conversation history, one 'Human:'/'AI:' line per
        message."""
        return {MEMORY_KEY: get_buffer_string(self._visible_messages())}

    def save_context(
        self, inputs: Mapping[str, Any], outputs: Mapping[str, Any]
    ) -> None:
        """Save one exchange.

        Raises:
            KeyError: if inputs lacks 'input' or outputs lacks 'output'
        """
        self.chat_memory.add_messages(
            [
                HumanMessage(content=str(inputs[INPUT_KEY])),
                AIMessage(content=str(outputs[OUTPUT_KEY])),
            ]
        )

    @property
    def turns(self) -> list[Turn]:
        """The retained exchanges, oldest first."""
        messages = self._visible_messages()
        return [
            Turn(human=str(h.content), assistant=str(a.content))
            for h, a in zip(messages[::2], messages[1::2])
        ]

    def clear(self) -> None:
        self.chat_memory.clear()


class ConversationWindowMemory(ConversationBufferMemory):
    """Keeps only the last k exchanges of the conversation. Older
    exchanges are dropped when a new one is saved."""

    def __init__(self, k: int = 2) -> None:
        if k < 1:
            raise ValueError(f"Window size must be at least 1, got {k}")
        super().__init__()
        self.k = k

    def _visible_messages(self) -> list[BaseMessage]:
        return list(self.chat_memory.messages[-2 * self.k :])

    def save_context(
        self, inputs: Mapping[str, Any], outputs: Mapping[str, Any]
    ) -> None:
        super().save_context(inputs, outputs)
        kept = self._visible_messages()
        if len(kept) < len(self.chat_memory.messages):
            self.chat_memory.clear()
            self.chat_memory.add_messages(kept)
