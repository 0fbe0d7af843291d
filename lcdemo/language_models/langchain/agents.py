"""
Agent executor: a chat model that chooses among a set of tools, calls
them and reads their results, until it produces a final answer.

The agent is built with Langchain's create_agent, which runs on a
LangGraph graph. The model is called at most max_iterations times,
so the agent may run max_iterations - 1 rounds of tool calls before
it must answer.

Example:

    ```python
    from lcdemo.tools import default_tools
    executor = create_agent_executor(model, default_tools(),
                                     max_iterations=3)
    answer = run_agent(executor, "What is the square root of 256?")
    ```
"""

from collections.abc import Sequence
from typing import Any

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.tools import BaseTool
from langgraph.errors import GraphRecursionError

SYSTEM_PROMPT = (
    "You are a helpful assistant. Use the available tools when they "
    "help answer the question, respecting the input format given in "
    "their description. Reply with the final answer only."
)


class AgentIterationLimitError(RuntimeError):
    """The agent did not produce an answer within the allowed
    number of iterations."""


class AgentExecutor:
    """A compiled agent graph with its iteration cap."""

    def __init__(
        self,
        model: BaseChatModel,
        tools: Sequence[BaseTool],
        max_iterations: int,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        if max_iterations < 1:
            raise ValueError(
                f"max_iterations must be at least 1, got {max_iterations}"
            )
        self.tools = list(tools)
        self.max_iterations = max_iterations
        self.graph: Any = create_agent(
            model, tools=self.tools, system_prompt=system_prompt
        )

    @property
    def recursion_limit(self) -> int:
        # allows max_iterations model steps, with a tools step between
        # consecutive ones
        return 2 * self.max_iterations + 1


def create_agent_executor(
    model: BaseChatModel,
    tools: Sequence[BaseTool],
    *,
    max_iterations: int = 3,
) -> AgentExecutor:
    """Create an agent that may call the given tools."""
    return AgentExecutor(model, tools, max_iterations)


def run_agent(executor: AgentExecutor, query: str) -> str:
    """Run the agent on the query and return the final answer.

    Raises:
        AgentIterationLimitError: if the agent does not finish within
            the iteration cap.
    """
    try:
        state = executor.graph.invoke(
            {"messages": [HumanMessage(content=query)]},
            config={"recursion_limit": executor.recursion_limit},
        )
    except GraphRecursionError as e:
        raise AgentIterationLimitError(
            "agent not finished before max iterations "
            f"({executor.max_iterations})"
        ) from e
    return StrOutputParser().invoke(state["messages"][-1])
