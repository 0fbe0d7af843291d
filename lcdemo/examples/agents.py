"""Agents example: calling tools directly, then letting an agent
choose the tools to answer a query."""

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.agents import (
    create_agent_executor,
    run_agent,
)
from lcdemo.tools import (
    AbsoluteTool,
    PowerTool,
    SquareRootTool,
    StringTool,
    ToolError,
    default_tools,
)
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import load_model, resolve_settings

logger = get_logger(__name__)

QUERIES = [
    "What is the square root of 256?",
    "What is 2 raised to the power of 8?",
    "Convert the text 'hello' to uppercase",
]


def run_agents(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates agents choosing among custom tools"""
    print("🤖 Agents & Tools Example")
    print("Demonstrates autonomous decision-making with custom tools\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return

    print("Example 1: Calling Tools Directly")
    for tool, tool_input in (
        (SquareRootTool(), "16"),
        (PowerTool(), "2,10"),
        (AbsoluteTool(), "-42"),
        (StringTool(), "reverse:abcdef"),
        (SquareRootTool(), "notanumber"),
    ):
        print(f"Testing: {tool.name}('{tool_input}')")
        try:
            print(f"Result: {tool.call(tool_input)}\n")
        except ToolError as e:
            print(f"Tool error: {e}\n")

    print("Example 2: Agent with Multiple Tools")
    print("Agent can choose which tool to use\n")
    model = load_model(settings, logger)
    if model is None:
        return
    try:
        executor = create_agent_executor(
            model,
            default_tools(),
            max_iterations=settings.agent.max_iterations,
        )
    except Exception as e:
        logger.error(f"Error creating agent: {e}")
        return

    for query in QUERIES:
        print(f"Query: {query}")
        try:
            answer = run_agent(executor, query)
        except Exception as e:
            logger.error(f"Agent failed on '{query}': {e}")
            continue
        print(f"Answer: {answer}\n")
