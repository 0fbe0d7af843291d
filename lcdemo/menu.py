"""
Interactive menu of the examples. The user selects an example by its
number, or quits with 'q'. Ctrl-C or the end of the input stream also
terminate the menu.
"""

from collections.abc import Callable

from lcdemo.config.config import Settings
from lcdemo.examples import (
    run_agents,
    run_basic_llm,
    run_chains,
    run_document_processing,
    run_memory,
    run_output_parsers,
    run_prompt_templates,
    run_streaming,
)
from lcdemo.examples.common import RULE
from lcdemo.utils.logging import LoggerBase, get_logger

logger = get_logger(__name__)

Runner = Callable[[Settings | None, LoggerBase], None]

# selection key -> (menu text, runner)
MENU: dict[str, tuple[str, Runner]] = {
    "1": ("Basic LLM - Simple text completion", run_basic_llm),
    "2": ("Chains - Sequential operations and LLM chains", run_chains),
    "3": (
        "Prompt Templates - Reusable prompts with variables",
        run_prompt_templates,
    ),
    "4": (
        "Memory - Conversation history and context management",
        run_memory,
    ),
    "5": (
        "Agents & Tools - Autonomous decision-making with custom tools",
        run_agents,
    ),
    "6": (
        "Document Processing - Text splitting and chunking",
        run_document_processing,
    ),
    "7": ("Output Parsers - Structured output from LLMs", run_output_parsers),
    "8": ("Streaming - Real-time streaming responses", run_streaming),
}

PROMPT = "\nSelect an example (1-8, or 'q' to quit): "


def print_menu() -> None:
    width = 78
    print("\n╔" + "═" * width + "╗")
    print("║" + "LangChain - Feature Demonstrations".center(width) + "║")
    print("╚" + "═" * width + "╝")
    print()
    for key, (text, _) in MENU.items():
        print(f"  {key}. {text}")
    print()
    print("  Q. Quit")


def run_menu(
    settings: Settings | None = None,
    logger: LoggerBase = logger,
    read_line: Callable[[str], str] = input,
) -> None:
    """Show the menu and run the selected examples until the user
    quits.

    Args:
        settings: the settings given to the examples (read from
            config.toml by each example if None)
        logger: the logger given to the examples
        read_line: reads one line of user input, after displaying
            the prompt
    """
    while True:
        print_menu()
        try:
            selection = read_line(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            return

        if selection in ("q", "Q"):
            print("Goodbye!")
            return

        print("\n" + RULE)
        entry = MENU.get(selection)
        if entry is None:
            print("Invalid selection. Please try again.")
        else:
            _, runner = entry
            try:
                runner(settings, logger)
            except KeyboardInterrupt:
                print("\nGoodbye!")
                return
        print(RULE + "\n")
