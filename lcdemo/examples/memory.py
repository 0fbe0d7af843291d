"""Memory example: conversation history with an unbounded buffer and
with a window of the last k exchanges."""

from langchain_core.language_models.chat_models import BaseChatModel

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.chains import call_chain, create_chain
from lcdemo.language_models.memory import (
    ConversationBufferMemory,
    ConversationWindowMemory,
)
from lcdemo.language_models.prompts import prompt_library
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import load_model, resolve_settings

logger = get_logger(__name__)

BUFFER_QUESTIONS = [
    "My name is Alice and I love programming in Python.",
    "What programming language did I mention?",
    "What is my name?",
]
WINDOW_QUESTIONS = [
    "My name is Bob.",
    "I live in Lisbon.",
    "I work as a nurse.",
    "What is my name?",
]


def _converse(
    model: BaseChatModel,
    memory: ConversationBufferMemory,
    questions: list[str],
    logger: LoggerBase,
) -> bool:
    """Ask the questions in turn, loading the history from memory and
    saving each exchange. Returns False if the conversation failed."""
    chain = create_chain(
        model, prompt_library["memory_conversation"].template
    )
    for i, question in enumerate(questions, start=1):
        print(f"Turn {i}")
        print(f"Human: {question}")
        try:
            variables = memory.load_memory_variables({})
            result = call_chain(
                chain, {'history': variables['history'], 'input': question}
            )
        except Exception as e:
            logger.error(f"Conversation turn {i} failed: {e}")
            return False

        response = result[chain.output_key]
        print(f"AI: {response}")
        memory.save_context({'input': question}, {'output': response})
        print(f"(memory holds {len(memory.turns)} exchanges)\n")
    return True


def run_memory(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates conversation memory and context management"""
    print("🧠 Memory Example")
    print("Demonstrates conversation history and context management\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    model = load_model(settings, logger)
    if model is None:
        return

    print("Conversation Buffer Memory")
    print("Maintains full conversation history\n")
    if not _converse(
        model, ConversationBufferMemory(), BUFFER_QUESTIONS, logger
    ):
        return

    k = settings.memory.window_size
    print("Conversation Window Memory")
    print(f"Keeps only the last {k} exchanges\n")
    window = ConversationWindowMemory(k=k)
    if not _converse(model, window, WINDOW_QUESTIONS, logger):
        return
    print("History visible to the model:")
    print(window.load_memory_variables()['history'])
