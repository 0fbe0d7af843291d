"""Basic LLM example: text completion with temperature and
max-tokens options."""

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.chains import complete
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import load_model, resolve_settings

logger = get_logger(__name__)

TAGLINE_PROMPT = "Write a creative tagline for a coffee shop"


def run_basic_llm(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates basic text completion with various options"""
    print("🤖 Basic LLM Example")
    print("Demonstrates simple text completion with a chat model\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    model = load_model(settings, logger)
    if model is None:
        return

    print("Example 1: Simple Completion")
    print("Prompt: 'Explain what LangChain is in one sentence'")
    try:
        completion = complete(
            model,
            "Explain what LangChain is in one sentence",
            temperature=0.7,
        )
    except Exception as e:
        logger.error(f"Simple completion failed: {e}")
        return
    print(f"Response: {completion}\n")

    print("Example 2: Temperature Control (Creative vs Deterministic)")
    for label, temperature in (
        ("High temperature (0.9) - More creative:", 0.9),
        ("Low temperature (0.1) - More deterministic:", 0.1),
    ):
        print(label)
        try:
            completion = complete(
                model, TAGLINE_PROMPT, temperature=temperature
            )
        except Exception as e:
            logger.error(
                f"Completion at temperature {temperature} failed: {e}"
            )
            return
        print(f"{completion}\n")

    print("Example 3: Max Tokens Control")
    try:
        completion = complete(
            model, "Explain quantum computing", max_tokens=50
        )
    except Exception as e:
        logger.error(f"Completion with max tokens failed: {e}")
        return
    print(f"Response (limited to ~50 tokens): {completion}")
