"""Chains example: composing prompt templates with model calls, and
feeding the output of a chain into the next one."""

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.chains import (
    LLMChain,
    call_chain,
    create_chain,
    run_chain,
)
from lcdemo.language_models.memory import Turn, render_turns
from lcdemo.language_models.prompts import prompt_library
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import load_model, resolve_settings

logger = get_logger(__name__)

QUESTIONS = [
    "What is the capital of France?",
    "What is it famous for?",
    "What's the best time to visit?",
]


def converse(chain: LLMChain, turns: list[Turn], question: str) -> Turn:
    """Ask the question with the conversation so far as history, and
    append the new exchange to turns."""
    result = call_chain(
        chain, {'history': render_turns(turns), 'input': question}
    )
    turn = Turn(human=question, assistant=result[chain.output_key])
    turns.append(turn)
    return turn


def run_chains(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates how to chain multiple LLM calls together"""
    print("⛓️  Chains Example")
    print("Demonstrates sequential operations with LLM chains\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    model = load_model(settings, logger)
    if model is None:
        return

    # Example 1
    print("Example 1: Simple LLM Chain")
    print("Create a story about a topic, then summarize it\n")
    try:
        story_chain = create_chain(model, prompt_library["story"].template)
        story = run_chain(story_chain, "a robot learning to paint")
    except Exception as e:
        logger.error(f"Story chain failed: {e}")
        return
    print("Generated Story:")
    print(story + "\n")

    try:
        summary_chain = create_chain(
            model, prompt_library["story_summary"].template
        )
        summary = run_chain(summary_chain, story)
    except Exception as e:
        logger.error(f"Summary chain failed: {e}")
        return
    print("Summary:")
    print(summary + "\n")

    # Example 2
    print("Example 2: Sequential Chain")
    print("Generate product name → Write description → Create tagline\n")
    try:
        name_chain = create_chain(
            model, prompt_library["product_name"].template
        )
        product_name = run_chain(name_chain, "eco-friendly water bottle")
    except Exception as e:
        logger.error(f"Product name chain failed: {e}")
        return
    print(f"Step 1 - Product Name: {product_name}")

    try:
        desc_chain = create_chain(
            model, prompt_library["product_description"].template
        )
        product_desc = run_chain(desc_chain, product_name)
    except Exception as e:
        logger.error(f"Product description chain failed: {e}")
        return
    print(f"Step 2 - Description: {product_desc}")

    short_model = load_model(settings, logger, max_tokens=50)
    if short_model is None:
        return
    try:
        tagline_chain = create_chain(
            short_model, prompt_library["product_tagline"].template
        )
        result = call_chain(
            tagline_chain,
            {'name': product_name, 'description': product_desc},
        )
    except Exception as e:
        logger.error(f"Tagline chain failed: {e}")
        return
    print(f"Step 3 - Tagline: {result[tagline_chain.output_key]}")

    # Example 3
    print("\nExample 3: Conversation Chain")
    print("Having a multi-turn conversation\n")
    conversation_chain = create_chain(
        model, prompt_library["conversation"].template
    )
    turns: list[Turn] = []
    for i, question in enumerate(QUESTIONS, start=1):
        print(f"Turn {i} - Human: {question}")
        try:
            turn = converse(conversation_chain, turns, question)
        except Exception as e:
            logger.error(f"Conversation turn {i} failed: {e}")
            return
        print(f"Turn {i} - Assistant: {turn.assistant}\n")
