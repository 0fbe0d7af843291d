"""Prompt templates example: reusable prompts with variable
substitution."""

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.chains import (
    call_chain,
    create_chain,
    render_prompt,
    run_chain,
)
from lcdemo.language_models.prompts import prompt_library
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import load_model, resolve_settings

logger = get_logger(__name__)

CONCEPTS = ["gravity", "photosynthesis", "democracy"]
CASUAL_TEXTS = [
    "wanna grab lunch?",
    "sorry cant make it",
    "great job on the presentation!",
]
EMAIL_INPUTS = {
    'tone': "friendly and enthusiastic",
    'recipient': "the team",
    'topic': "the successful completion of our project milestone",
}
ROLE_INPUTS = {
    'role': "senior software architect",
    'context': "You have 15 years of experience in distributed systems.",
    'question': "What are the key considerations when designing a "
    "microservices architecture?",
    'style': "concise and practical",
}


def run_prompt_templates(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates various ways to use prompt templates"""
    print("📝 Prompt Templates Example")
    print("Demonstrates reusable prompts with variable substitution\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    model = load_model(settings, logger)
    if model is None:
        return

    # Example 1
    print("Example 1: Simple Template with Single Variable")
    template = prompt_library["explain_to_child"].template
    print(f"Template: '{template}'")
    print(
        "Rendered: '"
        + render_prompt(template, {'concept': CONCEPTS[0]})
        + "'\n"
    )
    chain = create_chain(model, template)
    for concept in CONCEPTS:
        try:
            result = run_chain(chain, concept)
        except Exception as e:
            logger.error(f"Explaining '{concept}' failed: {e}")
            continue
        print(f"Concept: {concept}\n{result}\n")

    # Example 2
    print("Example 2: Template with Multiple Variables")
    print("Email generator with tone, recipient, and topic\n")
    email_chain = create_chain(model, prompt_library["email"].template)
    try:
        result = call_chain(email_chain, EMAIL_INPUTS)
    except Exception as e:
        logger.error(f"Email generation failed: {e}")
        return
    print(f"Generated Email:\n{result[email_chain.output_key]}\n")

    # Example 3
    print("Example 3: Few-Shot Prompting")
    print("Teaching the LLM a pattern through examples\n")
    few_shot_chain = create_chain(
        model, prompt_library["professional_tone"].template
    )
    for text in CASUAL_TEXTS:
        try:
            result = run_chain(few_shot_chain, text)
        except Exception as e:
            logger.error(f"Tone conversion of '{text}' failed: {e}")
            continue
        print(f"Casual: {text}\nProfessional: {result}\n")

    # Example 4
    print("Example 4: Role-Based Prompt")
    print("Setting system context and user message\n")
    role_chain = create_chain(model, prompt_library["role_based"].template)
    try:
        result = call_chain(role_chain, ROLE_INPUTS)
    except Exception as e:
        logger.error(f"Role-based prompt failed: {e}")
        return
    print(
        f"Question: {ROLE_INPUTS['question']}\n\n"
        f"Response:\n{result[role_chain.output_key]}"
    )

    # Example 5
    print("\nExample 5: Conditional Template")
    print("Different prompts based on difficulty level\n")
    topic = "REST API design"
    for level in ("beginner", "advanced"):
        level_chain = create_chain(model, prompt_library[level].template)
        try:
            result = run_chain(level_chain, topic)
        except Exception as e:
            logger.error(f"{level} explanation failed: {e}")
            continue
        print(f"Level: {level}\n{result}\n")
