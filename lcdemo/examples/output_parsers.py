"""Output parsers example: requesting structured output from the model
and parsing it into Python objects."""

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.chains import (
    call_chain,
    create_chain,
    run_chain,
)
from lcdemo.language_models.parsers import (
    count_markdown_sections,
    parse_comma_list,
    parse_key_values,
    parse_movies,
    parse_person,
    parse_yes_no,
)
from lcdemo.language_models.prompts import prompt_library
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import RULE, load_model, resolve_settings

logger = get_logger(__name__)

PERSON_TEXT = (
    "John Smith is a 35-year-old software engineer who enjoys hiking, "
    "photography, and playing guitar in his free time."
)
MOVIES_TEXT = (
    "The Shawshank Redemption (1994) directed by Frank Darabont and "
    "The Godfather (1972) directed by Francis Ford Coppola are "
    "considered masterpieces."
)
STATEMENTS = [
    "What time is it?",
    "The sky is blue.",
    "How do I install this package?",
    "Programming is fun.",
]


def run_output_parsers(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates parsing structured output from LLMs"""
    print("🔍 Output Parsers Example")
    print("Demonstrates parsing structured output from LLMs\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    model = load_model(settings, logger)
    if model is None:
        return

    # Example 1
    print("Example 1: JSON Output Parsing")
    print("Request structured data in JSON format\n")
    chain = create_chain(model, prompt_library["person_extraction"].template)
    try:
        result = run_chain(chain, PERSON_TEXT)
    except Exception as e:
        logger.error(f"Person extraction failed: {e}")
        return
    print(f"Raw output:\n{result}\n")
    try:
        person = parse_person(result)
    except Exception as e:
        logger.warning(f"Could not parse JSON: {e}")
    else:
        print("Parsed Person:")
        print(f"  Name: {person.name}")
        print(f"  Age: {person.age}")
        print(f"  Occupation: {person.occupation}")
        print(f"  Hobbies: {', '.join(person.hobbies)}")

    # Example 2
    print("\n" + RULE)
    print("Example 2: Comma-Separated List Parsing")
    print("Extract items as a simple list\n")
    chain = create_chain(model, prompt_library["ingredients_list"].template)
    try:
        result = run_chain(chain, "spaghetti carbonara")
    except Exception as e:
        logger.error(f"Ingredients list failed: {e}")
        return
    print(f"Raw output: {result}")
    ingredients = parse_comma_list(result)
    print(f"\nParsed ingredients ({len(ingredients)} items):")
    for i, ingredient in enumerate(ingredients, start=1):
        print(f"  {i}. {ingredient}")

    # Example 3
    print("\n" + RULE)
    print("Example 3: Key-Value Pair Parsing")
    print("Extract structured information as key-value pairs\n")
    chain = create_chain(
        model, prompt_library["product_attributes"].template
    )
    try:
        result = run_chain(chain, "iPhone 15 Pro in titanium blue for $999")
    except Exception as e:
        logger.error(f"Product attributes failed: {e}")
        return
    print(f"Raw output:\n{result}\n")
    print("Parsed attributes:")
    for key, value in parse_key_values(result).items():
        print(f"  {key}: {value}")

    # Example 4
    print("\n" + RULE)
    print("Example 4: Boolean Classification")
    print("Parse yes/no or true/false responses\n")
    chain = create_chain(model, prompt_library["is_question"].template)
    for statement in STATEMENTS:
        try:
            result = run_chain(chain, statement)
        except Exception as e:
            logger.error(f"Classification of '{statement}' failed: {e}")
            continue
        print(f"'{statement}' -> Is question? {parse_yes_no(result)}")

    # Example 5
    print("\n" + RULE)
    print("Example 5: Complex JSON Structure")
    print("Parse a list of objects\n")
    chain = create_chain(model, prompt_library["movies_extraction"].template)
    try:
        result = run_chain(chain, MOVIES_TEXT)
    except Exception as e:
        logger.error(f"Movies extraction failed: {e}")
        return
    print(f"Raw output:\n{result}\n")
    try:
        movies = parse_movies(result)
    except Exception as e:
        logger.warning(f"Could not parse JSON: {e}")
    else:
        print(f"Parsed Movies ({len(movies)} total):")
        for i, movie in enumerate(movies, start=1):
            print(
                f"  {i}. {movie.title} ({movie.year}) - "
                f"directed by {movie.director}"
            )

    # Example 6
    print("\n" + RULE)
    print("Example 6: Markdown Structure Parsing")
    print("Parse markdown formatted output\n")
    chain = create_chain(
        model, prompt_library["markdown_comparison"].template
    )
    try:
        result = call_chain(
            chain, {'topic1': "REST APIs", 'topic2': "GraphQL"}
        )
    except Exception as e:
        logger.error(f"Markdown comparison failed: {e}")
        return
    text = result[chain.output_key]
    print(f"Markdown output:\n{text}")
    print(f"\nFound {count_markdown_sections(text)} sections")
