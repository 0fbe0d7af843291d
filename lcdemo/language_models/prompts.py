"""
This module centralizes the prompt templates used by the examples.

Each template is stored in a PromptDefinition object, identified
uniquely by its name. The predefined templates are retrieved from the
module-level dictionary `prompt_library`, which creates them on first
access:

    ```python
    from lcdemo.language_models.prompts import prompt_library
    template: str = prompt_library["story"].template
    ```

The templates use the Langchain f-string syntax, e.g.
"Explain {concept} to a 5-year-old". They may be given to the
create_chain function (see lcdemo.language_models.langchain.chains):

    ```python
    from lcdemo.language_models.langchain.chains import create_chain
    chain = create_chain(model, prompt_library["story"].template)
    ```

New templates may be added to the dictionary with `create_prompt`:

    ```python
    from lcdemo.language_models.prompts import (
        prompt_library,
        create_prompt,
    )
    create_prompt("Translate into French: {text}", name="translator")
    template: str = prompt_library["translator"].template
    ```
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .lazy_dict import LazyLoadingDict


class PromptDefinition(BaseModel):
    """A named prompt template"""

    name: str
    template: str

    model_config = ConfigDict(frozen=True, extra='forbid')


# List of pre-defined prompts
PromptNames = Literal[
    "story",
    "story_summary",
    "product_name",
    "product_description",
    "product_tagline",
    "conversation",
    "memory_conversation",
    "explain_to_child",
    "email",
    "professional_tone",
    "role_based",
    "beginner",
    "advanced",
    "person_extraction",
    "ingredients_list",
    "product_attributes",
    "is_question",
    "movies_extraction",
    "markdown_comparison",
]


def _create_prompt(name: PromptNames) -> PromptDefinition:
    match name:
        # --- chains
        case "story":
            template = (
                "Write a short 2-paragraph story about {topic}. "
                "Make it interesting and engaging."
            )
        case "story_summary":
            template = (
                "Summarize the following story in one sentence:\n\n"
                "{story}"
            )
        case "product_name":
            template = (
                "Generate a creative product name for: {product_type}. "
                "Only respond with the name, nothing else."
            )
        case "product_description":
            template = (
                "Write a brief 2-sentence product description for "
                "{product_name}, an eco-friendly water bottle."
            )
        case "product_tagline":
            template = """Create a catchy marketing tagline for this product:
Name: {name}
Description: {description}

Only respond with the tagline."""
        case "conversation":
            template = (
                "You are a helpful assistant. {history}\n\n"
                "Human: {input}\nAssistant:"
            )
        # --- memory
        case "memory_conversation":
            template = """The following is a conversation between a human and an AI assistant.

{history}
Human: {input}
AI:"""
        # --- prompt templates
        case "explain_to_child":
            template = "Explain {concept} to a 5-year-old in 2-3 sentences."
        case "email":
            template = """Write a {tone} email to {recipient} about {topic}.
Keep it brief (3-4 sentences) and professional."""
        case "professional_tone":
            template = """Convert the following text to a professional tone:

Example 1:
Input: "hey can u help me with this?"
Output: "Hello, could you please assist me with this matter?"

Example 2:
Input: "gonna be late tmrw"
Output: "I will be arriving late tomorrow."

Example 3:
Input: "thx for ur help!"
Output: "Thank you for your assistance."

Now convert this:
Input: "{input}"
Output:"""
        case "role_based":
            template = """You are a {role}. {context}

User question: {question}

Provide a helpful response in {style} style."""
        case "beginner":
            template = (
                "Explain {topic} using simple everyday language and "
                "examples that anyone can understand."
            )
        case "advanced":
            template = (
                "Provide a technical deep-dive into {topic}, including "
                "architectural considerations and implementation details."
            )
        # --- output parsers
        case "person_extraction":
            template = """Extract information about the following person and return it as a valid JSON object with these fields:
- name (string)
- age (number)
- occupation (string)
- hobbies (array of strings)

Text: {text}

Return only the JSON object, no additional text."""
        case "ingredients_list":
            template = """List the main ingredients in {dish}.
Return only the ingredients as a comma-separated list, nothing else."""
        case "product_attributes":
            template = """Analyze the following product and extract these attributes as key-value pairs (one per line, format: Key: Value):
- Brand
- Model
- Price
- Color

Product: {product}"""
        case "is_question":
            template = """Is the following statement a question?
Statement: {statement}

Answer only with 'yes' or 'no'."""
        case "movies_extraction":
            template = """Extract information about movies from the text and return as a JSON array of objects.
Each object should have: title, year, director

Text: {text}

Return only the JSON array."""
        case "markdown_comparison":
            template = """Create a brief comparison of {topic1} vs {topic2}.
Format your response as markdown with sections:
- ## Overview
- ## Pros of {topic1}
- ## Pros of {topic2}
- ## Conclusion"""
        case _:  # do not remove this
            raise ValueError(f"Invalid prompt: {name}")

    return PromptDefinition(name=name, template=template)


# a module-level dictionary of the predefined prompts
prompt_library: LazyLoadingDict[str, PromptDefinition] = LazyLoadingDict(
    _create_prompt  # type: ignore
)


def create_prompt(template: str, name: str) -> None:
    """
    Adds a custom prompt template to the prompt dictionary.

    Args:
        template: the prompt template text.
        name: the name of the prompt.

    Raises:
        ValueError: if a prompt with that name is already present.
    """
    prompt_library[name] = PromptDefinition(name=name, template=template)
