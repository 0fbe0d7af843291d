"""
Creates and calls Langchain runnables for the examples: one-shot
completion of a prompt, rendering of prompt templates, chains made of
a prompt template and a model, and streamed completion.

Templates use the Langchain f-string syntax, with variables in curly
braces (e.g. "Explain {concept} to a 5-year-old").

Example:

    ```python
    from lcdemo.config import Settings
    from lcdemo.language_models.langchain.models import (
        create_model_from_settings,
    )
    from lcdemo.language_models.langchain.chains import (
        create_chain,
        run_chain,
        call_chain,
    )

    model = create_model_from_settings(Settings().model)
    story = create_chain(model, "Write a short story about {topic}.")
    text = run_chain(story, "a robot learning to paint")

    tagline = create_chain(model, "Tagline for {name}: {description}")
    result = call_chain(tagline, {'name': "Aqua", 'description': text})
    print(result['text'])
    ```

Expected behaviour:
    This module raises exceptions from Langchain and itself.
"""

from collections.abc import Callable, Mapping
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate
from langchain_core.runnables import Runnable, RunnableParallel

DEFAULT_OUTPUT_KEY = "text"


def create_prompt_template(template: str) -> PromptTemplate:
    """A Langchain prompt template; the input variables are inferred
    from the placeholders in the template text."""
    return PromptTemplate.from_template(template)


def render_prompt(template: str, variables: Mapping[str, Any]) -> str:
    """Substitute the variables into the template.

    Raises:
        KeyError: if a variable of the template is not given.
    """
    prompt = create_prompt_template(template)
    missing = set(prompt.input_variables) - set(variables)
    if missing:
        raise KeyError(
            f"Missing template variables: {sorted(missing)}"
        )
    return prompt.format(**variables)


def complete(
    model: BaseChatModel,
    prompt: str,
    *,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> str:
    """Single-prompt completion.

    Args:
        model: the chat model
        prompt: the prompt text
        temperature: overrides the temperature of the model
        max_tokens: caps the number of generated tokens

    Returns:
        the text of the response.
    """
    options: dict[str, Any] = {}
    if temperature is not None:
        options['temperature'] = temperature
    if max_tokens is not None:
        options['max_tokens'] = max_tokens

    runnable: Runnable[Any, Any] = model.bind(**options) if options else model
    return (runnable | StrOutputParser()).invoke(prompt)


class LLMChain:
    """A prompt template followed by a model call, returning the
    response under a named output field.

    Attributes:
        prompt: the prompt template
        output_key: the name of the output field
        runnable: the Langchain runnable implementing the chain
    """

    def __init__(
        self,
        model: BaseChatModel,
        prompt: PromptTemplate,
        output_key: str = DEFAULT_OUTPUT_KEY,
    ) -> None:
        self.prompt = prompt
        self.output_key = output_key
        self.runnable: Runnable[dict[str, Any], dict[str, str]] = (
            RunnableParallel(
                {output_key: prompt | model | StrOutputParser()}
            )
        )

    @property
    def input_variables(self) -> list[str]:
        return list(self.prompt.input_variables)


def create_chain(
    model: BaseChatModel,
    template: str,
    output_key: str = DEFAULT_OUTPUT_KEY,
) -> LLMChain:
    """Compose the template and the model into a chain."""
    return LLMChain(model, create_prompt_template(template), output_key)


def call_chain(
    chain: LLMChain, inputs: Mapping[str, Any]
) -> dict[str, str]:
    """Run the chain with values for all its input variables.

    Raises:
        KeyError: if an input variable is missing.
    """
    missing = set(chain.input_variables) - set(inputs)
    if missing:
        raise KeyError(f"Missing chain inputs: {sorted(missing)}")
    return chain.runnable.invoke(dict(inputs))


def run_chain(chain: LLMChain, value: Any) -> str:
    """Run a chain with a single input variable, returning the output
    field.

    Raises:
        ValueError: if the chain does not have exactly one input
            variable.
    """
    variables = chain.input_variables
    if len(variables) != 1:
        raise ValueError(
            "run_chain requires a chain with one input variable, "
            f"found {variables}"
        )
    result = call_chain(chain, {variables[0]: value})
    return result[chain.output_key]


def stream_completion(
    model: BaseChatModel,
    prompt: str,
    on_chunk: Callable[[str], None],
) -> str:
    """Stream the response to the prompt, calling on_chunk with each
    piece of text as it arrives.

    Returns:
        the complete response text.
    """
    pieces: list[str] = []
    for chunk in (model | StrOutputParser()).stream(prompt):
        if not chunk:
            continue
        on_chunk(chunk)
        pieces.append(chunk)
    return "".join(pieces)
