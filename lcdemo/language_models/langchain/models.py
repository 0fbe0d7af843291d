"""
This module implements creation of Langchain chat model objects
wrapping the message exchange calls of the provider API, thus
allowing the examples to run against diverse models through a single
programming interface. The model objects are memoized in the global
repository `langchain_models`.

The settings are given as a LanguageModelSettings object, which is
also a member of the Settings object loaded from config.toml, or as a
spec given as argument to the create_model_from_spec function.

Examples:

```python
from lcdemo.language_models.langchain.models import (
    create_model_from_spec,
    create_model_from_settings,
)
from lcdemo.config import LanguageModelSettings

settings = LanguageModelSettings(
    model="Anthropic/claude-sonnet-4-5-20250929",
    temperature=0.7,
)
model = create_model_from_settings(settings)

# the same model, retrieved from the repository
model = create_model_from_spec(
    "Anthropic/claude-sonnet-4-5-20250929", temperature=0.7
)

# a model that does not contact any provider
model = create_model_from_spec(
    "Debug/fake", provider_params={'message': "yes"}
)
```

Behaviour:
    Raises exceptions from Langchain and from itself

Note:
    Support for new model sources should be added here by extending
    the match ... case statement in _create_model_instance.
"""

from collections.abc import Sequence
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.language_models.fake_chat_models import (
    GenericFakeChatModel,
)
from langchain_core.runnables import Runnable

from lcdemo.config.config import (
    LanguageModelSettings,
    ModelSource,
    ProviderParam,
)
from ..lazy_dict import LazyLoadingDict
from ..message_iterator import yield_constant_message, yield_message


class DebugChatModel(GenericFakeChatModel):
    """A fake chat model emitting canned messages. Tool binding is
    accepted and ignored, so that the model may drive an agent (which
    will then answer directly without calling tools)."""

    def bind_tools(
        self,
        tools: Sequence[Any],
        *,
        tool_choice: str | None = None,
        **kwargs: Any,
    ) -> Runnable[Any, Any]:
        return self


def _create_model_instance(
    model: LanguageModelSettings,
) -> BaseChatModel:
    """
    Factory function to create Langchain models while checking
    permissible sources.
    """
    model_source: ModelSource = model.get_model_source()
    model_name: str = model.get_model_name()
    kwargs: dict[str, Any]
    match model_source:
        case "Anthropic":
            try:
                from langchain_anthropic import ChatAnthropic
            except ImportError as e:
                raise ImportError(
                    "Anthropic models require the "
                    "'langchain-anthropic' package. "
                    "Install it with: pip install langchain-anthropic"
                ) from e

            kwargs = {
                "model_name": model_name,
                "temperature": model.temperature,
                "timeout": model.timeout,
                "max_retries": model.max_retries,
                "stop": None,
            }
            if model.max_tokens is not None:
                kwargs["max_tokens"] = model.max_tokens
            kwargs.update(model.provider_params)

            return ChatAnthropic(**kwargs)

        case "OpenAI":
            try:
                from langchain_openai import ChatOpenAI
            except ImportError as e:
                raise ImportError(
                    "OpenAI models require the 'langchain-openai'"
                    " package. Install it with: pip install "
                    "langchain-openai"
                ) from e

            kwargs = {
                "model": model_name,
                "temperature": model.temperature,
                "max_retries": model.max_retries,
                "use_responses_api": False,
            }
            if model.max_tokens is not None:
                kwargs["max_tokens"] = model.max_tokens
            if model.timeout is not None:
                kwargs["timeout"] = model.timeout
            kwargs.update(model.provider_params)

            return ChatOpenAI(**kwargs)

        case "Mistral":
            try:
                from langchain_mistralai import ChatMistralAI
            except ImportError as e:
                raise ImportError(
                    "Mistral models require the 'langchain-mistralai'"
                    " package. Install it with: pip install "
                    "langchain-mistralai"
                ) from e

            kwargs = {
                "model_name": model_name,
                "temperature": model.temperature,
                "max_retries": model.max_retries,
            }
            if model.max_tokens is not None:
                kwargs["max_tokens"] = model.max_tokens
            if model.timeout is not None:
                kwargs["timeout"] = int(model.timeout)
            kwargs.update(model.provider_params)

            return ChatMistralAI(**kwargs)

        case "Gemini":
            try:
                from langchain_google_genai import (
                    ChatGoogleGenerativeAI,
                )
            except ImportError as e:
                raise ImportError(
                    "Gemini models require the "
                    "'langchain-google-genai' package. "
                    "Install it with: pip install "
                    "langchain-google-genai"
                ) from e

            kwargs = {
                "model": model_name,
                "temperature": model.temperature,
            }
            if model.max_tokens is not None:
                kwargs["max_output_tokens"] = model.max_tokens
            if model.timeout is not None:
                kwargs["request_timeout"] = model.timeout
            kwargs.update(model.provider_params)

            return ChatGoogleGenerativeAI(**kwargs)

        case "Debug":
            if "message" in model.provider_params:
                return DebugChatModel(
                    name="Langchain fake messages",
                    messages=yield_constant_message(
                        str(model.provider_params["message"])
                    ),
                )
            return DebugChatModel(
                name="Langchain fake chat",
                messages=yield_message(),
            )

        case _:
            raise ValueError(
                f"Unreachable code reached: invalid source {model_source}"
            )


# Public interface----------------------------------------------
langchain_models: LazyLoadingDict[LanguageModelSettings, BaseChatModel] = (
    LazyLoadingDict(_create_model_instance)
)


def create_model_from_spec(
    model: str,
    *,
    temperature: float = 0.7,
    max_tokens: int | None = None,
    max_retries: int = 2,
    timeout: float | None = None,
    provider_params: dict[str, ProviderParam] | None = None,
) -> BaseChatModel:
    """
    Create langchain model from specifications.

    Args:
        model: the model in the form source/model, such as
            'Anthropic/claude-sonnet-4-5-20250929'

    Returns:
        a Langchain model object.

    Raises ValueError, ValidationError, ImportError
    """
    spec = LanguageModelSettings(
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        max_retries=max_retries,
        timeout=timeout,
        provider_params=provider_params or {},
    )
    return langchain_models[spec]


def create_model_from_settings(
    settings: LanguageModelSettings,
) -> BaseChatModel:
    """
    Create langchain model from a LanguageModelSettings object.

    Args:
        settings: a LanguageModelSettings object containing model
            configuration.

    Returns:
        a Langchain model object.

    Raises ValueError, ValidationError, ImportError

    Example:
        ```python
        settings = Settings()
        model = create_model_from_settings(settings.model)
        response = model.invoke("Why is the sky blue?")
        ```
    """
    return langchain_models[settings]
