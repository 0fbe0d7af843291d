"""Helpers shared by the example runners."""

from langchain_core.language_models.chat_models import BaseChatModel

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.models import (
    create_model_from_settings,
)
from lcdemo.utils.logging import LoggerBase

RULE = "=" * 80


def resolve_settings(
    settings: Settings | None, logger: LoggerBase
) -> Settings | None:
    """The given settings, or those read from config.toml and the
    environment. Returns None and logs the error if these are
    invalid."""
    if settings is not None:
        return settings
    try:
        return Settings()
    except Exception as e:
        logger.error(f"Invalid configuration: {e}")
        return None


def load_model(
    settings: Settings,
    logger: LoggerBase,
    *,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> BaseChatModel | None:
    """The configured chat model, with optional overrides. Returns
    None and logs the error if the model cannot be created."""
    try:
        model_settings = settings.model
        if temperature is not None or max_tokens is not None:
            model_settings = model_settings.from_instance(
                temperature=temperature, max_tokens=max_tokens
            )
        return create_model_from_settings(model_settings)
    except Exception as e:
        logger.error(
            f"Could not create language model '{settings.model.model}': {e}"
        )
        return None
