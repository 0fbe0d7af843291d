"""
Read and write configuration file.

This file also contains the definitions of the model providers
supported in the package, and the parameters of the agent, memory and
text splitting examples.
"""

from pathlib import Path
from typing import Any, Literal, Self

from pydantic import (
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

# Define supported model providers. These must also be handled in
# language_models/langchain/models.py
ModelSource = Literal[
    'Anthropic', 'OpenAI', 'Mistral', 'Gemini', 'Debug'
]

ProviderParam = str | int | float | bool | list[str]

DEFAULT_CONFIG_FILE = "config.toml"
DEFAULT_MODEL = "Anthropic/claude-sonnet-4-5-20250929"
ENV_PREFIX = "LCDEMO_"


class LanguageModelSettings(BaseModel):
    """
    Specification of language sources and models.

    Attributes:
        model: model specification, 'provider/model_name'
        temperature: float between 0.0 and 2.0
        max_tokens: max number of generated tokens
        max_retries: max number retries attempts
        timeout: timeout when waiting for response
        provider_params: provider-specific parameters
    """

    model: str = Field(
        description="Model specification in the form "
        + "'model_provider/model' (e.g., 'Anthropic/claude-sonnet-4-5')"
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Controls randomness in model responses (0.0-2.0)",
    )
    max_tokens: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of tokens to generate",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Maximum number of retry attempts",
    )
    timeout: float | None = Field(
        default=None, gt=0, description="Request timeout in seconds"
    )
    provider_params: dict[str, ProviderParam] = Field(
        default_factory=dict,
        description="Provider-specific parameters (e.g., top_k for Anthropic)",
    )

    model_config = SettingsConfigDict(frozen=True, extra='forbid')

    def __hash__(self) -> int:
        # lists are not hashable, and dicts are unordered
        params = tuple(
            sorted(
                (k, tuple(v) if isinstance(v, list) else v)
                for k, v in self.provider_params.items()
            )
        )
        return hash(
            (
                self.model,
                self.temperature,
                self.max_tokens,
                self.max_retries,
                self.timeout,
                params,
            )
        )

    def get_model_source(self) -> ModelSource:
        return self.model.split('/')[0]  # type: ignore

    def get_model_name(self) -> str:
        return self.model.split('/')[1]

    def from_instance(
        self,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        max_retries: int | None = None,
        timeout: float | None = None,
        provider_params: dict[str, ProviderParam] | None = None,
    ) -> 'LanguageModelSettings':
        """A copy of these settings with the given fields replaced."""
        return LanguageModelSettings(
            model=model if model is not None else self.model,
            temperature=(
                temperature
                if temperature is not None
                else self.temperature
            ),
            max_tokens=(
                max_tokens
                if max_tokens is not None
                else self.max_tokens
            ),
            max_retries=(
                max_retries
                if max_retries is not None
                else self.max_retries
            ),
            timeout=timeout if timeout is not None else self.timeout,
            provider_params=(
                provider_params
                if provider_params is not None
                else self.provider_params
            ),
        )

    @field_validator('model', mode='after')
    @classmethod
    def validate_model_spec(cls, spec: str) -> str:
        cleaned_spec = spec.strip()
        if not cleaned_spec:
            raise ValueError("Model specification is empty")
        if '\n' in cleaned_spec or '\r' in cleaned_spec:
            raise ValueError(
                "Model specification cannot contain newlines or carriage"
                + " returns."
            )
        tokens = cleaned_spec.split('/')
        if len(tokens) != 2:
            raise ValueError(
                "Model specification must contain the model provider and "
                + "the model name separated by a single '/'.",
            )
        source = tokens[0].strip()
        if source not in ModelSource.__args__:
            raise ValueError(
                f"Invalid model provider: '{source}'. "
                + f"Must be one of {ModelSource.__args__}."
            )
        name = tokens[1].strip()
        if not name:
            raise ValueError("Model name is empty")
        return source + '/' + name

    @model_validator(mode='after')
    def validate_provider_params(self) -> Self:
        """Validate provider-specific parameters based on the source."""
        ALLOWED_PARAMS = {
            'Anthropic': {'top_p', 'top_k', 'stop_sequences'},
            'OpenAI': {
                'frequency_penalty',
                'presence_penalty',
                'top_p',
                'seed',
            },
            'Mistral': {'top_p', 'random_seed', 'safe_mode'},
            'Gemini': {'top_p', 'top_k'},
            'Debug': {'message'},
        }

        source: ModelSource = self.get_model_source()
        allowed = ALLOWED_PARAMS[source]
        invalid_params = set(self.provider_params.keys()) - allowed
        if invalid_params:
            raise ValueError(
                f"Invalid provider_params for {source}: "
                f"{invalid_params}. Allowed: {allowed}"
            )

        return self


class AgentSettings(BaseModel):
    """Parameters of the tool-using agent."""

    max_iterations: int = Field(
        default=3,
        ge=1,
        description="Maximum number of model calls of the agent",
    )

    model_config = SettingsConfigDict(frozen=True, extra='forbid')


class MemorySettings(BaseModel):
    """Parameters of the conversation memory examples."""

    window_size: int = Field(
        default=2,
        ge=1,
        description="Number of interactions kept by the window memory",
    )

    model_config = SettingsConfigDict(frozen=True, extra='forbid')


class SplitterSettings(BaseModel):
    """Default parameters of the text splitters."""

    chunk_size: int = Field(
        default=200, ge=1, description="Maximum size of a chunk"
    )
    chunk_overlap: int = Field(
        default=50,
        ge=0,
        description="Overlap between consecutive chunks",
    )
    encoding_name: str = Field(
        default="cl100k_base",
        description="tiktoken encoding used by the token splitter",
    )

    model_config = SettingsConfigDict(frozen=True, extra='forbid')

    @model_validator(mode='after')
    def validate_overlap(self) -> Self:
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller "
                f"than chunk_size ({self.chunk_size})"
            )
        return self


class Settings(BaseSettings):
    """
    A pydantic settings object containing the fields with the
    configuration information.

    Settings are read from the configuration file in TOML format and
    from environment variables prefixed with LCDEMO_ (nested fields
    separated by a double underscore, e.g. LCDEMO_AGENT__MAX_ITERATIONS).

    Attributes:
        model: the language model used by all examples
        agent: agent parameters
        memory: conversation memory parameters
        splitter: text splitter parameters
    """

    model: LanguageModelSettings = Field(
        default_factory=lambda: LanguageModelSettings(
            model=DEFAULT_MODEL
        ),
        description="Language model used by the examples",
    )
    agent: AgentSettings = Field(
        default_factory=AgentSettings,
        description="Agent configuration",
    )
    memory: MemorySettings = Field(
        default_factory=MemorySettings,
        description="Conversation memory configuration",
    )
    splitter: SplitterSettings = Field(
        default_factory=SplitterSettings,
        description="Text splitter configuration",
    )

    model_config = SettingsConfigDict(
        toml_file=DEFAULT_CONFIG_FILE,
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        frozen=True,
        validate_assignment=True,
        extra='forbid',
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources."""
        return (
            init_settings,
            TomlConfigSettingsSource(settings_cls),
            env_settings,
        )

    def __str__(self) -> str:
        return serialize_settings(self)


def serialize_settings(sets: BaseSettings) -> str:
    """Transform the settings into a string in TOML format.

    Args:
        sets: The settings object to serialize

    Returns:
        TOML formatted string representation of settings
    """
    import tomlkit

    doc = tomlkit.document()
    doc.add(tomlkit.comment("Configuration file"))
    doc.add(tomlkit.nl())

    data: dict[str, Any] = sets.model_dump()
    for key, value in data.items():
        if isinstance(value, dict):
            tbl = tomlkit.table()
            for kkey, vvalue in value.items():  # type: ignore
                # None values can't be serialized to TOML
                if vvalue is not None:
                    tbl[kkey] = vvalue
            doc[key] = tbl
        elif value is not None:
            doc[key] = value

    return str(tomlkit.dumps(doc))  # type: ignore


def export_settings(
    settings: BaseSettings, file_path: str | Path | None = None
) -> None:
    """Save settings to file in TOML format.

    Args:
        settings: A settings object to save
        file_path: The settings file path (defaults to config.toml)

    Raises:
        OSError: If file cannot be written
    """
    if file_path is None:
        file_path = DEFAULT_CONFIG_FILE

    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8") as f:
        f.write(serialize_settings(settings))


def create_default_config_file(
    file_path: str | Path | None = None,
) -> None:
    """Create a settings file with the default values, replacing any
    existing file.

    Args:
        file_path: Target file path (defaults to config.toml)
    """
    if file_path is None:
        file_path = DEFAULT_CONFIG_FILE

    file_path = Path(file_path)
    if file_path.exists():
        # otherwise, it will be read in
        file_path.unlink()

    # init arguments take precedence over a config.toml in the
    # working directory and over the environment
    settings = Settings(
        model=LanguageModelSettings(model=DEFAULT_MODEL),
        agent=AgentSettings(),
        memory=MemorySettings(),
        splitter=SplitterSettings(),
    )
    export_settings(settings, file_path)


def load_settings(file_path: str | Path | None = None) -> Settings:
    """Load settings from TOML file.

    Args:
        file_path: Path to settings file (defaults to config.toml)

    Returns:
        Loaded settings object

    Raises:
        FileNotFoundError: If settings file doesn't exist
        ValueError: If settings file is invalid
    """
    if file_path is None:
        file_path = DEFAULT_CONFIG_FILE

    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(
            f"Settings file not found: {file_path}"
        )

    try:

        class FileSettings(Settings):
            model_config = SettingsConfigDict(
                toml_file=str(file_path),
                env_prefix=ENV_PREFIX,
                env_nested_delimiter="__",
                frozen=True,
                validate_assignment=True,
                extra='forbid',
            )

        return FileSettings()
    except Exception as e:
        raise ValueError(
            f"Failed to load settings from {file_path}: "
            + format_pydantic_error_message(str(e))
        ) from e


def format_pydantic_error_message(error_message: str) -> str:
    """Filter out verbose lines from pydantic error messages.

    Args:
        error_message: Raw pydantic error message

    Returns:
        Cleaned error message without verbose help text
    """
    lines = error_message.split('\n')
    filtered_lines = [
        line
        for line in lines
        if "For further information visit" not in line
    ]
    return '\n'.join(filtered_lines)
