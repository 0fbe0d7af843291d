# pyright: reportUnusedImport=false
# flake8: noqa

from .config import (
    Settings,
    LanguageModelSettings,
    AgentSettings,
    MemorySettings,
    SplitterSettings,
    serialize_settings,
    export_settings,
    create_default_config_file,
    load_settings,
    format_pydantic_error_message,
)
