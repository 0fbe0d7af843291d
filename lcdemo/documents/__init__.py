# pyright: reportUnusedImport=false
# flake8: noqa

from .splitters import (
    recursive_splitter,
    token_splitter,
    markdown_splitter,
    splitter_from_settings,
    split_text,
)
