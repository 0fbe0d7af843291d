"""Text splitting strategies.

This implementation uses the langchain text splitters:

    recursive_splitter: splits on a hierarchy of separators (by
        default paragraphs, lines, words, characters) to keep chunks
        within chunk_size characters
    token_splitter: splits on token counts, using a tiktoken encoding
    markdown_splitter: recursive splitting on markdown headings and
        structure first

Consecutive chunks share up to chunk_overlap characters (tokens for
the token splitter). An overlap that is not smaller than the chunk
size raises a ValueError.

Example:
    ```python
    splitter = recursive_splitter(chunk_size=200, chunk_overlap=50)
    chunks = split_text(splitter, text)
    ```
"""

from langchain_text_splitters import (
    MarkdownTextSplitter,
    RecursiveCharacterTextSplitter,
    TextSplitter,
    TokenTextSplitter,
)

from lcdemo.config.config import SplitterSettings


def _check_sizes(chunk_size: int, chunk_overlap: int) -> None:
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if chunk_overlap < 0:
        raise ValueError(
            f"chunk_overlap must not be negative, got {chunk_overlap}"
        )
    if chunk_overlap >= chunk_size:
        raise ValueError(
            f"chunk_overlap ({chunk_overlap}) must be smaller than "
            f"chunk_size ({chunk_size})"
        )


def recursive_splitter(
    chunk_size: int,
    chunk_overlap: int,
    separators: list[str] | None = None,
) -> TextSplitter:
    """A recursive character splitter, optionally with custom
    separators (tried in order)."""
    _check_sizes(chunk_size, chunk_overlap)
    return RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        separators=separators,
    )


def token_splitter(
    chunk_size: int,
    chunk_overlap: int,
    encoding_name: str = "cl100k_base",
) -> TextSplitter:
    """A splitter on token counts. The tiktoken encoding is downloaded
    on first use."""
    _check_sizes(chunk_size, chunk_overlap)
    return TokenTextSplitter(
        encoding_name=encoding_name,
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
    )


def markdown_splitter(chunk_size: int, chunk_overlap: int) -> TextSplitter:
    """A splitter respecting markdown structure."""
    _check_sizes(chunk_size, chunk_overlap)
    return MarkdownTextSplitter(
        chunk_size=chunk_size, chunk_overlap=chunk_overlap
    )


def splitter_from_settings(settings: SplitterSettings) -> TextSplitter:
    """A recursive character splitter with the configured sizes."""
    return recursive_splitter(settings.chunk_size, settings.chunk_overlap)


def split_text(splitter: TextSplitter, text: str) -> list[str]:
    """The chunks of text. An empty text has no chunks."""
    if not text.strip():
        return []
    return splitter.split_text(text)
