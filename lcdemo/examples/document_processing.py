"""Document processing example: splitting text into chunks with
several strategies. No language model is called."""

from collections.abc import Callable

from langchain_text_splitters import TextSplitter

from lcdemo.config.config import Settings
from lcdemo.documents import (
    markdown_splitter,
    recursive_splitter,
    split_text,
    splitter_from_settings,
    token_splitter,
)
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import RULE, resolve_settings

logger = get_logger(__name__)

SAMPLE_TEXT = """LangChain is a framework for developing applications powered by language models.
It enables applications that are context-aware and can reason about complex tasks.

The framework consists of several key components:
1. LLMs and Prompts: This includes prompt management, prompt optimization, and a generic interface for all LLMs.
2. Chains: Chains go beyond just a single LLM call and are sequences of calls (whether to an LLM or a different utility).
3. Data Augmented Generation: Data Augmented Generation involves specific types of chains that first interact with an external datasource to fetch data to use in the generation step.
4. Agents: Agents involve an LLM making decisions about which Actions to take, taking that Action, seeing an Observation, and repeating that until done.
5. Memory: Memory is the concept of persisting state between calls of a chain/agent.

LangChain provides a standard interface through which you can interact with many different types of LLMs.
It also provides a set of utilities for working with these LLMs, including prompt templates, output parsers, and more.

The framework is designed to be modular and extensible, allowing developers to easily swap out components or add new ones.
This makes it easy to experiment with different approaches and find the best solution for your specific use case."""

MARKDOWN_TEXT = """# LangChain Documentation

## Introduction
LangChain is a framework for developing applications powered by language models.

## Core Concepts

### LLMs
Large Language Models are the foundation of LangChain applications.

### Chains
Chains combine multiple components together.

### Agents
Agents use LLMs to decide which actions to take.

## Getting Started

### Installation
Install LangChain using your package manager.

### Basic Usage
Here's a simple example to get you started."""

CODE_TEXT = '''def main():
    print("Hello, World!")


def add(a, b):
    return a + b


def multiply(a, b):
    return a * b


def process_data(data):
    result = []
    for value in data:
        result.append(value * 2)
    return result'''

CSV_TEXT = """Name,Age,City
John,30,New York
Jane,25,Los Angeles
Bob,35,Chicago
Alice,28,Houston
Charlie,32,Phoenix"""


def _split(
    make_splitter: Callable[[], TextSplitter],
    text: str,
    label: str,
    logger: LoggerBase,
) -> list[str] | None:
    try:
        return split_text(make_splitter(), text)
    except Exception as e:
        logger.error(f"{label} splitting failed: {e}")
        return None


def run_document_processing(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates text splitting and document chunking"""
    print("📄 Document Processing Example")
    print("Demonstrates text splitting and chunking strategies\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    sizes = settings.splitter

    # Example 1
    print("Example 1: Character-based Text Splitting")
    print(
        f"Split text by character count ({sizes.chunk_size}) "
        f"with overlap ({sizes.chunk_overlap})\n"
    )
    chunks = _split(
        lambda: splitter_from_settings(sizes), SAMPLE_TEXT, "Character",
        logger,
    )
    if chunks is not None:
        print(f"Total chunks: {len(chunks)}")
        for i, chunk in enumerate(chunks, start=1):
            print(f"\n--- Chunk {i} (length: {len(chunk)}) ---\n{chunk}")

    # Example 2. The encoding is fetched by tiktoken on first use, and
    # a failure here does not stop the other examples.
    print("\n" + RULE)
    print("Example 2: Token-based Text Splitting")
    print("Split by token count for LLM context windows\n")
    chunks = _split(
        lambda: token_splitter(100, 20, sizes.encoding_name),
        SAMPLE_TEXT,
        "Token",
        logger,
    )
    if chunks is not None:
        print(f"Total token-based chunks: {len(chunks)}")
        for i, chunk in enumerate(chunks, start=1):
            print(f"\n--- Token Chunk {i} ---\n{chunk}")

    # Example 3
    print("\n" + RULE)
    print("Example 3: Markdown-aware Text Splitting")
    print("Respects markdown structure when splitting\n")
    chunks = _split(
        lambda: markdown_splitter(150, 20), MARKDOWN_TEXT, "Markdown",
        logger,
    )
    if chunks is not None:
        print(f"Total markdown chunks: {len(chunks)}")
        for i, chunk in enumerate(chunks, start=1):
            print(f"\n--- Markdown Chunk {i} ---\n{chunk}")

    # Example 4
    print("\n" + RULE)
    print("Example 4: Different Chunk Sizes")
    print("Comparing small vs large chunk sizes\n")
    small = _split(
        lambda: recursive_splitter(50, 10), CODE_TEXT, "Small chunk",
        logger,
    )
    large = _split(
        lambda: recursive_splitter(200, 20), CODE_TEXT, "Large chunk",
        logger,
    )
    if small is not None:
        print(f"Small chunks (size 50): {len(small)} chunks")
    if large is not None:
        print(f"Large chunks (size 200): {len(large)} chunks\n")

    # Example 5
    print("Example 5: Custom Separators")
    print("Split text using custom delimiters\n")
    chunks = _split(
        lambda: recursive_splitter(100, 0, separators=["\n", ","]),
        CSV_TEXT,
        "CSV",
        logger,
    )
    if chunks is not None:
        print(f"CSV chunks: {len(chunks)}")
        for i, chunk in enumerate(chunks, start=1):
            print(f"Chunk {i}: {chunk}")

    print("\n" + RULE)
    print("Summary:")
    print("- Character splitting: Good for general text")
    print("- Token splitting: Best for LLM context management")
    print("- Markdown splitting: Preserves document structure")
    print("- Custom separators: Flexible for specific formats")
    print("- Chunk overlap: Maintains context between chunks")
