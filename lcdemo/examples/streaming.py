"""Streaming example: printing the response of the model as it
arrives, and processing the chunks on the fly."""

from time import perf_counter

from lcdemo.config.config import Settings
from lcdemo.language_models.langchain.chains import (
    complete,
    stream_completion,
)
from lcdemo.utils.logging import LoggerBase, get_logger

from .common import RULE, load_model, resolve_settings

logger = get_logger(__name__)

BOLD = "\033[1m"
RESET = "\033[0m"
KEYWORDS = ["cloud", "data", "computing"]
ML_PROMPT = "Write a 2-sentence description of machine learning"


def echo(chunk: str) -> None:
    print(chunk, end="", flush=True)


class StreamStatistics:
    """Counts characters and words of a streamed text. A word may span
    several chunks."""

    def __init__(self) -> None:
        self.chars = 0
        self.words = 0
        self._in_word = False

    def add(self, chunk: str) -> None:
        self.chars += len(chunk)
        for char in chunk:
            if char.isspace():
                self._in_word = False
            elif not self._in_word:
                self._in_word = True
                self.words += 1


class KeywordHighlighter:
    """Marks in bold the chunks that complete a keyword."""

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = [k.lower() for k in keywords]
        self.received = ""

    def format(self, chunk: str) -> str:
        self.received += chunk
        tail = self.received.lower()
        if any(tail.endswith(k) for k in self.keywords):
            return f"{BOLD}{chunk}{RESET}"
        return chunk


def run_streaming(
    settings: Settings | None = None, logger: LoggerBase = logger
) -> None:
    """Demonstrates streaming responses from LLMs"""
    print("🌊 Streaming Example")
    print("Demonstrates real-time streaming responses\n")

    settings = resolve_settings(settings, logger)
    if settings is None:
        return
    model = load_model(settings, logger)
    if model is None:
        return

    # Example 1
    print("Example 1: Basic Streaming Response")
    print("Watch the response appear in real-time\n")
    print("Prompt: 'Write a haiku about programming'\n")
    print("Response:")
    try:
        stream_completion(model, "Write a haiku about programming", echo)
    except Exception as e:
        logger.error(f"Streaming failed: {e}")
        return
    print("\n")

    # Example 2
    print(RULE)
    print("Example 2: Streaming with Character Count")
    print("Count characters as they arrive\n")
    print("Prompt: 'Explain what an API is in simple terms'\n")
    print("Response:")
    stats = StreamStatistics()

    def echo_and_count(chunk: str) -> None:
        echo(chunk)
        stats.add(chunk)

    try:
        stream_completion(
            model,
            "Explain what an API is in simple terms (2-3 sentences)",
            echo_and_count,
        )
    except Exception as e:
        logger.error(f"Streaming failed: {e}")
        return
    print("\n\nStatistics:")
    print(f"  Characters streamed: {stats.chars}")
    print(f"  Approximate words: {stats.words}\n")

    # Example 3
    print(RULE)
    print("Example 3: Streaming with Timing Metrics")
    print("Measure time to first token and total time\n")
    print("Prompt: 'List 5 programming languages'\n")
    print("Response:")
    first_token: list[float] = []

    def echo_and_time(chunk: str) -> None:
        if not first_token:
            first_token.append(perf_counter())
        echo(chunk)

    start = perf_counter()
    try:
        stream_completion(
            model,
            "List 5 popular programming languages with one sentence "
            "about each",
            echo_and_time,
        )
    except Exception as e:
        logger.error(f"Streaming failed: {e}")
        return
    total = perf_counter() - start
    print("\n\nTiming Metrics:")
    if first_token:
        print(f"  Time to first token: {first_token[0] - start:.3f}s")
    print(f"  Total response time: {total:.3f}s\n")

    # Example 4
    print(RULE)
    print("Example 4: Non-Streaming vs Streaming Comparison")
    print("Notice the difference in perceived speed\n")
    print("Non-streaming (wait for complete response):")
    print("Waiting...")
    start = perf_counter()
    try:
        response = complete(model, ML_PROMPT, temperature=0.7)
    except Exception as e:
        logger.error(f"Completion failed: {e}")
        return
    print(response)
    print(f"Time: {perf_counter() - start:.3f}s\n")

    print("Streaming (see response as it generates):")
    start = perf_counter()
    try:
        stream_completion(model, ML_PROMPT, echo)
    except Exception as e:
        logger.error(f"Streaming failed: {e}")
        return
    print(f"\nTime: {perf_counter() - start:.3f}s\n")

    # Example 5
    print(RULE)
    print("Example 5: Streaming with Custom Processing")
    print("Highlight specific words as they stream\n")
    print("Prompt: 'Describe cloud computing'\n")
    print(f"Response (highlighting {', '.join(KEYWORDS)}):")
    highlighter = KeywordHighlighter(KEYWORDS)
    try:
        stream_completion(
            model,
            "Describe cloud computing in 2 sentences",
            lambda chunk: echo(highlighter.format(chunk)),
        )
    except Exception as e:
        logger.error(f"Streaming failed: {e}")
        return
    print("\n")

    print(RULE)
    print("Summary:")
    print("- Streaming provides better user experience")
    print("- Allows processing chunks as they arrive")
    print("- Useful for real-time applications")
    print("- Can track metrics and progress")
    print("- Lower perceived latency than batch responses")
