"""Run the examples against the debug model"""

# pyright: basic

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from langchain_text_splitters import RecursiveCharacterTextSplitter

from lcdemo.config.config import Settings
from lcdemo.examples import (
    run_agents,
    run_basic_llm,
    run_chains,
    run_document_processing,
    run_memory,
    run_output_parsers,
    run_prompt_templates,
    run_streaming,
)
from lcdemo.examples.chains import converse
from lcdemo.examples.streaming import (
    BOLD,
    RESET,
    KeywordHighlighter,
    StreamStatistics,
)
from lcdemo.language_models.langchain.chains import create_chain
from lcdemo.language_models.memory import Turn
from lcdemo.language_models.langchain.models import create_model_from_spec
from lcdemo.utils.logging import LoglistLogger


def debug_settings(message: str = "yes", **kwargs) -> Settings:
    return Settings(
        model={
            'model': "Debug/debug",
            'provider_params': {'message': message},
        },
        **kwargs,
    )


def offline_token_splitter(chunk_size, chunk_overlap, encoding_name):
    # character counts in place of the downloaded tiktoken encoding
    return RecursiveCharacterTextSplitter(
        chunk_size=chunk_size, chunk_overlap=chunk_overlap
    )


class ExampleTestCase(unittest.TestCase):

    def run_example(self, runner, settings: Settings | None = None):
        logger = LoglistLogger()
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            runner(settings or debug_settings(), logger)
        return buffer.getvalue(), logger


class TestBasicLLM(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(run_basic_llm)
        self.assertIn("Basic LLM Example", output)
        self.assertIn("Response: yes", output)
        self.assertIn("Example 3: Max Tokens Control", output)
        self.assertEqual(logger.count_logs(), 0)

    def test_model_failure(self):
        with mock.patch(
            "lcdemo.examples.common.create_model_from_settings",
            side_effect=ImportError("no provider package"),
        ):
            output, logger = self.run_example(run_basic_llm)
        self.assertNotIn("Example 1", output)
        self.assertEqual(logger.count_logs(level=3), 1)
        self.assertIn("Could not create language model", logger.get_logs()[0])

    def test_completion_failure(self):
        with mock.patch(
            "lcdemo.examples.basic_llm.complete",
            side_effect=RuntimeError("rate limited"),
        ):
            output, logger = self.run_example(run_basic_llm)
        self.assertNotIn("Example 2", output)
        logs = logger.get_logs()
        self.assertEqual(len(logs), 1)
        self.assertIn("rate limited", logs[0])


class TestChains(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(run_chains)
        self.assertIn("Step 3 - Tagline: yes", output)
        self.assertIn("Turn 3 - Assistant: yes", output)
        self.assertEqual(logger.count_logs(), 0)

    def test_converse_history(self):
        model = create_model_from_spec(
            "Debug/debug", provider_params={'message': "Paris"}
        )
        chain = create_chain(model, "{history}Human: {input}")
        turns: list[Turn] = []
        converse(chain, turns, "Capital of France?")
        turn = converse(chain, turns, "Famous for?")
        self.assertEqual(turn, Turn(human="Famous for?", assistant="Paris"))
        self.assertEqual(
            [t.human for t in turns], ["Capital of France?", "Famous for?"]
        )


class TestPromptTemplates(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(run_prompt_templates)
        self.assertIn(
            "Rendered: 'Explain gravity to a 5-year-old in 2-3 sentences.'",
            output,
        )
        for concept in ("gravity", "photosynthesis", "democracy"):
            self.assertIn(f"Concept: {concept}", output)
        self.assertIn("Level: advanced", output)
        self.assertEqual(logger.count_logs(), 0)


class TestMemory(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(
            run_memory, debug_settings(memory={'window_size': 2})
        )
        self.assertIn("Keeps only the last 2 exchanges", output)
        self.assertEqual(logger.count_logs(), 0)
        # the window no longer shows the first two exchanges
        visible = output.split("History visible to the model:")[1]
        self.assertNotIn("My name is Bob", visible)
        self.assertNotIn("I live in Lisbon", visible)
        self.assertIn("What is my name?", visible)


class TestAgents(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(
            run_agents, debug_settings("The answer is 16.")
        )
        self.assertIn("Result: 4.00", output)
        self.assertIn("Result: 1024.00", output)
        self.assertIn("Result: 42.00", output)
        self.assertIn("Result: fedcba", output)
        self.assertIn("Tool error: invalid number", output)
        self.assertIn("Answer: The answer is 16.", output)
        self.assertEqual(logger.count_logs(), 0)


class TestDocumentProcessing(ExampleTestCase):

    def test_run(self):
        with mock.patch(
            "lcdemo.examples.document_processing.token_splitter",
            offline_token_splitter,
        ):
            output, logger = self.run_example(run_document_processing)
        self.assertIn("Total chunks:", output)
        self.assertIn("Total token-based chunks:", output)
        self.assertIn("Total markdown chunks:", output)
        self.assertIn("Small chunks (size 50):", output)
        self.assertIn("Chunk 1: Name,Age,City", output)
        self.assertIn("Summary:", output)
        self.assertEqual(logger.count_logs(), 0)

    def test_failed_step_continues(self):
        with mock.patch(
            "lcdemo.examples.document_processing.token_splitter",
            side_effect=OSError("no network"),
        ):
            output, logger = self.run_example(run_document_processing)
        self.assertNotIn("Total token-based chunks:", output)
        self.assertIn("Summary:", output)
        self.assertEqual(logger.count_logs(), 1)


class TestOutputParsers(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(run_output_parsers)
        self.assertEqual(output.count("Is question? True"), 4)
        self.assertIn("Found 0 sections", output)
        # 'yes' is not valid JSON: person and movies are not parsed
        self.assertEqual(logger.count_logs(level=1), 2)
        self.assertEqual(logger.count_logs(level=3), 0)

    def test_parsed_json(self):
        person = (
            '{"name": "John", "age": 35, "occupation": "engineer", '
            '"hobbies": ["hiking"]}'
        )
        output, logger = self.run_example(
            run_output_parsers, debug_settings(person)
        )
        self.assertIn("  Name: John", output)
        self.assertIn("  Hobbies: hiking", output)
        # the movies parser is given the person object
        self.assertEqual(logger.count_logs(level=1), 1)


class TestStreaming(ExampleTestCase):

    def test_run(self):
        output, logger = self.run_example(
            run_streaming,
            debug_settings("cloud computing stores data remotely"),
        )
        self.assertIn("Characters streamed: 36", output)
        self.assertIn("Approximate words: 5", output)
        self.assertIn("Time to first token:", output)
        self.assertIn(f"{BOLD}cloud{RESET}", output)
        self.assertIn("Summary:", output)
        self.assertEqual(logger.count_logs(), 0)

    def test_statistics(self):
        stats = StreamStatistics()
        for chunk in ("Hel", "lo wor", "ld ", " again\n"):
            stats.add(chunk)
        self.assertEqual(stats.chars, 19)
        self.assertEqual(stats.words, 3)

    def test_highlighter(self):
        highlighter = KeywordHighlighter(["cloud", "data"])
        self.assertEqual(highlighter.format("The "), "The ")
        self.assertEqual(highlighter.format("clo"), "clo")
        self.assertEqual(highlighter.format("ud"), f"{BOLD}ud{RESET}")
        self.assertEqual(highlighter.format(" Data"), f"{BOLD} Data{RESET}")


if __name__ == "__main__":
    unittest.main()
