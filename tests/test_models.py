"""Test model creation from settings"""

# pyright: basic

import os
import unittest
from unittest import mock

from pydantic import ValidationError

from lcdemo.config.config import LanguageModelSettings
from lcdemo.language_models.langchain.models import (
    DebugChatModel,
    langchain_models,
    create_model_from_spec,
    create_model_from_settings,
)


def reset_langchain_models():
    langchain_models.clear()


class TestDebugModel(unittest.TestCase):

    def setUp(self):
        reset_langchain_models()

    def tearDown(self):
        reset_langchain_models()

    def test_constant_message(self):
        model = create_model_from_spec(
            "Debug/debug", provider_params={'message': "canned answer"}
        )
        self.assertIsInstance(model, DebugChatModel)
        self.assertEqual(model.invoke("hello").content, "canned answer")
        self.assertEqual(model.invoke("again").content, "canned answer")

    def test_numbered_messages(self):
        model = create_model_from_spec("Debug/numbered")
        self.assertEqual(model.invoke("hello").content, "Message 1")
        self.assertEqual(model.invoke("hello").content, "Message 2")

    def test_bind_tools_ignored(self):
        model = create_model_from_spec("Debug/debug")
        self.assertIs(model.bind_tools([]), model)


class TestModelFactory(unittest.TestCase):

    def setUp(self):
        reset_langchain_models()

    def tearDown(self):
        reset_langchain_models()

    def test_memoized(self):
        model = create_model_from_spec("Debug/debug", temperature=0.7)
        same = create_model_from_settings(
            LanguageModelSettings(model="Debug/debug")
        )
        self.assertIs(model, same)
        self.assertEqual(len(langchain_models), 1)

        # different parameters, different model
        other = create_model_from_spec("Debug/debug", temperature=0.1)
        self.assertIsNot(model, other)
        self.assertEqual(len(langchain_models), 2)

    def test_invalid_source(self):
        with self.assertRaises(ValidationError):
            create_model_from_spec("cohere/command")
        with self.assertRaises(ValueError):
            create_model_from_spec("Debug")
        self.assertEqual(len(langchain_models), 0)

    def test_invalid_provider_params(self):
        with self.assertRaises(ValidationError):
            create_model_from_spec(
                "Anthropic/claude-haiku", provider_params={'seed': 1}
            )

    def test_anthropic(self):
        # no request is made at construction
        with mock.patch.dict(os.environ, {'ANTHROPIC_API_KEY': "sk-test"}):
            model = create_model_from_settings(
                LanguageModelSettings(
                    model="Anthropic/claude-sonnet-4-5-20250929",
                    max_tokens=50,
                    provider_params={'top_k': 5},
                )
            )
        self.assertEqual(model.get_name(), "ChatAnthropic")
        self.assertEqual(model.max_tokens, 50)  # type: ignore


if __name__ == "__main__":
    unittest.main()
