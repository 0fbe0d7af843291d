"""Test the agent executor with fake models"""

# pyright: basic

import itertools
import unittest

from langchain_core.messages import AIMessage, ToolMessage

from lcdemo.language_models.langchain.agents import (
    AgentExecutor,
    AgentIterationLimitError,
    create_agent_executor,
    run_agent,
)
from lcdemo.language_models.langchain.models import (
    DebugChatModel,
    create_model_from_spec,
)
from lcdemo.tools import default_tools


def tool_call(name: str, tool_input: str, call_id: str) -> AIMessage:
    return AIMessage(
        content="",
        tool_calls=[
            {
                'name': name,
                'args': {'tool_input': tool_input},
                'id': call_id,
            }
        ],
    )


class TestAgentExecutor(unittest.TestCase):

    def test_recursion_limit(self):
        model = create_model_from_spec("Debug/debug")
        executor = create_agent_executor(
            model, default_tools(), max_iterations=3
        )
        self.assertEqual(executor.recursion_limit, 7)
        self.assertEqual(len(executor.tools), 4)

    def test_invalid_iterations(self):
        model = create_model_from_spec("Debug/debug")
        with self.assertRaises(ValueError):
            AgentExecutor(model, default_tools(), max_iterations=0)

    def test_direct_answer(self):
        model = create_model_from_spec(
            "Debug/debug", provider_params={'message': "It is 16."}
        )
        executor = create_agent_executor(model, default_tools())
        answer = run_agent(executor, "What is the square root of 256?")
        self.assertEqual(answer, "It is 16.")

    def test_tool_round(self):
        model = DebugChatModel(
            messages=iter(
                [
                    tool_call("SquareRoot", "256", "call_1"),
                    AIMessage(content="The square root is 16.00"),
                ]
            )
        )
        executor = create_agent_executor(model, default_tools())
        state = executor.graph.invoke(
            {'messages': [("user", "What is the square root of 256?")]},
            config={'recursion_limit': executor.recursion_limit},
        )
        tool_messages = [
            m for m in state['messages'] if isinstance(m, ToolMessage)
        ]
        self.assertEqual(len(tool_messages), 1)
        self.assertEqual(tool_messages[0].content, "16.00")
        self.assertEqual(
            state['messages'][-1].content, "The square root is 16.00"
        )

    def test_tool_error_is_observation(self):
        model = DebugChatModel(
            messages=iter(
                [
                    tool_call("SquareRoot", "-4", "call_1"),
                    AIMessage(content="Cannot do that"),
                ]
            )
        )
        executor = create_agent_executor(model, default_tools())
        answer = run_agent(executor, "What is the square root of -4?")
        self.assertEqual(answer, "Cannot do that")

    def run_scripted(self, tool_rounds: int, max_iterations: int) -> str:
        """Run an agent whose model calls a tool tool_rounds times and
        then answers 'done'."""
        script = [
            tool_call("Absolute", "-1", f"call_{n}")
            for n in range(tool_rounds)
        ] + [AIMessage(content="done")]
        model = DebugChatModel(messages=iter(script))
        executor = create_agent_executor(
            model, default_tools(), max_iterations=max_iterations
        )
        return run_agent(executor, "Compute")

    def test_iteration_boundary(self):
        # at most max_iterations model calls, the last one answering
        for tool_rounds in range(3):
            self.assertEqual(self.run_scripted(tool_rounds, 3), "done")
        with self.assertRaises(AgentIterationLimitError):
            self.run_scripted(3, 3)

    def test_iteration_boundary_small_caps(self):
        self.assertEqual(self.run_scripted(1, 2), "done")
        with self.assertRaises(AgentIterationLimitError):
            self.run_scripted(2, 2)
        self.assertEqual(self.run_scripted(0, 1), "done")
        with self.assertRaises(AgentIterationLimitError):
            self.run_scripted(1, 1)

    def test_iteration_limit(self):
        # a model that never stops calling tools
        calls = (
            tool_call("Absolute", "-1", f"call_{n}")
            for n in itertools.count()
        )
        model = DebugChatModel(messages=calls)
        executor = create_agent_executor(
            model, default_tools(), max_iterations=2
        )
        with self.assertRaises(AgentIterationLimitError):
            run_agent(executor, "Loop forever")


if __name__ == "__main__":
    unittest.main()
