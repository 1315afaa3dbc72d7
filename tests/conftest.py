import json
from typing import Any, Dict, List, Optional
from uuid import uuid4

import pytest

from agent_network.core.exceptions import LLMConnectionError
from agent_network.models.common import Completion, FunctionCall, Message, TokenUsage, ToolCall
from agent_network.services.session_manager import InMemoryThreadStore


def tool_call(name: str, arguments: Optional[Dict[str, Any]] = None, call_id: Optional[str] = None) -> ToolCall:
    """Build a tool call the way the model would return it."""
    return ToolCall(
        id=call_id or f"call_{uuid4().hex[:8]}",
        function=FunctionCall(name=name, arguments=json.dumps(arguments or {})),
    )


def reply(content: Optional[str] = None, tool_calls: Optional[List[ToolCall]] = None, tokens: int = 10) -> Completion:
    """Build an assistant completion."""
    return Completion(
        message=Message(role="assistant", content=content, tool_calls=tool_calls),
        usage=TokenUsage(total_tokens=tokens),
    )


class ScriptedLLM:
    """Fake chat client that answers from a queue and records every request."""

    default_model = "test-model"

    def __init__(self, *responses) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    async def complete(self, messages, tools=None, tool_choice="auto", model=None, response_format=None) -> Completion:
        self.calls.append({
            "messages": [m.model_copy(deep=True) if isinstance(m, Message) else dict(m) for m in messages],
            "tools": tools,
            "model": model,
            "response_format": response_format,
        })
        if not self._responses:
            raise LLMConnectionError("No scripted response left")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class EchoLLM:
    """Fake chat client that always returns the same text."""

    default_model = "test-model"

    def __init__(self, content: str) -> None:
        self.content = content
        self.calls: List[List[Message]] = []

    async def complete(self, messages, tools=None, tool_choice="auto", model=None, response_format=None) -> Completion:
        self.calls.append(list(messages))
        return reply(self.content)


class FakeWeatherClient:
    """Weather client returning a fixed summary per location."""

    def __init__(self, summary: str = "Sunny +22°C 40% ↗10km/h") -> None:
        self.summary = summary
        self.locations: List[str] = []

    async def fetch(self, location: str) -> str:
        self.locations.append(location)
        return self.summary


@pytest.fixture
def store() -> InMemoryThreadStore:
    """Provide an empty in-memory thread store."""
    return InMemoryThreadStore()


@pytest.fixture
def thread_id() -> str:
    """Provide a fresh thread ID."""
    return f"thread-{uuid4()}"


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    """Provide a fake weather client."""
    return FakeWeatherClient()
