from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai import APIError
from openai.types.chat import ChatCompletion

from agent_network.core.exceptions import LLMConnectionError
from agent_network.models.common import Message
from agent_network.services.llm_connector import LLMConnector


def chat_completion(message: dict, total_tokens: int = 42, choices: bool = True) -> ChatCompletion:
    return ChatCompletion.model_validate({
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-5-mini",
        "choices": [{"index": 0, "finish_reason": "stop", "message": message}] if choices else [],
        "usage": {"prompt_tokens": 30, "completion_tokens": 12, "total_tokens": total_tokens},
    })


def connector_returning(response) -> LLMConnector:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=response)
    return LLMConnector(client, default_model="gpt-5-mini")


class TestLLMConnector:
    """Tests for the chat completion connector."""

    @pytest.mark.asyncio
    async def test_returns_message_and_usage(self):
        connector = connector_returning(chat_completion({"role": "assistant", "content": "Hello"}))

        completion = await connector.complete([Message(role="user", content="Hi")])

        assert completion.message.content == "Hello"
        assert completion.message.tool_calls is None
        assert completion.usage.total_tokens == 42
        kwargs = connector._client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-5-mini"
        assert kwargs["messages"] == [{"role": "user", "content": "Hi"}]
        assert "tools" not in kwargs

    @pytest.mark.asyncio
    async def test_parses_tool_calls(self):
        connector = connector_returning(chat_completion({
            "role": "assistant",
            "content": None,
            "tool_calls": [{
                "id": "call_1",
                "type": "function",
                "function": {"name": "get_weather", "arguments": "{\"location\": \"Paris\"}"},
            }],
        }))
        tools = [{"type": "function", "function": {"name": "get_weather", "parameters": {}}}]

        completion = await connector.complete([Message(role="user", content="Weather?")], tools=tools, model="gpt-5")

        call = completion.message.tool_calls[0]
        assert call.id == "call_1"
        assert call.name == "get_weather"
        assert call.function.parsed_arguments() == {"location": "Paris"}
        kwargs = connector._client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-5"
        assert kwargs["tools"] == tools
        assert kwargs["tool_choice"] == "auto"

    @pytest.mark.asyncio
    async def test_passes_response_format(self):
        connector = connector_returning(chat_completion({"role": "assistant", "content": "{}"}))
        await connector.complete([{"role": "user", "content": "plan"}], response_format={"type": "json_object"})

        kwargs = connector._client.chat.completions.create.await_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}

    @pytest.mark.asyncio
    async def test_api_error_becomes_connection_error(self):
        client = MagicMock()
        request = httpx.Request("POST", "https://api.test/v1/chat/completions")
        client.chat.completions.create = AsyncMock(
            side_effect=APIError("rate limited", request, body={"message": "Rate limit exceeded"})
        )

        with pytest.raises(LLMConnectionError, match="Rate limit exceeded"):
            await LLMConnector(client, "gpt-5-mini").complete([Message(role="user", content="Hi")])

    @pytest.mark.asyncio
    async def test_empty_choices_is_an_error(self):
        connector = connector_returning(chat_completion({}, choices=False))
        with pytest.raises(LLMConnectionError):
            await connector.complete([Message(role="user", content="Hi")])
