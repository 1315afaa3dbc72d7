# Chat completion client shared by every agent.
# Date: 2025-06-11
# Version: 0.2.0

from functools import lru_cache
from openai import AsyncOpenAI, APIError
from pydantic import ValidationError
from typing import List, Optional, Dict, Any, Sequence, Union

from agent_network.core.config import Settings, get_settings
from agent_network.core.exceptions import LLMConnectionError
from agent_network.models.common import Completion, Message, TokenUsage
from agent_network.utils.logger import console

MessageLike = Union[Message, Dict[str, Any]]


def _provider_config(settings: Settings, provider: str) -> tuple[Optional[str], str, Optional[str]]:
    """Returns (api_key, model, base_url) for the given provider name."""
    providers = {
        "OPENAI": (settings.OPENAI_API_KEY, settings.OPENAI_MODEL, settings.OPENAI_BASE_URL),
        "DEEPSEEK_CHAT": (settings.DEEPSEEK_CHAT_API_KEY, settings.DEEPSEEK_CHAT_MODEL, settings.DEEPSEEK_CHAT_BASE_URL),
        "GEMINI": (settings.GEMINI_API_KEY, settings.GEMINI_MODEL, settings.GEMINI_BASE_URL),
        "CLAUDE": (settings.CLAUDE_API_KEY, settings.CLAUDE_MODEL, settings.CLAUDE_BASE_URL),
    }
    if provider not in providers:
        raise ValueError(f"Unsupported or misconfigured LLM provider: {provider}")
    return providers[provider]


def _api_error_message(e: APIError) -> str:
    message = str(e.body) if e.body is not None else (e.message or "Unknown API Error")
    if isinstance(e.body, dict):
        message = e.body.get("message", "Unknown API Error")
    return message


class LLMConnector:
    """
    Thin async wrapper over an OpenAI-compatible chat completions endpoint.

    Every call either returns a Completion or raises LLMConnectionError;
    provider failures are never turned into assistant text.
    """
    def __init__(self, client: AsyncOpenAI, default_model: str, temperature: Optional[float] = None):
        self._client = client
        self.default_model = default_model
        self.temperature = temperature

    async def complete(
        self,
        messages: Sequence[MessageLike],
        tools: Optional[List[Dict[str, Any]]] = None,
        tool_choice: str = "auto",
        model: Optional[str] = None,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> Completion:
        """
        Sends one chat completion request.

        Args:
            messages: The conversation so far, in order.
            tools: OpenAI function definitions to advertise, if any.
            tool_choice: Tool choice mode; only sent when tools are given.
            model: Overrides the connector's default model for this call.
            response_format: e.g. {"type": "json_object"} for JSON mode.

        Returns:
            The assistant message and the token usage of the call.
        """
        request_params: Dict[str, Any] = {
            "model": model or self.default_model,
            "messages": [m.to_api() if isinstance(m, Message) else m for m in messages],
        }
        if tools:
            request_params["tools"] = tools
            request_params["tool_choice"] = tool_choice
        if response_format:
            request_params["response_format"] = response_format
        if self.temperature is not None:
            request_params["temperature"] = self.temperature

        try:
            response = await self._client.chat.completions.create(**request_params)
        except APIError as e:
            message = _api_error_message(e)
            console.error(f"An API error occurred: {message}")
            raise LLMConnectionError(f"Error from LLM provider: {message}") from e

        if not response.choices:
            console.error("LLM response contained no choices.")
            raise LLMConnectionError("LLM response contained no choices.")

        raw_message = response.choices[0].message.model_dump(exclude_none=True)
        # Only function tool calls can be dispatched
        if raw_message.get("tool_calls"):
            raw_message["tool_calls"] = [tc for tc in raw_message["tool_calls"] if tc.get("type", "function") == "function"] or None
        raw_message["role"] = "assistant"

        try:
            message = Message.model_validate(raw_message)
        except ValidationError as e:
            console.error(f"Malformed message in LLM response: {e}")
            raise LLMConnectionError(f"Malformed message in LLM response: {e}") from e

        total_tokens = response.usage.total_tokens if response.usage else 0
        return Completion(message=message, usage=TokenUsage(total_tokens=total_tokens))


@lru_cache
def get_llm_connector() -> LLMConnector:
    """
    Builds the connector for the configured LLM_PROVIDER.

    Raises:
        ValueError: If the configured provider is not supported.
    """
    settings = get_settings()
    api_key, model, base_url = _provider_config(settings, settings.LLM_PROVIDER)
    client = AsyncOpenAI(
        api_key=api_key,
        base_url=base_url,
        timeout=settings.LLM_TIMEOUT_SECONDS,
    )
    console.info(f"LLM connector ready for provider '{settings.LLM_PROVIDER}' with model '{model}'.")
    return LLMConnector(client, model, temperature=settings.LLM_TEMPERATURE)
