# Single-purpose assistants that answer with the help of tools.
# Date: 2025-06-14
# Version: 0.1.0

from typing import Optional

from agent_network.core.orchestrator import DEFAULT_MAX_ITERATIONS, RoutingLoop
from agent_network.core.tool_registry import ToolRegistry
from agent_network.models.agent_models import AssistantOutput
from agent_network.services.llm_connector import LLMConnector
from agent_network.utils.logger import console

NO_RESPONSE_MESSAGE = "Unable to process your request."

WEATHER_SYSTEM_PROMPT = "You are a helpful weather assistant. Use the get_weather tool to fetch current " \
"weather data when users ask about weather conditions. Always provide friendly, informative responses."

ACTIVITIES_SYSTEM_PROMPT = """You are a helpful activity planner assistant. When users ask for activity suggestions:
1. First use the get_weather tool to check current weather conditions
2. Then use the get_activities tool to get activity suggestions based on the weather
3. Provide a friendly response with personalized activity recommendations

Always check the weather first before suggesting activities, as outdoor activities depend on weather conditions."""


class ToolAssistant:
    """A routing loop with a fixed prompt and tool set, and no memory between requests."""
    def __init__(
        self,
        name: str,
        llm: LLMConnector,
        registry: ToolRegistry,
        system_prompt: str,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        timeout_seconds: Optional[float] = None,
    ):
        self.name = name
        self._loop = RoutingLoop(
            llm=llm,
            registry=registry,
            system_prompt=system_prompt,
            max_iterations=max_iterations,
            timeout_seconds=timeout_seconds,
        )

    async def run(self, message: str, model: Optional[str] = None) -> AssistantOutput:
        console.info(f"{self.name.title()} assistant request: '{message[:50]}'")
        result = await self._loop.run(message, model=model)
        console.info(f"{self.name.title()} assistant used {len(result.tool_calls)} tool calls, {result.tokens} tokens.")
        return AssistantOutput(
            response=result.response or NO_RESPONSE_MESSAGE,
            tool_calls=result.tool_calls,
            tokens=result.tokens,
        )


def weather_assistant(llm: LLMConnector, registry: ToolRegistry, **kwargs) -> ToolAssistant:
    return ToolAssistant("weather", llm, registry, WEATHER_SYSTEM_PROMPT, **kwargs)


def activities_assistant(llm: LLMConnector, registry: ToolRegistry, **kwargs) -> ToolAssistant:
    return ToolAssistant("activities", llm, registry, ACTIVITIES_SYSTEM_PROMPT, **kwargs)
