# FastAPI dependencies that assemble agents from the shared collaborators.
# Date: 2025-06-14
# Version: 0.1.0

from fastapi import Depends

from agent_network.agents.assistants import ToolAssistant, activities_assistant, weather_assistant
from agent_network.agents.day_planner import DayPlannerAgent
from agent_network.agents.memory import MemoryAgent
from agent_network.agents.network import NetworkAgent
from agent_network.agents.research import ResearchAgent
from agent_network.agents.writing import WritingAgent
from agent_network.core.config import Settings, get_settings
from agent_network.core.tool_registry import (
    build_activities_registry,
    build_network_registry,
    build_weather_registry,
)
from agent_network.services.llm_connector import LLMConnector, get_llm_connector
from agent_network.services.session_manager import ThreadStateStore, get_state_store
from agent_network.services.weather import WeatherLookup, get_open_meteo_client, get_weather_client
from agent_network.workflows.city import CityWorkflow


def get_llm() -> LLMConnector:
    return get_llm_connector()


def get_store() -> ThreadStateStore:
    return get_state_store()


def get_weather() -> WeatherLookup:
    return get_weather_client()


def get_assistant_weather() -> WeatherLookup:
    return get_open_meteo_client()


def get_research_agent(llm: LLMConnector = Depends(get_llm)) -> ResearchAgent:
    return ResearchAgent(llm)


def get_writing_agent(llm: LLMConnector = Depends(get_llm)) -> WritingAgent:
    return WritingAgent(llm)


def get_network_agent(
    llm: LLMConnector = Depends(get_llm),
    store: ThreadStateStore = Depends(get_store),
    weather: WeatherLookup = Depends(get_weather),
    research: ResearchAgent = Depends(get_research_agent),
    writing: WritingAgent = Depends(get_writing_agent),
    settings: Settings = Depends(get_settings),
) -> NetworkAgent:
    registry = build_network_registry(research, writing, CityWorkflow(research, writing), weather)
    return NetworkAgent(
        llm=llm,
        registry=registry,
        store=store,
        max_iterations=settings.NETWORK_MAX_ITERATIONS,
        timeout_seconds=settings.NETWORK_TIMEOUT_SECONDS,
        history_limit=settings.HISTORY_MAX_MESSAGES,
    )


def get_weather_assistant(
    llm: LLMConnector = Depends(get_llm),
    weather: WeatherLookup = Depends(get_assistant_weather),
    settings: Settings = Depends(get_settings),
) -> ToolAssistant:
    return weather_assistant(
        llm,
        build_weather_registry(weather),
        max_iterations=settings.NETWORK_MAX_ITERATIONS,
        timeout_seconds=settings.NETWORK_TIMEOUT_SECONDS,
    )


def get_activities_assistant(
    llm: LLMConnector = Depends(get_llm),
    weather: WeatherLookup = Depends(get_assistant_weather),
    settings: Settings = Depends(get_settings),
) -> ToolAssistant:
    return activities_assistant(
        llm,
        build_activities_registry(weather),
        max_iterations=settings.NETWORK_MAX_ITERATIONS,
        timeout_seconds=settings.NETWORK_TIMEOUT_SECONDS,
    )


def get_day_planner(
    llm: LLMConnector = Depends(get_llm),
    store: ThreadStateStore = Depends(get_store),
) -> DayPlannerAgent:
    return DayPlannerAgent(llm, store)


def get_memory_agent(
    llm: LLMConnector = Depends(get_llm),
    store: ThreadStateStore = Depends(get_store),
) -> MemoryAgent:
    return MemoryAgent(llm, store)
