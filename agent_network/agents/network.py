# Network agent: routes requests across the research/writing agents, the city workflow and the weather tool.
# Date: 2025-06-14
# Version: 0.1.0

from typing import List, Optional

from agent_network.core.history import DEFAULT_HISTORY_LIMIT, load_history
from agent_network.core.orchestrator import DEFAULT_MAX_ITERATIONS, RoutingLoop
from agent_network.core.tool_registry import ToolRegistry
from agent_network.evals.checks import run_network_evals
from agent_network.models.agent_models import NetworkResult
from agent_network.models.common import HistoryEntry
from agent_network.services.llm_connector import LLMConnector
from agent_network.services.session_manager import ThreadStateStore
from agent_network.utils.logger import console

HISTORY_KEY = "conversation"

NETWORK_SYSTEM_PROMPT = """You are a network of writers and researchers.
The user will ask you to research topics, get weather, or learn about cities.
Always respond with complete, helpful information.
Write in full paragraphs, like a blog post when appropriate.
Do not answer with incomplete or uncertain information.

You have access to the following tools:
{tool_definitions}

For complex tasks:
- If the user wants a written report, first use research_topic, then use write_content
- If the user asks about a specific city, consider using city_research for a complete report
- For simple weather questions, just use get_weather

Always use tools when appropriate rather than making up information."""


class NetworkAgent:
    """
    Loads a thread's conversation, runs the routing loop over it and stores
    the updated sliding window back under the same thread.
    """
    def __init__(
        self,
        llm: LLMConnector,
        registry: ToolRegistry,
        store: ThreadStateStore,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        timeout_seconds: Optional[float] = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._store = store
        self._loop = RoutingLoop(
            llm=llm,
            registry=registry,
            system_prompt=NETWORK_SYSTEM_PROMPT.format(tool_definitions=registry.describe()),
            max_iterations=max_iterations,
            timeout_seconds=timeout_seconds,
            history_limit=history_limit,
        )

    async def run(self, thread_id: str, message: str, model: Optional[str] = None) -> NetworkResult:
        state = self._store.for_thread(thread_id)
        history = load_history(await state.get(HISTORY_KEY, []))
        console.info(f"Thread '{thread_id}' has {len(history)} history entries.")

        result = await self._loop.run(message, history=history, model=model)

        await state.set(HISTORY_KEY, [entry.model_dump() for entry in result.history])
        result.evals = run_network_evals(message, result)
        return result

    async def get_history(self, thread_id: str) -> List[HistoryEntry]:
        return load_history(await self._store.for_thread(thread_id).get(HISTORY_KEY, []))

    async def clear_history(self, thread_id: str) -> None:
        await self._store.for_thread(thread_id).delete(HISTORY_KEY)
        console.info(f"Cleared network history for thread '{thread_id}'.")
