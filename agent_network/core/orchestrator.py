# The routing loop: model call, tool dispatch, repeat until the model stops asking for tools.
# Date: 2025-06-13
# Version: 4.0.0

import asyncio
import time
from typing import Any, List, Optional, Sequence

from agent_network.core.events import EventLog
from agent_network.core.history import DEFAULT_HISTORY_LIMIT, append_exchange
from agent_network.core.tool_registry import ToolRegistry
from agent_network.models.agent_models import NetworkResult, ToolCallRecord
from agent_network.models.common import Completion, HistoryEntry, Message, StopReason, ToolCall
from agent_network.services.llm_connector import LLMConnector
from agent_network.tools.base_tool import ToolContext
from agent_network.utils.logger import console

DEFAULT_MAX_ITERATIONS = 10

PREVIEW_LENGTH = 200

MAX_STEPS_MESSAGE = "I have reached the maximum number of steps without finding a final answer. " \
"Please try reformulating your request."

TIMEOUT_MESSAGE = "I ran out of time before finishing this request. Please try again with a simpler request."


def preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    return text[:length]


def _arguments_for_event(tool_call: ToolCall) -> Any:
    try:
        return tool_call.function.parsed_arguments()
    except ValueError:
        return tool_call.function.arguments


class RoutingLoop:
    """
    Drives one conversation turn through the model and the tool registry.

    The loop is stateless between runs: prior history comes in as an
    argument and the updated history goes out on the result. It ends when
    the model answers without tool calls, after `max_iterations` model
    calls, or once `timeout_seconds` have elapsed; the last two end the
    run early with whatever text was produced so far.
    """
    def __init__(
        self,
        llm: LLMConnector,
        registry: ToolRegistry,
        system_prompt: str,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        timeout_seconds: Optional[float] = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        self.llm = llm
        self.registry = registry
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self.timeout_seconds = timeout_seconds
        self.history_limit = history_limit

    def build_messages(self, user_message: str, history: Sequence[HistoryEntry]) -> List[Message]:
        messages = [Message(role="system", content=self.system_prompt)]
        messages.extend(Message(role=entry.role, content=entry.content) for entry in history)
        messages.append(Message(role="user", content=user_message))
        return messages

    def _remaining(self, started_at: float) -> Optional[float]:
        if self.timeout_seconds is None:
            return None
        return self.timeout_seconds - (time.monotonic() - started_at)

    async def _with_deadline(self, awaitable, started_at: float):
        remaining = self._remaining(started_at)
        if remaining is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=max(remaining, 0))

    async def _call_model(self, messages: List[Message], model: Optional[str], started_at: float) -> Completion:
        return await self._with_deadline(
            self.llm.complete(
                messages=list(messages),
                tools=self.registry.get_definitions(),
                tool_choice="auto",
                model=model,
            ),
            started_at,
        )

    async def _run_tool(self, tool_call: ToolCall, context: ToolContext, started_at: float) -> str:
        try:
            return await self._with_deadline(
                self.registry.execute(tool_call.name, context, tool_call.function.arguments),
                started_at,
            )
        except asyncio.TimeoutError:
            console.warning(f"Tool '{tool_call.name}' did not finish before the request deadline.")
            return f"Error executing tool '{tool_call.name}': timed out"

    async def run(
        self,
        user_message: str,
        history: Optional[Sequence[HistoryEntry]] = None,
        model: Optional[str] = None,
    ) -> NetworkResult:
        history = list(history or [])
        events = EventLog()
        context = ToolContext(events=events, model=model)
        started_at = time.monotonic()

        events.emit("network-start", {"message": user_message})
        console.rule("Network Agent")
        console.info(f"Routing message with {len(history)} history entries (model: {model or 'default'}).")

        messages = self.build_messages(user_message, history)
        executed_primitives: List[str] = []
        tool_records: List[ToolCallRecord] = []
        total_tokens = 0
        iterations = 0
        response = ""
        stop_reason: StopReason = "complete"

        while True:
            if iterations >= self.max_iterations:
                stop_reason = "max_iterations"
                console.warning(f"Stopping after {iterations} routing rounds without a final answer.")
                break
            remaining = self._remaining(started_at)
            if remaining is not None and remaining <= 0:
                stop_reason = "timeout"
                console.warning("Routing deadline reached before the next model call.")
                break

            iterations += 1
            events.emit("routing-agent-start", {"iteration": iterations})
            console.info(f"Routing agent analyzing request (round {iterations})...")
            try:
                completion = await self._call_model(messages, model, started_at)
            except asyncio.TimeoutError:
                stop_reason = "timeout"
                console.warning("Routing deadline reached while waiting for the model.")
                break

            assistant_message = completion.message
            tool_calls = assistant_message.tool_calls or []
            events.emit("routing-agent-end", {"iteration": iterations, "tool_calls": [tc.name for tc in tool_calls]})
            total_tokens += completion.usage.total_tokens
            if assistant_message.content:
                response = assistant_message.content

            if not tool_calls:
                break

            tool_messages: List[Message] = []
            for tool_call in tool_calls:
                events.emit("tool-execution-start", {"tool": tool_call.name, "args": _arguments_for_event(tool_call)})
                result = await self._run_tool(tool_call, context, started_at)
                executed_primitives.append(tool_call.name)
                tool_records.append(ToolCallRecord(tool=tool_call.name, input=tool_call.function.arguments, output=result))
                events.emit("tool-execution-end", {"tool": tool_call.name, "result": preview(result)})
                tool_messages.append(Message(role="tool", tool_call_id=tool_call.id, content=result))

            messages.append(Message(role="assistant", content=assistant_message.content, tool_calls=tool_calls))
            messages.extend(tool_messages)
            events.emit("network-step-finish", {"tools": list(executed_primitives)})

        if not response and stop_reason == "max_iterations":
            response = MAX_STEPS_MESSAGE
        elif not response and stop_reason == "timeout":
            response = TIMEOUT_MESSAGE

        events.emit("network-complete", {"response": preview(response), "stop_reason": stop_reason})
        console.success(f"Network complete after {iterations} rounds ({stop_reason}).")
        console.display_event_trace(events)

        return NetworkResult(
            message=user_message,
            response=response,
            events=events.events,
            executed_primitives=executed_primitives,
            tool_calls=tool_records,
            tokens=total_tokens,
            iterations=iterations,
            stop_reason=stop_reason,
            history=append_exchange(history, user_message, response, limit=self.history_limit),
        )
