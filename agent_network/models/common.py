# Common models shared by the routing loop, agents and tools.
# Date: 2025-06-11
# Version: 0.2.0

import json
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Literal, Optional

Role = Literal["system", "user", "assistant", "tool"]

HistoryRole = Literal["user", "assistant"]

NetworkEventType = Literal[
    "network-start",
    "routing-agent-start",
    "routing-agent-end",
    "agent-execution-start",
    "agent-execution-end",
    "tool-execution-start",
    "tool-execution-end",
    "workflow-execution-start",
    "workflow-execution-end",
    "network-step-finish",
    "network-complete",
]

StopReason = Literal["complete", "max_iterations", "timeout"]


class FunctionCall(BaseModel):
    """
    The function part of a tool call.
    Attributes:
        name (str): Name of the tool the model wants to run.
        arguments (str): JSON-encoded object with the tool arguments.
    """
    name: str = Field(..., description="Name of the requested tool.")
    arguments: str = Field(default="{}", description="JSON-encoded tool arguments.")

    def parsed_arguments(self) -> Dict[str, Any]:
        """Decodes the arguments; raises ValueError unless they form a JSON object."""
        if not self.arguments or not self.arguments.strip():
            return {}
        try:
            decoded = json.loads(self.arguments)
        except json.JSONDecodeError as e:
            raise ValueError(f"arguments are not valid JSON ({e.msg})") from e
        if not isinstance(decoded, dict):
            raise ValueError("arguments must be a JSON object")
        return decoded


class ToolCall(BaseModel):
    """
    Represents a tool call made by the assistant.
    Attributes:
        id (str): Correlates the request with its tool-role result message.
        function (FunctionCall): The function name and arguments.
        type (str): The type of the tool call, always 'function'.
    """
    id: str = Field(..., description="The unique ID for the tool call.")
    function: FunctionCall = Field(..., description="The function name and arguments.")
    type: Literal["function"] = Field(default="function", description="The type of the tool call.")

    @property
    def name(self) -> str:
        return self.function.name


class Message(BaseModel):
    """
    A chat message as exchanged with the completion API.
    Attributes:
        role (Role): The role of the message sender (system, user, assistant, or tool).
        content (Optional[str]): Text content; may be None when tool_calls are present.
        tool_calls (Optional[List[ToolCall]]): Tool calls requested by the assistant.
        tool_call_id (Optional[str]): The tool call this message answers (role=tool only).
    """
    role: Role = Field(..., description="The role of the message sender.")
    content: Optional[str] = Field(default=None, description="The content of the message.")
    tool_calls: Optional[List[ToolCall]] = Field(default=None, description="A list of tool calls requested by the assistant.")
    tool_call_id: Optional[str] = Field(default=None, description="The ID of the tool call this message is a result of.")

    def to_api(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TokenUsage(BaseModel):
    total_tokens: int = 0


class Completion(BaseModel):
    """One chat completion: the assistant message plus token usage."""
    message: Message
    usage: TokenUsage = Field(default_factory=TokenUsage)


class HistoryEntry(BaseModel):
    """One persisted turn of a conversation thread."""
    role: HistoryRole
    content: str


class NetworkEvent(BaseModel):
    """
    A single entry of the routing loop's audit trail. Immutable once created.
    """
    model_config = ConfigDict(frozen=True)

    type: NetworkEventType
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    payload: Optional[Any] = None
