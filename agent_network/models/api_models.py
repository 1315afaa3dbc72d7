# Request and response bodies of the HTTP API.
# Date: 2025-06-11
# Version: 0.2.0

from pydantic import BaseModel, Field
from typing import List, Optional

from agent_network.models.agent_models import (
    ChatMessage,
    EvalResult,
    PlanHistoryEntry,
    PlanType,
    ToolCallRecord,
    UserPreferences,
    WritingStyle,
)
from agent_network.models.common import HistoryEntry, NetworkEvent


class NetworkRequest(BaseModel):
    """
    Defines the request body for the /v1/network endpoint.
    Attributes:
        thread_id (str): The conversation thread the message belongs to.
        message (str): The user message to process through the network.
        model (Optional[str]): Model to use for routing and sub-agents.
    """
    thread_id: str = Field(..., description="The unique ID for the conversation thread.")
    message: str = Field(..., min_length=1, description="The user message to process through the network.")
    model: Optional[str] = Field(default=None, description="Model override for routing decisions; defaults to the configured provider model.")


class NetworkResponse(BaseModel):
    message: str
    response: str
    events: List[NetworkEvent]
    executed_primitives: List[str]
    stop_reason: str
    tokens: int
    thread_id: str
    evals: List[EvalResult] = Field(default_factory=list)


class HistoryResponse(BaseModel):
    conversation: List[HistoryEntry]
    thread_id: str


class ResearchRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="The topic to research.")
    model: Optional[str] = Field(default=None, description="AI model to use for research.")


class WritingRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="The topic being written about.")
    insights: List[str] = Field(..., description="Research insights to incorporate.")
    style: WritingStyle = Field(default="blog", description="Writing style.")
    model: Optional[str] = Field(default=None, description="AI model to use for writing.")


class AssistantRequest(BaseModel):
    message: str = Field(..., min_length=1, description="User message for the assistant.")


class AssistantResponse(BaseModel):
    response: str
    tool_calls: List[ToolCallRecord]
    tokens: int


class PlanRequest(BaseModel):
    thread_id: str = Field(..., description="The unique ID for the conversation thread.")
    prompt: str = Field(..., min_length=1, description="Description of your day or what you need to plan.")
    plan_type: PlanType = Field(default="mixed", description="Type of plan to create.")
    model: Optional[str] = Field(default=None, description="AI model to use for planning.")


class PlanHistoryResponse(BaseModel):
    history: List[PlanHistoryEntry]
    thread_id: str


class MemoryChatRequest(BaseModel):
    thread_id: str = Field(..., description="The unique ID for the conversation thread.")
    message: str = Field(..., min_length=1, description="User message to the agent.")


class MemoryHistoryResponse(BaseModel):
    messages: List[ChatMessage]
    preferences: Optional[UserPreferences] = None
    thread_id: str
    message_count: int


class NewSessionResponse(BaseModel):
    """
    Defines the response body for the /v1/session/new endpoint.
    Attributes:
        thread_id (str): The unique ID for the newly created conversation thread.
        message (str): A message indicating the thread has been created.
    """
    thread_id: str
    message: str
