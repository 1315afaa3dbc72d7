# Input and output models for the sub-agents, workflows and the routing loop.
# Date: 2025-06-14
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from agent_network.models.common import HistoryEntry, NetworkEvent, StopReason

WritingStyle = Literal["blog", "article", "summary", "report"]

PlanType = Literal["work", "personal", "mixed"]

Priority = Literal["high", "medium", "low"]


class ResearchOutput(BaseModel):
    """
    Result of the research agent.
    Attributes:
        topic (str): The researched topic.
        insights (List[str]): Key insights, one per bullet point.
    """
    topic: str
    insights: List[str] = Field(default_factory=list)


class WritingOutput(BaseModel):
    """
    Result of the writing agent.
    Attributes:
        topic (str): The topic written about.
        content (str): Prose in full paragraphs.
        word_count (int): Number of whitespace-delimited tokens in content.
    """
    topic: str
    content: str
    word_count: int


class CityResearch(BaseModel):
    insights: List[str] = Field(default_factory=list)


class CityReport(BaseModel):
    content: str
    word_count: int


class CityWorkflowOutput(BaseModel):
    city: str
    research: CityResearch
    report: CityReport


class ToolCallRecord(BaseModel):
    """One executed tool call, as reported back to API callers."""
    tool: str
    input: str
    output: str


class AssistantOutput(BaseModel):
    """Response of a tool-using assistant plus the tool calls it made."""
    response: str
    tool_calls: List[ToolCallRecord] = Field(default_factory=list)
    tokens: int = 0


class EvalResult(BaseModel):
    """Outcome of one heuristic quality check."""
    name: str
    passed: bool
    reason: str


class NetworkResult(BaseModel):
    """
    Outcome of one routing loop invocation.
    Attributes:
        message (str): The user message that started the run.
        response (str): The last non-empty assistant text.
        events (List[NetworkEvent]): Ordered audit trail of the run.
        executed_primitives (List[str]): Tool names in execution order.
        tool_calls (List[ToolCallRecord]): Inputs and outputs of each tool call.
        tokens (int): Total tokens reported across all model calls.
        iterations (int): Number of model calls made.
        stop_reason (StopReason): Why the loop stopped.
        history (List[HistoryEntry]): Prior history plus this exchange, capped.
        evals (List[EvalResult]): Quality checks run on this result, if any.
    """
    message: str
    response: str
    events: List[NetworkEvent] = Field(default_factory=list)
    executed_primitives: List[str] = Field(default_factory=list)
    tool_calls: List[ToolCallRecord] = Field(default_factory=list)
    tokens: int = 0
    iterations: int = 0
    stop_reason: StopReason = "complete"
    history: List[HistoryEntry] = Field(default_factory=list)
    evals: List[EvalResult] = Field(default_factory=list)


class Activity(BaseModel):
    name: str = Field(..., description="Name of the activity")
    start_time: str = Field(..., alias="startTime", description="Start time in HH:MM format")
    end_time: str = Field(..., alias="endTime", description="End time in HH:MM format")
    description: str = Field(..., description="Brief description of the activity")
    priority: Priority = Field(..., description="Priority level")

    model_config = ConfigDict(populate_by_name=True)


class TimeBlock(BaseModel):
    name: str = Field(..., description="Name of the time block (e.g., Morning, Afternoon, Evening)")
    activities: List[Activity] = Field(default_factory=list)


class DayPlan(BaseModel):
    """A plan as returned by the model; an object missing either field is unusable."""
    plan: List[TimeBlock] = Field(..., min_length=1)
    summary: str


class PlanHistoryEntry(BaseModel):
    """A past planning request, kept in the thread's capped planning history."""
    model: str
    thread_id: str
    prompt: str
    timestamp: str
    tokens: int
    plan_type: str
    activity_count: int


class DayPlannerOutput(BaseModel):
    plan: List[TimeBlock]
    summary: str
    total_activities: int
    history: List[PlanHistoryEntry] = Field(default_factory=list)
    thread_id: str
    tokens: int


class ChatMessage(BaseModel):
    """A message stored in the memory agent's sliding window."""
    role: Literal["user", "assistant"]
    content: str
    timestamp: str


class UserPreferences(BaseModel):
    name: Optional[str] = None
    interests: Optional[List[str]] = None
    facts: Optional[List[str]] = None

    def is_empty(self) -> bool:
        return not (self.name or self.interests or self.facts)


class MemoryOutput(BaseModel):
    response: str
    message_count: int
    thread_id: str
    preferences: Optional[UserPreferences] = None
