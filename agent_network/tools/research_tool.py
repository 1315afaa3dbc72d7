# A tool that hands a topic to the research agent.
# Date: 2025-06-14
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import BaseTool, ToolContext
from agent_network.agents.research import ResearchAgent
from agent_network.models.agent_models import ResearchOutput
from agent_network.utils.logger import console


class ResearchTopicInput(BaseModel):
    """Input model for the research tool."""
    topic: str = Field(..., description="The topic to research")


def format_research(result: ResearchOutput) -> str:
    bullets = "\n".join(f"• {insight}" for insight in result.insights)
    return f"Research on \"{result.topic}\":\n{bullets}"


class ResearchTopicTool(BaseTool):
    name: str = "research_topic"
    description: str = "Gathers concise research insights about a topic in bullet-point form. " \
    "Use this when you need to extract key facts about any subject."
    args_schema: Type[BaseModel] = ResearchTopicInput

    def __init__(self, research_agent: ResearchAgent):
        self._research_agent = research_agent

    async def execute(self, context: ToolContext, topic: str) -> str:
        console.info(f"Executing tool '{self.name}' for topic: '{topic}'")
        context.events.emit("agent-execution-start", {"agent": "research"})
        result = None
        try:
            result = await self._research_agent.run(topic=topic, model=context.model)
        finally:
            end = {"agent": "research", "completed": result is not None}
            if result is not None:
                end["insight_count"] = len(result.insights)
            context.events.emit("agent-execution-end", end)
        return format_research(result)
