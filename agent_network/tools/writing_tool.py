# A tool that hands research insights to the writing agent.
# Date: 2025-06-14
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import List, Optional, Type
from .base_tool import BaseTool, ToolContext
from agent_network.agents.writing import WritingAgent
from agent_network.models.agent_models import WritingStyle
from agent_network.utils.logger import console


class WriteContentInput(BaseModel):
    """Input model for the writing tool."""
    topic: str = Field(..., description="The topic being written about")
    insights: List[str] = Field(..., description="Research insights to incorporate into the writing")
    style: Optional[WritingStyle] = Field(default="blog", description="The writing style to use")


class WriteContentTool(BaseTool):
    name: str = "write_content"
    description: str = "Turns research insights into well-structured written content. Use this after " \
    "gathering research to produce full paragraphs suitable for articles or blog posts."
    args_schema: Type[BaseModel] = WriteContentInput

    def __init__(self, writing_agent: WritingAgent):
        self._writing_agent = writing_agent

    async def execute(self, context: ToolContext, topic: str, insights: List[str],
                      style: Optional[WritingStyle] = "blog") -> str:
        style = style or "blog"
        console.info(f"Executing tool '{self.name}' for topic: '{topic}' in style '{style}'")
        context.events.emit("agent-execution-start", {"agent": "writing"})
        result = None
        try:
            result = await self._writing_agent.run(topic=topic, insights=insights, style=style, model=context.model)
        finally:
            end = {"agent": "writing", "completed": result is not None}
            if result is not None:
                end["word_count"] = result.word_count
            context.events.emit("agent-execution-end", end)
        return result.content
