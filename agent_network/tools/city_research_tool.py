# A tool that runs the city research workflow.
# Date: 2025-06-14
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import BaseTool, ToolContext
from agent_network.workflows.city import CityWorkflow
from agent_network.utils.logger import console


class CityResearchInput(BaseModel):
    """Input model for the city research tool."""
    city: str = Field(..., description="The name of the city to research")


class CityResearchTool(BaseTool):
    name: str = "city_research"
    description: str = "Handles city-specific research tasks. First gathers factual information about " \
    "the city, then synthesizes that research into a full written report. Use this when the user " \
    "wants comprehensive information about a specific city."
    args_schema: Type[BaseModel] = CityResearchInput

    def __init__(self, workflow: CityWorkflow):
        self._workflow = workflow

    async def execute(self, context: ToolContext, city: str) -> str:
        console.info(f"Executing tool '{self.name}' for city: '{city}'")
        context.events.emit("workflow-execution-start", {"workflow": "city"})
        result = None
        try:
            result = await self._workflow.run(city=city, model=context.model)
        finally:
            end = {"workflow": "city", "completed": result is not None}
            if result is not None:
                end["word_count"] = result.report.word_count
            context.events.emit("workflow-execution-end", end)
        return result.report.content
