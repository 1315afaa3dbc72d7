# City workflow: research a city, then write a report from that research.
# Date: 2025-06-14
# Version: 0.1.0

from typing import Optional

from agent_network.agents.research import ResearchAgent
from agent_network.agents.writing import WritingAgent
from agent_network.models.agent_models import CityReport, CityResearch, CityWorkflowOutput
from agent_network.utils.logger import console

CITY_TOPIC_SUFFIX = "history, culture, landmarks, and interesting facts"


def city_topic(city: str) -> str:
    return f"{city} - {CITY_TOPIC_SUFFIX}"


class CityWorkflow:
    """
    Fixed two-stage pipeline: research, then a report-style write-up.
    Either stage failing fails the whole workflow.
    """
    def __init__(self, research: ResearchAgent, writing: WritingAgent):
        self._research = research
        self._writing = writing

    async def run(self, city: str, model: Optional[str] = None) -> CityWorkflowOutput:
        console.rule("City Workflow")

        console.info(f"Step 1: Researching {city}...")
        research_result = await self._research.run(topic=city_topic(city), model=model)
        console.info(f"Research complete with {len(research_result.insights)} insights.")

        console.info("Step 2: Writing report...")
        writing_result = await self._writing.run(
            topic=city,
            insights=research_result.insights,
            style="report",
            model=model,
        )

        console.success(f"City workflow complete ({writing_result.word_count} words).")
        return CityWorkflowOutput(
            city=city,
            research=CityResearch(insights=research_result.insights),
            report=CityReport(content=writing_result.content, word_count=writing_result.word_count),
        )
