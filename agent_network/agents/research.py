# Research agent: gathers concise research insights in bullet-point form.
# Date: 2025-06-14
# Version: 0.1.0

import re
from typing import List, Optional

from agent_network.models.agent_models import ResearchOutput
from agent_network.models.common import Message
from agent_network.services.llm_connector import LLMConnector
from agent_network.utils.logger import console

RESEARCH_PROMPT = """You are a research assistant. Research the following topic and provide key insights as bullet points.
Be concise and factual. Focus on extracting the most important and interesting facts.
Do not write full paragraphs - only bullet points.

Topic: {topic}

Provide 5-7 key bullet points:"""

_BULLET_MARKER = re.compile(r"^[-•*]\s*")


def parse_insights(content: str) -> List[str]:
    """Splits a bullet list into insights, dropping markers and blank lines."""
    insights = []
    for line in content.splitlines():
        insight = _BULLET_MARKER.sub("", line.strip()).strip()
        if insight:
            insights.append(insight)
    return insights


class ResearchAgent:
    """
    Extracts key facts about a topic without writing narrative content.
    One model call per run, no retries and no state between runs.
    """
    def __init__(self, llm: LLMConnector):
        self._llm = llm

    async def run(self, topic: str, model: Optional[str] = None) -> ResearchOutput:
        console.rule("Research Agent")
        console.info(f"Researching topic '{topic}' (model: {model or 'default'})")

        completion = await self._llm.complete(
            messages=[Message(role="user", content=RESEARCH_PROMPT.format(topic=topic))],
            model=model,
        )
        insights = parse_insights(completion.message.content or "")

        console.success(f"Research complete with {len(insights)} insights.")
        return ResearchOutput(topic=topic, insights=insights)
