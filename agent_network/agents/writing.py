# Writing agent: turns research insights into well-structured prose.
# Date: 2025-06-14
# Version: 0.1.0

from typing import Optional, Sequence

from agent_network.models.agent_models import WritingOutput, WritingStyle
from agent_network.models.common import Message
from agent_network.services.llm_connector import LLMConnector
from agent_network.utils.logger import console

WRITING_PROMPT = """You are a professional writer. Transform the following research insights into a well-structured {style}.

Topic: {topic}

Research Insights:
{insights}

Instructions:
- Write in full paragraphs, no bullet points
- Create a cohesive narrative that flows naturally
- Include all the key insights in your writing
- Write in an engaging, informative style
- Target 200-400 words

Write the {style}:"""


def count_words(content: str) -> int:
    return len(content.split())


class WritingAgent:
    """Produces full-paragraph content (no bullet points) from a list of insights."""
    def __init__(self, llm: LLMConnector):
        self._llm = llm

    async def run(
        self,
        topic: str,
        insights: Sequence[str],
        style: WritingStyle = "blog",
        model: Optional[str] = None,
    ) -> WritingOutput:
        console.rule("Writing Agent")
        console.info(f"Writing a {style} about '{topic}' from {len(insights)} insights.")

        prompt = WRITING_PROMPT.format(
            style=style,
            topic=topic,
            insights="\n".join(f"- {insight}" for insight in insights),
        )
        completion = await self._llm.complete(
            messages=[Message(role="user", content=prompt)],
            model=model,
        )
        content = completion.message.content or ""
        word_count = count_words(content)

        console.success(f"Writing complete ({word_count} words).")
        return WritingOutput(topic=topic, content=content, word_count=word_count)
