# Heuristic quality checks for agent outputs.
# Date: 2025-06-15
# Version: 0.1.0

import re
from typing import List, Sequence

from agent_network.models.agent_models import EvalResult, NetworkResult, ResearchOutput, WritingOutput
from agent_network.utils.logger import console

MIN_RESPONSE_LENGTH = 50
MIN_INSIGHTS = 3
MIN_INSIGHT_LENGTH = 20
MIN_WORDS = 100
MIN_PARAGRAPHS = 2
RELEVANCE_RATIO = 0.3

_BULLET_LINE = re.compile(r"^\s*[-*]\s", re.MULTILINE)
_PARAGRAPH_BREAK = re.compile(r"\n\n+")


def _result(name: str, issues: List[str], success_reason: str) -> EvalResult:
    passed = not issues
    reason = success_reason if passed else "; ".join(issues)
    if passed:
        console.info(f"[EVAL] {name} completed: passed ({reason})")
    else:
        console.warning(f"[EVAL] {name} completed: failed ({reason})")
    return EvalResult(name=name, passed=passed, reason=reason)


def _topic_words(topic: str) -> List[str]:
    return topic.lower().split()


def evaluate_network_routing(message: str, output: NetworkResult) -> EvalResult:
    """Checks that obvious request types were sent to the matching primitives."""
    issues = []
    message_lower = message.lower()
    executed = output.executed_primitives

    if "weather" in message_lower and "get_weather" not in executed:
        issues.append("Weather question should have used get_weather tool")

    if ("research" in message_lower or "facts about" in message_lower) \
            and "research_topic" not in executed and "city_research" not in executed:
        issues.append("Research request should have used research_topic or city_research")

    if len(output.response) < MIN_RESPONSE_LENGTH:
        issues.append("Response is too short to be meaningful")

    return _result("network-routing", issues, "Network routing decisions are appropriate")


def evaluate_multi_step(message: str, output: NetworkResult) -> EvalResult:
    """Checks research-then-write ordering and that the event trace is complete."""
    issues = []
    message_lower = message.lower()
    executed = output.executed_primitives

    if "write" in message_lower and "research" in message_lower:
        has_research = "research_topic" in executed
        has_writing = "write_content" in executed
        if not has_research or not has_writing:
            issues.append("Request for research + writing should use both primitives")
        elif executed.index("research_topic") > executed.index("write_content"):
            issues.append("Research should be executed before writing")

    event_types = [event.type for event in output.events]
    if "network-start" not in event_types:
        issues.append("Missing network-start event")
    if "network-complete" not in event_types:
        issues.append("Missing network-complete event")

    return _result("multi-step-handling", issues, "Multi-step task handling is correct")


def _count_relevant(topic_words: Sequence[str], texts: Sequence[str]) -> int:
    return sum(
        1 for text in texts
        if any(len(word) > 3 and word in text.lower() for word in topic_words)
    )


def evaluate_research_quality(topic: str, output: ResearchOutput) -> EvalResult:
    issues = []
    insights = output.insights

    if len(insights) < MIN_INSIGHTS:
        issues.append(f"Expected at least {MIN_INSIGHTS} insights, got {len(insights)}")

    short = [insight for insight in insights if len(insight) < MIN_INSIGHT_LENGTH]
    if short:
        issues.append(f"{len(short)} insights are too short (< {MIN_INSIGHT_LENGTH} chars)")

    relevant = _count_relevant(_topic_words(topic), insights)
    if relevant < len(insights) * RELEVANCE_RATIO:
        issues.append("Less than 30% of insights appear relevant to the topic")

    return _result("research-quality", issues, "Research output meets quality standards")


def evaluate_writing_quality(topic: str, output: WritingOutput) -> EvalResult:
    issues = []
    content = output.content

    if output.word_count < MIN_WORDS:
        issues.append(f"Content too short: {output.word_count} words (minimum {MIN_WORDS})")

    if "•" in content or _BULLET_LINE.search(content):
        issues.append("Content contains bullet points (should be full paragraphs)")

    paragraphs = [p for p in _PARAGRAPH_BREAK.split(content) if p.strip()]
    if len(paragraphs) < MIN_PARAGRAPHS:
        issues.append(f"Expected multiple paragraphs, found {len(paragraphs)}")

    topic_words = _topic_words(topic)
    content_lower = content.lower()
    relevant_words = [word for word in topic_words if len(word) > 3 and word in content_lower]
    if len(relevant_words) < len(topic_words) * RELEVANCE_RATIO:
        issues.append("Content may not be sufficiently relevant to the topic")

    return _result("writing-quality", issues, "Writing output meets quality standards")


def run_network_evals(message: str, output: NetworkResult) -> List[EvalResult]:
    """The checks applied after every network run."""
    return [
        evaluate_network_routing(message, output),
        evaluate_multi_step(message, output),
    ]
