from agent_network.core.events import create_event
from agent_network.evals.checks import (
    evaluate_multi_step,
    evaluate_network_routing,
    evaluate_research_quality,
    evaluate_writing_quality,
)
from agent_network.models.agent_models import NetworkResult, ResearchOutput, WritingOutput

LONG_RESPONSE = "The weather in Paris is mild today with light clouds and a gentle breeze from the west."


def network_result(executed, response=LONG_RESPONSE, events=("network-start", "network-complete")) -> NetworkResult:
    return NetworkResult(
        message="",
        response=response,
        executed_primitives=list(executed),
        events=[create_event(event_type) for event_type in events],
    )


class TestNetworkEvals:
    """Tests for routing and multi-step checks."""

    def test_weather_routing_passes(self):
        result = evaluate_network_routing("What's the weather in Paris?", network_result(["get_weather"]))
        assert result.passed
        assert result.name == "network-routing"

    def test_weather_without_weather_tool_fails(self):
        result = evaluate_network_routing("What's the weather in Paris?", network_result([]))
        assert not result.passed
        assert "get_weather" in result.reason

    def test_research_then_write_order(self):
        message = "Research bees and write an article"
        assert evaluate_multi_step(message, network_result(["research_topic", "write_content"])).passed

        wrong_order = evaluate_multi_step(message, network_result(["write_content", "research_topic"]))
        assert not wrong_order.passed
        assert "before writing" in wrong_order.reason

    def test_missing_complete_event_fails(self):
        result = evaluate_multi_step("Hello", network_result([], events=["network-start"]))
        assert result.reason == "Missing network-complete event"


class TestAgentEvals:
    """Tests for research and writing quality checks."""

    def test_good_research_passes(self):
        output = ResearchOutput(topic="Honey bees", insights=[
            "Honey bees communicate through waggle dances",
            "A colony of bees can hold 60,000 workers",
            "Queen bees can lay 2,000 eggs per day",
        ])
        assert evaluate_research_quality("Honey bees", output).passed

    def test_thin_research_fails(self):
        result = evaluate_research_quality("Honey bees", ResearchOutput(topic="Honey bees", insights=["Bees"]))
        assert not result.passed
        assert "at least 3 insights" in result.reason

    def test_writing_with_bullets_fails(self):
        content = "- Bees are great\n- Bees make honey"
        result = evaluate_writing_quality("Bees", WritingOutput(topic="Bees", content=content, word_count=7))
        assert not result.passed
        assert "bullet points" in result.reason

    def test_good_writing_passes(self):
        paragraph = " ".join(["Honey bees live in large colonies and work together."] * 7)
        content = f"{paragraph}\n\n{paragraph}"
        output = WritingOutput(topic="Honey bees", content=content, word_count=len(content.split()))
        assert evaluate_writing_quality("Honey bees", output).passed
