import json

import pytest

from conftest import EchoLLM, ScriptedLLM, reply
from agent_network.agents.day_planner import (
    HISTORY_CAPACITY,
    DayPlannerAgent,
    fallback_plan,
    parse_plan,
    truncate,
)

PLAN_JSON = json.dumps({
    "plan": [
        {
            "name": "Morning",
            "activities": [
                {"name": "Standup", "startTime": "09:00", "endTime": "09:15", "description": "Team sync", "priority": "high"},
                {"name": "Deep work", "startTime": "09:30", "endTime": "12:00", "description": "Write code", "priority": "high"},
            ],
        },
        {
            "name": "Evening",
            "activities": [
                {"name": "Gym", "startTime": "18:00", "endTime": "19:00", "description": "Workout", "priority": "medium"},
            ],
        },
    ],
    "summary": "A focused work day with a workout.",
})


class TestParsePlan:
    """Tests for turning model output into a day plan."""

    def test_parses_valid_json(self):
        plan = parse_plan(PLAN_JSON)
        assert [block.name for block in plan.plan] == ["Morning", "Evening"]
        assert plan.plan[0].activities[0].start_time == "09:00"

    @pytest.mark.parametrize("content", [
        None,
        "",
        "not json",
        "{}",
        json.dumps({"summary": "x"}),
        json.dumps({"error": "cannot plan"}),
        json.dumps({"plan": [], "summary": "Nothing to do"}),
        json.dumps({"plan": [{"activities": [{}]}]}),
    ])
    def test_unusable_output_falls_back(self, content):
        assert parse_plan(content) == fallback_plan()

    def test_fallback_plan(self):
        plan = fallback_plan()
        activity = plan.plan[0].activities[0]
        assert plan.plan[0].name == "Morning"
        assert (activity.name, activity.start_time, activity.end_time, activity.priority) == (
            "Plan your day", "09:00", "09:30", "high",
        )
        assert plan.summary == "A simple day plan to get started."

    def test_truncate(self):
        assert truncate("short", 10) == "short"
        assert truncate("a" * 60, 50) == "a" * 50 + "..."


class TestDayPlannerAgent:
    """Tests for planning and planning history."""

    @pytest.mark.asyncio
    async def test_plan_uses_json_mode_and_records_history(self, store, thread_id):
        llm = ScriptedLLM(reply(PLAN_JSON, tokens=120))
        agent = DayPlannerAgent(llm, store)

        result = await agent.run(thread_id, "I have meetings and want to work out", plan_type="work")

        assert result.total_activities == 3
        assert result.tokens == 120
        assert result.summary == "A focused work day with a workout."
        assert llm.calls[0]["response_format"] == {"type": "json_object"}
        assert "Plan type is: work (focus on professional tasks)" in llm.calls[0]["messages"][0].content
        assert len(result.history) == 1
        entry = result.history[0]
        assert (entry.model, entry.plan_type, entry.activity_count) == ("test-model", "work", 3)

    @pytest.mark.asyncio
    async def test_history_keeps_last_five_plans(self, store, thread_id):
        agent = DayPlannerAgent(EchoLLM(PLAN_JSON), store)
        for i in range(HISTORY_CAPACITY + 2):
            await agent.run(thread_id, f"plan number {i}")

        history = await agent.get_history(thread_id)
        assert len(history) == HISTORY_CAPACITY
        assert [h.prompt for h in history] == [f"plan number {i}" for i in range(2, 7)]

    @pytest.mark.asyncio
    async def test_malformed_json_still_returns_a_plan(self, store, thread_id):
        result = await DayPlannerAgent(EchoLLM("Sure! Here is your plan."), store).run(thread_id, "help")
        assert result.total_activities == 1
        assert result.plan == fallback_plan().plan

    @pytest.mark.asyncio
    async def test_clear_history(self, store, thread_id):
        agent = DayPlannerAgent(EchoLLM(PLAN_JSON), store)
        await agent.run(thread_id, "plan")
        await agent.clear_history(thread_id)
        assert await agent.get_history(thread_id) == []
