# Day planner agent: structured daily plans from natural language, via JSON mode.
# Date: 2025-06-14
# Version: 0.1.0

import json
from datetime import datetime, timezone
from pydantic import ValidationError
from typing import List, Optional

from agent_network.models.agent_models import (
    Activity,
    DayPlan,
    DayPlannerOutput,
    PlanHistoryEntry,
    PlanType,
    TimeBlock,
)
from agent_network.models.common import Message
from agent_network.services.llm_connector import LLMConnector
from agent_network.services.session_manager import ThreadStateStore
from agent_network.utils.logger import console

HISTORY_KEY = "history"
HISTORY_CAPACITY = 5
PROMPT_PREVIEW_LENGTH = 50

_PLAN_FOCUS = {
    "work": "professional tasks",
    "personal": "personal activities",
    "mixed": "a mix of both",
}

PLANNER_SYSTEM_PROMPT = """You are a day planning assistant. Create a structured daily plan based on the user's description.

Return a JSON object with this exact structure:
{{
  "plan": [
    {{
      "name": "Morning",
      "activities": [
        {{
          "name": "Activity name",
          "startTime": "HH:MM",
          "endTime": "HH:MM",
          "description": "Brief description",
          "priority": "high" | "medium" | "low"
        }}
      ]
    }}
  ],
  "summary": "Brief summary of the day"
}}

Guidelines:
- Create 2-4 time blocks (Morning, Afternoon, Evening, Night)
- Each block should have 2-5 activities
- Plan type is: {plan_type} (focus on {focus})
- Be realistic with time estimates
- Return ONLY valid JSON, no additional text"""


def fallback_plan() -> DayPlan:
    """The plan returned whenever the model's JSON cannot be used."""
    return DayPlan(
        plan=[
            TimeBlock(
                name="Morning",
                activities=[
                    Activity(
                        name="Plan your day",
                        start_time="09:00",
                        end_time="09:30",
                        description="Take time to organize your schedule",
                        priority="high",
                    )
                ],
            )
        ],
        summary="A simple day plan to get started.",
    )


def parse_plan(content: Optional[str]) -> DayPlan:
    """Parses the model's JSON into a DayPlan, or returns the fallback plan."""
    try:
        return DayPlan.model_validate(json.loads(content or ""))
    except (json.JSONDecodeError, ValidationError) as e:
        console.warning(f"Could not parse day plan from model output, using fallback plan: {e}")
        return fallback_plan()


def truncate(text: str, length: int) -> str:
    return f"{text[:length]}..." if len(text) > length else text


class DayPlannerAgent:
    """Creates a plan with one JSON-mode call and records it in the thread's planning history."""
    def __init__(self, llm: LLMConnector, store: ThreadStateStore):
        self._llm = llm
        self._store = store

    async def run(
        self,
        thread_id: str,
        prompt: str,
        plan_type: PlanType = "mixed",
        model: Optional[str] = None,
    ) -> DayPlannerOutput:
        console.rule("Day Planner")
        model_name = model or self._llm.default_model
        console.info(f"Planning a {plan_type} day with {model_name} (prompt length {len(prompt)}).")

        system_prompt = PLANNER_SYSTEM_PROMPT.format(plan_type=plan_type, focus=_PLAN_FOCUS[plan_type])
        completion = await self._llm.complete(
            messages=[
                Message(role="system", content=system_prompt),
                Message(role="user", content=prompt),
            ],
            model=model,
            response_format={"type": "json_object"},
        )
        tokens = completion.usage.total_tokens
        day_plan = parse_plan(completion.message.content)
        total_activities = sum(len(block.activities) for block in day_plan.plan)

        entry = PlanHistoryEntry(
            model=model_name,
            thread_id=thread_id,
            prompt=truncate(prompt, PROMPT_PREVIEW_LENGTH),
            timestamp=datetime.now(timezone.utc).isoformat(),
            tokens=tokens,
            plan_type=plan_type,
            activity_count=total_activities,
        )
        state = self._store.for_thread(thread_id)
        await state.push(HISTORY_KEY, entry.model_dump(), HISTORY_CAPACITY)
        history = await self.get_history(thread_id)

        console.display_data_as_table(
            {"tokens": tokens, "activities": total_activities, "history": len(history)},
            title="Plan complete",
        )
        return DayPlannerOutput(
            plan=day_plan.plan,
            summary=day_plan.summary,
            total_activities=total_activities,
            history=history,
            thread_id=thread_id,
            tokens=tokens,
        )

    async def get_history(self, thread_id: str) -> List[PlanHistoryEntry]:
        raw = await self._store.for_thread(thread_id).get(HISTORY_KEY, [])
        return [PlanHistoryEntry.model_validate(item) for item in raw]

    async def clear_history(self, thread_id: str) -> None:
        await self._store.for_thread(thread_id).delete(HISTORY_KEY)
