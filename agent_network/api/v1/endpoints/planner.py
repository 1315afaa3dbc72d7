# The module is to define the API endpoints for the day planner.
# Date: 2025-06-14
# Version: 0.1.0

from fastapi import APIRouter, Depends
from agent_network.agents.day_planner import DayPlannerAgent
from agent_network.api.deps import get_day_planner
from agent_network.models.agent_models import DayPlannerOutput
from agent_network.models.api_models import PlanHistoryResponse, PlanRequest

router = APIRouter()


@router.post("", response_model=DayPlannerOutput)
async def create_plan(request: PlanRequest, agent: DayPlannerAgent = Depends(get_day_planner)):
    return await agent.run(request.thread_id, request.prompt, plan_type=request.plan_type, model=request.model)


@router.get("/history", response_model=PlanHistoryResponse)
async def get_plan_history(thread_id: str, agent: DayPlannerAgent = Depends(get_day_planner)):
    history = await agent.get_history(thread_id)
    return PlanHistoryResponse(history=history, thread_id=thread_id)


@router.delete("/history")
async def clear_plan_history(thread_id: str, agent: DayPlannerAgent = Depends(get_day_planner)):
    await agent.clear_history(thread_id)
    return {"success": True, "thread_id": thread_id}
