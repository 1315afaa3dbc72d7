# The module is to define the API endpoints for the weather and activities assistants.
# Date: 2025-06-14
# Version: 0.1.0

from fastapi import APIRouter, Depends
from agent_network.agents.assistants import ToolAssistant
from agent_network.api.deps import get_activities_assistant, get_weather_assistant
from agent_network.models.api_models import AssistantRequest, AssistantResponse

router = APIRouter()


@router.post("/weather", response_model=AssistantResponse)
async def ask_weather(request: AssistantRequest, assistant: ToolAssistant = Depends(get_weather_assistant)):
    """Answers a weather question using the get_weather tool."""
    output = await assistant.run(request.message)
    return AssistantResponse(**output.model_dump())


@router.post("/activities", response_model=AssistantResponse)
async def suggest_activities(request: AssistantRequest, assistant: ToolAssistant = Depends(get_activities_assistant)):
    """Checks the weather, then suggests activities that suit it."""
    output = await assistant.run(request.message)
    return AssistantResponse(**output.model_dump())
