# The module is to define the API endpoints for the memory agent.
# Date: 2025-06-14
# Version: 0.1.0

from fastapi import APIRouter, Depends
from agent_network.agents.memory import MemoryAgent
from agent_network.api.deps import get_memory_agent
from agent_network.utils.logger import console
from agent_network.models.agent_models import MemoryOutput
from agent_network.models.api_models import MemoryChatRequest, MemoryHistoryResponse

router = APIRouter()


@router.post("/chat", response_model=MemoryOutput)
async def chat_with_memory(request: MemoryChatRequest, agent: MemoryAgent = Depends(get_memory_agent)):
    console.info(f"Received memory chat request for thread_id: {request.thread_id}")
    return await agent.run(request.thread_id, request.message)


@router.get("/history", response_model=MemoryHistoryResponse)
async def get_memory_history(thread_id: str, agent: MemoryAgent = Depends(get_memory_agent)):
    messages = await agent.get_messages(thread_id)
    preferences = await agent.get_preferences(thread_id)
    return MemoryHistoryResponse(
        messages=messages,
        preferences=None if preferences.is_empty() else preferences,
        thread_id=thread_id,
        message_count=len(messages),
    )


@router.delete("/history")
async def clear_memory(thread_id: str, agent: MemoryAgent = Depends(get_memory_agent)):
    await agent.clear(thread_id)
    return {"success": True, "thread_id": thread_id}
