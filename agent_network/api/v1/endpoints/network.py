# The module is to define the API endpoints for the agent network.
# Date: 2025-06-14
# Version: 0.1.0

from fastapi import APIRouter, Depends
from agent_network.agents.network import NetworkAgent
from agent_network.api.deps import get_network_agent
from agent_network.utils.logger import console
from agent_network.models.api_models import HistoryResponse, NetworkRequest, NetworkResponse

router = APIRouter()


@router.post("", response_model=NetworkResponse)
async def run_network(request: NetworkRequest, agent: NetworkAgent = Depends(get_network_agent)):
    """
    Runs one routing turn of the network for a thread and returns the
    answer together with the full event trace.
    """
    console.info(f"Received network request for thread_id: {request.thread_id}")

    result = await agent.run(request.thread_id, request.message, model=request.model)

    console.success(f"Network finished for thread_id: {request.thread_id} ({result.stop_reason})")
    return NetworkResponse(
        message=result.message,
        response=result.response,
        events=result.events,
        executed_primitives=result.executed_primitives,
        stop_reason=result.stop_reason,
        tokens=result.tokens,
        thread_id=request.thread_id,
        evals=result.evals,
    )


@router.get("/history", response_model=HistoryResponse)
async def get_network_history(thread_id: str, agent: NetworkAgent = Depends(get_network_agent)):
    conversation = await agent.get_history(thread_id)
    return HistoryResponse(conversation=conversation, thread_id=thread_id)


@router.delete("/history")
async def clear_network_history(thread_id: str, agent: NetworkAgent = Depends(get_network_agent)):
    await agent.clear_history(thread_id)
    return {"success": True, "thread_id": thread_id}
