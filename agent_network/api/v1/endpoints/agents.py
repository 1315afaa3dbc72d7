# The module is to define the API endpoints that call the research and writing agents directly.
# Date: 2025-06-14
# Version: 0.2.0

from fastapi import APIRouter, Depends
from agent_network.agents.research import ResearchAgent
from agent_network.agents.writing import WritingAgent
from agent_network.api.deps import get_research_agent, get_writing_agent
from agent_network.evals.checks import evaluate_research_quality, evaluate_writing_quality
from agent_network.models.agent_models import ResearchOutput, WritingOutput
from agent_network.models.api_models import ResearchRequest, WritingRequest

router = APIRouter()


@router.post("/research", response_model=ResearchOutput)
async def research_topic(request: ResearchRequest, agent: ResearchAgent = Depends(get_research_agent)):
    output = await agent.run(request.topic, model=request.model)
    evaluate_research_quality(request.topic, output)
    return output


@router.post("/writing", response_model=WritingOutput)
async def write_content(request: WritingRequest, agent: WritingAgent = Depends(get_writing_agent)):
    output = await agent.run(request.topic, request.insights, style=request.style, model=request.model)
    evaluate_writing_quality(request.topic, output)
    return output
