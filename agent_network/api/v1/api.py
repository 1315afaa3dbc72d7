# The module is to define the API router for the application.
# Date: 2025-06-11
# Version: 0.2.0

from fastapi import APIRouter
from agent_network.api.v1.endpoints import agents, assistants, memory, network, planner, session

api_router = APIRouter()

api_router.include_router(session.router, prefix="/session", tags=["Session Management"])
api_router.include_router(network.router, prefix="/network", tags=["Agent Network"])
api_router.include_router(agents.router, prefix="/agents", tags=["Agents"])
api_router.include_router(assistants.router, prefix="/assistants", tags=["Assistants"])
api_router.include_router(planner.router, prefix="/plan", tags=["Day Planner"])
api_router.include_router(memory.router, prefix="/memory", tags=["Memory"])
