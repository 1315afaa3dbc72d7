# The module provides a FastAPI application that serves as the main entry point for the agent network server.
# Date: 2025-06-11
# Version: 0.2.0

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from agent_network.api.v1.api import api_router
from agent_network.core.config import get_settings
from agent_network.core.exceptions import LLMConnectionError, StateStoreError
from agent_network.utils.logger import console

console.set_level(get_settings().LOG_LEVEL)

app = FastAPI(
    title="Agent Network",
    version="0.1.0",
    description="A routing agent that delegates to research, writing, weather and city tools.",
)


@app.exception_handler(LLMConnectionError)
async def llm_connection_error_handler(request: Request, exc: LLMConnectionError):
    console.display_error_panel("LLM Connection Error", str(exc))
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(StateStoreError)
async def state_store_error_handler(request: Request, exc: StateStoreError):
    console.display_error_panel("State Store Error", str(exc))
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.get("/", summary="Health Check", tags=["Status"])
def read_root():
    """Root endpoint to check if the service is alive."""
    console.info("Health check endpoint was hit.")
    return {"message": "Agent Network is alive and running!"}

# Include the v1 router with a global '/v1' prefix
app.include_router(api_router, prefix="/v1")
