# The module is to define the API endpoints for thread management.
# Date: 2025-06-11
# Version: 0.2.0

import uuid
from fastapi import APIRouter
from agent_network.utils.logger import console
from agent_network.models.api_models import NewSessionResponse

router = APIRouter()


def new_thread_id() -> str:
    return str(uuid.uuid4())


@router.post("/new",
          response_model=NewSessionResponse)
def create_new_session():
    """
    Creates a new conversation thread and returns its unique ID.
    State is created lazily, on the first write under the thread.
    """
    thread_id = new_thread_id()
    console.info(f"New thread created: {thread_id}")
    return NewSessionResponse(
        thread_id=thread_id,
        message="New thread created successfully."
    )
