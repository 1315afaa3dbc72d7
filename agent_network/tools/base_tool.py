# Base class for all tools the routing loop can dispatch.
# Date: 2025-06-11
# Version: 0.2.0

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pydantic import BaseModel
from typing import Dict, Any, Optional, Type

from agent_network.core.events import EventLog


@dataclass
class ToolContext:
    """
    Per-invocation context handed to every tool.
    Attributes:
        events: The invocation's event log; tools emit their own
            agent/workflow execution events into it.
        model: Model override requested by the caller, passed on to sub-agents.
    """
    events: EventLog = field(default_factory=EventLog)
    model: Optional[str] = None


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model describing the
            arguments the tool accepts. It is advertised to the model and
            used to validate arguments before execute() runs.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    @abstractmethod
    async def execute(self, context: ToolContext, **kwargs) -> str:
        """
        The core logic of the tool.

        Args:
            context: The current invocation context.
            **kwargs: The arguments for the tool, validated against args_schema.

        Returns:
            A string result that is fed back to the model.
        """

    def get_definition(self) -> Dict[str, Any]:
        """
        Returns the tool's definition in OpenAI's function-calling format.
        """
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.args_schema.model_json_schema()
            }
        }
