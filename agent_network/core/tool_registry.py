# Closed registry of tools: advertises definitions and dispatches calls by name.
# Date: 2025-06-11
# Version: 0.2.0

import inspect
import re
from pydantic import BaseModel, ValidationError
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from agent_network.agents.research import ResearchAgent
from agent_network.agents.writing import WritingAgent
from agent_network.core.exceptions import ToolRegistrationError
from agent_network.models.common import FunctionCall
from agent_network.services.weather import WeatherLookup
from agent_network.tools.activities_tool import GetActivitiesTool
from agent_network.tools.base_tool import BaseTool, ToolContext
from agent_network.tools.city_research_tool import CityResearchTool
from agent_network.tools.research_tool import ResearchTopicTool
from agent_network.tools.weather_tool import GetWeatherTool
from agent_network.tools.writing_tool import WriteContentTool
from agent_network.utils.logger import console
from agent_network.workflows.city import CityWorkflow

# Same constraint OpenAI applies to function names
_TOOL_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


def unknown_tool_result(tool_name: str) -> str:
    return f"Unknown tool: {tool_name}"


def _format_validation_error(e: ValidationError) -> str:
    problems = []
    for error in e.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


class ToolRegistry:
    """
    A fixed set of tools keyed by name.

    Tools are checked when they are registered (name format, uniqueness,
    argument schema). Dispatch never raises: unknown names, malformed
    arguments and failing tools all come back as result strings.
    """
    def __init__(self, tools: Optional[Iterable[BaseTool]] = None):
        self.tools: Dict[str, BaseTool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        name = getattr(tool, "name", None)
        if not isinstance(name, str) or not _TOOL_NAME_PATTERN.match(name):
            raise ToolRegistrationError(f"Invalid tool name: {name!r}")
        if name in self.tools:
            raise ToolRegistrationError(f"Tool '{name}' is already registered.")
        schema = getattr(tool, "args_schema", None)
        if not (inspect.isclass(schema) and issubclass(schema, BaseModel)):
            raise ToolRegistrationError(f"Tool '{name}' must declare a Pydantic args_schema.")
        if not getattr(tool, "description", None):
            raise ToolRegistrationError(f"Tool '{name}' must have a description.")
        self.tools[name] = tool
        console.debug(f"Registered tool: '{name}'")

    @property
    def names(self) -> List[str]:
        return list(self.tools.keys())

    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self.tools

    def get_definitions(self) -> List[Dict[str, Any]]:
        """Returns the list of all tool definitions for the LLM."""
        return [tool.get_definition() for tool in self.tools.values()]

    def describe(self) -> str:
        return "\n".join(f"  - `{tool.name}`: {tool.description}" for tool in self.tools.values())

    async def execute(
        self,
        tool_name: str,
        context: ToolContext,
        arguments: Union[str, Mapping[str, Any], None] = None,
    ) -> str:
        """
        Runs a tool by name and returns its string result.

        Args:
            tool_name: Name requested by the model.
            context: The current invocation context.
            arguments: Either the raw JSON string from the model or a decoded mapping.
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            console.error(f"Attempted to execute unknown tool: {tool_name}")
            return unknown_tool_result(tool_name)

        try:
            if isinstance(arguments, str) or arguments is None:
                raw_args = FunctionCall(name=tool_name, arguments=arguments or "{}").parsed_arguments()
            else:
                raw_args = dict(arguments)
            validated = tool.args_schema.model_validate(raw_args)
        except ValueError as e:
            # ValidationError is a ValueError too
            detail = _format_validation_error(e) if isinstance(e, ValidationError) else str(e)
            console.warning(f"Invalid arguments for tool '{tool_name}': {detail}")
            return f"Error: invalid arguments for tool '{tool_name}': {detail}"

        try:
            result = await tool.execute(context, **validated.model_dump())
        except Exception as e:
            console.exception(f"Error executing tool '{tool_name}'")
            return f"Error executing tool '{tool_name}': {e}"
        return str(result)


def build_network_registry(
    research_agent: ResearchAgent,
    writing_agent: WritingAgent,
    city_workflow: CityWorkflow,
    weather_client: WeatherLookup,
) -> ToolRegistry:
    """The four primitives available to the network routing agent."""
    return ToolRegistry([
        GetWeatherTool(weather_client),
        ResearchTopicTool(research_agent),
        WriteContentTool(writing_agent),
        CityResearchTool(city_workflow),
    ])


def build_weather_registry(weather_client: WeatherLookup) -> ToolRegistry:
    return ToolRegistry([GetWeatherTool(weather_client)])


def build_activities_registry(weather_client: WeatherLookup) -> ToolRegistry:
    return ToolRegistry([GetWeatherTool(weather_client), GetActivitiesTool()])
