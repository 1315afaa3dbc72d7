# A tool to look up current weather for a location.
# Date: 2025-06-14
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import BaseTool, ToolContext
from agent_network.services.weather import WeatherLookup
from agent_network.utils.logger import console


class GetWeatherInput(BaseModel):
    """Input model for the weather tool."""
    location: str = Field(..., description="The city or location to get weather for (e.g., \"London\", \"New York\")")


class GetWeatherTool(BaseTool):
    """Retrieves current weather through the weather client. Never raises."""
    name: str = "get_weather"
    description: str = "Retrieves current weather information. Use this tool whenever up-to-date " \
    "weather data is requested for a specific location."
    args_schema: Type[BaseModel] = GetWeatherInput

    def __init__(self, weather_client: WeatherLookup):
        self._weather_client = weather_client

    async def execute(self, context: ToolContext, location: str) -> str:
        console.info(f"Executing tool '{self.name}' for location: '{location}'")
        weather = await self._weather_client.fetch(location)
        return f"Weather in {location}: {weather}"
