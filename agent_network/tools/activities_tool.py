# A tool that suggests activities for the current weather.
# Date: 2025-06-14
# Version: 0.1.0

import json
from pydantic import BaseModel, Field
from typing import List, Type
from .base_tool import BaseTool, ToolContext
from agent_network.utils.logger import console

# First matching keyword group wins
_ACTIVITIES_BY_WEATHER = [
    (("rain", "shower"), [
        "Visit a local museum or art gallery",
        "Catch a movie at the cinema",
        "Explore indoor shopping centers",
        "Try a new restaurant or cafe",
        "Visit a local library or bookstore",
    ]),
    (("sun", "clear"), [
        "Go for a hike or nature walk",
        "Have a picnic in the park",
        "Visit outdoor markets",
        "Try outdoor photography",
        "Go cycling or running",
    ]),
    (("cloud", "overcast"), [
        "Take a scenic drive",
        "Visit botanical gardens",
        "Go for a leisurely walk",
        "Try outdoor cafes",
        "Explore local neighborhoods",
    ]),
    (("snow",), [
        "Go skiing or snowboarding",
        "Build a snowman",
        "Have a cozy day indoors with hot cocoa",
        "Visit a winter market",
        "Try ice skating",
    ]),
]

_DEFAULT_ACTIVITIES = [
    "Explore local attractions",
    "Try a new restaurant",
    "Visit a museum",
    "Go for a walk",
    "Check out local events",
]


def suggest_activities(weather: str) -> List[str]:
    weather_lower = weather.lower()
    for keywords, activities in _ACTIVITIES_BY_WEATHER:
        if any(keyword in weather_lower for keyword in keywords):
            return list(activities)
    return list(_DEFAULT_ACTIVITIES)


class GetActivitiesInput(BaseModel):
    """Input model for the activities tool."""
    weather: str = Field(..., description="Current weather description (e.g., \"sunny\", \"rainy\", \"cloudy\")")
    location: str = Field(..., description="The location to suggest activities for")


class GetActivitiesTool(BaseTool):
    name: str = "get_activities"
    description: str = "Suggests activities based on weather conditions"
    args_schema: Type[BaseModel] = GetActivitiesInput

    async def execute(self, context: ToolContext, weather: str, location: str) -> str:
        console.info(f"Executing tool '{self.name}' for '{location}' ({weather})")
        return json.dumps({
            "location": location,
            "weatherCondition": weather,
            "suggestedActivities": suggest_activities(weather),
        })
