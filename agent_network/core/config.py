# Configuration settings for the Agent Network service.
# Date: 2025-06-11
# Version: 0.2.0

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal, Optional


class Settings(BaseSettings):
    """
    Application settings, loaded from environment variables and an optional
    .env file, with type validation.
    Attributes:
        LLM_PROVIDER (str): Which provider block below the chat client uses.
        <PROVIDER>_API_KEY / _MODEL / _BASE_URL: Credentials and default model
            for each OpenAI-compatible provider.
        LLM_TIMEOUT_SECONDS (float): Per-request timeout for chat completions.
        LLM_TEMPERATURE (float): Sampling temperature, omitted when unset.
        STATE_BACKEND (str): 'redis' for the Redis thread store, 'memory' for
            the in-process store.
        REDIS_URL (str): Connection URL for the Redis thread store.
        STATE_TTL_SECONDS (int): Expiry applied to every thread state key.
        NETWORK_MAX_ITERATIONS (int): Upper bound on routing rounds per request.
        NETWORK_TIMEOUT_SECONDS (float): Wall-clock budget per routing request.
        HISTORY_MAX_MESSAGES (int): Sliding window size for stored history.
        WEATHER_API_BASE_URL (str): Base URL of the wttr.in-compatible service.
        OPEN_METEO_GEOCODING_URL, OPEN_METEO_FORECAST_URL (str): Open-Meteo endpoints
            used by the weather and activities assistants.
        WEATHER_TIMEOUT_SECONDS (float): Timeout for weather lookups.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # LLM Provider Switch
    LLM_PROVIDER: Literal["OPENAI", "DEEPSEEK_CHAT", "GEMINI", "CLAUDE"] = "OPENAI"
    LLM_TIMEOUT_SECONDS: float = 60.0
    LLM_TEMPERATURE: Optional[float] = None

    # OPENAI
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-5-mini"
    OPENAI_BASE_URL: Optional[str] = None

    # DEEPSEEK_CHAT
    DEEPSEEK_CHAT_API_KEY: Optional[str] = None
    DEEPSEEK_CHAT_MODEL: str = "deepseek-chat"
    DEEPSEEK_CHAT_BASE_URL: Optional[str] = "https://api.deepseek.com"

    # Gemini
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_BASE_URL: Optional[str] = "https://generativelanguage.googleapis.com/v1beta/openai/"

    # Claude
    CLAUDE_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-5"
    CLAUDE_BASE_URL: Optional[str] = "https://api.anthropic.com/v1/"

    # THREAD STATE
    STATE_BACKEND: Literal["redis", "memory"] = "redis"
    REDIS_URL: str = "redis://localhost:6379/0"
    STATE_TTL_SECONDS: int = 86400

    # ROUTING LOOP
    NETWORK_MAX_ITERATIONS: int = 10
    NETWORK_TIMEOUT_SECONDS: float = 300.0
    HISTORY_MAX_MESSAGES: int = 20

    # WEATHER_SERVICE
    WEATHER_API_BASE_URL: str = "https://wttr.in"
    OPEN_METEO_GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
    OPEN_METEO_FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
    WEATHER_TIMEOUT_SECONDS: float = 10.0

    # LOGGING
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
