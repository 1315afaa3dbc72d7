# Domain exceptions raised across the Agent Network service.
# Date: 2025-06-14
# Version: 0.1.0


class AgentNetworkError(Exception):
    """Base class for all errors raised by the service."""


class LLMConnectionError(AgentNetworkError):
    """The chat completion provider failed or returned an unusable response."""


class ToolRegistrationError(AgentNetworkError):
    """A tool could not be added to a registry."""


class StateStoreError(AgentNetworkError):
    """The thread state backend rejected or failed an operation."""
