"""
domain.exceptions - Custom exception hierarchy for the proverbs agent service.

All domain-level errors inherit from DomainError so callers can catch
broad or specific exceptions as needed.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""


class ConfigurationError(DomainError):
    """Raised at startup when required configuration (e.g. the model credential) is missing."""


class ToolNotFoundError(DomainError):
    """Raised when dispatching to a tool name that is not in the catalog."""


class InvalidToolInput(DomainError):
    """Raised when a tool is called with arguments that violate its input schema."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(f"Invalid input for tool '{tool_name}': {message}")
        self.tool_name = tool_name
        self.message = message
