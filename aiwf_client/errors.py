"""
AIWF Client - Errors

This module defines the exception hierarchy raised by the AIWF client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# =============================================================================
# Base Exception
# =============================================================================


class AIWFClientError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Transport Errors
# =============================================================================


class AIWFConnectionError(AIWFClientError):
    """The server could not be reached."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Cannot connect to {url}: {reason}",
            details={"url": url, "reason": reason},
        )
        self.url = url
        self.reason = reason


# =============================================================================
# HTTP Errors
# =============================================================================


class AIWFHTTPError(AIWFClientError):
    """The server answered with a non-200 status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            f"HTTP Error {status_code}: {body}",
            details={"status_code": status_code, **(details or {})},
        )
        self.status_code = status_code
        self.body = body


class AIWFAuthenticationError(AIWFHTTPError):
    """The API key was missing or rejected."""
    pass


class AgentNotFoundError(AIWFHTTPError):
    """The server does not expose the requested agent."""

    def __init__(self, agent: str, body: str):
        super().__init__(404, body, details={"agent": agent})
        self.agent = agent


def error_for_status(
    status_code: int,
    body: str,
    agent: Optional[str] = None,
) -> AIWFHTTPError:
    """Map a non-200 response to the matching exception."""
    if status_code in (401, 403):
        return AIWFAuthenticationError(status_code, body)
    if status_code == 404 and agent is not None:
        return AgentNotFoundError(agent, body)
    return AIWFHTTPError(status_code, body)


# =============================================================================
# Payload Errors
# =============================================================================


class AIWFResponseError(AIWFClientError):
    """The response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str,
        body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
        self.body = body
