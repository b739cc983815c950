"""
AIWF Client - Main Package

Python HTTP client for AIWF agent servers. Each agent configured on the
server is called with a JSON object and answers with a JSON object; the
translator agent has typed request/response models.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from aiwf_client.client import AIWFClient
from aiwf_client.config import ClientSettings
from aiwf_client.errors import (
    AgentNotFoundError,
    AIWFAuthenticationError,
    AIWFClientError,
    AIWFConnectionError,
    AIWFHTTPError,
    AIWFResponseError,
)
from aiwf_client.types import (
    AgentInfo,
    AgentResult,
    AgentTrace,
    HealthStatus,
    TokenUsage,
    TranslateRequest,
    TranslateResponse,
)

__all__ = [
    "AIWFClient",
    "ClientSettings",
    "AIWFClientError",
    "AIWFConnectionError",
    "AIWFHTTPError",
    "AIWFAuthenticationError",
    "AgentNotFoundError",
    "AIWFResponseError",
    "TranslateRequest",
    "TranslateResponse",
    "TokenUsage",
    "AgentTrace",
    "AgentResult",
    "AgentInfo",
    "HealthStatus",
]
