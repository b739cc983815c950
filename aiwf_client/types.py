"""
AIWF Client - Wire Types

This module defines the request/response models exchanged with an AIWF
agent server. All models use Pydantic for validation and serialization
and are immutable once constructed.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Translator Agent
# =============================================================================


class TranslateRequest(BaseModel):
    """Input of the translator agent."""

    target_lang: str = Field(..., min_length=1, description="Target language code, e.g. 'en'")
    text: str = Field(..., min_length=1, description="Source text to translate")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "target_lang": "en",
                "text": "Привет, мир!",
            }
        },
    )

    def to_payload(self) -> Dict[str, Any]:
        """Convert to the JSON body sent to the server."""
        return self.model_dump()


class TranslateResponse(BaseModel):
    """Output of the translator agent."""

    translated: str
    source_lang: str
    confidence: float

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> TranslateResponse:
        """Create from a decoded JSON object."""
        return cls.model_validate(data)

    @property
    def confidence_percent(self) -> float:
        return self.confidence * 100


# =============================================================================
# Generic Agent Calls
# =============================================================================


class TokenUsage(BaseModel):
    """Token usage reported by the server for one agent call."""

    prompt: int = 0
    completion: int = 0
    total: int = 0

    model_config = ConfigDict(frozen=True, extra="ignore")


class AgentTrace(BaseModel):
    """Server-side metadata attached to an agent response."""

    usage: Optional[TokenUsage] = None

    model_config = ConfigDict(frozen=True, extra="allow")


class AgentResult(BaseModel):
    """Decoded result of a call to any agent."""

    data: Any = None
    trace: Optional[AgentTrace] = None

    model_config = ConfigDict(frozen=True)


class AgentInfo(BaseModel):
    """An agent exposed by the server."""

    name: str
    description: Optional[str] = None
    input_type: Optional[str] = None
    output_type: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class HealthStatus(BaseModel):
    """Response of the health endpoint."""

    status: str

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"
