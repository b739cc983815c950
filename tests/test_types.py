"""
Tests for AIWF client wire types.
"""

import pytest
from pydantic import ValidationError

from aiwf_client.types import (
    AgentInfo,
    AgentTrace,
    HealthStatus,
    TranslateRequest,
    TranslateResponse,
)


class TestTranslateRequest:
    """Tests for TranslateRequest."""

    def test_payload_has_wire_field_names(self):
        request = TranslateRequest(target_lang="en", text="Привет")
        assert request.to_payload() == {"target_lang": "en", "text": "Привет"}

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            TranslateRequest(target_lang="en", text="")

    def test_empty_target_lang_rejected(self):
        with pytest.raises(ValidationError):
            TranslateRequest(target_lang="", text="Hello")

    def test_immutable(self):
        request = TranslateRequest(target_lang="en", text="Hello")
        with pytest.raises(ValidationError):
            request.text = "Bye"


class TestTranslateResponse:
    """Tests for TranslateResponse."""

    def test_from_payload(self):
        response = TranslateResponse.from_payload({
            "translated": "Hello",
            "source_lang": "ru",
            "confidence": 0.9,
        })
        assert response.translated == "Hello"
        assert response.source_lang == "ru"
        assert response.confidence == 0.9

    def test_extra_fields_ignored(self):
        response = TranslateResponse.from_payload({
            "translated": "Hello",
            "source_lang": "ru",
            "confidence": 1,
            "model": "gpt-4o-mini",
        })
        assert response.confidence == 1.0

    def test_confidence_percent(self):
        response = TranslateResponse(translated="x", source_lang="en", confidence=0.5)
        assert response.confidence_percent == 50.0

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            TranslateResponse.from_payload({"translated": "Hello", "confidence": 0.9})

    @pytest.mark.parametrize("confidence", [-0.1, 1.5])
    def test_confidence_out_of_range_accepted(self, confidence):
        response = TranslateResponse(translated="x", source_lang="en", confidence=confidence)
        assert response.confidence_percent == confidence * 100


class TestServerTypes:
    """Tests for the generic agent and server types."""

    def test_trace_keeps_unknown_fields(self):
        trace = AgentTrace.model_validate({
            "usage": {"prompt": 10, "completion": 5, "total": 15},
            "model": "gpt-4o-mini",
        })
        assert trace.usage.total == 15
        assert trace.model_extra == {"model": "gpt-4o-mini"}

    def test_agent_info_optional_fields(self):
        info = AgentInfo(name="translator")
        assert info.description is None
        assert info.input_type is None

    def test_health_is_ok(self):
        assert HealthStatus(status="ok").is_ok
        assert not HealthStatus(status="degraded").is_ok
