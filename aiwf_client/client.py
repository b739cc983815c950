"""
AIWF Client - HTTP Client

This module provides the synchronous HTTP client for an AIWF agent server.
Every agent configured on the server is exposed as ``POST /agent/<name>``;
the client sends the agent input as a JSON object and decodes the JSON
object returned.

Example:
    with AIWFClient("http://127.0.0.1:8080") as client:
        response = client.translator(
            TranslateRequest(target_lang="en", text="Привет, мир!")
        )
        print(response.translated)
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from aiwf_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientSettings,
    normalize_base_url,
)
from aiwf_client.errors import (
    AIWFConnectionError,
    AIWFResponseError,
    error_for_status,
)
from aiwf_client.types import (
    AgentInfo,
    AgentResult,
    AgentTrace,
    HealthStatus,
    TranslateRequest,
    TranslateResponse,
)

logger = logging.getLogger(__name__)

AGENT_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

# Longest body excerpt kept in error messages
_MAX_BODY_IN_ERROR = 500


def _excerpt(body: str) -> str:
    if len(body) <= _MAX_BODY_IN_ERROR:
        return body
    return body[:_MAX_BODY_IN_ERROR] + "..."


class AIWFClient:
    """
    HTTP client for an AIWF agent server.

    The client holds a single ``httpx.Client``. Its connection settings are
    fixed at construction; only ``last_trace`` changes between calls. Use it
    as a context manager, or call ``close()``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Server base URL; trailing slashes are ignored
            api_key: Sent as the X-API-Key header when set
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = normalize_base_url(base_url)
        self.api_key = api_key
        self.timeout = timeout
        self.last_trace: Optional[AgentTrace] = None

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if api_key is not None:
            headers["X-API-Key"] = api_key

        self._http = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> AIWFClient:
        """Create a client from ClientSettings."""
        return cls(
            settings.base_url,
            settings.api_key,
            timeout=settings.timeout,
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    def __enter__(self) -> AIWFClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Agents
    # -------------------------------------------------------------------------

    def translator(self, request: TranslateRequest) -> TranslateResponse:
        """
        Call the translator agent.

        Translates ``request.text`` into ``request.target_lang`` and reports
        the detected source language with a confidence score.
        """
        result = self.call_agent("translator", request.to_payload())

        if not isinstance(result.data, dict):
            raise AIWFResponseError(
                f"Invalid translator response: expected an object, got {type(result.data).__name__}"
            )

        try:
            response = TranslateResponse.from_payload(result.data)
        except ValidationError as e:
            raise AIWFResponseError(
                f"Invalid translator response: {e.error_count()} validation error(s)",
                body=json.dumps(result.data, ensure_ascii=False),
                details={"errors": e.errors(include_url=False)},
            ) from e

        if not 0.0 <= response.confidence <= 1.0:
            logger.warning("Translator confidence %s is outside [0, 1]", response.confidence)
        return response

    def call_agent(self, name: str, payload: Dict[str, Any]) -> AgentResult:
        """
        Call any agent with a JSON object payload.

        Servers may wrap the agent output as ``{"data": ..., "trace": ...}``;
        the envelope is unwrapped and the trace kept in ``last_trace``.

        Raises:
            ValueError: If the agent name is not a valid identifier
            AIWFConnectionError: If the server cannot be reached
            AIWFHTTPError: If the server returns a non-200 status
            AIWFResponseError: If the body is not a JSON object
        """
        if not AGENT_NAME_PATTERN.match(name or ""):
            raise ValueError(f"Invalid agent name: {name!r}")

        body = self._request("POST", f"/agent/{name}", agent=name, json_body=payload)

        trace: Optional[AgentTrace] = None
        data: Any = body
        if "data" in body and set(body) <= {"data", "trace"}:
            data = body["data"]
            raw_trace = body.get("trace")
            if isinstance(raw_trace, dict):
                try:
                    trace = AgentTrace.model_validate(raw_trace)
                except ValidationError:
                    logger.warning("Ignoring malformed trace from agent %s", name)

        self.last_trace = trace
        if trace is not None and trace.usage is not None:
            logger.debug("Agent %s used %d tokens", name, trace.usage.total)

        return AgentResult(data=data, trace=trace)

    def call_text_agent(self, name: str, text: str) -> str:
        """Call an agent whose input and output are plain strings."""
        result = self.call_agent(name, {"input": text})
        data = result.data
        if isinstance(data, dict):
            output = data.get("output")
            if output is None:
                output = data.get("result")
            return "" if output is None else str(output)
        return "" if data is None else str(data)

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    def health(self) -> HealthStatus:
        """Check server health."""
        body = self._request("GET", "/health")
        try:
            return HealthStatus.model_validate(body)
        except ValidationError as e:
            raise AIWFResponseError(
                "Invalid health response",
                body=json.dumps(body, ensure_ascii=False),
            ) from e

    def list_agents(self) -> List[AgentInfo]:
        """List the agents exposed by the server."""
        body = self._request("GET", "/agents")
        entries = body.get("agents")
        if not isinstance(entries, list):
            raise AIWFResponseError(
                "Invalid agents response: missing 'agents' array",
                body=json.dumps(body, ensure_ascii=False),
            )

        agents = []
        for entry in entries:
            if isinstance(entry, str):
                agents.append(AgentInfo(name=entry))
                continue
            try:
                agents.append(AgentInfo.model_validate(entry))
            except ValidationError as e:
                raise AIWFResponseError(
                    f"Invalid agent entry: {entry!r}",
                    body=json.dumps(body, ensure_ascii=False),
                ) from e
        return agents

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        agent: Optional[str] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send a request and return the decoded JSON object."""
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            response = self._http.request(method, endpoint, json=json_body)
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise AIWFConnectionError(url, str(e) or e.__class__.__name__) from e

        text = response.text
        if response.status_code != 200:
            logger.warning("%s %s returned %d", method, url, response.status_code)
            raise error_for_status(response.status_code, _excerpt(text), agent=agent)

        try:
            decoded = response.json()
        except ValueError as e:
            raise AIWFResponseError(
                f"Invalid JSON response: {_excerpt(text)}",
                body=text,
            ) from e

        if not isinstance(decoded, dict):
            raise AIWFResponseError(
                f"Invalid JSON response: {_excerpt(text)}",
                body=text,
            )

        return decoded

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"
