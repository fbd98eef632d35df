from __future__ import annotations

from typing import Any, Dict, Optional, Protocol

import httpx

from src import config
from src.errors import AgentTransportError


class AgentClient(Protocol):
    """Boundary to the hosted agent service."""

    async def call(self, message: str, agent_id: str) -> Dict[str, Any]:
        """
        Returns the service envelope:
          {"success": bool, "response": {"result": {...}}, "error": str}
        Raises AgentTransportError when the call cannot complete.
        """
        ...


class AgentServiceClient:
    """
    HTTP client for the agent service.

    A fresh AsyncClient is opened per call: Streamlit reruns drive each
    call from a new event loop, and pooled connections do not survive that.
    No timeout is configured; a call that never returns keeps its workflow
    loading.
    """

    def __init__(
        self,
        logger,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.logger = logger
        self.api_url = api_url or config.AGENT_API_URL
        self.api_key = api_key if api_key is not None else config.AGENT_API_KEY
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def call(self, message: str, agent_id: str) -> Dict[str, Any]:
        self.logger.debug(
            f"[AgentServiceClient] POST {self.api_url} agent_id={agent_id} message_len={len(message)}"
        )

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=None) as client:
                response = await client.post(
                    self.api_url,
                    json={"message": message, "agent_id": agent_id},
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            raise AgentTransportError(f"Agent call failed: {e}") from e

        self.logger.debug(
            f"[AgentServiceClient] status={response.status_code} body_len={len(response.content)}"
        )

        try:
            body = response.json()
        except ValueError as e:
            raise AgentTransportError(
                f"Agent service returned a non-JSON body (status {response.status_code})"
            ) from e

        if not isinstance(body, dict):
            raise AgentTransportError(
                f"Agent service returned {type(body).__name__}, expected an object"
            )

        return body
