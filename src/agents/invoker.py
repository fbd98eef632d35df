from typing import Any, Dict

from src import config
from src.agents.client import AgentClient
from src.agents.response import AgentRequest, AgentResult


class AgentInvoker:
    """
    Single-attempt call to a remote agent, reduced to an AgentResult.

    Service-reported failures and transport failures both come back as
    failure results; nothing is raised to the caller and nothing is retried.
    """

    def __init__(self, client: AgentClient, logger):
        self.client = client
        self.logger = logger

    async def invoke(
        self,
        message: str,
        agent_id: str,
        fallback_error: str = "Request failed. Please try again.",
    ) -> AgentResult:
        return await self.run(AgentRequest(message=message, agent_id=agent_id), fallback_error)

    async def run(self, request: AgentRequest, fallback_error: str) -> AgentResult:
        self.logger.info(f"[AgentInvoker] Invoking agent {request.agent_id}")
        self.logger.debug(f"[AgentInvoker] message_preview={request.message[:200]!r}")

        try:
            envelope = await self.client.call(request.message, request.agent_id)
        except Exception as e:
            # Transport problems are not distinguished further upstream
            self.logger.warning(f"[AgentInvoker] Agent call did not complete: {e}")
            return AgentResult.failure(config.NETWORK_ERROR_MESSAGE)

        return self._to_result(envelope, fallback_error)

    def _to_result(self, envelope: Dict[str, Any], fallback_error: str) -> AgentResult:
        if envelope.get("success"):
            response = envelope.get("response")
            result = response.get("result") if isinstance(response, dict) else None
            if not isinstance(result, dict):
                if result is not None:
                    self.logger.debug(
                        f"[AgentInvoker] result is {type(result).__name__}, using empty record"
                    )
                result = {}
            self.logger.debug(f"[AgentInvoker] success | result_keys={sorted(result.keys())}")
            return AgentResult.success(result)

        error = envelope.get("error")
        reason = fallback_error if error is None else str(error)
        self.logger.debug(f"[AgentInvoker] failure | reason={reason!r}")
        return AgentResult.failure(reason)
