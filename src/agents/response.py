from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional


class AgentRequest(BaseModel):
    """One instruction for one remote agent. Built from a form, never edited."""

    model_config = ConfigDict(frozen=True)

    message: str
    agent_id: str


class AgentResult(BaseModel):
    """
    Outcome of exactly one agent invocation.
    Success carries the untyped result record; failure carries a
    user-facing reason.
    """

    kind: Literal["success", "failure"]

    payload: Dict[str, Any] = Field(
        default_factory=dict,
        description="response.result from the agent service (success only)"
    )

    reason: Optional[str] = Field(
        None,
        description="Service-supplied or fallback error text (failure only)"
    )

    @classmethod
    def success(cls, payload: Optional[Dict[str, Any]] = None) -> "AgentResult":
        return cls(kind="success", payload=payload or {})

    @classmethod
    def failure(cls, reason: str) -> "AgentResult":
        return cls(kind="failure", reason=reason)

    @property
    def ok(self) -> bool:
        return self.kind == "success"
