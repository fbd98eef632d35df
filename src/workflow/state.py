from typing import Any, Literal, Optional, TypedDict

from pydantic import BaseModel, ConfigDict

from src.agents.response import AgentRequest, AgentResult
from src.workflow.forms import Form

Status = Literal["idle", "loading", "success", "failure"]


class ViewState(BaseModel):
    """What one workflow is currently displaying. Replaced, never mutated."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Status = "idle"
    payload: Optional[Any] = None   # structured payload record (success only)
    reason: Optional[str] = None    # failure text (failure only)

    @classmethod
    def idle(cls) -> "ViewState":
        return cls(status="idle")

    @classmethod
    def loading(cls) -> "ViewState":
        return cls(status="loading")

    @classmethod
    def success(cls, payload: Any) -> "ViewState":
        return cls(status="success", payload=payload)

    @classmethod
    def failure(cls, reason: str) -> "ViewState":
        return cls(status="failure", reason=reason)


class GenerationState(TypedDict, total=False):
    # ===== Input =====
    form: Form
    ecid: str

    # ===== Validation =====
    validation_error: Optional[str]

    # ===== Invocation =====
    request: AgentRequest
    result: AgentResult

    # ===== Outcome =====
    status: Status
