import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Type

from langgraph.graph import StateGraph, END

from src.agents.invoker import AgentInvoker
from src.agents.response import AgentRequest
from src.errors import FormValidationError
from src.payloads.models import Record
from src.utils.logging import new_ecid
from src.workflow.context import AppContext
from src.workflow.forms import Form
from src.workflow.state import GenerationState, ViewState


@dataclass(frozen=True)
class WorkflowDefinition:
    """Everything that differs between the four generation workflows."""

    name: str
    title: str
    agent_id: str
    form_factory: Callable[[AppContext], Form]
    payload_model: Type[Record]
    build_prompt: Callable[[Any], str]
    fallback_error: str
    fixture: Record
    sample_form: Dict[str, Any] = field(default_factory=dict)
    voice_field: Optional[str] = None  # form field seeded from the saved brand voice


class WorkflowController:
    """
    Owns one workflow's form and ViewState.

        idle/success/failure --generate(valid)--> loading --> success | failure
        idle/success/failure --generate(invalid)--> unchanged, validation message set

    Overlapping generate() calls are not cancelled: each runs to completion
    and whichever settles last decides what is displayed.
    """

    def __init__(
        self,
        definition: WorkflowDefinition,
        invoker: AgentInvoker,
        context: AppContext,
        logger: logging.Logger,
    ):
        self.definition = definition
        self.invoker = invoker
        self.context = context
        self.logger = logger
        self.logger.info(f"[{definition.name}] Workflow Initializing")

        self.form: Form = definition.form_factory(context)
        self.view: ViewState = ViewState.idle()
        self.validation_error: Optional[str] = None

        self.app = self._build_graph()

        context.subscribe(self)
        if context.sample_data:
            self._show_fixture()

    # ------------------------------------------------------------------
    # Graph: validate -> begin -> invoke_agent -> settle
    # ------------------------------------------------------------------
    def _build_graph(self):
        builder = StateGraph(GenerationState)
        name = self.definition.name

        async def validate_node(state: GenerationState):
            try:
                state["form"].validate_required()
            except FormValidationError as e:
                self.logger.debug(f"[{name}] validation failed on '{e.field}': {e.message}")
                self.validation_error = e.message
                return {"validation_error": e.message}
            return {"validation_error": None}

        async def begin_node(state: GenerationState):
            message = self.definition.build_prompt(state["form"])
            request = AgentRequest(message=message, agent_id=self.definition.agent_id)

            self.validation_error = None
            self.view = ViewState.loading()
            self.context.set_active_agent(request.agent_id)
            self.logger.info(f"[{name}] loading | agent_id={request.agent_id}")
            return {"request": request, "status": "loading"}

        async def invoke_agent_node(state: GenerationState):
            result = await self.invoker.run(state["request"], self.definition.fallback_error)
            return {"result": result}

        async def settle_node(state: GenerationState):
            result = state["result"]
            if result.ok:
                payload = self.definition.payload_model.from_result(result.payload)
                self.view = ViewState.success(payload)
            else:
                self.view = ViewState.failure(result.reason)
            self.context.clear_active_agent()
            self.logger.info(f"[{name}] settled | status={self.view.status}")
            return {"status": self.view.status}

        def validation_router(state: GenerationState):
            if state.get("validation_error"):
                return END
            return "begin"

        builder.add_node("validate", validate_node)
        builder.add_node("begin", begin_node)
        builder.add_node("invoke_agent", invoke_agent_node)
        builder.add_node("settle", settle_node)

        builder.set_entry_point("validate")
        builder.add_conditional_edges(
            "validate",
            validation_router,
            {
                "begin": "begin",
                END: END,
            },
        )
        builder.add_edge("begin", "invoke_agent")
        builder.add_edge("invoke_agent", "settle")
        builder.add_edge("settle", END)

        return builder.compile()

    # ------------------------------------------------------------------
    # UI-facing entry points
    # ------------------------------------------------------------------
    async def generate(self) -> ViewState:
        ecid = new_ecid()
        self.logger.debug(
            f"[{self.definition.name}] generate | ecid={ecid} status={self.view.status} form={self.form!r}"
        )

        try:
            await self.app.ainvoke(
                {"form": self.form, "ecid": ecid},
                config={"recursion_limit": 10},
            )
        except Exception:
            self.logger.exception(f"[{self.definition.name}] generate crashed")
            self.context.clear_active_agent()
            raise

        return self.view

    def update_form(self, **changes) -> Form:
        self.form = self.form.with_changes(**changes)
        return self.form

    def reset(self) -> None:
        self.form = self.definition.form_factory(self.context)
        self.view = ViewState.idle()
        self.validation_error = None

    @property
    def showing_fixture(self) -> bool:
        # identity, not equality: a live result shaped like the fixture is still live
        return self.view.status == "success" and self.view.payload is self.definition.fixture

    @property
    def error_message(self) -> Optional[str]:
        if self.validation_error:
            return self.validation_error
        if self.view.status == "failure":
            return self.view.reason
        return None

    # ------------------------------------------------------------------
    # AppContext listeners
    # ------------------------------------------------------------------
    def on_sample_data_changed(self, enabled: bool) -> None:
        if enabled and self.view.status == "idle":
            self._show_fixture()
        elif not enabled and self.showing_fixture:
            self.logger.debug(f"[{self.definition.name}] sample data off, clearing fixture")
            self.reset()

    def on_brand_voice_changed(self, voice: str) -> None:
        voice_field = self.definition.voice_field
        if voice_field and voice and not getattr(self.form, voice_field):
            self.form = self.form.with_changes(**{voice_field: voice})

    def _show_fixture(self) -> None:
        self.logger.debug(f"[{self.definition.name}] showing sample fixture")
        self.form = self.form.with_changes(**self.definition.sample_form)
        self.view = ViewState.success(self.definition.fixture)
        self.validation_error = None
