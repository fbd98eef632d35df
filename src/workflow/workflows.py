import logging
from typing import Dict

from src import config
from src.agents.invoker import AgentInvoker
from src.payloads import fixtures
from src.payloads.models import AnalyticsPayload, ContentPayload, HashtagPayload, SchedulePayload
from src.workflow.context import AppContext
from src.workflow.controller import WorkflowController, WorkflowDefinition
from src.workflow.forms import AnalyticsForm, ContentForm, HashtagForm, ScheduleForm
from src.workflow.prompts import (
    build_analytics_prompt,
    build_content_prompt,
    build_hashtag_prompt,
    build_schedule_prompt,
)

CONTENT = WorkflowDefinition(
    name="content",
    title="Create Content",
    agent_id=config.AGENT_CONTENT_CREATOR,
    form_factory=lambda ctx: ContentForm(voice=ctx.brand_voice),
    payload_model=ContentPayload,
    build_prompt=build_content_prompt,
    fallback_error="Failed to generate content. Please try again.",
    fixture=fixtures.SAMPLE_CONTENT,
    sample_form=fixtures.SAMPLE_CONTENT_FORM,
    voice_field="voice",
)

HASHTAGS = WorkflowDefinition(
    name="hashtags",
    title="Hashtags",
    agent_id=config.AGENT_HASHTAG_GENERATOR,
    form_factory=lambda ctx: HashtagForm(),
    payload_model=HashtagPayload,
    build_prompt=build_hashtag_prompt,
    fallback_error="Failed to generate hashtags.",
    fixture=fixtures.SAMPLE_HASHTAGS,
    sample_form=fixtures.SAMPLE_HASHTAG_FORM,
)

SCHEDULE = WorkflowDefinition(
    name="schedule",
    title="Schedule",
    agent_id=config.AGENT_POST_SCHEDULER,
    form_factory=lambda ctx: ScheduleForm(),
    payload_model=SchedulePayload,
    build_prompt=build_schedule_prompt,
    fallback_error="Failed to generate schedule.",
    fixture=fixtures.SAMPLE_SCHEDULE,
    sample_form=fixtures.SAMPLE_SCHEDULE_FORM,
)

ANALYTICS = WorkflowDefinition(
    name="analytics",
    title="Analytics",
    agent_id=config.AGENT_ANALYTICS_ADVISOR,
    form_factory=lambda ctx: AnalyticsForm(),
    payload_model=AnalyticsPayload,
    build_prompt=build_analytics_prompt,
    fallback_error="Failed to analyze performance.",
    fixture=fixtures.SAMPLE_ANALYTICS,
    sample_form=fixtures.SAMPLE_ANALYTICS_FORM,
)

WORKFLOWS = (CONTENT, HASHTAGS, SCHEDULE, ANALYTICS)


def build_controllers(
    context: AppContext,
    invoker: AgentInvoker,
    logger: logging.Logger,
) -> Dict[str, WorkflowController]:
    return {
        definition.name: WorkflowController(definition, invoker, context, logger)
        for definition in WORKFLOWS
    }
