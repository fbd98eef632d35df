"""
Instruction builders, one per workflow.

Each builder is a pure function of its form: optional clauses are either
rendered in full or left out, never interpolated as empty placeholders.
"""

from __future__ import annotations

from langchain_core.prompts import PromptTemplate

from src.workflow.forms import AnalyticsForm, ContentForm, HashtagForm, ScheduleForm

CONTENT_PROMPT = PromptTemplate.from_template(
    "Create a {format_label} for {platform_label} about: {topic}{voice_clause}"
)
HASHTAG_PROMPT = PromptTemplate.from_template(
    "Generate hashtags for this {platform_label} post: {content}"
)
SCHEDULE_PROMPT = PromptTemplate.from_template(
    "Create a weekly posting schedule for {platform_label}.{types_clause}"
    " Timezone: {timezone}. Context: {description}"
)
ANALYTICS_PROMPT = PromptTemplate.from_template(
    "Analyze my social media performance on {platform_label}. Here are my metrics: {metrics}"
)


def platform_label(platform: str) -> str:
    if platform == "both":
        return "Instagram and LinkedIn"
    if platform == "instagram":
        return "Instagram"
    return "LinkedIn"


def humanize_key(key: str) -> str:
    # only the first underscore, e.g. "short_post" -> "short post"
    return key.replace("_", " ", 1)


def build_content_prompt(form: ContentForm) -> str:
    voice_clause = f". Brand voice: {form.voice}" if form.voice else ""
    return CONTENT_PROMPT.format(
        format_label=humanize_key(form.format),
        platform_label=platform_label(form.platform),
        topic=form.topic,
        voice_clause=voice_clause,
    )


def build_hashtag_prompt(form: HashtagForm) -> str:
    label = "Instagram" if form.platform == "instagram" else "LinkedIn"
    return HASHTAG_PROMPT.format(platform_label=label, content=form.content)


def build_schedule_prompt(form: ScheduleForm) -> str:
    selected = [humanize_key(k) for k, on in form.content_types.items() if on]
    types_clause = f" Content types: {', '.join(selected)}." if selected else ""
    return SCHEDULE_PROMPT.format(
        platform_label=platform_label(form.platform),
        types_clause=types_clause,
        timezone=form.timezone,
        description=form.description,
    )


def build_analytics_prompt(form: AnalyticsForm) -> str:
    return ANALYTICS_PROMPT.format(
        platform_label=platform_label(form.platform),
        metrics=form.metrics,
    )
