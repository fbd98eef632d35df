"""
Structured payloads returned by the remote agents.

The agents are not bound to any schema, so every field is optional and every
field validator is total: a value of the wrong kind becomes "absent" instead of
failing validation. Absence is then handled once, by the section builders.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


# ----------------------------
# Tolerant coercions
# ----------------------------
def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_text_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    items = [_as_text(v) for v in value]
    return [v for v in items if v is not None]


def _as_records(value: Any) -> Optional[List[Dict[str, Any]]]:
    if not isinstance(value, list):
        return None
    return [v for v in value if isinstance(v, dict)]


def _as_record(value: Any) -> Optional[Dict[str, Any]]:
    return value if isinstance(value, dict) else None


def _as_scalar(value: Any) -> Optional[Union[int, float, str]]:
    if isinstance(value, bool):
        return _as_text(value)
    if isinstance(value, (int, float, str)):
        return value
    return None


Text = Annotated[Optional[str], BeforeValidator(_as_text)]
TextList = Annotated[Optional[List[str]], BeforeValidator(_as_text_list)]
Scalar = Annotated[Optional[Union[int, float, str]], BeforeValidator(_as_scalar)]
Mapping = Annotated[Optional[Dict[str, Any]], BeforeValidator(_as_record)]


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_result(cls, raw: Any):
        """Build from an untyped agent result; anything but a mapping is an empty record."""
        if not isinstance(raw, dict):
            return cls()
        return cls.model_validate(raw)

    def is_empty(self) -> bool:
        return all(getattr(self, name) in (None, [], {}) for name in type(self).model_fields)


# ----------------------------
# Content
# ----------------------------
class ContentPayload(Record):
    post_content: Text = None
    platform: Text = None
    content_format: Text = None
    hook_line: Text = None
    call_to_action: Text = None
    suggested_posting_time: Text = None
    carousel_slides: TextList = None
    tone_notes: Text = None
    content_tips: Text = None


# ----------------------------
# Hashtags
# ----------------------------
class HashtagItem(Record):
    tag: Text = None
    category: Text = None
    estimated_reach: Text = None


class HashtagGroup(Record):
    group_name: Text = None
    tags: TextList = None


class HashtagPayload(Record):
    platform: Text = None
    hashtags: Annotated[Optional[List[HashtagItem]], BeforeValidator(_as_records)] = None
    hashtag_groups: Annotated[Optional[List[HashtagGroup]], BeforeValidator(_as_records)] = None
    strategy_notes: Text = None
    trending_tags: TextList = None


# ----------------------------
# Schedule
# ----------------------------
class ScheduleItem(Record):
    day: Text = None
    time: Text = None
    platform: Text = None
    content_type: Text = None
    priority: Text = None
    reasoning: Text = None


class PostingWindow(Record):
    platform: Text = None
    day: Text = None
    time_window: Text = None
    engagement_level: Text = None


class PlatformFrequency(Record):
    instagram: Scalar = None
    linkedin: Scalar = None


class SchedulePayload(Record):
    schedule: Annotated[Optional[List[ScheduleItem]], BeforeValidator(_as_records)] = None
    weekly_summary: Text = None
    platform_frequency: Annotated[Optional[PlatformFrequency], BeforeValidator(_as_record)] = None
    optimization_tips: Text = None
    best_posting_windows: Annotated[Optional[List[PostingWindow]], BeforeValidator(_as_records)] = None


# ----------------------------
# Analytics
# ----------------------------
class TopContent(Record):
    content_type: Text = None
    platform: Text = None
    engagement_rate: Text = None
    key_factors: Text = None


class Recommendation(Record):
    area: Text = None
    recommendation: Text = None
    expected_impact: Text = None
    priority: Text = None


class MetricsBreakdown(Record):
    instagram: Mapping = None
    linkedin: Mapping = None


class AnalyticsPayload(Record):
    performance_summary: Text = None
    top_performing_content: Annotated[Optional[List[TopContent]], BeforeValidator(_as_records)] = None
    recommendations: Annotated[Optional[List[Recommendation]], BeforeValidator(_as_records)] = None
    trend_analysis: Text = None
    growth_opportunities: TextList = None
    metrics_breakdown: Annotated[Optional[MetricsBreakdown], BeforeValidator(_as_record)] = Field(
        None,
        description="Free-form per-platform metric maps; keys are shown with underscores as spaces",
    )
