"""
Payload -> ordered display sections.

A section is produced only when the field backing it is present and
non-empty. Row values that are missing inside a present section fall back
to "" or to the placeholders the views have always used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from src.payloads.models import AnalyticsPayload, ContentPayload, HashtagPayload, SchedulePayload
from src.render.classify import (
    category_class,
    engagement_class,
    platform_class,
    platform_label,
    priority_class,
    priority_label,
)
from src.render.markdown import render_markdown


@dataclass(frozen=True)
class Badge:
    label: str
    cls: str


@dataclass
class Section:
    key: str
    title: str
    kind: str  # markdown | text | list | badges | table | cards | stats | metrics
    body: Any = None
    copy_text: Optional[str] = None


def platform_badge(platform: Optional[str]) -> Badge:
    return Badge(platform_label(platform), platform_class(platform).value)


def priority_badge(priority: Optional[str]) -> Badge:
    return Badge(priority_label(priority), priority_class(priority).value)


def _markdown(key: str, title: str, text: Optional[str]) -> Optional[Section]:
    if not text:
        return None
    return Section(key, title, "markdown", render_markdown(text))


def _text(key: str, title: str, text: Optional[str]) -> Optional[Section]:
    if not text:
        return None
    return Section(key, title, "text", text)


def _present(sections: List[Optional[Section]]) -> List[Section]:
    return [s for s in sections if s is not None]


def section_keys(sections: List[Section]) -> Tuple[str, ...]:
    return tuple(s.key for s in sections)


# ----------------------------
# Content
# ----------------------------
def content_header(payload: ContentPayload) -> Tuple[Badge, Optional[str]]:
    """Platform badge ("All" when unknown) and the optional format badge."""
    return platform_badge(payload.platform), payload.content_format or None


def content_sections(payload: ContentPayload) -> List[Section]:
    slides = payload.carousel_slides or []
    return _present(
        [
            _text("hook_line", "Hook", payload.hook_line),
            _markdown("post_content", "Post", payload.post_content),
            Section(
                "carousel_slides",
                "Carousel Slides",
                "cards",
                [(f"Slide {i + 1}", slide) for i, slide in enumerate(slides)],
            )
            if slides
            else None,
            _text("call_to_action", "Call to Action", payload.call_to_action),
            _text("suggested_posting_time", "Best time to post", payload.suggested_posting_time),
            _text("tone_notes", "Tone Notes", payload.tone_notes),
            _text("content_tips", "Content Tips", payload.content_tips),
        ]
    )


# ----------------------------
# Hashtags
# ----------------------------
def all_hashtags(payload: HashtagPayload) -> str:
    return " ".join(h.tag for h in (payload.hashtags or []) if h.tag)


def hashtag_sections(payload: HashtagPayload) -> List[Section]:
    hashtags = payload.hashtags or []
    trending = payload.trending_tags or []
    groups = payload.hashtag_groups or []

    tag_rows = [
        {
            "tag": h.tag or "",
            "cls": category_class(h.category).value,
            "reach": h.estimated_reach or "N/A",
            "category": h.category or "General",
        }
        for h in hashtags
    ]

    group_rows = []
    for i, g in enumerate(groups):
        tags = g.tags or []
        group_rows.append(
            {
                "name": g.group_name or f"Group {i + 1}",
                "tags": tags,
                "copy_text": " ".join(tags),
                "copy_label": g.group_name or "Group",
            }
        )

    return _present(
        [
            Section("hashtags", "Suggested Hashtags", "badges", tag_rows, copy_text=all_hashtags(payload))
            if hashtags
            else None,
            Section("trending_tags", "Trending Now", "list", list(trending)) if trending else None,
            Section("hashtag_groups", "Hashtag Groups", "cards", group_rows) if groups else None,
            _markdown("strategy_notes", "Strategy Notes", payload.strategy_notes),
        ]
    )


# ----------------------------
# Schedule
# ----------------------------
def schedule_sections(payload: SchedulePayload) -> List[Section]:
    schedule = payload.schedule or []
    windows = payload.best_posting_windows or []
    freq = payload.platform_frequency

    frequency = None
    if freq is not None:
        frequency = Section(
            "platform_frequency",
            "Posts per week",
            "stats",
            [
                ("Instagram / week", freq.instagram if freq.instagram is not None else 0),
                ("LinkedIn / week", freq.linkedin if freq.linkedin is not None else 0),
            ],
        )

    rows = [
        {
            "day": item.day or "",
            "time": item.time or "",
            "platform": platform_badge(item.platform),
            "content_type": item.content_type or "",
            "priority": priority_badge(item.priority),
            "reasoning": item.reasoning or "",
        }
        for item in schedule
    ]

    window_rows = [
        {
            "platform": platform_badge(w.platform),
            "day": w.day or "",
            "time_window": w.time_window or "",
            "engagement": Badge(w.engagement_level or "", engagement_class(w.engagement_level).value),
        }
        for w in windows
    ]

    return _present(
        [
            _markdown("weekly_summary", "Weekly Summary", payload.weekly_summary),
            frequency,
            Section("schedule", "Weekly Calendar", "table", rows) if rows else None,
            Section("best_posting_windows", "Best Posting Windows", "table", window_rows) if window_rows else None,
            _markdown("optimization_tips", "Optimization Tips", payload.optimization_tips),
        ]
    )


# ----------------------------
# Analytics
# ----------------------------
def humanize_metric(key: str) -> str:
    return key.replace("_", " ")


def _metric_rows(metrics: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(humanize_metric(k), "" if v is None else str(v)) for k, v in metrics.items()]


def analytics_sections(payload: AnalyticsPayload) -> List[Section]:
    top = payload.top_performing_content or []
    recs = payload.recommendations or []
    growth = payload.growth_opportunities or []

    breakdown = None
    if payload.metrics_breakdown is not None:
        platforms = []
        if payload.metrics_breakdown.instagram is not None:
            platforms.append(("Instagram", _metric_rows(payload.metrics_breakdown.instagram)))
        if payload.metrics_breakdown.linkedin is not None:
            platforms.append(("LinkedIn", _metric_rows(payload.metrics_breakdown.linkedin)))
        breakdown = Section("metrics_breakdown", "Platform Metrics", "metrics", platforms)

    top_rows = [
        {
            "content_type": t.content_type or "",
            "platform": platform_badge(t.platform),
            "engagement_rate": t.engagement_rate or "",
            "key_factors": t.key_factors or "",
        }
        for t in top
    ]

    rec_rows = [
        {
            "area": r.area or "",
            "recommendation": r.recommendation or "",
            "expected_impact": r.expected_impact or None,
            "priority": priority_badge(r.priority),
        }
        for r in recs
    ]

    return _present(
        [
            _markdown("performance_summary", "Performance Summary", payload.performance_summary),
            breakdown,
            Section("top_performing_content", "Top Performing Content", "table", top_rows) if top_rows else None,
            Section("recommendations", "Recommendations", "cards", rec_rows) if rec_rows else None,
            _markdown("trend_analysis", "Trend Analysis", payload.trend_analysis),
            Section("growth_opportunities", "Growth Opportunities", "list", list(growth)) if growth else None,
        ]
    )


SECTION_BUILDERS = {
    "content": content_sections,
    "hashtags": hashtag_sections,
    "schedule": schedule_sections,
    "analytics": analytics_sections,
}
