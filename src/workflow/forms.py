from __future__ import annotations

from typing import ClassVar, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from src.errors import FormValidationError

Platform = Literal["linkedin", "instagram", "both"]
ContentFormat = Literal["short_post", "long_article", "carousel", "image_caption"]
Timezone = Literal["EST", "CST", "MST", "PST", "GMT", "CET", "IST"]

PLATFORM_OPTIONS = ("linkedin", "instagram", "both")
FORMAT_OPTIONS = ("short_post", "long_article", "carousel", "image_caption")
TIMEZONE_OPTIONS = ("EST", "CST", "MST", "PST", "GMT", "CET", "IST")

CONTENT_TYPE_LABELS: Dict[str, str] = {
    "thought_leadership": "Thought Leadership",
    "carousel": "Carousel Posts",
    "personal_story": "Personal Stories",
    "behind_scenes": "Behind the Scenes",
}


def _default_content_types() -> Dict[str, bool]:
    return {
        "thought_leadership": True,
        "carousel": True,
        "personal_story": True,
        "behind_scenes": False,
    }


class Form(BaseModel):
    """
    Base for the per-workflow form records.
    Subclasses name the one field that must be filled before an agent call.
    """

    model_config = ConfigDict(extra="forbid")

    required_field: ClassVar[str] = ""
    required_message: ClassVar[str] = ""

    def validate_required(self) -> None:
        value = getattr(self, self.required_field, "")
        if not (value or "").strip():
            raise FormValidationError(self.required_field, self.required_message)

    def with_changes(self, **changes):
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)


class ContentForm(Form):
    required_field: ClassVar[str] = "topic"
    required_message: ClassVar[str] = "Please enter a topic or theme."

    topic: str = ""
    platform: Platform = "linkedin"
    format: ContentFormat = "short_post"
    voice: str = Field("", description="Brand voice guide; seeded from the saved brand voice")


class HashtagForm(Form):
    required_field: ClassVar[str] = "content"
    required_message: ClassVar[str] = "Please enter content text."

    content: str = ""
    platform: Literal["linkedin", "instagram"] = "linkedin"


class ScheduleForm(Form):
    required_field: ClassVar[str] = "description"
    required_message: ClassVar[str] = "Please describe your content needs."

    description: str = ""
    platform: Platform = "both"
    timezone: Timezone = "EST"
    content_types: Dict[str, bool] = Field(default_factory=_default_content_types)


class AnalyticsForm(Form):
    required_field: ClassVar[str] = "metrics"
    required_message: ClassVar[str] = "Please enter your engagement metrics."

    metrics: str = ""
    platform: Platform = "both"
