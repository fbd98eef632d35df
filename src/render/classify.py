from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple, TypeVar

C = TypeVar("C")


class PlatformClass(str, Enum):
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"
    GENERIC = "generic"


class PriorityClass(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NORMAL = "normal"


class CategoryClass(str, Enum):
    HIGH_VOLUME = "high_volume"
    MEDIUM = "medium"
    NICHE = "niche"
    TRENDING = "trending"
    DEFAULT = "default"


class EngagementClass(str, Enum):
    PEAK = "peak"
    ELEVATED = "elevated"


# Ordered: first matching keyword wins
PLATFORM_RULES: Tuple[Tuple[str, PlatformClass], ...] = (
    ("instagram", PlatformClass.INSTAGRAM),
    ("linkedin", PlatformClass.LINKEDIN),
)

PRIORITY_RULES: Tuple[Tuple[str, PriorityClass], ...] = (
    ("high", PriorityClass.HIGH),
    ("medium", PriorityClass.MEDIUM),
    ("low", PriorityClass.LOW),
)

CATEGORY_RULES: Tuple[Tuple[str, CategoryClass], ...] = (
    ("high", CategoryClass.HIGH_VOLUME),
    ("medium", CategoryClass.MEDIUM),
    ("niche", CategoryClass.NICHE),
    ("trending", CategoryClass.TRENDING),
)

ENGAGEMENT_RULES: Tuple[Tuple[str, EngagementClass], ...] = (
    ("peak", EngagementClass.PEAK),
)


def classify(text: Optional[str], rules: Sequence[Tuple[str, C]], default: C) -> C:
    lowered = str(text or "").lower()
    for keyword, cls in rules:
        if keyword in lowered:
            return cls
    return default


def platform_class(platform: Optional[str]) -> PlatformClass:
    return classify(platform, PLATFORM_RULES, PlatformClass.GENERIC)


def priority_class(priority: Optional[str]) -> PriorityClass:
    return classify(priority, PRIORITY_RULES, PriorityClass.NORMAL)


def category_class(category: Optional[str]) -> CategoryClass:
    return classify(category, CATEGORY_RULES, CategoryClass.DEFAULT)


def engagement_class(level: Optional[str]) -> EngagementClass:
    return classify(level, ENGAGEMENT_RULES, EngagementClass.ELEVATED)


# ----------------------------
# Badge labels
# ----------------------------
def platform_label(platform: Optional[str]) -> str:
    cls = platform_class(platform)
    if cls is PlatformClass.INSTAGRAM:
        return "Instagram"
    if cls is PlatformClass.LINKEDIN:
        return "LinkedIn"
    return platform or "All"


def priority_label(priority: Optional[str]) -> str:
    cls = priority_class(priority)
    if cls is PriorityClass.NORMAL:
        return priority or "Normal"
    return cls.value.capitalize()
