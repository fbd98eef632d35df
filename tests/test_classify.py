import pytest

from src.render.classify import (
    CategoryClass,
    EngagementClass,
    PlatformClass,
    PriorityClass,
    category_class,
    engagement_class,
    platform_class,
    platform_label,
    priority_class,
    priority_label,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Instagram", PlatformClass.INSTAGRAM),
        ("LINKEDIN", PlatformClass.LINKEDIN),
        ("instagram + linkedin", PlatformClass.INSTAGRAM),
        ("Twitter", PlatformClass.GENERIC),
        (None, PlatformClass.GENERIC),
    ],
)
def test_platform_class(text, expected):
    assert platform_class(text) is expected


def test_platform_label_falls_back_to_raw_text_or_all():
    assert platform_label("my linkedin page") == "LinkedIn"
    assert platform_label("Threads") == "Threads"
    assert platform_label(None) == "All"
    assert platform_label("") == "All"


def test_priority_class_substring_first_match_wins():
    assert priority_class("High") is PriorityClass.HIGH
    assert priority_class("medium-high") is PriorityClass.HIGH
    assert priority_class("Low") is PriorityClass.LOW
    assert priority_class("urgent") is PriorityClass.NORMAL
    assert priority_class(None) is PriorityClass.NORMAL


def test_priority_label():
    assert priority_label("HIGH") == "High"
    assert priority_label("urgent") == "urgent"
    assert priority_label(None) == "Normal"


def test_category_class_rules_in_order():
    assert category_class("High Volume") is CategoryClass.HIGH_VOLUME
    assert category_class("Medium") is CategoryClass.MEDIUM
    assert category_class("niche") is CategoryClass.NICHE
    assert category_class("Trending") is CategoryClass.TRENDING
    assert category_class("Trending, high growth") is CategoryClass.HIGH_VOLUME
    assert category_class("Branded") is CategoryClass.DEFAULT
    assert category_class(None) is CategoryClass.DEFAULT


def test_engagement_class():
    assert engagement_class("Peak") is EngagementClass.PEAK
    assert engagement_class("High") is EngagementClass.ELEVATED
    assert engagement_class(None) is EngagementClass.ELEVATED
