"""Unit tests for achievement display helpers (plank_coach/achievements/display.py)"""
import pytest

from plank_coach.achievements.display import (
    format_achievement_display,
    format_achievement_unlock_message,
    get_rarity_color,
    get_rarity_glow,
    sort_by_rarity,
)
from plank_coach.models import AchievementRarity, EarnedAchievement

from tests.conftest import FIXED_NOW


@pytest.mark.parametrize("rarity, expected", [
    ("common", "text-gray-600 bg-gray-100 border-gray-200"),
    ("uncommon", "text-green-600 bg-green-100 border-green-200"),
    ("rare", "text-blue-600 bg-blue-100 border-blue-200"),
    ("epic", "text-purple-600 bg-purple-100 border-purple-200"),
    ("legendary", "text-yellow-600 bg-yellow-100 border-yellow-200"),
])
def test_get_rarity_color(rarity, expected):
    """Test every rarity maps to badge colour classes"""
    assert get_rarity_color(rarity) == expected
    assert get_rarity_color(AchievementRarity(rarity)) == expected


def test_get_rarity_glow():
    """Test glow is empty for common and strongest for legendary"""
    assert get_rarity_glow(AchievementRarity.COMMON) == ""
    assert get_rarity_glow("rare") == "shadow-blue-200/50"
    assert get_rarity_glow("legendary") == "shadow-yellow-200/50 shadow-lg"


def test_get_rarity_color_unknown():
    """Test an unknown rarity is rejected"""
    with pytest.raises(ValueError):
        get_rarity_color("mythic")


def test_sort_by_rarity(default_catalog):
    """Test rarest first, then most points"""
    entries = [
        default_catalog.get_by_name("Quick Start"),
        default_catalog.get_by_name("Legend"),
        default_catalog.get_by_name("Iron Core"),
        default_catalog.get_by_name("Half Minute Hero"),
    ]

    assert [d.name for d in sort_by_rarity(entries)] == [
        "Legend", "Iron Core", "Half Minute Hero", "Quick Start",
    ]


def test_format_achievement_display_empty():
    """Test the empty state message"""
    data = {'unlocked': [], 'total_unlocked': 0, 'total_achievements': 88, 'total_points': 0}

    assert "No achievements unlocked yet" in format_achievement_display(data)


def test_format_achievement_display_groups_by_rarity(default_catalog, test_user_id):
    """Test unlocked achievements are grouped rarest first"""
    unlocked = [
        EarnedAchievement.from_definition(test_user_id, default_catalog.get_by_name(name), FIXED_NOW)
        for name in ["Quick Start", "Minute Master"]
    ]
    data = {'unlocked': unlocked, 'total_unlocked': 2, 'total_achievements': 88, 'total_points': 60}

    text = format_achievement_display(data)

    assert "YOUR ACHIEVEMENTS (2/88)" in text
    assert "Total points: 60" in text
    assert text.index("🟢 UNCOMMON") < text.index("⚪ COMMON")
    assert "⏱️ Minute Master (+50 pts)" in text


def test_format_achievement_unlock_message(default_catalog, test_user_id):
    """Test the celebration includes name, unlock message and points"""
    record = EarnedAchievement.from_definition(
        test_user_id, default_catalog.get_by_name("Minute Master"), FIXED_NOW
    )

    message = format_achievement_unlock_message(record)

    assert "ACHIEVEMENT UNLOCKED" in message
    assert "Minute Master" in message
    assert record.metadata.unlock_message in message
    assert "+50 points (uncommon)" in message
