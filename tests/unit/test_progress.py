"""Unit tests for achievement progress, summaries and recommendations"""
import pytest
from datetime import timedelta, timezone

from plank_coach.achievements.catalog import AchievementCatalog
from plank_coach.achievements.engine import AchievementEngine
from plank_coach.achievements.evaluators import EvaluationContext
from plank_coach.achievements.progress import build_progress, calculate_achievement_progress
from plank_coach.exceptions import ConnectionError
from plank_coach.models import EarnedAchievement

from tests.conftest import FIXED_NOW, achievement_entry


def _engine(store, catalog):
    return AchievementEngine(store, catalog, tz=timezone.utc, clock=lambda: FIXED_NOW)


# ============================================================================
# Progress Calculation Tests
# ============================================================================

def test_build_progress_partial(small_catalog):
    """Test percentage is floored and not complete below threshold"""
    progress = build_progress(small_catalog.get_by_id("getting_started"), 6)

    assert progress.current == 6
    assert progress.required == 10
    assert progress.percentage == 60
    assert progress.is_complete is False
    assert progress.description == "6/10"


def test_build_progress_capped_at_100(small_catalog):
    """Test percentage never exceeds 100"""
    progress = build_progress(small_catalog.get_by_id("getting_started"), 45)

    assert progress.percentage == 100
    assert progress.is_complete is True


@pytest.mark.asyncio
async def test_calculate_progress_uses_measure(memory_store, make_session, small_catalog, test_user_id):
    """Test progress reads the same facts the evaluator does"""
    for i in range(3):
        memory_store.add_session(make_session(duration_seconds=600, days_ago=i))
    ctx = EvaluationContext(user_id=test_user_id, now=FIXED_NOW)

    progress = await calculate_achievement_progress(
        memory_store, small_catalog.get_by_id("time_warrior"), ctx
    )

    assert progress.current == 1800
    assert progress.percentage == 50


# ============================================================================
# User Achievement Summary Tests
# ============================================================================

@pytest.mark.asyncio
async def test_get_user_achievements_newest_first(memory_store, small_catalog, test_user_id):
    """Test unlocked achievements are newest first with point totals"""
    older = EarnedAchievement.from_definition(
        test_user_id, small_catalog.get_by_id("getting_started"), FIXED_NOW - timedelta(days=3)
    )
    newer = EarnedAchievement.from_definition(
        test_user_id, small_catalog.get_by_id("minute_master"), FIXED_NOW
    )
    await memory_store.insert_earned_achievement(older)
    await memory_store.insert_earned_achievement(newer)

    data = await _engine(memory_store, small_catalog).get_user_achievements(test_user_id)

    assert [a.achievement_name for a in data['unlocked']] == ["Minute Master", "Getting Started"]
    assert data['total_unlocked'] == 2
    assert data['total_achievements'] == 4
    assert data['total_points'] == 100
    assert 'locked' not in data


@pytest.mark.asyncio
async def test_get_user_achievements_locked_by_progress(memory_store, make_session, small_catalog, test_user_id):
    """Test locked entries carry progress, closest first"""
    for i in range(6):
        memory_store.add_session(make_session(duration_seconds=40, days_ago=i))

    data = await _engine(memory_store, small_catalog).get_user_achievements(test_user_id, include_locked=True)

    locked = [(item['achievement'].name, item['progress'].percentage) for item in data['locked']]
    assert locked == [
        ("Minute Master", 66),
        ("Getting Started", 60),
        ("Committed", 24),
        ("Time Warrior", 6),
    ]


@pytest.mark.asyncio
async def test_get_user_achievements_progress_failure_shows_zero(mock_store, small_catalog, test_user_id):
    """Test a failing progress read degrades to zero instead of failing the summary"""
    mock_store.count_sessions.side_effect = ConnectionError("down")
    mock_store.get_sessions.return_value = []

    data = await _engine(mock_store, small_catalog).get_user_achievements(test_user_id, include_locked=True)

    by_name = {item['achievement'].name: item['progress'] for item in data['locked']}
    assert by_name["Getting Started"].current == 0
    assert by_name["Getting Started"].percentage == 0
    assert len(by_name) == 4


# ============================================================================
# Recommendation Tests
# ============================================================================

@pytest.mark.asyncio
async def test_recommendations_at_least_half_way(memory_store, make_session, small_catalog, test_user_id):
    """Test only entries at 50% or more are recommended, closest first"""
    for i in range(6):
        memory_store.add_session(make_session(duration_seconds=40, days_ago=i))
    engine = _engine(memory_store, small_catalog)

    recommendations = await engine.get_recommendations(test_user_id)

    assert [r['achievement'].name for r in recommendations] == ["Minute Master", "Getting Started"]

    top = await engine.get_recommendations(test_user_id, limit=1)
    assert [r['achievement'].name for r in top] == ["Minute Master"]


@pytest.mark.asyncio
async def test_recommendations_tie_broken_by_rarity(memory_store, make_session, test_user_id):
    """Test equal progress lists the more common entry first"""
    catalog = AchievementCatalog.from_dicts([
        achievement_entry("streak_10", "Ten Day Streak", {"type": "streak", "value": 10}, rarity="rare"),
        achievement_entry("count_10", "Ten Sessions", {"type": "count", "value": 10}, rarity="common"),
    ])
    for i in range(6):
        memory_store.add_session(make_session(days_ago=i))
    memory_store.set_streak(test_user_id, 6)

    recommendations = await _engine(memory_store, catalog).get_recommendations(test_user_id)

    assert [r['achievement'].name for r in recommendations] == ["Ten Sessions", "Ten Day Streak"]


@pytest.mark.asyncio
async def test_recommendations_exclude_earned(memory_store, make_session, small_catalog, test_user_id):
    """Test earned entries are never recommended"""
    for i in range(6):
        memory_store.add_session(make_session(duration_seconds=40, days_ago=i))
    await memory_store.insert_earned_achievement(
        EarnedAchievement.from_definition(test_user_id, small_catalog.get_by_id("minute_master"), FIXED_NOW)
    )

    recommendations = await _engine(memory_store, small_catalog).get_recommendations(test_user_id)

    assert [r['achievement'].name for r in recommendations] == ["Getting Started"]
