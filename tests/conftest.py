"""Global test fixtures and utilities for plank-coach tests"""
import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

from plank_coach.achievements import AchievementCatalog, AchievementEngine, build_default_catalog
from plank_coach.db import InMemoryAchievementStore
from plank_coach.models import WorkoutSession


# Wednesday noon, so "now" sits mid ISO week
FIXED_NOW = datetime(2024, 6, 12, 12, 0, 0, tzinfo=timezone.utc)


# ============================================================================
# User & Time Fixtures
# ============================================================================

@pytest.fixture
def test_user_id():
    """Standard test user ID"""
    return "user-123"


@pytest.fixture
def fixed_now():
    """Reference time shared by contexts and the engine clock"""
    return FIXED_NOW


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def make_session(test_user_id):
    """
    Factory for workout sessions

    Sessions default to the test user, one per day counting back from
    FIXED_NOW, so successive calls stay in completion order when
    `days_ago` decreases.
    """
    def _make(
        duration_seconds: int = 30,
        days_ago: float = 0,
        completed_at: datetime = None,
        exercise_id: str = None,
        exercise_category=None,
        user_id: str = None,
    ) -> WorkoutSession:
        return WorkoutSession(
            user_id=user_id or test_user_id,
            duration_seconds=duration_seconds,
            completed_at=completed_at or FIXED_NOW - timedelta(days=days_ago),
            exercise_id=exercise_id,
            exercise_category=exercise_category,
        )
    return _make


# ============================================================================
# Store & Engine Fixtures
# ============================================================================

@pytest.fixture
def memory_store():
    """Empty in-memory store"""
    return InMemoryAchievementStore()


@pytest.fixture
def default_catalog() -> AchievementCatalog:
    """Production catalog"""
    return build_default_catalog()


@pytest.fixture
def engine(memory_store, default_catalog):
    """Engine over the in-memory store and production catalog, UTC, fixed clock"""
    return AchievementEngine(
        memory_store,
        default_catalog,
        max_concurrency=4,
        evaluation_timeout=1.0,
        award_retries=2,
        tz=timezone.utc,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def mock_store():
    """Store double with every interface method as an AsyncMock"""
    store = MagicMock()
    store.get_earned_achievement_names = AsyncMock(return_value=set())
    store.get_earned_achievements = AsyncMock(return_value=[])
    store.get_sessions = AsyncMock(return_value=[])
    store.count_sessions = AsyncMock(return_value=0)
    store.has_session_with_duration = AsyncMock(return_value=False)
    store.get_current_streak = AsyncMock(return_value=0)
    store.insert_earned_achievement = AsyncMock(side_effect=lambda record: record)
    store.get_user_ids_with_sessions = AsyncMock(return_value=[])
    return store


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def mock_db_cursor():
    """Mock database cursor with standard query results"""
    cursor = AsyncMock()
    cursor.fetchone = AsyncMock(return_value=None)
    cursor.fetchall = AsyncMock(return_value=[])
    cursor.execute = AsyncMock()
    return cursor


@pytest.fixture
def mock_db_connection(mock_db_cursor):
    """Mock pooled connection whose cursor() yields mock_db_cursor"""
    conn = MagicMock()
    conn.cursor.return_value.__aenter__.return_value = mock_db_cursor
    conn.execute = AsyncMock()
    conn.commit = AsyncMock()
    return conn


@pytest.fixture
def mock_database(mock_db_connection):
    """Mock Database whose connection() yields mock_db_connection"""
    database = MagicMock()
    database.connection.return_value.__aenter__.return_value = mock_db_connection
    return database


# ============================================================================
# Catalog Fixtures
# ============================================================================

def achievement_entry(achievement_id: str, name: str, requirement: dict, **overrides) -> dict:
    """Raw catalog entry with display fields filled in"""
    entry = {
        "id": achievement_id,
        "name": name,
        "description": f"{name} description",
        "category": "milestone",
        "rarity": "common",
        "points": 10,
        "icon": "🏅",
        "badge_color": "from-gray-300 to-gray-500",
        "requirement": requirement,
        "unlock_message": f"{name} unlocked!",
        "share_message": f"I earned {name}!",
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def small_catalog() -> AchievementCatalog:
    """Four-entry catalog for orchestration tests"""
    return AchievementCatalog.from_dicts([
        achievement_entry("getting_started", "Getting Started", {"type": "count", "value": 10}, points=50),
        achievement_entry("committed", "Committed", {"type": "count", "value": 25},
                          rarity="uncommon", points=100),
        achievement_entry("minute_master", "Minute Master", {"type": "duration", "value": 60},
                          category="performance", rarity="uncommon", points=50, icon="⏱️"),
        achievement_entry("time_warrior", "Time Warrior", {"type": "total_time", "value": 3600},
                          rarity="uncommon", points=100),
    ])


@pytest.fixture
def small_engine(mock_store, small_catalog):
    """Engine over the mock store and the small catalog"""
    return AchievementEngine(
        mock_store,
        small_catalog,
        max_concurrency=2,
        evaluation_timeout=1.0,
        award_retries=2,
        tz=timezone.utc,
        clock=lambda: FIXED_NOW,
    )
