"""Unit tests for the backfill script (scripts/backfill_achievements.py)"""
import pytest

from plank_coach.exceptions import ConnectionError
from scripts.backfill_achievements import backfill_users


@pytest.mark.asyncio
async def test_backfill_defaults_to_users_with_sessions(engine, memory_store, make_session):
    """Test every user with sessions is evaluated when no list is given"""
    memory_store.add_session(make_session(duration_seconds=65, user_id="a"))
    memory_store.add_session(make_session(duration_seconds=20, user_id="b"))
    await memory_store.get_sessions("never-trained")

    stats = await backfill_users(engine)

    assert stats['users'] == 2
    assert stats['failed'] == 0
    assert "Minute Master" in await memory_store.get_earned_achievement_names("a")
    assert "Quick Start" in await memory_store.get_earned_achievement_names("b")
    assert stats['awarded'] == (
        len(await memory_store.get_earned_achievements("a"))
        + len(await memory_store.get_earned_achievements("b"))
    )


@pytest.mark.asyncio
async def test_backfill_explicit_user_list(small_engine, mock_store):
    """Test an explicit list skips the user lookup"""
    mock_store.count_sessions.return_value = 10

    stats = await backfill_users(small_engine, ["only-me"])

    assert stats == {'users': 1, 'failed': 0, 'awarded': 1}
    mock_store.get_user_ids_with_sessions.assert_not_awaited()


@pytest.mark.asyncio
async def test_backfill_continues_after_user_failure(small_engine, mock_store):
    """Test one user's aborted pass is counted and the run continues"""
    mock_store.get_user_ids_with_sessions.return_value = ["broken", "fine"]

    async def earned_names(user_id):
        if user_id == "broken":
            raise ConnectionError("down")
        return set()

    mock_store.get_earned_achievement_names.side_effect = earned_names
    mock_store.has_session_with_duration.return_value = True

    stats = await backfill_users(small_engine)

    assert stats == {'users': 1, 'failed': 1, 'awarded': 1}
