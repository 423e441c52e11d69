"""
In-memory achievement store

Used by tests and local runs. Enforces the same (user_id, achievement_name)
uniqueness the PostgreSQL schema does, so concurrency behaviour matches.
"""

import logging
from collections import defaultdict
from datetime import datetime
from typing import Optional

from plank_coach.db.store import AchievementStore
from plank_coach.exceptions import DuplicateAwardError
from plank_coach.models import EarnedAchievement, UserStreak, WorkoutSession

logger = logging.getLogger(__name__)


class InMemoryAchievementStore(AchievementStore):
    """In-memory store (NOT persisted)"""

    def __init__(self):
        self._sessions: dict[str, list[WorkoutSession]] = defaultdict(list)
        self._streaks: dict[str, UserStreak] = {}
        self._earned: dict[str, dict[str, EarnedAchievement]] = defaultdict(dict)

    # Seeding helpers

    def add_session(self, session: WorkoutSession) -> None:
        """Record a completed session"""
        sessions = self._sessions[session.user_id]
        sessions.append(session)
        sessions.sort(key=lambda s: s.completed_at)
        logger.debug(f"Added session {session.id} for user {session.user_id}")

    def set_streak(self, user_id: str, current_streak: int, best_streak: Optional[int] = None) -> None:
        """Set the externally maintained streak"""
        self._streaks[user_id] = UserStreak(
            user_id=user_id,
            current_streak=current_streak,
            best_streak=max(current_streak, best_streak or 0),
        )

    # AchievementStore

    async def get_earned_achievement_names(self, user_id: str) -> set[str]:
        return set(self._earned.get(user_id, {}))

    async def get_earned_achievements(self, user_id: str) -> list[EarnedAchievement]:
        return list(self._earned.get(user_id, {}).values())

    async def get_sessions(
        self,
        user_id: str,
        since: Optional[datetime] = None
    ) -> list[WorkoutSession]:
        sessions = self._sessions.get(user_id, [])
        if since is None:
            return list(sessions)
        return [s for s in sessions if s.completed_at >= since]

    async def count_sessions(self, user_id: str) -> int:
        return len(self._sessions.get(user_id, []))

    async def has_session_with_duration(self, user_id: str, min_seconds: int) -> bool:
        return any(s.duration_seconds >= min_seconds for s in self._sessions.get(user_id, []))

    async def get_current_streak(self, user_id: str) -> int:
        streak = self._streaks.get(user_id)
        return streak.current_streak if streak else 0

    async def insert_earned_achievement(self, record: EarnedAchievement) -> EarnedAchievement:
        earned = self._earned[record.user_id]
        if record.achievement_name in earned:
            raise DuplicateAwardError(
                message=f"{record.achievement_name} already earned",
                achievement_name=record.achievement_name,
                user_id=record.user_id,
                operation="insert_earned_achievement",
            )
        earned[record.achievement_name] = record
        logger.debug(f"Saved achievement {record.achievement_name} for user {record.user_id}")
        return record

    async def get_user_ids_with_sessions(self) -> list[str]:
        return sorted(user_id for user_id, sessions in self._sessions.items() if sessions)
