"""Data store interface consumed by the achievement engine"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from plank_coach.models import EarnedAchievement, WorkoutSession


class AchievementStore(ABC):
    """
    Read/write boundary of the achievement engine.

    Implementations raise DatabaseError subclasses on failure and
    DuplicateAwardError when an earned record for the same
    (user_id, achievement_name) already exists.
    """

    @abstractmethod
    async def get_earned_achievement_names(self, user_id: str) -> set[str]:
        ...

    @abstractmethod
    async def get_earned_achievements(self, user_id: str) -> list[EarnedAchievement]:
        ...

    @abstractmethod
    async def get_sessions(
        self,
        user_id: str,
        since: Optional[datetime] = None
    ) -> list[WorkoutSession]:
        """Sessions ordered by completed_at ascending, optionally from `since` on"""

    @abstractmethod
    async def count_sessions(self, user_id: str) -> int:
        ...

    @abstractmethod
    async def has_session_with_duration(self, user_id: str, min_seconds: int) -> bool:
        ...

    @abstractmethod
    async def get_current_streak(self, user_id: str) -> int:
        """Current streak in days; 0 when the user has no streak record"""

    @abstractmethod
    async def insert_earned_achievement(self, record: EarnedAchievement) -> EarnedAchievement:
        ...

    @abstractmethod
    async def get_user_ids_with_sessions(self) -> list[str]:
        """Every user with at least one session, sorted (for backfills)"""
