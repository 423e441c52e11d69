"""Data store implementations for the achievement engine"""

from plank_coach.db.store import AchievementStore
from plank_coach.db.memory_store import InMemoryAchievementStore

__all__ = [
    "AchievementStore",
    "InMemoryAchievementStore",
]
