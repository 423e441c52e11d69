"""
Service Layer Package

Business logic services sitting between the application and the
achievement engine.
"""

from plank_coach.services.achievement_service import AchievementService

__all__ = [
    "AchievementService",
]
