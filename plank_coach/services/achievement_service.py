"""
AchievementService - Achievement entry points for the application

Called on workout completion and on manual refresh. Turns engine output into
a result dict the presentation layer can render directly.
"""

import logging
from typing import Any, Dict, Optional

from plank_coach.achievements.display import (
    format_achievement_display,
    format_achievement_unlock_message,
)
from plank_coach.achievements.engine import AchievementEngine
from plank_coach.exceptions import AchievementEngineError
from plank_coach.models import AwardReport, WorkoutSession

logger = logging.getLogger(__name__)


class AchievementService:
    """
    Service for achievement features.

    Responsibilities:
    - Run an evaluation pass after each completed session
    - Manual refresh of a user's achievements
    - Achievement summary and what's-next recommendations
    """

    def __init__(self, engine: AchievementEngine):
        """
        Initialize AchievementService.

        Args:
            engine: Configured achievement engine
        """
        self.engine = engine
        logger.debug("AchievementService initialized")

    async def process_workout_completion(self, session: WorkoutSession) -> Dict[str, Any]:
        """
        Evaluate achievements after a session has been saved.

        Args:
            session: The just-completed session

        Returns:
            {
                'achievements_unlocked': [EarnedAchievement],
                'points_earned': int,
                'messages': [str],   # one celebration per unlock
                'partial_failure': bool,
                'error': str | None  # user-facing notice on total failure
            }
        """
        return await self._run(session.user_id, session)

    async def refresh_achievements(self, user_id: str) -> Dict[str, Any]:
        """Manual refresh without a triggering session"""
        return await self._run(user_id, None)

    async def _run(self, user_id: str, session: Optional[WorkoutSession]) -> Dict[str, Any]:
        try:
            report = await self.engine.evaluate_and_award(user_id, session)
        except AchievementEngineError as e:
            return self._failed_result(e.user_message)

        result = self._result_from_report(report)
        logger.info(
            f"Achievements processed: user={user_id}, "
            f"unlocked={len(report.newly_earned)}, points={report.points_earned}"
        )
        return result

    async def get_achievement_summary(self, user_id: str) -> str:
        """Formatted list of a user's unlocked achievements"""
        data = await self.engine.get_user_achievements(user_id)
        return format_achievement_display(data)

    async def get_next_achievements(self, user_id: str, limit: int = 3) -> list:
        """Locked achievements the user is close to"""
        return await self.engine.get_recommendations(user_id, limit=limit)

    @staticmethod
    def _result_from_report(report: AwardReport) -> Dict[str, Any]:
        return {
            'achievements_unlocked': report.newly_earned,
            'points_earned': report.points_earned,
            'messages': [format_achievement_unlock_message(a) for a in report.newly_earned],
            'partial_failure': report.has_failures,
            'error': None,
        }

    @staticmethod
    def _failed_result(notice: str) -> Dict[str, Any]:
        return {
            'achievements_unlocked': [],
            'points_earned': 0,
            'messages': [],
            'partial_failure': False,
            'error': notice,
        }
