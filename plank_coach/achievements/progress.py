"""Progress toward locked achievements"""
import logging

from plank_coach.achievements.evaluators import EvaluationContext, measure_requirement
from plank_coach.db.store import AchievementStore
from plank_coach.models import AchievementDefinition, AchievementProgress

logger = logging.getLogger(__name__)


def build_progress(definition: AchievementDefinition, current: int) -> AchievementProgress:
    """Turn a measured value into capped progress"""
    required = definition.requirement.value
    return AchievementProgress(
        achievement_id=definition.id,
        current=current,
        required=required,
        percentage=min(100, current * 100 // required),
        is_complete=current >= required,
    )


async def calculate_achievement_progress(
    store: AchievementStore,
    definition: AchievementDefinition,
    ctx: EvaluationContext
) -> AchievementProgress:
    """
    Calculate progress toward an achievement

    Store failures propagate; callers decide whether to show zero progress.

    Returns:
        AchievementProgress with current, required, percentage (0-100)
        and is_complete
    """
    current = await measure_requirement(store, definition.requirement, ctx)
    return build_progress(definition, current)
