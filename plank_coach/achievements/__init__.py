"""
Achievement system for plank-coach

Catalog, requirement evaluators, the award engine and display helpers.
"""

from plank_coach.achievements.catalog import AchievementCatalog, build_default_catalog
from plank_coach.achievements.display import (
    format_achievement_display,
    format_achievement_unlock_message,
    get_rarity_color,
    get_rarity_glow,
    sort_by_rarity,
)
from plank_coach.achievements.engine import AchievementEngine
from plank_coach.achievements.evaluators import (
    EVALUATORS,
    MEASURES,
    EvaluationContext,
    evaluate_requirement,
    measure_requirement,
)
from plank_coach.achievements.progress import calculate_achievement_progress

__all__ = [
    "AchievementCatalog",
    "AchievementEngine",
    "EVALUATORS",
    "EvaluationContext",
    "MEASURES",
    "build_default_catalog",
    "calculate_achievement_progress",
    "evaluate_requirement",
    "format_achievement_display",
    "format_achievement_unlock_message",
    "get_rarity_color",
    "get_rarity_glow",
    "measure_requirement",
    "sort_by_rarity",
]
