"""Pydantic models for the achievement engine"""

from plank_coach.models.achievement import (
    AchievementCategory,
    AchievementDefinition,
    AchievementMetadata,
    AchievementProgress,
    AchievementRarity,
    AvailabilityWindow,
    AwardFailure,
    AwardReport,
    CategorySpecificRequirement,
    CountRequirement,
    CrossCategoryRequirement,
    DurationRequirement,
    EarnedAchievement,
    EvaluationFailure,
    ExerciseCategory,
    ImprovementRequirement,
    Requirement,
    RequirementType,
    SeasonalRequirement,
    StreakRequirement,
    TimeOfDayRequirement,
    TotalTimeRequirement,
    VarietyRequirement,
)
from plank_coach.models.session import UserStreak, WorkoutSession

__all__ = [
    "AchievementCategory",
    "AchievementDefinition",
    "AchievementMetadata",
    "AchievementProgress",
    "AchievementRarity",
    "AvailabilityWindow",
    "AwardFailure",
    "AwardReport",
    "CategorySpecificRequirement",
    "CountRequirement",
    "CrossCategoryRequirement",
    "DurationRequirement",
    "EarnedAchievement",
    "EvaluationFailure",
    "ExerciseCategory",
    "ImprovementRequirement",
    "Requirement",
    "RequirementType",
    "SeasonalRequirement",
    "StreakRequirement",
    "TimeOfDayRequirement",
    "TotalTimeRequirement",
    "UserStreak",
    "VarietyRequirement",
    "WorkoutSession",
]
