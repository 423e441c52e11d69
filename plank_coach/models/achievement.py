"""Achievement models for gamification"""
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AchievementCategory(str, Enum):
    """Achievement categories"""
    CONSISTENCY = "consistency"
    PERFORMANCE = "performance"
    EXPLORATION = "exploration"
    SOCIAL = "social"
    MILESTONE = "milestone"
    CATEGORY_SPECIFIC = "category_specific"
    CROSS_CATEGORY = "cross_category"
    SEASONAL = "seasonal"


class AchievementRarity(str, Enum):
    """Achievement rarity, ordered from most to least common"""
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return list(AchievementRarity).index(self)


class ExerciseCategory(str, Enum):
    """Exercise categories a session can belong to"""
    CARDIO = "cardio"
    LEG_LIFT = "leg_lift"
    PLANKING = "planking"
    SEATED_EXERCISE = "seated_exercise"
    STANDING_MOVEMENT = "standing_movement"
    STRENGTH = "strength"


class RequirementType(str, Enum):
    """Requirement kinds; each maps to exactly one evaluator"""
    STREAK = "streak"
    DURATION = "duration"
    COUNT = "count"
    VARIETY = "variety"
    TIME_OF_DAY = "time_of_day"
    TOTAL_TIME = "total_time"
    IMPROVEMENT = "improvement"
    CATEGORY_SPECIFIC = "category_specific"
    CROSS_CATEGORY = "cross_category"
    SEASONAL = "seasonal"


# ==========================================
# Requirements (tagged union on `type`)
# ==========================================

class _Requirement(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    value: int = Field(gt=0)


class StreakRequirement(_Requirement):
    """Current streak length reaches `value` days"""
    type: Literal["streak"] = "streak"


class DurationRequirement(_Requirement):
    """A single session lasts at least `value` seconds"""
    type: Literal["duration"] = "duration"


class CountRequirement(_Requirement):
    """At least `value` sessions in total"""
    type: Literal["count"] = "count"


class VarietyRequirement(_Requirement):
    """At least `value` distinct exercises, optionally in a trailing window"""
    type: Literal["variety"] = "variety"
    within_days: Optional[int] = Field(default=None, gt=0)


class TimeOfDayRequirement(_Requirement):
    """At least `value` sessions completed in a time window"""
    type: Literal["time_of_day"] = "time_of_day"
    window: Literal["morning", "evening", "weekend", "late_night", "pre_dawn"]


class TotalTimeRequirement(_Requirement):
    """Sum of all session durations reaches `value` seconds"""
    type: Literal["total_time"] = "total_time"


class ImprovementRequirement(_Requirement):
    """
    Current session beats the first-ever session.

    With `doubling`, `value` is a percentage (100 means twice the first
    session); otherwise it is a gain in seconds.
    """
    type: Literal["improvement"] = "improvement"
    doubling: bool = False

    @model_validator(mode="after")
    def _check_doubling(self) -> "ImprovementRequirement":
        if self.doubling and self.value != 100:
            raise ValueError("doubling requires value 100 (percent)")
        return self


class CategorySpecificRequirement(_Requirement):
    """
    Activity within one exercise category.

    metric:
        sessions: number of sessions
        seconds: accumulated duration
        streak_days: longest run of consecutive days
        active_days: distinct days within `within_days`
    """
    type: Literal["category_specific"] = "category_specific"
    exercise_category: ExerciseCategory
    metric: Literal["sessions", "seconds", "streak_days", "active_days"] = "sessions"
    within_days: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_window(self) -> "CategorySpecificRequirement":
        if self.metric == "active_days" and self.within_days is None:
            raise ValueError("active_days requires within_days")
        return self


class CrossCategoryRequirement(_Requirement):
    """
    At least `value` distinct exercise categories inside one time bucket.

    When `combination` is set, only those categories count and every one of
    them is needed.
    """
    type: Literal["cross_category"] = "cross_category"
    window: Literal["all_time", "same_day", "same_week"] = "all_time"
    combination: Optional[frozenset[ExerciseCategory]] = None

    @model_validator(mode="after")
    def _check_combination(self) -> "CrossCategoryRequirement":
        if self.value > len(ExerciseCategory):
            raise ValueError(f"only {len(ExerciseCategory)} exercise categories exist")
        if self.combination is not None and len(self.combination) != self.value:
            raise ValueError("value must equal the size of combination")
        return self


class SeasonalRequirement(_Requirement):
    """
    Activity inside the entry's current availability window.

    metric:
        sessions: number of sessions
        seconds: accumulated duration
        streak_days: longest run of consecutive days
    """
    type: Literal["seasonal"] = "seasonal"
    metric: Literal["sessions", "seconds", "streak_days"] = "sessions"


Requirement = Annotated[
    Union[
        StreakRequirement,
        DurationRequirement,
        CountRequirement,
        VarietyRequirement,
        TimeOfDayRequirement,
        TotalTimeRequirement,
        ImprovementRequirement,
        CategorySpecificRequirement,
        CrossCategoryRequirement,
        SeasonalRequirement,
    ],
    Field(discriminator="type"),
]


# ==========================================
# Definitions and earned records
# ==========================================

class AvailabilityWindow(BaseModel):
    """
    Whole calendar months, start_month through end_month inclusive, every year.

    Bounds are computed in the engine's zone, so a December window opens at
    local midnight on December 1st.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    start_month: int = Field(ge=1, le=12)
    end_month: int = Field(ge=1, le=12)

    @model_validator(mode="after")
    def _check_order(self) -> "AvailabilityWindow":
        if self.start_month > self.end_month:
            raise ValueError("start_month must not be after end_month")
        return self

    def bounds(self, local_now: datetime) -> Optional[tuple[datetime, datetime]]:
        """[start, end) of this year's window, or None when `local_now` is outside it"""
        if not self.start_month <= local_now.month <= self.end_month:
            return None
        start = local_now.replace(month=self.start_month, day=1, hour=0, minute=0, second=0, microsecond=0)
        if self.end_month == 12:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=self.end_month + 1)
        return start, end


class AchievementDefinition(BaseModel):
    """Catalog entry"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str
    category: AchievementCategory
    rarity: AchievementRarity
    points: int = Field(ge=0)
    icon: str
    badge_color: str
    requirement: Requirement
    unlock_message: str
    share_message: str
    hidden: bool = False
    availability: Optional[AvailabilityWindow] = None

    @model_validator(mode="after")
    def _check_availability(self) -> "AchievementDefinition":
        if self.requirement.type == "seasonal" and self.availability is None:
            raise ValueError("seasonal requirements need an availability window")
        return self

    def is_available(self, local_now: datetime) -> bool:
        """Whether the entry can be earned at this local time"""
        return self.availability is None or self.availability.bounds(local_now) is not None

    @property
    def requirement_type(self) -> RequirementType:
        return RequirementType(self.requirement.type)


class AchievementMetadata(BaseModel):
    """Display metadata copied from the catalog at award time"""
    icon: str
    badge_color: str
    unlock_message: str
    share_message: str


class EarnedAchievement(BaseModel):
    """User's unlocked achievement"""
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    achievement_id: str
    achievement_name: str
    description: str
    category: AchievementCategory
    rarity: AchievementRarity
    points: int
    metadata: AchievementMetadata
    created_at: datetime

    @classmethod
    def from_definition(
        cls,
        user_id: str,
        definition: AchievementDefinition,
        created_at: datetime,
    ) -> "EarnedAchievement":
        """Snapshot a catalog entry so later catalog edits leave the record alone"""
        return cls(
            user_id=user_id,
            achievement_id=definition.id,
            achievement_name=definition.name,
            description=definition.description,
            category=definition.category,
            rarity=definition.rarity,
            points=definition.points,
            metadata=AchievementMetadata(
                icon=definition.icon,
                badge_color=definition.badge_color,
                unlock_message=definition.unlock_message,
                share_message=definition.share_message,
            ),
            created_at=created_at,
        )


class AchievementProgress(BaseModel):
    """Progress toward a locked achievement"""
    achievement_id: str
    current: int
    required: int
    percentage: int
    is_complete: bool

    @property
    def description(self) -> str:
        return f"{self.current}/{self.required}"


# ==========================================
# Evaluation pass results
# ==========================================

class EvaluationFailure(BaseModel):
    """An achievement that could not be evaluated this pass (treated as not earned)"""
    achievement_name: str
    requirement_type: RequirementType
    error: str


class AwardFailure(BaseModel):
    """A satisfied achievement whose record could not be written"""
    achievement_name: str
    error: str


class AwardReport(BaseModel):
    """Outcome of one evaluation pass for one user"""
    user_id: str
    newly_earned: list[EarnedAchievement] = Field(default_factory=list)
    already_awarded: list[str] = Field(default_factory=list)
    evaluation_failures: list[EvaluationFailure] = Field(default_factory=list)
    award_failures: list[AwardFailure] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.evaluation_failures or self.award_failures)

    @property
    def points_earned(self) -> int:
        return sum(a.points for a in self.newly_earned)
