"""Workout session models (read-only inputs to the achievement engine)"""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from plank_coach.models.achievement import ExerciseCategory


class WorkoutSession(BaseModel):
    """A completed workout session"""
    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    duration_seconds: int = Field(ge=0)
    completed_at: datetime
    exercise_id: Optional[str] = None
    exercise_category: Optional[ExerciseCategory] = None

    @field_validator("completed_at")
    @classmethod
    def _require_timezone(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("completed_at must be timezone-aware")
        return v


class UserStreak(BaseModel):
    """Externally maintained streak aggregate"""
    user_id: str
    current_streak: int = Field(default=0, ge=0)
    best_streak: int = Field(default=0, ge=0)
