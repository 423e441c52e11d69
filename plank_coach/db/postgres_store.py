"""PostgreSQL achievement store"""
import json
import logging
from datetime import datetime
from typing import Optional

import psycopg

from plank_coach.db.connection import Database
from plank_coach.db.store import AchievementStore
from plank_coach.exceptions import DuplicateAwardError, wrap_external_exception
from plank_coach.models import EarnedAchievement, ExerciseCategory, WorkoutSession

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS exercises (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    name TEXT NOT NULL,
    category TEXT CHECK (category IN (
        'cardio', 'leg_lift', 'planking',
        'seated_exercise', 'standing_movement', 'strength'
    ))
);

CREATE TABLE IF NOT EXISTS user_sessions (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    user_id TEXT NOT NULL,
    exercise_id UUID REFERENCES exercises(id),
    duration_seconds INTEGER NOT NULL CHECK (duration_seconds >= 0),
    completed_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_user_sessions_user_completed
    ON user_sessions (user_id, completed_at);

CREATE TABLE IF NOT EXISTS user_streaks (
    user_id TEXT PRIMARY KEY,
    current_streak INTEGER NOT NULL DEFAULT 0,
    best_streak INTEGER NOT NULL DEFAULT 0,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS user_achievements (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    user_id TEXT NOT NULL,
    achievement_id TEXT NOT NULL,
    achievement_name TEXT NOT NULL,
    description TEXT NOT NULL,
    category TEXT NOT NULL,
    rarity TEXT NOT NULL,
    points INTEGER NOT NULL,
    metadata JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    CONSTRAINT uq_user_achievements_user_name UNIQUE (user_id, achievement_name)
);
"""

_SESSION_COLUMNS = """
    s.id, s.user_id, s.duration_seconds, s.completed_at,
    s.exercise_id, e.category AS exercise_category
"""


def _exercise_category(row: dict) -> Optional[ExerciseCategory]:
    """Known category, or None for rows written before the CHECK existed"""
    value = row["exercise_category"]
    if value is None:
        return None
    try:
        return ExerciseCategory(value)
    except ValueError:
        logger.warning(f"Ignoring unknown exercise category {value!r} on session {row['id']}")
        return None


def _row_to_session(row: dict) -> WorkoutSession:
    return WorkoutSession(
        id=str(row["id"]),
        user_id=row["user_id"],
        duration_seconds=row["duration_seconds"],
        completed_at=row["completed_at"],
        exercise_id=str(row["exercise_id"]) if row["exercise_id"] else None,
        exercise_category=_exercise_category(row),
    )


def _row_to_earned(row: dict) -> EarnedAchievement:
    return EarnedAchievement(**{**row, "id": str(row["id"])})


class PostgresAchievementStore(AchievementStore):
    """
    Achievement store backed by the application database

    Every method opens its own pooled connection so evaluators can run
    concurrently without sharing a cursor.
    """

    def __init__(self, database: Database):
        self.db = database

    async def init_schema(self) -> None:
        """Create tables if missing (idempotent)"""
        try:
            async with self.db.connection() as conn:
                await conn.execute(SCHEMA)
                await conn.commit()
        except psycopg.Error as e:
            raise wrap_external_exception(e, operation="init_schema")
        logger.info("Achievement schema ready")

    async def _fetchall(self, operation: str, user_id: Optional[str], query: str, params: tuple) -> list[dict]:
        try:
            async with self.db.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(query, params)
                    return await cur.fetchall()
        except psycopg.Error as e:
            raise wrap_external_exception(e, operation=operation, user_id=user_id)

    async def _fetchone(self, operation: str, user_id: Optional[str], query: str, params: tuple) -> Optional[dict]:
        rows = await self._fetchall(operation, user_id, query, params)
        return rows[0] if rows else None

    async def get_earned_achievement_names(self, user_id: str) -> set[str]:
        rows = await self._fetchall(
            "get_earned_achievement_names",
            user_id,
            "SELECT achievement_name FROM user_achievements WHERE user_id = %s",
            (user_id,)
        )
        return {row["achievement_name"] for row in rows}

    async def get_earned_achievements(self, user_id: str) -> list[EarnedAchievement]:
        rows = await self._fetchall(
            "get_earned_achievements",
            user_id,
            """
            SELECT id, user_id, achievement_id, achievement_name, description,
                   category, rarity, points, metadata, created_at
            FROM user_achievements
            WHERE user_id = %s
            ORDER BY created_at DESC
            """,
            (user_id,)
        )
        return [_row_to_earned(row) for row in rows]

    async def get_sessions(
        self,
        user_id: str,
        since: Optional[datetime] = None
    ) -> list[WorkoutSession]:
        if since is None:
            rows = await self._fetchall(
                "get_sessions",
                user_id,
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM user_sessions s
                LEFT JOIN exercises e ON e.id = s.exercise_id
                WHERE s.user_id = %s
                ORDER BY s.completed_at ASC
                """,
                (user_id,)
            )
        else:
            rows = await self._fetchall(
                "get_sessions",
                user_id,
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM user_sessions s
                LEFT JOIN exercises e ON e.id = s.exercise_id
                WHERE s.user_id = %s AND s.completed_at >= %s
                ORDER BY s.completed_at ASC
                """,
                (user_id, since)
            )
        return [_row_to_session(row) for row in rows]

    async def count_sessions(self, user_id: str) -> int:
        row = await self._fetchone(
            "count_sessions",
            user_id,
            "SELECT COUNT(*) AS total FROM user_sessions WHERE user_id = %s",
            (user_id,)
        )
        return row["total"] if row else 0

    async def has_session_with_duration(self, user_id: str, min_seconds: int) -> bool:
        row = await self._fetchone(
            "has_session_with_duration",
            user_id,
            """
            SELECT 1 AS found FROM user_sessions
            WHERE user_id = %s AND duration_seconds >= %s
            LIMIT 1
            """,
            (user_id, min_seconds)
        )
        return row is not None

    async def get_current_streak(self, user_id: str) -> int:
        row = await self._fetchone(
            "get_current_streak",
            user_id,
            "SELECT current_streak FROM user_streaks WHERE user_id = %s",
            (user_id,)
        )
        return row["current_streak"] if row else 0

    async def insert_earned_achievement(self, record: EarnedAchievement) -> EarnedAchievement:
        try:
            async with self.db.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(
                        """
                        INSERT INTO user_achievements
                            (id, user_id, achievement_id, achievement_name, description,
                             category, rarity, points, metadata, created_at)
                        VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s::jsonb, %s)
                        ON CONFLICT (user_id, achievement_name) DO NOTHING
                        RETURNING id
                        """,
                        (
                            record.id,
                            record.user_id,
                            record.achievement_id,
                            record.achievement_name,
                            record.description,
                            record.category.value,
                            record.rarity.value,
                            record.points,
                            json.dumps(record.metadata.model_dump()),
                            record.created_at,
                        )
                    )
                    inserted = await cur.fetchone()
                    await conn.commit()
        except psycopg.Error as e:
            raise wrap_external_exception(
                e,
                operation="insert_earned_achievement",
                user_id=record.user_id,
                context={"achievement_name": record.achievement_name}
            )

        if inserted is None:
            raise DuplicateAwardError(
                message=f"{record.achievement_name} already earned",
                achievement_name=record.achievement_name,
                user_id=record.user_id,
                operation="insert_earned_achievement",
            )

        logger.info(f"Stored achievement {record.achievement_name} for user {record.user_id}")
        return record

    async def get_user_ids_with_sessions(self) -> list[str]:
        """All users with at least one session (for backfills)"""
        rows = await self._fetchall(
            "get_user_ids_with_sessions",
            None,
            "SELECT DISTINCT user_id FROM user_sessions ORDER BY user_id",
            ()
        )
        return [row["user_id"] for row in rows]
