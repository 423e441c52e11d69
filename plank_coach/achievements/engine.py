"""
Achievement Engine

Decides which catalog achievements a user has newly earned and records them:

1. Load the names the user already holds (the de-duplication guard)
2. Evaluate every other entry that is currently available, concurrently
   and bounded
3. Write one record per satisfied entry, serialised per user
4. Report what was awarded and what failed

A failing evaluator or write never aborts the rest of the pass, and awards
already written in the pass are kept.
"""

import asyncio
import logging
import weakref
from dataclasses import replace
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Dict, List, Optional
from zoneinfo import ZoneInfo

from plank_coach import config
from plank_coach.achievements.catalog import AchievementCatalog
from plank_coach.achievements.evaluators import EvaluationContext, evaluate_requirement
from plank_coach.achievements.progress import build_progress, calculate_achievement_progress
from plank_coach.db.store import AchievementStore
from plank_coach.exceptions import AchievementEngineError, DuplicateAwardError
from plank_coach.models import (
    AchievementDefinition,
    AchievementProgress,
    AwardFailure,
    AwardReport,
    EarnedAchievement,
    EvaluationFailure,
    WorkoutSession,
)
from plank_coach.monitoring import (
    record_award,
    record_award_failure,
    record_duplicate_award,
    record_evaluation_failure,
    track_evaluation_pass,
)
from plank_coach.resilience import retry_with_backoff

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AchievementEngine:
    """
    Orchestrates achievement evaluation for one store and one catalog

    Args:
        store: Data store for sessions, streaks and earned records
        catalog: Achievement definitions to evaluate
        max_concurrency: Evaluators allowed in flight at once
        evaluation_timeout: Seconds allowed per store-backed call
        award_retries: Retries for transient award write failures
        tz: Zone for local hours and calendar days (default: DEFAULT_TIMEZONE)
        clock: Returns the current aware time (injectable for tests)
    """

    def __init__(
        self,
        store: AchievementStore,
        catalog: AchievementCatalog,
        *,
        max_concurrency: int = config.ACHIEVEMENT_MAX_CONCURRENCY,
        evaluation_timeout: float = config.STORE_TIMEOUT_SECONDS,
        award_retries: int = config.AWARD_MAX_RETRIES,
        tz: Optional[tzinfo] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.store = store
        self.catalog = catalog
        self.max_concurrency = max_concurrency
        self.evaluation_timeout = evaluation_timeout
        self.award_retries = award_retries
        self.tz = tz or ZoneInfo(config.DEFAULT_TIMEZONE)
        self._clock = clock
        self._user_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

    def _context(self, user_id: str, session: Optional[WorkoutSession] = None) -> EvaluationContext:
        return EvaluationContext(user_id=user_id, session=session, now=self._clock(), tz=self.tz)

    def _entry_context(self, definition: AchievementDefinition, ctx: EvaluationContext) -> EvaluationContext:
        """Context carrying the entry's open availability window, if it has one"""
        if definition.availability is None:
            return ctx
        return replace(ctx, event_window=definition.availability.bounds(ctx.local(ctx.now)))

    def _user_lock(self, user_id: str) -> asyncio.Lock:
        lock = self._user_locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._user_locks[user_id] = lock
        return lock

    async def _store_call(self, coro):
        return await asyncio.wait_for(coro, timeout=self.evaluation_timeout)

    # ============================================
    # Evaluate and award
    # ============================================

    async def evaluate_and_award(
        self,
        user_id: str,
        session: Optional[WorkoutSession] = None
    ) -> AwardReport:
        """
        Evaluate the catalog for a user and award what is newly earned

        Args:
            user_id: User to evaluate
            session: The just-completed session, if this pass was triggered by one

        Returns:
            AwardReport with newly earned records and any partial failures

        Raises:
            AchievementEngineError: If already-earned names cannot be loaded
        """
        with track_evaluation_pass():
            try:
                earned_names = await self._store_call(self.store.get_earned_achievement_names(user_id))
            except Exception as e:
                raise AchievementEngineError(
                    "Could not load earned achievements",
                    user_id=user_id,
                    operation="evaluate_and_award",
                    cause=e
                )

            report = AwardReport(user_id=user_id)
            ctx = self._context(user_id, session)
            local_now = ctx.local(ctx.now)
            pending = [
                d for d in self.catalog
                if d.name not in earned_names and d.is_available(local_now)
            ]
            semaphore = asyncio.Semaphore(self.max_concurrency)

            results = await asyncio.gather(
                *(self._evaluate_one(definition, ctx, semaphore, report) for definition in pending)
            )
            satisfied = [d for d, earned in zip(pending, results) if earned]

            async with self._user_lock(user_id):
                for definition in satisfied:
                    await self._award(user_id, definition, report)

        if report.has_failures:
            logger.warning(
                f"Achievement pass for user {user_id} finished with "
                f"{len(report.evaluation_failures)} evaluation and "
                f"{len(report.award_failures)} award failure(s)"
            )
        logger.debug(
            f"Achievement pass for user {user_id}: evaluated {len(pending)}, "
            f"awarded {len(report.newly_earned)}"
        )
        return report

    async def _evaluate_one(
        self,
        definition: AchievementDefinition,
        ctx: EvaluationContext,
        semaphore: asyncio.Semaphore,
        report: AwardReport
    ) -> bool:
        """Run one evaluator; any failure counts as not earned and is reported"""
        async with semaphore:
            try:
                return await self._store_call(
                    evaluate_requirement(self.store, definition.requirement, self._entry_context(definition, ctx))
                )
            except Exception as e:
                logger.warning(
                    f"Evaluation failed for {definition.name} (user {ctx.user_id}): "
                    f"{type(e).__name__}: {e}"
                )
                report.evaluation_failures.append(EvaluationFailure(
                    achievement_name=definition.name,
                    requirement_type=definition.requirement_type,
                    error=f"{type(e).__name__}: {e}",
                ))
                record_evaluation_failure(definition.requirement_type.value, type(e).__name__)
                return False

    async def _insert(self, record: EarnedAchievement) -> EarnedAchievement:
        return await self._store_call(self.store.insert_earned_achievement(record))

    async def _award(self, user_id: str, definition: AchievementDefinition, report: AwardReport) -> None:
        record = EarnedAchievement.from_definition(user_id, definition, created_at=self._clock())
        try:
            stored = await retry_with_backoff(self._insert, record, max_retries=self.award_retries)
        except DuplicateAwardError:
            report.already_awarded.append(definition.name)
            record_duplicate_award()
            return
        except Exception as e:
            logger.error(
                f"Could not award {definition.name} to user {user_id}: {type(e).__name__}: {e}"
            )
            report.award_failures.append(AwardFailure(
                achievement_name=definition.name,
                error=f"{type(e).__name__}: {e}",
            ))
            record_award_failure(type(e).__name__)
            return

        report.newly_earned.append(stored)
        record_award(definition.category.value, definition.rarity.value)
        logger.info(
            f"User {user_id} unlocked achievement: {definition.id} "
            f"({definition.name}) +{definition.points} points"
        )

    # ============================================
    # Read-side helpers
    # ============================================

    async def _progress_or_zero(
        self,
        definition: AchievementDefinition,
        ctx: EvaluationContext,
        semaphore: asyncio.Semaphore
    ) -> AchievementProgress:
        async with semaphore:
            try:
                return await self._store_call(
                    calculate_achievement_progress(self.store, definition, self._entry_context(definition, ctx))
                )
            except Exception as e:
                logger.warning(f"Progress unavailable for {definition.name}: {type(e).__name__}: {e}")
                return build_progress(definition, 0)

    async def get_user_achievements(
        self,
        user_id: str,
        include_locked: bool = False
    ) -> Dict[str, Any]:
        """
        Get user's achievements with progress

        Args:
            user_id: User ID
            include_locked: Whether to include locked achievements with progress

        Returns:
            {
                'unlocked': [EarnedAchievement, newest first],
                'locked': [{'achievement': AchievementDefinition,
                            'progress': AchievementProgress}]  (if include_locked=True),
                'total_unlocked': int,
                'total_achievements': int,
                'total_points': int
            }
        """
        unlocked = await self._store_call(self.store.get_earned_achievements(user_id))
        unlocked.sort(key=lambda a: a.created_at, reverse=True)

        result: Dict[str, Any] = {
            'unlocked': unlocked,
            'total_unlocked': len(unlocked),
            'total_achievements': len(self.catalog),
            'total_points': sum(a.points for a in unlocked),
        }

        if include_locked:
            earned_names = {a.achievement_name for a in unlocked}
            ctx = self._context(user_id)
            local_now = ctx.local(ctx.now)
            # Hidden and out-of-season entries are not listed
            locked_definitions = [
                d for d in self.catalog
                if d.name not in earned_names and not d.hidden and d.is_available(local_now)
            ]
            semaphore = asyncio.Semaphore(self.max_concurrency)
            progress = await asyncio.gather(
                *(self._progress_or_zero(d, ctx, semaphore) for d in locked_definitions)
            )

            locked = [
                {'achievement': d, 'progress': p}
                for d, p in zip(locked_definitions, progress)
            ]
            # Closest to completion first; among equals, more common first
            locked.sort(key=lambda x: (-x['progress'].percentage, x['achievement'].rarity.rank))
            result['locked'] = locked

        return result

    async def get_recommendations(self, user_id: str, limit: int = 3) -> List[Dict[str, Any]]:
        """
        Locked achievements at least half way to completion, closest first

        Args:
            user_id: User ID
            limit: Number of recommendations to return
        """
        data = await self.get_user_achievements(user_id, include_locked=True)
        close = [item for item in data['locked'] if item['progress'].percentage >= 50]
        return close[:limit]
