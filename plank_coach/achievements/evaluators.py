"""
Requirement evaluators

One async predicate per requirement kind, plus one progress measure per kind.
Every evaluator re-reads the facts it needs from the store; nothing is cached
between calls. Store failures propagate to the caller, which treats them as
"not earned" for the current pass.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Awaitable, Callable, Optional
import logging

from plank_coach.db.store import AchievementStore
from plank_coach.models import (
    CategorySpecificRequirement,
    CountRequirement,
    CrossCategoryRequirement,
    DurationRequirement,
    ImprovementRequirement,
    Requirement,
    RequirementType,
    SeasonalRequirement,
    StreakRequirement,
    TimeOfDayRequirement,
    TotalTimeRequirement,
    VarietyRequirement,
    WorkoutSession,
)

logger = logging.getLogger(__name__)

# Local-hour windows, [start, end); start > end wraps past midnight
HOUR_WINDOWS = {
    "morning": (5, 9),
    "evening": (19, 24),
    "late_night": (22, 5),
    "pre_dawn": (4, 6),
}
WEEKEND_DAYS = (5, 6)  # date.weekday(): Saturday, Sunday


@dataclass(frozen=True)
class EvaluationContext:
    """
    Facts shared by every evaluator in one pass

    Attributes:
        user_id: User being evaluated
        session: The just-completed session, if the pass was triggered by one
        now: Reference time for trailing windows
        tz: Zone used to derive local hours and calendar days
        event_window: [start, end) of the open availability window of the
            entry being evaluated, if it has one
    """
    user_id: str
    session: Optional[WorkoutSession] = None
    now: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tz: tzinfo = timezone.utc
    event_window: Optional[tuple[datetime, datetime]] = None

    def local(self, moment: datetime) -> datetime:
        return moment.astimezone(self.tz)

    def local_date(self, moment: datetime) -> date:
        return self.local(moment).date()

    def since(self, days: Optional[int]) -> Optional[datetime]:
        return self.now - timedelta(days=days) if days else None


Evaluator = Callable[[AchievementStore, Requirement, EvaluationContext], Awaitable[bool]]
Measure = Callable[[AchievementStore, Requirement, EvaluationContext], Awaitable[int]]


# ============================================
# Helpers
# ============================================

def in_time_window(local_moment: datetime, window: str) -> bool:
    """Whether a local timestamp falls in a named window"""
    if window == "weekend":
        return local_moment.weekday() in WEEKEND_DAYS
    start, end = HOUR_WINDOWS[window]
    if start < end:
        return start <= local_moment.hour < end
    return local_moment.hour >= start or local_moment.hour < end


def longest_daily_run(days: set[date]) -> int:
    """Longest run of consecutive calendar days"""
    longest = 0
    for day in days:
        # Only start counting at the first day of a run
        if day - timedelta(days=1) in days:
            continue
        length = 1
        while day + timedelta(days=length) in days:
            length += 1
        longest = max(longest, length)
    return longest


def _bucket_key(ctx: EvaluationContext, session: WorkoutSession, window: str):
    if window == "same_day":
        return ctx.local_date(session.completed_at)
    if window == "same_week":
        iso = ctx.local_date(session.completed_at).isocalendar()
        return (iso[0], iso[1])
    return None


# ============================================
# Measures (current value toward `requirement.value`)
# ============================================

async def measure_streak(store: AchievementStore, requirement: StreakRequirement, ctx: EvaluationContext) -> int:
    """Current streak days, as maintained outside the engine"""
    return await store.get_current_streak(ctx.user_id)


async def measure_duration(store: AchievementStore, requirement: DurationRequirement, ctx: EvaluationContext) -> int:
    """Longest single session in seconds"""
    sessions = await store.get_sessions(ctx.user_id)
    durations = [s.duration_seconds for s in sessions]
    if ctx.session:
        durations.append(ctx.session.duration_seconds)
    return max(durations, default=0)


async def measure_count(store: AchievementStore, requirement: CountRequirement, ctx: EvaluationContext) -> int:
    return await store.count_sessions(ctx.user_id)


async def measure_variety(store: AchievementStore, requirement: VarietyRequirement, ctx: EvaluationContext) -> int:
    """Distinct exercises attempted, optionally in a trailing window"""
    sessions = await store.get_sessions(ctx.user_id, since=ctx.since(requirement.within_days))
    return len({s.exercise_id for s in sessions if s.exercise_id})


async def measure_time_of_day(store: AchievementStore, requirement: TimeOfDayRequirement, ctx: EvaluationContext) -> int:
    sessions = await store.get_sessions(ctx.user_id)
    return sum(1 for s in sessions if in_time_window(ctx.local(s.completed_at), requirement.window))


async def measure_total_time(store: AchievementStore, requirement: TotalTimeRequirement, ctx: EvaluationContext) -> int:
    sessions = await store.get_sessions(ctx.user_id)
    return sum(s.duration_seconds for s in sessions)


async def _first_and_current(
    store: AchievementStore,
    ctx: EvaluationContext
) -> Optional[tuple[int, int]]:
    """(first-ever duration, current duration), or None with fewer than two sessions"""
    sessions = await store.get_sessions(ctx.user_id)
    if len(sessions) < 2:
        return None
    first = sessions[0].duration_seconds
    current = ctx.session.duration_seconds if ctx.session else sessions[-1].duration_seconds
    return first, current


async def measure_improvement(store: AchievementStore, requirement: ImprovementRequirement, ctx: EvaluationContext) -> int:
    """
    Gain over the first session: seconds, or percent when `doubling`
    """
    pair = await _first_and_current(store, ctx)
    if pair is None:
        return 0
    first, current = pair
    if requirement.doubling:
        if first <= 0:
            return 0
        return max(0, (current - first) * 100 // first)
    return max(0, current - first)


async def measure_category_specific(
    store: AchievementStore,
    requirement: CategorySpecificRequirement,
    ctx: EvaluationContext
) -> int:
    sessions = await store.get_sessions(ctx.user_id, since=ctx.since(requirement.within_days))
    in_category = [s for s in sessions if s.exercise_category == requirement.exercise_category]

    if requirement.metric == "seconds":
        return sum(s.duration_seconds for s in in_category)
    if requirement.metric == "streak_days":
        return longest_daily_run({ctx.local_date(s.completed_at) for s in in_category})
    if requirement.metric == "active_days":
        return len({ctx.local_date(s.completed_at) for s in in_category})
    return len(in_category)


async def measure_cross_category(
    store: AchievementStore,
    requirement: CrossCategoryRequirement,
    ctx: EvaluationContext
) -> int:
    """Most distinct categories seen inside any single bucket of the window"""
    sessions = await store.get_sessions(ctx.user_id)

    buckets = defaultdict(set)
    for session in sessions:
        category = session.exercise_category
        if category is None:
            continue
        if requirement.combination is not None and category not in requirement.combination:
            continue
        buckets[_bucket_key(ctx, session, requirement.window)].add(category)

    return max((len(categories) for categories in buckets.values()), default=0)


async def measure_seasonal(store: AchievementStore, requirement: SeasonalRequirement, ctx: EvaluationContext) -> int:
    """Activity inside the open event window; 0 when no window is open"""
    if ctx.event_window is None:
        return 0
    start, end = ctx.event_window
    sessions = await store.get_sessions(ctx.user_id, since=start)
    in_event = [s for s in sessions if s.completed_at < end]

    if requirement.metric == "seconds":
        return sum(s.duration_seconds for s in in_event)
    if requirement.metric == "streak_days":
        return longest_daily_run({ctx.local_date(s.completed_at) for s in in_event})
    return len(in_event)


MEASURES: dict[RequirementType, Measure] = {
    RequirementType.STREAK: measure_streak,
    RequirementType.DURATION: measure_duration,
    RequirementType.COUNT: measure_count,
    RequirementType.VARIETY: measure_variety,
    RequirementType.TIME_OF_DAY: measure_time_of_day,
    RequirementType.TOTAL_TIME: measure_total_time,
    RequirementType.IMPROVEMENT: measure_improvement,
    RequirementType.CATEGORY_SPECIFIC: measure_category_specific,
    RequirementType.CROSS_CATEGORY: measure_cross_category,
    RequirementType.SEASONAL: measure_seasonal,
}


# ============================================
# Evaluators
# ============================================

def _at_least(measure: Measure) -> Evaluator:
    """Evaluator that is true once the measure reaches `requirement.value`"""
    async def evaluate(store: AchievementStore, requirement: Requirement, ctx: EvaluationContext) -> bool:
        return await measure(store, requirement, ctx) >= requirement.value
    evaluate.__name__ = f"check_{measure.__name__.removeprefix('measure_')}"
    return evaluate


async def check_duration(store: AchievementStore, requirement: DurationRequirement, ctx: EvaluationContext) -> bool:
    """Triggering session or any past session lasted at least `value` seconds"""
    if ctx.session and ctx.session.duration_seconds >= requirement.value:
        return True
    return await store.has_session_with_duration(ctx.user_id, requirement.value)


async def check_improvement(store: AchievementStore, requirement: ImprovementRequirement, ctx: EvaluationContext) -> bool:
    pair = await _first_and_current(store, ctx)
    if pair is None:
        return False
    first, current = pair
    if requirement.doubling:
        return first > 0 and current >= first * 2
    return current - first >= requirement.value


EVALUATORS: dict[RequirementType, Evaluator] = {
    RequirementType.STREAK: _at_least(measure_streak),
    RequirementType.DURATION: check_duration,
    RequirementType.COUNT: _at_least(measure_count),
    RequirementType.VARIETY: _at_least(measure_variety),
    RequirementType.TIME_OF_DAY: _at_least(measure_time_of_day),
    RequirementType.TOTAL_TIME: _at_least(measure_total_time),
    RequirementType.IMPROVEMENT: check_improvement,
    RequirementType.CATEGORY_SPECIFIC: _at_least(measure_category_specific),
    RequirementType.CROSS_CATEGORY: _at_least(measure_cross_category),
    RequirementType.SEASONAL: _at_least(measure_seasonal),
}


async def evaluate_requirement(
    store: AchievementStore,
    requirement: Requirement,
    ctx: EvaluationContext
) -> bool:
    """Dispatch to the evaluator for this requirement kind"""
    evaluator = EVALUATORS[RequirementType(requirement.type)]
    return await evaluator(store, requirement, ctx)


async def measure_requirement(
    store: AchievementStore,
    requirement: Requirement,
    ctx: EvaluationContext
) -> int:
    """Dispatch to the progress measure for this requirement kind"""
    measure = MEASURES[RequirementType(requirement.type)]
    return await measure(store, requirement, ctx)
