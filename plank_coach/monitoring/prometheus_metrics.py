"""Prometheus metrics definitions and helpers"""
import logging
import time
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

from plank_coach.config import ENABLE_PROMETHEUS

logger = logging.getLogger(__name__)


class PrometheusMetrics:
    """Container for all Prometheus metrics"""

    def __init__(self, enabled: bool = ENABLE_PROMETHEUS):
        if not enabled:
            logger.info("Prometheus metrics disabled")
            self._enabled = False
            return

        # Achievement Metrics
        self.achievements_awarded_total = Counter(
            'achievements_awarded_total',
            'Achievements newly awarded',
            ['category', 'rarity']
        )

        self.achievement_evaluation_failures_total = Counter(
            'achievement_evaluation_failures_total',
            'Achievement evaluations that failed closed',
            ['requirement_type', 'error_type']
        )

        self.achievement_award_failures_total = Counter(
            'achievement_award_failures_total',
            'Satisfied achievements whose record could not be written',
            ['error_type']
        )

        self.achievement_duplicate_awards_total = Counter(
            'achievement_duplicate_awards_total',
            'Award writes rejected as already earned'
        )

        self.achievement_pass_duration_seconds = Histogram(
            'achievement_pass_duration_seconds',
            'Duration of one evaluate-and-award pass',
            buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
        )

        self._enabled = True
        logger.info("Prometheus metrics initialized")

    @property
    def enabled(self) -> bool:
        """Check if metrics are enabled"""
        return self._enabled


# Global metrics instance
metrics = PrometheusMetrics()


@contextmanager
def track_evaluation_pass():
    """Track evaluate-and-award pass latency"""
    if not metrics.enabled:
        yield
        return

    start_time = time.time()
    try:
        yield
    finally:
        metrics.achievement_pass_duration_seconds.observe(time.time() - start_time)


def record_award(category: str, rarity: str) -> None:
    """Count a newly awarded achievement"""
    if not metrics.enabled:
        return
    metrics.achievements_awarded_total.labels(category=category, rarity=rarity).inc()


def record_evaluation_failure(requirement_type: str, error_type: str) -> None:
    """Count an evaluation that failed closed"""
    if not metrics.enabled:
        return
    metrics.achievement_evaluation_failures_total.labels(
        requirement_type=requirement_type,
        error_type=error_type
    ).inc()


def record_award_failure(error_type: str) -> None:
    """Count a failed award write"""
    if not metrics.enabled:
        return
    metrics.achievement_award_failures_total.labels(error_type=error_type).inc()


def record_duplicate_award() -> None:
    """Count an award write rejected by the uniqueness constraint"""
    if not metrics.enabled:
        return
    metrics.achievement_duplicate_awards_total.inc()
