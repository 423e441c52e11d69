"""Monitoring infrastructure for plank-coach"""
from plank_coach.monitoring.prometheus_metrics import (
    metrics,
    track_evaluation_pass,
    record_award,
    record_evaluation_failure,
    record_award_failure,
    record_duplicate_award,
)

__all__ = [
    "metrics",
    "track_evaluation_pass",
    "record_award",
    "record_evaluation_failure",
    "record_award_failure",
    "record_duplicate_award",
]
