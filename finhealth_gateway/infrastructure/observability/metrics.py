"""Prometheus metrics for monitoring health grades, recommendations, and narrative performance"""

from typing import Iterable

from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "finhealth_report_total",
    "Total financial health reports generated",
    ["grade"],  # A | B | C | D | F
)

health_score_histogram = Histogram(
    "finhealth_score",
    "Distribution of numeric health scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

recommendation_counter = Counter(
    "finhealth_recommendation_total",
    "Recommendations issued by id",
    ["recommendation"],
)

# Profile validation
incomplete_profile_counter = Counter(
    "finhealth_incomplete_profile_total",
    "Requests rejected for missing profile sections",
)

# Narrative service metrics
narrative_latency_histogram = Histogram(
    "narrative_latency_seconds",
    "Narrative service response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

narrative_failure_counter = Counter(
    "narrative_failures_total",
    "Failed narrative service calls",
)

narrative_fallback_counter = Counter(
    "narrative_fallback_total",
    "Narratives rendered from the local template instead of the service",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(grade_letter: str, score: int, recommendation_ids: Iterable[str]) -> None:
    """Record report metrics for monitoring grade and recommendation distribution"""
    report_counter.labels(grade=grade_letter).inc()
    health_score_histogram.observe(score)

    for rec_id in recommendation_ids:
        recommendation_counter.labels(recommendation=rec_id).inc()
