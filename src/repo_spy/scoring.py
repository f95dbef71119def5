"""Health scoring for normalized repository statistics.

The score is a sum of independent signals, rounded half-up and clamped
into [0, 100]:

    base                       +20
    real description           +10
    language specified         +10
    stars (ramp, 1000 cap)     up to +20
    forks (ramp, 500 cap)      up to +15
    open issues  >100 / >50    -10 / -5
    updated <30 / <90 / <365d  +15 / +10 / +5
"""

import math
from datetime import datetime, timezone
from typing import Optional

from repo_spy.models import HealthStatus, RepositoryStatistics
from repo_spy.processor import NO_DESCRIPTION, NO_LANGUAGE

BASE_POINTS = 20
DESCRIPTION_POINTS = 10
LANGUAGE_POINTS = 10

STAR_CAP = 1000
STAR_MAX_POINTS = 20
FORK_CAP = 500
FORK_MAX_POINTS = 15

_SECONDS_PER_DAY = 60 * 60 * 24

# (exclusive upper bound in days, bonus), first match wins
RECENCY_BANDS = ((30, 15), (90, 10), (365, 5))

# (inclusive lower bound, status), first match wins
STATUS_THRESHOLDS = (
    (80, HealthStatus.EXCELLENT),
    (60, HealthStatus.GOOD),
    (40, HealthStatus.FAIR),
    (20, HealthStatus.POOR),
)


def star_points(stars: int) -> float:
    return min(stars, STAR_CAP) * STAR_MAX_POINTS / STAR_CAP


def fork_points(forks: int) -> float:
    return min(forks, FORK_CAP) * FORK_MAX_POINTS / FORK_CAP


def issue_penalty(open_issues: int) -> int:
    if open_issues > 100:
        return -10
    if open_issues > 50:
        return -5
    return 0


def days_since(updated_at: Optional[datetime], now: Optional[datetime] = None) -> Optional[float]:
    """Fractional days from ``updated_at`` to ``now``; None if unknown."""
    if updated_at is None:
        return None
    if updated_at.tzinfo is None:
        # Naive values are local time, as in processor.parse_timestamp
        updated_at = updated_at.astimezone()
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.astimezone()
    return (now - updated_at).total_seconds() / _SECONDS_PER_DAY


def recency_points(updated_at: Optional[datetime], now: Optional[datetime] = None) -> int:
    days = days_since(updated_at, now)
    if days is None:
        return 0
    for bound, points in RECENCY_BANDS:
        if days < bound:
            return points
    return 0


def calculate_health_score(
    stats: RepositoryStatistics, now: Optional[datetime] = None
) -> int:
    """Compute the 0–100 health score for ``stats``.

    Recency is measured from ``stats.updated_at`` (the parsed upstream
    timestamp), never from the formatted ``last_updated`` string.
    """
    score: float = BASE_POINTS
    if stats.description != NO_DESCRIPTION:
        score += DESCRIPTION_POINTS
    if stats.language != NO_LANGUAGE:
        score += LANGUAGE_POINTS
    score += star_points(stats.stars)
    score += fork_points(stats.forks)
    score += issue_penalty(stats.open_issues)
    score += recency_points(stats.updated_at, now)

    rounded = math.floor(score + 0.5)
    return min(max(rounded, 0), 100)


def get_health_status(score: int) -> HealthStatus:
    """Map a health score to its qualitative label."""
    for threshold, status in STATUS_THRESHOLDS:
        if score >= threshold:
            return status
    return HealthStatus.CRITICAL
