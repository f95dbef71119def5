"""Normalization of raw GitHub payloads into display-ready statistics."""

from datetime import datetime, tzinfo
from typing import Optional

from repo_spy.models import OwnerProfile, RawRepository, RepositoryStatistics

NO_DESCRIPTION = "No description available"
NO_LANGUAGE = "Not specified"
INVALID_DATE = "Invalid Date"

# Fixed English names keep the display string independent of the process locale.
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_timestamp(value: Optional[str], tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware datetime in ``tz``.

    ``tz`` defaults to the local zone. Timestamps without an offset are read
    as local time. Returns None when the value cannot be parsed.
    """
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt.astimezone(tz)


def format_date(value: Optional[str], tz: Optional[tzinfo] = None) -> str:
    """Format an ISO timestamp as e.g. ``Dec 1, 2023, 09:05 AM``."""
    dt = parse_timestamp(value, tz)
    if dt is None:
        return INVALID_DATE
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}, {dt:%I:%M} {meridiem}"


def process_repository_data(
    repo: RawRepository, tz: Optional[tzinfo] = None
) -> RepositoryStatistics:
    """Transform a raw repository payload into RepositoryStatistics.

    Nullable upstream fields are replaced by fixed fallbacks so nothing
    downstream sees None. Size stays in kilobytes.
    """
    return RepositoryStatistics(
        name=repo.name,
        full_name=repo.full_name,
        description=repo.description or NO_DESCRIPTION,
        stars=repo.stargazers_count,
        forks=repo.forks_count,
        open_issues=repo.open_issues_count,
        language=repo.language or NO_LANGUAGE,
        url=repo.html_url,
        last_updated=format_date(repo.updated_at, tz),
        updated_at=parse_timestamp(repo.updated_at, tz),
        size=repo.size,
        default_branch=repo.default_branch,
        owner=OwnerProfile(
            username=repo.owner.login,
            avatar_url=repo.owner.avatar_url,
            profile_url=repo.owner.html_url,
        ),
    )
