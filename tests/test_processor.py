"""Tests for repository normalization."""

from datetime import datetime, timedelta, timezone

from repo_spy.models import RawRepository
from repo_spy.processor import (
    INVALID_DATE,
    NO_DESCRIPTION,
    NO_LANGUAGE,
    format_date,
    parse_timestamp,
    process_repository_data,
)

from conftest import make_payload

UTC = timezone.utc


def _raw(**overrides) -> RawRepository:
    return RawRepository.model_validate(make_payload(**overrides))


class TestProcessRepositoryData:
    def test_transforms_fields(self, raw_repository):
        stats = process_repository_data(raw_repository, tz=UTC)

        assert stats.name == "test-repo"
        assert stats.full_name == "test-owner/test-repo"
        assert stats.description == "A test repository"
        assert stats.stars == 100
        assert stats.forks == 50
        assert stats.open_issues == 10
        assert stats.language == "Python"
        assert stats.url == "https://github.com/test-owner/test-repo"
        assert stats.size == 1024
        assert stats.default_branch == "main"

    def test_owner_renamed(self, raw_repository):
        owner = process_repository_data(raw_repository, tz=UTC).owner
        assert owner.username == "test-owner"
        assert owner.avatar_url == "https://github.com/test-owner.png"
        assert owner.profile_url == "https://github.com/test-owner"

    def test_null_description_and_language(self):
        stats = process_repository_data(_raw(description=None, language=None), tz=UTC)
        assert stats.description == NO_DESCRIPTION
        assert stats.language == NO_LANGUAGE

    def test_empty_description_defaults(self):
        stats = process_repository_data(_raw(description=""), tz=UTC)
        assert stats.description == "No description available"

    def test_last_updated_is_formatted(self, raw_repository):
        stats = process_repository_data(raw_repository, tz=UTC)
        assert stats.last_updated == "Jun 1, 2025, 12:00 AM"

    def test_keeps_machine_timestamp(self, raw_repository):
        stats = process_repository_data(raw_repository, tz=UTC)
        assert stats.updated_at == datetime(2025, 6, 1, tzinfo=UTC)

    def test_invalid_timestamp_does_not_raise(self):
        stats = process_repository_data(_raw(updated_at="yesterday-ish"), tz=UTC)
        assert stats.last_updated == INVALID_DATE
        assert stats.updated_at is None

    def test_deterministic(self, raw_repository):
        first = process_repository_data(raw_repository, tz=UTC)
        second = process_repository_data(raw_repository, tz=UTC)
        assert first == second


class TestFormatDate:
    def test_midnight(self):
        assert format_date("2023-12-01T00:00:00Z", tz=UTC) == "Dec 1, 2023, 12:00 AM"

    def test_afternoon_zero_padded(self):
        assert format_date("2024-03-05T14:07:00Z", tz=UTC) == "Mar 5, 2024, 02:07 PM"

    def test_noon_is_pm(self):
        assert format_date("2024-07-20T12:30:00Z", tz=UTC) == "Jul 20, 2024, 12:30 PM"

    def test_converts_into_target_zone(self):
        tz = timezone(timedelta(hours=-5))
        assert format_date("2024-01-01T03:00:00Z", tz=tz) == "Dec 31, 2023, 10:00 PM"

    def test_offset_input(self):
        assert format_date("2024-03-05T14:07:00+02:00", tz=UTC) == "Mar 5, 2024, 12:07 PM"

    def test_invalid(self):
        assert format_date("not-a-date", tz=UTC) == INVALID_DATE

    def test_empty(self):
        assert format_date("", tz=UTC) == INVALID_DATE
        assert format_date(None, tz=UTC) == INVALID_DATE


class TestParseTimestamp:
    def test_aware_result(self):
        dt = parse_timestamp("2025-01-15T10:00:00Z", tz=UTC)
        assert dt == datetime(2025, 1, 15, 10, 0, tzinfo=UTC)

    def test_naive_input_read_as_local(self):
        dt = parse_timestamp("2025-01-15T10:00:00")
        assert dt is not None
        assert dt.tzinfo is not None
        assert dt.replace(tzinfo=None) == datetime(2025, 1, 15, 10, 0)

    def test_garbage(self):
        assert parse_timestamp("garbage") is None
