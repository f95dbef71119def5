"""Data models for repo-spy."""

from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


# ── Raw GitHub data ───────────────────────────────────────────────────────

class RepositoryOwner(BaseModel):
    """The ``owner`` block of a repository payload."""

    login: str
    id: int
    avatar_url: str
    html_url: str


class RawRepository(BaseModel):
    """Repository metadata as returned by ``GET /repos/{owner}/{repo}``."""

    id: int
    name: str
    full_name: str
    description: Optional[str] = None
    stargazers_count: int = Field(ge=0)
    forks_count: int = Field(ge=0)
    open_issues_count: int = Field(ge=0)
    language: Optional[str] = None
    html_url: str
    created_at: str
    updated_at: str
    size: int = Field(ge=0)
    default_branch: str
    owner: RepositoryOwner


# ── Normalized statistics ─────────────────────────────────────────────────

class OwnerProfile(BaseModel):
    """Display fields for the repository owner."""

    model_config = ConfigDict(frozen=True)

    username: str
    avatar_url: str
    profile_url: str


class RepositoryStatistics(BaseModel):
    """Display-ready projection of a RawRepository."""

    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str
    description: str
    stars: int
    forks: int
    open_issues: int
    language: str
    url: str
    last_updated: str
    updated_at: Optional[datetime] = None
    size: int
    default_branch: str
    owner: OwnerProfile


class HealthStatus(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"


# ── API results ───────────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Classification of a failed API call."""

    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    UNAUTHORIZED = "unauthorized"
    TIMEOUT = "timeout"
    NETWORK = "network"
    INVALID_PAYLOAD = "invalid_payload"
    OTHER = "other"


class ApiResult(BaseModel, Generic[T]):
    """Either a payload or a human-readable error, never both."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, data: T) -> "ApiResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        kind: ErrorKind = ErrorKind.OTHER,
        status_code: Optional[int] = None,
    ) -> "ApiResult[T]":
        return cls(success=False, error=message, kind=kind, status_code=status_code)


class RateLimitWindow(BaseModel):
    """One rate-limit bucket from ``GET /rate_limit``."""

    limit: int
    remaining: int
    reset: int
    used: int = 0

    @property
    def reset_at(self) -> datetime:
        """When the window resets, as an aware UTC datetime."""
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)


class RateLimitInfo(BaseModel):
    """The ``resources.core`` window, which governs REST calls."""

    core: RateLimitWindow

    @classmethod
    def from_payload(cls, payload: dict) -> "RateLimitInfo":
        return cls(core=payload["resources"]["core"])
