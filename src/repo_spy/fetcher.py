"""GitHub data fetching via REST API."""

import asyncio
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from repo_spy.config import ACCEPT_HEADER, GITHUB_API_URL, REQUEST_TIMEOUT, USER_AGENT
from repo_spy.logging import get_logger
from repo_spy.models import ApiResult, ErrorKind, RateLimitInfo, RawRepository

logger = get_logger(__name__)

DEFAULT_ERROR = "Failed to fetch repository data"
RATE_LIMIT_ERROR = "Failed to fetch rate limit information"


class GitHubFetcher:
    """Fetches repository metadata and rate-limit status from the GitHub REST API.

    Every operation returns a value; HTTP, transport and payload problems are
    reported as failed ApiResults rather than raised.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = GITHUB_API_URL,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": USER_AGENT,
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    async def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
            )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Error mapping ─────────────────────────────────────────────────────

    @staticmethod
    def _status_failure(resp: httpx.Response, owner: str, repo: str) -> ApiResult:
        """Translate a non-2xx repository response into a failed result."""
        status = resp.status_code
        if status == 404:
            return ApiResult.fail(
                f"Repository '{owner}/{repo}' not found. "
                "Please check the repository name and owner.",
                ErrorKind.NOT_FOUND,
                status,
            )
        if status == 403:
            return ApiResult.fail(
                "Rate limit exceeded. Consider using a GitHub token for higher limits.",
                ErrorKind.RATE_LIMITED,
                status,
            )
        if status == 401:
            return ApiResult.fail(
                "Unauthorized. Please check your GitHub token if using one.",
                ErrorKind.UNAUTHORIZED,
                status,
            )
        message = None
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message")
        return ApiResult.fail(message or DEFAULT_ERROR, ErrorKind.OTHER, status)

    def _transport_failure(self, exc: Exception) -> ApiResult:
        if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError)):
            return ApiResult.fail(
                f"Request timed out after {self.timeout:g} seconds.",
                ErrorKind.TIMEOUT,
            )
        return ApiResult.fail(str(exc) or DEFAULT_ERROR, ErrorKind.NETWORK)

    async def _send(self, method: str, path: str) -> httpx.Response:
        """Issue one request bounded by ``timeout`` end to end.

        The httpx timeout only bounds each phase (connect, each read).
        """
        client = await self._client_instance()
        return await asyncio.wait_for(client.request(method, path), self.timeout)

    @staticmethod
    def _repo_path(owner: str, repo: str) -> Optional[str]:
        """``/repos/{owner}/{repo}`` with each segment percent-encoded.

        Returns None for ``.``/``..`` segments, which would be collapsed
        into a different endpoint.
        """
        if {owner, repo} & {"", ".", ".."}:
            return None
        return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    # ── Repository ────────────────────────────────────────────────────────

    async def get_repository(self, owner: str, repo: str) -> ApiResult[RawRepository]:
        """Fetch and validate ``/repos/{owner}/{repo}``."""
        path = self._repo_path(owner, repo)
        if path is None:
            return ApiResult.fail(
                f"Repository '{owner}/{repo}' not found. "
                "Please check the repository name and owner.",
                ErrorKind.NOT_FOUND,
            )
        logger.debug("Fetching repository data for %s/%s", owner, repo)
        try:
            resp = await self._send("GET", path)
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.debug("Request for %s/%s failed: %r", owner, repo, exc)
            return self._transport_failure(exc)

        if not resp.is_success:
            logger.debug("GitHub returned %s for %s/%s", resp.status_code, owner, repo)
            return self._status_failure(resp, owner, repo)

        try:
            data = RawRepository.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("Malformed repository payload for %s/%s: %s", owner, repo, exc)
            return ApiResult.fail(
                "GitHub returned an unexpected repository payload.",
                ErrorKind.INVALID_PAYLOAD,
                resp.status_code,
            )
        return ApiResult.ok(data)

    async def validate_repository(self, owner: str, repo: str) -> bool:
        """True if ``owner/repo`` exists and is reachable with current credentials."""
        path = self._repo_path(owner, repo)
        if path is None:
            return False
        try:
            resp = await self._send("HEAD", path)
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            logger.debug("Existence check for %s/%s failed: %r", owner, repo, exc)
            return False
        return resp.is_success

    # ── Rate limit ────────────────────────────────────────────────────────

    async def get_rate_limit(self) -> ApiResult[RateLimitInfo]:
        """Fetch the current core rate-limit window."""
        try:
            resp = await self._send("GET", "/rate_limit")
            resp.raise_for_status()
            info = RateLimitInfo.from_payload(resp.json())
        except (
            httpx.HTTPError,
            asyncio.TimeoutError,
            ValueError,
            KeyError,
            TypeError,
            ValidationError,
        ) as exc:
            logger.debug("Rate limit lookup failed: %r", exc)
            return ApiResult.fail(RATE_LIMIT_ERROR, ErrorKind.OTHER)
        return ApiResult.ok(info)
