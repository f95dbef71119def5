"""Orchestrates one repo-spy run: fetch, normalize, score, render."""

from typing import Optional

from repo_spy.fetcher import GitHubFetcher
from repo_spy.logging import get_logger
from repo_spy.processor import process_repository_data
from repo_spy.scoring import calculate_health_score, get_health_status
from repo_spy.view import CLIView

logger = get_logger(__name__)


class RepoSpyApp:
    """Runs a single repository report against the GitHub API."""

    def __init__(
        self,
        token: Optional[str] = None,
        view: Optional[CLIView] = None,
        fetcher: Optional[GitHubFetcher] = None,
    ) -> None:
        self.view = view or CLIView()
        self._fetcher = fetcher or GitHubFetcher(token=token)

    async def run(self, owner: str, repo: str) -> int:
        """Print the report for ``owner/repo``; return the process exit code."""
        try:
            self.view.show_welcome()
            self.view.show_loading(f"Fetching repository data for {owner}/{repo}...")

            response = await self._fetcher.get_repository(owner, repo)
            if not response.success or response.data is None:
                self.view.display_error(response.error or "Failed to fetch repository data")
                return 1

            stats = process_repository_data(response.data)
            score = calculate_health_score(stats)
            status = get_health_status(score)
            logger.debug("%s scored %d (%s)", stats.full_name, score, status.value)
            self.view.display_repository_stats(stats, score, status)

            rate_limit = await self._fetcher.get_rate_limit()
            if rate_limit.success and rate_limit.data is not None:
                self.view.display_rate_limit(rate_limit.data)

            self.view.display_success("Repository analysis completed successfully!")
            return 0
        except Exception as e:
            logger.exception("Unexpected error while inspecting %s/%s", owner, repo)
            self.view.display_error(str(e) or "An unexpected error occurred")
            return 1
        finally:
            await self._fetcher.close()
