"""CLI entry point for repo-spy."""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
from typing import NoReturn, Sequence

from repo_spy import __version__
from repo_spy.config import TOKEN_ENV_VARS, resolve_token
from repo_spy.logging import configure_logging

INVALID_FORMAT = "Invalid repository format. Use: owner/repo (e.g., facebook/react)"

# Characters GitHub allows in user, organization and repository names
_NAME_RE = re.compile(r"[A-Za-z0-9._-]+")

_EPILOG = """\
examples:
  repo-spy facebook/react
  repo-spy torvalds/linux --token ghp_xxx

environment variables:
  GITHUB_TOKEN   GitHub personal access token (GH_TOKEN is also accepted)
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="repo-spy",
        description="Fetch GitHub repository statistics from the command line.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "repository",
        help="Repository in the format owner/repo.",
    )
    parser.add_argument(
        "-t",
        "--token",
        default=None,
        help=f"GitHub personal access token (defaults to ${TOKEN_ENV_VARS[0]}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_repository_input(value: str) -> tuple[str, str] | None:
    """Split ``owner/repo`` into its parts, or None if the shape is wrong."""
    parts = value.split("/")
    if len(parts) != 2:
        return None
    owner, repo = (part.strip() for part in parts)
    for part in (owner, repo):
        if not _NAME_RE.fullmatch(part) or part in (".", ".."):
            return None
    return owner, repo


def main(argv: Sequence[str] | None = None) -> int:
    """Run repo-spy and return its exit code."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GITHUB_TOKEN)

    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    from repo_spy.app import RepoSpyApp
    from repo_spy.view import CLIView

    view = CLIView()
    parsed = parse_repository_input(args.repository)
    if parsed is None:
        view.display_error(INVALID_FORMAT)
        return 1

    owner, repo = parsed
    app = RepoSpyApp(token=resolve_token(args.token), view=view)
    return asyncio.run(app.run(owner, repo))


if __name__ == "__main__":
    sys.exit(main())
