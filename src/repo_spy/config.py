"""Static settings and token resolution."""

import os
from typing import Optional

GITHUB_API_URL = "https://api.github.com"
ACCEPT_HEADER = "application/vnd.github.v3+json"
USER_AGENT = "Repo-Spy-CLI"
REQUEST_TIMEOUT = 10.0  # seconds

# Checked in order when no --token is given
TOKEN_ENV_VARS = ("GITHUB_TOKEN", "GH_TOKEN")


def resolve_token(explicit: Optional[str] = None) -> Optional[str]:
    """Return the explicit token, else the first non-empty env var, else None."""
    if explicit and explicit.strip():
        return explicit.strip()
    for var in TOKEN_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            return value
    return None
