"""GitHub token lookup for the pull request listing.

Only the GitHub listing needs a token, because it goes through the REST API.
GitLab listings and every diff run through glab/gh, which hold their own
credentials.

Lookup order:
  1. GITHUB_TOKEN environment variable
  2. the session stored by `gh auth login`, read with `gh auth token`
"""

from __future__ import annotations

import logging
import os

from reviewprompt_core.utils.process import run_command

logger = logging.getLogger(__name__)

GH_TOKEN_TIMEOUT = 5


def _gh_session_token() -> str | None:
    result = run_command(["gh", "auth", "token"], timeout=GH_TOKEN_TIMEOUT)
    if not result.ok:
        logger.debug("gh auth token unavailable: %s", result.stderr.strip())
        return None
    return result.stdout.strip() or None


def resolve_github_token() -> str | None:
    """Return a GitHub token, or None when neither source has one.

    gh being absent, logged out or slow all count as "no token"; the caller
    turns None into a usage error.
    """
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token

    token = _gh_session_token()
    if token:
        logger.debug("Using GitHub token from the gh CLI session.")
    return token
