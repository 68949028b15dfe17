"""Review listing backends.

There are exactly two, one per supported platform, and they are structurally
different:

  GitHubSource  — typed records from the REST API (PyGithub); a pure field
                  mapping, nothing to parse.
  GitLabSource  — free text from ``glab mr list``; parsed heuristically by
                  reviewprompt_core.glab.merge_request.

Diffs come from the platform CLI in both cases (``gh pr diff`` /
``glab mr diff``), returned verbatim.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from github import GithubException
from requests.exceptions import RequestException

from reviewprompt_core.errors import DiffUnavailableError, SourceUnavailableError
from reviewprompt_core.gh.pull_request import get_pull_requests, get_repo, pull_to_review
from reviewprompt_core.glab.merge_request import parse_mr_list
from reviewprompt_core.models import Platform, PlatformContext, Review
from reviewprompt_core.utils.process import run_command

logger = logging.getLogger(__name__)


class ReviewSource(ABC):
    # Subcommand the platform CLI uses for review requests ("pr" / "mr").
    REQUEST_NOUN: str = ""

    def __init__(self, context: PlatformContext):
        self.context = context

    @abstractmethod
    def list_reviews(self) -> list[Review]:
        """Return open reviews in listing order. Raises SourceUnavailableError."""

    def fetch_diff(self, number: int, repo_path: str) -> str:
        cli = self.context.platform.cli
        args = [cli, self.REQUEST_NOUN, "diff", str(number), "--repo", repo_path]
        result = run_command(args)
        if not result.ok:
            raise DiffUnavailableError(f"failed to execute `{cli} {self.REQUEST_NOUN} diff`", stderr=result.stderr)
        return result.stdout


class GitHubSource(ReviewSource):
    REQUEST_NOUN = "pr"

    def __init__(self, context: PlatformContext, token: str):
        super().__init__(context)
        self.token = token

    def list_reviews(self) -> list[Review]:
        try:
            repo = get_repo(self.context.repo_path, token=self.token)
            reviews = [pull_to_review(pr) for pr in get_pull_requests(repo)]
        except (GithubException, RequestException) as e:
            raise SourceUnavailableError(f"failed to list pull requests for {self.context.repo_path}: {e}") from e
        logger.debug("Listed %d open pull requests", len(reviews))
        return reviews


class GitLabSource(ReviewSource):
    REQUEST_NOUN = "mr"

    def list_reviews(self) -> list[Review]:
        result = run_command(["glab", "mr", "list", "--repo", self.context.repo_path])
        if not result.ok:
            raise SourceUnavailableError("failed to execute `glab mr list`", stderr=result.stderr)
        reviews = parse_mr_list(result.stdout)
        logger.debug("Parsed %d open merge requests", len(reviews))
        return reviews


def build_source(context: PlatformContext, token: str | None = None) -> ReviewSource:
    if context.platform is Platform.GITHUB:
        if not token:
            raise SourceUnavailableError("A GitHub token is required to list pull requests.")
        return GitHubSource(context, token=token)
    if context.platform is Platform.GITLAB:
        return GitLabSource(context)
    raise ValueError(f"Unsupported platform: {context.platform!r}")
