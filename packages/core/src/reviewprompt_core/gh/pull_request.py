from __future__ import annotations

from github import Github

from reviewprompt_core.models import Review


def get_repo(repo_name: str, token: str):
    return Github(token).get_repo(repo_name)


def get_pull_requests(repo, state: str = "open"):
    """Return the first page of pull requests only: one API call, no paging."""
    return repo.get_pulls(state=state).get_page(0)


def pull_to_review(pr) -> Review:
    """Map a PyGithub PullRequest onto a Review without altering any field."""
    user = pr.user
    return Review(
        id=pr.id,
        number=pr.number,
        title=pr.title,
        body=pr.body or "",
        author_handle=(user.login if user is not None else "") or "",
        diff_reference=pr.diff_url or "",
    )
