"""Platform-agnostic review data models.

Both listing backends produce the same Review record so nothing downstream
(selection, prompt composition) needs to know which platform it came from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    GITHUB = ("github", "GitHub Pull Request", "gh")
    GITLAB = ("gitlab", "GitLab Merge Request", "glab")

    def __init__(self, key: str, label: str, cli: str):
        self.key = key
        self.label = label
        self.cli = cli

    @classmethod
    def from_key(cls, key: str) -> Platform:
        if not isinstance(key, str):
            raise ValueError(f"Unknown platform: {key!r}. Choose 'github' or 'gitlab'.")
        for member in cls:
            if member.key == key.lower():
                return member
        raise ValueError(f"Unknown platform: {key!r}. Choose 'github' or 'gitlab'.")


@dataclass(frozen=True)
class Review:
    """One open pull/merge request.

    ``number`` is the user-facing PR number / MR IID and the only identifier
    shown to the user. ``id`` is the internal database id when the backend
    exposes it. ``body`` and ``author_handle`` are empty for text listings.
    """

    number: int
    title: str
    id: int | None = None
    body: str = ""
    author_handle: str = ""
    diff_reference: str = ""

    @property
    def display(self) -> str:
        return f"#{self.number}: {self.title}"


@dataclass(frozen=True)
class PlatformContext:
    """Where the current project lives. Computed once at startup."""

    platform: Platform
    owner: str  # GitHub owner, or the full group/project path on GitLab
    repo: str = ""  # empty on GitLab

    @property
    def repo_path(self) -> str:
        if self.repo:
            return f"{self.owner}/{self.repo}"
        return self.owner

    @property
    def label(self) -> str:
        return self.platform.label
