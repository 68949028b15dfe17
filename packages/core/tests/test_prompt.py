"""Tests for review prompt composition."""

import pytest

from reviewprompt_core.models import Review
from reviewprompt_core.prompt import compose_prompt

REVIEW = Review(id=1, number=42, title="Fix login bug", body="Closes #12", author_handle="octocat")
DIFF = "diff --git a/app.py b/app.py\n+print('{hello}')"


def test_embeds_all_fields():
    prompt = compose_prompt(REVIEW, DIFF, "GitHub Pull Request")
    assert "**Platform:** GitHub Pull Request" in prompt
    assert "**GitHub Pull Request:** #42: Fix login bug" in prompt
    assert "**Author:** octocat" in prompt
    assert "Closes #12" in prompt


def test_diff_is_fenced_verbatim():
    prompt = compose_prompt(REVIEW, DIFF, "GitHub Pull Request")
    assert f"```diff\n{DIFF}\n```" in prompt


def test_prompt_is_delimited():
    lines = compose_prompt(REVIEW, DIFF, "GitLab Merge Request").strip().splitlines()
    assert lines[0] == "'''"
    assert lines[-1] == "'''"


def test_missing_author_and_body_have_placeholders():
    prompt = compose_prompt(Review(number=7, title="Refactor parser"), "", "GitLab Merge Request")
    assert "**Author:** unknown" in prompt
    assert "(no description)" in prompt


def test_is_deterministic():
    assert compose_prompt(REVIEW, DIFF, "x") == compose_prompt(REVIEW, DIFF, "x")


def test_merge_question_names_platform():
    prompt = compose_prompt(REVIEW, DIFF, "GitLab Merge Request")
    assert "Is it safe to merge this GitLab Merge Request?" in prompt


def test_none_review_raises_type_error():
    with pytest.raises(TypeError):
        compose_prompt(None, DIFF, "GitHub Pull Request")


def test_none_diff_raises_type_error():
    with pytest.raises(TypeError):
        compose_prompt(REVIEW, None, "GitHub Pull Request")
