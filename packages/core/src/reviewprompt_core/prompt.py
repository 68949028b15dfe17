"""Review prompt composition.

Pure formatting: the selected review, its diff and the platform label go in,
a fixed multi-section document comes out. The ``'''`` lines delimit the
prompt so it can be pasted into an agent as a single block.
"""

from __future__ import annotations

from reviewprompt_core.models import Review

_PROMPT_TEMPLATE = """
'''
**Code Review Request**

**Platform:** {label}
**{label}:** #{number}: {title}
**Author:** {author}

**Description:**
{body}

**Context:**
The following code is part of a {label}. The goal of this review is to ensure the security, quality and maintainability of the code before it is merged into the main codebase.

**Instructions for the AI agent:**

1.  **Security Review:**
    *   Check the code for common security vulnerabilities, such as:
        *   SQL Injection
        *   Cross-Site Scripting (XSS)
        *   Cross-Site Request Forgery (CSRF)
        *   Exposure of sensitive data (API keys, passwords, etc.)
        *   Use of insecure dependencies
        *   Inadequate security configuration
    *   Give a clear assessment of the security risk.

2.  **Code Quality Review:**
    *   Evaluate the clarity, readability and maintainability of the code.
    *   Check whether the code follows good practices for its language.
    *   Identify possible bugs, code smells or overly complex logic.
    *   Evaluate the handling of errors and edge cases.
    *   Suggest improvements where applicable, with examples.

3.  **Conclusion and Recommendation:**
    *   Based on your analysis, give a conclusion on the security and quality of this {label}.
    *   Answer unambiguously: **"Is it safe to merge this {label}?"** (Yes/No).
    *   If the answer is "No", list the critical issues that must be resolved before merging.

**Code for review (diff):**

```diff
{diff}
```

'''
"""


def compose_prompt(review: Review, diff: str, platform_label: str) -> str:
    if not isinstance(review, Review):
        raise TypeError(f"review must be a Review, got {type(review).__name__}")
    if diff is None or platform_label is None:
        raise TypeError("diff and platform_label must be strings")

    return _PROMPT_TEMPLATE.format(
        label=platform_label,
        number=review.number,
        title=review.title,
        author=review.author_handle or "unknown",
        body=review.body or "(no description)",
        diff=diff,
    )
