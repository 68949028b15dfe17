"""Parser for the human-readable output of ``glab mr list``.

glab offers no machine-readable mode for this listing, so its column-aligned
text is parsed heuristically. A typical listing looks like:

    Showing 2 open merge requests on acme/team/widgets. (Page 1)

    !42  acme/team/widgets  Fix login bug  (fix-login ← main)
    !7   acme/team/widgets  Refactor parser  (refactor ← main)

Policy: a line that cannot be understood is skipped, never fatal. Format
drift in glab should only ever require changes in this module.
"""

from __future__ import annotations

import logging

from reviewprompt_core.errors import ParseWarning
from reviewprompt_core.models import Review

logger = logging.getLogger(__name__)

MR_MARKER = "!"
_MIN_TOKENS = 4


def strip_branch_annotation(title: str) -> str:
    """Drop the trailing ``(branch)`` / ``(source ← target)`` decoration.

    Only the rightmost parenthesis pair counts. A title without a well-formed
    pair is returned unchanged.
    """
    start = title.rfind("(")
    end = title.rfind(")")
    if start != -1 and end != -1 and end > start:
        return title[:start].rstrip()
    return title


def parse_mr_line(line: str) -> Review | None:
    """Parse one listing line.

    Returns None for noise (blank, header, too few columns) and raises
    ParseWarning when a line looks like a merge request but its IID is not
    a number.
    """
    line = line.strip()
    if not line or not line.startswith(MR_MARKER):
        return None

    parts = line.split()
    if len(parts) < _MIN_TOKENS:
        return None

    iid_text = parts[0][len(MR_MARKER) :]
    # int() also takes "1_0", "+5" and non-ASCII digits.
    if not (iid_text.isascii() and iid_text.isdigit()):
        raise ParseWarning(f"Could not parse IID from line: {line}", line)
    iid = int(iid_text)

    # parts[1] repeats the project path.
    title = strip_branch_annotation(" ".join(parts[2:]))
    return Review(number=iid, title=title)


def parse_mr_list(output: str) -> list[Review]:
    """Parse the full ``glab mr list`` output, preserving listing order."""
    reviews: list[Review] = []
    for line in output.splitlines():
        try:
            review = parse_mr_line(line)
        except ParseWarning as w:
            logger.warning("Warning: %s", w)
            continue
        if review is not None:
            reviews.append(review)
    return reviews
