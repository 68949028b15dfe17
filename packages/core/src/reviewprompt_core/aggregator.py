from __future__ import annotations

import logging
from typing import Iterable

from reviewprompt_core.models import PlatformContext, Review
from reviewprompt_core.sources import ReviewSource, build_source

logger = logging.getLogger(__name__)


class ReviewAggregator:
    """Uniform front over whichever ReviewSource the platform selected.

    Neither operation retries; both hit the network or an external process.
    """

    def __init__(self, source: ReviewSource):
        self.source = source

    @property
    def context(self) -> PlatformContext:
        return self.source.context

    @property
    def platform_label(self) -> str:
        return self.context.label

    @property
    def repo_path(self) -> str:
        return self.context.repo_path

    def list_reviews(self) -> list[Review]:
        logger.debug("Listing open reviews for %s", self.repo_path)
        return list(self.source.list_reviews())

    def fetch_diff(self, number: int, repo_path: str | None = None) -> str:
        logger.debug("Fetching diff for #%d", number)
        return self.source.fetch_diff(number, repo_path or self.repo_path)


def build_aggregator(context: PlatformContext, token: str | None = None) -> ReviewAggregator:
    return ReviewAggregator(build_source(context, token=token))


def find_review(reviews: Iterable[Review], number: int) -> Review | None:
    for review in reviews:
        if review.number == number:
            return review
    return None
