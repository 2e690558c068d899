from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Protocol
from urllib.parse import urlsplit

from memebot.models import MemeCandidate
from memebot.services.meme_api import MemeApiError
from memebot.services.recent import RecentMemes

if TYPE_CHECKING:
    from memebot.config import Settings

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".png", ".gif")
DEFAULT_SUBREDDITS = (
    "memes",
    "dankmemes",
    "wholesomememes",
    "funny",
    "animemes",
    "comedyheaven",
)


class MemeSource(Protocol):
    async def fetch_random(self, subreddit: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class SelectionPolicy:
    """Subreddits to draw from and the minimum upvotes per attempt.

    ``thresholds[0]`` applies to the initial request, every further entry to
    one retry, so the retry budget is ``len(thresholds) - 1``.
    """

    subreddits: tuple[str, ...] = DEFAULT_SUBREDDITS
    thresholds: tuple[int, ...] = (1000, 500, 100, 100)
    retry_delay: float = 1.0
    extensions: tuple[str, ...] = IMAGE_EXTENSIONS

    def __post_init__(self) -> None:
        if not self.subreddits:
            raise ValueError("subreddits must not be empty")
        if not self.thresholds:
            raise ValueError("thresholds must not be empty")

    @property
    def retries(self) -> int:
        return len(self.thresholds) - 1

    @classmethod
    def from_settings(cls, settings: Settings) -> SelectionPolicy:
        thresholds = list(settings.MEME_UPVOTE_THRESHOLDS)
        if settings.MEME_BOOTSTRAP_MIN_UPVOTES is not None:
            thresholds[0] = settings.MEME_BOOTSTRAP_MIN_UPVOTES
        return cls(
            subreddits=tuple(settings.MEME_SUBREDDITS),
            thresholds=tuple(thresholds),
            retry_delay=settings.MEME_RETRY_DELAY,
        )


class MemeSelector:
    def __init__(
        self,
        source: MemeSource,
        recent: RecentMemes,
        policy: Optional[SelectionPolicy] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.source = source
        self.recent = recent
        self.policy = policy or SelectionPolicy()
        self._rng = rng or random.Random()
        self._sleep = sleep

    async def select(self) -> Optional[MemeCandidate]:
        """Return an acceptable meme, or None once the retry budget is spent.

        Every attempt queries the same subreddit. A failed request on the
        initial attempt ends the selection; failed retries only use up budget.
        """
        subreddit = self._rng.choice(self.policy.subreddits)

        for attempt, min_ups in enumerate(self.policy.thresholds):
            if attempt == 0:
                logger.info("Fetching meme from r/%s", subreddit)
            else:
                await self._sleep(self.policy.retry_delay)
                logger.info("Retry attempt %d/%d for r/%s", attempt, self.policy.retries, subreddit)

            try:
                data = await self.source.fetch_random(subreddit)
            except MemeApiError as exc:
                if attempt == 0:
                    logger.error("Error fetching meme from r/%s: %s", subreddit, exc)
                    return None
                logger.warning("Retry attempt %d for r/%s failed: %s", attempt, subreddit, exc)
                continue

            candidate = MemeCandidate.from_api(data, subreddit)
            logger.debug(
                "Meme data: %s | ups=%d | min=%d | url=%s",
                candidate.title,
                candidate.ups,
                min_ups,
                candidate.url[:50],
            )

            reason = self.rejection_reason(candidate, min_ups)
            if reason is None:
                self.recent.add(candidate.url)
                logger.info("Found meme: %s (%d ups)", candidate.title, candidate.ups)
                return candidate
            logger.info(
                "Meme rejected (%s): ups=%d, min=%d, url=%s",
                reason,
                candidate.ups,
                min_ups,
                candidate.url[:50],
            )

        logger.warning("All %d retry attempts failed for r/%s", self.policy.retries, subreddit)
        return None

    def rejection_reason(self, candidate: MemeCandidate, min_ups: int) -> Optional[str]:
        if not candidate.url:
            return "missing url"
        if not urlsplit(candidate.url).path.lower().endswith(self.policy.extensions):
            return "not an image"
        if candidate.ups < min_ups:
            return "too few upvotes"
        if candidate.url in self.recent:
            return "repeat"
        return None
