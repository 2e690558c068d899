from __future__ import annotations

from collections import OrderedDict
from typing import Iterator

DEFAULT_LIMIT = 100


class RecentMemes:
    """Insertion-ordered set of served image URLs, evicting the oldest past ``limit``."""

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._urls: OrderedDict[str, None] = OrderedDict()

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def __iter__(self) -> Iterator[str]:
        return iter(self._urls)

    def add(self, url: str) -> None:
        if url in self._urls:
            return
        self._urls[url] = None
        while len(self._urls) > self.limit:
            self._urls.popitem(last=False)
