from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TITLE = "Untitled Meme"
DEFAULT_AUTHOR = "Anonymous"


class MemeCandidate(BaseModel):
    url: str = ""
    title: str = DEFAULT_TITLE
    author: str = DEFAULT_AUTHOR
    subreddit: str
    ups: int = Field(default=0, ge=0)
    preview: list[str] = Field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, Any], subreddit: str) -> MemeCandidate:
        """Build a candidate from a meme API payload, defaulting missing or malformed fields."""
        preview = data.get("preview") or []
        if not isinstance(preview, list):
            preview = []
        return cls(
            url=_as_text(data.get("url")),
            title=_as_text(data.get("title")) or DEFAULT_TITLE,
            author=_as_text(data.get("author")) or DEFAULT_AUTHOR,
            subreddit=_as_text(data.get("subreddit")) or subreddit,
            ups=_as_ups(data.get("ups")),
            preview=[item for item in preview if isinstance(item, str)],
        )


def _as_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_ups(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        ups = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(ups, 0)
