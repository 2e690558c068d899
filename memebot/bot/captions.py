from __future__ import annotations

from memebot.models import MemeCandidate

QUALITY_TIERS = (
    (10_000, "🔥"),
    (5_000, "⚡"),
)
DEFAULT_QUALITY_EMOJI = "👍"

WELCOME_TEXT = (
    "🤖 Welcome to Content Bot!\n\n"
    "Commands:\n"
    "/mem - Get a top-rated meme\n\n"
    "Just send /mem and I'll find you the best memes with 1000+ upvotes! 🔥"
)
NO_MEME_TEXT = "😅 Sorry, couldn't fetch a meme right now. Try again!"
ERROR_TEXT = "❌ Something went wrong while fetching the meme! Try again"


def quality_emoji(ups: int) -> str:
    for min_ups, emoji in QUALITY_TIERS:
        if ups >= min_ups:
            return emoji
    return DEFAULT_QUALITY_EMOJI


def format_meme_caption(meme: MemeCandidate) -> str:
    return f"{quality_emoji(meme.ups)} {meme.title}\nr/{meme.subreddit} • ⬆️ {meme.ups:,}"
