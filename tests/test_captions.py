import pytest

from memebot.bot.captions import format_meme_caption, quality_emoji
from memebot.models import MemeCandidate


@pytest.mark.parametrize(
    ("ups", "emoji"),
    [(0, "👍"), (4_999, "👍"), (5_000, "⚡"), (9_999, "⚡"), (10_000, "🔥"), (250_000, "🔥")],
)
def test_quality_emoji_tiers(ups: int, emoji: str) -> None:
    assert quality_emoji(ups) == emoji


def test_format_meme_caption_includes_title_subreddit_and_upvotes() -> None:
    meme = MemeCandidate(url="a.jpg", title="When the tests pass", subreddit="memes", ups=12345)

    assert format_meme_caption(meme) == "🔥 When the tests pass\nr/memes • ⬆️ 12,345"
