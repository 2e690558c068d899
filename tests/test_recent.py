import pytest

from memebot.services.recent import RecentMemes


def test_recent_memes_evicts_oldest_entry_first() -> None:
    recent = RecentMemes(limit=3)
    for url in ("a.jpg", "b.jpg", "c.jpg", "d.jpg"):
        recent.add(url)

    assert len(recent) == 3
    assert "a.jpg" not in recent
    assert list(recent) == ["b.jpg", "c.jpg", "d.jpg"]


def test_recent_memes_never_exceeds_default_limit() -> None:
    recent = RecentMemes()
    for i in range(250):
        recent.add(f"https://i.redd.it/{i}.jpg")
        assert len(recent) <= 100

    assert len(recent) == 100
    assert next(iter(recent)) == "https://i.redd.it/150.jpg"


def test_recent_memes_readding_does_not_refresh_position() -> None:
    recent = RecentMemes(limit=2)
    recent.add("a.jpg")
    recent.add("b.jpg")
    recent.add("a.jpg")
    recent.add("c.jpg")

    assert list(recent) == ["b.jpg", "c.jpg"]


def test_recent_memes_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError, match="at least 1"):
        RecentMemes(limit=0)
