import httpx
import pytest

from memebot.services.meme_api import MemeApiClient, MemeApiError, build_http_client


def _client(handler) -> MemeApiClient:
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        headers={"User-Agent": "ContentBot/1.0"},
    )
    return MemeApiClient(http, "https://meme-api.test/gimme/")


@pytest.mark.anyio
async def test_fetch_random_requests_subreddit_endpoint() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"url": "a.jpg", "ups": 10})

    data = await _client(handler).fetch_random("memes")

    assert data == {"url": "a.jpg", "ups": 10}
    assert str(seen[0].url) == "https://meme-api.test/gimme/memes"
    assert seen[0].headers["User-Agent"] == "ContentBot/1.0"


@pytest.mark.anyio
async def test_fetch_random_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"code": 503, "message": "down"})

    with pytest.raises(MemeApiError, match="HTTP 503"):
        await _client(handler).fetch_random("memes")


@pytest.mark.anyio
async def test_fetch_random_raises_on_timeout() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(MemeApiError):
        await _client(handler).fetch_random("memes")


@pytest.mark.anyio
async def test_fetch_random_raises_on_non_object_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["not", "a", "meme"])

    with pytest.raises(MemeApiError, match="payload"):
        await _client(handler).fetch_random("memes")


@pytest.mark.anyio
async def test_fetch_random_raises_on_invalid_json() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(MemeApiError, match="JSON"):
        await _client(handler).fetch_random("memes")


@pytest.mark.anyio
async def test_build_http_client_sets_timeout_and_user_agent() -> None:
    client = build_http_client(12.0, "ContentBot/1.0")
    try:
        assert client.headers["User-Agent"] == "ContentBot/1.0"
        assert client.timeout.read == 12.0
    finally:
        await client.aclose()
