import os

import pytest

os.environ.setdefault("BOT_TOKEN", "123456:TEST-token")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
