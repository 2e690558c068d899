from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager, suppress

import uvicorn
from aiogram import Bot, Dispatcher
from fastapi import FastAPI

from memebot.bot.handlers import register_handlers
from memebot.bot.updates import start_updates
from memebot.config import settings
from memebot.lifecycle import cancel_tasks, install_fatal_handlers
from memebot.services.meme_api import MemeApiClient, build_http_client
from memebot.services.recent import RecentMemes
from memebot.services.selector import MemeSelector, SelectionPolicy
from memebot.web.routes import router

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.LOG_LEVEL.upper(),
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

bot = Bot(token=settings.BOT_TOKEN)
dp = Dispatcher()
register_handlers(dp)


@asynccontextmanager
async def lifespan(app: FastAPI):
    http_client = build_http_client(settings.MEME_API_TIMEOUT, settings.MEME_API_USER_AGENT)
    dp["selector"] = MemeSelector(
        MemeApiClient(http_client, settings.MEME_API_BASE_URL),
        RecentMemes(settings.RECENT_MEMES_LIMIT),
        SelectionPolicy.from_settings(settings),
    )

    mode, tasks = await start_updates(bot, dp, settings)
    app.state.bot = bot
    app.state.dp = dp
    app.state.update_mode = mode
    app.state.bot_tasks = tasks
    install_fatal_handlers(asyncio.get_running_loop(), lambda: cancel_tasks(app.state.bot_tasks))
    logger.info("Content bot started successfully in %s mode", mode)
    try:
        yield
    finally:
        logger.info("Shutting down gracefully...")
        tasks = getattr(app.state, "bot_tasks", [])
        cancel_tasks(tasks)
        for task in tasks:
            with suppress(asyncio.CancelledError):
                await task
        await http_client.aclose()
        await bot.session.close()


app = FastAPI(lifespan=lifespan)
app.include_router(router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.APP_HOST, port=settings.PORT)
