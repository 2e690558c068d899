from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramAPIError

from memebot.config import Settings

logger = logging.getLogger(__name__)

WEBHOOK = "webhook"
POLLING = "polling"
WEBHOOK_PATH = "/webhook"


def resolve_update_mode(environment: str, webhook_url: str) -> str:
    if environment.lower() != "production":
        return POLLING
    if not webhook_url:
        logger.warning("WEBHOOK_URL not set, using polling mode")
        return POLLING
    return WEBHOOK


def webhook_target(settings: Settings) -> str:
    return f"{settings.WEBHOOK_URL.rstrip('/')}{WEBHOOK_PATH}"


async def start_updates(bot: Bot, dp: Dispatcher, settings: Settings) -> tuple[str, list[asyncio.Task]]:
    """Register the webhook or start polling; returns the mode and any background tasks."""
    mode = resolve_update_mode(settings.ENVIRONMENT, settings.WEBHOOK_URL)
    if mode == WEBHOOK:
        try:
            await bot.set_webhook(webhook_target(settings), allowed_updates=dp.resolve_used_update_types())
        except TelegramAPIError as exc:
            logger.error("Failed to set webhook: %s", exc)
            logger.info("Falling back to polling mode")
        else:
            logger.info("Webhook set successfully")
            return WEBHOOK, []

    await bot.delete_webhook(drop_pending_updates=True)
    task = asyncio.create_task(
        dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
            handle_signals=False,
            close_bot_session=False,
        )
    )
    logger.info("Polling started")
    return POLLING, [task]
