from __future__ import annotations

from aiogram.types import Update
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from memebot.bot.updates import WEBHOOK, WEBHOOK_PATH

HEALTH_TEXT = "Content Bot is running! 🤖"

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    return HEALTH_TEXT


@router.post(WEBHOOK_PATH)
async def telegram_webhook(request: Request):
    if getattr(request.app.state, "update_mode", None) != WEBHOOK:
        raise HTTPException(status_code=404, detail="Not Found")

    bot = request.app.state.bot
    dp = request.app.state.dp
    update = Update.model_validate(await request.json(), context={"bot": bot})
    await dp.feed_update(bot, update)
    return {"ok": True}
