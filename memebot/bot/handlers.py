from __future__ import annotations

import logging

from aiogram import Dispatcher
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from memebot.bot.captions import ERROR_TEXT, NO_MEME_TEXT, WELCOME_TEXT, format_meme_caption
from memebot.services.selector import MemeSelector

logger = logging.getLogger(__name__)


def register_handlers(dp: Dispatcher) -> None:
    dp.message.register(start_command, CommandStart())
    dp.message.register(mem_command, Command("mem"))


async def start_command(message: Message) -> None:
    await message.answer(WELCOME_TEXT)


async def mem_command(message: Message, selector: MemeSelector) -> None:
    try:
        meme = await selector.select()
        if meme is None:
            await message.answer(NO_MEME_TEXT)
            return
        await message.answer_photo(photo=meme.url, caption=format_meme_caption(meme))
    except Exception:
        logger.exception("Error in mem command")
        await message.answer(ERROR_TEXT)
