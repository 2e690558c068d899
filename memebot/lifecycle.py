from __future__ import annotations

import asyncio
import logging
import os
import sys
from types import TracebackType
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

FATAL_EXIT_CODE = 1


def install_fatal_handlers(
    loop: asyncio.AbstractEventLoop,
    stop: Callable[[], None],
    exit: Callable[[int], Any] = os._exit,
) -> None:
    """Treat uncaught exceptions as fatal: log, try to stop the bot, exit non-zero."""

    def _shutdown() -> None:
        try:
            stop()
        except Exception:
            logger.info("Bot already stopped")
        for handler in logging.getLogger().handlers:
            handler.flush()
        exit(FATAL_EXIT_CODE)

    def _excepthook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
    ) -> None:
        logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        _shutdown()

    def _loop_exception_handler(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        exc = context.get("exception")
        logger.critical("Unhandled asyncio error: %s", context.get("message"), exc_info=exc)
        _shutdown()

    sys.excepthook = _excepthook
    loop.set_exception_handler(_loop_exception_handler)


def cancel_tasks(tasks: list[asyncio.Task]) -> None:
    for task in tasks:
        task.cancel()
