"""Concurrent greeting and farewell that share cancellation and deadlines."""

from __future__ import annotations

import asyncio

SUPPORTED_LOCALE = "EN/US"
DEFAULT_DELAY = 60.0


class UnsupportedLocale(Exception):
    """Raised when the locale has no greeting."""

    def __init__(self) -> None:
        super().__init__("unsupported locale")


async def locale(delay: float = DEFAULT_DELAY) -> str:
    """Look up the locale, which takes ``delay`` seconds."""
    await asyncio.sleep(delay)
    return SUPPORTED_LOCALE


async def gen_greeting(delay: float = DEFAULT_DELAY, timeout: float | None = None) -> str:
    """Return the greeting word, failing with ``TimeoutError`` after ``timeout`` seconds."""
    found = await asyncio.wait_for(locale(delay), timeout)
    if found == SUPPORTED_LOCALE:
        return "hello"
    raise UnsupportedLocale()


async def gen_farewell(delay: float = DEFAULT_DELAY) -> str:
    """Return the farewell word."""
    found = await locale(delay)
    if found == SUPPORTED_LOCALE:
        return "goodbye"
    raise UnsupportedLocale()


def _describe(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return "context deadline exceeded"
    if isinstance(exc, asyncio.CancelledError):
        return "context canceled"
    return str(exc)


async def greet_and_farewell(
    delay: float = DEFAULT_DELAY, timeout: float | None = None
) -> list[str]:
    """Produce the greeting and farewell concurrently and return the printed lines.

    If the greeting fails, the farewell is cancelled.
    """
    lines: list[str] = []

    def emit(line: str) -> None:
        print(line)
        lines.append(line)

    async def farewell() -> None:
        try:
            word = await gen_farewell(delay)
        except (asyncio.CancelledError, UnsupportedLocale) as exc:
            emit(f"cannot print farewell: {_describe(exc)}")
            return
        emit(f"{word} world!")

    farewell_task = asyncio.create_task(farewell())

    async def greeting() -> None:
        try:
            word = await gen_greeting(delay, timeout)
        except (asyncio.TimeoutError, UnsupportedLocale) as exc:
            emit(f"cannot print greeting: {_describe(exc)}")
            farewell_task.cancel()
            return
        emit(f"{word} world!")

    greeting_task = asyncio.create_task(greeting())
    await asyncio.gather(greeting_task, farewell_task)
    return lines