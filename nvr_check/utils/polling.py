"""Bounded polling used while waiting on the NVR."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def poll_until(
    probe: Callable[[], Awaitable[T]],
    predicate: Callable[[T], bool],
    timeout: float = 10.0,
    interval: float = 0.5,
    name: str = "poll",
) -> Optional[T]:
    """
    Call ``probe`` every ``interval`` seconds until ``predicate`` accepts its
    result or ``timeout`` seconds have passed.

    The loop runs as its own task raced against the timeout. When the timeout
    wins the task is cancelled and awaited, so no probe is left running once
    this returns.

    Args:
        probe: Coroutine function producing the value to test
        predicate: Returns True when the value is the one we are waiting for
        timeout: Overall bound in seconds
        interval: Delay between probes in seconds
        name: Label used in log messages

    Returns:
        The first accepted value, or None if the bound expired
    """

    async def _loop() -> T:
        attempt = 0
        while True:
            attempt += 1
            value = await probe()
            if predicate(value):
                logger.debug(f"{name}: condition met after {attempt} attempt(s)")
                return value
            await asyncio.sleep(interval)

    task = asyncio.create_task(_loop(), name=name)
    try:
        # wait_for cancels the task on timeout and waits for it to finish
        return await asyncio.wait_for(task, timeout=timeout)
    except asyncio.TimeoutError:
        logger.debug(f"{name}: gave up after {timeout}s")
        return None
