from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Iterable, List


async def gather_or_cancel(awaitables: Iterable[Awaitable[Any]]) -> List[Any]:
    """
    Run awaitables concurrently and return their results in order.

    The first exception cancels every sibling that is still pending and is
    re-raised as is; no partial result list is ever returned.
    """
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return []
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Let cancelled tasks unwind before the failure leaves this frame.
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
