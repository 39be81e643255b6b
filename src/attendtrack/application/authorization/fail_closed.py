"""Fail-closed wrapper for authorization lookups."""

import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


async def try_resolve(lookup: Callable[[], Awaitable[bool]], *, description: str) -> bool:
    """Await lookup; any exception is logged and resolves to False.

    Lookups are not retried.
    """
    try:
        return bool(await lookup())
    except Exception:
        logger.warning("%s failed, denying", description, exc_info=True)
        return False
