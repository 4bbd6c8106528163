"""Lazily initialized, shared resources."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class SingleFlight(Generic[T]):
    """Load a resource at most once, sharing the in-flight load.

    Callers arriving while the load is running await the same task. A failed
    load is forgotten so that the next caller starts a fresh attempt.
    """

    loader: Callable[[], Awaitable[T]]
    name: str = "resource"
    _task: "asyncio.Future[T] | None" = field(default=None, init=False, repr=False)

    @property
    def ready(self) -> bool:
        """Whether the resource has loaded successfully."""
        return (
            self._task is not None
            and self._task.done()
            and not self._task.cancelled()
            and self._task.exception() is None
        )

    async def get(self) -> T:
        """Return the loaded resource, starting the load if needed."""
        if self._task is None:
            _logger.info("Loading %s", self.name)
            self._task = asyncio.ensure_future(self._load())
        return await asyncio.shield(self._task)

    async def _load(self) -> T:
        try:
            value = await self.loader()
        except Exception:
            _logger.exception("Failed to load %s", self.name)
            self._task = None
            raise
        _logger.info("Loaded %s", self.name)
        return value
