"""Concurrent loading of the landing view's catalog data."""
from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..schemas import catalog as schemas
from . import catalog as catalog_service

SlotLoader = Callable[[AsyncSession], Awaitable[Any]]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HomepageState:
    """Disjoint result slots, one per independent load."""

    cities: list[str] = field(default_factory=list)
    featured: list[schemas.PresentationListing] = field(default_factory=list)
    cities_loaded: bool = False
    featured_loaded: bool = False


class HomepageView:
    """Run the city and featured loads side by side for one view lifetime.

    Each load gets its own session and commits only into its own slot. Once the
    view is unmounted, pending loads are cancelled and late results are dropped.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._tasks: list[asyncio.Task[None]] = []
        self._closed = False
        self.state = HomepageState()

    @property
    def closed(self) -> bool:
        return self._closed

    def mount(self) -> None:
        """Start both loads without ordering between them."""

        if self._tasks or self._closed:
            return
        self._tasks = [
            asyncio.create_task(self._fill("cities", catalog_service.load_city_directory)),
            asyncio.create_task(self._fill("featured", catalog_service.load_featured_catalog)),
        ]

    async def settled(self) -> HomepageState:
        """Wait for every started load to finish and return the state."""

        if self._tasks:
            results = await asyncio.gather(*self._tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.error("Homepage load failed", exc_info=result)
        return self.state

    async def unmount(self) -> None:
        """Close the view, cancelling loads that are still in flight."""

        self._closed = True
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        for task in pending:
            with suppress(asyncio.CancelledError):
                await task

    async def _fill(self, slot: str, loader: SlotLoader) -> None:
        async with self._session_factory() as session:
            value = await loader(session)
        self._commit(slot, value)

    def _commit(self, slot: str, value: Any) -> None:
        if self._closed:
            logger.debug("Discarding %s result for an unmounted view", slot)
            return
        setattr(self.state, slot, value)
        setattr(self.state, f"{slot}_loaded", True)


async def load_homepage(session_factory: async_sessionmaker[AsyncSession]) -> HomepageState:
    """Load cities and featured listings concurrently for a single request."""

    view = HomepageView(session_factory)
    view.mount()
    try:
        return await view.settled()
    finally:
        await view.unmount()
