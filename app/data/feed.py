"""
Fetch controller for the attack feed.

One EventFeed per mounted feed view. It fetches the full snapshot once and holds it;
there is no polling or invalidation, a fresh EventFeed is the only way to refresh.

    Loading --(list_events ok)--> Loaded(events)
    Loading --(DataSourceError)--> Failed(error)

After unmount() the state is frozen: a fetch still in flight is cancelled and whatever
it returns is dropped.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

from data.connection import DataSourceError, EventStore
from data.models import HoneypotEvent
from data.service import list_events

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded:
    events: tuple[HoneypotEvent, ...]


@dataclass(frozen=True)
class Failed:
    error: DataSourceError


FeedState = Union[Loading, Loaded, Failed]


class EventFeed:
    def __init__(self, store: EventStore):
        self.store = store
        self._task: Optional[asyncio.Task] = None
        self._unmounted = False
        self.state: FeedState = Loading()

    @property
    def events(self) -> tuple[HoneypotEvent, ...]:
        return self.state.events if isinstance(self.state, Loaded) else ()

    @property
    def mounted(self) -> bool:
        return self._task is not None and not self._unmounted

    def mount(self) -> None:
        """Schedule the one-shot fetch on the running loop. Later calls are no-ops."""
        if self._unmounted:
            return
        # A task cancelled by its loop shutting down (not by unmount) never settled; allow one more try.
        if self._task is not None and not self._task.cancelled():
            return
        self._task = asyncio.get_running_loop().create_task(self._fetch())

    async def load(self) -> FeedState:
        self.mount()
        # A finished task may belong to an earlier (closed) loop; only wait on one still running.
        if self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self.state

    def unmount(self) -> None:
        self._unmounted = True
        if self._task is not None and not self._task.done():
            logger.debug("Feed unmounted with fetch in flight; discarding result")
            self._task.cancel()

    async def _fetch(self) -> None:
        try:
            events = await asyncio.to_thread(list_events, self.store)
        except DataSourceError as e:
            # already logged by list_events
            self._settle(Failed(e))
            return
        self._settle(Loaded(tuple(events)))

    def _settle(self, state: FeedState) -> None:
        if self._unmounted:
            return
        self.state = state
