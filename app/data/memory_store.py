from __future__ import annotations

import threading
import uuid
from typing import Iterable, Optional

from data.connection import ReadFailure, WriteFailure
from data.models import EventFields, HoneypotEvent


class InMemoryEventStore:
    """
    List-backed EventStore for mock mode and tests.
    Snapshots come back in insertion order; failures can be switched on to simulate an outage.
    """

    def __init__(self, events: Optional[Iterable[HoneypotEvent]] = None):
        self._events: list[HoneypotEvent] = list(events or [])
        self._lock = threading.Lock()
        self.fail_reads = False
        self.fail_writes = False

    def list(self) -> list[HoneypotEvent]:
        if self.fail_reads:
            raise ReadFailure("Simulated read failure (network unreachable)")
        with self._lock:
            return list(self._events)

    def create(self, fields: EventFields) -> str:
        if self.fail_writes:
            raise WriteFailure("Simulated write failure (network unreachable)")
        event = HoneypotEvent(
            id=uuid.uuid4().hex,
            timestamp=fields.timestamp,
            source_ip=fields.source_ip,
            service=fields.service,
            action=fields.action,
        )
        with self._lock:
            self._events.append(event)
        return event.id

    def close(self) -> None:
        pass
