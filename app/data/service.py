from __future__ import annotations

import logging
from dataclasses import dataclass

from config import AppConfig
from data.connection import DataSourceError, EventStore, get_event_store
from data.models import EventFields, HoneypotEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreResult:
    store: EventStore
    source: str  # "mock" | "firestore"
    warning: str | None = None


def open_event_store(cfg: AppConfig, use_mock: bool) -> StoreResult:
    """Build the configured store; if Firestore can't be reached at startup, fall back to mock data."""
    if use_mock:
        return StoreResult(store=get_event_store(cfg, use_mock=True), source="mock")
    try:
        return StoreResult(store=get_event_store(cfg, use_mock=False), source="firestore")
    except DataSourceError as e:
        logger.warning("Firestore unavailable, using mock data: %s", e)
        return StoreResult(
            store=get_event_store(cfg, use_mock=True),
            source="mock",
            warning=f"Fell back to mock data: {e}",
        )


def list_events(store: EventStore) -> list[HoneypotEvent]:
    try:
        events = store.list()
    except DataSourceError:
        logger.exception("Error fetching honeypot events from %s", type(store).__name__)
        raise
    logger.debug("Fetched %d honeypot events", len(events))
    return events


def create_event(store: EventStore, fields: EventFields) -> str:
    try:
        event_id = store.create(fields)
    except DataSourceError:
        logger.exception("Error adding honeypot event from %s", fields.source_ip)
        raise
    logger.info("Recorded honeypot event %s (%s/%s)", event_id, fields.service, fields.action)
    return event_id
