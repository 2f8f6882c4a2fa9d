from __future__ import annotations

from typing import Any, Optional, Protocol

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore
from google.oauth2 import service_account

from config import AppConfig
from data.models import EventFields, HoneypotEvent


class DataSourceError(RuntimeError):
    pass


class ReadFailure(DataSourceError):
    pass


class WriteFailure(DataSourceError):
    pass


class ConfigError(DataSourceError):
    pass


_BACKEND_ERRORS = (api_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError)


class EventStore(Protocol):
    def list(self) -> list[HoneypotEvent]: ...

    def create(self, fields: EventFields) -> str: ...

    def close(self) -> None: ...


class FirestoreEventStore:
    """
    EventStore over a single Firestore collection.
    Every call is a full snapshot read or a single append; no queries, no listeners.
    """

    def __init__(self, client: Any, collection: str = "honeypots"):
        self._client = client
        self.collection = collection

    def list(self) -> list[HoneypotEvent]:
        try:
            docs = self._client.collection(self.collection).stream()
            return [HoneypotEvent.from_document(doc.id, doc.to_dict() or {}) for doc in docs]
        except _BACKEND_ERRORS as e:
            raise ReadFailure(f"Reading collection '{self.collection}' failed: {e}") from e

    def create(self, fields: EventFields) -> str:
        try:
            _, ref = self._client.collection(self.collection).add(fields.to_document())
        except _BACKEND_ERRORS as e:
            raise WriteFailure(f"Writing to collection '{self.collection}' failed: {e}") from e
        return ref.id

    def close(self) -> None:
        self._client.close()


def get_firestore_client(cfg: AppConfig) -> firestore.Client:
    """
    Build a Firestore client from config.
    Uses the service-account key file when configured, otherwise Application Default Credentials.
    """
    if not cfg.firestore_configured:
        raise ConfigError(
            "Missing FIREBASE_PROJECT_ID for Firestore. "
            "Set FIREBASE_PROJECT_ID (and GOOGLE_APPLICATION_CREDENTIALS for a service-account key), "
            "or enable mock data."
        )

    credentials: Optional[service_account.Credentials] = None
    try:
        if cfg.google_application_credentials:
            credentials = service_account.Credentials.from_service_account_file(
                cfg.google_application_credentials
            )
        return firestore.Client(project=cfg.firebase_project_id, credentials=credentials)
    except (OSError, ValueError, auth_exceptions.GoogleAuthError) as e:
        raise ConfigError(
            f"Failed to create Firestore client for project '{cfg.firebase_project_id}' "
            f"(check GOOGLE_APPLICATION_CREDENTIALS): {e}"
        ) from e


def get_event_store(cfg: AppConfig, use_mock: bool) -> EventStore:
    if use_mock:
        from data.memory_store import InMemoryEventStore
        from data.mock_data import honeypot_events_mock

        return InMemoryEventStore(honeypot_events_mock())
    return FirestoreEventStore(get_firestore_client(cfg), collection=cfg.firestore_collection)
