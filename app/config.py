from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens for components/styles.py and the service chart.
#
THEME = {
    "bg_card": "#FFFFFF",
    "accent_primary": "#FF3621",  # live-data dot, chart bars
    "warning": "#F59E0B",         # mock-data dot
    "navy_900": "#0B1220",
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E6E4E0",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
}


@dataclass(frozen=True)
class AppConfig:
    # Firebase web config. Only the project id is needed by the server-side client;
    # The sidebar shows the project id and app id so operators can check which project is targeted.
    firebase_api_key: Optional[str]
    firebase_auth_domain: Optional[str]
    firebase_project_id: Optional[str]
    firebase_storage_bucket: Optional[str]
    firebase_messaging_sender_id: Optional[str]
    firebase_app_id: Optional[str]

    # Service-account key file. If unset, Application Default Credentials are used.
    google_application_credentials: Optional[str]

    firestore_collection: str

    # IANA zone name for rendered timestamps; None means the host's local zone.
    display_timezone: Optional[str]

    log_level: str
    log_path: Optional[str]

    # Defaults
    default_use_mock: bool

    @property
    def firestore_configured(self) -> bool:
        return bool(self.firebase_project_id)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Works with env var injection in containers
    """
    load_dotenv(override=False)

    return AppConfig(
        firebase_api_key=_getenv("FIREBASE_API_KEY"),
        firebase_auth_domain=_getenv("FIREBASE_AUTH_DOMAIN"),
        firebase_project_id=_getenv("FIREBASE_PROJECT_ID"),
        firebase_storage_bucket=_getenv("FIREBASE_STORAGE_BUCKET"),
        firebase_messaging_sender_id=_getenv("FIREBASE_MESSAGING_SENDER_ID"),
        firebase_app_id=_getenv("FIREBASE_APP_ID"),
        google_application_credentials=_getenv("GOOGLE_APPLICATION_CREDENTIALS"),
        firestore_collection=_getenv("FIRESTORE_COLLECTION", "honeypots") or "honeypots",
        display_timezone=_getenv("DISPLAY_TIMEZONE"),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
        log_path=_getenv("LOG_PATH"),
        default_use_mock=(_getenv("USE_MOCK_DATA", "true") or "true").lower() == "true",
    )
