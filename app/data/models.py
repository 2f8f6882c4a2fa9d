from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Union

# Epoch milliseconds, a Firestore timestamp, or an ISO-8601 string.
Timestamp = Union[int, float, datetime, str]


@dataclass(frozen=True)
class EventFields:
    """A honeypot event as written by a producer; the store assigns the id."""
    timestamp: Timestamp
    source_ip: str
    service: str
    action: str

    def to_document(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "sourceIP": self.source_ip,
            "service": self.service,
            "action": self.action,
        }


@dataclass(frozen=True)
class HoneypotEvent:
    id: str
    timestamp: Optional[Timestamp]
    source_ip: str
    service: str
    action: str

    @classmethod
    def from_document(cls, doc_id: str, data: Mapping[str, Any]) -> "HoneypotEvent":
        return cls(
            id=doc_id,
            timestamp=data.get("timestamp"),
            source_ip=str(data.get("sourceIP") or ""),
            service=str(data.get("service") or ""),
            action=str(data.get("action") or ""),
        )
