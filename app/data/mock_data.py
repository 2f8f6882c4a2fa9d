from __future__ import annotations

import random
import time

from faker import Faker

from data.models import HoneypotEvent


fake = Faker()


SERVICES = ["ssh", "http", "telnet", "ftp", "mysql", "redis", "rdp", "smb"]
ACTIONS = {
    "ssh": ["login-attempt", "auth-failed", "command-exec"],
    "http": ["scan", "path-traversal", "sql-injection", "scanner-ua"],
    "telnet": ["login-attempt", "banner-grab"],
    "ftp": ["login-attempt", "anonymous-login"],
    "mysql": ["login-attempt", "banner-grab"],
    "redis": ["config-set", "banner-grab"],
    "rdp": ["connect", "auth-failed"],
    "smb": ["connect", "share-enum"],
}


def honeypot_events_mock(n_events: int = 60, end_ms: int | None = None) -> list[HoneypotEvent]:
    """Synthetic attack feed spread over the last 48h, in arbitrary (non-chronological) order."""
    rng = random.Random(7)
    fake.seed_instance(7)
    end_ms = end_ms if end_ms is not None else int(time.time() * 1000)
    # A handful of noisy attackers plus one-off scanners
    repeat_offenders = [fake.ipv4_public() for _ in range(5)]
    rows = []
    for _ in range(n_events):
        service = rng.choice(SERVICES)
        ip = rng.choice(repeat_offenders) if rng.random() < 0.4 else fake.ipv4_public()
        rows.append(
            HoneypotEvent(
                id=fake.uuid4().replace("-", "")[:20],
                timestamp=end_ms - rng.randint(0, 48 * 3600 * 1000),
                source_ip=ip,
                service=service,
                action=rng.choice(ACTIONS[service]),
            )
        )
    return rows
