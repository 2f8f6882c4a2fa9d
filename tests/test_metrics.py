"""Unit tests for the feed summary (KPIs and per-service counts)."""
import unittest

from components.metrics import UNKNOWN_SERVICE, events_by_service, summary_kpis
from data.models import HoneypotEvent

EVENTS = [
    HoneypotEvent("a1", 1700000000000, "203.0.113.5", "ssh", "login-attempt"),
    HoneypotEvent("a2", 1700000001000, "203.0.113.6", "ssh", "auth-failed"),
    HoneypotEvent("a3", 1700000002000, "203.0.113.5", "ssh", "command-exec"),
    HoneypotEvent("a4", 1700000003000, "203.0.113.5", "http", "scan"),
]


class TestEventsByService(unittest.TestCase):
    def test_counts_events_and_attackers(self) -> None:
        df = events_by_service(EVENTS)

        self.assertEqual(df["service"].tolist(), ["ssh", "http"])
        self.assertEqual(df["events"].tolist(), [3, 1])
        self.assertEqual(df["attackers"].tolist(), [2, 1])

    def test_ties_break_by_name(self) -> None:
        events = [
            HoneypotEvent("b1", 1, "198.51.100.1", "telnet", "banner-grab"),
            HoneypotEvent("b2", 2, "198.51.100.2", "ftp", "login-attempt"),
        ]

        self.assertEqual(events_by_service(events)["service"].tolist(), ["ftp", "telnet"])

    def test_blank_service_grouped_as_unknown(self) -> None:
        df = events_by_service([HoneypotEvent("c1", 1, "198.51.100.1", "", "scan")])

        self.assertEqual(df["service"].tolist(), [UNKNOWN_SERVICE])

    def test_empty(self) -> None:
        df = events_by_service([])

        self.assertEqual(len(df), 0)
        self.assertEqual(list(df.columns), ["service", "events", "attackers"])


class TestSummaryKpis(unittest.TestCase):
    def test_values(self) -> None:
        kpis = {k.label: k.value for k in summary_kpis(EVENTS)}

        self.assertEqual(kpis, {"Events": "4", "Unique source IPs": "2", "Services targeted": "2"})

    def test_empty_feed(self) -> None:
        self.assertEqual([k.value for k in summary_kpis([])], ["0", "0", "0"])


if __name__ == "__main__":
    unittest.main()
