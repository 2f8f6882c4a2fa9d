"""Unit tests for the attack feed table."""
import unittest
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from components.event_table import (
    COLUMNS,
    MISSING,
    build_event_table,
    format_timestamp,
    resolve_timezone,
    to_datetime,
)
from data.mock_data import honeypot_events_mock
from data.models import HoneypotEvent

SSH_EVENT = HoneypotEvent(
    id="a1",
    timestamp=1700000000000,
    source_ip="203.0.113.5",
    service="ssh",
    action="login-attempt",
)


class TestFormatTimestamp(unittest.TestCase):
    """Stored timestamp -> display string."""

    def test_epoch_millis_in_utc(self) -> None:
        self.assertEqual(format_timestamp(1700000000000, timezone.utc), "2023-11-14 22:13:20 +0000")

    def test_epoch_millis_in_named_zone(self) -> None:
        tz = ZoneInfo("America/New_York")
        self.assertEqual(format_timestamp(1700000000000, tz), "2023-11-14 17:13:20 -0500")

    def test_milliseconds_kept_when_present(self) -> None:
        self.assertEqual(format_timestamp(1700000000123, timezone.utc), "2023-11-14 22:13:20.123 +0000")

    def test_round_trips_to_same_instant(self) -> None:
        tz = ZoneInfo("Asia/Kolkata")
        text = format_timestamp(1700000000000, tz)
        parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S %z")
        self.assertEqual(parsed, to_datetime(1700000000000))
        self.assertEqual(int(parsed.timestamp() * 1000), 1700000000000)

    def test_deterministic(self) -> None:
        tz = ZoneInfo("Europe/Berlin")
        self.assertEqual(format_timestamp(1700000000000, tz), format_timestamp(1700000000000, tz))

    def test_firestore_datetime(self) -> None:
        dt = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        self.assertEqual(format_timestamp(dt, timezone.utc), "2023-11-14 22:13:20 +0000")

    def test_naive_datetime_taken_as_utc(self) -> None:
        self.assertEqual(format_timestamp(datetime(2023, 11, 14, 22, 13, 20), timezone.utc), "2023-11-14 22:13:20 +0000")

    def test_iso_and_numeric_strings(self) -> None:
        self.assertEqual(format_timestamp("2023-11-14T22:13:20Z", timezone.utc), "2023-11-14 22:13:20 +0000")
        self.assertEqual(format_timestamp("1700000000000", timezone.utc), "2023-11-14 22:13:20 +0000")

    def test_missing_or_garbage(self) -> None:
        for value in (None, "", "not a date", True, object()):
            self.assertEqual(format_timestamp(value, timezone.utc), MISSING)

    def test_compact_date_string_is_a_date_not_millis(self) -> None:
        self.assertEqual(format_timestamp("20231114", timezone.utc), "2023-11-14 00:00:00 +0000")

    def test_short_digit_string_is_not_epoch_millis(self) -> None:
        self.assertEqual(format_timestamp("12345", timezone.utc), MISSING)

    def test_instant_outside_display_zone_range(self) -> None:
        year_one = -62135596800000  # 0001-01-01T00:00:00Z

        self.assertIsNotNone(to_datetime(year_one))
        self.assertEqual(format_timestamp(year_one, ZoneInfo("America/New_York")), MISSING)

    def test_resolve_timezone(self) -> None:
        self.assertIsNone(resolve_timezone(None))
        self.assertEqual(resolve_timezone("UTC"), ZoneInfo("UTC"))

    def test_unknown_timezone_warns(self) -> None:
        with self.assertLogs("components.event_table", level="WARNING") as cm:
            self.assertIsNone(resolve_timezone("Not/AZone"))

        self.assertIn("Not/AZone", cm.output[0])


class TestBuildEventTable(unittest.TestCase):
    """One row per event, store order preserved."""

    def test_empty_store_gives_header_only(self) -> None:
        df = build_event_table([], timezone.utc)

        self.assertEqual(list(df.columns), COLUMNS)
        self.assertEqual(len(df), 0)

    def test_single_event_row(self) -> None:
        df = build_event_table([SSH_EVENT], timezone.utc)

        self.assertEqual(len(df), 1)
        self.assertEqual(
            df.iloc[0].tolist(),
            ["a1", "2023-11-14 22:13:20 +0000", "203.0.113.5", "ssh", "login-attempt"],
        )

    def test_row_count_matches_records(self) -> None:
        events = honeypot_events_mock(n_events=37)

        df = build_event_table(events)

        self.assertEqual(len(df), 37)
        self.assertEqual(df["ID"].tolist(), [e.id for e in events])

    def test_order_is_store_order(self) -> None:
        late = HoneypotEvent("z", 1700000009000, "198.51.100.1", "http", "scan")
        early = HoneypotEvent("b", 1700000000000, "198.51.100.2", "ftp", "login-attempt")

        df = build_event_table([late, early], timezone.utc)

        self.assertEqual(df["ID"].tolist(), ["z", "b"])

    def test_duplicate_ids_rendered_as_is(self) -> None:
        df = build_event_table([SSH_EVENT, SSH_EVENT], timezone.utc)

        self.assertEqual(len(df), 2)

    def test_out_of_range_timestamp_does_not_break_table(self) -> None:
        broken = HoneypotEvent("x", -62135596800000, "198.51.100.3", "ssh", "login-attempt")

        df = build_event_table([broken, SSH_EVENT], ZoneInfo("America/New_York"))

        self.assertEqual(df["Timestamp"].tolist(), [MISSING, "2023-11-14 17:13:20 -0500"])


if __name__ == "__main__":
    unittest.main()
