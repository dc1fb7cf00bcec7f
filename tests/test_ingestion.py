"""
TIMETRACK - Dataset Ingestion Tests

Loose date parsing and the payload -> model conversion.
"""

import time
from datetime import date, datetime, timezone

import pytest

from timetrack.datasets.schemas import GroupPayload, TaskPayload, coerce_date
from timetrack.metrics.service import MetricsService


@pytest.fixture
def brasilia_time(monkeypatch):
    """Run the test with the process clock on UTC-3 (POSIX TZ, no zoneinfo needed)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "BRT3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestCoerceDate:
    """Tests for loose date parsing."""

    def test_plain_iso_date(self):
        """An ISO date is taken as is."""
        assert coerce_date("2025-01-15") == date(2025, 1, 15)

    def test_basic_iso_date(self):
        """The ISO basic form is a date, not a tiny epoch value."""
        assert coerce_date("20250115") == date(2025, 1, 15)

    def test_numeric_string_epoch(self):
        """Long digit strings are epoch milliseconds."""
        assert coerce_date("1736942400000") == coerce_date(1736942400000)

    @pytest.mark.parametrize("value", [None, "", "  ", "soon", "2025-13-45", True, [], "-5"])
    def test_unparseable_is_absent(self, value):
        """Anything that is not a date becomes None instead of failing."""
        assert coerce_date(value) is None

    def test_same_instant_same_day_in_any_encoding(self):
        """Epoch milliseconds and an ISO UTC string for one instant give one local day."""
        epoch = coerce_date(1737417600000)
        iso = coerce_date("2025-01-21T00:00:00.000Z")
        assert epoch == iso
        assert epoch == datetime.fromtimestamp(1737417600).date()

    def test_utc_midnight_is_previous_local_day(self, brasilia_time):
        """At UTC-3, midnight UTC is still the previous local day for both encodings."""
        assert coerce_date(1737417600000) == date(2025, 1, 20)
        assert coerce_date("2025-01-21T00:00:00.000Z") == date(2025, 1, 20)
        assert coerce_date(datetime(2025, 1, 21, 0, 0, tzinfo=timezone.utc)) == date(2025, 1, 20)

    def test_explicit_offset_is_converted(self, brasilia_time):
        """A datetime with its own offset is moved to local time before taking the date."""
        assert coerce_date("2025-01-20T23:30:00-03:00") == date(2025, 1, 20)
        assert coerce_date("2025-01-20T23:30:00+09:00") == date(2025, 1, 20)

    def test_naive_datetime_keeps_its_date(self, brasilia_time):
        """Datetimes without an offset are already local."""
        assert coerce_date("2025-01-21T00:30:00") == date(2025, 1, 21)


class TestPayloadConversion:
    """Tests for building the task tree from payloads."""

    def test_late_evening_deadline_is_overdue(self, brasilia_time, today):
        """A deadline at 22:00 local the day before, sent as UTC, is overdue today."""
        group = GroupPayload.model_validate(
            {
                "assignee": "Ana",
                "projects": [
                    {
                        "name": "Portal",
                        "tasks": [{"id": "t1", "name": "Late", "dueDate": "2025-01-15T01:00:00.000Z"}],
                    }
                ],
            }
        ).to_model()

        dashboard = MetricsService().generate_dashboard([group], today)
        assert [task.id for task in dashboard.deadlines.overdue] == ["t1"]
        assert dashboard.deadlines.critical == []

    def test_subtasks_are_flagged_and_entries_summed(self):
        """Nested tasks become subtasks; time entries on the same day add up."""
        task = TaskPayload.model_validate(
            {
                "id": "p",
                "timeEntries": [{"date": "2025-01-13", "hours": 1}, {"date": "2025-01-13", "hours": 0.5}],
                "subtasks": [{"id": "s", "tags": [{"name": "bug"}, " ", {"name": ""}]}],
            }
        ).to_model()

        assert task.is_subtask is False
        assert task.time_entries == {date(2025, 1, 13): 1.5}
        assert task.subtasks[0].is_subtask is True
        assert task.subtasks[0].tags == ["bug"]

    def test_priority_shapes(self):
        """Priority may be text, a numeric code or a ClickUp object."""
        assert TaskPayload(id="a", priority=1).priority == "1"
        assert TaskPayload.model_validate({"id": "b", "priority": {"priority": "urgent"}}).priority == "urgent"
        assert TaskPayload.model_validate({"id": "c", "priority": None}).priority is None
