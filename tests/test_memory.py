import pytest

from recursia.memory import AllocationTracker


@pytest.fixture
def tracker():
    tracker = AllocationTracker()
    tracker.register("Node")
    tracker.register("Cell")
    return tracker


def test_balanced_allocations_report_nothing(tracker):
    tracker.record_new("Node")
    tracker.record_delete("Node")
    assert tracker.types_with_errors() == {}


def test_leak_is_reported(tracker):
    tracker.record_new("Node")
    tracker.record_new("Node")
    tracker.record_delete("Node")
    assert tracker.types_with_errors() == {"Node": 1}


def test_extra_delete_is_negative(tracker):
    tracker.record_delete("Cell")
    assert tracker.types_with_errors() == {"Cell": -1}


def test_unregistered_types_are_not_reported(tracker):
    tracker.record_new("Other")
    assert "Other" not in tracker.types_with_errors()


def test_registering_later_reports_existing_counts(tracker):
    tracker.record_new("Other")
    tracker.register("Other")
    assert tracker.types_with_errors() == {"Other": 1}


def test_clear_resets_counts(tracker):
    tracker.record_new("Node")
    tracker.record_delete("Cell")
    tracker.clear()
    assert tracker.types_with_errors() == {}
    tracker.record_new("Cell")
    assert tracker.types_with_errors() == {"Cell": 1}


def test_errors_are_sorted_by_name(tracker):
    tracker.record_new("Node")
    tracker.record_new("Cell")
    assert list(tracker.types_with_errors()) == ["Cell", "Node"]