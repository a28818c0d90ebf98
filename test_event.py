"""Tests for ScheduledEvent ordering."""

from pulltimer import ScheduledEvent

def test_order_by_deadline():
    """Earlier deadlines sort first."""
    assert ScheduledEvent(1, 5, "a") < ScheduledEvent(2, 0, "b")

def test_sequence_breaks_ties():
    """Equal deadlines sort by sequence number."""
    first = ScheduledEvent(3, 0, "z")
    second = ScheduledEvent(3, 1, "a")
    assert first < second
    assert second > first
    assert first <= second
    assert second >= first
    assert first != second

def test_equality_is_identity():
    """Events with equal keys are still distinct objects."""
    first = ScheduledEvent(3, 1, "a")
    second = ScheduledEvent(3, 1, "a")
    assert first == first  # pylint: disable=comparison-with-itself
    assert first != second
    assert not first < second
    assert first <= second
    assert len({first, second}) == 2

def test_is_due():
    """An event is due at or after its deadline."""
    event = ScheduledEvent(10, 0, "x")
    assert not event.is_due(9)
    assert event.is_due(10)
    assert event.is_due(11)

def test_compare_with_other_type():
    """Comparing with a non-event is not supported."""
    assert ScheduledEvent(1, 0, "x") != 1
    assert ScheduledEvent(1, 0, "x").__lt__(1) is NotImplemented
