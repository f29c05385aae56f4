import pytest
from advertizer import Advertizer, Event, EventQueue


def assert_queue_consistent(queue: EventQueue):
    """Every event must sit at its recorded index and no child may precede its parent."""
    for i, event in enumerate(queue.heap):
        assert event.index == i, f"event {event.id} records index {event.index}, sits at {i}"
        if i > 0:
            parent = queue.heap[(i - 1) // 2]
            assert not event < parent, f"heap order violated between slot {(i - 1) // 2} and {i}"


def assert_advertizer_consistent(adv: Advertizer):
    assert_queue_consistent(adv._queue)
    assert len(adv._events) == len(adv._queue)
    for event in adv._queue.heap:
        assert adv._events[event.id] is event
        assert event.count < adv.max_advertisements


@pytest.fixture
def make_event():
    def _make(id: int, count: int = 0, sequence: int = 0):
        return Event(id=id, value=f"value_{id}", count=count, sequence=sequence)
    return _make


@pytest.fixture
def four_items():
    """Advertizer with max=2 holding ids 0..3 pushed in order."""
    adv = Advertizer(2)
    adv.push(0, "zero")
    adv.push(1, "one")
    adv.push(2, "two")
    adv.push(3, "three")
    return adv
