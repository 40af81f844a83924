import pytest

from walkgraph.exceptions import EmptyContainerError
from walkgraph.fifo import LinkedQueue


def test_empty_queue_defaults():
    queue = LinkedQueue()
    assert queue.is_empty()
    assert len(queue) == 0
    assert not queue
    assert list(queue) == []


def test_round_trip_preserves_order_then_fails_when_empty():
    items = ["a", "b", "c", "d", "e"]
    queue = LinkedQueue()
    for item in items:
        queue.enqueue(item)

    assert [queue.dequeue() for _ in items] == items
    assert queue.is_empty()

    with pytest.raises(EmptyContainerError):
        queue.dequeue()


@pytest.mark.parametrize("op", ["dequeue", "front"])
def test_reading_empty_queue_raises(op: str):
    queue = LinkedQueue()
    with pytest.raises(EmptyContainerError, match="Queue is empty"):
        getattr(queue, op)()


def test_front_peeks_without_removing():
    queue = LinkedQueue([1, 2])
    assert queue.front() == 1
    assert queue.front() == 1
    assert len(queue) == 2
    assert queue.dequeue() == 1
    assert queue.front() == 2


def test_no_deduplication():
    queue = LinkedQueue(["x", "x", "y", "x"])
    assert queue.drain() == ["x", "x", "y", "x"]


def test_interleaved_enqueue_dequeue():
    queue = LinkedQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    queue.enqueue(3)
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3

    # back reference must be reset once the chain runs dry
    queue.enqueue(4)
    assert queue.front() == 4
    assert list(queue) == [4]


def test_clear_resets_to_empty():
    queue = LinkedQueue(range(3))
    queue.clear()
    assert queue.is_empty()
    assert len(queue) == 0
    with pytest.raises(EmptyContainerError):
        queue.front()

    queue.enqueue("again")
    assert queue.drain() == ["again"]


def test_iteration_is_non_destructive():
    queue = LinkedQueue("abc")
    assert list(queue) == ["a", "b", "c"]
    assert len(queue) == 3
    assert repr(queue) == "LinkedQueue(['a', 'b', 'c'])"


def test_none_is_a_valid_item():
    queue = LinkedQueue([None])
    assert not queue.is_empty()
    assert queue.dequeue() is None
    assert queue.is_empty()
