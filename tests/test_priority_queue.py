import random

import pytest

from mazesolver.domain.errors import (
    DuplicateEntryError, EmptyFrontierError, FrontierError, NotFoundError,
    RecordMismatchError,
)
from mazesolver.domain.priority_queue import PriorityQueue
from mazesolver.domain.types import CostRecord, Position


def make(row, col, g, h, parent=None):
    return CostRecord(Position(row, col), g=g, h=h, parent=parent)


def fill(queue, *records):
    for record in records:
        queue.insert(record.position, record)


def test_extracts_lowest_f_first():
    queue = PriorityQueue()
    fill(queue, make(0, 0, 5, 5), make(0, 1, 1, 2), make(0, 2, 3, 3))
    assert [queue.extract_min().position for _ in range(3)] == [
        Position(0, 1), Position(0, 2), Position(0, 0)
    ]
    assert queue.is_empty()


def test_ties_prefer_lower_h_then_position():
    queue = PriorityQueue()
    fill(queue,
         make(2, 0, 2, 2),
         make(1, 1, 3, 1),
         make(0, 3, 1, 3),
         make(0, 5, 3, 1))
    order = [queue.extract_min().position for _ in range(4)]
    assert order == [Position(0, 5), Position(1, 1), Position(2, 0), Position(0, 3)]


def test_random_insertions_come_out_sorted():
    rng = random.Random(7)
    queue = PriorityQueue()
    records = [make(i // 10, i % 10, rng.randint(0, 20), rng.randint(0, 20)) for i in range(60)]
    fill(queue, *records)
    assert queue.size() == 60

    keys = []
    while not queue.is_empty():
        record = queue.extract_min()
        keys.append((record.f, record.h, record.position))
    assert keys == sorted(keys)


def test_contains_and_get():
    queue = PriorityQueue()
    record = make(1, 2, 1, 1)
    queue.insert(record.position, record)
    assert queue.contains(Position(1, 2))
    assert Position(1, 2) in queue
    assert queue.get(Position(1, 2)) is record
    assert queue.get(Position(2, 1)) is None
    assert len(queue) == 1


def test_duplicate_insert_rejected():
    queue = PriorityQueue()
    queue.insert(Position(0, 0), make(0, 0, 1, 1))
    with pytest.raises(DuplicateEntryError):
        queue.insert(Position(0, 0), make(0, 0, 0, 0))


def test_extract_from_empty_rejected():
    with pytest.raises(EmptyFrontierError):
        PriorityQueue().extract_min()


def test_update_missing_rejected():
    queue = PriorityQueue()
    with pytest.raises(NotFoundError):
        queue.update_priority(Position(4, 4), make(4, 4, 0, 0))


def test_frontier_errors_share_a_base():
    assert issubclass(EmptyFrontierError, FrontierError)
    assert issubclass(DuplicateEntryError, FrontierError)
    assert issubclass(NotFoundError, FrontierError)


def test_decrease_key_moves_entry_to_front():
    queue = PriorityQueue()
    fill(queue, make(0, 0, 1, 1), make(0, 1, 2, 1), make(0, 2, 9, 9))
    original = queue.get(Position(0, 2))

    queue.update_priority(Position(0, 2), make(0, 2, 0, 1, parent=Position(5, 5)))

    assert queue.get(Position(0, 2)) is original
    assert original.g == 0
    assert original.parent == Position(5, 5)
    assert queue.extract_min().position == Position(0, 2)
    assert queue.extract_min().position == Position(0, 0)
    assert queue.extract_min().position == Position(0, 1)


def test_increase_restores_order_too():
    queue = PriorityQueue()
    fill(queue, make(0, 0, 0, 0), make(0, 1, 2, 2), make(0, 2, 3, 3))
    queue.update_priority(Position(0, 0), make(0, 0, 10, 0))
    assert [queue.extract_min().position for _ in range(3)] == [
        Position(0, 1), Position(0, 2), Position(0, 0)
    ]


def test_positions_lists_every_queued_cell():
    queue = PriorityQueue()
    fill(queue, make(0, 0, 1, 1), make(3, 3, 0, 0))
    assert sorted(queue.positions()) == [Position(0, 0), Position(3, 3)]
    queue.extract_min()
    assert queue.positions() == [Position(0, 0)]


def test_record_filed_under_wrong_position_rejected():
    queue = PriorityQueue()
    with pytest.raises(RecordMismatchError):
        queue.insert(Position(0, 1), make(0, 0, 1, 1))
    assert issubclass(RecordMismatchError, FrontierError)
    assert queue.is_empty()
