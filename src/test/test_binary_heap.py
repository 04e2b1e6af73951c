import random

import pytest

from core.binary_heap import (
    BinaryHeap,
    DuplicateValueError,
    EmptyContainerError,
    ValueNotFoundError,
)


def test_insert_and_extract_in_order(assert_heap):
    heap = BinaryHeap()
    heap.insert(3, "first")
    heap.insert(1, "second")
    heap.insert(2, "third")
    assert_heap(heap)

    assert heap.peek_min() == (1, "second")
    assert heap.extract_min() == (1, "second")
    assert heap.extract_min() == (2, "third")
    assert heap.extract_min() == (3, "first")
    assert heap.is_empty()
    assert_heap(heap)


def test_extract_single_entry():
    heap = BinaryHeap()
    heap.insert(7, "only")
    assert heap.extract_min() == (7, "only")
    assert heap.size() == 0
    assert "only" not in heap


def test_sorted_extraction_random(assert_heap):
    rnd = random.Random(42)
    heap = BinaryHeap()
    priorities = [rnd.randint(0, 50) for _ in range(300)]
    for value, priority in enumerate(priorities):
        heap.insert(priority, value)
        assert_heap(heap)

    extracted = []
    while not heap.is_empty():
        extracted.append(heap.extract_min()[0])
        assert_heap(heap)
    assert extracted == sorted(priorities)


def test_descending_inserts_drain_ascending():
    heap = BinaryHeap()
    for i in range(1000, 0, -1):
        heap.insert(i, i)
    assert heap.size() == 1000
    for i in range(1, 1001):
        assert heap.extract_min() == (i, i)
    assert heap.is_empty()


def test_peek_does_not_mutate(assert_heap):
    heap = BinaryHeap()
    heap.insert(5, "a")
    heap.insert(2, "b")
    assert heap.peek_min() == (2, "b")
    assert heap.peek_min() == (2, "b")
    assert heap.size() == 2
    assert_heap(heap)


def test_decrease_key_moves_to_root(assert_heap):
    heap = BinaryHeap()
    heap.insert(10, "high")
    heap.insert(5, "medium")
    heap.insert(1, "low")
    heap.decrease_key("high", 0)
    assert_heap(heap)
    assert heap.peek_min() == (0, "high")
    assert heap.priority_of("high") == 0


def test_decrease_key_ignores_increase(assert_heap):
    heap = BinaryHeap()
    heap.insert(5, "test")
    heap.insert(7, "other")
    heap.decrease_key("test", 10)
    heap.decrease_key("test", 5)
    assert heap.peek_min() == (5, "test")
    assert heap.priority_of("test") == 5
    assert_heap(heap)


def test_decrease_key_inside_heap(assert_heap):
    heap = BinaryHeap()
    for value in range(20):
        heap.insert(100 + value, value)
    heap.decrease_key(19, 50)
    assert_heap(heap)
    assert heap.peek_min() == (50, 19)
    heap.decrease_key(10, 101)
    assert_heap(heap)
    assert heap.priority_of(10) == 101


def test_random_operations_keep_invariants(assert_heap):
    rnd = random.Random(7)
    heap = BinaryHeap()
    present = {}
    next_value = 0
    for _ in range(2000):
        op = rnd.random()
        if op < 0.5 or not present:
            priority = rnd.randint(0, 1000)
            heap.insert(priority, next_value)
            present[next_value] = priority
            next_value += 1
        elif op < 0.8:
            value = rnd.choice(list(present.keys()))
            new_priority = rnd.randint(0, 1000)
            heap.decrease_key(value, new_priority)
            present[value] = min(present[value], new_priority)
        else:
            priority, value = heap.extract_min()
            assert priority == min(present.values())
            assert present.pop(value) == priority
        assert_heap(heap)
        assert heap.size() == len(present)
    for value, priority in present.items():
        assert heap.priority_of(value) == priority


def test_duplicate_insert_is_rejected(assert_heap):
    heap = BinaryHeap()
    heap.insert(1, 42)
    heap.insert(0, 7)
    with pytest.raises(DuplicateValueError):
        heap.insert(2, 42)
    assert heap.size() == 2
    assert heap.priority_of(42) == 1
    assert heap.peek_min() == (0, 7)
    assert_heap(heap)


def test_duplicate_error_is_value_error():
    heap = BinaryHeap()
    heap.insert(1, "x")
    with pytest.raises(ValueError):
        heap.insert(1, "x")


def test_reinsert_after_extract():
    heap = BinaryHeap()
    heap.insert(1, "x")
    heap.extract_min()
    heap.insert(4, "x")
    assert heap.peek_min() == (4, "x")


def test_decrease_key_missing_value():
    heap = BinaryHeap()
    heap.insert(5, "exists")
    with pytest.raises(ValueNotFoundError):
        heap.decrease_key("missing", 0)
    with pytest.raises(KeyError):
        heap.decrease_key("missing", 0)
    assert heap.peek_min() == (5, "exists")


def test_priority_of_missing_value():
    heap = BinaryHeap()
    with pytest.raises(ValueNotFoundError):
        heap.priority_of("missing")


def test_empty_heap_guards():
    heap = BinaryHeap()
    with pytest.raises(EmptyContainerError):
        heap.extract_min()
    with pytest.raises(EmptyContainerError):
        heap.peek_min()
    with pytest.raises(IndexError):
        heap.peek_min()
    assert heap.is_empty()
    assert heap.size() == 0
    assert len(heap) == 0


def test_equal_priorities():
    heap = BinaryHeap()
    for value in ["first", "second", "third"]:
        heap.insert(1, value)
    values = set()
    while not heap.is_empty():
        priority, value = heap.extract_min()
        assert priority == 1
        values.add(value)
    assert values == {"first", "second", "third"}


def test_values_are_never_compared():
    class Payload:
        def __lt__(self, other):
            raise AssertionError("values must not be compared")

    heap = BinaryHeap()
    payloads = [Payload() for _ in range(10)]
    for payload in payloads:
        heap.insert(1, payload)
    heap.decrease_key(payloads[5], 0)
    assert heap.extract_min() == (0, payloads[5])
    while not heap.is_empty():
        assert heap.extract_min()[0] == 1


def test_len_and_contains():
    heap = BinaryHeap()
    heap.insert(3, (1, 2))
    heap.insert(1, (3, 4))
    assert len(heap) == 2
    assert (1, 2) in heap
    assert (5, 6) not in heap
    heap.extract_min()
    assert (3, 4) not in heap
    assert len(heap) == 1


def test_float_priorities():
    heap = BinaryHeap()
    heap.insert(0.5, "a")
    heap.insert(0.25, "b")
    heap.insert(float("inf"), "c")
    heap.decrease_key("c", 0.1)
    assert [heap.extract_min()[1] for _ in range(3)] == ["c", "b", "a"]


def test_initial_entries(assert_heap):
    rnd = random.Random(3)
    entries = [(rnd.randint(0, 100), value) for value in range(101)]
    heap = BinaryHeap(entries)
    assert_heap(heap)
    assert heap.size() == 101
    drained = [heap.extract_min() for _ in range(101)]
    assert [p for p, _ in drained] == sorted(p for p, _ in entries)
    assert {v for _, v in drained} == set(range(101))


def test_initial_entries_accept_generators(assert_heap):
    heap = BinaryHeap((10 - i, str(i)) for i in range(10))
    assert_heap(heap)
    assert heap.peek_min() == (1, "9")


def test_initial_entries_with_duplicate():
    with pytest.raises(DuplicateValueError):
        BinaryHeap([(1, "a"), (2, "b"), (3, "a")])


def test_initial_entries_empty():
    heap = BinaryHeap([])
    assert heap.is_empty()
