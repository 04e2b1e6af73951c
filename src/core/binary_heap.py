from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


class DuplicateValueError(ValueError):
    pass


class ValueNotFoundError(KeyError):
    pass


class EmptyContainerError(IndexError):
    pass


class HeapEntry(Generic[T]):
    priority: float
    value: T

    __slots__ = ("priority", "value")

    def __init__(self, priority: float, value: T):
        self.priority = priority
        self.value = value

    def as_tuple(self) -> Tuple[float, T]:
        return self.priority, self.value

    def __repr__(self):
        return f"HeapEntry(priority={self.priority!r}, value={self.value!r})"


class BinaryHeap(Generic[T]):
    """
    This is a min-heap with a decrease-key operation.
    Next to the heap array, a dictionary maps every value to its current position in the array,
    so that a value can be located in O(1) and its priority lowered in O(log n).
    Values have to be hashable and unique among the entries currently in the heap.
    """

    _data: List[HeapEntry[T]]
    _index_dict: Dict[T, int]

    def __init__(self, initial: Optional[Iterable[Tuple[float, T]]] = None):
        self._data = []
        self._index_dict = {}
        if initial is None:
            return

        data = [HeapEntry(priority, value) for priority, value in initial]
        index_dict: Dict[T, int] = {}
        for i, entry in enumerate(data):
            if entry.value in index_dict:
                raise DuplicateValueError(f"Duplicate value {entry.value!r} in initial entries.")
            index_dict[entry.value] = i
        self._data = data
        self._index_dict = index_dict
        # Bottom-up construction: every parent from the last one to the root is sieved down.
        for pos in reversed(range(len(self._data) // 2)):
            self._sieve_down(pos)

    def insert(self, priority: float, value: T) -> None:
        if value in self._index_dict:
            raise DuplicateValueError(f"Value {value!r} is already in the heap.")
        self._data.append(HeapEntry(priority, value))
        pos = len(self._data) - 1
        self._index_dict[value] = pos
        self._sieve_up(pos)

    def extract_min(self) -> Tuple[float, T]:
        if not self._data:
            raise EmptyContainerError("Cannot extract from an empty heap.")

        root = self._data[0]
        del self._index_dict[root.value]

        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._index_dict[last.value] = 0
            self._sieve_down(0)
        return root.as_tuple()

    def peek_min(self) -> Tuple[float, T]:
        if not self._data:
            raise EmptyContainerError("Cannot peek into an empty heap.")
        return self._data[0].as_tuple()

    def decrease_key(self, value: T, new_priority: float) -> None:
        """
        Lowers the priority of value to new_priority.
        Does nothing if new_priority is not strictly smaller than the current priority.
        """
        if value not in self._index_dict:
            raise ValueNotFoundError(value)
        pos = self._index_dict[value]
        entry = self._data[pos]
        if entry.priority <= new_priority:
            return
        entry.priority = new_priority
        self._sieve_up(pos)

    def priority_of(self, value: T) -> float:
        if value not in self._index_dict:
            raise ValueNotFoundError(value)
        return self._data[self._index_dict[value]].priority

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, value) -> bool:
        return value in self._index_dict

    def _swap(self, pos1: int, pos2: int) -> None:
        if pos1 == pos2:
            return
        data = self._data
        data[pos1], data[pos2] = data[pos2], data[pos1]
        self._index_dict[data[pos1].value] = pos1
        self._index_dict[data[pos2].value] = pos2

    def _sieve_up(self, pos: int) -> None:
        data = self._data
        while pos > 0:
            parent_pos = (pos - 1) >> 1
            if not data[pos].priority < data[parent_pos].priority:
                break
            self._swap(pos, parent_pos)
            pos = parent_pos

    def _sieve_down(self, pos: int) -> None:
        data = self._data
        end_pos = len(data)
        child_pos = 2 * pos + 1  # leftmost child position
        while child_pos < end_pos:
            # Set child_pos to the index of the smaller child, preferring the left one on ties.
            right_pos = child_pos + 1
            if right_pos < end_pos and data[right_pos].priority < data[child_pos].priority:
                child_pos = right_pos
            if data[pos].priority <= data[child_pos].priority:
                break
            self._swap(pos, child_pos)
            pos = child_pos
            child_pos = 2 * pos + 1
