from typing import Tuple

from core.binary_heap import BinaryHeap, T


class PriorityQueue(BinaryHeap[T]):
    """
    Queue naming on top of BinaryHeap: the entry with the lowest priority is served first.
    """

    def enqueue(self, value: T, priority: float = 0) -> None:
        self.insert(priority, value)

    def dequeue(self) -> None:
        self.extract_min()

    def peek(self) -> Tuple[float, T]:
        return self.peek_min()

    def decrease_priority(self, value: T, new_priority: float = 0) -> None:
        self.decrease_key(value, new_priority)
