from typing import List, Optional, Sequence, Tuple

from core.priority_queue import PriorityQueue

SAMPLE_ENTRIES = [("!", 3), ("world", 2), ("hello", 1)]


def run_scenario(
    entries: Optional[Sequence[Tuple[str, int]]] = None, suppress_log: bool = False
) -> List[Tuple[int, str]]:
    if entries is None:
        entries = SAMPLE_ENTRIES

    queue: PriorityQueue[str] = PriorityQueue()
    for value, priority in entries:
        queue.enqueue(value, priority)

    drained = []
    while not queue.is_empty():
        priority, data = queue.peek()
        if not suppress_log:
            print(f"Priority : {priority}, Data : {data}")
        drained.append((priority, data))
        queue.dequeue()
    return drained


if __name__ == "__main__":
    run_scenario()
