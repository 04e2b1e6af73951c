import pytest

from core.binary_heap import BinaryHeap


def check_heap(heap: BinaryHeap) -> None:
    data = heap._data
    index_dict = heap._index_dict
    for pos in range(1, len(data)):
        parent_pos = (pos - 1) // 2
        assert data[parent_pos].priority <= data[pos].priority
    assert len(index_dict) == len(data)
    for pos, entry in enumerate(data):
        assert index_dict[entry.value] == pos


@pytest.fixture
def assert_heap():
    return check_heap
