import pytest

from graphkit.heap import BinaryHeap


def test_extract_in_key_order():
    heap = BinaryHeap()
    pairs = [(5, 0), (3, 1), (8, 2), (1, 3), (9, 4), (2, 5), (7, 6)]
    for key, vertex in pairs:
        heap.insert(key, vertex)
    assert len(heap) == len(pairs)
    out = [heap.extract_min() for _ in range(len(pairs))]
    assert out == sorted(pairs)
    assert len(heap) == 0


def test_peek_returns_min_vertex():
    heap = BinaryHeap()
    heap.insert(4, 10)
    heap.insert(2, 20)
    heap.insert(6, 30)
    assert heap.peek() == 20
    assert len(heap) == 3


def test_decrease_key_moves_vertex_to_top():
    heap = BinaryHeap()
    for vertex in range(5):
        heap.insert(100, vertex)
    heap.decrease_key(3, 0)
    assert heap.extract_min() == (0, 3)


def test_decrease_key_unknown_vertex_is_ignored():
    heap = BinaryHeap()
    heap.insert(1, 0)
    heap.insert(2, 1)
    heap.decrease_key(42, 0)
    assert heap.extract_min() == (1, 0)
    assert heap.extract_min() == (2, 1)


def test_empty_heap_raises():
    heap = BinaryHeap()
    with pytest.raises(IndexError):
        heap.extract_min()
    with pytest.raises(IndexError):
        heap.peek()


def test_interleaved_operations_keep_order():
    heap = BinaryHeap()
    for key, vertex in [(10, 0), (20, 1), (30, 2), (40, 3)]:
        heap.insert(key, vertex)
    heap.decrease_key(2, 5)
    heap.insert(15, 4)
    keys = [heap.extract_min()[0] for _ in range(len(heap))]
    assert keys == sorted(keys)
    assert keys[0] == 5