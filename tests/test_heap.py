import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.heap import HeapNode, MaxHeap, build_heap, heap_sort, heapify


def _is_max_heap(values, size=None):
    size = len(values) if size is None else size
    return all(values[(i - 1) // 2] >= values[i] for i in range(1, size))


def test_push_sequence_keeps_heap_order():
    heap = MaxHeap()
    for value in (100, 500, 400, 800, 70, 410):
        heap.push(value)
    values = list(heap)
    assert values[0] == 800
    assert sorted(values) == [70, 100, 400, 410, 500, 800]
    assert _is_max_heap(values)


def test_push_sequence_array_layout():
    heap = MaxHeap()
    for value in (100, 500, 400, 800, 70, 410):
        heap.push(value)
    assert list(heap) == [800, 500, 410, 100, 70, 400]


def test_pop_returns_maximum_and_keeps_heap():
    heap = MaxHeap()
    for value in (100, 500, 400, 800, 70, 600):
        heap.push(value)
    assert heap.pop() == 800
    assert len(heap) == 5
    assert heap.peek() == 600
    assert _is_max_heap(list(heap))


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().peek()


def test_pop_last_item_empties_heap():
    heap = MaxHeap()
    heap.push(7)
    assert heap.pop() == 7
    assert len(heap) == 0
    assert list(heap) == []


def test_nodes_report_neighbours():
    heap = MaxHeap()
    for value in (3, 2, 1):
        heap.push(value)
    nodes = list(heap.nodes())
    assert nodes[0] == HeapNode(3, None, 2, 1)
    assert nodes[1] == HeapNode(2, 3, None, None)
    assert nodes[2] == HeapNode(1, 3, None, None)


@given(st.lists(st.integers()))
def test_pops_come_out_descending(values):
    heap = MaxHeap()
    for value in values:
        heap.push(value)
    assert _is_max_heap(list(heap))
    drained = [heap.pop() for _ in range(len(values))]
    assert drained == sorted(values, reverse=True)
    assert len(heap) == 0


def test_heap_sort_source_example():
    assert heap_sort([10, 25, 110, 50, 100]) == [10, 25, 50, 100, 110]


def test_heap_sort_does_not_modify_input():
    data = [3, 1, 2]
    heap_sort(data)
    assert data == [3, 1, 2]


@given(st.lists(st.integers()))
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


@given(st.lists(st.integers()))
def test_build_heap_produces_heap_permutation(values):
    data = list(values)
    build_heap(data)
    assert _is_max_heap(data)
    assert sorted(data) == sorted(values)


def test_heapify_sifts_root_down():
    data = [1, 5, 4, 3, 2]
    heapify(data, len(data), 0)
    assert data[0] == 5
    assert _is_max_heap(data)


def test_heapify_respects_size_limit():
    data = [1, 2, 9]
    heapify(data, 2, 0)
    assert data == [2, 1, 9]


def test_heapify_rejects_oversized_size():
    with pytest.raises(ValueError):
        heapify([1, 2], 3, 0)


def test_heapify_rejects_negative_position():
    with pytest.raises(IndexError):
        heapify([1, 2], 2, -1)