import threading

import pytest

from structkit.parallel import parallel_quick_sort, run_detached, sequential_quick_sort

SAMPLE = [6, 1, 0, 7, 5, 2, 9, -1]


def test_run_detached_returns_result():
    future = run_detached(lambda a, b=1: a * b, 6, b=7)
    assert future.result(timeout=5) == 42


def test_run_detached_runs_on_other_thread():
    future = run_detached(threading.get_ident)
    assert future.result(timeout=5) != threading.get_ident()
    assert future.done()


def test_run_detached_propagates_exception():
    def fail():
        raise RuntimeError("An error occurred!")

    with pytest.raises(RuntimeError, match="An error occurred!"):
        run_detached(fail).result(timeout=5)


@pytest.mark.parametrize("sort", [sequential_quick_sort, parallel_quick_sort])
def test_sorts_sample(sort):
    assert sort(SAMPLE) == [-1, 0, 1, 2, 5, 6, 7, 9]


@pytest.mark.parametrize("sort", [sequential_quick_sort, parallel_quick_sort])
def test_empty_and_duplicates(sort):
    assert sort([]) == []
    data = [3, 1, 3, 2, 1, 3]
    result = sort(data)
    assert result == sorted(data)
    assert data == [3, 1, 3, 2, 1, 3]


@pytest.mark.parametrize("sort", [sequential_quick_sort, parallel_quick_sort])
def test_ordered_invariant(sort):
    data = [(n * 37) % 101 for n in range(200)]
    result = sort(data)
    assert len(result) == len(data)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(data)


def test_parallel_matches_sequential():
    data = [(n * 53) % 97 - 40 for n in range(300)]
    assert parallel_quick_sort(data) == sequential_quick_sort(data)


def test_accepts_any_iterable():
    assert sequential_quick_sort(iter(["b", "c", "a"])) == ["a", "b", "c"]
    assert parallel_quick_sort(x for x in (2, 1)) == [1, 2]