import threading

import pytest

from structkit.safelist import ThreadSafeList


def _collect(lst):
    items = []
    lst.for_each(items.append)
    return items


def test_push_front_order():
    lst = ThreadSafeList()
    for value in [1, 2, 3]:
        lst.push_front(value)
    assert _collect(lst) == [3, 2, 1]


def test_empty_list():
    lst = ThreadSafeList()
    assert _collect(lst) == []
    assert lst.find_first_if(lambda v: True) is None


def test_find_first_if():
    lst = ThreadSafeList()
    for value in range(10):
        lst.push_front(value)
    assert lst.find_first_if(lambda v: v % 4 == 0) == 8
    assert lst.find_first_if(lambda v: v > 100) is None


def test_remove_if():
    lst = ThreadSafeList()
    for value in range(10):
        lst.push_front(value)
    lst.remove_if(lambda v: v % 2 == 0)
    assert _collect(lst) == [9, 7, 5, 3, 1]
    lst.remove_if(lambda v: True)
    assert _collect(lst) == []


def test_exception_in_callback_leaves_list_usable():
    lst = ThreadSafeList()
    lst.push_front(1)
    lst.push_front(2)

    def boom(value):
        raise RuntimeError("stop")

    with pytest.raises(RuntimeError):
        lst.for_each(boom)
    with pytest.raises(RuntimeError):
        lst.remove_if(boom)
    assert _collect(lst) == [2, 1]


def test_concurrent_push_and_find():
    lst = ThreadSafeList()
    found = []

    def produce():
        for value in range(100):
            lst.push_front(value)

    def consume():
        target = 0
        while target < 100:
            if lst.find_first_if(lambda v: v == target) is not None:
                found.append(target)
                target += 1

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)
    assert found == list(range(100))
    assert sorted(_collect(lst)) == list(range(100))