import threading

import pytest

from structkit.lookup import LookupTable


def test_missing_key_returns_default():
    table = LookupTable()
    assert table.value_for(1) is None
    assert table.value_for(1, "fallback") == "fallback"


def test_add_then_update():
    table = LookupTable()
    table.add_or_update("a", 1)
    assert table.value_for("a") == 1
    table.add_or_update("a", 2)
    assert table.value_for("a") == 2
    assert table.snapshot() == {"a": 2}


def test_remove():
    table = LookupTable()
    table.add_or_update(5, "five")
    table.remove(5)
    assert table.value_for(5, "gone") == "gone"
    table.remove(5)
    assert table.snapshot() == {}


def test_snapshot_is_ordered_by_key():
    table = LookupTable(num_buckets=3)
    for key in [9, 2, 7, 4, 0]:
        table.add_or_update(key, key * 10)
    snap = table.snapshot()
    assert list(snap) == sorted(snap)
    assert snap[7] == 70


def test_single_bucket_hasher_keeps_keys_apart():
    table = LookupTable(num_buckets=4, hasher=lambda key: 0)
    for key in range(10):
        table.add_or_update(key, str(key))
    table.remove(3)
    assert table.value_for(4) == "4"
    assert 3 not in table.snapshot()
    assert len(table.snapshot()) == 9


def test_invalid_bucket_count():
    with pytest.raises(ValueError):
        LookupTable(num_buckets=0)


def test_concurrent_writers():
    table = LookupTable()

    def fill(start):
        for key in range(start, start + 100):
            table.add_or_update(key, key)

    threads = [threading.Thread(target=fill, args=(start,)) for start in (0, 100)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    snap = table.snapshot()
    assert list(snap) == list(range(200))
    assert all(key == value for key, value in snap.items())