import pytest

from cdfengine.containers import IntDict, Queue, StrDict


def test_int_dict_add_and_get():
    d = IntDict()
    d.add(7, "seven")
    d.add(1000, "thousand")
    assert d.get(7) == "seven"
    assert d.get(1000) == "thousand"


def test_int_dict_missing_is_none():
    d = IntDict()
    d.add(3, "x")
    assert d.get(4) is None


def test_int_dict_newest_entry_wins():
    d = IntDict()
    d.add(5, "old")
    d.add(5, "new")
    assert d.get(5) == "new"


def test_int_dict_many_keys():
    d = IntDict()
    for i in range(500):
        d.add(i, i * 2)
    assert all(d.get(i) == i * 2 for i in range(500))
    assert len(d) == 500
    assert 499 in d
    assert 500 not in d


def test_int_dict_wraps_unsigned_ids():
    d = IntDict()
    d.add(-1, "max")
    assert d.get(2**32 - 1) == "max"


def test_str_dict_add_and_get():
    d = StrDict()
    d.add("speed", 1.5)
    d.add("health", 100)
    assert d.get("speed") == 1.5
    assert d.get("health") == 100
    assert d.get("armor") is None


def test_str_dict_newest_entry_wins():
    d = StrDict()
    d.add("name", "a")
    d.add("name", "b")
    assert d.get("name") == "b"
    assert "name" in d


def test_str_dict_rejects_non_string_key():
    d = StrDict()
    with pytest.raises(TypeError):
        d.add(1, "x")
    with pytest.raises(TypeError):
        d.get(1)


def test_queue_is_fifo():
    q = Queue()
    for item in ("a", "b", "c"):
        q.enqueue(item)
    assert len(q) == 3
    assert [q.dequeue(), q.dequeue(), q.dequeue()] == ["a", "b", "c"]
    assert len(q) == 0


def test_queue_empty_dequeue_is_none():
    q = Queue()
    assert q.dequeue() is None
    q.enqueue(1)
    assert q.dequeue() == 1
    assert q.dequeue() is None


def test_queue_reusable_after_emptying():
    q = Queue()
    q.enqueue("x")
    q.dequeue()
    q.enqueue("y")
    q.enqueue("z")
    assert q.dequeue() == "y"
    assert len(q) == 1