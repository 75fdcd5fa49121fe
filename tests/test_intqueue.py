import pytest

from treelab.intqueue import Elem, IntQueue, main


def test_fifo_order():
    queue = IntQueue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [10, 20, 30]
    assert len(queue) == 0


def test_empty_dequeue_raises():
    with pytest.raises(IndexError):
        IntQueue().dequeue()


def test_queue_reusable_after_emptying():
    queue = IntQueue()
    queue.enqueue(1)
    queue.dequeue()
    queue.enqueue(2)
    assert list(queue) == [2]


def test_lshift_chains():
    queue = IntQueue()
    result = queue << 2 << 3 << 5 << 7
    assert result is queue
    assert list(queue) == [2, 3, 5, 7]
    assert len(queue) == 4


def test_elem_ids_increase():
    first = Elem(1)
    second = Elem(2, first)
    assert second.id > first.id
    assert second.next_elem is first


def test_elem_str_shows_fields():
    tail = Elem(5)
    head = Elem(4, tail)
    assert str(tail) == f"Elem(id={tail.id}, data=5, next=None)"
    assert str(head) == f"Elem(id={head.id}, data=4, next={tail.id})"


def test_queue_str_one_line_per_elem():
    queue = IntQueue() << 1 << 2
    lines = str(queue).splitlines()
    assert len(lines) == 2
    assert "data=1" in lines[0]
    assert "data=2" in lines[1]


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "-1\n10 20 30\n"