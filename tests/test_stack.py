import pytest

from dsakit.stack import ArrayStack


def test_push_and_peek():
    stack = ArrayStack(3)
    stack.push(10)
    stack.push(20)
    assert stack.peek() == 20
    assert len(stack) == 2


def test_pop_is_lifo():
    stack = ArrayStack(3)
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_overflow():
    stack = ArrayStack(1)
    stack.push(1)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(2)
    assert stack.peek() == 1


def test_pop_empty_raises():
    stack = ArrayStack(2)
    with pytest.raises(IndexError):
        stack.pop()


def test_peek_empty_is_none():
    stack = ArrayStack(2)
    assert stack.peek() is None


def test_pop_frees_room():
    stack = ArrayStack(1)
    stack.push("a")
    stack.pop()
    stack.push("b")
    assert stack.peek() == "b"
    assert not stack.is_empty()


def test_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-2)