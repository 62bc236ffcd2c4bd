import pytest

from edakit.stack import Stack


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_push_and_top():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert stack.top() == 2
    assert len(stack) == 2
    assert not stack.is_empty()


def test_pop():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    stack.pop()
    assert stack.top() == 2
    assert len(stack) == 2
    stack.pop()
    stack.pop()
    assert stack.is_empty()


def test_empty_stack_errors():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.pop()


def test_str_lists_top_first():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert str(stack) == "[ 3 2 1 ]"


def test_parse():
    stack = Stack.parse("[ 3 2 1 ]")
    assert stack.top() == 3
    assert len(stack) == 3
    assert str(Stack.parse("[]")) == "[ ]"


def test_parse_wrong_format():
    with pytest.raises(ValueError, match="Wrong input format."):
        Stack.parse("[ 1 x ]")