import pytest

from cfgparse.stack import DataStack, ParsedData


def _entry(text, code=4):
    return ParsedData(code=code, text=text, length=len(text))


def test_push_then_peek_returns_last():
    stack = DataStack()
    stack.push(_entry("a"))
    stack.push(_entry("bc"))
    assert stack.peek().text == "bc"
    assert len(stack) == 2


def test_pop_is_lifo():
    stack = DataStack()
    for text in ("one", "two", "three"):
        stack.push(_entry(text))
    assert [stack.pop().text for _ in range(3)] == ["three", "two", "one"]
    assert len(stack) == 0


def test_peek_does_not_remove():
    stack = DataStack()
    stack.push(_entry("x"))
    stack.peek()
    assert len(stack) == 1


def test_clear_empties_stack():
    stack = DataStack()
    stack.push(_entry("x"))
    stack.push(_entry("y"))
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.peek()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DataStack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        DataStack().peek()


def test_entry_keeps_fields():
    entry = ParsedData(code=-1_000_000, text=None, length=3)
    stack = DataStack()
    stack.push(entry)
    assert stack.pop() == ParsedData(code=-1_000_000, text=None, length=3)