import pytest

from nothingkit.stack import Stack


def test_push_and_top():
    stack = Stack()
    stack.push(b"abc")
    assert stack.top() == b"abc"
    assert stack.top_size() == 3


def test_frames_of_different_sizes_pop_in_reverse():
    stack = Stack()
    items = [b"x", b"hello", b"\x00\x01"]
    for item in items:
        stack.push(item)
    popped = []
    while stack:
        popped.append(stack.top())
        stack.pop()
    assert popped == list(reversed(items))


def test_truthiness_tracks_contents():
    stack = Stack()
    assert not stack
    stack.push(b"a")
    assert stack
    stack.pop()
    assert not stack


def test_push_copies_data():
    stack = Stack()
    buffer = bytearray(b"abc")
    stack.push(buffer)
    buffer[0] = ord("z")
    assert stack.top() == b"abc"


def test_empty_element_rejected():
    with pytest.raises(ValueError):
        Stack().push(b"")


@pytest.mark.parametrize("method", ["top", "top_size", "pop"])
def test_empty_stack_raises(method):
    with pytest.raises(IndexError):
        getattr(Stack(), method)()