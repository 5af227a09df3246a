from workbench.stack import Stack


def test_push_pop_order_mixed_types():
    stack = Stack()
    stack.push(12)
    stack.push(12)
    stack.push("foo")
    stack.push("bar")
    popped = [stack.pop() for _ in range(5)]
    assert popped == ["bar", "foo", 12, 12, None]


def test_empty_pop_returns_none():
    assert Stack().pop() is None


def test_length_tracks_pushes_and_pops():
    stack = Stack()
    for item in range(4):
        stack.push(item)
    assert len(stack) == 4
    stack.pop()
    assert len(stack) == 3


def test_pop_after_empty_still_none():
    stack = Stack()
    stack.push("x")
    assert stack.pop() == "x"
    assert stack.pop() is None
    assert len(stack) == 0