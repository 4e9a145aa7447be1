import pytest

from structkit.stack import EmptyStackError, Stack, is_balanced, main


def test_new_stack_is_empty():
    stack = Stack()
    assert len(stack) == 0
    assert not stack
    assert list(stack) == []


def test_push_sequence_from_source():
    stack = Stack()
    stack.push(1)
    assert len(stack) == 1
    assert stack.top() == 1
    assert list(stack) == [1]

    stack.push(2)
    assert len(stack) == 2
    assert stack.top() == 2
    assert list(stack) == [2, 1]

    for value in (3, 4, 5):
        stack.push(value)
    assert len(stack) == 5
    assert stack.top() == 5
    assert list(stack) == [5, 4, 3, 2, 1]


def test_top_does_not_remove():
    stack = Stack()
    for value in (1, 2, 3, 4, 5, 6):
        stack.push(value)
    assert stack.top() == 6
    stack.push(7)
    stack.push(8)
    assert stack.top() == 8
    assert len(stack) == 8


def test_pop_sequence_from_source():
    stack = Stack()
    for value in range(1, 9):
        stack.push(value)
    assert len(stack) == 8

    stack.pop()
    stack.pop()
    assert len(stack) == 6
    assert stack.top() == 6

    stack.pop()
    stack.pop()
    stack.pop()
    assert len(stack) == 3
    assert stack.top() == 3

    stack.push(4)
    stack.pop()
    assert len(stack) == 3
    assert stack.top() == 3

    stack.pop()
    stack.pop()
    assert stack.top() == 1
    assert list(stack) == [1]

    stack.pop()
    assert not stack

    for value in (3, 2, 1, 4):
        stack.push(value)
    stack.pop()
    assert stack.top() == 1
    assert list(stack) == [1, 2, 3]


def test_pop_returns_pushed_values_in_reverse():
    stack = Stack()
    values = ["a", "b", "c"]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]


def test_empty_stack_errors():
    stack = Stack()
    with pytest.raises(EmptyStackError):
        stack.pop()
    with pytest.raises(EmptyStackError):
        stack.top()


def test_empty_stack_error_is_index_error():
    with pytest.raises(IndexError):
        Stack().pop()


@pytest.mark.parametrize(
    "text",
    ["()", "([]{})", "{[()()]}", "a(b)c", "", "no brackets"],
)
def test_balanced(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize(
    "text",
    ["(", ")", "(]", "([)]", "{{}", "())("],
)
def test_not_balanced(text):
    assert is_balanced(text) is False


def test_main_reports_each_line(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("([])\r\n\n(]\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["([]) ---> is balanced.", "(] ---> not balanced."]


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Could not open" in capsys.readouterr().err