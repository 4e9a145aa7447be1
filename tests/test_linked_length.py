import sys

import pytest

from structkit.linked_length import (
    Node,
    build_list,
    length_iterative,
    length_recursive,
    length_tail_recursive,
    main,
    time_length,
)

ALL_LENGTHS = [length_iterative, length_recursive, length_tail_recursive]


def _values(head):
    out = []
    while head is not None:
        out.append(head.value)
        head = head.next
    return out


@pytest.mark.parametrize("size", [0, -3])
def test_build_list_non_positive_is_empty(size):
    assert build_list(size) is None


def test_build_list_values_follow_pattern():
    assert _values(build_list(6)) == [0, -1, 0, 1, 2, -2]


def test_build_list_single_node():
    head = build_list(1)
    assert head.value == 0
    assert head.next is None


@pytest.mark.parametrize("func", ALL_LENGTHS)
@pytest.mark.parametrize("size", [0, 1, 2, 17, 300])
def test_length_functions_agree_with_size(func, size):
    assert func(build_list(size)) == size


@pytest.mark.parametrize("func", ALL_LENGTHS)
def test_length_of_hand_built_list(func):
    head = Node(5, Node(6, Node(7)))
    assert func(head) == 3


def test_recursive_length_overflows_on_deep_list():
    head = build_list(sys.getrecursionlimit() * 2)
    with pytest.raises(RecursionError):
        length_recursive(head)


def test_tail_recursive_handles_deep_list():
    size = sys.getrecursionlimit() * 20
    assert length_tail_recursive(build_list(size)) == size


def test_time_length_reports_length_and_time():
    length, elapsed = time_length(1000, "Iterative", length_iterative)
    assert length == 1000
    assert elapsed >= 0.0


def test_main_prints_each_function(capsys):
    assert main(["10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(line.startswith("Size: 10 |") for line in lines)
    assert "Tail Recursive" in lines[1]
    assert "Stack Recursive" in lines[2]


def test_main_reports_recursion_failure(capsys):
    size = sys.getrecursionlimit() * 2
    assert main([str(size)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith(f"Size: {size} |")
    assert "recursion limit exceeded" in lines[2]