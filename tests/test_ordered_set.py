import pytest

from structkit.ordered_set import (
    OrderedSet,
    describe_letters,
    describe_numbers,
    letters,
    main,
    multiples,
)


def test_add_keeps_elements_sorted_and_unique():
    items = [5, 1, 3, 1, 5, 9, 3]
    ordered = OrderedSet(items)
    assert list(ordered) == sorted(set(items))
    assert len(ordered) == len(set(items))


def test_add_existing_element_changes_nothing():
    ordered = OrderedSet([2, 4, 6])
    ordered.add(4)
    assert list(ordered) == [2, 4, 6]


def test_contains_uses_membership():
    ordered = OrderedSet(range(0, 20, 2))
    assert all(n in ordered for n in range(0, 20, 2))
    assert not any(n in ordered for n in range(1, 20, 2))
    assert 7 not in OrderedSet()


def test_equality():
    assert OrderedSet([3, 1, 2]) == OrderedSet([2, 3, 1])
    assert not (OrderedSet([1, 2]) == OrderedSet([1, 2, 3]))
    assert not (OrderedSet([1, 2]) == [1, 2])


def test_letters_of_mississippi():
    word = "mississippi"
    assert list(letters(word)) == sorted(set(word))


def test_describe_letters_mississippi():
    assert describe_letters(letters("mississippi")) == "There are 4 letters: i m p s"


@pytest.mark.parametrize(
    "left, right",
    [("mississippi", "small"), ("abc", ""), ("", ""), ("hello", "world")],
)
def test_union_and_intersection_match_set_algebra(left, right):
    a, b = letters(left), letters(right)
    assert list(a.union(b)) == sorted(set(left) | set(right))
    assert list(a.intersection(b)) == sorted(set(left) & set(right))


def test_union_leaves_operands_untouched():
    a, b = OrderedSet([1, 3]), OrderedSet([2, 3])
    a.union(b)
    a.intersection(b)
    assert list(a) == [1, 3]
    assert list(b) == [2, 3]


def test_multiples_invariants():
    result = multiples(4, 25, 3)
    values = list(result)
    assert values == sorted(values)
    assert all(4 <= n <= 25 and n % 3 == 0 for n in values)
    missing = [n for n in range(4, 26) if n not in result]
    assert all(n % 3 != 0 for n in missing)


def test_multiples_with_negative_range():
    result = multiples(-9, 9, 4)
    assert all(n % 4 == 0 and -9 <= n <= 9 for n in result)
    assert 0 in result


def test_multiples_rejects_zero_divisor():
    with pytest.raises(ValueError):
        multiples(1, 10, 0)


def test_multiples_rejects_reversed_range():
    with pytest.raises(ValueError):
        multiples(10, 1, 2)


def test_multiples_without_hits_is_empty():
    result = multiples(5, 6, 7)
    assert len(result) == 0
    assert describe_numbers(result) == "The set is empty."


def test_describe_numbers_none():
    assert describe_numbers(None) == "The set is empty."


def test_describe_numbers_lists_elements():
    assert describe_numbers(OrderedSet([3, 1, 2])) == "There are 3 elements: 1 2 3"


def test_main_letters_output(capsys):
    assert main(["letters"]) == 0
    lines = capsys.readouterr().out.splitlines()
    first, second = letters("mississippi"), letters("small")
    assert lines == [
        "mississippi: " + describe_letters(first),
        "small: " + describe_letters(second),
        "Union: " + describe_letters(first.union(second)),
        "Intersection: " + describe_letters(first.intersection(second)),
    ]


def test_main_numbers_output(capsys):
    assert main(["numbers"]) == 0
    out = capsys.readouterr().out
    first, second = multiples(4, 25, 3), multiples(5, 30, 4)
    assert "Multiples of 3 in the range [4, 25]:\n " + describe_numbers(first) in out
    assert "Intersection: " + describe_numbers(first.intersection(second)) in out