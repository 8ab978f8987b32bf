import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorithms.sorting import (
    binary_insert_sort,
    bubble_sort,
    heap_sort,
    insert_sort,
    main,
    merge_sort,
    quick_sort,
    select_sort,
    shell_sort,
)


def _copies(values):
    return [list(values) for _ in range(8)]


@given(values=st.lists(st.integers(-1000, 1000), max_size=60))
def test_sorts_ascending(values):
    a, b, c, d, e, f, g, h = _copies(values)
    returned = [
        insert_sort(a),
        binary_insert_sort(b),
        shell_sort(c),
        select_sort(d),
        bubble_sort(e),
        quick_sort(f),
        heap_sort(g),
        merge_sort(h),
    ]
    assert returned == [None] * 8
    expected = sorted(values)
    assert [a, b, c, d, e, f, g, h] == [expected] * 8


@given(values=st.lists(st.integers(0, 100), max_size=60))
def test_sorts_descending_with_comparator(values):
    a, b, c, d, e, f, g, h = _copies(values)
    insert_sort(a, operator.gt)
    binary_insert_sort(b, operator.gt)
    shell_sort(c, operator.gt)
    select_sort(d, operator.gt)
    bubble_sort(e, operator.gt)
    quick_sort(f, operator.gt)
    heap_sort(g, operator.gt)
    merge_sort(h, operator.gt)
    expected = sorted(values, reverse=True)
    assert [a, b, c, d, e, f, g, h] == [expected] * 8


@given(values=st.lists(st.text(max_size=5), max_size=30))
def test_sorts_strings(values):
    a, b, c, d, e, f, g, h = _copies(values)
    insert_sort(a)
    binary_insert_sort(b)
    shell_sort(c)
    select_sort(d)
    bubble_sort(e)
    quick_sort(f)
    heap_sort(g)
    merge_sort(h)
    expected = sorted(values)
    assert [a, b, c, d, e, f, g, h] == [expected] * 8


@given(values=st.lists(st.tuples(st.integers(0, 5), st.integers()), max_size=40))
def test_key_comparator_orders_keys_and_keeps_elements(values):
    def by_key(x, y):
        return x[0] < y[0]

    a, b, c, d, e, f, g, h = _copies(values)
    insert_sort(a, by_key)
    binary_insert_sort(b, by_key)
    shell_sort(c, by_key)
    select_sort(d, by_key)
    bubble_sort(e, by_key)
    quick_sort(f, by_key)
    heap_sort(g, by_key)
    merge_sort(h, by_key)
    expected_keys = sorted(k for k, _ in values)
    for items in (a, b, c, d, e, f, g, h):
        assert [k for k, _ in items] == expected_keys
        assert sorted(items) == sorted(values)


def test_empty_and_single():
    empties = _copies([])
    singles = _copies([42])
    insert_sort(empties[0])
    binary_insert_sort(empties[1])
    shell_sort(empties[2])
    select_sort(empties[3])
    bubble_sort(empties[4])
    quick_sort(empties[5])
    heap_sort(empties[6])
    merge_sort(empties[7])
    insert_sort(singles[0])
    binary_insert_sort(singles[1])
    shell_sort(singles[2])
    select_sort(singles[3])
    bubble_sort(singles[4])
    quick_sort(singles[5])
    heap_sort(singles[6])
    merge_sort(singles[7])
    assert empties == [[]] * 8
    assert singles == [[42]] * 8


def test_reversed_input_becomes_ascending():
    a, b, c, d, e, f, g, h = _copies(range(49, -1, -1))
    returned = [
        insert_sort(a),
        binary_insert_sort(b),
        shell_sort(c),
        select_sort(d),
        bubble_sort(e),
        quick_sort(f),
        heap_sort(g),
        merge_sort(h),
    ]
    assert returned == [None] * 8
    assert [a, b, c, d, e, f, g, h] == [list(range(50))] * 8


def test_sorted_input_becomes_descending_with_comparator():
    a, b, c, d, e, f, g, h = _copies(range(50))
    insert_sort(a, operator.gt)
    binary_insert_sort(b, operator.gt)
    shell_sort(c, operator.gt)
    select_sort(d, operator.gt)
    bubble_sort(e, operator.gt)
    quick_sort(f, operator.gt)
    heap_sort(g, operator.gt)
    merge_sort(h, operator.gt)
    assert [a, b, c, d, e, f, g, h] == [list(range(49, -1, -1))] * 8


def test_already_sorted_stays_sorted():
    values = [1, 2, 2, 3, 5, 8, 13]
    a, b, c, d, e, f, g, h = _copies(values)
    insert_sort(a)
    binary_insert_sort(b)
    shell_sort(c)
    select_sort(d)
    bubble_sort(e)
    quick_sort(f)
    heap_sort(g)
    merge_sort(h)
    assert [a, b, c, d, e, f, g, h] == [[1, 2, 2, 3, 5, 8, 13]] * 8


def _parse(output):
    lines = output.splitlines()
    sections = {}
    for label, values in zip(lines[::2], lines[1::2]):
        sections[label.rstrip(":")] = [int(v) for v in values.split()]
    return sections


def test_main_sorts_every_way(capsys):
    assert main(["--seed", "7"]) == 0
    sections = _parse(capsys.readouterr().out)
    original = sections.pop("original array")
    assert len(original) == 20
    assert all(0 <= v <= 100 for v in original)
    assert sections.pop("shell sorted array(large to small)") == sorted(original, reverse=True)
    assert len(sections) == 8
    for label, values in sections.items():
        assert values == sorted(original), label


def test_main_respects_size(capsys):
    main(["--seed", "1", "--size", "5"])
    sections = _parse(capsys.readouterr().out)
    assert len(sections["original array"]) == 5
    assert sections["merge sorted array"] == sorted(sections["original array"])


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-3"])