import io

import pytest

from pushswap.stacks import Element, Op, Stacks


def make(values):
    out = io.StringIO()
    return Stacks(values, out), out


def test_initial_state():
    s, out = make([3, 1, 2])
    assert s.values_a() == [3, 1, 2]
    assert s.values_b() == []
    assert all(e.index == 0 for e in s.a)
    assert out.getvalue() == ""
    assert s.total_ops() == 0


def test_element_defaults():
    e = Element(7)
    assert (e.value, e.index) == (7, 0)


def test_swap_a():
    s, out = make([1, 2, 3])
    s.swap_a()
    assert s.values_a() == [2, 1, 3]
    assert out.getvalue() == "sa\n"
    assert s.count(Op.SA) == 1


def test_swap_a_two_elements():
    s, _ = make([1, 2])
    s.swap_a()
    assert s.values_a() == [2, 1]


def test_swap_single_is_noop():
    s, out = make([5])
    s.swap_a()
    s.swap_b()
    assert s.values_a() == [5]
    assert out.getvalue() == ""
    assert s.total_ops() == 0


def test_push_b_and_a():
    s, out = make([1, 2, 3])
    s.push_b()
    s.push_b()
    assert s.values_a() == [3]
    assert s.values_b() == [2, 1]
    s.push_a()
    assert s.values_a() == [2, 3]
    assert s.values_b() == [1]
    assert out.getvalue() == "pb\npb\npa\n"
    assert s.count("pb") == 2
    assert s.count("pa") == 1


def test_push_from_empty_is_noop():
    s, out = make([1])
    s.push_a()
    assert s.values_a() == [1]
    assert out.getvalue() == ""
    s2, out2 = make([])
    s2.push_b()
    assert s2.values_b() == []
    assert out2.getvalue() == ""


def test_rotate_and_reverse_roundtrip():
    s, out = make([1, 2, 3, 4])
    s.rotate_a()
    assert s.values_a() == [2, 3, 4, 1]
    s.reverse_rotate_a()
    assert s.values_a() == [1, 2, 3, 4]
    assert out.getvalue() == "ra\nrra\n"


def test_rotate_single_is_noop():
    s, out = make([9])
    s.rotate_a()
    s.reverse_rotate_a()
    assert s.values_a() == [9]
    assert out.getvalue() == ""


def test_b_operations():
    s, out = make([1, 2, 3])
    for _ in range(3):
        s.push_b()
    assert s.values_b() == [3, 2, 1]
    s.swap_b()
    assert s.values_b() == [2, 3, 1]
    s.rotate_b()
    assert s.values_b() == [3, 1, 2]
    s.reverse_rotate_b()
    assert s.values_b() == [2, 3, 1]
    assert out.getvalue().splitlines() == ["pb", "pb", "pb", "sb", "rb", "rrb"]


def test_joined_ops_not_counted():
    s, out = make([1, 2, 3, 4])
    s.push_b()
    s.push_b()
    before = s.total_ops()
    s.swap_both()
    assert s.values_a() == [4, 3]
    assert s.values_b() == [1, 2]
    s.rotate_both()
    assert s.values_a() == [3, 4]
    assert s.values_b() == [2, 1]
    s.reverse_rotate_both()
    assert s.values_a() == [4, 3]
    assert s.values_b() == [1, 2]
    assert out.getvalue().splitlines()[-3:] == ["ss", "rr", "rrr"]
    assert s.total_ops() == before
    assert s.count(Op.SS) == 0


def test_joined_ops_need_both_stacks():
    s, out = make([1, 2, 3])
    s.swap_both()
    s.rotate_both()
    s.reverse_rotate_both()
    assert s.values_a() == [1, 2, 3]
    assert out.getvalue() == ""


def test_apply_by_name_and_enum():
    s, out = make([1, 2, 3])
    s.apply("ra")
    s.apply(Op.SA)
    assert s.values_a() == [3, 2, 1]
    assert out.getvalue() == "ra\nsa\n"


def test_apply_unknown_raises():
    s, _ = make([1, 2])
    with pytest.raises(ValueError):
        s.apply("xx")


def test_total_equals_output_lines():
    s, out = make([5, 4, 3, 2, 1])
    for name in ["pb", "pb", "ra", "rb", "sa", "rra", "pa", "sb"]:
        s.apply(name)
    assert s.total_ops() == len(out.getvalue().splitlines())
    assert sorted(s.values_a() + s.values_b()) == [1, 2, 3, 4, 5]


def test_elements_keep_identity():
    s, _ = make([1, 2])
    first = s.a[0]
    first.index = 2
    s.rotate_a()
    assert s.a[-1] is first
    assert s.a[-1].index == 2