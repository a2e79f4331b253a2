import io

import pytest

from pushswap.stack import EmptyStackError, Stack, Stacks


def test_iteration_is_top_first():
    assert list(Stack([3, 1, 2])) == [3, 1, 2]


def test_len():
    assert len(Stack()) == 0
    assert len(Stack([5, 6, 7])) == 3


def test_is_sorted():
    assert Stack([1, 2, 3]).is_sorted()
    assert not Stack([2, 1, 3]).is_sorted()
    assert Stack([42]).is_sorted()


def test_min_max():
    s = Stack([4, -7, 9, 0])
    assert s.max() == 9
    assert s.min() == -7


def test_min_max_empty_raise():
    with pytest.raises(EmptyStackError):
        Stack().max()
    with pytest.raises(EmptyStackError):
        Stack().min()


def test_index_of():
    s = Stack([10, 20, 30])
    assert s.index_of(10) == 0
    assert s.index_of(30) == 2
    with pytest.raises(ValueError):
        s.index_of(99)


def test_swap():
    s = Stack([1, 2, 3])
    assert s.swap() is True
    assert list(s) == [2, 1, 3]


def test_swap_single_is_noop():
    s = Stack([1])
    assert s.swap() is False
    assert list(s) == [1]


def test_rotate_and_reverse_are_inverse():
    values = [1, 2, 3, 4]
    s = Stack(values)
    assert s.rotate() is True
    assert list(s) == [2, 3, 4, 1]
    assert s.reverse_rotate() is True
    assert list(s) == values


def test_reverse_rotate_moves_bottom_to_top():
    s = Stack([1, 2, 3])
    s.reverse_rotate()
    assert list(s) == [3, 1, 2]


def test_rotate_full_cycle_restores():
    values = [5, 8, 1, 3, 9]
    s = Stack(values)
    for _ in values:
        s.rotate()
    assert list(s) == values


def test_rotate_empty_is_noop():
    s = Stack()
    assert s.rotate() is False
    assert s.reverse_rotate() is False
    assert len(s) == 0


def test_push_pop_round_trip():
    s = Stack([2, 3])
    s.push(1)
    assert list(s) == [1, 2, 3]
    assert s.pop() == 1
    assert list(s) == [2, 3]


def test_pop_empty_raises():
    with pytest.raises(EmptyStackError):
        Stack().pop()


def test_describe():
    assert Stack([1, 2, 3]).describe("a") == "a: 1 2 3"
    assert Stack().describe("b") == "b is empty"


def test_stacks_initial_state():
    st = Stacks([3, 2, 1])
    assert list(st.a) == [3, 2, 1]
    assert list(st.b) == []
    assert st.history == []


def test_push_operations_record_history():
    st = Stacks([1, 2, 3])
    st.pb()
    st.pb()
    assert list(st.a) == [3]
    assert list(st.b) == [2, 1]
    st.pa()
    assert list(st.a) == [2, 3]
    assert st.history == ["pb", "pb", "pa"]


def test_pa_from_empty_raises():
    st = Stacks([1])
    with pytest.raises(EmptyStackError):
        st.pa()
    assert st.history == []


def test_noop_operations_not_recorded():
    st = Stacks([1])
    st.sa()
    st.ra()
    st.rra()
    st.sb()
    assert st.history == []


def test_combined_operations_emit_each_side():
    st = Stacks([1, 2, 3, 4])
    st.pb()
    st.pb()
    st.rr()
    st.rrr()
    st.ss()
    assert st.history == ["pb", "pb", "ra", "rb", "rra", "rrb", "sa", "sb"]
    assert list(st.a) == [4, 3]
    assert list(st.b) == [1, 2]


def test_combined_operation_skips_short_stack():
    st = Stacks([1, 2, 3])
    st.rr()
    assert st.history == ["ra"]
    assert list(st.a) == [2, 3, 1]


def test_stream_receives_lines():
    st = Stacks([2, 1])
    out = io.StringIO()
    st.stream = out
    st.sa()
    st.pb()
    assert out.getvalue() == "sa\npb\n"


def test_elements_are_conserved():
    values = [7, 3, 9, 1, 5]
    st = Stacks(values)
    for op in (st.pb, st.pb, st.ra, st.rrb, st.ss, st.pa, st.rrr, st.pb):
        op()
    assert sorted(list(st.a) + list(st.b)) == sorted(values)