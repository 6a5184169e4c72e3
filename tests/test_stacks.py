import pytest

from dsakit.stacks import (
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
    TwoStacks,
    delete_middle,
    prime_factors_descending,
    reverse_stack,
    reverse_string,
    sort_stack,
)


def test_bounded_stack_push_peek_pop():
    st = BoundedStack(7)
    for value in range(6, 13):
        st.push(value)
    assert st.peek() == 12
    assert st.pop() == 12
    assert st.peek() == 11
    assert len(st) == 6
    assert st.is_empty() is False


def test_bounded_stack_overflow():
    st = BoundedStack(2)
    st.push(1)
    st.push(2)
    assert st.is_full() is True
    with pytest.raises(StackOverflowError):
        st.push(3)


def test_bounded_stack_underflow():
    st = BoundedStack(3)
    assert st.is_empty() is True
    with pytest.raises(StackUnderflowError):
        st.pop()
    with pytest.raises(StackUnderflowError):
        st.peek()


def test_bounded_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)


def test_insert_at_bottom():
    st = BoundedStack(4)
    for value in (3, 35, 45):
        st.push(value)
    st.insert_at_bottom(90)
    assert list(st) == [90, 3, 35, 45]
    with pytest.raises(StackOverflowError):
        st.insert_at_bottom(1)


def test_insert_at_bottom_on_empty():
    st = BoundedStack(1)
    st.insert_at_bottom(5)
    assert st.peek() == 5


def test_two_stacks_share_capacity():
    stacks = TwoStacks(3)
    stacks.push1(5)
    stacks.push2(6)
    stacks.push1(8)
    with pytest.raises(StackOverflowError):
        stacks.push2(9)
    assert stacks.pop1() == 8
    assert stacks.pop1() == 5
    assert stacks.pop2() == 6


def test_two_stacks_underflow():
    stacks = TwoStacks(3)
    with pytest.raises(StackUnderflowError):
        stacks.pop1()
    with pytest.raises(StackUnderflowError):
        stacks.pop2()


def test_delete_middle_example():
    assert delete_middle([1, 2, 3, 4, 5, 6]) == [1, 2, 4, 5, 6]


@pytest.mark.parametrize("size", [1, 2, 5, 9])
def test_delete_middle_removes_one(size):
    original = list(range(size))
    result = delete_middle(original)
    assert len(result) == size - 1
    assert set(result) < set(original)
    assert original == list(range(size))


def test_delete_middle_empty():
    with pytest.raises(StackUnderflowError):
        delete_middle([])


def test_reverse_stack_round_trip():
    original = [34, 45, 56, 67]
    reversed_once = reverse_stack(original)
    assert reversed_once[0] == 67
    assert reverse_stack(reversed_once) == original


def test_sort_stack_example():
    assert sort_stack([45, -2, 23, -7, 67]) == [67, 45, 23, -2, -7]


def test_sort_stack_invariants():
    data = [5, 1, 5, 3, -4, 0]
    result = sort_stack(data)
    assert sorted(result) == sorted(data)
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_reverse_string_round_trip():
    text = "stack"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text)[0] == "k"
    assert reverse_string("") == ""


def test_prime_factors_example():
    assert prime_factors_descending(12) == [3, 2, 2]


@pytest.mark.parametrize("number", [2, 97, 360, 1001, 2**10])
def test_prime_factors_invariants(number):
    factors = prime_factors_descending(number)
    product = 1
    for factor in factors:
        product *= factor
        assert all(factor % d for d in range(2, factor))
    assert product == number
    assert factors == sorted(factors, reverse=True)


def test_prime_factors_of_one():
    assert prime_factors_descending(1) == []


def test_prime_factors_rejects_nonpositive():
    with pytest.raises(ValueError):
        prime_factors_descending(0)