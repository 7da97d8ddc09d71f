import pytest
from hypothesis import given
from hypothesis import strategies as st

from covkmeans.rng import Mt19937_64


def test_ten_thousandth_output_of_default_seed():
    gen = Mt19937_64()
    for _ in range(9999):
        gen.next()
    assert gen.next() == 9981545732273789042


def test_explicit_default_seed_matches_default():
    a = Mt19937_64()
    b = Mt19937_64(5489)
    assert [a.next() for _ in range(400)] == [b.next() for _ in range(400)]


def test_outputs_are_64_bit():
    gen = Mt19937_64(1234)
    assert all(0 <= gen.next() < 2**64 for _ in range(1000))


def test_different_seeds_differ():
    a = Mt19937_64(1)
    b = Mt19937_64(2)
    assert [a.next() for _ in range(5)] != [b.next() for _ in range(5)]


def test_seed_is_reduced_to_64_bits():
    a = Mt19937_64(7)
    b = Mt19937_64(7 + 2**64)
    assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]


@given(st.integers(0, 2**32), st.integers(-1000, 1000), st.integers(0, 10**6))
def test_uniform_int_within_bounds(seed, low, width):
    gen = Mt19937_64(seed)
    high = low + width
    assert all(low <= gen.uniform_int(low, high) <= high for _ in range(20))


def test_uniform_int_single_value():
    gen = Mt19937_64(1234)
    assert gen.uniform_int(3, 3) == 3


def test_uniform_int_is_reproducible():
    a = Mt19937_64(1234)
    b = Mt19937_64(1234)
    assert [a.uniform_int(0, 99) for _ in range(50)] == [b.uniform_int(0, 99) for _ in range(50)]


def test_uniform_int_covers_small_range():
    gen = Mt19937_64(42)
    assert {gen.uniform_int(0, 3) for _ in range(500)} == {0, 1, 2, 3}


def test_uniform_int_full_range_returns_raw_output():
    a = Mt19937_64(9)
    b = Mt19937_64(9)
    assert a.uniform_int(0, 2**64 - 1) == b.next()


def test_uniform_int_empty_range():
    with pytest.raises(ValueError):
        Mt19937_64().uniform_int(5, 4)


def test_uniform_int_too_wide():
    with pytest.raises(ValueError):
        Mt19937_64().uniform_int(0, 2**64)