"""Tests for smallest-unit <-> human amount conversion."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from quote_arb.units import normalize, to_raw

UINT256_MAX = 2**256 - 1


def test_zero_decimals_is_identity():
    assert normalize(123456789, 0) == 123456789


def test_zero_amount():
    for decimals in (0, 6, 18, 30):
        assert normalize(0, decimals) == 0


def test_usdc_and_weth_scaling():
    assert normalize(2_010_500_000, 6) == pytest.approx(2010.5)
    assert normalize(10**18, 18) == 1.0


def test_uint256_max_is_finite():
    """Full uint256 range converts without raising, low bits are lost."""
    value = normalize(UINT256_MAX, 0)
    assert value == pytest.approx(float(2**256))


def test_precision_loss_above_2_53_is_accepted():
    assert normalize(2**53 + 1, 0) == float(2**53)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=30))
def test_round_trip_from_integers(x, decimals):
    assert normalize(x * 10**decimals, decimals) == pytest.approx(x)


@given(st.integers(min_value=0, max_value=18))
def test_raw_of_one_unit(decimals):
    assert to_raw(1.0, decimals) == 10**decimals


def test_to_raw_fractional():
    assert to_raw(0.5, 18) == 5 * 10**17
    assert to_raw(2010.5, 6) == 2_010_500_000
    assert normalize(to_raw(0.1, 18), 18) == pytest.approx(0.1)
