"""Tests for the composite-product check."""

import pytest

from factorlog_core.checker import COMPOSITE, INELIGIBLE, PRIME, check_composite

_PRIMES = {5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97}


def _smallest_divisor(n: int) -> int:
    return next(d for d in range(2, n + 1) if n % d == 0)


class TestIneligible:
    @pytest.mark.parametrize("n", [-100, -4, -1, 0, 1, 2, 3])
    def test_small_and_negative_integers(self, n):
        res = check_composite(n)
        assert res.result is False
        assert res.reason == INELIGIBLE
        assert "greater than 3" in res.explanation
        assert res.factors is None

    @pytest.mark.parametrize("n", [4.5, 12.25, float("nan"), float("inf"), "12", None, True, False])
    def test_non_integers(self, n):
        res = check_composite(n)
        assert res.result is False
        assert res.reason == INELIGIBLE

    def test_two_cites_the_rule_not_primality(self):
        res = check_composite(2)
        assert "prime" not in res.explanation
        assert "2*2" in res.explanation


class TestComposite:
    def test_twelve(self):
        res = check_composite(12)
        assert res.result is True
        assert res.reason == COMPOSITE
        assert res.explanation == "12 = 2 × 6"
        assert res.factors == (2, 6)

    def test_four_is_smallest_composite(self):
        assert check_composite(4).explanation == "4 = 2 × 2"

    def test_reports_smallest_factor_not_most_balanced(self):
        # 3 × 5 × 7: smallest divisor wins over 15 × 7.
        assert check_composite(105).factors == (3, 35)

    def test_square_of_prime(self):
        assert check_composite(49).factors == (7, 7)

    def test_integral_float_treated_as_integer(self):
        res = check_composite(12.0)
        assert res.result is True
        assert res.explanation == "12 = 2 × 6"

    def test_large_composite(self):
        n = 1_000_003 * 1_000_033
        res = check_composite(n)
        assert res.result is True
        assert res.factors == (1_000_003, 1_000_033)

    @pytest.mark.parametrize("n", range(4, 200))
    def test_matches_naive_primality(self, n):
        res = check_composite(n)
        d = _smallest_divisor(n)
        assert res.result is (d != n)
        if res.result:
            i, other = res.factors
            assert i == d
            assert i * other == n
            assert 2 <= i <= other


class TestPrime:
    @pytest.mark.parametrize("n", sorted(_PRIMES))
    def test_primes_are_not_composite(self, n):
        res = check_composite(n)
        assert res.result is False
        assert res.reason == PRIME
        assert f"{n} is prime" in res.explanation

    def test_thirteen(self):
        res = check_composite(13)
        assert res.explanation.startswith("13 is prime")

    def test_large_prime(self):
        assert check_composite(1_000_003).reason == PRIME
