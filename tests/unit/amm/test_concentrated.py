"""Tests for the single-window concentrated-liquidity leg."""

import pytest

from splitroute.amm.base import LegQuote
from splitroute.amm.concentrated import ConcentratedPool, concentrated
from splitroute.constants import Q96
from splitroute.errors import EmptyVenue

POOL = ConcentratedPool(liquidity=1_000_000)


class TestConcentratedPriceMove:
    """Tests for token deltas between the spot and a target."""

    def test_amount_in_to_price_token0(self):
        """Price 1 -> 1/4 takes L * (1 - 1/2) / (1/2) = L of token0."""
        assert concentrated.amount_in_to_price(1_000_000, Q96, Q96 // 2, zero_for_one=True) == 1_000_000

    def test_amount_out_to_price_token0(self):
        """Price 1 -> 1/4 releases L * (1 - 1/2) of token1."""
        assert concentrated.amount_out_to_price(1_000_000, Q96, Q96 // 2, zero_for_one=True) == 500_000

    def test_amount_in_to_price_token1(self):
        assert concentrated.amount_in_to_price(1_000_000, Q96, 2 * Q96, zero_for_one=False) == 1_000_000

    def test_amount_out_to_price_token1(self):
        assert concentrated.amount_out_to_price(1_000_000, Q96, 2 * Q96, zero_for_one=False) == 500_000

    def test_quote_to_price(self):
        quote = concentrated.quote_to_price(POOL, Q96, Q96 // 2, zero_for_one=True)
        assert quote == LegQuote(amount_in=1_000_000, amount_out=500_000, sqrt_price_x96=Q96 // 2)


class TestConcentratedQuotes:
    """Tests for exact-input and exact-output re-quotes."""

    def test_quote_exact_input_token0(self):
        quote = concentrated.quote_exact_input(POOL, Q96, 1_000_000, zero_for_one=True)
        assert quote == LegQuote(amount_in=1_000_000, amount_out=500_000, sqrt_price_x96=Q96 // 2)

    def test_quote_exact_input_token1(self):
        quote = concentrated.quote_exact_input(POOL, Q96, 1_000_000, zero_for_one=False)
        assert quote == LegQuote(amount_in=1_000_000, amount_out=500_000, sqrt_price_x96=2 * Q96)

    def test_quote_exact_output_token0(self):
        quote = concentrated.quote_exact_output(POOL, Q96, 500_000, zero_for_one=True)
        assert quote == LegQuote(amount_in=1_000_000, amount_out=500_000, sqrt_price_x96=Q96 // 2)

    def test_quote_exact_output_token1(self):
        quote = concentrated.quote_exact_output(POOL, Q96, 500_000, zero_for_one=False)
        assert quote == LegQuote(amount_in=1_000_000, amount_out=500_000, sqrt_price_x96=2 * Q96)

    def test_quote_exact_output_window_exhausted_raises(self):
        """The window cannot pay out its whole token1 side."""
        with pytest.raises(EmptyVenue):
            concentrated.quote_exact_output(POOL, Q96, 1_000_000, zero_for_one=True)

    def test_exact_input_never_overpays(self):
        """Re-quoting the back-solved input never yields more than the back-solve output."""
        pool = ConcentratedPool(liquidity=10_000_000)
        target = Q96 * 220 // 221
        moved = concentrated.quote_to_price(pool, Q96, target, zero_for_one=True)
        requoted = concentrated.quote_exact_input(pool, Q96, moved.amount_in, zero_for_one=True)
        assert requoted.amount_out <= moved.amount_out + 1
        assert requoted.sqrt_price_x96 >= target

    def test_zero_amount_quotes_are_empty(self):
        assert concentrated.quote_exact_input(POOL, Q96, 0, zero_for_one=True) == LegQuote.empty(Q96)
        assert concentrated.quote_exact_output(POOL, Q96, 0, zero_for_one=True) == LegQuote.empty(Q96)
