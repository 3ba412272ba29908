"""Property checks for both split modes on a token-scale venue pair.

Spot price 4.0, R0 = 2e18, R1 = 8e18 (the CPMM reserves imply the spot),
L = 5e18. Limits sit at price 2.25 below and 9.0 above.
"""

import pytest

from splitroute.amm.constant_product import constant_product
from splitroute.constants import Q96, UINT64_MAX
from splitroute.math.sqrt_price import implied_sqrt_q96
from splitroute.routing.split import quote_for_input, quote_for_output
from tests.helpers import DEEP_LIQUIDITY, DEEP_RESERVE, SQRT_PRICE_FOUR, make_venue, solver_args

AMOUNTS = [1, 7, 10**6, 10**12, 10**15, 10**17, 10**18, 5 * 10**18, UINT64_MAX]
UNPINNED_AMOUNTS = [10**6, 10**12, 10**15, 10**17]


def deep_venue(zero_for_one: bool):
    return make_venue(
        zero_for_one=zero_for_one,
        sqrt_price_x96=SQRT_PRICE_FOUR,
        sqrt_price_limit_x96=3 * Q96 // 2 if zero_for_one else 3 * Q96,
        liquidity=DEEP_LIQUIDITY,
        reserve0=DEEP_RESERVE,
        reserve1=4 * DEEP_RESERVE,
    )


class TestDeepVenue:
    def test_reserves_imply_spot(self):
        assert implied_sqrt_q96(DEEP_RESERVE, 4 * DEEP_RESERVE) == SQRT_PRICE_FOUR


class TestBoundRespect:
    """Totals never exceed the caller's bound by more than one unit."""

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_input_bound(self, amount, direction):
        quote = quote_for_input(*solver_args(amount, direction, deep_venue(direction)))
        assert quote.split.total_in <= amount + 1
        if not quote.limit_binds:
            assert quote.split.total_in >= amount - 3

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_output_bound(self, amount, direction):
        quote = quote_for_output(*solver_args(amount, direction, deep_venue(direction)))
        assert quote.split.total_out <= amount + 1
        if not quote.limit_binds:
            assert quote.split.total_out >= amount - 10

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_stopping_price_between_spot_and_limit(self, amount, direction):
        venue = deep_venue(direction)
        low, high = sorted((venue.sqrt_price_x96, venue.sqrt_price_limit_x96))
        for quote in (
            quote_for_input(*solver_args(amount, direction, venue)),
            quote_for_output(*solver_args(amount, direction, venue)),
        ):
            assert low <= quote.sqrt_price_x96 <= high


class TestDerivedOutputs:
    """Outputs are always derived from the inputs and the venue state."""

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_cpmm_output_from_input(self, amount, direction):
        venue = deep_venue(direction)
        split = quote_for_input(*solver_args(amount, direction, venue)).split
        reserve_in, reserve_out = venue.get_reserves(direction)
        assert split.out_v2 == constant_product.get_amount_out(split.in_v2, reserve_in, reserve_out)

    @pytest.mark.parametrize("amount", AMOUNTS)
    def test_cpmm_input_buys_output(self, amount, direction):
        venue = deep_venue(direction)
        split = quote_for_output(*solver_args(amount, direction, venue)).split
        reserve_in, reserve_out = venue.get_reserves(direction)
        assert constant_product.get_amount_out(split.in_v2, reserve_in, reserve_out) >= split.out_v2


class TestMonotonicity:
    """A larger bound never yields a smaller trade."""

    def test_input_mode(self, direction):
        venue = deep_venue(direction)
        outs = [quote_for_input(*solver_args(a, direction, venue)).split.total_out for a in AMOUNTS]
        assert outs == sorted(outs)

    def test_output_mode(self, direction):
        venue = deep_venue(direction)
        ins = [quote_for_output(*solver_args(a, direction, venue)).split.total_in for a in AMOUNTS]
        assert ins == sorted(ins)

    def test_limit_binds_from_some_amount_on(self, direction):
        venue = deep_venue(direction)
        binds = [quote_for_input(*solver_args(a, direction, venue)).limit_binds for a in AMOUNTS]
        assert binds == sorted(binds)
        assert binds[-1]


class TestCrossModeConsistency:
    """Asking for the output an input bought costs about that input."""

    @pytest.mark.parametrize("amount", UNPINNED_AMOUNTS)
    def test_output_of_input_round_trip(self, amount, direction):
        venue = deep_venue(direction)
        by_input = quote_for_input(*solver_args(amount, direction, venue))
        assert not by_input.limit_binds
        by_output = quote_for_output(*solver_args(by_input.split.total_out, direction, venue))
        assert by_output.split.total_in <= amount + 3
        assert by_output.split.total_out <= by_input.split.total_out + 1
