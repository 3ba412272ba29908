"""Venue legs of a two-venue split."""

from splitroute.amm.base import LegQuote, SplitLeg
from splitroute.amm.concentrated import Concentrated, ConcentratedPool, concentrated
from splitroute.amm.constant_product import ConstantProduct, ConstantProductPool, constant_product

__all__ = [
    # Base classes
    "LegQuote",
    "SplitLeg",
    # CLMM
    "Concentrated",
    "ConcentratedPool",
    "concentrated",
    # CPMM
    "ConstantProduct",
    "ConstantProductPool",
    "constant_product",
]
