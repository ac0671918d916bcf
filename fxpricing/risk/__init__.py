"""
Risk measures derived from analytic point sensitivities.

Use PV01Parallel directly for composability, or the pv01_parallel function.
"""

from __future__ import annotations

from fxpricing.currency import Currency
from fxpricing.interfaces import FxProduct, MarketDataContext
from fxpricing.risk.pv01 import PV01Parallel


def pv01_parallel(
    product: FxProduct,
    market: MarketDataContext,
    currency: Currency,
    bump_bp: float = 1.0,
) -> float:
    """
    PV01: first-order change in PV when `currency`'s curve moves by bump_bp basis
    points (parallel). bump_bp is in basis points; bump = bump_bp / 10000.
    """
    measure = PV01Parallel(currency=currency, bump_bp=bump_bp)
    return measure.compute(product, market)


__all__ = [
    "PV01Parallel",
    "pv01_parallel",
]
