"""Parallel PV01 risk measure (analytic, from point sensitivities)."""

from __future__ import annotations

from dataclasses import dataclass

from fxpricing.currency import Currency
from fxpricing.interfaces import FxProduct, MarketDataContext
from fxpricing.pricers.fx_pricer import DiscountingFxProductPricer


@dataclass
class PV01Parallel:
    """
    Parallel PV01: first-order change in PV, in units of `currency`, when every
    zero rate of that currency's discount curve moves by `bump_bp` basis points.
    """

    currency: Currency
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"PV01_{self.currency}"

    def compute(self, product: FxProduct, market: MarketDataContext) -> float:
        """Sum of zero-rate sensitivities on the curve times the bump."""
        bump = self.bump_bp / 10000.0
        sensitivities = DiscountingFxProductPricer().present_value_sensitivity(product, market)
        return sensitivities.total(self.currency) * bump
