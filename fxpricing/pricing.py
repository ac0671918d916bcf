"""
Pricing entrypoints.

Most users of the library only need these functions. Each call constructs a
fresh `DiscountingFxProductPricer`; the pricer holds no state, so there is no
shared default instance to configure or protect.
"""

from __future__ import annotations

from fxpricing.currency import FxRate, MultiCurrencyAmount
from fxpricing.interfaces import FxProduct, MarketDataContext
from fxpricing.pricers.fx_pricer import DiscountingFxProductPricer
from fxpricing.sensitivity import PointSensitivities


def present_value(product: FxProduct, market: MarketDataContext) -> MultiCurrencyAmount:
    return DiscountingFxProductPricer().present_value(product, market)


def currency_exposure(product: FxProduct, market: MarketDataContext) -> MultiCurrencyAmount:
    return DiscountingFxProductPricer().currency_exposure(product, market)


def par_spread(product: FxProduct, market: MarketDataContext) -> float:
    return DiscountingFxProductPricer().par_spread(product, market)


def forward_fx_rate(product: FxProduct, market: MarketDataContext) -> FxRate:
    return DiscountingFxProductPricer().forward_fx_rate(product, market)


def present_value_sensitivity(product: FxProduct, market: MarketDataContext) -> PointSensitivities:
    return DiscountingFxProductPricer().present_value_sensitivity(product, market)
