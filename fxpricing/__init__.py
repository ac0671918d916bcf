"""FX forward pricing library: currency values, products, curves, market, pricer and risk."""

from fxpricing.currency import Currency, CurrencyAmount, FxRate, MultiCurrencyAmount
from fxpricing.curves import ZeroRateCurve
from fxpricing.errors import (
    CurrencyMismatchError,
    InvalidProductError,
    MissingMarketDataError,
    PricingError,
)
from fxpricing.interfaces import (
    DiscountCurve,
    FxProduct,
    FxRateProvider,
    MarketDataContext,
    RiskMeasure,
)
from fxpricing.market import Market
from fxpricing.pricers import DiscountingFxProductPricer
from fxpricing.pricing import (
    currency_exposure,
    forward_fx_rate,
    par_spread,
    present_value,
    present_value_sensitivity,
)
from fxpricing.products.fx import ExpandedFx, FxPayment, FxSingle
from fxpricing.risk import PV01Parallel, pv01_parallel
from fxpricing.sensitivity import PointSensitivities, PointSensitivityBuilder, ZeroRateSensitivity

__all__ = [
    "Currency",
    "CurrencyAmount",
    "MultiCurrencyAmount",
    "FxRate",
    "ZeroRateCurve",
    "PricingError",
    "MissingMarketDataError",
    "InvalidProductError",
    "CurrencyMismatchError",
    "DiscountCurve",
    "FxProduct",
    "FxRateProvider",
    "MarketDataContext",
    "Market",
    "DiscountingFxProductPricer",
    "present_value",
    "currency_exposure",
    "par_spread",
    "forward_fx_rate",
    "present_value_sensitivity",
    "ExpandedFx",
    "FxPayment",
    "FxSingle",
    "RiskMeasure",
    "PV01Parallel",
    "pv01_parallel",
    "PointSensitivities",
    "PointSensitivityBuilder",
    "ZeroRateSensitivity",
]
