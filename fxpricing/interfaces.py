"""
Protocol-based interfaces for the collaborators of the FX pricer.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
The pricer only talks to these protocols, so market data can come from the
in-memory `Market`, a test stub, or an adapter over an external system.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fxpricing.currency import Currency, MultiCurrencyAmount
    from fxpricing.products.fx import ExpandedFx
    from fxpricing.sensitivity import PointSensitivityBuilder


class FxRateProvider(Protocol):
    """Anything that can quote the rate converting one currency into another."""

    def fx_rate(self, base: Currency, counter: Currency) -> float:
        """Units of `counter` per one unit of `base`."""
        ...


@runtime_checkable
class FxProduct(Protocol):
    """An FX product that can be expanded into its two payments."""

    def expand(self) -> ExpandedFx:
        ...


@runtime_checkable
class DiscountCurve(Protocol):
    """Protocol for per-currency discount curve implementations.

    Any class implementing discount_factor() and zero_rate_point_sensitivity()
    can be used, e.g. ZeroRateCurve or a test stub with fixed factors.
    """

    def discount_factor(self, payment_date: date) -> float:
        """Return the discount factor to `payment_date`."""
        ...

    def zero_rate_point_sensitivity(self, payment_date: date) -> PointSensitivityBuilder:
        """Return d(discount factor)/d(zero rate) at `payment_date` as a sensitivity."""
        ...


class MarketDataContext(FxRateProvider, Protocol):
    """Protocol for the market data consumed by the pricer."""

    @property
    def valuation_date(self) -> date:
        ...

    def discount_curve(self, currency: Currency) -> DiscountCurve:
        ...

    def discount_factor(self, currency: Currency, payment_date: date) -> float:
        ...

    def spot_rate(self, base: Currency, counter: Currency) -> float:
        """Current spot rate: units of `counter` per one unit of `base`."""
        ...

    def convert(self, amount: MultiCurrencyAmount, currency: Currency) -> float:
        """Total of `amount` expressed in `currency`."""
        ...


class RiskMeasure(Protocol):
    """Protocol for risk measure implementations.

    Risk measures are composable objects that reduce a product's analytic
    sensitivities to a single number (e.g. parallel PV01 on one curve).
    """

    @property
    def name(self) -> str:
        """Human-readable name (e.g., 'PV01_USD')."""
        ...

    def compute(self, product: FxProduct, market: MarketDataContext) -> float:
        """Compute the risk measure value."""
        ...
