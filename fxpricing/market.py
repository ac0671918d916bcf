"""
Market snapshot container.

`Market` is intentionally a *simple* in-memory implementation of the
MarketDataContext protocol:
- A valuation date
- Discount curves, keyed by currency (e.g. "USD")
- FX spot rates, keyed by a six-letter pair string (e.g. "USDEUR" = EUR per USD)

Lookups never fall back silently: missing curves or spot rates raise
MissingMarketDataError, and conversions between currencies that cannot be
related raise CurrencyMismatchError.
"""

from __future__ import annotations

import logging
from datetime import date

from fxpricing.currency import Currency, MultiCurrencyAmount, check_currency
from fxpricing.errors import CurrencyMismatchError, MissingMarketDataError
from fxpricing.interfaces import DiscountCurve
from fxpricing.sensitivity import PointSensitivities

logger = logging.getLogger(__name__)


class Market:
    """
    Market snapshot: valuation date, discount curves (by currency) and FX spot rates.
    Immutable-style: with_curve / with_fx return new Market instances.
    """

    def __init__(
        self,
        valuation_date: date,
        curves: dict[Currency, DiscountCurve] | None = None,
        fx_spot: dict[str, float] | None = None,
    ) -> None:
        self._valuation_date = valuation_date
        self.curves: dict[Currency, DiscountCurve] = curves.copy() if curves else {}
        self.fx_spot: dict[str, float] = fx_spot.copy() if fx_spot else {}
        for pair, spot in self.fx_spot.items():
            if len(pair) != 6:
                raise ValueError(f"FX pair must be six letters, e.g. 'EURUSD', got {pair!r}")
            check_currency(pair[:3])
            check_currency(pair[3:])
            if pair[:3] == pair[3:]:
                raise ValueError(f"FX pair {pair!r} must name two different currencies")
            if not spot > 0:
                raise ValueError(f"FX spot for {pair} must be > 0")

    @property
    def valuation_date(self) -> date:
        return self._valuation_date

    def discount_curve(self, currency: Currency) -> DiscountCurve:
        """Return the discount curve for `currency`."""
        try:
            return self.curves[currency]
        except KeyError:
            raise MissingMarketDataError(
                f"no discount curve for {currency}; available: {sorted(self.curves)}"
            ) from None

    def discount_factor(self, currency: Currency, payment_date: date) -> float:
        return self.discount_curve(currency).discount_factor(payment_date)

    def _lookup_rate(self, base: Currency, counter: Currency) -> float | None:
        if base == counter:
            return 1.0
        direct = self.fx_spot.get(base + counter)
        if direct is not None:
            return direct
        inverse = self.fx_spot.get(counter + base)
        if inverse is not None:
            logger.debug("Using inverse of %s%s spot for %s/%s", counter, base, base, counter)
            return 1.0 / inverse
        return None

    def spot_rate(self, base: Currency, counter: Currency) -> float:
        """Spot rate, units of `counter` per one unit of `base`."""
        rate = self._lookup_rate(base, counter)
        if rate is None:
            raise MissingMarketDataError(
                f"no FX spot for {base}/{counter}; available pairs: {sorted(self.fx_spot)}"
            )
        return rate

    def fx_rate(self, base: Currency, counter: Currency) -> float:
        """Conversion rate `base -> counter` (FxRateProvider protocol)."""
        rate = self._lookup_rate(base, counter)
        if rate is None:
            raise CurrencyMismatchError(f"cannot convert {base} to {counter} in this market")
        return rate

    def convert(self, amount: MultiCurrencyAmount, currency: Currency) -> float:
        """Total of `amount` expressed in `currency` at spot."""
        return amount.converted_to(currency, self).amount

    def parameter_sensitivity(self, sensitivities: PointSensitivities) -> dict[str, list[float]]:
        """
        Per-pillar sensitivities keyed by curve name.

        Only curves exposing `parameter_sensitivity` (e.g. ZeroRateCurve) can be
        projected; a point on any other curve raises MissingMarketDataError.
        """
        result: dict[str, list[float]] = {}
        for currency in sorted({s.currency for s in sensitivities}):
            curve = self.discount_curve(currency)
            project = getattr(curve, "parameter_sensitivity", None)
            if project is None:
                raise MissingMarketDataError(
                    f"curve for {currency} does not expose pillar parameters"
                )
            for name in sorted({s.curve_name for s in sensitivities if s.currency == currency}):
                if name != getattr(curve, "name", None):
                    raise MissingMarketDataError(
                        f"sensitivity refers to curve {name!r}, not held for {currency}"
                    )
                result[name] = project(sensitivities)
        return result

    def with_curve(self, currency: Currency, curve: DiscountCurve) -> Market:
        """Return a new Market with the given curve updated/added."""
        # Copy-on-write update: keep original snapshot unchanged.
        new_curves = dict(self.curves)
        new_curves[currency] = curve
        return Market(self._valuation_date, curves=new_curves, fx_spot=self.fx_spot)

    def with_fx(self, pair: str, spot: float) -> Market:
        """Return a new Market with the given FX pair updated/added."""
        new_fx = dict(self.fx_spot)
        new_fx[pair] = spot
        return Market(self._valuation_date, curves=self.curves, fx_spot=new_fx)
