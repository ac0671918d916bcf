"""
Discount curve primitives.

This module deliberately keeps curve math minimal and explicit:
- Pillars are **year fractions** from the curve valuation date.
- Dates are mapped to year fractions with **ACT/365F**.
- Rates are **continuously compounded zero rates**.
- Interpolation is **linear in zero rates** between pillar points, flat outside.

Calibration is out of scope: curves are built from given zero rates. What this
module adds over a plain curve is the analytic derivative of the discount
factor with respect to the zero rate, which the FX pricer chains into point
sensitivities.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

from fxpricing.currency import Currency
from fxpricing.sensitivity import PointSensitivities, PointSensitivityBuilder, ZeroRateSensitivity

DAYS_PER_YEAR = 365.0


@dataclass(frozen=True)
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) for one currency.

    - `pillars` are increasing times (year fractions) where the curve is defined.
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`.
    - `valuation_date` is the date at which t = 0.

    Implements the DiscountCurve protocol structurally (no explicit inheritance).
    """

    name: str
    currency: Currency
    valuation_date: date
    pillars: tuple[float, ...]
    zero_rates_cc: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pillars", tuple(self.pillars))
        object.__setattr__(self, "zero_rates_cc", tuple(self.zero_rates_cc))
        self._validate()

    def _validate(self) -> None:
        if not self.pillars:
            raise ValueError("curve has no pillars")
        if len(self.pillars) != len(self.zero_rates_cc):
            raise ValueError("pillars and zero_rates_cc must have the same length")
        for i in range(1, len(self.pillars)):
            if self.pillars[i] <= self.pillars[i - 1]:
                raise ValueError("pillars must be strictly increasing")

    def year_fraction(self, on: date) -> float:
        """ACT/365F year fraction from the valuation date; negative for past dates."""
        return (on - self.valuation_date).days / DAYS_PER_YEAR

    def _weights(self, t: float) -> list[tuple[int, float]]:
        """Interpolation weights (pillar index, weight) for time t; weights sum to one."""
        if t <= self.pillars[0]:
            return [(0, 1.0)]
        if t >= self.pillars[-1]:
            return [(len(self.pillars) - 1, 1.0)]
        for i in range(len(self.pillars) - 1):
            t0, t1 = self.pillars[i], self.pillars[i + 1]
            if t0 <= t <= t1:
                w1 = (t - t0) / (t1 - t0)
                return [(i, 1.0 - w1), (i + 1, w1)]
        return [(len(self.pillars) - 1, 1.0)]

    def zero_rate_cc(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates, flat extrapolation on both sides
        (including t < 0, i.e. dates before the valuation date).
        """
        return sum(w * self.zero_rates_cc[i] for i, w in self._weights(t))

    def df(self, t: float) -> float:
        r"""
        Discount factor to time t.

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        return math.exp(-self.zero_rate_cc(t) * t)

    def discount_factor(self, payment_date: date) -> float:
        return self.df(self.year_fraction(payment_date))

    def zero_rate_point_sensitivity(self, payment_date: date) -> PointSensitivityBuilder:
        """
        Sensitivity of the discount factor to the zero rate at `payment_date`.

        d DF / d r = -t * DF(t). Callers scale it by the cash amount to get the
        sensitivity of a present value.
        """
        t = self.year_fraction(payment_date)
        return PointSensitivityBuilder.of(
            ZeroRateSensitivity(self.currency, self.name, payment_date, -t * self.df(t))
        )

    def parameter_sensitivity(self, sensitivities: PointSensitivities) -> list[float]:
        """
        Project point sensitivities on this curve onto its pillar zero rates.

        Each point is split across pillars by its interpolation weights, so the
        pillar values sum to the point total. Points on other curves are ignored.
        """
        result = [0.0] * len(self.pillars)
        for s in sensitivities:
            if s.currency != self.currency or s.curve_name != self.name:
                continue
            for i, w in self._weights(self.year_fraction(s.date)):
                result[i] += w * s.value
        return result

    def bumped(self, bump: float) -> ZeroRateCurve:
        """
        Return a new curve with a *parallel* additive shift to all zero rates.

        `bump` is expressed in absolute rate terms (e.g. 1bp = 0.0001).
        """
        return ZeroRateCurve(
            name=self.name,
            currency=self.currency,
            valuation_date=self.valuation_date,
            pillars=self.pillars,
            zero_rates_cc=tuple(r + bump for r in self.zero_rates_cc),
        )
