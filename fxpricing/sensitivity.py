"""
Point sensitivities: derivatives of a value with respect to single curve points.

A `ZeroRateSensitivity` is the derivative of a value with respect to the
continuously compounded zero rate of one currency's curve at one date.

Accumulation is done with immutable values:
- `PointSensitivityBuilder` maps a sensitivity key to an accumulated value;
  `scaled_by` and `combined_with` return new builders (pure merge, overlapping
  keys sum).
- `build()` snapshots the builder into `PointSensitivities`, a canonically
  sorted tuple, so equality does not depend on the order legs were combined.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping

from fxpricing.currency import Currency

SensitivityKey = tuple[Currency, str, date]


@dataclass(frozen=True)
class ZeroRateSensitivity:
    """Sensitivity to the zero rate of curve `curve_name` (in `currency`) at `date`."""

    currency: Currency
    curve_name: str
    date: date
    value: float

    @property
    def key(self) -> SensitivityKey:
        return (self.currency, self.curve_name, self.date)

    def with_value(self, value: float) -> ZeroRateSensitivity:
        return ZeroRateSensitivity(self.currency, self.curve_name, self.date, value)


@dataclass(frozen=True)
class PointSensitivityBuilder:
    """Immutable accumulator of point sensitivities keyed by (currency, curve, date)."""

    values: Mapping[SensitivityKey, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    @classmethod
    def none(cls) -> PointSensitivityBuilder:
        return cls()

    @classmethod
    def of(cls, *sensitivities: ZeroRateSensitivity) -> PointSensitivityBuilder:
        values: dict[SensitivityKey, float] = {}
        for s in sensitivities:
            values[s.key] = values.get(s.key, 0.0) + s.value
        return cls(values)

    def scaled_by(self, factor: float) -> PointSensitivityBuilder:
        return PointSensitivityBuilder({k: v * factor for k, v in self.values.items()})

    def combined_with(self, other: PointSensitivityBuilder) -> PointSensitivityBuilder:
        merged = dict(self.values)
        for k, v in other.values.items():
            merged[k] = merged.get(k, 0.0) + v
        return PointSensitivityBuilder(merged)

    def build(self) -> PointSensitivities:
        return PointSensitivities(
            tuple(ZeroRateSensitivity(ccy, name, d, v) for (ccy, name, d), v in self.values.items())
        )


@dataclass(frozen=True)
class PointSensitivities:
    """
    Immutable set of point sensitivities, one entry per key.

    Entries are normalized on construction: duplicate keys are summed and the
    result is sorted by key.
    """

    sensitivities: tuple[ZeroRateSensitivity, ...] = ()

    def __post_init__(self) -> None:
        totals: dict[SensitivityKey, float] = {}
        for s in self.sensitivities:
            totals[s.key] = totals.get(s.key, 0.0) + s.value
        normalized = tuple(
            ZeroRateSensitivity(ccy, name, d, totals[(ccy, name, d)])
            for ccy, name, d in sorted(totals)
        )
        object.__setattr__(self, "sensitivities", normalized)

    @classmethod
    def empty(cls) -> PointSensitivities:
        return cls()

    def __len__(self) -> int:
        return len(self.sensitivities)

    def __iter__(self) -> Iterator[ZeroRateSensitivity]:
        return iter(self.sensitivities)

    def get(self, currency: Currency, curve_name: str, on: date) -> float:
        """Value at the given key, 0.0 if there is no such entry."""
        for s in self.sensitivities:
            if s.key == (currency, curve_name, on):
                return s.value
        return 0.0

    def total(self, currency: Currency | None = None) -> float:
        """Sum of values, optionally restricted to one curve currency."""
        return sum(s.value for s in self.sensitivities if currency is None or s.currency == currency)

    def combined_with(self, other: PointSensitivities) -> PointSensitivities:
        return PointSensitivities(self.sensitivities + other.sensitivities)

    def multiplied_by(self, factor: float) -> PointSensitivities:
        return PointSensitivities(tuple(s.with_value(s.value * factor) for s in self.sensitivities))

    def equal_with_tolerance(self, other: PointSensitivities, tolerance: float) -> bool:
        """True if both sets have the same keys and values within `tolerance` (absolute)."""
        mine = {s.key: s.value for s in self.sensitivities}
        theirs = {s.key: s.value for s in other.sensitivities}
        if mine.keys() != theirs.keys():
            return False
        return all(abs(mine[k] - theirs[k]) <= tolerance for k in mine)
