"""
Currency value types: single-currency amounts, multi-currency amounts and FX rates.

All types are immutable. Currencies are plain three-letter codes (e.g. "USD").
Conversion between currencies goes through any object exposing
`fx_rate(base, counter) -> float` (see `FxRateProvider`), which lets an
`FxRate` or a full `Market` be used interchangeably.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, TypeAlias

from fxpricing.errors import CurrencyMismatchError

if TYPE_CHECKING:
    from fxpricing.interfaces import FxRateProvider


Currency: TypeAlias = str


def check_currency(currency: Currency) -> None:
    if len(currency) != 3 or not currency.isalpha() or not currency.isupper():
        raise ValueError(f"invalid currency code: {currency!r}")


@dataclass(frozen=True)
class CurrencyAmount:
    """A signed amount of a single currency."""

    currency: Currency
    amount: float

    def __post_init__(self) -> None:
        check_currency(self.currency)

    def multiplied_by(self, factor: float) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.amount * factor)

    def plus(self, other: CurrencyAmount) -> CurrencyAmount:
        """Add an amount of the same currency."""
        if other.currency != self.currency:
            raise CurrencyMismatchError(
                f"cannot add {other.currency} to {self.currency}"
            )
        return CurrencyAmount(self.currency, self.amount + other.amount)

    def negated(self) -> CurrencyAmount:
        return CurrencyAmount(self.currency, -self.amount)

    def converted_to(self, currency: Currency, rates: FxRateProvider) -> CurrencyAmount:
        """Convert to `currency` using the rate `self.currency -> currency`."""
        if currency == self.currency:
            return self
        return CurrencyAmount(currency, self.amount * rates.fx_rate(self.currency, currency))


@dataclass(frozen=True)
class MultiCurrencyAmount:
    """
    A collection of amounts in distinct currencies.

    Amounts are stored sorted by currency so that equality and hashing do not
    depend on insertion order. Use `of()` to build one; amounts sharing a
    currency are summed.
    """

    amounts: tuple[CurrencyAmount, ...] = ()

    def __post_init__(self) -> None:
        currencies = [a.currency for a in self.amounts]
        if len(set(currencies)) != len(currencies):
            raise ValueError("amounts must have distinct currencies; use MultiCurrencyAmount.of()")
        if currencies != sorted(currencies):
            object.__setattr__(
                self, "amounts", tuple(sorted(self.amounts, key=lambda a: a.currency))
            )

    @classmethod
    def empty(cls) -> MultiCurrencyAmount:
        return cls()

    @classmethod
    def of(cls, *amounts: CurrencyAmount) -> MultiCurrencyAmount:
        totals: dict[Currency, float] = {}
        for a in amounts:
            totals[a.currency] = totals.get(a.currency, 0.0) + a.amount
        return cls(tuple(CurrencyAmount(ccy, amt) for ccy, amt in totals.items()))

    @property
    def currencies(self) -> tuple[Currency, ...]:
        return tuple(a.currency for a in self.amounts)

    def __len__(self) -> int:
        return len(self.amounts)

    def __iter__(self) -> Iterator[CurrencyAmount]:
        return iter(self.amounts)

    def is_empty(self) -> bool:
        return not self.amounts

    def contains(self, currency: Currency) -> bool:
        return currency in self.currencies

    def amount(self, currency: Currency) -> CurrencyAmount:
        """Return the amount for `currency`. Raises KeyError if absent."""
        for a in self.amounts:
            if a.currency == currency:
                return a
        raise KeyError(f"no amount for currency {currency}")

    def plus(self, other: CurrencyAmount | MultiCurrencyAmount) -> MultiCurrencyAmount:
        others = (other,) if isinstance(other, CurrencyAmount) else other.amounts
        return MultiCurrencyAmount.of(*self.amounts, *others)

    def multiplied_by(self, factor: float) -> MultiCurrencyAmount:
        return MultiCurrencyAmount(tuple(a.multiplied_by(factor) for a in self.amounts))

    def converted_to(self, currency: Currency, rates: FxRateProvider) -> CurrencyAmount:
        """Convert every amount to `currency` and sum. Empty converts to zero."""
        total = 0.0
        for a in self.amounts:
            total += a.converted_to(currency, rates).amount
        return CurrencyAmount(currency, total)


@dataclass(frozen=True)
class FxRate:
    """
    FX rate between two currencies: units of `counter` per one unit of `base`.

    FxRate("USD", "EUR", 0.90) means 1 USD = 0.90 EUR.
    """

    base: Currency
    counter: Currency
    rate: float

    def __post_init__(self) -> None:
        check_currency(self.base)
        check_currency(self.counter)
        if self.base == self.counter:
            raise ValueError("base and counter currencies must differ")
        if not self.rate > 0:
            raise ValueError("rate must be > 0")

    @property
    def pair(self) -> str:
        return f"{self.base}/{self.counter}"

    def inverse(self) -> FxRate:
        return FxRate(self.counter, self.base, 1.0 / self.rate)

    def fx_rate(self, base: Currency, counter: Currency) -> float:
        """Rate for `base -> counter`, which must be this pair or its inverse."""
        if base == counter:
            return 1.0
        if (base, counter) == (self.base, self.counter):
            return self.rate
        if (base, counter) == (self.counter, self.base):
            return 1.0 / self.rate
        raise CurrencyMismatchError(f"FxRate {self.pair} cannot convert {base} to {counter}")

    def convert(self, amount: float, from_currency: Currency) -> float:
        """Convert `amount` of one currency of the pair into the other one."""
        if from_currency == self.base:
            return amount * self.rate
        if from_currency == self.counter:
            return amount / self.rate
        raise CurrencyMismatchError(f"FxRate {self.pair} does not involve {from_currency}")
