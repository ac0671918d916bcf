"""FX products: payments, the expanded two-payment form, and a single FX transaction."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fxpricing.currency import Currency, CurrencyAmount, FxRate
from fxpricing.errors import InvalidProductError


@dataclass(frozen=True)
class FxPayment:
    """
    A single fixed payment of one currency on one date.
    Positive amount = receive, negative = pay.
    """

    currency: Currency
    amount: float
    payment_date: date

    @classmethod
    def of(cls, value: CurrencyAmount, payment_date: date) -> FxPayment:
        return cls(currency=value.currency, amount=value.amount, payment_date=payment_date)

    @property
    def value(self) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.amount)


@dataclass(frozen=True)
class ExpandedFx:
    """
    Expanded FX transaction: a base-currency and a counter-currency payment.

    Both payments settle on the same date and are in different currencies.
    An expanded transaction is itself a product; `expand()` returns self.
    """

    base_currency_payment: FxPayment
    counter_currency_payment: FxPayment

    def __post_init__(self) -> None:
        base, counter = self.base_currency_payment, self.counter_currency_payment
        if base.currency == counter.currency:
            raise InvalidProductError(
                f"payments must have different currencies, both are {base.currency}"
            )
        if base.payment_date != counter.payment_date:
            raise InvalidProductError(
                f"payments must share a payment date, got {base.payment_date} and "
                f"{counter.payment_date}"
            )

    @property
    def payment_date(self) -> date:
        return self.base_currency_payment.payment_date

    def expand(self) -> ExpandedFx:
        return self


@dataclass(frozen=True)
class FxSingle:
    """
    Single FX transaction (FX forward or spot): exchange of two currency amounts on
    a payment date. Amounts are signed from the holder's point of view, so a
    typical trade receives one currency and pays the other.
    Expansion is validated, not construction; see ExpandedFx for invariants.
    """

    base_currency_amount: CurrencyAmount
    counter_currency_amount: CurrencyAmount
    payment_date: date

    @classmethod
    def of_rate(cls, base_amount: CurrencyAmount, fx_rate: FxRate, payment_date: date) -> FxSingle:
        """
        Build from the base amount and the agreed rate.
        Buying 1m USD at USD/EUR 0.90 gives +1m USD and -900k EUR.
        """
        counter = fx_rate.counter if base_amount.currency == fx_rate.base else fx_rate.base
        counter_amount = -fx_rate.convert(base_amount.amount, base_amount.currency)
        return cls(
            base_currency_amount=base_amount,
            counter_currency_amount=CurrencyAmount(counter, counter_amount),
            payment_date=payment_date,
        )

    def expand(self) -> ExpandedFx:
        return ExpandedFx(
            base_currency_payment=FxPayment.of(self.base_currency_amount, self.payment_date),
            counter_currency_payment=FxPayment.of(self.counter_currency_amount, self.payment_date),
        )
