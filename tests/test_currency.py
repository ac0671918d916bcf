"""Tests for CurrencyAmount, MultiCurrencyAmount and FxRate."""

import pytest

from fxpricing.currency import CurrencyAmount, FxRate, MultiCurrencyAmount
from fxpricing.errors import CurrencyMismatchError


def test_currency_amount_arithmetic() -> None:
    a = CurrencyAmount("USD", 100.0)
    assert a.multiplied_by(2.5) == CurrencyAmount("USD", 250.0)
    assert a.plus(CurrencyAmount("USD", -40.0)) == CurrencyAmount("USD", 60.0)
    assert a.negated() == CurrencyAmount("USD", -100.0)


def test_currency_amount_plus_other_currency_raises() -> None:
    with pytest.raises(CurrencyMismatchError):
        CurrencyAmount("USD", 1.0).plus(CurrencyAmount("EUR", 1.0))


def test_invalid_currency_code_rejected() -> None:
    with pytest.raises(ValueError, match="invalid currency code"):
        CurrencyAmount("usd", 1.0)
    with pytest.raises(ValueError, match="invalid currency code"):
        CurrencyAmount("EURO", 1.0)


def test_multi_currency_amount_order_independent() -> None:
    m1 = MultiCurrencyAmount.of(CurrencyAmount("USD", 1.0), CurrencyAmount("EUR", 2.0))
    m2 = MultiCurrencyAmount.of(CurrencyAmount("EUR", 2.0), CurrencyAmount("USD", 1.0))
    assert m1 == m2
    assert m1.currencies == ("EUR", "USD")


def test_multi_currency_amount_of_sums_same_currency() -> None:
    m = MultiCurrencyAmount.of(CurrencyAmount("USD", 1.0), CurrencyAmount("USD", 2.0))
    assert len(m) == 1
    assert m.amount("USD").amount == 3.0


def test_multi_currency_amount_rejects_duplicate_entries() -> None:
    with pytest.raises(ValueError, match="distinct currencies"):
        MultiCurrencyAmount((CurrencyAmount("USD", 1.0), CurrencyAmount("USD", 2.0)))


def test_multi_currency_amount_empty() -> None:
    empty = MultiCurrencyAmount.empty()
    assert empty.is_empty()
    assert len(empty) == 0
    assert not empty.contains("USD")
    with pytest.raises(KeyError):
        empty.amount("USD")


def test_multi_currency_amount_plus_and_scale() -> None:
    m = MultiCurrencyAmount.of(CurrencyAmount("USD", 10.0))
    m = m.plus(CurrencyAmount("EUR", 5.0)).plus(MultiCurrencyAmount.of(CurrencyAmount("USD", 1.0)))
    assert m.amount("USD").amount == 11.0
    assert m.amount("EUR").amount == 5.0
    doubled = m.multiplied_by(2.0)
    assert doubled.amount("USD").amount == 22.0
    assert doubled.amount("EUR").amount == 10.0


def test_multi_currency_amount_converted_to() -> None:
    rate = FxRate("EUR", "USD", 1.1)
    m = MultiCurrencyAmount.of(CurrencyAmount("EUR", 100.0), CurrencyAmount("USD", -50.0))
    converted = m.converted_to("USD", rate)
    assert converted.currency == "USD"
    assert abs(converted.amount - 60.0) < 1e-12
    assert MultiCurrencyAmount.empty().converted_to("USD", rate) == CurrencyAmount("USD", 0.0)


def test_fx_rate_inverse_and_lookup() -> None:
    rate = FxRate("USD", "EUR", 0.8)
    assert rate.pair == "USD/EUR"
    inv = rate.inverse()
    assert inv.base == "EUR" and inv.counter == "USD"
    assert abs(inv.rate - 1.25) < 1e-12
    assert rate.fx_rate("USD", "EUR") == 0.8
    assert abs(rate.fx_rate("EUR", "USD") - 1.25) < 1e-12
    assert rate.fx_rate("GBP", "GBP") == 1.0
    with pytest.raises(CurrencyMismatchError):
        rate.fx_rate("USD", "GBP")


def test_fx_rate_convert() -> None:
    rate = FxRate("USD", "EUR", 0.8)
    assert abs(rate.convert(100.0, "USD") - 80.0) < 1e-12
    assert abs(rate.convert(80.0, "EUR") - 100.0) < 1e-12
    with pytest.raises(CurrencyMismatchError):
        rate.convert(1.0, "JPY")


def test_fx_rate_validation() -> None:
    with pytest.raises(ValueError, match="must differ"):
        FxRate("USD", "USD", 1.0)
    with pytest.raises(ValueError, match="rate must be > 0"):
        FxRate("USD", "EUR", 0.0)


def test_multi_currency_amount_iterates_amounts() -> None:
    m = MultiCurrencyAmount.of(CurrencyAmount("USD", 1.0), CurrencyAmount("EUR", 2.0))
    assert list(m) == [CurrencyAmount("EUR", 2.0), CurrencyAmount("USD", 1.0)]
