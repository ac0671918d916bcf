"""Demo: sample USD and EUR curves, a USD/EUR forward, and its valuation and risks."""

from datetime import date

from fxpricing.currency import CurrencyAmount, FxRate
from fxpricing.curves import ZeroRateCurve
from fxpricing.market import Market
from fxpricing.pricing import (
    currency_exposure,
    forward_fx_rate,
    par_spread,
    present_value,
    present_value_sensitivity,
)
from fxpricing.products.fx import FxSingle
from fxpricing.risk import pv01_parallel


def main() -> None:
    valuation_date = date(2024, 1, 2)
    pillars = [0.5, 1.0, 2.0, 5.0, 10.0]
    usd_curve = ZeroRateCurve(
        name="USD_DISC",
        currency="USD",
        valuation_date=valuation_date,
        pillars=pillars,
        zero_rates_cc=[0.045, 0.043, 0.040, 0.038, 0.037],
    )
    eur_curve = ZeroRateCurve(
        name="EUR_DISC",
        currency="EUR",
        valuation_date=valuation_date,
        pillars=pillars,
        zero_rates_cc=[0.040, 0.038, 0.036, 0.034, 0.033],
    )
    market = Market(
        valuation_date,
        curves={"USD": usd_curve, "EUR": eur_curve},
        fx_spot={"EURUSD": 1.08},
    )

    # Buy 5m EUR against USD at 1.085, settling in one year
    fwd = FxSingle.of_rate(
        CurrencyAmount("EUR", 5_000_000),
        FxRate("EUR", "USD", 1.085),
        date(2025, 1, 2),
    )

    pv = present_value(fwd, market)
    ce = currency_exposure(fwd, market)
    rate = forward_fx_rate(fwd, market)
    spread = par_spread(fwd, market)
    sens = present_value_sensitivity(fwd, market)

    print("=== FX Forward Demo ===\n")
    print(f"Valuation date {valuation_date}, EURUSD spot = 1.08\n")
    print("FX forward: +5,000,000 EUR / -5,425,000 USD on 2025-01-02")
    for amount in pv:
        print(f"   PV {amount.currency}       = {amount.amount:,.2f}")
    print(f"   PV (in USD)  = {market.convert(pv, 'USD'):,.2f}")
    print(f"   Exposure     = {', '.join(f'{a.currency} {a.amount:,.2f}' for a in ce)}")
    print(f"   Forward      = {rate.pair} {rate.rate:.6f}")
    print(f"   Par spread   = {spread:.6f}")
    for s in sens:
        print(f"   dPV/dr {s.curve_name} {s.date} = {s.value:,.2f} {s.currency}")
    print(f"   PV01 USD     = {pv01_parallel(fwd, market, 'USD'):,.2f}")
    print(f"   PV01 EUR     = {pv01_parallel(fwd, market, 'EUR'):,.2f}")
    print(f"   Pillar risk  = {market.parameter_sensitivity(sens)}\n")
    print("Done.")


if __name__ == "__main__":
    main()
