"""Pricer for FX products (discounting each payment in its own currency)."""

from __future__ import annotations

import logging

from fxpricing.currency import CurrencyAmount, FxRate, MultiCurrencyAmount
from fxpricing.errors import InvalidProductError
from fxpricing.interfaces import FxProduct, MarketDataContext
from fxpricing.products.fx import FxPayment
from fxpricing.sensitivity import PointSensitivities, PointSensitivityBuilder

logger = logging.getLogger(__name__)


class DiscountingFxProductPricer:
    """
    Pricer for FX transaction products.

    Stateless: construct one wherever needed. Every product is expanded into a
    base-currency and a counter-currency payment, each discounted on the curve
    of its own currency.
    """

    def present_value(self, product: FxProduct, market: MarketDataContext) -> MultiCurrencyAmount:
        """
        Present value in the two natural currencies.

        Once the valuation date is after the payment date the trade has settled
        and the result is empty; no discount factor is looked up.
        """
        fx = product.expand()
        if market.valuation_date > fx.payment_date:
            logger.debug(
                "Payment date %s before valuation date %s: present value is empty",
                fx.payment_date,
                market.valuation_date,
            )
            return MultiCurrencyAmount.empty()
        pv1 = self.present_value_payment(fx.base_currency_payment, market)
        pv2 = self.present_value_payment(fx.counter_currency_payment, market)
        return MultiCurrencyAmount.of(pv1, pv2)

    def present_value_payment(self, payment: FxPayment, market: MarketDataContext) -> CurrencyAmount:
        """PV = amount * DF(currency, payment date)."""
        df = market.discount_factor(payment.currency, payment.payment_date)
        return payment.value.multiplied_by(df)

    def currency_exposure(self, product: FxProduct, market: MarketDataContext) -> MultiCurrencyAmount:
        """Currency exposure; for a delta-one FX forward this is the present value."""
        return self.present_value(product, market)

    def par_spread(self, product: FxProduct, market: MarketDataContext) -> float:
        """
        Spread to add to the FX points so that the product has zero value.

        spread = PV_counter / (notional_base * DF_counter(T)), where PV_counter is
        the present value of both payments converted to the counter currency.
        """
        fx = product.expand()
        base = fx.base_currency_payment
        counter = fx.counter_currency_payment
        notional_base = base.amount
        if notional_base == 0:
            raise InvalidProductError("par spread is undefined for a zero base notional")
        pv = self.present_value(fx, market)
        pv_counter = market.convert(pv, counter.currency)
        df_end = market.discount_factor(counter.currency, fx.payment_date)
        return pv_counter / (notional_base * df_end)

    def forward_fx_rate(self, product: FxProduct, market: MarketDataContext) -> FxRate:
        """
        Forward rate by covered interest parity:
        F = spot(base, counter) * DF_base / DF_counter.
        """
        fx = product.expand()
        base = fx.base_currency_payment
        counter = fx.counter_currency_payment
        df_base = market.discount_factor(base.currency, base.payment_date)
        df_counter = market.discount_factor(counter.currency, counter.payment_date)
        spot = market.spot_rate(base.currency, counter.currency)
        return FxRate(base.currency, counter.currency, spot * df_base / df_counter)

    def present_value_sensitivity(
        self, product: FxProduct, market: MarketDataContext
    ) -> PointSensitivities:
        """
        Sensitivity of the present value to the zero rates of the discount curves.
        Legs sharing a curve point are summed.
        """
        fx = product.expand()
        pvcs1 = self.present_value_sensitivity_payment(fx.base_currency_payment, market)
        pvcs2 = self.present_value_sensitivity_payment(fx.counter_currency_payment, market)
        return pvcs1.combined_with(pvcs2).build()

    def present_value_sensitivity_payment(
        self, payment: FxPayment, market: MarketDataContext
    ) -> PointSensitivityBuilder:
        """d(PV)/d(curve) = amount * d(DF)/d(curve)."""
        curve = market.discount_curve(payment.currency)
        return curve.zero_rate_point_sensitivity(payment.payment_date).scaled_by(payment.amount)
