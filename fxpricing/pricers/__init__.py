"""Pricer implementations."""

from fxpricing.pricers.fx_pricer import DiscountingFxProductPricer

__all__ = ["DiscountingFxProductPricer"]
