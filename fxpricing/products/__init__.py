"""Products: FX payments, expanded FX and single FX transactions."""

from fxpricing.products.fx import ExpandedFx, FxPayment, FxSingle

__all__ = ["ExpandedFx", "FxPayment", "FxSingle"]
