"""
Error taxonomy for the pricing library.

Every error derives from `PricingError` and also from the builtin exception a
caller would naturally catch (LookupError for missing data, ValueError for bad
inputs). Errors are raised synchronously and never logged or swallowed here.
"""


class PricingError(Exception):
    """Base class for all pricing library errors."""


class MissingMarketDataError(PricingError, LookupError):
    """The market data context cannot supply a discount factor, curve or spot rate."""


class InvalidProductError(PricingError, ValueError):
    """A product violates a structural invariant required by an operation."""


class CurrencyMismatchError(PricingError, ValueError):
    """Two currencies cannot be related (combination or conversion)."""
