# fft_pricing/errors.py
"""
Exceptions raised by the pricing core.

All of them derive from ValueError so code that already guards pricing calls
with ``except ValueError`` keeps working.
"""


class PricingError(ValueError):
    """Base class for every error raised by fft_pricing."""


class InvalidParameter(PricingError):
    """Model, market or discretisation input outside its domain."""


class InvalidSize(PricingError):
    """FFT length is not a power of two."""


class StrikeOutOfRange(PricingError):
    """Requested strike is not covered by the log-strike grid."""


class NumericalInstability(PricingError):
    """Non-finite values appeared in the integrand or the extracted price."""
