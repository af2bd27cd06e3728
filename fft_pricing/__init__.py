from .parameters import (
    BlackScholesParams,
    HestonParams,
    VarianceGammaParams,
    MarketParameters,
    DiscretizationParameters,
    PriceQuote,
)
from .errors import PricingError, InvalidParameter, InvalidSize, StrikeOutOfRange, NumericalInstability
from .characteristic import characteristic_function, alpha_upper_bound
from .fft import fft, ifft
from .engine import price, price_european, price_strikes
from .BlackScholesModel import BlackScholesModel
from .HestonModel import HestonModel

__all__ = [
    "BlackScholesParams",
    "HestonParams",
    "VarianceGammaParams",
    "MarketParameters",
    "DiscretizationParameters",
    "PriceQuote",
    "PricingError",
    "InvalidParameter",
    "InvalidSize",
    "StrikeOutOfRange",
    "NumericalInstability",
    "characteristic_function",
    "alpha_upper_bound",
    "fft",
    "ifft",
    "price",
    "price_european",
    "price_strikes",
    "BlackScholesModel",
    "HestonModel",
]
