# fft_pricing/parameters.py
"""
Immutable inputs and outputs of the FFT pricer.

Model parameters form a closed set of three variants:
 - BlackScholesParams(sigma)
 - HestonParams(kappa, theta, vol_of_vol, rho, v0)
 - VarianceGammaParams(sigma, nu, theta)

Every container validates itself on construction and raises InvalidParameter,
so bad inputs are rejected before any transform is computed.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Union

from .errors import InvalidParameter


def _require_finite(name, value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {value}")
    return value


def _require_non_negative(name, value):
    value = _require_finite(name, value)
    if value < 0.0:
        raise InvalidParameter(f"{name} must be >= 0, got {value}")
    return value


def _require_positive(name, value):
    value = _require_finite(name, value)
    if value <= 0.0:
        raise InvalidParameter(f"{name} must be > 0, got {value}")
    return value


# -------------------------
# Model parameters
# -------------------------
@dataclass(frozen=True)
class BlackScholesParams:
    sigma: float

    def __post_init__(self):
        object.__setattr__(self, "sigma", _require_non_negative("sigma", self.sigma))


@dataclass(frozen=True)
class HestonParams:
    """
    Heston (1993) stochastic volatility:
        dS = (r - q) S dt + sqrt(V) S dW_S
        dV = kappa (theta - V) dt + vol_of_vol sqrt(V) dW_V,  corr = rho
    """
    kappa: float
    theta: float
    vol_of_vol: float
    rho: float
    v0: float

    def __post_init__(self):
        object.__setattr__(self, "kappa", _require_non_negative("kappa", self.kappa))
        object.__setattr__(self, "theta", _require_non_negative("theta", self.theta))
        # the closed-form characteristic function divides by vol_of_vol^2
        object.__setattr__(self, "vol_of_vol", _require_positive("vol_of_vol", self.vol_of_vol))
        object.__setattr__(self, "v0", _require_non_negative("v0", self.v0))
        rho = _require_finite("rho", self.rho)
        if abs(rho) > 1.0:
            raise InvalidParameter(f"rho must be in [-1, 1], got {rho}")
        object.__setattr__(self, "rho", rho)

    @property
    def feller_satisfied(self) -> bool:
        """2 kappa theta > vol_of_vol^2 (variance stays strictly positive)."""
        return 2.0 * self.kappa * self.theta > self.vol_of_vol ** 2


@dataclass(frozen=True)
class VarianceGammaParams:
    """
    Madan-Carr-Chang Variance-Gamma: Brownian motion with drift theta and
    volatility sigma, time-changed by a gamma process with variance rate nu.
    """
    sigma: float
    nu: float
    theta: float

    def __post_init__(self):
        sigma = _require_non_negative("sigma", self.sigma)
        nu = _require_positive("nu", self.nu)
        theta = _require_finite("theta", self.theta)
        # the martingale correction log(1 - theta nu - sigma^2 nu / 2) must exist
        if 1.0 - theta * nu - 0.5 * sigma ** 2 * nu <= 0.0:
            raise InvalidParameter(
                "Variance-Gamma parameters need 1 - theta*nu - sigma^2*nu/2 > 0, "
                f"got sigma={sigma}, nu={nu}, theta={theta}"
            )
        object.__setattr__(self, "sigma", sigma)
        object.__setattr__(self, "nu", nu)
        object.__setattr__(self, "theta", theta)

    @property
    def omega(self) -> float:
        """Convexity correction making the discounted price a martingale."""
        return math.log(1.0 - self.theta * self.nu - 0.5 * self.sigma ** 2 * self.nu) / self.nu


ModelParameters = Union[BlackScholesParams, HestonParams, VarianceGammaParams]


# -------------------------
# Market / discretisation
# -------------------------
@dataclass(frozen=True)
class MarketParameters:
    s0: float
    k: float
    r: float
    q: float
    t: float

    def __post_init__(self):
        object.__setattr__(self, "s0", _require_positive("s0", self.s0))
        object.__setattr__(self, "k", _require_positive("k", self.k))
        object.__setattr__(self, "r", _require_finite("r", self.r))
        object.__setattr__(self, "q", _require_finite("q", self.q))
        object.__setattr__(self, "t", _require_positive("t", self.t))

    def with_strike(self, k) -> "MarketParameters":
        return MarketParameters(self.s0, k, self.r, self.q, self.t)

    @property
    def forward(self) -> float:
        return self.s0 * math.exp((self.r - self.q) * self.t)


@dataclass(frozen=True)
class DiscretizationParameters:
    """
    eta:   spacing of the frequency grid
    n:     grid exponent, the FFT runs on N = 2**n points
    alpha: Carr-Madan damping factor
    """
    eta: float
    n: int
    alpha: float

    def __post_init__(self):
        object.__setattr__(self, "eta", _require_positive("eta", self.eta))
        object.__setattr__(self, "alpha", _require_positive("alpha", self.alpha))
        n = self.n
        if isinstance(n, numbers.Integral) and not isinstance(n, bool):
            n = int(n)
        elif isinstance(n, float) and n.is_integer():
            n = int(n)
        else:
            raise InvalidParameter(f"n must be a positive integer, got {n!r}")
        if n < 1:
            raise InvalidParameter(f"n must be a positive integer, got {n}")
        object.__setattr__(self, "n", n)

    @property
    def grid_size(self) -> int:
        return 1 << self.n

    @property
    def log_strike_spacing(self) -> float:
        """lambda = 2 pi / (N eta)"""
        return 2.0 * math.pi / (self.grid_size * self.eta)

    @property
    def half_width(self) -> float:
        """b = N lambda / 2, the log-strike distance covered on each side of ln(s0)."""
        return 0.5 * self.grid_size * self.log_strike_spacing


# -------------------------
# Result
# -------------------------
@dataclass(frozen=True)
class PriceQuote:
    call: float
    put: float
    grid_strike: float
