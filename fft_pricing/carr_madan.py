# fft_pricing/carr_madan.py
"""
Carr-Madan FFT option pricer.

Reference:
Carr, Madan (1999), "Option Valuation Using the Fast Fourier Transform"

Pipeline:
 - damp the call price by exp(alpha k) so it becomes square integrable in the
   log-strike k, and write its Fourier transform psi(v) through the
   characteristic function phi of ln S_T,
 - sample psi on v_j = j eta with Simpson weights,
 - one FFT gives call prices on the log-strike grid k_u = ln S0 - b + lambda u,
   lambda = 2 pi / (N eta), b = N lambda / 2 (grid centred at ln S0),
 - read the call at the requested strike and get the put from parity.
"""

import math
from dataclasses import dataclass

import numpy as np

from .characteristic import characteristic_function
from .errors import InvalidParameter, NumericalInstability, StrikeOutOfRange
from .fft import fft

INTERPOLATION_POLICIES = ("nearest", "linear")


@dataclass(frozen=True)
class CallPriceGrid:
    log_strikes: np.ndarray
    strikes: np.ndarray
    calls: np.ndarray
    center: float
    half_width: float


def simpson_weights(N: int) -> np.ndarray:
    """Simpson's rule weights 1/3, 4/3, 2/3, 4/3, 2/3, ... (first sample 1/3)."""
    w = np.empty(N, dtype=float)
    w[0::2] = 2.0
    w[1::2] = 4.0
    w[0] = 1.0
    return w / 3.0


def log_strike_grid(market, discretization) -> np.ndarray:
    k0 = math.log(market.s0) - discretization.half_width
    return k0 + discretization.log_strike_spacing * np.arange(discretization.grid_size)


def damped_integrand(model, market, discretization) -> np.ndarray:
    """
    FFT input x_j = exp(-i v_j k_0) psi(v_j) eta w_j, j = 0..N-1, where

        psi(v) = exp(-r T) phi(v - (alpha + 1) i) / ((alpha + i v)(alpha + 1 + i v))

    and k_0 = ln S0 - b is the first point of the log-strike grid.

    alpha is not checked against the model's moment bound; an alpha that is
    too large shows up as non-finite samples (NumericalInstability).
    """
    N = discretization.grid_size
    eta = discretization.eta
    alpha = discretization.alpha
    k0 = math.log(market.s0) - discretization.half_width

    v = eta * np.arange(N)
    phi = characteristic_function(v - 1j * (alpha + 1.0), market, model)
    denom = (alpha + 1j * v) * (alpha + 1.0 + 1j * v)
    psi = math.exp(-market.r * market.t) * phi / denom

    x = np.exp(-1j * v * k0) * psi * (eta * simpson_weights(N))
    if not np.all(np.isfinite(x)):
        bad = int(np.count_nonzero(~np.isfinite(x)))
        raise NumericalInstability(
            f"{bad} of {N} integrand samples are not finite "
            f"(alpha={alpha} may exceed the model's moment bound)"
        )
    return x


def call_price_grid(model, market, discretization) -> CallPriceGrid:
    """Call prices on the whole log-strike grid from a single FFT."""
    x = damped_integrand(model, market, discretization)
    X = fft(x, overwrite_x=True)
    ku = log_strike_grid(market, discretization)
    calls = np.exp(-discretization.alpha * ku) / np.pi * X.real
    return CallPriceGrid(
        log_strikes=ku,
        strikes=np.exp(ku),
        calls=calls,
        center=math.log(market.s0),
        half_width=discretization.half_width,
    )


def extract_call(grid: CallPriceGrid, strike: float, interpolation: str = "nearest"):
    """
    Call price at ``strike`` read off the grid.

    interpolation:
      'nearest' - value at the closest grid point (returns that point's strike)
      'linear'  - linear interpolation in log-strike between the two
                  bracketing grid points (returns ``strike`` itself)

    Returns (call, grid_strike).
    """
    if interpolation not in INTERPOLATION_POLICIES:
        raise InvalidParameter(
            f"interpolation must be one of {INTERPOLATION_POLICIES}, got {interpolation!r}"
        )
    target = math.log(strike)
    if abs(target - grid.center) > grid.half_width:
        raise StrikeOutOfRange(
            f"strike {strike} (log-distance {target - grid.center:+.4f} from spot) lies outside "
            f"the grid half-width {grid.half_width:.4f}; decrease eta or increase n"
        )

    ku = grid.log_strikes
    last = ku.shape[0] - 1
    spacing = ku[1] - ku[0] if last > 0 else 1.0
    if interpolation == "nearest":
        idx = int(np.clip(np.rint((target - ku[0]) / spacing), 0, last))
        call = float(grid.calls[idx])
        grid_strike = float(grid.strikes[idx])
    else:
        call = float(np.interp(target, ku, grid.calls))
        grid_strike = float(strike)

    if not math.isfinite(call):
        raise NumericalInstability(f"call price at strike {strike} is not finite")
    return call, grid_strike


def put_from_call(call: float, market) -> float:
    """Put-call parity: P = C - S0 exp(-q T) + K exp(-r T)."""
    return call - market.s0 * math.exp(-market.q * market.t) + market.k * math.exp(-market.r * market.t)
