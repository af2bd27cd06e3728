# fft_pricing/characteristic.py
"""
Characteristic functions phi(u) = E[exp(i u ln S_T)] under the risk-neutral
measure, for the three supported models.

All functions are vectorised: ``u`` may be a complex scalar or a numpy array.
The Carr-Madan integrand evaluates them at ``v - (alpha + 1) i``, i.e. below
the real axis.
"""

import math

import numpy as np

from .parameters import BlackScholesParams, HestonParams, VarianceGammaParams


def cf_black_scholes(u, market, model):
    """
    phi(u) = exp(i u mu - 0.5 sigma^2 u^2 T)
    with mu = ln S0 + (r - q - 0.5 sigma^2) T
    """
    u = np.asarray(u, dtype=np.complex128)
    sigma2 = model.sigma ** 2
    mu = math.log(market.s0) + (market.r - market.q - 0.5 * sigma2) * market.t
    return np.exp(1j * u * mu - 0.5 * sigma2 * u * u * market.t)


def cf_heston(u, market, model):
    """
    Heston characteristic function in the "little trap" form of
    Albrecher, Mayer, Schoutens & Tistaert (2007).

    With d taken on the principal branch (Re d >= 0) we have |g exp(-d T)| < 1,
    so 1 - g exp(-d T) never winds around the origin and the complex log stays
    continuous in u. The original Heston (1993) form, using g' = 1/g and
    exp(+d T), jumps across the branch cut for long maturities.
    """
    u = np.asarray(u, dtype=np.complex128)
    kappa, theta, sigma = model.kappa, model.theta, model.vol_of_vol
    rho, v0 = model.rho, model.v0
    T = market.t

    iu = 1j * u
    b = kappa - rho * sigma * iu
    d = np.sqrt(b ** 2 + sigma ** 2 * (iu + u * u))
    g = (b - d) / (b + d)
    exp_dt = np.exp(-d * T)

    C = (market.r - market.q) * iu * T + (kappa * theta / sigma ** 2) * (
        (b - d) * T - 2.0 * np.log((1.0 - g * exp_dt) / (1.0 - g))
    )
    D = ((b - d) / sigma ** 2) * ((1.0 - exp_dt) / (1.0 - g * exp_dt))
    return np.exp(C + D * v0 + iu * math.log(market.s0))


def cf_variance_gamma(u, market, model):
    """
    phi(u) = exp(i u (ln S0 + (r - q + omega) T)) * (1 - i u theta nu + 0.5 sigma^2 nu u^2)^(-T/nu)

    omega = ln(1 - theta nu - 0.5 sigma^2 nu) / nu is the martingale correction.
    The power is taken on the principal branch; for alpha below
    alpha_upper_bound the base keeps a positive real part along the whole
    integration line, so the principal branch is continuous there.
    """
    u = np.asarray(u, dtype=np.complex128)
    sigma, nu, theta = model.sigma, model.nu, model.theta
    T = market.t

    drift = math.log(market.s0) + (market.r - market.q + model.omega) * T
    base = 1.0 - 1j * theta * nu * u + 0.5 * sigma ** 2 * nu * u * u
    return np.exp(1j * u * drift) * np.power(base, -T / nu)


def characteristic_function(u, market, model):
    """Dispatch to the characteristic function of ``model``'s variant."""
    if isinstance(model, BlackScholesParams):
        return cf_black_scholes(u, market, model)
    if isinstance(model, HestonParams):
        return cf_heston(u, market, model)
    if isinstance(model, VarianceGammaParams):
        return cf_variance_gamma(u, market, model)
    raise TypeError(f"Unsupported model parameters: {type(model).__name__}")


def alpha_upper_bound(model):
    """
    Largest damping alpha for which E[S_T^(alpha+1)] is finite.

    Returns math.inf for Black-Scholes, the exact bound for Variance-Gamma and
    None for Heston, whose moment explosion has no closed form. The pricing
    engine never enforces this; the sweep driver uses it to flag rows.
    """
    if isinstance(model, BlackScholesParams):
        return math.inf
    if isinstance(model, HestonParams):
        return None
    if isinstance(model, VarianceGammaParams):
        # 1 - theta nu c - 0.5 sigma^2 nu c^2 > 0 with c = alpha + 1
        a = 0.5 * model.sigma ** 2 * model.nu
        b = model.theta * model.nu
        if a == 0.0:
            return math.inf if b <= 0.0 else 1.0 / b - 1.0
        c = (-b + math.sqrt(b * b + 4.0 * a)) / (2.0 * a)
        return c - 1.0
    raise TypeError(f"Unsupported model parameters: {type(model).__name__}")
