#fft-pricing/tests/test_engine.py
import math
import numpy as np
import pytest

import fft_pricing.carr_madan as carr_madan
from fft_pricing import (
    BlackScholesModel,
    BlackScholesParams,
    HestonModel,
    HestonParams,
    InvalidParameter,
    MarketParameters,
    StrikeOutOfRange,
    VarianceGammaParams,
    price,
    price_european,
    price_strikes,
)

HESTON = HestonParams(kappa=2.0, theta=0.05, vol_of_vol=0.3, rho=-0.7, v0=0.04)
VG = VarianceGammaParams(sigma=0.3, nu=0.5, theta=-0.4)
BS = BlackScholesParams(sigma=0.3)


@pytest.fixture
def default_market():
    """Defaults of the command-line programs."""
    return MarketParameters(s0=100.0, k=80.0, r=0.055, q=0.03, t=1.0)


# ---- concrete scenario ----
def test_black_scholes_reference_scenario():
    quote = price_european(BlackScholesParams(sigma=0.2), s0=100.0, k=100.0, r=0.05, q=0.0, t=1.0,
                           eta=0.25, n=12, alpha=1.5)
    assert abs(quote.call - 10.4506) < 0.01
    assert abs(quote.put - 5.5735) < 0.01
    assert quote.grid_strike == pytest.approx(100.0)


@pytest.mark.parametrize("model", [BS, HESTON, VG])
@pytest.mark.parametrize("interpolation", ["nearest", "linear"])
def test_put_call_parity(default_market, model, interpolation):
    quote = price(model, default_market, eta=0.25, n=12, alpha=1.5, interpolation=interpolation)
    m = default_market
    rhs = m.s0 * math.exp(-m.q * m.t) - m.k * math.exp(-m.r * m.t)
    assert quote.call - quote.put == pytest.approx(rhs, rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("model", [BS, HESTON, VG])
def test_prices_within_no_arbitrage_bounds(default_market, model):
    quote = price(model, default_market, eta=0.25, n=12, alpha=1.5, interpolation="linear")
    m = default_market
    fwd_intrinsic = m.s0 * math.exp(-m.q * m.t) - m.k * math.exp(-m.r * m.t)
    assert quote.call >= max(fwd_intrinsic, 0.0) - 1e-6
    assert quote.call <= m.s0 * math.exp(-m.q * m.t)
    assert quote.put >= -1e-6


# ---- Black-Scholes convergence ----
def test_black_scholes_converges_at_the_money():
    market = MarketParameters(s0=100.0, k=100.0, r=0.05, q=0.02, t=1.0)
    model = BlackScholesParams(sigma=0.2)
    exact = BlackScholesModel.from_params(market, model)
    quote = price(model, market, eta=0.1, n=14, alpha=1.5)
    assert quote.call == pytest.approx(exact.calculate_option_price('call'), abs=1e-3)
    assert quote.put == pytest.approx(exact.calculate_option_price('put'), abs=1e-3)


@pytest.mark.parametrize("K", [80.0, 90.0, 110.0, 125.0])
def test_black_scholes_converges_off_grid_with_interpolation(K):
    market = MarketParameters(s0=100.0, k=K, r=0.05, q=0.02, t=0.75)
    model = BlackScholesParams(sigma=0.25)
    exact = BlackScholesModel.from_params(market, model).calculate_option_price('call')
    quote = price(model, market, eta=0.25, n=15, alpha=1.5, interpolation="linear")
    assert quote.call == pytest.approx(exact, abs=1e-3)


def test_error_shrinks_as_grid_grows():
    market = MarketParameters(s0=100.0, k=100.0, r=0.05, q=0.0, t=1.0)
    model = BlackScholesParams(sigma=0.2)
    exact = BlackScholesModel.from_params(market, model).calculate_option_price('call')
    coarse = abs(price(model, market, eta=0.25, n=6, alpha=1.5).call - exact)
    fine = abs(price(model, market, eta=0.25, n=12, alpha=1.5).call - exact)
    assert fine < coarse
    assert fine < 1e-4


# ---- monotonicity ----
@pytest.mark.parametrize("model", [BlackScholesParams(sigma=0.2), HESTON, VG])
def test_atm_call_increases_with_maturity(model):
    calls = []
    for t in [0.25, 0.5, 1.0, 2.0, 3.0]:
        market = MarketParameters(s0=100.0, k=100.0, r=0.05, q=0.0, t=t)
        calls.append(price(model, market, eta=0.25, n=12, alpha=1.5).call)
    assert all(b > a for a, b in zip(calls, calls[1:]))


# ---- validation before any FFT work ----
def test_invalid_heston_rejected_before_fft(monkeypatch):
    calls = []
    monkeypatch.setattr(carr_madan, "fft", lambda *args, **kwargs: calls.append(args))
    with pytest.raises(InvalidParameter):
        price_european(HestonParams(kappa=2.0, theta=0.05, vol_of_vol=0.3, rho=1.5, v0=0.04),
                       s0=100.0, k=100.0, r=0.05, q=0.0, t=1.0, eta=0.25, n=12, alpha=1.5)
    assert calls == []


@pytest.mark.parametrize("eta,n,alpha", [(0.0, 12, 1.5), (0.25, 0, 1.5), (0.25, 12, -1.0)])
def test_invalid_discretization(default_market, eta, n, alpha):
    with pytest.raises(InvalidParameter):
        price(BS, default_market, eta=eta, n=n, alpha=alpha)


def test_strike_outside_grid(default_market):
    with pytest.raises(StrikeOutOfRange):
        price(BS, default_market.with_strike(1000.0), eta=2.0, n=6, alpha=1.5)


# ---- Heston ----
@pytest.mark.parametrize("K,interpolation", [(100.0, "nearest"), (80.0, "linear"), (120.0, "linear")])
def test_heston_matches_gil_pelaez(K, interpolation):
    market = MarketParameters(s0=100.0, k=K, r=0.055, q=0.03, t=1.0)
    reference = HestonModel(market, HESTON)
    quote = price(HESTON, market, eta=0.25, n=15, alpha=1.5, interpolation=interpolation)
    assert quote.call == pytest.approx(reference.calculate_option_price('call'), abs=5e-3)
    assert quote.put == pytest.approx(reference.calculate_option_price('put'), abs=5e-3)


def test_heston_close_to_black_scholes_without_vol_of_vol():
    market = MarketParameters(s0=100.0, k=100.0, r=0.05, q=0.0, t=1.0)
    heston = HestonParams(kappa=1.0, theta=0.04, vol_of_vol=1e-3, rho=0.0, v0=0.04)
    bs = BlackScholesParams(sigma=0.2)
    assert price(heston, market, 0.25, 12, 1.5).call == pytest.approx(price(bs, market, 0.25, 12, 1.5).call, abs=1e-3)


def test_heston_strike_sweep_is_smooth():
    market = MarketParameters(s0=100.0, k=100.0, r=0.02, q=0.0, t=5.0)
    model = HestonParams(kappa=1.5, theta=0.04, vol_of_vol=0.9, rho=-0.7, v0=0.04)
    strikes = np.linspace(60.0, 160.0, 201)
    calls = np.array([q.call for q in price_strikes(model, market, strikes, 0.25, 14, 1.5, interpolation="linear")])
    assert np.all(np.isfinite(calls))
    assert np.all(np.diff(calls) < 0.0)
    # convexity in strike (up to discretisation noise)
    assert np.all(np.diff(calls, 2) > -1e-6)


# ---- Variance-Gamma ----
def test_variance_gamma_converges_in_grid_size(default_market):
    market = default_market.with_strike(100.0)
    coarse = price(VG, market, eta=0.25, n=12, alpha=1.5)
    fine = price(VG, market, eta=0.25, n=14, alpha=1.5)
    assert coarse.call == pytest.approx(fine.call, abs=1e-3)


def test_variance_gamma_insensitive_to_damping(default_market):
    market = default_market.with_strike(100.0)
    values = [price(VG, market, eta=0.25, n=13, alpha=a).call for a in (1.1, 1.5, 2.0, 3.0)]
    assert max(values) - min(values) < 5e-3


# ---- multi-strike ----
def test_price_strikes_matches_single_calls(default_market):
    strikes = [70.0, 80.0, 100.0, 130.0]
    quotes = price_strikes(HESTON, default_market, strikes, eta=0.25, n=12, alpha=1.5)
    for K, quote in zip(strikes, quotes):
        single = price(HESTON, default_market.with_strike(K), eta=0.25, n=12, alpha=1.5)
        assert quote.call == pytest.approx(single.call, abs=1e-12)
        assert quote.put == pytest.approx(single.put, abs=1e-12)


def test_repeatable(default_market):
    a = price(VG, default_market, 0.1, 10, 1.25)
    b = price(VG, default_market, 0.1, 10, 1.25)
    assert a == b
