# fft_pricing/engine.py
"""
Pricing facade: model + market + (eta, n, alpha) -> PriceQuote.

Every function here is a pure function of its arguments. Each call builds its
own integrand and FFT buffer, so callers may evaluate sweep rows concurrently.
"""

from typing import List, Sequence

from .carr_madan import call_price_grid, extract_call, put_from_call
from .parameters import DiscretizationParameters, MarketParameters, ModelParameters, PriceQuote


def price(model: ModelParameters, market: MarketParameters, eta, n, alpha, interpolation: str = "nearest") -> PriceQuote:
    """
    European call and put at ``market.k`` via Carr-Madan FFT.

    Raises:
      InvalidParameter     - bad discretisation or interpolation policy
      InvalidSize          - FFT length not a power of two
      StrikeOutOfRange     - strike not covered by the log-strike grid
      NumericalInstability - non-finite integrand or price
    """
    discretization = DiscretizationParameters(eta=eta, n=n, alpha=alpha)
    grid = call_price_grid(model, market, discretization)
    call, grid_strike = extract_call(grid, market.k, interpolation)
    return PriceQuote(call=call, put=put_from_call(call, market), grid_strike=grid_strike)


def price_european(model, s0, k, r, q, t, eta, n, alpha, interpolation: str = "nearest") -> PriceQuote:
    """Flat-argument form of :func:`price`."""
    market = MarketParameters(s0=s0, k=k, r=r, q=q, t=t)
    return price(model, market, eta, n, alpha, interpolation=interpolation)


def price_strikes(model: ModelParameters, market: MarketParameters, strikes: Sequence[float], eta, n, alpha,
                  interpolation: str = "nearest") -> List[PriceQuote]:
    """Quotes for several strikes from one FFT; ``market.k`` is ignored."""
    discretization = DiscretizationParameters(eta=eta, n=n, alpha=alpha)
    grid = call_price_grid(model, market, discretization)
    quotes = []
    for k in strikes:
        leg = market.with_strike(k)
        call, grid_strike = extract_call(grid, leg.k, interpolation)
        quotes.append(PriceQuote(call=call, put=put_from_call(call, leg), grid_strike=grid_strike))
    return quotes
