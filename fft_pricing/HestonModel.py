# fft_pricing/HestonModel.py
import numpy as np
from scipy.integrate import quad

from .base import OptionPricingModel
from .characteristic import cf_heston


class HestonModel(OptionPricingModel):
    """
    Semi-closed-form Heston (1993) European prices via the Gil-Pelaez
    probabilities P1, P2, integrated with scipy quad. Independent of the FFT
    grid, so it is used to measure the FFT pricer's discretisation error.
    """

    def __init__(self, market, model, upper_limit=500.0):
        self.market = market
        self.model = model
        self.upper_limit = float(upper_limit)

    def _charfunc(self, u):
        return complex(cf_heston(u, self.market, self.model))

    # Heston probabilities P1 (stock measure), P2 (risk-neutral exercise probability)
    def _P(self, j):
        S0, K, T = self.market.s0, self.market.k, self.market.t
        log_k = np.log(K)
        forward = S0 * np.exp((self.market.r - self.market.q) * T)

        def integrand(u):
            if j == 1:
                cf = self._charfunc(u - 1j) / forward
            else:
                cf = self._charfunc(u)
            return (np.exp(-1j * u * log_k) * cf / (1j * u)).real

        val, _ = quad(integrand, 1e-10, self.upper_limit, limit=500, epsabs=1e-10, epsrel=1e-9)
        return 0.5 + val / np.pi

    def _calculate_call_option_price(self):
        m = self.market
        return m.s0 * np.exp(-m.q * m.t) * self._P(1) - m.k * np.exp(-m.r * m.t) * self._P(2)

    def _calculate_put_option_price(self):
        m = self.market
        return self._calculate_call_option_price() - m.s0 * np.exp(-m.q * m.t) + m.k * np.exp(-m.r * m.t)
