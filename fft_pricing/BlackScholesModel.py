# Third party imports
import numpy as np
from scipy.stats import norm

# Local package imports
from .base import OptionPricingModel


class BlackScholesModel(OptionPricingModel):
    """
    Black-Scholes-Merton closed form for European options with a continuous
    dividend yield. Serves as the exact reference for the FFT pricer.
    """

    def __init__(self, underlying_spot_price, strike_price, maturity, risk_free_rate, sigma, dividend_yield=0.0):
        self.S = float(underlying_spot_price)
        self.K = float(strike_price)
        self.T = float(maturity)  # in years
        self.r = float(risk_free_rate)
        self.q = float(dividend_yield)
        self.sigma = float(sigma)

        self._compute_d1_d2_and_price()

    @classmethod
    def from_params(cls, market, model):
        """Build from MarketParameters and BlackScholesParams."""
        return cls(market.s0, market.k, market.t, market.r, model.sigma, dividend_yield=market.q)

    def _compute_d1_d2_and_price(self):
        disc_q = np.exp(-self.q * self.T)
        disc_r = np.exp(-self.r * self.T)
        if self.T <= 0 or self.sigma <= 0:
            # deterministic forward: intrinsic value of the discounted forward
            self.d1 = None
            self.d2 = None
            self.call_price = max(0.0, self.S * disc_q - self.K * disc_r)
            self.put_price = max(0.0, self.K * disc_r - self.S * disc_q)
            return

        vol_sqrt_t = self.sigma * np.sqrt(self.T)
        self.d1 = (np.log(self.S / self.K) + (self.r - self.q + 0.5 * self.sigma ** 2) * self.T) / vol_sqrt_t
        self.d2 = self.d1 - vol_sqrt_t

        self.call_price = self.S * disc_q * norm.cdf(self.d1) - self.K * disc_r * norm.cdf(self.d2)
        self.put_price = self.K * disc_r * norm.cdf(-self.d2) - self.S * disc_q * norm.cdf(-self.d1)

    def _calculate_call_option_price(self):
        return float(self.call_price)

    def _calculate_put_option_price(self):
        return float(self.put_price)
