# fft_pricing/config.py
"""
Default values for the sweep driver and the command-line programs.

Environment overrides:
  FFT_PRICING_LOG_LEVEL      logging level name (default WARNING)
  FFT_PRICING_INTERPOLATION  'nearest' (default) or 'linear'
"""

import os

CONFIG = {
    "market": {
        "s0": 100.0,
        "k": 80.0,
        "r": 0.055,
        "q": 0.03,
        "t": 1.0,
    },
    "models": {
        "bs": {"sigma": 0.3},
        "heston": {"kappa": 2.0, "theta": 0.05, "vol_of_vol": 0.3, "rho": -0.7, "v0": 0.04},
        "vg": {"sigma": 0.3, "nu": 0.5, "theta": -0.4},
    },
    "sweep": {
        "alpha": [1.01, 1.25, 1.50, 1.75, 2.00, 5.00],
        "eta": [0.10, 0.25],
        "n": [6, 10],
    },
    "interpolation": os.environ.get("FFT_PRICING_INTERPOLATION", "nearest"),
    "log_level": os.environ.get("FFT_PRICING_LOG_LEVEL", "WARNING"),
}
