# fft_pricing/cli.py
"""
Command-line sweep of Carr-Madan FFT put prices.

    fft-pricing bs     [--s0 --k --r --q --t --sigma] [--alpha --eta --n]
    fft-pricing heston [... --kappa --theta --vol-of-vol --rho --v0]
    fft-pricing vg     [... --sigma --nu --theta]

Without --alpha/--eta/--n the default sweep lists from CONFIG are used.
"""

import argparse
import logging
import sys

from .config import CONFIG
from .errors import InvalidParameter
from .parameters import BlackScholesParams, HestonParams, MarketParameters, VarianceGammaParams
from .sweep import format_table, sweep

logger = logging.getLogger(__name__)

MODEL_LABELS = {"bs": "BS", "heston": "Heston", "vg": "VG"}


def _add_common_arguments(p):
    market = CONFIG["market"]
    p.add_argument("--s0", type=float, default=market["s0"], help="spot price")
    p.add_argument("--k", type=float, default=market["k"], help="strike")
    p.add_argument("--r", type=float, default=market["r"], help="risk-free rate")
    p.add_argument("--q", type=float, default=market["q"], help="dividend yield")
    p.add_argument("--t", type=float, default=market["t"], help="maturity in years")
    p.add_argument("--alpha", type=float, default=None, help="FFT damping (if omitted, sweep)")
    p.add_argument("--eta", type=float, default=None, help="frequency spacing (if omitted, sweep)")
    p.add_argument("--n", type=int, default=None, help="grid exponent, N = 2^n (if omitted, sweep)")
    p.add_argument("--interpolation", choices=["nearest", "linear"], default=CONFIG["interpolation"],
                   help="strike lookup policy on the log-strike grid")
    p.add_argument("--log-level", default=CONFIG["log_level"], help="logging level (DEBUG, INFO, ...)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fft-pricing",
                                     description="European put pricing via Carr-Madan FFT")
    sub = parser.add_subparsers(dest="model", required=True)

    bs = sub.add_parser("bs", help="Black-Scholes")
    _add_common_arguments(bs)
    bs.add_argument("--sigma", type=float, default=CONFIG["models"]["bs"]["sigma"])

    heston_defaults = CONFIG["models"]["heston"]
    heston = sub.add_parser("heston", help="Heston stochastic volatility")
    _add_common_arguments(heston)
    heston.add_argument("--kappa", type=float, default=heston_defaults["kappa"])
    heston.add_argument("--theta", type=float, default=heston_defaults["theta"])
    heston.add_argument("--vol-of-vol", dest="vol_of_vol", type=float, default=heston_defaults["vol_of_vol"])
    heston.add_argument("--rho", type=float, default=heston_defaults["rho"])
    heston.add_argument("--v0", type=float, default=heston_defaults["v0"])

    vg_defaults = CONFIG["models"]["vg"]
    vg = sub.add_parser("vg", help="Variance-Gamma")
    _add_common_arguments(vg)
    vg.add_argument("--sigma", type=float, default=vg_defaults["sigma"])
    vg.add_argument("--nu", type=float, default=vg_defaults["nu"])
    vg.add_argument("--theta", type=float, default=vg_defaults["theta"])

    return parser


def model_from_args(args):
    if args.model == "bs":
        return BlackScholesParams(sigma=args.sigma)
    if args.model == "heston":
        return HestonParams(kappa=args.kappa, theta=args.theta, vol_of_vol=args.vol_of_vol,
                            rho=args.rho, v0=args.v0)
    return VarianceGammaParams(sigma=args.sigma, nu=args.nu, theta=args.theta)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=str(args.log_level).upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        model = model_from_args(args)
        market = MarketParameters(s0=args.s0, k=args.k, r=args.r, q=args.q, t=args.t)
    except InvalidParameter as e:
        parser.error(str(e))

    sweep_defaults = CONFIG["sweep"]
    alphas = [args.alpha] if args.alpha is not None else sweep_defaults["alpha"]
    etas = [args.eta] if args.eta is not None else sweep_defaults["eta"]
    ns = [args.n] if args.n is not None else sweep_defaults["n"]

    logger.info(f"Sweeping {len(etas) * len(ns) * len(alphas)} rows for model {args.model}")
    table = sweep(model, market, etas, ns, alphas, interpolation=args.interpolation)
    print(format_table(MODEL_LABELS[args.model], table))
    return 0


if __name__ == "__main__":
    sys.exit(main())
