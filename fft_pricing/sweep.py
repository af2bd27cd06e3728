# fft_pricing/sweep.py
"""
Discretisation sweep: price one option for every (eta, n, alpha) combination.

Rows are independent evaluations. A row whose pricing fails (or whose alpha is
above the model's known moment bound) is kept in the table with NaN prices
and the reason in ``status``, so the table always has one row per combination.
"""

import itertools
import logging
from typing import Iterable

import numpy as np
import pandas as pd

from .characteristic import alpha_upper_bound
from .engine import price
from .errors import PricingError

logger = logging.getLogger(__name__)

COLUMNS = ["eta", "n", "N", "alpha", "call", "put", "status"]


def sweep(model, market, etas: Iterable[float], ns: Iterable[int], alphas: Iterable[float],
          interpolation: str = "nearest", check_alpha_bound: bool = True) -> pd.DataFrame:
    """
    Evaluate the FFT price over the cartesian product etas x ns x alphas
    (eta outermost, alpha innermost).

    Returns a DataFrame with columns eta, n, N, alpha, call, put, status.
    """
    bound = alpha_upper_bound(model) if check_alpha_bound else None
    rows = []
    for eta, n, alpha in itertools.product(list(etas), list(ns), list(alphas)):
        row = {"eta": float(eta), "n": int(n), "N": 1 << int(n), "alpha": float(alpha),
               "call": np.nan, "put": np.nan, "status": "ok"}
        if bound is not None and alpha >= bound:
            row["status"] = f"alpha above moment bound {bound:.4f}"
            logger.warning(f"Skipping eta={eta} n={n} alpha={alpha}: {row['status']}")
            rows.append(row)
            continue
        try:
            quote = price(model, market, eta, n, alpha, interpolation=interpolation)
        except PricingError as e:
            row["status"] = f"{type(e).__name__}: {e}"
            logger.warning(f"Skipping eta={eta} n={n} alpha={alpha}: {row['status']}")
        else:
            row["call"] = quote.call
            row["put"] = quote.put
            logger.debug(f"eta={eta} n={n} alpha={alpha} -> call={quote.call:.6f} put={quote.put:.6f}")
        rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)


def format_table(model_name: str, table: pd.DataFrame) -> str:
    """Tab-separated console rendering: eta, 2^n, alpha, put."""
    lines = [f"Model = {model_name}", "eta\tN\talpha\tput"]
    for rec in table.itertuples(index=False):
        if rec.status == "ok":
            lines.append(f"{rec.eta:.2f}\t2^{rec.n}\t{rec.alpha:.2f}\t{rec.put:.4f}")
        else:
            lines.append(f"{rec.eta:.2f}\t2^{rec.n}\t{rec.alpha:.2f}\tnan\t({rec.status})")
    return "\n".join(lines)
