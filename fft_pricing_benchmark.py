#fft-pricing/fft_pricing_benchmark.py
"""
Accuracy / runtime study of the Carr-Madan FFT pricer against the
Black-Scholes closed form, over frequency spacing eta and grid exponent n.

Run:
    python fft_pricing_benchmark.py
"""

import time
import numpy as np
import matplotlib.pyplot as plt

from fft_pricing import BlackScholesModel, BlackScholesParams, MarketParameters, price

# ---------- Parameters ----------
market = MarketParameters(s0=100.0, k=100.0, r=0.05, q=0.0, t=1.0)
model = BlackScholesParams(sigma=0.2)
alpha = 1.5

# Varying discretisation to study trade-offs
eta_list = [0.05, 0.10, 0.25, 0.50]
n_list = [8, 10, 12, 14]

# Reference Black-Scholes
bsm_price_call = BlackScholesModel.from_params(market, model).calculate_option_price('Call Option')
print("Black-Scholes Call Price (reference):", bsm_price_call)

results = []
for eta in eta_list:
    for n in n_list:
        start = time.perf_counter()
        quote = price(model, market, eta, n, alpha)
        runtime = time.perf_counter() - start
        abs_err = abs(quote.call - bsm_price_call)
        results.append({
            'eta': eta,
            'n': n,
            'call': quote.call,
            'put': quote.put,
            'runtime': runtime,
            'abs_err': abs_err,
        })
        print(f"[eta={eta:.2f} N=2^{n}] call={quote.call:.6f}, abs_err={abs_err:.2e}, runtime={runtime:.4f}s")

# ---------- Plotting ----------
plt.figure(figsize=(8, 5))
for eta in eta_list:
    rows = [r for r in results if r['eta'] == eta]
    plt.semilogy([r['n'] for r in rows], [max(r['abs_err'], 1e-16) for r in rows], marker='o', label=f"eta={eta}")
plt.xlabel('n (N = 2^n)')
plt.ylabel('Absolute call error vs Black-Scholes')
plt.title('Carr-Madan FFT discretisation error')
plt.xticks(n_list)
plt.legend()
plt.grid(True)
plt.show()

# ---------- Summary print ----------
print("\n--- Summary ---\n")
best = min(results, key=lambda r: r['abs_err'])
print("Most accurate:", best)
print("Median runtime: {:.4f}s".format(np.median([r['runtime'] for r in results])))
