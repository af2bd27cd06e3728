# fft_pricing/fft.py
"""
Radix-2 Cooley-Tukey FFT.

    X[k] = sum_j x[j] exp(-2 pi i j k / N),   N a power of two

Iterative form: bit-reversal permutation, then log2(N) butterfly stages.
Each stage is vectorised over all butterflies of the same span, so the work
is O(N log N) numpy operations rather than O(N^2).
"""

from functools import lru_cache

import numpy as np

from .errors import InvalidSize


def is_power_of_two(n) -> bool:
    return n >= 1 and (n & (n - 1)) == 0


@lru_cache(maxsize=32)
def _bit_reversal_permutation(n: int) -> np.ndarray:
    levels = n.bit_length() - 1
    idx = np.arange(n)
    rev = np.zeros(n, dtype=np.intp)
    for bit in range(levels):
        rev |= ((idx >> bit) & 1) << (levels - 1 - bit)
    # shared between callers, so never writable
    rev.setflags(write=False)
    return rev


def fft(x, overwrite_x: bool = False) -> np.ndarray:
    """
    Forward DFT of a 1-D sequence whose length is a power of two.

    Args:
      x: complex (or real) 1-D array-like
      overwrite_x: if True and ``x`` is already a contiguous complex128 array,
        the transform is written into ``x`` and ``x`` itself is returned.

    Raises:
      InvalidSize if len(x) is not a power of two.
    """
    if isinstance(x, np.ndarray) and x.dtype == np.complex128 and x.flags.c_contiguous and overwrite_x:
        out = x
    else:
        out = np.array(x, dtype=np.complex128)
    if out.ndim != 1:
        raise InvalidSize(f"fft expects a 1-D vector, got shape {out.shape}")
    n = out.shape[0]
    if not is_power_of_two(n):
        raise InvalidSize(f"FFT length must be a power of two, got {n}")

    out[:] = out[_bit_reversal_permutation(n)]

    span = 2
    while span <= n:
        half = span // 2
        twiddle = np.exp(-2j * np.pi * np.arange(half) / span)
        blocks = out.reshape(-1, span)
        even = blocks[:, :half].copy()
        odd = blocks[:, half:] * twiddle
        blocks[:, :half] = even + odd
        blocks[:, half:] = even - odd
        span *= 2
    return out


def ifft(X) -> np.ndarray:
    """Inverse DFT via conjugate-transform-conjugate, scaled by 1/N."""
    out = np.conj(np.asarray(X, dtype=np.complex128))
    out = fft(out, overwrite_x=True)
    np.conjugate(out, out=out)
    out /= out.shape[0]
    return out
