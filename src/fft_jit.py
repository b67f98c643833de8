"""
Compiled In-place FFT Kernels

numba versions of the three transform phases. They run the exact same
loop nest as the pure-Python reference in fft_inplace.py, on float64
numpy buffers, so results agree with the reference up to rounding.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import numpy as np
from numba import njit


# =============================================================================
# Kernels
# =============================================================================

@njit
def permute_kernel(x: np.ndarray, y: np.ndarray, bitrev: np.ndarray):
    """
    Reorder both buffers into bit-reversed order.

    Only pairs with i < bitrev[i] are swapped so that every transposition
    happens exactly once.
    """
    n = x.shape[0]
    for i in range(n):
        j = bitrev[i]
        if i < j:
            t = x[i]
            x[i] = x[j]
            x[j] = t
            t = y[i]
            y[i] = y[j]
            y[j] = t


@njit
def butterfly_kernel(
    x: np.ndarray,
    y: np.ndarray,
    sintbl: np.ndarray,
    quarter: int,
    step_scale: int,
    inverse: bool
):
    """
    All butterfly stages of a radix-2 DIT transform.

    Args:
        x: Real parts (modified in-place)
        y: Imaginary parts (modified in-place)
        sintbl: Sine table, cosine read at +quarter
        quarter: Quarter period of the table in entries
        step_scale: Table resolution divided by N
        inverse: Negate the sine term (inverse transform)
    """
    n = x.shape[0]
    k = 1
    while k < n:
        k2 = k + k
        d = step_scale * (n // k2)
        h = 0
        for j in range(k):
            c = sintbl[h + quarter]
            s = sintbl[h]
            if inverse:
                s = -s
            for i in range(j, n, k2):
                ik = i + k
                dx = s * y[ik] + c * x[ik]
                dy = c * y[ik] - s * x[ik]

                x[ik] = x[i] - dx
                x[i] += dx

                y[ik] = y[i] - dy
                y[i] += dy
            h += d
        k = k2


@njit
def normalize_kernel(x: np.ndarray, y: np.ndarray):
    """Divide both buffers by N."""
    n = x.shape[0]
    for i in range(n):
        x[i] /= n
        y[i] /= n


@njit
def transform_jit(
    x: np.ndarray,
    y: np.ndarray,
    sintbl: np.ndarray,
    bitrev: np.ndarray,
    quarter: int,
    step_scale: int,
    inverse: bool
):
    """Permute, butterfly, and (forward only) normalise in place."""
    permute_kernel(x, y, bitrev)
    butterfly_kernel(x, y, sintbl, quarter, step_scale, inverse)
    if not inverse:
        normalize_kernel(x, y)
