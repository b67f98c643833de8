"""
Window Functions for the In-place FFT

Each window trades main-lobe width against sidelobe leakage:
- Hann: good general purpose, -31 dB sidelobes
- Hamming: lower first sidelobe, slower rolloff
- Blackman: -58 dB sidelobes, wider main lobe
- Rectangular: no windowing (narrowest main lobe, worst leakage)

All windows here are periodic (denominator N, not N - 1), so they tile
exactly over an N-point transform frame.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import numpy as np
from typing import Callable, Dict, List, MutableSequence

from fft_inplace import BufferLengthError, check_float_buffer


def hann(n: int) -> np.ndarray:
    """w[i] = 0.5 - 0.5*cos(2*pi*i/n)"""
    i = np.arange(n)
    return 0.5 - 0.5 * np.cos(2 * np.pi * i / n)


def hamming(n: int) -> np.ndarray:
    i = np.arange(n)
    return 0.54 - 0.46 * np.cos(2 * np.pi * i / n)


def blackman(n: int) -> np.ndarray:
    i = np.arange(n)
    return (0.42
            - 0.5 * np.cos(2 * np.pi * i / n)
            + 0.08 * np.cos(4 * np.pi * i / n))


def rectangular(n: int) -> np.ndarray:
    return np.ones(n)


WINDOW_FUNCTIONS: Dict[str, Callable[[int], np.ndarray]] = {
    "hann": hann,
    "hanning": hann,
    "hamming": hamming,
    "blackman": blackman,
    "rectangular": rectangular,
}


def get_window(name: str, n: int) -> np.ndarray:
    """
    Get window coefficients as a float64 array.

    Args:
        name: Window function name (see WINDOW_FUNCTIONS keys)
        n: Window length in samples

    Returns:
        numpy float64 array of window values
    """
    if name not in WINDOW_FUNCTIONS:
        raise ValueError(
            f"Unknown window: {name}. Options: {available_windows()}"
        )
    return WINDOW_FUNCTIONS[name](n).astype(np.float64)


def available_windows() -> List[str]:
    """Return list of available window function names."""
    return list(WINDOW_FUNCTIONS.keys())


def amplitude_correction_factor(window) -> float:
    """
    Amplitude correction factor (ACF) of a window: its mean value.

    A windowed tone reads ACF times too small in the spectrum; dividing
    the measured gain by the ACF restores the true amplitude. 0.5 for Hann.
    """
    window = np.asarray(window, dtype=np.float64)
    return float(np.sum(window) / len(window))


def apply_window(x: MutableSequence[float], window) -> None:
    """Multiply x by the window coefficients in place."""
    if len(x) != len(window):
        raise BufferLengthError(
            f"Window length {len(window)} does not match signal length {len(x)}"
        )
    check_float_buffer('x', x)
    for i in range(len(x)):
        x[i] = x[i] * window[i]
