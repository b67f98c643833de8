"""
In-place FFT Demo

Builds the tables for N = 64, windows a 6*cos(2*pi*3*i/N) test tone with a
Hann window, runs the forward transform, inverts the result again, and
writes everything to Log.csv.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import sys
import numpy as np
from dataclasses import dataclass

from fft_inplace import FFTEngine
from fft_window import get_window, amplitude_correction_factor, apply_window
from fft_log import build_records, write_log


# =============================================================================
# Configuration
# =============================================================================

N = 64                  # must be 2^x
TONE_AMPLITUDE = 6.0
TONE_BIN = 3
WINDOW = "hann"
LOG_FILE = "Log.csv"


@dataclass
class DemoResult:
    """Arrays produced by one demo run."""
    n: int
    acf: float
    window: np.ndarray
    input_real: np.ndarray
    input_imag: np.ndarray
    forward_real: np.ndarray
    forward_imag: np.ndarray
    inverse_real: np.ndarray
    inverse_imag: np.ndarray


def make_tone(n: int, amplitude: float = TONE_AMPLITUDE, freq: float = TONE_BIN) -> np.ndarray:
    i = np.arange(n)
    return amplitude * np.cos(2 * np.pi * freq * i / n)


def run_demo(
    n: int = N,
    window: str = WINDOW,
    amplitude: float = TONE_AMPLITUDE,
    freq: float = TONE_BIN,
    jit: bool = False,
    verbose: bool = False
) -> DemoResult:
    """
    Window a test tone, transform it forward and back.

    Raises:
        FFTSizeError: if n is not a power of 2
    """
    engine = FFTEngine(n, jit=jit)

    w = get_window(window, n)
    acf = amplitude_correction_factor(w)
    if verbose:
        print(f"> acf = {acf:f}")
        sys.stdout.flush()

    # Input: windowed tone, zero imaginary part
    x1 = make_tone(n, amplitude, freq)
    y1 = np.zeros(n)
    apply_window(x1, w)

    # Forward: Cn coefficients
    x2, y2 = x1.copy(), y1.copy()
    engine.forward(x2, y2)

    # Inverse: back to the windowed input
    x3, y3 = x2.copy(), y2.copy()
    engine.inverse(x3, y3)

    return DemoResult(n, acf, w, x1, y1, x2, y2, x3, y3)


def main(n: int = N, output_path: str = LOG_FILE, jit: bool = False) -> int:
    """Run the demo and write the log. Returns the process exit status."""
    result = run_demo(n, jit=jit, verbose=True)

    records = build_records(
        (result.input_real, result.input_imag),
        (result.forward_real, result.forward_imag),
        (result.inverse_real, result.inverse_imag),
        result.window,
    )
    try:
        write_log(output_path, records)
    except OSError as e:
        print(f"File open Error: {e}")
        return 1

    print("fin.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
