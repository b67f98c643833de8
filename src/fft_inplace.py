"""
In-place Radix-2 Decimation-in-Time FFT

Reference implementation of the iterative Cooley-Tukey transform over a
pair of real buffers (x = real part, y = imaginary part) that are
overwritten with the result.

Normalisation convention:
    The forward transform divides by N, so its output is the set of
    Fourier coefficients Cn of the input. The inverse transform does not
    scale at all, so inverse(forward(x, y)) reproduces (x, y).
    Converting a coefficient to a tone amplitude takes an extra factor of
    2 (see fft_log.gain); that factor is applied by the caller, never
    here.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import enum
import numpy as np
from typing import MutableSequence, Optional, Sequence, Tuple

from fft_tables import SineTable, BitReversalTable, FFTSizeError
from fft_jit import transform_jit


__all__ = [
    'Direction',
    'FFTSizeError',
    'BufferLengthError',
    'transform',
    'FFTEngine',
]


class Direction(enum.Enum):
    FORWARD = 'forward'
    INVERSE = 'inverse'


class BufferLengthError(ValueError):
    """Signal buffer length does not match the transform size."""


def check_buffers(x: Sequence[float], y: Sequence[float], n: int) -> None:
    """Raise BufferLengthError unless both buffers hold exactly n samples."""
    if len(x) != n or len(y) != n:
        raise BufferLengthError(
            f"Buffers must both have length {n}, got {len(x)} and {len(y)}"
        )


def check_float_buffer(name: str, buf) -> None:
    """Raise TypeError for numpy buffers that cannot hold float results."""
    if isinstance(buf, np.ndarray) and not np.issubdtype(buf.dtype, np.floating):
        raise TypeError(f"{name} must have a floating dtype, got {buf.dtype}")


def _check_direction(direction) -> Direction:
    if not isinstance(direction, Direction):
        raise TypeError(f"direction must be a Direction, got {direction!r}")
    return direction


# =============================================================================
# Reference transform
# =============================================================================

def transform(
    x: MutableSequence[float],
    y: MutableSequence[float],
    sintbl: SineTable,
    bitrev: BitReversalTable,
    direction: Direction = Direction.FORWARD
) -> None:
    """
    Transform (x, y) in place.

    Works on any mutable float sequences (lists, float64 numpy arrays).

    Args:
        x: Real parts, overwritten with the result
        y: Imaginary parts, overwritten with the result
        sintbl: Sine table built for N
        bitrev: Bit-reversal table built for N
        direction: Direction.FORWARD (scaled by 1/N) or Direction.INVERSE

    Raises:
        FFTSizeError: if the two tables were built for different sizes
        BufferLengthError: if x or y does not hold N samples
        TypeError: if x or y is a numpy array with a non-floating dtype

    Algorithm:
        1. Swap each pair (i, bitrev[i]) with i < bitrev[i]
        2. For k = 1, 2, 4, ..., N/2:
               For each group j = 0 .. k-1 with twiddle index h = j*d:
                   c = cos(2*pi*h/M), s = +-sin(2*pi*h/M)
                   For each pair (i, i+k), i = j, j+2k, ...:
                       (dx, dy) = (x[i+k], y[i+k]) * (c - js)
                       (x[i+k], y[i+k]) = (x[i], y[i]) - (dx, dy)
                       (x[i], y[i]) += (dx, dy)
        3. Forward only: divide everything by N
    """
    direction = _check_direction(direction)
    n = bitrev.n
    if sintbl.n != n:
        raise FFTSizeError(
            f"Sine table size {sintbl.n} does not match bit-reversal size {n}"
        )
    check_buffers(x, y, n)
    check_float_buffer('x', x)
    check_float_buffer('y', y)

    inverse = direction is Direction.INVERSE
    table = sintbl.values.tolist()
    n4 = sintbl.quarter
    step_scale = sintbl.resolution // n

    # Step 1: Bit-reversal permutation
    for i, j in enumerate(bitrev):
        if i < j:
            x[i], x[j] = x[j], x[i]
            y[i], y[j] = y[j], y[i]

    # Step 2: Butterfly stages
    k = 1
    while k < n:
        k2 = k + k
        d = step_scale * (n // k2)
        h = 0
        for j in range(k):
            c = table[h + n4]
            s = -table[h] if inverse else table[h]

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

    # Step 3: Normalisation (forward only)
    if not inverse:
        for i in range(n):
            x[i] /= n
            y[i] /= n


# =============================================================================
# Engine
# =============================================================================

class FFTEngine:
    """
    Transform engine for one fixed size N.

    Builds the sine and bit-reversal tables once and reuses them for every
    call. The tables are read-only, so one engine may serve concurrent
    calls as long as each call gets its own buffer pair.

    Args:
        n: Transform size, a power of 2
        jit: Run the numba kernels instead of the pure-Python loops.
             Buffers must then be writable 1-D float64 numpy arrays.

    Raises:
        FFTSizeError: if n is not a power of 2

    Example:
        >>> engine = FFTEngine(64)
        >>> x, y = [1.0] * 64, [0.0] * 64
        >>> engine.forward(x, y)
        >>> x[0]
        1.0
    """

    def __init__(self, n: int, jit: bool = False):
        self.sintbl = SineTable(n)
        self.bitrev = BitReversalTable(n)
        self.n = self.bitrev.n
        self.jit = jit

    def __repr__(self) -> str:
        return f"FFTEngine(n={self.n}, jit={self.jit})"

    def transform(
        self,
        x: MutableSequence[float],
        y: MutableSequence[float],
        direction: Direction = Direction.FORWARD
    ) -> None:
        """Transform (x, y) in place in the given direction."""
        direction = _check_direction(direction)
        check_buffers(x, y, self.n)

        if not self.jit:
            transform(x, y, self.sintbl, self.bitrev, direction)
            return

        for name, buf in (('x', x), ('y', y)):
            if not isinstance(buf, np.ndarray) or buf.dtype != np.float64 or buf.ndim != 1:
                raise TypeError(f"{name} must be a 1-D float64 numpy array for the jit engine")
            if not buf.flags.writeable:
                raise TypeError(f"{name} is read-only")

        transform_jit(
            x, y,
            self.sintbl.values,
            self.bitrev.values,
            self.sintbl.quarter,
            self.sintbl.resolution // self.n,
            direction is Direction.INVERSE
        )

    def forward(self, x: MutableSequence[float], y: MutableSequence[float]) -> None:
        self.transform(x, y, Direction.FORWARD)

    def inverse(self, x: MutableSequence[float], y: MutableSequence[float]) -> None:
        self.transform(x, y, Direction.INVERSE)

    def spectrum(
        self,
        samples: Sequence[float],
        window: Optional[Sequence[float]] = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Forward transform of a real signal into fresh buffers.

        The samples are copied (and multiplied by the window, if given)
        before the in-place transform runs, so the caller's data is left
        untouched.

        Returns:
            (x, y) float64 arrays holding the Cn coefficients
        """
        x = np.array(samples, dtype=np.float64)
        y = np.zeros(self.n, dtype=np.float64)
        check_buffers(x, y, self.n)
        if window is not None:
            w = np.asarray(window, dtype=np.float64)
            check_buffers(w, y, self.n)
            x *= w
        self.forward(x, y)
        return x, y
