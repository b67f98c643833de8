"""
Lookup Tables for the In-place Radix-2 FFT

Precomputes the two tables the butterfly network consumes:

1. SineTable - sin(2*pi*i/M) over one and a quarter periods, so that
   cosine can be read from the same table at a quarter-period offset.
2. BitReversalTable - the permutation mapping each sample index to its
   bit-reversed index, used to reorder samples before the butterflies.

Both tables are built once per transform size and never written again.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import math
import numpy as np
from typing import Iterator

from fft_utils import is_power_of_two


# =============================================================================
# Constants
# =============================================================================

# Smallest table resolution with an integer quarter period.
# N = 1 and N = 2 borrow this resolution for their twiddle lookups.
MIN_TABLE_RESOLUTION = 4


class FFTSizeError(ValueError):
    """Transform size is not an exact power of two."""


def validate_size(n: int) -> int:
    """
    Check that n is a usable transform size.

    Args:
        n: Number of samples

    Returns:
        log2(n), the number of butterfly stages

    Raises:
        FFTSizeError: if n is not an integer power of two (n >= 1)
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise FFTSizeError(f"FFT size must be an integer, got {n!r}")
    if not is_power_of_two(int(n)):
        raise FFTSizeError(f"FFT size {n} must be a power of 2")
    return int(n).bit_length() - 1


def table_resolution(n: int) -> int:
    """Number of table steps per full period used for size n."""
    return max(n, MIN_TABLE_RESOLUTION)


def _freeze(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


# =============================================================================
# Sine table
# =============================================================================

class SineTable:
    """
    Sine values for every twiddle angle of an N-point transform.

    Entry i holds sin(2*pi*i/M) for i in [0, M + M/4), where M is the
    table resolution (M == N for N >= 4). Entry i + M/4 therefore holds
    cos(2*pi*i/M).

    Example:
        >>> table = SineTable(8)
        >>> len(table)
        10
        >>> table.cos(0)
        1.0
    """

    def __init__(self, n: int):
        validate_size(n)
        self.n = int(n)
        self.resolution = table_resolution(self.n)
        self.quarter = self.resolution // 4

        size = self.resolution + self.quarter
        values = np.empty(size, dtype=np.float64)
        for i in range(size):
            values[i] = math.sin(2 * math.pi * i / self.resolution)
        self._values = _freeze(values)

    @property
    def values(self) -> np.ndarray:
        """Read-only float64 view of the table."""
        return self._values

    def sin(self, h: int) -> float:
        return float(self._values[h])

    def cos(self, h: int) -> float:
        return float(self._values[h + self.quarter])

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, i):
        return self._values[i]

    def __repr__(self) -> str:
        return f"SineTable(n={self.n}, resolution={self.resolution})"


# =============================================================================
# Bit-reversal table
# =============================================================================

class BitReversalTable:
    """
    Bit-reversal permutation of [0, N).

    Entry i is i with its log2(N)-bit binary representation reversed.
    The permutation is its own inverse.

    The table is generated with a running reversed counter instead of
    reversing each index bit by bit: after recording j for index i, the
    next reversed value is found by clearing the leading run of set bits
    of j (from the most significant end) and setting the first clear one.
    """

    def __init__(self, n: int):
        self.bits = validate_size(n)
        self.n = int(n)

        values = np.empty(self.n, dtype=np.int64)
        half = self.n // 2
        j = 0
        for i in range(self.n):
            values[i] = j
            if i == self.n - 1:
                break
            k = half
            while k <= j:
                j -= k
                k //= 2
            j += k
        self._values = _freeze(values)

    @property
    def values(self) -> np.ndarray:
        """Read-only int64 view of the permutation."""
        return self._values

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, i):
        return self._values[i]

    def __iter__(self) -> Iterator[int]:
        return (int(j) for j in self._values)

    def __repr__(self) -> str:
        return f"BitReversalTable(n={self.n}, bits={self.bits})"
