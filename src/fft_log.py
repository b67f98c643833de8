"""
Result Logging for the In-place FFT Demo

Writes one delimited text line per sample index with the windowed input,
the forward coefficients, the reconstructed signal and the window weight:

    i,x1,y1,,i,x2,y2,,i,x3,y3,,i,w

Each group repeats the index and groups are separated by an empty column,
so the file pastes straight into a spreadsheet as four side-by-side
tables.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence


LOG_LINE_FORMAT = "%d,%f,%f,,%d,%f,%f,,%d,%f,%f,,%d,%f"


@dataclass
class LogRecord:
    """One line of the log: all values recorded for a sample index."""
    index: int
    input_real: float
    input_imag: float
    forward_real: float
    forward_imag: float
    inverse_real: float
    inverse_imag: float
    window: float


def gain(x, y, acf: Optional[float] = None) -> np.ndarray:
    """
    Tone amplitude per bin from forward coefficients.

    Gain = 2 * sqrt(x^2 + y^2). The factor of 2 is a fixed convention of
    this log and is not part of the transform scaling.

    Args:
        x: Real parts of the forward result
        y: Imaginary parts of the forward result
        acf: Window amplitude correction factor to divide out (optional)
    """
    g = 2 * np.sqrt(np.asarray(x, dtype=np.float64) ** 2
                    + np.asarray(y, dtype=np.float64) ** 2)
    if acf is not None:
        g = g / acf
    return g


def build_records(
    inputs: Sequence[Sequence[float]],
    forward: Sequence[Sequence[float]],
    inverse: Sequence[Sequence[float]],
    window: Sequence[float]
) -> List[LogRecord]:
    """
    Zip the demo arrays into log records.

    Args:
        inputs: (x, y) windowed input
        forward: (x, y) forward transform
        inverse: (x, y) inverse of the forward result
        window: window weights
    """
    x1, y1 = inputs
    x2, y2 = forward
    x3, y3 = inverse
    n = len(window)
    for arr in (x1, y1, x2, y2, x3, y3):
        if len(arr) != n:
            raise ValueError(f"All log columns must have length {n}")

    return [
        LogRecord(i, float(x1[i]), float(y1[i]), float(x2[i]), float(y2[i]),
                  float(x3[i]), float(y3[i]), float(window[i]))
        for i in range(n)
    ]


def format_record(record: LogRecord) -> str:
    i = record.index
    return LOG_LINE_FORMAT % (
        i, record.input_real, record.input_imag,
        i, record.forward_real, record.forward_imag,
        i, record.inverse_real, record.inverse_imag,
        i, record.window,
    )


def write_log(path: str, records: Iterable[LogRecord]) -> None:
    """Write records to path, one line each. OSError propagates."""
    with open(path, 'w') as f:
        for record in records:
            f.write(format_record(record) + "\n")
