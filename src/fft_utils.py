"""
Utility Functions for the In-place FFT Project

Common helpers for size checks, validation, timing and test signals.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import numpy as np
import time
from typing import Callable, List, Dict, Any, Tuple
import json
from datetime import datetime


def is_power_of_two(n: int) -> bool:
    """Check if n is a power of 2."""
    return n > 0 and (n & (n - 1)) == 0


def split_complex(z: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a complex array into contiguous float64 real and imaginary buffers.

    The returned arrays are fresh copies, safe to hand to an in-place
    transform.
    """
    z = np.asarray(z)
    x = np.ascontiguousarray(z.real, dtype=np.float64).copy()
    y = np.ascontiguousarray(z.imag, dtype=np.float64).copy()
    return x, y


def validate_fft_result(
    result: np.ndarray,
    expected: np.ndarray,
    tolerance: float = 1e-10
) -> Dict[str, Any]:
    """
    Validate a transform result against expected output.

    Returns:
        Dictionary with validation metrics
    """
    abs_diff = np.abs(np.asarray(result) - np.asarray(expected))

    return {
        'max_error': float(np.max(abs_diff)),
        'mean_error': float(np.mean(abs_diff)),
        'rms_error': float(np.sqrt(np.mean(abs_diff**2))),
        'passed': bool(np.max(abs_diff) < tolerance),
        'tolerance': tolerance
    }


def benchmark_function(
    func: Callable,
    make_args: Callable[[], tuple],
    num_warmup: int = 3,
    num_runs: int = 10
) -> Dict[str, float]:
    """
    Benchmark a function that mutates its arguments.

    A fresh argument tuple is built by make_args() before every call so an
    in-place transform never runs on its own previous output. Building the
    arguments is not timed.

    Args:
        func: Function to benchmark
        make_args: Factory returning the positional arguments for one call
        num_warmup: Number of warmup runs (also triggers JIT compilation)
        num_runs: Number of timed runs

    Returns:
        Dictionary with timing statistics
    """
    for _ in range(num_warmup):
        func(*make_args())

    times = []
    for _ in range(num_runs):
        args = make_args()
        start = time.perf_counter()
        func(*args)
        times.append(time.perf_counter() - start)

    times = np.array(times) * 1000  # Convert to ms

    return {
        'min_ms': float(np.min(times)),
        'max_ms': float(np.max(times)),
        'mean_ms': float(np.mean(times)),
        'median_ms': float(np.median(times)),
        'std_ms': float(np.std(times)),
        'num_runs': num_runs
    }


def compute_fft_metrics(N: int, time_ms: float) -> Dict[str, float]:
    """
    Compute transform performance metrics.

    Args:
        N: FFT size
        time_ms: Execution time in milliseconds

    Returns:
        Dictionary with performance metrics
    """
    # 5N*log2(N) flops, plus 2N divisions for the forward normalisation
    flops = 5 * N * np.log2(N) + 2 * N if N > 1 else 0

    # Two float64 buffers, each read and written once per pass
    bytes_accessed = 2 * 2 * N * 8

    time_s = time_ms / 1000

    return {
        'N': N,
        'time_ms': time_ms,
        'gflops': flops / (time_s * 1e9),
        'bandwidth_gb_s': bytes_accessed / (time_s * 1e9),
        'throughput_kfft_s': 1 / (time_s * 1e3)
    }


def generate_test_signal(
    N: int,
    signal_type: str = 'random',
    **kwargs
) -> np.ndarray:
    """
    Generate test signals for FFT testing.

    Args:
        N: Signal length
        signal_type: One of 'random', 'tone', 'sine', 'impulse',
                     'chirp', 'mixed'
        **kwargs: Additional parameters for signal generation

    Returns:
        Complex numpy array
    """
    n = np.arange(N)

    if signal_type == 'random':
        rng = np.random.default_rng(kwargs.get('seed'))
        return rng.standard_normal(N) + 1j * rng.standard_normal(N)

    elif signal_type == 'tone':
        # Cosine tone; 'freq' may be fractional for an off-bin tone
        freq = kwargs.get('freq', 3)
        amplitude = kwargs.get('amplitude', 1.0)
        phase = kwargs.get('phase', 0.0)
        tone = amplitude * np.cos(2 * np.pi * freq * n / N + phase)
        return tone.astype(np.complex128)

    elif signal_type == 'sine':
        freq = kwargs.get('freq', 8)
        return np.sin(2 * np.pi * freq * n / N).astype(np.complex128)

    elif signal_type == 'impulse':
        position = kwargs.get('position', 0)
        x = np.zeros(N, dtype=np.complex128)
        x[position] = 1
        return x

    elif signal_type == 'chirp':
        f0 = kwargs.get('f0', 0)
        f1 = kwargs.get('f1', N // 4)
        phase = 2 * np.pi * (f0 * n / N + (f1 - f0) * n**2 / (2 * N**2))
        return np.exp(1j * phase)

    elif signal_type == 'mixed':
        freqs = kwargs.get('freqs', [3, 9])
        amps = kwargs.get('amps', [1.0] * len(freqs))
        x = np.zeros(N, dtype=np.complex128)
        for f, a in zip(freqs, amps):
            x += a * np.cos(2 * np.pi * f * n / N)
        return x

    else:
        raise ValueError(f"Unknown signal type: {signal_type}")


def save_benchmark_results(
    results: Dict[str, Any],
    filename: str,
    metadata: Dict[str, Any] = None
):
    """Save benchmark results to JSON file."""
    output = {
        'timestamp': datetime.now().isoformat(),
        'metadata': metadata or {},
        'results': results
    }

    def convert(obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, dict):
            return {k: convert(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [convert(v) for v in obj]
        return obj

    with open(filename, 'w') as f:
        json.dump(convert(output), f, indent=2)


def print_comparison_table(
    implementations: Dict[str, List[float]],
    sizes: List[int],
    metric: str = "Time (ms)"
):
    """
    Print a comparison table for multiple implementations.

    Args:
        implementations: Dict mapping name -> list of values
        sizes: List of FFT sizes
        metric: Name of the metric
    """
    names = list(implementations.keys())

    print(metric)
    header = f"{'Size':>12}"
    for name in names:
        header += f" {name:>14}"
    print(header)
    print("-" * len(header))

    for i, N in enumerate(sizes):
        row = f"{N:>12,}"
        for name in names:
            val = implementations[name][i]
            if val is not None:
                row += f" {val:>14.3f}"
            else:
                row += f" {'N/A':>14}"
        print(row)
