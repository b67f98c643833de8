"""
In-place FFT Benchmark Suite

Times the pure-Python reference transform, the numba kernels and NumPy
(which uses pocketfft internally) across power-of-two sizes.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""
import numpy as np
import sys
import os
from datetime import datetime

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fft_inplace import FFTEngine
from fft_utils import benchmark_function, compute_fft_metrics, save_benchmark_results, print_comparison_table


# Pure-Python loops get slow quickly; skip the reference above this size
MAX_REFERENCE_SIZE = 1 << 14


def benchmark_implementation(
    name: str,
    make_call,
    sizes: list,
    max_size: int = None,
    num_warmup: int = 3,
    num_runs: int = 10
) -> dict:
    """
    Benchmark one transform implementation across multiple sizes.

    Args:
        name: Implementation name
        make_call: make_call(N) -> (func, make_args) for one size
        sizes: List of FFT sizes
        max_size: Record N/A for sizes above this
        num_warmup: Warmup runs
        num_runs: Timed runs

    Returns:
        Dictionary with benchmark results
    """
    results = {
        'name': name,
        'sizes': sizes,
        'times_ms': [],
        'gflops': [],
        'bandwidth_gb_s': []
    }

    for N in sizes:
        if max_size is not None and N > max_size:
            results['times_ms'].append(None)
            results['gflops'].append(None)
            results['bandwidth_gb_s'].append(None)
            continue

        func, make_args = make_call(N)
        stats = benchmark_function(func, make_args, num_warmup, num_runs)
        metrics = compute_fft_metrics(N, stats['median_ms'])

        results['times_ms'].append(stats['median_ms'])
        results['gflops'].append(metrics['gflops'])
        results['bandwidth_gb_s'].append(metrics['bandwidth_gb_s'])

    return results


def _random_buffers(N: int):
    rng = np.random.default_rng(0)
    x0 = rng.standard_normal(N)
    y0 = rng.standard_normal(N)
    return lambda: (x0.copy(), y0.copy())


def _engine_call(jit: bool):
    def make_call(N):
        engine = FFTEngine(N, jit=jit)
        return engine.forward, _random_buffers(N)
    return make_call


def _numpy_call(N):
    make_pair = _random_buffers(N)
    return (lambda x, y: np.fft.fft(x + 1j * y) / N), make_pair


def run_benchmarks(sizes: list = None) -> dict:
    """Run benchmarks for all implementations."""

    if sizes is None:
        sizes = [2**k for k in range(6, 19)]

    print("=" * 70)
    print("In-place FFT Benchmark Suite")
    print("=" * 70)
    print(f"Sizes: {sizes[0]:,} to {sizes[-1]:,}")
    print(f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 70)

    all_results = {
        'timestamp': datetime.now().isoformat(),
        'sizes': sizes,
        'implementations': {}
    }

    print("\n[1/3] Benchmarking NumPy FFT (reference)...")
    all_results['implementations']['numpy'] = benchmark_implementation(
        "NumPy", _numpy_call, sizes
    )

    print("[2/3] Benchmarking pure-Python in-place...")
    all_results['implementations']['python'] = benchmark_implementation(
        "Python", _engine_call(jit=False), sizes, max_size=MAX_REFERENCE_SIZE, num_runs=3
    )

    print("[3/3] Benchmarking numba in-place...")
    all_results['implementations']['numba'] = benchmark_implementation(
        "Numba", _engine_call(jit=True), sizes
    )

    return all_results


def print_results(results: dict):
    """Print time and GFLOPS tables."""
    impls = results['implementations']
    sizes = results['sizes']

    print("\n" + "=" * 70)
    print_comparison_table(
        {impl['name']: impl['times_ms'] for impl in impls.values()},
        sizes, "Execution Time (ms)"
    )
    print("\n" + "=" * 70)
    print_comparison_table(
        {impl['name']: impl['gflops'] for impl in impls.values()},
        sizes, "Performance (GFLOPS)"
    )
    print("=" * 70)

    numba_times = impls['numba']['times_ms']
    numpy_times = impls['numpy']['times_ms']
    print(f"\nNumPy vs Numba at N={sizes[-1]:,}: "
          f"{numba_times[-1] / numpy_times[-1]:.1f}x")


def main():
    sizes = [2**k for k in range(6, 17)]

    results = run_benchmarks(sizes)
    print_results(results)

    output_dir = os.path.join(os.path.dirname(__file__), 'results')
    os.makedirs(output_dir, exist_ok=True)
    output_file = os.path.join(output_dir, 'inplace_benchmark.json')
    save_benchmark_results(results, output_file, {
        'hardware': 'CPU',
        'python_version': sys.version
    })
    print(f"\nResults saved to: {output_file}")


if __name__ == "__main__":
    main()
