"""
In-place FFT Demo Visualization

Plots the windowed input, its amplitude spectrum, the reconstructed
signal and the window used for one demo run.

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import numpy as np
import matplotlib.pyplot as plt
import os

from fft_demo import DemoResult, run_demo
from fft_log import gain


def plot_demo(result: DemoResult, output_path: str = None):
    """
    Draw a 2x2 summary figure of a demo run.

    Args:
        result: Output of fft_demo.run_demo()
        output_path: Save the figure here when given

    Returns:
        The matplotlib Figure
    """
    n = result.n
    idx = np.arange(n)

    with plt.style.context('seaborn-v0_8-whitegrid'):
        fig = plt.figure(figsize=(14, 10))

        # =====================================================================
        # Plot 1: Windowed input
        # =====================================================================
        ax1 = fig.add_subplot(2, 2, 1)
        ax1.plot(idx, result.input_real, 'o-', markersize=4, label='Real', color='#3498db')
        ax1.plot(idx, result.input_imag, '--', label='Imag', color='#95a5a6')
        ax1.set_xlabel('Sample', fontsize=12)
        ax1.set_ylabel('Value', fontsize=12)
        ax1.set_title('Windowed Input', fontsize=14, fontweight='bold')
        ax1.legend(loc='upper right', fontsize=10)

        # =====================================================================
        # Plot 2: Amplitude spectrum (gain corrected by ACF)
        # =====================================================================
        ax2 = fig.add_subplot(2, 2, 2)
        g = gain(result.forward_real, result.forward_imag, acf=result.acf)
        half = max(n // 2, 1)
        ax2.bar(idx[:half], g[:half], color='#9b59b6', alpha=0.8, edgecolor='black', linewidth=0.5)
        ax2.set_xlabel('Bin', fontsize=12)
        ax2.set_ylabel('Amplitude', fontsize=12)
        ax2.set_title('Amplitude Spectrum (ACF corrected)', fontsize=14, fontweight='bold')
        ax2.grid(True, alpha=0.3, axis='y')

        peak = int(np.argmax(g[:half]))
        ax2.annotate(f'bin {peak}: {g[peak]:.3f}',
                     xy=(peak, g[peak]), xytext=(peak + half / 4, g[peak] * 0.8),
                     fontsize=10, ha='center',
                     arrowprops=dict(arrowstyle='->', color='gray'),
                     bbox=dict(boxstyle='round', facecolor='lightyellow', alpha=0.8))

        # =====================================================================
        # Plot 3: Reconstruction
        # =====================================================================
        ax3 = fig.add_subplot(2, 2, 3)
        ax3.plot(idx, result.inverse_real, 's-', markersize=4, label='Inverse', color='#2ecc71')
        ax3.plot(idx, result.input_real, ':', linewidth=2, label='Input', color='#e74c3c')
        ax3.set_xlabel('Sample', fontsize=12)
        ax3.set_ylabel('Value', fontsize=12)
        err = np.max(np.abs(result.inverse_real - result.input_real))
        ax3.set_title(f'Inverse Transform (max error {err:.1e})', fontsize=14, fontweight='bold')
        ax3.legend(loc='upper right', fontsize=10)

        # =====================================================================
        # Plot 4: Window
        # =====================================================================
        ax4 = fig.add_subplot(2, 2, 4)
        ax4.plot(idx, result.window, '-', linewidth=2, color='#f39c12')
        ax4.axhline(y=result.acf, color='#3498db', linestyle='--', linewidth=2, alpha=0.7,
                    label=f'ACF: {result.acf:.3f}')
        ax4.set_xlabel('Sample', fontsize=12)
        ax4.set_ylabel('Weight', fontsize=12)
        ax4.set_title('Window', fontsize=14, fontweight='bold')
        ax4.legend(loc='upper right', fontsize=10)

        fig.suptitle(f'In-place Radix-2 FFT - N = {n}', fontsize=16, fontweight='bold')
        fig.tight_layout()

    if output_path:
        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
        fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white', edgecolor='none')

    return fig


if __name__ == "__main__":
    output_dir = os.path.dirname(os.path.abspath(__file__))
    output_path = os.path.join(output_dir, 'results', 'fft_demo.png')
    plot_demo(run_demo(), output_path)
    print(f"Chart saved to: {output_path}")
    plt.show()
