"""
Demo, Log Export and Plot Tests

Author: Andrey Maltsev
Project: In-place Radix-2 FFT Engine
"""

import numpy as np
import pytest
import sys
import os

import matplotlib
matplotlib.use("Agg")

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from fft_demo import run_demo, main
from fft_log import LogRecord, build_records, format_record, gain, write_log
from fft_tables import FFTSizeError


def test_format_record_layout():
    record = LogRecord(3, 1.5, 0.0, -0.25, 0.125, 1.5, -0.0, 0.5)

    assert format_record(record) == (
        "3,1.500000,0.000000,,3,-0.250000,0.125000,,3,1.500000,-0.000000,,3,0.500000"
    )


def test_build_records_length_check():
    n = 4
    ok = np.zeros(n)
    with pytest.raises(ValueError):
        build_records((ok, ok), (ok, np.zeros(3)), (ok, ok), ok)


def test_gain_doubles_coefficient_magnitude():
    x = np.array([3.0, 0.0])
    y = np.array([4.0, 0.0])

    np.testing.assert_allclose(gain(x, y), [10.0, 0.0])
    np.testing.assert_allclose(gain(x, y, acf=0.5), [20.0, 0.0])


def test_demo_recovers_tone_amplitude():
    result = run_demo()

    assert result.n == 64
    assert result.acf == pytest.approx(0.5)

    g = gain(result.forward_real, result.forward_imag, acf=result.acf)
    assert g[3] == pytest.approx(6.0, abs=1e-9)
    assert g[61] == pytest.approx(6.0, abs=1e-9)

    np.testing.assert_allclose(result.inverse_real, result.input_real, atol=1e-12)
    np.testing.assert_allclose(result.inverse_imag, result.input_imag, atol=1e-12)


def test_demo_numba_matches_python():
    a = run_demo(jit=False)
    b = run_demo(jit=True)

    np.testing.assert_allclose(a.forward_real, b.forward_real, atol=1e-12)
    np.testing.assert_allclose(a.forward_imag, b.forward_imag, atol=1e-12)


def test_demo_rejects_bad_size():
    with pytest.raises(FFTSizeError):
        run_demo(n=60)


def test_main_writes_log(tmp_path, capsys):
    path = tmp_path / "Log.csv"

    assert main(output_path=str(path)) == 0

    out = capsys.readouterr().out
    assert "> acf = 0.500000" in out
    assert out.strip().endswith("fin.")

    lines = path.read_text().splitlines()
    assert len(lines) == 64
    fields = lines[5].split(",")
    assert len(fields) == 14
    assert fields[0] == fields[4] == fields[8] == fields[12] == "5"
    assert fields[3] == fields[7] == fields[11] == ""
    assert float(fields[13]) == pytest.approx(0.5 - 0.5 * np.cos(2 * np.pi * 5 / 64), abs=1e-6)


def test_acf_reported_before_transforms(monkeypatch, capsys):
    import fft_demo

    def fail_forward(self, x, y):
        raise RuntimeError("forward reached")

    monkeypatch.setattr(fft_demo.FFTEngine, "forward", fail_forward)

    with pytest.raises(RuntimeError):
        run_demo(verbose=True)

    assert capsys.readouterr().out == "> acf = 0.500000\n"


def test_run_demo_is_quiet_by_default(capsys):
    run_demo()
    assert capsys.readouterr().out == ""


def test_main_reports_unwritable_log(tmp_path, capsys):
    assert main(output_path=str(tmp_path)) == 1
    assert "File open Error" in capsys.readouterr().out


def test_write_log_round_values(tmp_path):
    path = tmp_path / "log.csv"
    write_log(str(path), [LogRecord(0, 1.0, 0.0, 0.5, 0.0, 1.0, 0.0, 0.0)])

    assert path.read_text() == (
        "0,1.000000,0.000000,,0,0.500000,0.000000,,0,1.000000,0.000000,,0,0.000000\n"
    )


def test_plot_demo_saves_figure(tmp_path):
    import matplotlib.pyplot as plt
    from fft_plot import plot_demo

    path = tmp_path / "demo.png"
    fig = plot_demo(run_demo(n=32), str(path))
    plt.close(fig)

    assert path.exists()
    assert path.stat().st_size > 0
