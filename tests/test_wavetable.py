import math

import numpy as np
import pytest

from acidvoice.wavetable import MipMappedWaveTable, Waveform

N = MipMappedWaveTable.TABLE_LENGTH


def _table_with(waveform, symmetry=None):
    table = MipMappedWaveTable()
    if symmetry is not None:
        table.symmetry = symmetry
    table.waveform = waveform
    return table


def test_initial_tables_are_silent():
    table = MipMappedWaveTable()
    assert table.waveform == Waveform.SILENCE
    for t in range(MipMappedWaveTable.NUM_TABLES):
        assert np.all(table.table(t) == 0.0)


def test_sine_prototype_matches_sine():
    table = _table_with(Waveform.SINE)
    expected = np.sin(2.0 * math.pi * np.arange(N) / N)
    assert np.allclose(table.table(0)[:N], expected)


@pytest.mark.parametrize("t", [1, 2, 3, 4, 5])
def test_sine_survives_band_limiting(t):
    table = _table_with(Waveform.SINE)
    expected = np.sin(2.0 * math.pi * np.arange(N) / N)
    assert np.allclose(table.table(t)[:N], expected, atol=1e-9)


@pytest.mark.parametrize("waveform", list(Waveform)[1:])
def test_guard_samples_repeat_start(waveform):
    table = _table_with(waveform)
    for t in range(MipMappedWaveTable.NUM_TABLES):
        row = table.table(t)
        assert np.array_equal(row[N:], row[:4])


@pytest.mark.parametrize("t", range(1, 11))
def test_saw_tables_are_band_limited(t):
    table = _table_with(Waveform.SAW)
    spectrum = np.fft.rfft(table.table(t)[:N])
    assert np.allclose(spectrum[N >> (t + 1):], 0.0, atol=1e-7)
    # the band below the cutoff keeps its energy
    assert abs(spectrum[1]) > 1.0


@pytest.mark.parametrize("waveform", [Waveform.SAW, Waveform.SQUARE, Waveform.SQUARE303])
def test_band_limited_tables_have_no_dc(waveform):
    table = _table_with(waveform)
    for t in range(1, MipMappedWaveTable.NUM_TABLES):
        assert abs(np.mean(table.table(t)[:N])) < 1e-12


def test_triangle_shape():
    table = _table_with(Waveform.TRIANGLE)
    proto = table.table(0)[:N]
    assert proto[0] == 0.0
    assert proto[N // 4] == pytest.approx(1.0)
    assert proto[3 * N // 4] == pytest.approx(-1.0)
    assert proto.max() == pytest.approx(1.0)
    assert proto.min() == pytest.approx(-1.0)


def test_saw_shape():
    table = _table_with(Waveform.SAW)
    proto = table.table(0)[:N]
    assert proto[0] == 0.0
    assert proto.max() == pytest.approx(1.0)
    assert proto.min() == pytest.approx(-1.0)
    top = int(np.argmax(proto))
    assert proto[top + 1] == pytest.approx(-1.0)
    assert np.all(np.diff(proto[: top + 1]) > 0)


def test_saw_with_extreme_symmetry_is_finite():
    table = _table_with(Waveform.SAW, symmetry=0.0)
    proto = table.table(0)
    assert np.all(np.isfinite(proto))
    assert np.all(np.isfinite(table.table(5)))
    # with the rising part collapsed to one sample, the falling ramp starts at -1
    assert proto[1] == pytest.approx(-1.0)
    assert proto[:N].min() == pytest.approx(-1.0)


def test_square_symmetry_controls_pulse_width():
    counts = []
    for symmetry in (0.25, 0.5, 0.75):
        table = _table_with(Waveform.SQUARE, symmetry=symmetry)
        proto = table.table(0)[:N]
        assert set(np.unique(proto)) == {-1.0, 1.0}
        counts.append(int(np.sum(proto > 0)))
    assert counts[0] < counts[1] < counts[2]
    assert counts[1] == N // 2


def test_square303_stays_in_unit_range():
    table = _table_with(Waveform.SQUARE303)
    proto = table.table(0)[:N]
    assert np.all(proto <= 1.0)
    assert np.all(proto >= -1.0)
    assert proto.max() > 0.9
    assert proto.min() < -0.9


def test_square303_defaults():
    table = MipMappedWaveTable()
    assert table.tanh_shaper_drive == pytest.approx(36.9)
    assert table.tanh_shaper_offset == 4.37
    assert table.square_phase_shift == 180.0


def test_square303_parameters_rerender():
    table = _table_with(Waveform.SQUARE303)
    before = table.table(0)
    table.tanh_shaper_drive = 10.0
    assert table.tanh_shaper_drive == pytest.approx(10.0)
    assert not np.allclose(table.table(0), before)


def test_phase_shift_by_full_cycle_is_identity():
    table = _table_with(Waveform.SQUARE303)
    table.square_phase_shift = 0.0
    unshifted = table.table(0)
    table.square_phase_shift = 360.0
    assert np.allclose(table.table(0), unshifted)


def test_unknown_waveform_renders_sine():
    unknown = _table_with(99)
    sine = _table_with(Waveform.SINE)
    assert np.allclose(unknown.table(0), sine.table(0))


def test_negative_waveform_is_ignored():
    table = _table_with(Waveform.SAW)
    before = table.table(0)
    table.waveform = -1
    assert table.waveform == Waveform.SAW
    assert np.array_equal(table.table(0), before)


def test_symmetry_on_silence_renders_sine():
    table = MipMappedWaveTable()
    table.symmetry = 0.3
    sine = _table_with(Waveform.SINE)
    assert np.allclose(table.table(0), sine.table(0))


def test_value_linear_interpolates():
    table = _table_with(Waveform.SAW)
    row = table.table(0)
    assert table.value_linear(10.0, 0) == pytest.approx(row[10])
    assert table.value_linear(10.5, 0) == pytest.approx(0.5 * (row[10] + row[11]))
    assert table.value_at(10, 0.25, 0) == pytest.approx(0.75 * row[10] + 0.25 * row[11])


def test_value_linear_at_end_uses_guard_sample():
    table = _table_with(Waveform.SINE)
    row = table.table(3)
    assert table.value_linear(N - 0.5, 3) == pytest.approx(0.5 * (row[N - 1] + row[0]))


def test_table_index_is_clamped():
    table = _table_with(Waveform.SAW)
    assert table.value_linear(100.25, -3) == table.value_linear(100.25, 0)
    last = MipMappedWaveTable.NUM_TABLES - 1
    assert table.value_linear(100.25, 40) == table.value_linear(100.25, last)


def test_table_rejects_bad_index():
    table = MipMappedWaveTable()
    with pytest.raises(IndexError):
        table.table(MipMappedWaveTable.NUM_TABLES)
    with pytest.raises(IndexError):
        table.table(-1)


def test_table_returns_copy():
    table = _table_with(Waveform.SINE)
    row = table.table(0)
    row[:] = 0.0
    expected = np.sin(2.0 * math.pi * np.arange(N) / N)
    assert np.allclose(table.table(0)[:N], expected)