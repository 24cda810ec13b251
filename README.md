# acidvoice

Sound-generation building blocks for a monophonic acid bass voice, written
in plain Python with NumPy for the spectral work. Every processor works one
sample at a time through a `get_sample` method.

## Contents

- `acidvoice.realfunctions` – scalar helpers: `db_to_amp`, `amp_to_db`,
  `double_exponent`, `below_or_above`, `clip`, `fold_over`,
  `evaluate_quartic`, `integer_power`, `random_between`, `tanh_approx`,
  periodic `saw_wave` / `sqr_wave` / `tri_wave`, and `sin_cos` with its
  parabolic counterpart `sin_cos_approx` (both return a `(sin, cos)` tuple).
- `acidvoice.buffers` – functions that take a sequence and return a new
  list or a value: `circular_shift`, `clip_buffer`, `max_abs`, `max_index`,
  `min_index`, `mean`, `median`, `normalize`, `remove_mean`. Functions that
  need values raise `ValueError` on an empty buffer, and `normalize` raises
  it on an all-zero buffer.
- `acidvoice.onepole` – `OnePoleFilter` with the modes of `OnePoleMode`
  (bypass, lowpass, highpass, low/high shelving, allpass). Set
  `sample_rate`, `mode`, `cutoff`, `shelving_gain` or `shelving_gain_db` as
  attributes; a non-positive shelving gain raises `ValueError`.
- `acidvoice.leaky` – `LeakyIntegrator`, a lowpass whose `time_constant` is
  given in milliseconds, and the static `LeakyIntegrator.normalizer(tau1,
  tau2, sample_rate)` that scales the peak of two cascaded RC stages to one.
- `acidvoice.accent` – `AccentEnvelope`, which turns the filter envelope
  value of each sample (`tick`) into an amplifier boost
  (`accent_vca_boost`) and a cutoff multiplier (`cutoff_shift`).
- `acidvoice.notes` – `MidiNoteEvent` (key and velocity in 0…127; events
  compare equal by key) and `MidiNoteList`, a stack of held notes holding
  at most 128 entries, most recent first, that drops the oldest when full.
- `acidvoice.fourier` – `FourierTransformer`, a power-of-two FFT with
  `Direction` and `NormalizationMode` options, complex transforms and
  real-signal helpers using a packed spectrum layout (DC at index 0,
  Nyquist at index 1, then interleaved real/imaginary parts).
- `acidvoice.wavetable` – `MipMappedWaveTable`, twelve tables of 2048
  samples, one per octave, for the `Waveform` shapes; read with
  `value_linear(phase_index, table_index)` or `value_at`, and inspect a
  table with `table(index)`.
- `acidvoice.teebee` – `TeeBeeFilter`, a four-pole ladder filter with a
  highpass in its feedback path and a tanh nonlinearity, with the response
  types of `FilterMode` (the default is `TB_303`).

## Installation

```
pip install .
```

## Example

```python
from acidvoice.onepole import OnePoleFilter, OnePoleMode
from acidvoice.teebee import TeeBeeFilter
from acidvoice.wavetable import MipMappedWaveTable, Waveform

table = MipMappedWaveTable()
table.waveform = Waveform.SAW303

ladder = TeeBeeFilter()
ladder.sample_rate = 44100.0
ladder.set_cutoff(800.0, True)
ladder.set_resonance(70.0, True)

highpass = OnePoleFilter()
highpass.mode = OnePoleMode.HIGHPASS
highpass.cutoff = 44.486

phase, increment = 0.0, 2048 * 110.0 / 44100.0
out = []
for _ in range(1000):
    x = table.value_linear(phase, 0)
    out.append(ladder.get_sample(highpass.get_sample(x)))
    phase = (phase + increment) % 2048
```

## What it does not do

The package provides the parts, not a finished instrument. There is no
complete voice that ties oscillator, envelopes and filters together, no
amplitude or filter envelope generator other than the accent envelope, no
step sequencer, no MIDI input, no audio output or file writing, and no
command-line program. Wiring the parts into a playable synthesizer is left
to the calling code, as in the example above.

## Tests

```
pip install .[test]
pytest
```