"""Accent envelope: extra amplitude and cutoff boost for accented notes."""

from __future__ import annotations

import math

from .onepole import OnePoleFilter


def _decay_factor(time: float, sample_rate: float) -> float:
    product = time * sample_rate
    if product == 0.0:
        return 0.0
    return math.exp(-1.0 / product)


class _CutoffEnvelope:
    """Peak-following envelope with a resonance-dependent decay."""

    def __init__(self) -> None:
        self._sample_rate = 0.0
        self._reso = 0.0
        self.value = 0.0
        self._a = 0.0
        self._c = 0.0

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        self._sample_rate = value
        self._update_coefficients()

    @property
    def resonance(self) -> float:
        return self._reso

    @resonance.setter
    def resonance(self, value: float) -> None:
        self._reso = value
        self._update_coefficients()

    def reset(self) -> None:
        self.value = 0.0

    def get_sample(self, x: float) -> float:
        self.value *= self._c
        if x > self.value:
            self.value += self._a * (x - self.value)
        return self.value

    def _update_coefficients(self) -> None:
        decay = 0.3 * (100e3 + self._reso * 100e3) * 1e-6
        attack = 0.7 * (100e3 * 1e-6)
        self._c = _decay_factor(decay, self._sample_rate)
        self._a = 1.0 - _decay_factor(attack, self._sample_rate)


class AccentEnvelope:
    """Derives the accent VCA boost and cutoff shift from the filter envelope."""

    MAX_ACCENT_EXTRA_GAIN = 2.4

    def __init__(self, sample_rate: float = 0.0) -> None:
        self._vca_filter = OnePoleFilter()
        self._vca_filter.cutoff = 100.0
        self._cutoff_env = _CutoffEnvelope()
        self.accent = 0.0
        self._sample_rate = 0.0
        self._vca_out = 0.0
        self._cutoff_shift = 0.0
        if sample_rate:
            self.sample_rate = sample_rate

    @property
    def sample_rate(self) -> float:
        """The sample rate in Hz."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        self._sample_rate = value
        self._vca_filter.sample_rate = value
        self._cutoff_env.sample_rate = value

    @property
    def resonance(self) -> float:
        """Normalized filter resonance (0...1) that lengthens the cutoff decay."""
        return self._cutoff_env.resonance

    @resonance.setter
    def resonance(self, value: float) -> None:
        self._cutoff_env.resonance = value

    def reset(self) -> None:
        """Clear all envelope state."""
        self._cutoff_env.reset()
        self._vca_filter.reset()
        self._vca_out = 0.0
        self._cutoff_shift = 0.0

    def tick(self, filter_env_value: float, accent_enabled: bool) -> None:
        """Advance by one sample given the filter envelope value."""
        value = filter_env_value * (self.accent if accent_enabled else 0.0)
        self._vca_out = self._vca_filter.get_sample(value) * self.MAX_ACCENT_EXTRA_GAIN
        self._cutoff_shift = self._cutoff_env.get_sample(value)

    @property
    def accent_vca_boost(self) -> float:
        """The amplitude factor contributed by the accent."""
        return 1.0 + self._vca_out

    @property
    def cutoff_shift(self) -> float:
        """The cutoff multiplier contributed by the accent."""
        return math.exp(self.accent * self._cutoff_shift)