"""A ladder lowpass modelled on the filter of a classic bass-line synthesizer."""

from __future__ import annotations

import math
from enum import IntEnum

from .onepole import OnePoleFilter, OnePoleMode
from .realfunctions import ONE_OVER_SQRT2, PI, db_to_amp, sin_cos


class FilterMode(IntEnum):
    """Response types; each combines the four ladder stage outputs differently."""

    FLAT = 0
    LP_6 = 1
    LP_12 = 2
    LP_18 = 3
    LP_24 = 4
    HP_6 = 5
    HP_12 = 6
    HP_18 = 7
    HP_24 = 8
    BP_12_12 = 9
    BP_6_18 = 10
    BP_18_6 = 11
    BP_6_12 = 12
    BP_12_6 = 13
    BP_6_6 = 14
    TB_303 = 15


NUM_MODES = len(FilterMode)

_STAGE_MIX: dict[int, tuple[float, float, float, float, float]] = {
    FilterMode.FLAT: (1.0, 0.0, 0.0, 0.0, 0.0),
    FilterMode.LP_6: (0.0, 1.0, 0.0, 0.0, 0.0),
    FilterMode.LP_12: (0.0, 0.0, 1.0, 0.0, 0.0),
    FilterMode.LP_18: (0.0, 0.0, 0.0, 1.0, 0.0),
    FilterMode.LP_24: (0.0, 0.0, 0.0, 0.0, 1.0),
    FilterMode.HP_6: (1.0, -1.0, 0.0, 0.0, 0.0),
    FilterMode.HP_12: (1.0, -2.0, 1.0, 0.0, 0.0),
    FilterMode.HP_18: (1.0, -3.0, 3.0, -1.0, 0.0),
    FilterMode.HP_24: (1.0, -4.0, 6.0, -4.0, 1.0),
    FilterMode.BP_12_12: (0.0, 0.0, 1.0, -2.0, 1.0),
    FilterMode.BP_6_18: (0.0, 0.0, 0.0, 1.0, -1.0),
    FilterMode.BP_18_6: (0.0, 1.0, -3.0, 3.0, -1.0),
    FilterMode.BP_6_12: (0.0, 0.0, 1.0, -1.0, 0.0),
    FilterMode.BP_12_6: (0.0, 1.0, -2.0, 1.0, 0.0),
    FilterMode.BP_6_6: (0.0, 1.0, -1.0, 0.0, 0.0),
}
_FLAT_MIX = _STAGE_MIX[FilterMode.FLAT]


class TeeBeeFilter:
    """Four-pole ladder filter with a highpass in its feedback path."""

    MIN_CUTOFF = 200.0
    MAX_CUTOFF = 20000.0

    def __init__(self) -> None:
        self._cutoff = 1000.0
        self._drive = 0.0
        self._drive_factor = 1.0
        self._resonance_raw = 0.0
        self._resonance_skewed = 0.0
        self.g = 1.0
        self.b0 = 0.0
        self.a1 = 0.0
        self.k = 0.0
        self._sample_rate = 44100.0
        self._two_pi_over_sample_rate = 2.0 * PI / self._sample_rate
        self._mix = _FLAT_MIX
        self._mode = int(FilterMode.FLAT)
        self.y1 = self.y2 = self.y3 = self.y4 = 0.0

        self._feedback_highpass = OnePoleFilter()
        self._feedback_highpass.mode = OnePoleMode.HIGHPASS
        self._feedback_highpass.cutoff = 15.0

        self.mode = FilterMode.TB_303
        self.calculate_coefficients_exact()
        self.reset()

    # parameters

    @property
    def sample_rate(self) -> float:
        """The sample rate in Hz; non-positive values are ignored."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        if value > 0.0:
            self._sample_rate = value
        self._two_pi_over_sample_rate = 2.0 * PI / self._sample_rate
        self._feedback_highpass.sample_rate = value
        self.calculate_coefficients_exact()

    @property
    def cutoff(self) -> float:
        """The cutoff frequency in Hz, kept within 200...20000."""
        return self._cutoff

    @cutoff.setter
    def cutoff(self, value: float) -> None:
        self.set_cutoff(value)

    @property
    def resonance(self) -> float:
        """The resonance in percent, where 100 is self-oscillation."""
        return 100.0 * self._resonance_raw

    @resonance.setter
    def resonance(self, value: float) -> None:
        self.set_resonance(value)

    @property
    def drive(self) -> float:
        """The input drive in decibels."""
        return self._drive

    @drive.setter
    def drive(self, value: float) -> None:
        self._drive = value
        self._drive_factor = db_to_amp(value)

    @property
    def mode(self) -> int:
        """The response type (see :class:`FilterMode`); out-of-range values are ignored."""
        return self._mode

    @mode.setter
    def mode(self, value: int) -> None:
        value = int(value)
        if 0 <= value < NUM_MODES:
            self._mode = value
            self._mix = _STAGE_MIX.get(value, _FLAT_MIX)
        self.calculate_coefficients_approx4()

    @property
    def feedback_highpass_cutoff(self) -> float:
        """The cutoff in Hz of the highpass inside the feedback loop."""
        return self._feedback_highpass.cutoff

    @feedback_highpass_cutoff.setter
    def feedback_highpass_cutoff(self, value: float) -> None:
        self._feedback_highpass.cutoff = value

    def set_cutoff(self, cutoff: float, update_coefficients: bool = True) -> None:
        """Set the cutoff, optionally deferring the coefficient update."""
        if cutoff == self._cutoff:
            return
        self._cutoff = min(max(cutoff, self.MIN_CUTOFF), self.MAX_CUTOFF)
        if update_coefficients:
            self.calculate_coefficients_approx4()

    def set_resonance(self, resonance: float, update_coefficients: bool = True) -> None:
        """Set the resonance in percent, optionally deferring the coefficient update."""
        self._resonance_raw = 0.01 * resonance
        if update_coefficients:
            self.calculate_coefficients_approx4()

    # coefficients

    def calculate_coefficients_exact(self) -> None:
        """Recompute the coefficients with the exact formulas."""
        wc = self._two_pi_over_sample_rate * self._cutoff
        s, c = sin_cos(wc)
        t = math.tan(0.25 * (wc - PI))
        r = self._resonance_skewed

        a1_full_res = t / (s - c * t)
        a1_no_res = -math.exp(-wc)
        self.a1 = r * a1_full_res + (1.0 - r) * a1_no_res
        self.b0 = 1.0 + self.a1

        gsq = self.b0 * self.b0 / (1.0 + self.a1 * self.a1 + 2.0 * self.a1 * c)
        self.k = r / (gsq * gsq)
        if self._mode == FilterMode.TB_303:
            self.k *= 17.0 / 4.0

    def calculate_coefficients_approx4(self) -> None:
        """Recompute the coefficients with polynomial approximations valid up to wc = pi/4."""
        wc = self._two_pi_over_sample_rate * self._cutoff
        wc2 = wc * wc
        reso_adj = 0.6420885732 * (0.01432831911556 * self._cutoff) ** 0.2463389193 - 0.6083005244
        reso_adj = min(max(reso_adj, 0.25), 1.0)
        self._resonance_skewed = (1.0 - math.exp(-3.0 * self._resonance_raw * reso_adj)) / (
            1.0 - math.exp(-3.0)
        )
        r = self._resonance_skewed

        tmp = wc2 * -1.341281325101042e-02 + 8.168739417977708e-02 * wc - 2.365036766021623e-01
        tmp = wc2 * tmp + 4.439739664918068e-01 * wc - 6.297350825423579e-01
        tmp = wc2 * tmp + 7.529691648678890e-01 * wc - 8.249882473764324e-01
        tmp = wc2 * tmp + 8.736418933533319e-01 * wc - 9.164580250284832e-01
        tmp = wc2 * tmp + 9.583192455599817e-01 * wc - 9.999994950291231e-01
        self.a1 = wc2 * tmp + 9.999999927726119e-01 * wc - 9.999999999857464e-01
        self.b0 = 1.0 + self.a1

        tmp = wc2 * -4.554677015609929e-05 - 2.022131730719448e-05 * wc + 2.784706718370008e-03
        tmp = wc2 * tmp + 2.079921151733780e-03 * wc - 8.333236384240325e-02
        tmp = wc2 * tmp - 1.666668203490468e-01 * wc + 1.000000012124230e00
        tmp = wc2 * tmp + 3.999999999650040e00 * wc + 4.000000000000113e00
        self.k = r * tmp
        self.g = 1.0

        if self._mode == FilterMode.TB_303:
            fx = wc * ONE_OVER_SQRT2 / (2 * PI)
            self.b0 = (0.00045522346 + 6.1922189 * fx) / (
                1.0 + 12.358354 * fx + 4.4156345 * (fx * fx)
            )
            k = (
                fx
                * (
                    fx
                    * (
                        fx
                        * (
                            fx * (fx * (fx + 7198.6997) - 5837.7917)
                            - 476.47308
                        )
                        + 614.95611
                    )
                    + 213.87126
                )
                + 16.998792
            )
            g = k / 17.0
            g = (g - 1.0) * r + 1.0
            self.g = g * (1.0 + r)
            self.k = k * r

    # processing

    def shape(self, x: float) -> float:
        """The saturating nonlinearity in the feedback path."""
        return math.tanh(x)

    def get_sample(self, x: float) -> float:
        """Filter one input sample and return the output sample."""
        b0 = self.b0
        if self._mode == FilterMode.TB_303:
            feedback = self._feedback_highpass.get_sample(self.k * self.shape(self.y4))
            self.y1 += 2 * b0 * (x - feedback - self.y1 + self.y2)
            self.y2 += b0 * (self.y1 - 2 * self.y2 + self.y3)
            self.y3 += b0 * (self.y2 - 2 * self.y3 + self.y4)
            self.y4 += b0 * (self.y3 - 2 * self.y4)
            return 2 * self.g * self.y4

        a1 = self.a1
        y0 = 0.125 * self._drive_factor * x - self._feedback_highpass.get_sample(self.k * self.y4)
        self.y1 = y0 + a1 * (y0 - self.y1)
        self.y2 = self.y1 + a1 * (self.y1 - self.y2)
        self.y3 = self.y2 + a1 * (self.y2 - self.y3)
        self.y4 = self.y3 + a1 * (self.y3 - self.y4)
        c0, c1, c2, c3, c4 = self._mix
        return 8.0 * (c0 * y0 + c1 * self.y1 + c2 * self.y2 + c3 * self.y3 + c4 * self.y4)

    def reset(self) -> None:
        """Clear the filter state."""
        self._feedback_highpass.reset()
        self.y1 = 0.0
        self.y2 = 0.0
        self.y3 = 0.0
        self.y4 = 0.0