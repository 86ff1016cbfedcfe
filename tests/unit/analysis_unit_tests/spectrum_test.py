# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Unit Tests for the Position Spectrum
"""

import numpy as np
import pytest

from oscillab.analysis.spectrum import dominant_frequency, position_spectrum
from oscillab.physics.engine import natural_frequency_hz, position
from oscillab.types.model import OscillatorModel

TIME_STEP = 0.02


@pytest.fixture
def times():
    return np.arange(1000) * TIME_STEP


class TestPositionSpectrum:
    """Test position_spectrum()."""

    def test_shapes(self, times):
        freqs, magnitudes = position_spectrum(position(OscillatorModel(), times), TIME_STEP)
        assert freqs.shape == magnitudes.shape == (501,)
        assert freqs[0] == 0.0
        assert freqs[-1] == pytest.approx(0.5 / TIME_STEP)

    def test_mean_removed(self, times):
        freqs, magnitudes = position_spectrum(np.full(times.shape, 7.0), TIME_STEP)
        assert magnitudes[0] == pytest.approx(0.0, abs=1e-9)

    def test_pure_tone_on_bin(self):
        """A cosine on an exact FFT bin peaks at its amplitude."""
        n = 500
        t = np.arange(n) * TIME_STEP
        x = 30.0 * np.cos(2 * np.pi * 2.0 * t)
        freqs, magnitudes = position_spectrum(x, TIME_STEP)
        peak = int(np.argmax(magnitudes))
        assert freqs[peak] == pytest.approx(2.0)
        assert magnitudes[peak] == pytest.approx(30.0)

    def test_too_few_samples(self):
        with pytest.raises(ValueError, match="at least 2 samples"):
            position_spectrum([1.0], TIME_STEP)

    def test_rejects_2d(self):
        with pytest.raises(ValueError):
            position_spectrum(np.zeros((4, 4)), TIME_STEP)

    @pytest.mark.parametrize("time_step", [0.0, -0.02])
    def test_rejects_bad_time_step(self, time_step):
        with pytest.raises(ValueError, match="time_step must be positive"):
            position_spectrum(np.zeros(8), time_step)


class TestDominantFrequency:
    """Test dominant_frequency() against the model's natural frequency."""

    def test_default_model(self, times):
        model = OscillatorModel()
        resolution = 1.0 / (times.size * TIME_STEP)
        found = dominant_frequency(position(model, times), TIME_STEP)
        assert found == pytest.approx(natural_frequency_hz(model), abs=resolution)

    def test_frequency_multiplier(self, times):
        model = OscillatorModel(frequency=2.0)
        resolution = 1.0 / (times.size * TIME_STEP)
        found = dominant_frequency(position(model, times), TIME_STEP)
        assert found == pytest.approx(2.0 * natural_frequency_hz(model), abs=resolution)

    def test_damped_model_keeps_peak(self, times):
        model = OscillatorModel(damping=0.1, spring_constant=20.0)
        resolution = 1.0 / (times.size * TIME_STEP)
        found = dominant_frequency(position(model, times), TIME_STEP)
        assert found == pytest.approx(natural_frequency_hz(model), abs=resolution)
