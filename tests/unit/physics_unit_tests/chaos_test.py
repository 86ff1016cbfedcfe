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
Unit Tests for Chaos Mode

Tests the initial-velocity resampling policy and its isolation from the
closed-form motion.
"""

import numpy as np
import pytest

from oscillab.config import CHAOS_VELOCITY_RANGE
from oscillab.physics.chaos import resample_initial_velocity, set_chaos_mode
from oscillab.physics.engine import acceleration, position, velocity
from oscillab.types.model import OscillatorModel


@pytest.fixture
def model():
    return OscillatorModel(damping=0.05, phase=20.0)


# ============================================================================
# Resampling
# ============================================================================


class TestResampleInitialVelocity:
    """Test resample_initial_velocity()."""

    def test_disabled_returns_zero(self):
        assert resample_initial_velocity(False) == 0.0
        assert resample_initial_velocity(False, rng=123) == 0.0

    def test_disabled_does_not_consume_generator(self):
        rng = np.random.default_rng(1)
        resample_initial_velocity(False, rng)
        assert rng.uniform() == np.random.default_rng(1).uniform()

    def test_seeded_draw_is_reproducible(self):
        first = resample_initial_velocity(True, rng=42)
        second = resample_initial_velocity(True, rng=42)
        assert first == second
        assert first == float(np.random.default_rng(42).uniform(-50.0, 50.0))

    def test_draws_within_range(self):
        rng = np.random.default_rng(0)
        low, high = CHAOS_VELOCITY_RANGE
        draws = [resample_initial_velocity(True, rng) for _ in range(1000)]
        assert all(low <= v < high for v in draws)

    def test_draws_cover_both_signs(self):
        rng = np.random.default_rng(0)
        draws = np.array([resample_initial_velocity(True, rng) for _ in range(200)])
        assert np.any(draws < 0)
        assert np.any(draws > 0)

    def test_generator_advances(self):
        rng = np.random.default_rng(5)
        assert resample_initial_velocity(True, rng) != resample_initial_velocity(True, rng)

    def test_returns_python_float(self):
        assert isinstance(resample_initial_velocity(True, rng=3), float)


# ============================================================================
# Model Toggle
# ============================================================================


class TestSetChaosMode:
    """Test set_chaos_mode()."""

    def test_enable(self, model):
        chaotic = set_chaos_mode(model, True, rng=11)
        assert chaotic.chaos_mode is True
        assert -50.0 <= chaotic.initial_velocity < 50.0
        assert chaotic.initial_velocity == resample_initial_velocity(True, rng=11)

    def test_disable_resets_velocity(self, model):
        chaotic = set_chaos_mode(model, True, rng=11)
        calm = set_chaos_mode(chaotic, False)
        assert calm.chaos_mode is False
        assert calm.initial_velocity == 0.0

    def test_original_untouched(self, model):
        set_chaos_mode(model, True, rng=11)
        assert model.chaos_mode is False
        assert model.initial_velocity == 0.0

    def test_other_fields_preserved(self, model):
        chaotic = set_chaos_mode(model, True, rng=11)
        assert chaotic.id == model.id
        assert chaotic.mass == model.mass
        assert chaotic.phase == model.phase

    def test_motion_unaffected(self, model):
        """Initial velocity is display-only; the trajectory does not change."""
        chaotic = set_chaos_mode(model, True, rng=11)
        t = np.linspace(0.0, 10.0, 101)
        for fn in (position, velocity, acceleration):
            np.testing.assert_array_equal(fn(chaotic, t), fn(model, t))
