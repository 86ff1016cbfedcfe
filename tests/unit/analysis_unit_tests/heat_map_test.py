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
Unit Tests for the Parameter Heat Map
"""

import warnings

import numpy as np
import pytest

from oscillab.analysis.heat_map import heat_map_grid, normalize_grid
from oscillab.config import HeatMapConfig
from oscillab.physics.engine import angular_frequency, period
from oscillab.types.model import OscillatorModel


@pytest.fixture
def base_model():
    return OscillatorModel()


class TestGridLayout:
    """Test the mass × spring-constant axes."""

    def test_default_shape(self, base_model):
        grid = heat_map_grid(base_model, "frequency")
        assert grid["values"].shape == (20, 20)
        assert grid["masses"].shape == (20,)
        assert grid["spring_constants"].shape == (20,)
        assert grid["quantity"] == "frequency"

    def test_mass_axis_descending(self, base_model):
        masses = heat_map_grid(base_model)["masses"]
        assert masses[0] == 5.0
        assert masses[-1] == pytest.approx(5.0 - 19 * 0.225)
        assert np.all(np.diff(masses) < 0)

    def test_spring_constant_axis_ascending(self, base_model):
        spring_constants = heat_map_grid(base_model)["spring_constants"]
        assert spring_constants[0] == 1.0
        assert spring_constants[-1] == pytest.approx(1.0 + 19 * 0.95)
        assert np.all(np.diff(spring_constants) > 0)

    def test_custom_config(self, base_model):
        config = HeatMapConfig(spring_constant_range=(2.0, 4.0), mass_range=(1.0, 2.0), steps=4)
        grid = heat_map_grid(base_model, "period", config)
        assert grid["values"].shape == (4, 4)
        np.testing.assert_allclose(grid["spring_constants"], [2.0, 2.5, 3.0, 3.5])
        np.testing.assert_allclose(grid["masses"], [2.0, 1.75, 1.5, 1.25])

    def test_unknown_quantity(self, base_model):
        with pytest.raises(ValueError, match="Unknown heat map quantity"):
            heat_map_grid(base_model, "energy")


class TestGridValues:
    """Test per-cell evaluation."""

    def test_frequency_cells(self, base_model):
        grid = heat_map_grid(base_model, "frequency")
        for i in (0, 7, 19):
            for j in (0, 11, 19):
                m = grid["masses"][i]
                k = grid["spring_constants"][j]
                assert grid["values"][i, j] == pytest.approx(np.sqrt(k / m))

    def test_frequency_ignores_multiplier(self, base_model):
        plain = heat_map_grid(base_model, "frequency")["values"]
        scaled = heat_map_grid(base_model.replace(frequency=2.0), "frequency")["values"]
        np.testing.assert_array_equal(plain, scaled)

    def test_period_cells_use_engine(self, base_model):
        model = base_model.replace(frequency=2.0)
        grid = heat_map_grid(model, "period")
        i, j = 3, 5
        cell = model.replace(mass=grid["masses"][i], spring_constant=grid["spring_constants"][j])
        assert grid["values"][i, j] == period(cell)
        assert grid["values"][i, j] == pytest.approx(
            2 * np.pi / (2.0 * angular_frequency(cell))
        )

    def test_period_grid_honours_frequency_multiplier(self, base_model):
        """Every period cell halves when f goes from 1 to 2."""
        base = heat_map_grid(base_model.replace(frequency=1.0), "period")["values"]
        doubled = heat_map_grid(base_model.replace(frequency=2.0), "period")["values"]
        np.testing.assert_allclose(doubled, base / 2.0, rtol=1e-12)

    def test_period_largest_for_heavy_soft_spring(self, base_model):
        values = heat_map_grid(base_model, "period")["values"]
        assert np.unravel_index(np.argmax(values), values.shape) == (0, 0)

    def test_amplitude_is_initial_displacement(self, base_model):
        grid = heat_map_grid(base_model.replace(phase=60.0), "amplitude")
        np.testing.assert_allclose(grid["values"], 50.0)

    def test_amplitude_is_magnitude(self, base_model):
        grid = heat_map_grid(base_model.replace(phase=180.0), "amplitude")
        assert np.all(grid["values"] > 0)


class TestNormalizeGrid:
    """Test normalize_grid()."""

    def test_rescales_to_unit_interval(self):
        result = normalize_grid([[1.0, 2.0], [3.0, 5.0]])
        np.testing.assert_allclose(result, [[0.0, 0.25], [0.5, 1.0]])

    def test_frequency_grid_spans_unit_interval(self, base_model):
        result = normalize_grid(heat_map_grid(base_model, "frequency")["values"])
        assert np.nanmin(result) == 0.0
        assert np.nanmax(result) == 1.0

    def test_flat_grid_is_nan(self, base_model):
        values = heat_map_grid(base_model, "amplitude")["values"]
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = normalize_grid(values)
        assert np.all(np.isnan(result))
