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
Unit Tests for the Symbolic Reference Oscillator

Checks the closed-form engine against SymPy derivatives and against a
numerical ODE solution from SciPy.
"""

import numpy as np
import pytest
import sympy as sp
from scipy.integrate import solve_ivp

from oscillab.physics.engine import (
    acceleration,
    angular_frequency,
    energies,
    position,
    velocity,
)
from oscillab.physics.symbolic import SymbolicOscillator
from oscillab.types.model import OscillatorModel


REFERENCE_MODELS = [
    OscillatorModel(),
    OscillatorModel(damping=0.1),
    OscillatorModel(amplitude=75.0, frequency=1.8, phase=135.0, mass=2.5, spring_constant=12.0, damping=0.4),
]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(scope="module")
def oscillator():
    return SymbolicOscillator()


@pytest.fixture
def times():
    return np.linspace(0.0, 10.0, 101)


# ============================================================================
# Construction
# ============================================================================


class TestSymbolicSetup:
    """Test symbols and expressions."""

    def test_expressions_present(self, oscillator):
        assert set(oscillator.expressions) == {
            "position",
            "velocity",
            "acceleration",
            "kinetic",
            "potential",
            "total",
        }

    def test_parameters_mapping(self, oscillator):
        model = OscillatorModel(amplitude=20.0, mass=3.0)
        params = oscillator.parameters(model)
        assert params[oscillator.A] == 20.0
        assert params[oscillator.m] == 3.0
        assert params[oscillator.k] == 10.0
        assert len(params) == 6

    def test_substitution_leaves_only_time(self, oscillator):
        expr = oscillator.substitute_parameters(
            oscillator.expressions["velocity"], OscillatorModel(damping=0.2)
        )
        assert expr.free_symbols == {oscillator.t}

    def test_velocity_is_derivative(self, oscillator):
        x = oscillator.expressions["position"]
        v = oscillator.expressions["velocity"]
        assert sp.simplify(sp.diff(x, oscillator.t) - v) == 0

    def test_unknown_quantity_raises(self, oscillator):
        with pytest.raises(ValueError, match="Unknown quantity"):
            oscillator.lambdify("jerk", OscillatorModel())


# ============================================================================
# Engine Agreement
# ============================================================================


class TestEngineAgreement:
    """Test engine formulas against symbolic differentiation."""

    def test_initial_position(self, oscillator):
        x_of_t = oscillator.lambdify("position", OscillatorModel(damping=0.1))
        assert float(x_of_t(0.0)) == pytest.approx(100.0)

    @pytest.mark.parametrize("model", REFERENCE_MODELS)
    @pytest.mark.parametrize(
        "quantity, fn",
        [("position", position), ("velocity", velocity), ("acceleration", acceleration)],
    )
    def test_kinematics_match(self, oscillator, model, quantity, fn, times):
        reference = oscillator.lambdify(quantity, model)(times)
        np.testing.assert_allclose(fn(model, times), reference, rtol=1e-9, atol=1e-9)

    @pytest.mark.parametrize("model", REFERENCE_MODELS)
    def test_energies_match(self, oscillator, model, times):
        energy = energies(model, times)
        for quantity in ("kinetic", "potential", "total"):
            reference = oscillator.lambdify(quantity, model)(times)
            np.testing.assert_allclose(energy[quantity], reference, rtol=1e-9, atol=1e-6)


# ============================================================================
# Equation of Motion
# ============================================================================


class TestEquationOfMotion:
    """Test that the trajectory solves ẍ + 2γẋ + (Ω² + γ²)x = 0."""

    def test_residual_is_zero(self, oscillator):
        assert oscillator.equation_of_motion_residual() == 0

    @pytest.mark.parametrize("model", REFERENCE_MODELS)
    def test_matches_numerical_integration(self, model):
        gamma = model.damping
        omega = angular_frequency(model) * model.frequency
        stiffness = omega**2 + gamma**2

        def dynamics(t, y):
            return [y[1], -2.0 * gamma * y[1] - stiffness * y[0]]

        t_eval = np.linspace(0.0, 10.0, 201)
        y0 = [position(model, 0.0), velocity(model, 0.0)]
        sol = solve_ivp(
            dynamics, (0.0, 10.0), y0, t_eval=t_eval, method="DOP853", rtol=1e-10, atol=1e-10
        )

        assert sol.success
        np.testing.assert_allclose(sol.y[0], position(model, t_eval), atol=1e-5)
        np.testing.assert_allclose(sol.y[1], velocity(model, t_eval), atol=1e-4)
