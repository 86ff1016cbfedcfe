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
Symbolic Reference Oscillator

SymPy derivation of the same damped-cosine motion the closed-form engine
evaluates. Velocity and acceleration here come from ``sp.diff`` rather than
hand-expanded formulas, which makes this class the reference the engine is
checked against.

Physical System:
---------------
    x(t) = A·exp(-γt)·cos(ω·f·t + φ·π/180),  ω = sqrt(k/m)

The trajectory satisfies the linear ODE

    ẍ + 2γ·ẋ + (Ω² + γ²)·x = 0,  Ω = ω·f

so it is the free response of a mass-spring-damper with effective stiffness
m·(Ω² + γ²) and damping coefficient 2·m·γ.

Usage
-----
>>> from oscillab.physics.symbolic import SymbolicOscillator
>>> from oscillab.types import OscillatorModel
>>>
>>> osc = SymbolicOscillator()
>>> x_of_t = osc.lambdify("position", OscillatorModel(damping=0.1))
>>> float(x_of_t(0.0))
100.0
"""

from typing import Callable, Dict

import sympy as sp

from oscillab.types.model import OscillatorModel

_QUANTITIES = ("position", "velocity", "acceleration", "kinetic", "potential", "total")


class SymbolicOscillator:
    """
    Symbolic damped oscillator with derivatives from differentiation.

    Attributes
    ----------
    t : sp.Symbol
        Time
    A, f, phi, m, k, gamma : sp.Symbol
        Amplitude, frequency multiplier, phase [deg], mass, spring constant,
        damping coefficient
    expressions : Dict[str, sp.Expr]
        position, velocity, acceleration, kinetic, potential, total
    """

    def __init__(self):
        self.define_system()

    def define_system(self):
        t = sp.symbols("t", real=True)
        A, phi, gamma = sp.symbols("A phi gamma", real=True)
        f, m, k = sp.symbols("f m k", real=True, positive=True)

        self.t = t
        self.A, self.f, self.phi = A, f, phi
        self.m, self.k, self.gamma = m, k, gamma

        omega = sp.sqrt(k / m) * f
        x = A * sp.exp(-gamma * t) * sp.cos(omega * t + phi * sp.pi / 180)
        v = sp.diff(x, t)
        a = sp.diff(v, t)

        kinetic = sp.Rational(1, 2) * m * v**2
        potential = sp.Rational(1, 2) * k * x**2

        self.expressions: Dict[str, sp.Expr] = {
            "position": x,
            "velocity": v,
            "acceleration": a,
            "kinetic": kinetic,
            "potential": potential,
            "total": kinetic + potential,
        }

    def parameters(self, model: OscillatorModel) -> Dict[sp.Symbol, float]:
        """Map each parameter symbol to its value in ``model``."""
        return {
            self.A: model.amplitude,
            self.f: model.frequency,
            self.phi: model.phase,
            self.m: model.mass,
            self.k: model.spring_constant,
            self.gamma: model.damping,
        }

    def substitute_parameters(self, expr: sp.Expr, model: OscillatorModel) -> sp.Expr:
        return expr.subs(self.parameters(model))

    def lambdify(self, quantity: str, model: OscillatorModel) -> Callable:
        """
        Numerical function of time for one quantity with ``model`` substituted.

        Parameters
        ----------
        quantity : str
            One of 'position', 'velocity', 'acceleration', 'kinetic',
            'potential', 'total'
        model : OscillatorModel

        Returns
        -------
        Callable
            NumPy-vectorized f(t)

        Raises
        ------
        ValueError
            If quantity is unknown
        """
        if quantity not in self.expressions:
            raise ValueError(
                f"Unknown quantity '{quantity}'. Available: {', '.join(_QUANTITIES)}"
            )
        expr = self.substitute_parameters(self.expressions[quantity], model)
        return sp.lambdify(self.t, expr, modules="numpy")

    def equation_of_motion_residual(self) -> sp.Expr:
        """
        Simplified ẍ + 2γ·ẋ + (Ω² + γ²)·x; identically zero for this trajectory.
        """
        x = self.expressions["position"]
        omega_sq = (self.k / self.m) * self.f**2
        residual = (
            self.expressions["acceleration"]
            + 2 * self.gamma * self.expressions["velocity"]
            + (omega_sq + self.gamma**2) * x
        )
        return sp.simplify(sp.expand(residual))


__all__ = ["SymbolicOscillator"]
