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
Closed-Form Oscillator Engine

Pure functions mapping (model, time) to kinematic and energy quantities of a
damped harmonic oscillator.

Motion:
------
    x(t) = A·e^{-γt}·cos(Ωt + φ)
    v(t) = -A·Ω·e^{-γt}·sin(Ωt + φ) - γ·A·e^{-γt}·cos(Ωt + φ)
    a(t) = A·e^{-γt}·[(γ² - Ω²)·cos(Ωt + φ) + 2γΩ·sin(Ωt + φ)]

where Ω = ω·f, ω = sqrt(k/m) and φ is the phase converted to radians.
v and a are the exact first and second time derivatives of x (product rule
on e^{-γt}·cos(Ωt + φ)); a is not -Ω²·x once γ > 0.

Energy:
------
    KE = ½·m·v²,  PE = ½·k·x²,  E = KE + PE
    KE share = KE / E, PE share = PE / E  (both 0 when E ≤ 0)

Every function is stateless. Time may be a float (a float is returned) or a
NumPy array (an array of the same shape is returned).

Invalid parameters (m ≤ 0, k < 0) are not rejected here: the results are
NaN or ±inf and propagate to every dependent quantity. Use
``oscillab.physics.validation`` at the input boundary.
"""

import numpy as np

from oscillab.types.model import OscillatorModel
from oscillab.types.results import EnergyBreakdown, EnergyFractions, TimeLike


def _as_output(value):
    # 0-d results come back as Python floats
    if np.ndim(value) == 0:
        return float(value)
    return value


def _as_time(time: TimeLike):
    if np.ndim(time) == 0:
        return np.float64(time)
    return np.asarray(time, dtype=np.float64)


# ============================================================================
# Derived Constants
# ============================================================================


def angular_frequency(model: OscillatorModel) -> float:
    """
    Natural angular frequency ω = sqrt(k/m) [rad/s].

    Every other quantity obtains ω from here.

    Examples
    --------
    >>> angular_frequency(OscillatorModel(mass=1.0, spring_constant=10.0))
    3.1622776601683795
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sqrt(np.float64(model.spring_constant) / np.float64(model.mass)))


def period(model: OscillatorModel) -> float:
    """
    Oscillation period T = 2π / (ω·f) [s].

    Infinite when the frequency multiplier is zero.
    """
    omega = np.float64(angular_frequency(model)) * np.float64(model.frequency)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(2.0 * np.pi) / omega)


def natural_frequency_hz(model: OscillatorModel) -> float:
    """Natural frequency ω / 2π [Hz], without the frequency multiplier."""
    return angular_frequency(model) / (2.0 * np.pi)


# ============================================================================
# Kinematics
# ============================================================================


def damping_factor(model: OscillatorModel, time: TimeLike) -> TimeLike:
    """Exponential envelope factor e^{-γt}."""
    t = _as_time(time)
    with np.errstate(over="ignore"):
        return _as_output(np.exp(-model.damping * t))


def damping_envelope(model: OscillatorModel, time: TimeLike) -> TimeLike:
    """Amplitude envelope A·e^{-γt}; |x(t)| never exceeds it."""
    return _as_output(model.amplitude * damping_factor(model, time))


def _oscillation_terms(model: OscillatorModel, time: TimeLike):
    """Return (Ω, A·e^{-γt}, cos(Ωt+φ), sin(Ωt+φ)) for the given time(s)."""
    t = _as_time(time)
    omega = angular_frequency(model) * model.frequency
    phase_radians = model.phase * np.pi / 180
    with np.errstate(invalid="ignore", over="ignore"):
        argument = omega * t + phase_radians
        envelope = model.amplitude * damping_factor(model, t)
        return omega, envelope, np.cos(argument), np.sin(argument)


def position(model: OscillatorModel, time: TimeLike) -> TimeLike:
    """
    Displacement from equilibrium x(t) = A·e^{-γt}·cos(Ωt + φ).

    Parameters
    ----------
    model : OscillatorModel
    time : float or np.ndarray
        Time [s]

    Returns
    -------
    float or np.ndarray

    Examples
    --------
    >>> position(OscillatorModel(), 0.0)
    100.0
    """
    _, envelope, cos_term, _ = _oscillation_terms(model, time)
    with np.errstate(invalid="ignore", over="ignore"):
        return _as_output(envelope * cos_term)


def velocity(model: OscillatorModel, time: TimeLike) -> TimeLike:
    """
    Exact time derivative of :func:`position`.

    v(t) = -A·Ω·e^{-γt}·sin(Ωt + φ) - γ·A·e^{-γt}·cos(Ωt + φ)
    """
    omega, envelope, cos_term, sin_term = _oscillation_terms(model, time)
    with np.errstate(invalid="ignore", over="ignore"):
        from_oscillation = -envelope * omega * sin_term
        from_damping = -model.damping * envelope * cos_term
        return _as_output(from_oscillation + from_damping)


def acceleration(model: OscillatorModel, time: TimeLike) -> TimeLike:
    """
    Exact second time derivative of :func:`position`.

    a(t) = A·e^{-γt}·[(γ² - Ω²)·cos(Ωt + φ) + 2γΩ·sin(Ωt + φ)]

    The γ² and 2γΩ terms come from differentiating the decaying envelope;
    with γ = 0 this reduces to -Ω²·x.
    """
    omega, envelope, cos_term, sin_term = _oscillation_terms(model, time)
    gamma = model.damping
    with np.errstate(invalid="ignore", over="ignore"):
        return _as_output(
            envelope
            * (
                (gamma**2 - omega**2) * cos_term
                + 2 * gamma * omega * sin_term
            )
        )


# ============================================================================
# Energy
# ============================================================================


def energies(model: OscillatorModel, time: TimeLike) -> EnergyBreakdown:
    """
    Kinetic, potential and total mechanical energy [J].

    With γ = 0 and f = 1 the total is constant in time (½·k·A²). With γ > 0
    it decays along the envelope, with small ripple inside each cycle.

    Examples
    --------
    >>> energies(OscillatorModel(), 0.0)
    {'kinetic': 0.0, 'potential': 50000.0, 'total': 50000.0}
    """
    x = position(model, time)
    v = velocity(model, time)

    with np.errstate(invalid="ignore", over="ignore"):
        kinetic = 0.5 * model.mass * np.square(v)
        potential = 0.5 * model.spring_constant * np.square(x)
        total = kinetic + potential

    return {
        "kinetic": _as_output(kinetic),
        "potential": _as_output(potential),
        "total": _as_output(total),
    }


def energy_fractions(model: OscillatorModel, time: TimeLike) -> EnergyFractions:
    """
    Kinetic and potential shares of the total energy.

    Both shares are 0 where the total is not positive (a mass at rest, or
    NaN from invalid parameters), so the energy bars never divide by zero.

    Examples
    --------
    >>> energy_fractions(OscillatorModel(), 0.0)
    {'kinetic': 0.0, 'potential': 1.0}
    """
    energy = energies(model, time)
    total = np.asarray(energy["total"], dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        has_energy = total > 0
        kinetic = np.where(has_energy, energy["kinetic"] / total, 0.0)
        potential = np.where(has_energy, energy["potential"] / total, 0.0)

    return {
        "kinetic": _as_output(kinetic),
        "potential": _as_output(potential),
    }


__all__ = [
    "acceleration",
    "angular_frequency",
    "damping_envelope",
    "damping_factor",
    "energies",
    "energy_fractions",
    "natural_frequency_hz",
    "period",
    "position",
    "velocity",
]
