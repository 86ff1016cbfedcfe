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
oscillab
========

Closed-form damped harmonic oscillator engine with the drivers, analysis
helpers and Plotly figures an interactive spring-mass visualization needs.

Core API
--------
>>> from oscillab import OscillatorModel, position, velocity, energies, period
>>>
>>> model = OscillatorModel(amplitude=100, mass=1, spring_constant=10)
>>> position(model, 0.0)
100.0
>>> round(period(model), 4)
1.9869

Authors
-------
Gil Benezer

License
-------
GNU Affero General Public License v3.0
"""

from .physics import (
    SymbolicOscillator,
    acceleration,
    angular_frequency,
    check_model,
    damping_envelope,
    damping_factor,
    energies,
    energy_fractions,
    natural_frequency_hz,
    period,
    position,
    resample_initial_velocity,
    set_chaos_mode,
    validate_model,
    velocity,
)
from .types import DEFAULT_MODEL, OscillatorModel, create_model
from .visualization.themes import get_model_color

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MODEL",
    "OscillatorModel",
    "create_model",
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
    "resample_initial_velocity",
    "set_chaos_mode",
    "SymbolicOscillator",
    "check_model",
    "validate_model",
    "get_model_color",
]
