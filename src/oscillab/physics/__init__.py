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
Physics
=======

Closed-form engine, chaos-mode policy, symbolic reference and boundary
validation.

>>> from oscillab.physics import position, energies
>>> from oscillab.types import OscillatorModel
>>>
>>> model = OscillatorModel(damping=0.1)
>>> x = position(model, 1.5)
>>> e = energies(model, 1.5)
"""

from .chaos import resample_initial_velocity, set_chaos_mode
from .engine import (
    acceleration,
    angular_frequency,
    damping_envelope,
    damping_factor,
    energies,
    energy_fractions,
    natural_frequency_hz,
    period,
    position,
    velocity,
)
from .symbolic import SymbolicOscillator
from .validation import ModelValidationResult, check_model, validate_model

__all__ = [
    # Engine
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
    # Chaos mode
    "resample_initial_velocity",
    "set_chaos_mode",
    # Reference and validation
    "SymbolicOscillator",
    "ModelValidationResult",
    "check_model",
    "validate_model",
]
