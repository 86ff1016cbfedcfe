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

# Result Types

from typing import List, Union

import numpy as np
from typing_extensions import Literal, TypedDict

TimeLike = Union[float, np.ndarray]
"""Scalar time [s] or an array of times. Engine outputs follow the input shape."""

HeatMapQuantity = Literal["amplitude", "frequency", "period"]


class EnergyBreakdown(TypedDict):
    """
    Mechanical energy decomposition at one instant.

    kinetic = ½·m·v², potential = ½·k·x², total = kinetic + potential.
    """

    kinetic: TimeLike
    potential: TimeLike
    total: TimeLike


class EnergyFractions(TypedDict):
    """Share of the total energy held as kinetic and as potential energy."""

    kinetic: TimeLike
    potential: TimeLike


class MotionSample(TypedDict):
    """One sample of every derived quantity at a single time."""

    time: float
    position: float
    velocity: float
    acceleration: float
    kinetic: float
    potential: float
    total: float


class TrajectoryResult(TypedDict):
    """
    Vectorized samples on a time grid.

    All arrays share the shape of ``time``.
    """

    time: np.ndarray
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray
    kinetic: np.ndarray
    potential: np.ndarray
    total: np.ndarray


class KeyPoints(TypedDict):
    """Annotation points found in a position window."""

    max_amplitude: float
    max_amplitude_time: float
    zero_crossing_times: List[float]  # at most three
    phase_shift_time: float  # first local maximum, 0.0 if none


class HeatMapGrid(TypedDict):
    """
    Point evaluations over a mass × spring-constant grid.

    values[i, j] belongs to masses[i] (descending) and spring_constants[j]
    (ascending).
    """

    quantity: HeatMapQuantity
    values: np.ndarray  # (n_mass, n_spring)
    masses: np.ndarray
    spring_constants: np.ndarray


__all__ = [
    "EnergyBreakdown",
    "EnergyFractions",
    "HeatMapGrid",
    "HeatMapQuantity",
    "KeyPoints",
    "MotionSample",
    "TimeLike",
    "TrajectoryResult",
]
