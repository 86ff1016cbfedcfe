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
Configuration presets

Frozen configuration records and parameter bounds shared by the drivers,
the heat map and boundary validation.

Usage
-----
>>> from oscillab.config import SimulationConfig, PARAMETER_RANGES
>>>
>>> config = SimulationConfig(time_step=0.01)
>>> low, high = PARAMETER_RANGES["mass"]
"""

from dataclasses import dataclass
from typing import Dict, Tuple

# Input bounds for each adjustable parameter (the host UI clamps to these)
PARAMETER_RANGES: Dict[str, Tuple[float, float]] = {
    "amplitude": (10.0, 200.0),
    "frequency": (0.1, 3.0),
    "phase": (0.0, 360.0),
    "mass": (0.5, 5.0),
    "spring_constant": (1.0, 30.0),
    "damping": (0.0, 1.0),
}

# Uniform range for the chaos-mode initial velocity, [low, high)
CHAOS_VELOCITY_RANGE: Tuple[float, float] = (-50.0, 50.0)

MAX_COMPARISON_MODELS = 2


@dataclass(frozen=True)
class SimulationConfig:
    """
    Driver loop settings.

    Attributes
    ----------
    time_step : float
        Time advanced per tick [s]
    window_size : int
        Number of samples kept in each rolling chart window
    start_time : float
        Time cursor value after construction or reset [s]

    Raises
    ------
    ValueError
        If time_step is not positive or window_size < 1
    """

    time_step: float = 0.02
    window_size: int = 100
    start_time: float = 0.0

    def __post_init__(self):
        if not self.time_step > 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.window_size < 1:
            raise ValueError(f"window_size must be at least 1, got {self.window_size}")


@dataclass(frozen=True)
class HeatMapConfig:
    """
    Mass × spring-constant sweep settings.

    Ranges are (min, max); ``steps`` cells are laid out per axis with spacing
    (max - min) / steps, so the max value itself is not sampled.
    """

    spring_constant_range: Tuple[float, float] = (1.0, 20.0)
    mass_range: Tuple[float, float] = (0.5, 5.0)
    steps: int = 20

    def __post_init__(self):
        if self.steps < 1:
            raise ValueError(f"steps must be at least 1, got {self.steps}")
        for label, (low, high) in (
            ("spring_constant_range", self.spring_constant_range),
            ("mass_range", self.mass_range),
        ):
            if low > high:
                raise ValueError(f"{label} must satisfy min <= max, got ({low}, {high})")


__all__ = [
    "CHAOS_VELOCITY_RANGE",
    "HeatMapConfig",
    "MAX_COMPARISON_MODELS",
    "PARAMETER_RANGES",
    "SimulationConfig",
]
