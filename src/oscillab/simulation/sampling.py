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
Sampling helpers shared by the drivers, charts and comparison views.

Every consumer samples through these functions so the animation, the
rolling chart windows and the static trajectory plots show the same numbers.
"""

from collections import deque
from typing import Dict, Iterator, List

import numpy as np

from oscillab.physics.engine import acceleration, energies, position, velocity
from oscillab.types.model import OscillatorModel
from oscillab.types.results import MotionSample, TrajectoryResult

SAMPLE_FIELDS = ("time", "position", "velocity", "acceleration", "kinetic", "potential", "total")


def sample_motion(model: OscillatorModel, time: float) -> MotionSample:
    """Evaluate every derived quantity of ``model`` at one time."""
    energy = energies(model, time)
    return {
        "time": float(time),
        "position": position(model, time),
        "velocity": velocity(model, time),
        "acceleration": acceleration(model, time),
        "kinetic": energy["kinetic"],
        "potential": energy["potential"],
        "total": energy["total"],
    }


def sample_trajectory(model: OscillatorModel, times) -> TrajectoryResult:
    """
    Vectorized evaluation on a time grid.

    Parameters
    ----------
    model : OscillatorModel
    times : array_like
        1D array of times [s]

    Returns
    -------
    TrajectoryResult

    Raises
    ------
    ValueError
        If ``times`` is not one-dimensional

    Examples
    --------
    >>> t = np.arange(0.0, 10.0, 0.02)
    >>> result = sample_trajectory(OscillatorModel(damping=0.1), t)
    >>> result["position"].shape
    (500,)
    """
    t = np.asarray(times, dtype=np.float64)
    if t.ndim != 1:
        raise ValueError(f"times must be one-dimensional, got shape {t.shape}")

    energy = energies(model, t)
    return {
        "time": t,
        "position": np.asarray(position(model, t)),
        "velocity": np.asarray(velocity(model, t)),
        "acceleration": np.asarray(acceleration(model, t)),
        "kinetic": np.asarray(energy["kinetic"]),
        "potential": np.asarray(energy["potential"]),
        "total": np.asarray(energy["total"]),
    }


class RollingWindow:
    """
    Bounded buffer of the most recent samples for live charts.

    Appending past ``size`` drops the oldest sample.

    Examples
    --------
    >>> window = RollingWindow(size=100)
    >>> for k in range(150):
    ...     window.append(sample_motion(OscillatorModel(), 0.02 * k))
    >>> len(window)
    100
    """

    def __init__(self, size: int = 100):
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._samples: deque = deque(maxlen=size)

    def append(self, sample: MotionSample) -> None:
        self._samples.append(sample)

    def clear(self) -> None:
        self._samples.clear()

    def latest(self) -> MotionSample:
        if not self._samples:
            raise IndexError("RollingWindow is empty")
        return self._samples[-1]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[MotionSample]:
        return iter(self._samples)

    def to_list(self) -> List[MotionSample]:
        return list(self._samples)

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """Column view of the window, one array per sample field."""
        return {
            name: np.array([sample[name] for sample in self._samples], dtype=np.float64)
            for name in SAMPLE_FIELDS
        }


__all__ = ["RollingWindow", "SAMPLE_FIELDS", "sample_motion", "sample_trajectory"]
