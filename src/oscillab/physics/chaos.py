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
Chaos-mode parameter policy.

Toggling chaos mode is a one-shot parameter change: on, the initial velocity
is drawn uniformly from CHAOS_VELOCITY_RANGE; off, it resets to zero. The
closed-form motion does not read the initial velocity, so the trajectory is
unchanged either way.
"""

from typing import Optional, Union

import numpy as np

from oscillab.config import CHAOS_VELOCITY_RANGE
from oscillab.types.model import OscillatorModel

RandomSource = Union[None, int, np.random.Generator]


def _generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def resample_initial_velocity(enabled: bool, rng: RandomSource = None) -> float:
    """
    Initial velocity to store after toggling chaos mode.

    Parameters
    ----------
    enabled : bool
        New chaos-mode state
    rng : None, int or np.random.Generator
        Random source. An int is used as a seed; None draws fresh entropy.
        Not consumed when ``enabled`` is False.

    Returns
    -------
    float
        Uniform in [-50, 50) when enabled, 0.0 otherwise

    Examples
    --------
    >>> resample_initial_velocity(False)
    0.0
    >>> a = resample_initial_velocity(True, rng=7)
    >>> a == resample_initial_velocity(True, rng=7)
    True
    """
    if not enabled:
        return 0.0
    low, high = CHAOS_VELOCITY_RANGE
    return float(_generator(rng).uniform(low, high))


def set_chaos_mode(
    model: OscillatorModel, enabled: bool, rng: Optional[RandomSource] = None
) -> OscillatorModel:
    """Return a copy of ``model`` with chaos mode toggled and the velocity resampled."""
    return model.replace(
        chaos_mode=enabled,
        initial_velocity=resample_initial_velocity(enabled, rng),
    )


__all__ = ["RandomSource", "resample_initial_velocity", "set_chaos_mode"]
