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

"""Annotation points for the position chart."""

from typing import Optional, Sequence

import numpy as np

from oscillab.types.results import KeyPoints

MIN_SAMPLES = 10
MAX_ZERO_CROSSINGS = 3


def find_key_points(times: Sequence[float], positions: Sequence[float]) -> Optional[KeyPoints]:
    """
    Locate the largest displacement, zero crossings and first peak.

    Parameters
    ----------
    times, positions : Sequence[float]
        Equal-length sample window

    Returns
    -------
    Optional[KeyPoints]
        None when fewer than MIN_SAMPLES samples are available

    Notes
    -----
    A zero crossing is recorded at sample i when positions[i-1]·positions[i]
    ≤ 0; only the first three are kept. The first local maximum is the first
    i-1 whose value exceeds both neighbours. NaN samples are skipped when
    looking for the largest displacement; an all-zero window reports 0 for
    both the amplitude and its time.
    """
    t = np.asarray(times, dtype=np.float64)
    x = np.asarray(positions, dtype=np.float64)
    if t.shape != x.shape:
        raise ValueError(f"times and positions differ in shape: {t.shape} vs {x.shape}")
    if x.size < MIN_SAMPLES:
        return None

    magnitudes = np.abs(x)
    max_amplitude = 0.0
    max_amplitude_time = 0.0
    if not np.all(np.isnan(magnitudes)):
        peak_index = int(np.nanargmax(magnitudes))
        # a window with no displacement has no peak time
        if magnitudes[peak_index] > 0:
            max_amplitude = float(magnitudes[peak_index])
            max_amplitude_time = float(t[peak_index])

    crossing_times = [
        float(t[i]) for i in range(1, x.size) if x[i - 1] * x[i] <= 0
    ][:MAX_ZERO_CROSSINGS]

    phase_shift_time = 0.0
    for i in range(2, x.size):
        if x[i - 1] > x[i] and x[i - 1] > x[i - 2]:
            phase_shift_time = float(t[i - 1])
            break

    return {
        "max_amplitude": max_amplitude,
        "max_amplitude_time": max_amplitude_time,
        "zero_crossing_times": crossing_times,
        "phase_shift_time": phase_shift_time,
    }


__all__ = ["find_key_points"]
