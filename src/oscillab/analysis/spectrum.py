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
Frequency spectrum of a sampled position window.

Uses a one-sided real FFT of the mean-removed signal. Frequency resolution
is 1 / (n·dt), so a 100-sample window at dt = 0.02 s resolves 0.5 Hz.
"""

from typing import Tuple

import numpy as np
from scipy import fft


def position_spectrum(positions, time_step: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    One-sided amplitude spectrum.

    Parameters
    ----------
    positions : array_like
        Uniformly sampled 1D signal
    time_step : float
        Sample spacing [s]

    Returns
    -------
    freqs : np.ndarray
        Frequencies [Hz], shape (n // 2 + 1,)
    magnitudes : np.ndarray
        |X(f)|·2/n, so a pure cosine of amplitude A peaks near A

    Raises
    ------
    ValueError
        If fewer than two samples are given or time_step is not positive
    """
    x = np.asarray(positions, dtype=np.float64)
    if x.ndim != 1 or x.size < 2:
        raise ValueError(f"positions must be a 1D array with at least 2 samples, got shape {x.shape}")
    if not time_step > 0:
        raise ValueError(f"time_step must be positive, got {time_step}")

    x = x - np.mean(x)
    magnitudes = np.abs(fft.rfft(x)) * 2.0 / x.size
    freqs = fft.rfftfreq(x.size, d=time_step)
    return freqs, magnitudes


def dominant_frequency(positions, time_step: float) -> float:
    """Frequency [Hz] of the largest non-DC spectral peak."""
    freqs, magnitudes = position_spectrum(positions, time_step)
    index = int(np.argmax(magnitudes[1:])) + 1
    return float(freqs[index])


__all__ = ["dominant_frequency", "position_spectrum"]
