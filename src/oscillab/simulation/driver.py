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
Animation Drivers - Explicit Time-Stepping Loops

The engine is stateless; anything that remembers a time cursor or the
previous sample lives here. A host application owns one driver per view and
calls ``step()`` from its timer or animation callback.

Key Features
------------
- Fixed-step time cursor (default +0.02 s per tick)
- Zero-crossing detection between consecutive position samples, used to
  fire the audio cue
- Rolling chart windows (default last 100 samples)
- Side-by-side comparison of up to two models on one shared time cursor

Main Classes
------------
AnimationDriver : Single-model loop
ComparisonDriver : Shared-clock loop for one or two models

Usage
-----
>>> from oscillab.simulation import AnimationDriver
>>> from oscillab.types import OscillatorModel
>>>
>>> crossings = []
>>> driver = AnimationDriver(OscillatorModel(), on_zero_crossing=crossings.append)
>>> driver.run(250)
>>> len(driver.window)
100
"""

from typing import Callable, List, Optional, Sequence

from oscillab.config import MAX_COMPARISON_MODELS, SimulationConfig
from oscillab.simulation.sampling import RollingWindow, sample_motion
from oscillab.types.model import OscillatorModel
from oscillab.types.results import MotionSample

SampleCallback = Callable[[MotionSample], None]
IndexedSampleCallback = Callable[[int, MotionSample], None]


def crossed_equilibrium(previous: float, current: float) -> bool:
    """
    True when the position moved through zero between two samples.

    Landing exactly on zero counts as a crossing; leaving zero does not.

    Examples
    --------
    >>> crossed_equilibrium(-1.0, 0.5)
    True
    >>> crossed_equilibrium(0.0, 0.5)
    False
    """
    return (previous < 0 and current >= 0) or (previous > 0 and current <= 0)


def cue_frequency(model: OscillatorModel) -> float:
    """Tone pitch [Hz] of the zero-crossing audio cue: 220 + 110·f."""
    return 220.0 + model.frequency * 110.0


class AnimationDriver:
    """
    Fixed-step driver for one model.

    Each ``step()`` advances the time cursor, samples the engine, appends the
    sample to the rolling window and notifies the sinks.

    Parameters
    ----------
    model : OscillatorModel
        Model to animate
    config : Optional[SimulationConfig]
        Step size, window size and start time
    on_sample : Optional[Callable[[MotionSample], None]]
        Called with every new sample
    on_zero_crossing : Optional[Callable[[MotionSample], None]]
        Called with the sample at which the position crossed zero

    Attributes
    ----------
    window : RollingWindow
        Most recent samples for charting
    """

    def __init__(
        self,
        model: OscillatorModel,
        config: Optional[SimulationConfig] = None,
        on_sample: Optional[SampleCallback] = None,
        on_zero_crossing: Optional[SampleCallback] = None,
    ):
        self.model = model
        self.config = config if config is not None else SimulationConfig()
        self.on_sample = on_sample
        self.on_zero_crossing = on_zero_crossing
        self.window = RollingWindow(self.config.window_size)
        self._time = self.config.start_time
        self._previous_position = 0.0

    @property
    def time(self) -> float:
        """Time of the most recent sample (start time before the first step)."""
        return self._time

    def set_model(self, model: OscillatorModel) -> None:
        """Swap the model (after a parameter edit) without resetting time."""
        self.model = model

    def step(self) -> MotionSample:
        """Advance one tick and return the new sample."""
        self._time += self.config.time_step
        sample = sample_motion(self.model, self._time)

        crossed = crossed_equilibrium(self._previous_position, sample["position"])
        self._previous_position = sample["position"]
        self.window.append(sample)

        if self.on_sample is not None:
            self.on_sample(sample)
        if crossed and self.on_zero_crossing is not None:
            self.on_zero_crossing(sample)
        return sample

    def run(self, n_steps: int) -> List[MotionSample]:
        """Take ``n_steps`` ticks and return the samples produced."""
        if n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {n_steps}")
        return [self.step() for _ in range(n_steps)]

    def reset(self) -> None:
        """Rewind to the start time and clear the window."""
        self._time = self.config.start_time
        self.window.clear()
        # Crossing history is kept, so the first tick after a reset may fire a cue.


class ComparisonDriver:
    """
    Shared-clock driver for side-by-side comparison.

    All models are sampled at the same time value; there is no coupling
    between them. Each model gets its own rolling window and crossing history.

    Parameters
    ----------
    models : Sequence[OscillatorModel]
        One or two models
    config : Optional[SimulationConfig]
    on_zero_crossing : Optional[Callable[[int, MotionSample], None]]
        Called with (model index, sample) when that model crosses zero

    Raises
    ------
    ValueError
        If no models or more than MAX_COMPARISON_MODELS are given
    """

    def __init__(
        self,
        models: Sequence[OscillatorModel],
        config: Optional[SimulationConfig] = None,
        on_zero_crossing: Optional[IndexedSampleCallback] = None,
    ):
        models = list(models)
        if not models:
            raise ValueError("ComparisonDriver needs at least one model")
        if len(models) > MAX_COMPARISON_MODELS:
            raise ValueError(
                f"Can compare at most {MAX_COMPARISON_MODELS} models, got {len(models)}"
            )

        self.models = models
        self.config = config if config is not None else SimulationConfig()
        self.on_zero_crossing = on_zero_crossing
        self.windows = [RollingWindow(self.config.window_size) for _ in models]
        self._time = self.config.start_time
        self._previous_positions = [0.0] * len(models)

    @property
    def time(self) -> float:
        return self._time

    def update_model(self, index: int, model: OscillatorModel) -> None:
        """
        Replace the model in slot ``index`` without resetting the clock.

        Raises
        ------
        IndexError
            If ``index`` is not a slot of this driver (negative indices
            are not accepted)
        """
        if not 0 <= index < len(self.models):
            raise IndexError(
                f"Model index {index} out of range for {len(self.models)} models"
            )
        self.models[index] = model

    def step(self) -> List[MotionSample]:
        """Advance the shared clock one tick; one sample per model, in order."""
        self._time += self.config.time_step
        samples = []
        for index, model in enumerate(self.models):
            sample = sample_motion(model, self._time)
            crossed = crossed_equilibrium(self._previous_positions[index], sample["position"])
            self._previous_positions[index] = sample["position"]
            self.windows[index].append(sample)
            if crossed and self.on_zero_crossing is not None:
                self.on_zero_crossing(index, sample)
            samples.append(sample)
        return samples

    def run(self, n_steps: int) -> List[List[MotionSample]]:
        if n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {n_steps}")
        return [self.step() for _ in range(n_steps)]

    def reset(self) -> None:
        self._time = self.config.start_time
        for window in self.windows:
            window.clear()


__all__ = [
    "AnimationDriver",
    "ComparisonDriver",
    "crossed_equilibrium",
    "cue_frequency",
]
