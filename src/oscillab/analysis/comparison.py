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

from typing import List, Sequence

from oscillab.config import MAX_COMPARISON_MODELS
from oscillab.simulation.sampling import sample_motion
from oscillab.types.model import OscillatorModel
from oscillab.types.results import MotionSample


def compare_at(models: Sequence[OscillatorModel], time: float) -> List[MotionSample]:
    """
    Sample one or two models at one shared time.

    Each model is evaluated independently; results keep the input order.

    Raises
    ------
    ValueError
        If no models or more than MAX_COMPARISON_MODELS models are given
    """
    if not models:
        raise ValueError("compare_at needs at least one model")
    if len(models) > MAX_COMPARISON_MODELS:
        raise ValueError(
            f"Can compare at most {MAX_COMPARISON_MODELS} models, got {len(models)}"
        )
    return [sample_motion(model, time) for model in models]


__all__ = ["compare_at"]
