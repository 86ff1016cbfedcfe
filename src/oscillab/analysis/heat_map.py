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
Parameter Heat Map

Point evaluations of the engine over a mass × spring-constant grid.

Grid Layout
-----------
Row i holds mass m_max - i·Δm (heaviest first), column j holds spring
constant k_min + j·Δk, with Δ = (max - min) / steps. Each cell evaluates the
selected quantity on a copy of the base model with (m, k) replaced:

    'amplitude' : |x(0)|
    'frequency' : ω = sqrt(k/m)
    'period'    : 2π / (ω·f)

Usage
-----
>>> grid = heat_map_grid(OscillatorModel(), "period")
>>> grid["values"].shape
(20, 20)
>>> colours = normalize_grid(grid["values"])
"""

from typing import Callable, Dict, Optional

import numpy as np

from oscillab.config import HeatMapConfig
from oscillab.physics.engine import angular_frequency, period, position
from oscillab.types.model import OscillatorModel
from oscillab.types.results import HeatMapGrid, HeatMapQuantity

_EVALUATORS: Dict[str, Callable[[OscillatorModel], float]] = {
    "amplitude": lambda model: abs(position(model, 0.0)),
    "frequency": angular_frequency,
    "period": period,
}


def heat_map_grid(
    base_model: OscillatorModel,
    quantity: HeatMapQuantity = "amplitude",
    config: Optional[HeatMapConfig] = None,
) -> HeatMapGrid:
    """
    Evaluate ``quantity`` over the mass × spring-constant grid.

    Parameters
    ----------
    base_model : OscillatorModel
        Supplies every parameter except mass and spring constant
    quantity : str
        'amplitude', 'frequency' or 'period'
    config : Optional[HeatMapConfig]
        Ranges and resolution (default 20 × 20 over k∈[1, 20], m∈[0.5, 5])

    Returns
    -------
    HeatMapGrid

    Raises
    ------
    ValueError
        If quantity is unknown

    Notes
    -----
    'period' cells come from :func:`oscillab.physics.engine.period`, so
    they include the base model's frequency multiplier: with f = 2 every
    cell is half of 2π/sqrt(k/m). 'frequency' cells are the natural ω and
    ignore f.
    """
    if quantity not in _EVALUATORS:
        raise ValueError(
            f"Unknown heat map quantity '{quantity}'. "
            f"Available: {', '.join(_EVALUATORS)}"
        )
    if config is None:
        config = HeatMapConfig()

    evaluate = _EVALUATORS[quantity]
    k_min, k_max = config.spring_constant_range
    m_min, m_max = config.mass_range
    steps = config.steps

    k_step = (k_max - k_min) / steps
    m_step = (m_max - m_min) / steps
    masses = np.array([m_max - i * m_step for i in range(steps)])
    spring_constants = np.array([k_min + j * k_step for j in range(steps)])

    values = np.empty((steps, steps), dtype=np.float64)
    for i, mass in enumerate(masses):
        for j, spring_constant in enumerate(spring_constants):
            cell = base_model.replace(mass=float(mass), spring_constant=float(spring_constant))
            values[i, j] = evaluate(cell)

    return {
        "quantity": quantity,
        "values": values,
        "masses": masses,
        "spring_constants": spring_constants,
    }


def normalize_grid(values) -> np.ndarray:
    """
    Rescale to [0, 1] by (v - min) / (max - min).

    A flat grid has max == min and comes back as all NaN; that is left to the
    display layer.
    """
    data = np.asarray(values, dtype=np.float64)
    low = np.min(data)
    high = np.max(data)
    with np.errstate(divide="ignore", invalid="ignore"):
        return (data - low) / (high - low)


__all__ = ["heat_map_grid", "normalize_grid"]
