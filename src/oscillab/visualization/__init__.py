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
Visualization Tools
===================

Plotly figures and colour handling for oscillator views.

Plotting
--------
>>> from oscillab.visualization import MotionPlotter
>>>
>>> plotter = MotionPlotter()
>>> fig = plotter.plot_motion(result)
>>> fig = plotter.plot_phase_space(result)
>>> fig = plotter.plot_heat_map(grid)

Themes and Styling
------------------
>>> from oscillab.visualization import get_model_color, PlotThemes
>>>
>>> color = get_model_color(index)
>>> fig = PlotThemes.apply_theme(fig, theme="dark")
"""

from .motion_plots import MotionPlotter
from .themes import (
    ColorSchemes,
    PlotThemes,
    get_model_color,
    heat_color,
    heat_colorscale,
    hex_to_rgb,
    lighten_color,
    rgba,
)

__all__ = [
    # Plotters
    "MotionPlotter",
    # Themes and styling
    "ColorSchemes",
    "PlotThemes",
    "get_model_color",
    "heat_color",
    "heat_colorscale",
    "hex_to_rgb",
    "lighten_color",
    "rgba",
]
