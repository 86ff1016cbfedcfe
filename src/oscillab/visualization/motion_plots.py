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
Motion Plotter - Oscillator Chart Figures

Interactive Plotly figures for the quantities the engine produces.

Key Features
------------
- Motion charts: position, velocity and acceleration vs time
- Energy chart: kinetic/potential stacked areas with the total on top
- Phase space: position vs velocity with start/end markers
- Heat map: mass × spring-constant grid with the blue → red scale
- Comparison: overlaid positions of several models in model colours

All figure builders take data (``TrajectoryResult``, rolling-window arrays or
``HeatMapGrid``) and never call the engine themselves.

Usage
-----
>>> from oscillab.simulation import sample_trajectory
>>> from oscillab.visualization import MotionPlotter
>>>
>>> result = sample_trajectory(model, np.arange(0, 10, 0.02))
>>> fig = MotionPlotter().plot_motion(result)
>>> fig.show()
"""

from typing import Mapping, Optional, Sequence

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from oscillab.types.results import HeatMapGrid
from oscillab.visualization.themes import (
    ColorSchemes,
    PlotThemes,
    get_model_color,
    heat_colorscale,
    lighten_color,
    rgba,
)

_MOTION_ROWS = (
    ("position", "Position x"),
    ("velocity", "Velocity v"),
    ("acceleration", "Acceleration a"),
)

_HEAT_MAP_TITLES = {
    "amplitude": "Amplitude |x(0)|",
    "frequency": "Angular frequency ω [rad/s]",
    "period": "Period T [s]",
}


class MotionPlotter:
    """
    Figure builder for oscillator data.

    Attributes
    ----------
    default_theme : str or dict
        Theme applied to every figure (see PlotThemes)
    """

    def __init__(self, default_theme="default"):
        PlotThemes.get_theme(default_theme)
        self.default_theme = default_theme

    # =========================================================================
    # Time Series
    # =========================================================================

    def plot_motion(
        self,
        result: Mapping[str, np.ndarray],
        envelope: Optional[np.ndarray] = None,
        title: str = "Oscillator Motion",
    ) -> go.Figure:
        """
        Position, velocity and acceleration stacked on a shared time axis.

        Parameters
        ----------
        result : Mapping[str, np.ndarray]
            Needs 'time', 'position', 'velocity', 'acceleration'
        envelope : Optional[np.ndarray]
            A·e^{-γt} on the same grid; drawn as ± dotted lines on the
            position panel
        title : str

        Returns
        -------
        go.Figure
        """
        t = self._column(result, "time")
        fig = make_subplots(
            rows=3,
            cols=1,
            shared_xaxes=True,
            vertical_spacing=0.06,
            subplot_titles=[label for _, label in _MOTION_ROWS],
        )

        for row, (name, label) in enumerate(_MOTION_ROWS, start=1):
            fig.add_trace(
                go.Scatter(
                    x=t,
                    y=self._column(result, name),
                    mode="lines",
                    name=label,
                    line=dict(color=ColorSchemes.QUANTITIES[name], width=2),
                ),
                row=row,
                col=1,
            )

        if envelope is not None:
            envelope = np.asarray(envelope, dtype=np.float64)
            color = lighten_color(ColorSchemes.QUANTITIES["position"], 0.5)
            for sign, label in ((1, "Envelope"), (-1, None)):
                fig.add_trace(
                    go.Scatter(
                        x=t,
                        y=sign * envelope,
                        mode="lines",
                        name=label,
                        line=dict(color=color, width=1, dash="dot"),
                        showlegend=sign > 0,
                    ),
                    row=1,
                    col=1,
                )

        fig.update_xaxes(title_text="Time [s]", row=3, col=1)
        fig.update_layout(title=title, height=750, showlegend=True)
        return PlotThemes.apply_theme(fig, self.default_theme)

    def plot_energy(
        self,
        result: Mapping[str, np.ndarray],
        title: str = "Energy Exchange",
    ) -> go.Figure:
        """
        Kinetic and potential energy as stacked areas, total as a line.

        Parameters
        ----------
        result : Mapping[str, np.ndarray]
            Needs 'time', 'kinetic', 'potential', 'total'
        """
        t = self._column(result, "time")
        fig = go.Figure()

        for name, label in (("kinetic", "Kinetic energy"), ("potential", "Potential energy")):
            color = ColorSchemes.QUANTITIES[name]
            fig.add_trace(
                go.Scatter(
                    x=t,
                    y=self._column(result, name),
                    mode="lines",
                    name=label,
                    stackgroup="energy",
                    line=dict(color=color, width=1),
                    fillcolor=rgba(color, 0.35),
                )
            )

        fig.add_trace(
            go.Scatter(
                x=t,
                y=self._column(result, "total"),
                mode="lines",
                name="Total energy",
                line=dict(color=ColorSchemes.QUANTITIES["total"], width=2, dash="dash"),
            )
        )

        fig.update_layout(
            title=title,
            xaxis_title="Time [s]",
            yaxis_title="Energy [J]",
            showlegend=True,
        )
        return PlotThemes.apply_theme(fig, self.default_theme)

    # =========================================================================
    # Phase Space
    # =========================================================================

    def plot_phase_space(
        self,
        result: Mapping[str, np.ndarray],
        show_start_end: bool = True,
        title: str = "Phase Space",
    ) -> go.Figure:
        """
        Velocity against position.

        A closed ellipse for γ = 0, an inward spiral for γ > 0.

        Parameters
        ----------
        result : Mapping[str, np.ndarray]
            Needs 'position' and 'velocity'
        show_start_end : bool
            Mark the first (green circle) and last (red square) samples
        """
        x = self._column(result, "position")
        v = self._column(result, "velocity")
        if x.size == 0:
            raise ValueError("plot_phase_space requires at least one sample")

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=x,
                y=v,
                mode="lines",
                name="Trajectory",
                line=dict(color=ColorSchemes.QUANTITIES["position"], width=2),
            )
        )

        if show_start_end:
            fig.add_trace(
                go.Scatter(
                    x=[x[0]],
                    y=[v[0]],
                    mode="markers",
                    name="Start",
                    marker=dict(color="green", size=10, symbol="circle"),
                )
            )
            fig.add_trace(
                go.Scatter(
                    x=[x[-1]],
                    y=[v[-1]],
                    mode="markers",
                    name="End",
                    marker=dict(color="red", size=10, symbol="square"),
                )
            )

        fig.update_layout(
            title=title,
            xaxis_title="Position x",
            yaxis_title="Velocity v",
            width=700,
            height=600,
            showlegend=True,
        )
        return PlotThemes.apply_theme(fig, self.default_theme)

    # =========================================================================
    # Heat Map and Comparison
    # =========================================================================

    def plot_heat_map(self, grid: HeatMapGrid, title: Optional[str] = None) -> go.Figure:
        """
        Heat map of a mass × spring-constant sweep.

        Rows follow ``grid['masses']`` (heaviest at the top), columns follow
        ``grid['spring_constants']``.
        """
        quantity = grid["quantity"]
        label = _HEAT_MAP_TITLES.get(quantity, quantity)

        fig = go.Figure(
            go.Heatmap(
                z=grid["values"],
                x=grid["spring_constants"],
                y=grid["masses"],
                colorscale=heat_colorscale(),
                colorbar=dict(title=label),
                hovertemplate=(
                    "Mass: %{y:.2f}<br>Spring constant: %{x:.2f}<br>"
                    + label
                    + ": %{z:.2f}<extra></extra>"
                ),
            )
        )
        fig.update_layout(
            title=title or f"Parameter Heat Map: {label}",
            xaxis_title="Spring constant k [N/m]",
            yaxis_title="Mass m [kg]",
        )
        return PlotThemes.apply_theme(fig, self.default_theme)

    def plot_comparison(
        self,
        results: Sequence[Mapping[str, np.ndarray]],
        names: Optional[Sequence[str]] = None,
        quantity: str = "position",
        title: Optional[str] = None,
    ) -> go.Figure:
        """
        One quantity of several models on a shared time axis.

        Model i is drawn in ``get_model_color(i)``.

        Raises
        ------
        ValueError
            If names and results differ in length
        """
        if names is None:
            names = [f"Model {i + 1}" for i in range(len(results))]
        if len(names) != len(results):
            raise ValueError(
                f"Got {len(results)} results but {len(names)} names"
            )

        fig = go.Figure()
        for index, (result, name) in enumerate(zip(results, names)):
            fig.add_trace(
                go.Scatter(
                    x=self._column(result, "time"),
                    y=self._column(result, quantity),
                    mode="lines",
                    name=name,
                    line=dict(color=get_model_color(index), width=2),
                )
            )

        fig.update_layout(
            title=title or f"Comparison: {quantity}",
            xaxis_title="Time [s]",
            yaxis_title=quantity.capitalize(),
            showlegend=True,
        )
        return PlotThemes.apply_theme(fig, self.default_theme)

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _column(result: Mapping[str, np.ndarray], name: str) -> np.ndarray:
        if name not in result:
            raise KeyError(f"Result has no '{name}' data; available: {sorted(result)}")
        return np.asarray(result[name], dtype=np.float64)


__all__ = ["MotionPlotter"]
