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
Plotting Themes and Color Schemes

Palettes and styling shared by every oscillator view.

Key Features
------------
- Per-model palette for multi-model views (index-based, cycles after 5)
- Blue → green → red heat map colouring
- Quantity colours so position/velocity/energy keep one colour everywhere
- Plot themes: Default, Dark, Presentation

Main Classes
------------
ColorSchemes : Color palette definitions
    MODELS : Per-model colours
    QUANTITIES : Colour per plotted quantity
    PLOTLY : Default Plotly colours
    COLORBLIND_SAFE : Wong palette

PlotThemes : Complete theme configurations

Usage
-----
>>> from oscillab.visualization.themes import get_model_color, PlotThemes
>>>
>>> get_model_color(0)
'#3b82f6'
>>> fig = PlotThemes.apply_theme(fig, theme='dark')
"""

import math
from typing import Dict, List, Optional, Union

import plotly.graph_objects as go


class ColorSchemes:
    """
    Predefined color palettes.

    Attributes
    ----------
    MODELS : List[str]
        One colour per model slot (5 colours, cycled by index)
    QUANTITIES : Dict[str, str]
        Colour per motion/energy quantity
    PLOTLY : List[str]
        Default Plotly color sequence (10 colors)
    COLORBLIND_SAFE : List[str]
        Wong palette - colorblind accessible (8 colors)
    """

    MODELS = [
        "#3b82f6",  # Blue
        "#ef4444",  # Red
        "#10b981",  # Green
        "#f59e0b",  # Amber
        "#8b5cf6",  # Purple
    ]

    QUANTITIES = {
        "position": "#3b82f6",
        "velocity": "#10b981",
        "acceleration": "#f59e0b",
        "kinetic": "#3b82f6",
        "potential": "#ef4444",
        "total": "#8b5cf6",
    }

    PLOTLY = [
        "#636EFA",  # Blue
        "#EF553B",  # Red
        "#00CC96",  # Green
        "#AB63FA",  # Purple
        "#FFA15A",  # Orange
        "#19D3F3",  # Cyan
        "#FF6692",  # Pink
        "#B6E880",  # Light green
        "#FF97FF",  # Light purple
        "#FECB52",  # Yellow
    ]

    COLORBLIND_SAFE = [
        "#0173B2",  # Blue
        "#DE8F05",  # Orange
        "#029E73",  # Green
        "#CC78BC",  # Pink
        "#CA9161",  # Tan
        "#949494",  # Gray
        "#ECE133",  # Yellow
        "#56B4E9",  # Sky blue
    ]

    @staticmethod
    def get_colors(scheme: str = "models", n_colors: Optional[int] = None) -> List[str]:
        """
        Get color palette by name.

        Parameters
        ----------
        scheme : str
            'models', 'plotly' or 'colorblind_safe'
        n_colors : Optional[int]
            Number of colors needed; cycles through the palette if larger

        Returns
        -------
        List[str]
            Hex color codes

        Raises
        ------
        ValueError
            If scheme name is not recognized
        """
        scheme_lower = scheme.lower().replace("-", "_").replace(" ", "_")

        if scheme_lower == "models":
            palette = ColorSchemes.MODELS
        elif scheme_lower == "plotly":
            palette = ColorSchemes.PLOTLY
        elif scheme_lower in ["colorblind_safe", "wong"]:
            palette = ColorSchemes.COLORBLIND_SAFE
        else:
            raise ValueError(
                f"Unknown color scheme '{scheme}'. Available: models, plotly, colorblind_safe"
            )

        if n_colors is None:
            return palette.copy()
        return [palette[i % len(palette)] for i in range(n_colors)]


def get_model_color(index: int) -> str:
    """
    Colour for the model at position ``index`` in a collection.

    Examples
    --------
    >>> get_model_color(1)
    '#ef4444'
    >>> get_model_color(5) == get_model_color(0)
    True
    """
    return ColorSchemes.MODELS[index % len(ColorSchemes.MODELS)]


HEAT_MAP_NAN_COLOR = "rgb(128, 128, 128)"


def heat_color(value: float) -> str:
    """
    Map a normalized value in [0, 1] to a blue → green → red colour.

    r = ⌊255·v⌋, g = ⌊255·(1 - |2v - 1|)⌋, b = ⌊255·(1 - v)⌋.
    NaN (flat grid) is grey.

    Examples
    --------
    >>> heat_color(0.0)
    'rgb(0, 0, 255)'
    >>> heat_color(1.0)
    'rgb(255, 0, 0)'
    """
    if math.isnan(value):
        return HEAT_MAP_NAN_COLOR
    r = math.floor(255 * value)
    g = math.floor(255 * (1 - abs(2 * value - 1)))
    b = math.floor(255 * (1 - value))
    return f"rgb({r}, {g}, {b})"


def heat_colorscale(n_stops: int = 11) -> List[List[Union[float, str]]]:
    """Plotly colorscale sampled from :func:`heat_color`."""
    if n_stops < 2:
        raise ValueError(f"n_stops must be at least 2, got {n_stops}")
    return [[k / (n_stops - 1), heat_color(k / (n_stops - 1))] for k in range(n_stops)]


class PlotThemes:
    """
    Complete plotting theme configurations.

    Attributes
    ----------
    DEFAULT : dict
        Standard Plotly white theme
    DARK : dict
        Dark mode theme (matches the energy view's dark canvas)
    PRESENTATION : dict
        Large fonts and thick lines

    Examples
    --------
    >>> fig = plotter.plot_motion(result)
    >>> fig = PlotThemes.apply_theme(fig, theme='presentation')
    """

    DEFAULT = {
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    DARK = {
        "template": "plotly_dark",
        "font_family": "Arial, sans-serif",
        "font_size": 12,
        "line_width": 2,
    }

    PRESENTATION = {
        "template": "plotly_white",
        "font_family": "Arial, sans-serif",
        "font_size": 18,
        "line_width": 3,
        "showlegend": True,
    }

    @staticmethod
    def get_theme(theme: Union[str, Dict]) -> Dict:
        """
        Resolve a theme name or custom dictionary.

        Raises
        ------
        ValueError
            Unknown theme name
        TypeError
            theme is neither str nor dict
        """
        if isinstance(theme, dict):
            return theme
        if not isinstance(theme, str):
            raise TypeError("theme must be str or dict")

        themes = {
            "default": PlotThemes.DEFAULT,
            "dark": PlotThemes.DARK,
            "presentation": PlotThemes.PRESENTATION,
        }
        try:
            return themes[theme.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown theme '{theme}'. Available: default, dark, presentation"
            ) from None

    @staticmethod
    def apply_theme(fig: go.Figure, theme: Union[str, Dict] = "default") -> go.Figure:
        """
        Apply a theme to a Plotly figure in place and return it.

        Parameters
        ----------
        fig : go.Figure
        theme : str or dict
            'default', 'dark', 'presentation' or a custom dictionary with any
            of template, font_family, font_size, line_width, showlegend
        """
        config = PlotThemes.get_theme(theme)

        if "template" in config:
            fig.update_layout(template=config["template"])

        font = {}
        if "font_family" in config:
            font["family"] = config["font_family"]
        if "font_size" in config:
            font["size"] = config["font_size"]
        if font:
            fig.update_layout(font=font)

        if "showlegend" in config:
            fig.update_layout(showlegend=config["showlegend"])

        if "line_width" in config:
            for trace in fig.data:
                if isinstance(trace, go.Scatter):
                    trace.line.width = config["line_width"]

        return fig


# ============================================================================
# Color Manipulation Utilities
# ============================================================================


def hex_to_rgb(hex_color: str) -> tuple:
    """
    Convert hex color to an (r, g, b) tuple in [0, 255].

    >>> hex_to_rgb('#3b82f6')
    (59, 130, 246)
    """
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgba(hex_color: str, alpha: float) -> str:
    """CSS rgba() string for a hex colour, used for filled areas."""
    r, g, b = hex_to_rgb(hex_color)
    return f"rgba({r}, {g}, {b}, {alpha})"


def lighten_color(hex_color: str, factor: float = 0.2) -> str:
    """
    Move a hex color toward white (factor > 0) or black (factor < 0).

    Parameters
    ----------
    hex_color : str
    factor : float
        In [-1, 1]

    Returns
    -------
    str
        Modified hex color
    """
    r, g, b = hex_to_rgb(hex_color)

    if factor > 0:
        r, g, b = (int(c + (255 - c) * factor) for c in (r, g, b))
    else:
        r, g, b = (int(c * (1 + factor)) for c in (r, g, b))

    r, g, b = (max(0, min(255, c)) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


__all__ = [
    "ColorSchemes",
    "HEAT_MAP_NAN_COLOR",
    "PlotThemes",
    "get_model_color",
    "heat_color",
    "heat_colorscale",
    "hex_to_rgb",
    "lighten_color",
    "rgba",
]
