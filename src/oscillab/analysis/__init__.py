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
Analysis helpers: chart annotations, heat map grids, spectra, comparisons.
"""

from .comparison import compare_at
from .heat_map import heat_map_grid, normalize_grid
from .key_points import find_key_points
from .spectrum import dominant_frequency, position_spectrum

__all__ = [
    "compare_at",
    "dominant_frequency",
    "find_key_points",
    "heat_map_grid",
    "normalize_grid",
    "position_spectrum",
]
