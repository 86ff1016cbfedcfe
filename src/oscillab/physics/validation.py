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
Boundary validation for oscillator parameters.

The engine accepts any model and lets invalid parameters surface as NaN/inf.
These helpers are for the input boundary: ``validate_model`` reports
problems without raising, ``check_model`` raises on errors and warns on
out-of-range values.

Errors (outside the physical domain):
    mass <= 0, spring_constant <= 0, damping < 0, any non-finite parameter

Warnings (physical but outside PARAMETER_RANGES):
    e.g. amplitude = 500
"""

import math
import warnings
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from oscillab.config import PARAMETER_RANGES
from oscillab.types.model import OscillatorModel

_PHYSICAL_FIELDS = ("amplitude", "frequency", "phase", "mass", "spring_constant", "damping")


@dataclass(frozen=True)
class ModelValidationResult:
    """
    Container for parameter validation results.

    Attributes
    ----------
    is_valid : bool
        True if no errors were found (warnings allowed)
    errors : List[str]
        Parameters outside the physical domain
    warnings : List[str]
        Parameters outside the configured input ranges
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]


def validate_model(
    model: OscillatorModel,
    ranges: Optional[Dict[str, Tuple[float, float]]] = None,
) -> ModelValidationResult:
    """
    Check a model against the physical domain and the input ranges.

    Parameters
    ----------
    model : OscillatorModel
    ranges : Optional[Dict[str, Tuple[float, float]]]
        Inclusive (min, max) per field, defaults to PARAMETER_RANGES

    Returns
    -------
    ModelValidationResult

    Examples
    --------
    >>> result = validate_model(OscillatorModel(mass=0.0))
    >>> result.is_valid
    False
    >>> result.errors
    ['mass must be positive, got 0.0']
    """
    if ranges is None:
        ranges = PARAMETER_RANGES

    errors: List[str] = []
    range_warnings: List[str] = []

    for name in _PHYSICAL_FIELDS:
        value = getattr(model, name)
        if not math.isfinite(value):
            errors.append(f"{name} must be finite, got {value}")

    if model.mass <= 0:
        errors.append(f"mass must be positive, got {model.mass}")
    if model.spring_constant <= 0:
        errors.append(f"spring_constant must be positive, got {model.spring_constant}")
    if model.damping < 0:
        errors.append(f"damping must be non-negative, got {model.damping}")

    for name, (low, high) in ranges.items():
        value = getattr(model, name)
        if math.isfinite(value) and not low <= value <= high:
            range_warnings.append(f"{name}={value} is outside the range [{low}, {high}]")

    return ModelValidationResult(
        is_valid=not errors, errors=errors, warnings=range_warnings
    )


def check_model(
    model: OscillatorModel,
    ranges: Optional[Dict[str, Tuple[float, float]]] = None,
) -> OscillatorModel:
    """
    Validate ``model`` and return it unchanged.

    Raises
    ------
    ValueError
        If any physical-domain error is found

    Warns
    -----
    UserWarning
        Once per parameter outside its input range
    """
    result = validate_model(model, ranges)
    if not result.is_valid:
        raise ValueError(
            f"Invalid oscillator model '{model.name}': " + "; ".join(result.errors)
        )
    for message in result.warnings:
        warnings.warn(message, UserWarning)
    return model


__all__ = ["ModelValidationResult", "check_model", "validate_model"]
