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
Oscillator Model

Immutable parameter record describing one spring-mass configuration.

Physical System:
---------------
A point mass m hanging from a linear spring of stiffness k. The displacement
from equilibrium follows a damped cosine

    x(t) = A·e^{-γt}·cos(ω·f·t + φ)

where ω = sqrt(k/m), f is a dimensionless frequency multiplier, φ is the
initial phase (stored in degrees) and γ is the damping coefficient.

The record is a frozen dataclass. "Editing" a parameter means building a new
record with ``model.replace(...)``; nothing holds on to a shared mutable copy.

Usage
-----
>>> from oscillab.types import OscillatorModel, create_model
>>>
>>> model = OscillatorModel()          # default model
>>> stiffer = model.replace(spring_constant=20.0)
>>> second = create_model(2)           # "Model 2" with default physics
"""

import dataclasses
import time as _time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

DEFAULT_MODEL_ID = "default-model"

# snake_case field name -> camelCase key used by the serialized form
_CAMEL_CASE_KEYS = {
    "created_at": "createdAt",
    "spring_constant": "springConstant",
    "initial_velocity": "initialVelocity",
    "chaos_mode": "chaosMode",
}
_SNAKE_CASE_KEYS = {camel: snake for snake, camel in _CAMEL_CASE_KEYS.items()}


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class OscillatorModel:
    """
    Parameter set for one damped spring-mass oscillator.

    Attributes
    ----------
    id : str
        Opaque unique identifier
    name : str
        Display name (no effect on physics)
    description : Optional[str]
        Display description (no effect on physics)
    created_at : str
        ISO-8601 creation timestamp (informational)
    amplitude : float
        Initial displacement magnitude A
    frequency : float
        Dimensionless multiplier f applied to the angular frequency
    phase : float
        Initial phase φ in degrees (not normalized to [0, 360))
    mass : float
        Mass m [kg], must be > 0
    spring_constant : float
        Spring stiffness k [N/m], must be > 0
    initial_velocity : float
        Stored for display when chaos mode is on. The closed-form motion
        functions do not use it.
    damping : float
        Exponential decay rate γ ≥ 0
    chaos_mode : bool
        Randomized-initial-velocity flag (cosmetic)

    Examples
    --------
    >>> model = OscillatorModel()
    >>> model.mass, model.spring_constant
    (1.0, 10.0)
    >>> heavier = model.replace(mass=2.0)
    >>> model.mass  # original untouched
    1.0
    """

    id: str = DEFAULT_MODEL_ID
    name: str = "Default Model"
    description: Optional[str] = "Standard harmonic oscillator with default parameters"
    created_at: str = field(default_factory=_utc_now_iso)

    # Physics parameters
    amplitude: float = 100.0
    frequency: float = 1.0
    phase: float = 0.0
    mass: float = 1.0
    spring_constant: float = 10.0

    # Additional parameters
    initial_velocity: float = 0.0
    damping: float = 0.0
    chaos_mode: bool = False

    def replace(self, **changes: Any) -> "OscillatorModel":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a plain mapping with camelCase keys.

        Returns
        -------
        Dict[str, Any]
            e.g. ``{'id': ..., 'springConstant': 10.0, 'chaosMode': False, ...}``
        """
        return {
            _CAMEL_CASE_KEYS.get(f.name, f.name): getattr(self, f.name)
            for f in dataclasses.fields(self)
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OscillatorModel":
        """
        Build a model from a mapping with camelCase or snake_case keys.

        Missing keys take their defaults.

        Raises
        ------
        TypeError
            If the mapping contains keys that are not model fields
        """
        known = {f.name for f in dataclasses.fields(cls)}
        kwargs = {}
        unknown = []
        for key, value in data.items():
            name = _SNAKE_CASE_KEYS.get(key, key)
            if name not in known:
                unknown.append(key)
                continue
            kwargs[name] = value

        if unknown:
            raise TypeError(f"Unknown OscillatorModel fields: {sorted(unknown)}")

        return cls(**kwargs)


DEFAULT_MODEL = OscillatorModel()


def create_model(index: int, **overrides: Any) -> OscillatorModel:
    """
    Create a new model with default physics parameters.

    Mirrors the "New Model" action: a millisecond-timestamp id, the name
    ``Model <index>`` and a fresh creation time.

    Parameters
    ----------
    index : int
        Number used in the display name (usually collection size + 1)
    **overrides
        Any field to set instead of its default

    Returns
    -------
    OscillatorModel

    Examples
    --------
    >>> model = create_model(3, damping=0.1)
    >>> model.name
    'Model 3'
    """
    values: Dict[str, Any] = {
        "id": f"model-{int(_time.time() * 1000)}",
        "name": f"Model {index}",
        "created_at": _utc_now_iso(),
    }
    values.update(overrides)
    return DEFAULT_MODEL.replace(**values)


__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_MODEL_ID",
    "OscillatorModel",
    "create_model",
]
