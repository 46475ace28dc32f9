"""Environment models for the flight simulation.

Provides the altitude-indexed atmosphere the aircraft fly through.

Example:
    >>> from scopeatmos.environment import AtmosphereModel, SurfaceConditions
    >>>
    >>> atm = AtmosphereModel(SurfaceConditions(surface_temperature=25.0))
    >>> rho = atm.get_density_at_actual_altitude(5000)
"""

from scopeatmos.environment.atmosphere import (
    AltitudeOutOfRangeError,
    AtmosphereModel,
    AtmosphereResult,
)
from scopeatmos.environment.constants import (
    DEFAULT_ENVIRONMENT,
    EnvironmentConstants,
)
from scopeatmos.environment.surface import (
    SurfaceConditions,
    SurfaceWind,
)

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "AltitudeOutOfRangeError",
    "AtmosphereModel",
    "AtmosphereResult",
    "EnvironmentConstants",
    "SurfaceConditions",
    "SurfaceWind",
]
