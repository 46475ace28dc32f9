"""Scopeatmos - Standard atmosphere model for air traffic simulation.

Tabulates temperature, pressure, and density from -2000 ft to 65617 ft
at 1 ft resolution, starting from observed surface conditions.

Example:
    >>> from scopeatmos import AtmosphereModel
    >>>
    >>> atm = AtmosphereModel.from_dict({"surfaceTemperature": 15})
    >>> print(f"{atm.get_temperature_at_actual_altitude(36089):.2f} K")
"""

__version__ = "0.1.0"

from scopeatmos.environment import (
    DEFAULT_ENVIRONMENT,
    AltitudeOutOfRangeError,
    AtmosphereModel,
    AtmosphereResult,
    EnvironmentConstants,
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
