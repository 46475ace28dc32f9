"""Surface condition intake.

Converts the surface observations carried by scenario data into the sea
level reference values the gradient builders start from.

Wind vector convention: x points east, y points north, and the wind angle
is a heading measured clockwise from north in degrees. A 90 degree wind of
10 kt therefore becomes (10, 0).

Example:
    >>> from scopeatmos.environment import SurfaceConditions, SurfaceWind
    >>>
    >>> surface = SurfaceConditions(
    ...     surface_temperature=15.0,
    ...     surface_elevation=0.0,
    ...     surface_wind=SurfaceWind(angle=270.0, speed=12.0),
    ... )
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from scopeatmos.environment.constants import (
    CELSIUS_TO_KELVIN,
    DEFAULT_ENVIRONMENT,
    LAPSE_RATE_K_PER_FT,
    EnvironmentConstants,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Input Records
# =============================================================================


@beartype
@dataclass(frozen=True)
class SurfaceWind:
    """Wind measured at the surface.

    Attributes:
        angle: Heading the wind is given at, clockwise from north [deg]
        speed: Wind speed [kt]
    """
    angle: float | int
    speed: float | int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SurfaceWind":
        """Create from a ``{"angle": ..., "speed": ...}`` mapping."""
        missing = [key for key in ("angle", "speed") if key not in data]
        if missing:
            raise ValueError(f"Surface wind is missing required key(s): {missing}")
        return cls(angle=float(data["angle"]), speed=float(data["speed"]))


@beartype
@dataclass(frozen=True)
class SurfaceConditions:
    """Observed surface conditions. Every field is optional.

    Attributes:
        surface_temperature: Temperature at the surface elevation [degC]
        surface_elevation: Elevation the observations were taken at [ft MSL]
        surface_wind: Wind at the surface elevation
    """
    surface_temperature: float | int | None = None
    surface_elevation: float | int | None = None
    surface_wind: SurfaceWind | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SurfaceConditions":
        """Create from scenario data.

        Reads the ``surfaceTemperature``, ``surfaceElevation`` and
        ``surfaceWind`` keys; anything else in the mapping is ignored.
        """
        temperature = data.get("surfaceTemperature")
        elevation = data.get("surfaceElevation")
        wind = data.get("surfaceWind")

        return cls(
            surface_temperature=None if temperature is None else float(temperature),
            surface_elevation=None if elevation is None else float(elevation),
            surface_wind=None if wind is None else SurfaceWind.from_dict(wind),
        )


# =============================================================================
# Sea Level Reduction
# =============================================================================


@beartype
def sea_level_temperature_from_surface(
    surface_temperature: float | int | None,
    surface_elevation: float | int | None = None,
    constants: EnvironmentConstants = DEFAULT_ENVIRONMENT,
) -> float:
    """Reduce a surface temperature to its sea level equivalent.

    Applies the troposphere lapse rate between the surface elevation and
    0 ft. A missing elevation is treated as sea level.

    Args:
        surface_temperature: Temperature at the surface [degC], or None
        surface_elevation: Elevation of the observation [ft MSL], or None
        constants: Defaults used when the temperature is missing

    Returns:
        Sea level temperature [K]
    """
    if surface_temperature is None:
        logger.debug(
            "No surface temperature; using %.2f K at sea level",
            constants.sea_level_temperature_k,
        )
        return float(constants.sea_level_temperature_k)

    elevation = 0.0 if surface_elevation is None else surface_elevation
    surface_temperature_k = surface_temperature + CELSIUS_TO_KELVIN

    return float(surface_temperature_k + LAPSE_RATE_K_PER_FT * elevation)


@beartype
def wind_vector_from_surface(
    surface_wind: SurfaceWind | None,
    constants: EnvironmentConstants = DEFAULT_ENVIRONMENT,
) -> NDArray[np.float64]:
    """Convert a surface wind into an (east, north) vector in knots."""
    if surface_wind is None:
        logger.debug("No surface wind; using default wind vector")
        return np.array(constants.sea_level_wind_vector_kt, dtype=np.float64)

    heading = np.radians(surface_wind.angle)
    unit = np.array([np.sin(heading), np.cos(heading)])
    return unit * surface_wind.speed
