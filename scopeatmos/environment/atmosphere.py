"""Altitude-indexed atmosphere model.

Tabulates temperature, pressure, and density at every integer foot from
-2000 ft to 65617 ft, derived from surface conditions, for aircraft flying
through the simulated airspace.

The model covers two layers of the standard atmosphere:
- Troposphere (below 36089 ft): -1.98 K per 1000 ft lapse rate
- Stratosphere I (36089 ft and up): isothermal, pressure decays exponentially

All gradients are computed once, when the model is constructed. To reflect
new surface conditions, build a new model.

Reference:
- https://en.wikipedia.org/wiki/Barometric_formula
- https://www.digitaldutch.com/atmoscalc/

Example:
    >>> from scopeatmos.environment import AtmosphereModel
    >>>
    >>> atm = AtmosphereModel.from_dict({
    ...     "surfaceTemperature": 20,
    ...     "surfaceElevation": 1200,
    ...     "surfaceWind": {"angle": 270, "speed": 12},
    ... })
    >>> result = atm.at_actual_altitude(10000)
    >>> print(f"Temperature: {result.temperature:.1f} K")
    >>> print(f"Pressure: {result.pressure:.2f} inHg")
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import polars as pl
from beartype import beartype
from numpy.typing import NDArray

from scopeatmos.environment.constants import (
    DEFAULT_ENVIRONMENT,
    MAX_ALTITUDE_FT,
    MIN_ALTITUDE_FT,
    EnvironmentConstants,
)
from scopeatmos.environment.gradients import (
    altitude_domain,
    build_density_gradient,
    build_pressure_gradient,
    build_temperature_gradient,
)
from scopeatmos.environment.surface import (
    SurfaceConditions,
    sea_level_temperature_from_surface,
    wind_vector_from_surface,
)

logger = logging.getLogger(__name__)

Altitude = int | np.integer


class AltitudeOutOfRangeError(ValueError):
    """Raised when an altitude query falls outside the tabulated range."""


# =============================================================================
# Result Classes
# =============================================================================


@beartype
@dataclass(frozen=True)
class AtmosphereResult:
    """Atmospheric conditions at a given altitude.

    Attributes:
        altitude: Actual altitude [ft MSL]
        temperature: Static temperature [K]
        pressure: Static pressure [inHg]
        density: Air density [simulation density unit]
    """
    altitude: int
    temperature: float
    pressure: float
    density: float


# =============================================================================
# Atmosphere Model
# =============================================================================


def _read_only(array: NDArray) -> NDArray:
    """Mark an array read-only and return it."""
    array.setflags(write=False)
    return array


@beartype
class AtmosphereModel:
    """Two-layer standard atmosphere tabulated at 1 ft resolution.

    Example:
        >>> atm = AtmosphereModel()
        >>> T = atm.get_temperature_at_actual_altitude(10000)  # K
        >>> p = atm.get_pressure_at_actual_altitude(10000)  # inHg
    """

    def __init__(
        self,
        surface: SurfaceConditions | None = None,
        constants: EnvironmentConstants = DEFAULT_ENVIRONMENT,
    ) -> None:
        """Build every gradient from the surface conditions.

        Args:
            surface: Observed surface conditions; missing values are defaulted
            constants: Sea level defaults for this model
        """
        if surface is None:
            surface = SurfaceConditions()

        self._constants = constants
        self._sea_level_temperature = sea_level_temperature_from_surface(
            surface.surface_temperature,
            surface.surface_elevation,
            constants,
        )
        # Not derived from surface conditions yet
        self._sea_level_pressure = float(constants.sea_level_pressure_inhg)
        self._sea_level_wind_vector = _read_only(
            wind_vector_from_surface(surface.surface_wind, constants)
        )

        self._altitudes = _read_only(altitude_domain())
        self._temperature_gradient = _read_only(
            build_temperature_gradient(self._sea_level_temperature)
        )
        self._pressure_gradient = _read_only(
            build_pressure_gradient(self._sea_level_pressure, self._sea_level_temperature)
        )
        self._density_gradient = _read_only(
            build_density_gradient(self._pressure_gradient, self._temperature_gradient)
        )

        logger.debug(
            "Built atmosphere: T0=%.2f K, P0=%.2f inHg, wind=(%.1f, %.1f) kt",
            self._sea_level_temperature,
            self._sea_level_pressure,
            self._sea_level_wind_vector[0],
            self._sea_level_wind_vector[1],
        )

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        constants: EnvironmentConstants = DEFAULT_ENVIRONMENT,
    ) -> "AtmosphereModel":
        """Create from scenario data (``surfaceTemperature`` etc.)."""
        return cls(SurfaceConditions.from_dict(data), constants)

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    @property
    def constants(self) -> EnvironmentConstants:
        """Defaults this model was built with."""
        return self._constants

    @property
    def sea_level_temperature(self) -> float:
        """Sea level temperature [K]."""
        return self._sea_level_temperature

    @property
    def sea_level_pressure(self) -> float:
        """Sea level pressure [inHg]."""
        return self._sea_level_pressure

    @property
    def sea_level_wind_vector(self) -> NDArray[np.float64]:
        """Sea level wind (east, north) [kt]."""
        return self._sea_level_wind_vector

    @property
    def altitudes(self) -> NDArray[np.int64]:
        """Tabulated altitudes [ft], aligned with the gradients."""
        return self._altitudes

    @property
    def temperature_gradient(self) -> NDArray[np.float64]:
        """Temperature at every tabulated altitude [K]."""
        return self._temperature_gradient

    @property
    def pressure_gradient(self) -> NDArray[np.float64]:
        """Pressure at every tabulated altitude [inHg]."""
        return self._pressure_gradient

    @property
    def density_gradient(self) -> NDArray[np.float64]:
        """Density at every tabulated altitude."""
        return self._density_gradient

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @staticmethod
    def _index(actual_altitude: Altitude) -> int:
        """Gradient index for an altitude, validating the queryable range."""
        if not MIN_ALTITUDE_FT <= actual_altitude < MAX_ALTITUDE_FT:
            raise AltitudeOutOfRangeError(
                f"Expected altitude within {MIN_ALTITUDE_FT} ft to {MAX_ALTITUDE_FT} ft, "
                f"but received altitude of {actual_altitude}"
            )
        return int(actual_altitude) - MIN_ALTITUDE_FT

    def get_temperature_at_actual_altitude(self, actual_altitude: Altitude) -> float:
        """Get temperature at altitude.

        Args:
            actual_altitude: Actual altitude [ft MSL]

        Returns:
            Temperature [K]

        Raises:
            AltitudeOutOfRangeError: If the altitude is outside [-2000, 65617)
        """
        return float(self._temperature_gradient[self._index(actual_altitude)])

    def get_pressure_at_actual_altitude(self, actual_altitude: Altitude) -> float:
        """Get pressure [inHg] at altitude [ft MSL]."""
        return float(self._pressure_gradient[self._index(actual_altitude)])

    def get_density_at_actual_altitude(self, actual_altitude: Altitude) -> float:
        """Get density at altitude [ft MSL]."""
        return float(self._density_gradient[self._index(actual_altitude)])

    def at_actual_altitude(self, actual_altitude: Altitude) -> AtmosphereResult:
        """Get all atmospheric properties at altitude [ft MSL]."""
        index = self._index(actual_altitude)

        return AtmosphereResult(
            altitude=int(actual_altitude),
            temperature=float(self._temperature_gradient[index]),
            pressure=float(self._pressure_gradient[index]),
            density=float(self._density_gradient[index]),
        )

    def to_dataframe(self) -> pl.DataFrame:
        """Convert the full table to a Polars DataFrame."""
        return pl.DataFrame({
            "altitude": self._altitudes,
            "temperature": self._temperature_gradient,
            "pressure": self._pressure_gradient,
            "density": self._density_gradient,
        })

    # -------------------------------------------------------------------------
    # Unsupported
    # -------------------------------------------------------------------------

    def get_actual_altitude_for_pressure_altitude(self, pressure_altitude: Altitude) -> int:
        """Not supported: pressure altitude to actual altitude."""
        self._index(pressure_altitude)
        raise NotImplementedError("Pressure altitude to actual altitude conversion is not supported")

    def get_pressure_altitude_for_actual_altitude(self, actual_altitude: Altitude) -> int:
        """Not supported: actual altitude to pressure altitude."""
        self._index(actual_altitude)
        raise NotImplementedError("Actual altitude to pressure altitude conversion is not supported")

    def get_density_altitude_for_actual_altitude(self, actual_altitude: Altitude) -> int:
        """Not supported: actual altitude to density altitude."""
        self._index(actual_altitude)
        raise NotImplementedError("Actual altitude to density altitude conversion is not supported")

    def get_sound_speed_at_actual_altitude(self, actual_altitude: Altitude) -> float:
        """Not supported: speed of sound gradient."""
        self._index(actual_altitude)
        raise NotImplementedError("Speed of sound at altitude is not supported")

    def get_wind_at_actual_altitude(self, actual_altitude: Altitude) -> NDArray[np.float64]:
        """Not supported: wind gradient and winds aloft."""
        self._index(actual_altitude)
        raise NotImplementedError("Wind at altitude is not supported")
