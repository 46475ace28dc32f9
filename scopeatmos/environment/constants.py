"""Standard atmosphere constants for the altitude-indexed atmosphere model.

The model covers two layers of the International Standard Atmosphere,
tabulated at 1 ft resolution:
- Troposphere (-2000 ft to 36089 ft): linear temperature lapse
- Stratosphere I (36089 ft to 65617 ft): isothermal

Units follow the consuming flight simulation: altitude in feet, temperature
in Kelvin, pressure in inches of mercury, wind in knots.
"""

from dataclasses import dataclass

from beartype import beartype

# =============================================================================
# Altitude Domain
# =============================================================================

MIN_ALTITUDE_FT: int = -2000  # Lowest tabulated altitude [ft]
MAX_ALTITUDE_FT: int = 65617  # Highest tabulated altitude [ft], inclusive
TROPOPAUSE_ALTITUDE_FT: int = 36089  # Base of stratosphere I [ft]

GRADIENT_SIZE: int = MAX_ALTITUDE_FT - MIN_ALTITUDE_FT + 1

# =============================================================================
# Layer Constants
# =============================================================================

LAPSE_RATE_K_PER_FT: float = 0.00198121311  # Troposphere lapse rate [K/ft]
BAROMETRIC_EXPONENT: float = 5.255876329  # g*M / (R*L), dimensionless
STRATOSPHERE_DECAY_PER_FT: float = 0.0000480634303  # g*M / (R*T11) [1/ft]
DENSITY_CONSTANT: float = 11.796888418  # inHg/K -> simulation density unit

CELSIUS_TO_KELVIN: float = 273.15


# =============================================================================
# Environment Defaults
# =============================================================================


@beartype
@dataclass(frozen=True)
class EnvironmentConstants:
    """Sea level defaults applied when surface conditions are not supplied.

    Attributes:
        sea_level_temperature_k: Standard sea level temperature [K]
        sea_level_pressure_inhg: Standard sea level pressure [inHg]
        sea_level_wind_vector_kt: Default wind vector (east, north) [kt]
    """
    sea_level_temperature_k: float | int = 288.15
    sea_level_pressure_inhg: float | int = 29.92
    sea_level_wind_vector_kt: tuple[float | int, float | int] = (0.0, 0.0)


DEFAULT_ENVIRONMENT = EnvironmentConstants()
