"""Per-foot gradient builders for the two-layer standard atmosphere.

Each builder fills a dense array with one entry per integer foot from
MIN_ALTITUDE_FT to MAX_ALTITUDE_FT inclusive; index ``i`` holds the value
at altitude ``i + MIN_ALTITUDE_FT``. Core loops are numba-compiled.

The pressure builder reads the same lapse rate as the temperature builder,
so the two gradients stay consistent without sharing state.
"""

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

from scopeatmos.environment.constants import (
    BAROMETRIC_EXPONENT,
    DENSITY_CONSTANT,
    GRADIENT_SIZE,
    LAPSE_RATE_K_PER_FT,
    MAX_ALTITUDE_FT,
    MIN_ALTITUDE_FT,
    STRATOSPHERE_DECAY_PER_FT,
    TROPOPAUSE_ALTITUDE_FT,
)

# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True)
def _fill_temperature(
    out: NDArray[np.float64],
    sea_level_temperature: float,
    lapse_rate: float,
    min_altitude: int,
    tropopause: int,
) -> None:
    """Troposphere lapse below the tropopause, constant above it."""
    tropopause_temperature = sea_level_temperature - (lapse_rate * tropopause)

    for i in range(out.shape[0]):
        alt = i + min_altitude
        if alt < tropopause:
            out[i] = sea_level_temperature - (lapse_rate * alt)
        else:
            out[i] = tropopause_temperature


@njit(cache=True)
def _fill_pressure(
    out: NDArray[np.float64],
    sea_level_pressure: float,
    sea_level_temperature: float,
    lapse_rate: float,
    exponent: float,
    decay: float,
    min_altitude: int,
    tropopause: int,
) -> None:
    """Barometric formula below the tropopause, exponential decay above it."""
    tropopause_pressure = sea_level_pressure * (
        (sea_level_temperature - (lapse_rate * tropopause)) / sea_level_temperature
    ) ** exponent

    for i in range(out.shape[0]):
        alt = i + min_altitude
        if alt < tropopause:
            out[i] = sea_level_pressure * (
                (sea_level_temperature - (lapse_rate * alt)) / sea_level_temperature
            ) ** exponent
        else:
            out[i] = tropopause_pressure * np.exp(-decay * (alt - tropopause))


# =============================================================================
# Builders
# =============================================================================


@beartype
def altitude_domain() -> NDArray[np.int64]:
    """Every tabulated altitude [ft], in gradient index order."""
    return np.arange(MIN_ALTITUDE_FT, MAX_ALTITUDE_FT + 1, dtype=np.int64)


@beartype
def build_temperature_gradient(sea_level_temperature: float | int) -> NDArray[np.float64]:
    """Build the temperature gradient.

    Args:
        sea_level_temperature: Temperature at 0 ft [K]

    Returns:
        Temperature at every tabulated altitude [K]
    """
    gradient = np.empty(GRADIENT_SIZE, dtype=np.float64)
    _fill_temperature(
        gradient,
        float(sea_level_temperature),
        LAPSE_RATE_K_PER_FT,
        MIN_ALTITUDE_FT,
        TROPOPAUSE_ALTITUDE_FT,
    )
    return gradient


@beartype
def build_pressure_gradient(
    sea_level_pressure: float | int,
    sea_level_temperature: float | int,
) -> NDArray[np.float64]:
    """Build the pressure gradient.

    The stratosphere reference pressure is the troposphere formula evaluated
    at the tropopause, so both layers agree at TROPOPAUSE_ALTITUDE_FT.

    Args:
        sea_level_pressure: Pressure at 0 ft [inHg]
        sea_level_temperature: Temperature at 0 ft [K]

    Returns:
        Pressure at every tabulated altitude [inHg]
    """
    gradient = np.empty(GRADIENT_SIZE, dtype=np.float64)
    _fill_pressure(
        gradient,
        float(sea_level_pressure),
        float(sea_level_temperature),
        LAPSE_RATE_K_PER_FT,
        BAROMETRIC_EXPONENT,
        STRATOSPHERE_DECAY_PER_FT,
        MIN_ALTITUDE_FT,
        TROPOPAUSE_ALTITUDE_FT,
    )
    return gradient


@beartype
def build_density_gradient(
    pressure_gradient: NDArray[np.float64],
    temperature_gradient: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Density from the ideal gas relation, rho = K * p / T."""
    if pressure_gradient.shape != temperature_gradient.shape:
        raise ValueError(
            f"Gradient shapes differ: pressure {pressure_gradient.shape}, "
            f"temperature {temperature_gradient.shape}"
        )
    return DENSITY_CONSTANT * pressure_gradient / temperature_gradient
