"""
Atmospheric parameters for the FAO-56 Penman-Monteith equation.

Formulas (FAO-56 chapter 3):
    P = 101.3 * ((293 - 0.0065 z) / 293) ^ 5.26        (eq. 7)
    γ = 0.665e-3 * P                                    (eq. 8)

Where:
    - z = elevation above sea level (m)
    - P = atmospheric pressure (kPa)
    - γ = psychrometric constant (kPa/°C)
"""

from ..core.constants import (
    PRESSURE_EXPONENT,
    PRESSURE_LAPSE_RATE,
    PRESSURE_REFERENCE_TEMPERATURE,
    PSYCHROMETRIC_COEF,
    SEA_LEVEL_PRESSURE,
)


def atmospheric_pressure(elevation_m):
    """
    Estimate atmospheric pressure from elevation.

    Simplification of the ideal gas law assuming 20 °C for a standard
    atmosphere.

    Args:
        elevation_m: Elevation above sea level (m)

    Returns:
        Atmospheric pressure (kPa)
    """
    base = (PRESSURE_REFERENCE_TEMPERATURE - PRESSURE_LAPSE_RATE * elevation_m) / PRESSURE_REFERENCE_TEMPERATURE
    return SEA_LEVEL_PRESSURE * base ** PRESSURE_EXPONENT


def psychrometric_constant(pressure_kpa):
    """
    Psychrometric constant for a given atmospheric pressure.

    Args:
        pressure_kpa: Atmospheric pressure (kPa)

    Returns:
        Psychrometric constant (kPa/°C)
    """
    return PSYCHROMETRIC_COEF * pressure_kpa


__all__ = ['atmospheric_pressure', 'psychrometric_constant']
