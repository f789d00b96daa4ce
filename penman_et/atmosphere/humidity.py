"""
Air humidity terms for the FAO-56 Penman-Monteith equation.

Formulas (FAO-56 chapter 3):
    e°(T) = 0.6108 * exp(17.27 T / (T + 237.3))               (eq. 11)
    e_s   = (e°(Tmin) + e°(Tmax)) / 2                          (eq. 12)
    Δ     = 4098 * e°(T) / (T + 237.3)²                         (eq. 13)
    e_a   = (e°(Tmin) RHmax/100 + e°(Tmax) RHmin/100) / 2       (eq. 17)
    VPD   = e_s - e_a

The mean saturation vapour pressure averages the two bounding
evaluations; e° at the mean temperature is lower because of the
non-linearity of the curve and must not be used in its place.
"""

import numpy as np

from ..core.constants import SATURATION_SLOPE_COEF, TETENS_A, TETENS_B, TETENS_C


def mean(value1, value2):
    """Arithmetic mean of two values."""
    return (value1 + value2) / 2.0


def saturation_vapour_pressure(temperature_c):
    """
    Saturation vapour pressure at a given air temperature.

    Args:
        temperature_c: Air temperature (°C)

    Returns:
        Saturation vapour pressure (kPa)
    """
    return TETENS_A * np.exp((TETENS_B * temperature_c) / (temperature_c + TETENS_C))


def mean_saturation_vapour_pressure(temperature_min_c, temperature_max_c):
    """
    Mean saturation vapour pressure for a day.

    Args:
        temperature_min_c: Minimum air temperature (°C)
        temperature_max_c: Maximum air temperature (°C)

    Returns:
        Mean saturation vapour pressure (kPa)
    """
    return mean(
        saturation_vapour_pressure(temperature_min_c),
        saturation_vapour_pressure(temperature_max_c),
    )


def slope_of_saturation_vapour_pressure_curve(temperature_c):
    """
    Slope of the saturation vapour pressure curve.

    Args:
        temperature_c: Air temperature (°C), the daily mean in the daily equation

    Returns:
        Slope Δ (kPa/°C)
    """
    return (SATURATION_SLOPE_COEF * saturation_vapour_pressure(temperature_c)) / (temperature_c + TETENS_C) ** 2


def actual_vapour_pressure(
    saturation_vapour_pressure_min,
    saturation_vapour_pressure_max,
    relative_humidity_min,
    relative_humidity_max
):
    """
    Actual vapour pressure from daily relative humidity extremes.

    The saturation pressure at the minimum temperature is paired with the
    maximum humidity and vice versa.

    Args:
        saturation_vapour_pressure_min: e° at the minimum temperature (kPa)
        saturation_vapour_pressure_max: e° at the maximum temperature (kPa)
        relative_humidity_min: Minimum relative humidity (%)
        relative_humidity_max: Maximum relative humidity (%)

    Returns:
        Actual vapour pressure (kPa)
    """
    return mean(
        saturation_vapour_pressure_min * (relative_humidity_max / 100.0),
        saturation_vapour_pressure_max * (relative_humidity_min / 100.0),
    )


def vapour_pressure_deficit(
    saturation_vapour_pressure_min,
    saturation_vapour_pressure_max,
    actual_vapour_pressure_kpa
):
    """
    Saturation vapour pressure deficit (e_s - e_a).

    Returns:
        Vapour pressure deficit (kPa)
    """
    return mean(saturation_vapour_pressure_min, saturation_vapour_pressure_max) - actual_vapour_pressure_kpa


__all__ = [
    'mean',
    'saturation_vapour_pressure',
    'mean_saturation_vapour_pressure',
    'slope_of_saturation_vapour_pressure_curve',
    'actual_vapour_pressure',
    'vapour_pressure_deficit',
]
