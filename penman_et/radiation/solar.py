"""
Solar geometry and extraterrestrial radiation for daily periods.

Formulas (FAO-56 chapter 3):
    d_r = 1 + 0.033 cos(2π J / 365)                                  (eq. 23)
    δ   = 0.409 sin(2π J / 365 - 1.39)                               (eq. 24)
    ω_s = arccos(-tan(φ) tan(δ))                                     (eq. 25)
    N   = 24 / π ω_s                                                 (eq. 34)
    R_a = 24·60/π G_sc d_r [ω_s sin(φ) sin(δ) + cos(φ) cos(δ) sin(ω_s)]   (eq. 21)

Where:
    - J = day of year (1-366)
    - φ = latitude (rad)
    - G_sc = solar constant, 0.0820 MJ/m²/min
"""

import numpy as np

from ..core.constants import (
    DAYS_PER_YEAR,
    EARTH_ORBIT_ECCENTRICITY,
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    SOLAR_CONSTANT,
    SOLAR_DECLINATION_AMPLITUDE,
    SOLAR_DECLINATION_PHASE,
)
from ..utils.exceptions import IllPosedGeometryError


def _day_angle(day_of_year):
    return (2.0 * np.pi / DAYS_PER_YEAR) * day_of_year


def inverse_relative_distance_earth_sun(day_of_year):
    """
    Inverse relative distance Earth-Sun.

    Args:
        day_of_year: Day of the year, 1 for January 1st

    Returns:
        Inverse relative distance (dimensionless)
    """
    return 1.0 + EARTH_ORBIT_ECCENTRICITY * np.cos(_day_angle(day_of_year))


def solar_declination(day_of_year):
    """
    Solar declination.

    Args:
        day_of_year: Day of the year, 1 for January 1st

    Returns:
        Solar declination (rad)
    """
    return SOLAR_DECLINATION_AMPLITUDE * np.sin(_day_angle(day_of_year) - SOLAR_DECLINATION_PHASE)


def sunset_hour_angle(latitude_deg, declination_rad):
    """
    Sunset hour angle.

    Args:
        latitude_deg: Latitude (degrees)
        declination_rad: Solar declination (rad)

    Returns:
        Sunset hour angle (rad)

    Raises:
        IllPosedGeometryError: If the sun does not rise or does not set on
            that day (|tan(φ) tan(δ)| > 1)
    """
    argument = -np.tan(np.deg2rad(latitude_deg)) * np.tan(declination_rad)

    if np.any(np.abs(argument) > 1.0):
        raise IllPosedGeometryError(
            f"Sunset hour angle undefined: -tan(latitude)*tan(declination) = "
            f"{float(np.max(np.abs(argument))):.4f} lies outside [-1, 1] (polar day or night)",
            latitude=np.asarray(latitude_deg).tolist(),
            declination=np.asarray(declination_rad).tolist(),
        )

    return np.arccos(argument)


def daylight_hours(sunset_hour_angle_rad):
    """
    Maximum possible duration of sunshine.

    Args:
        sunset_hour_angle_rad: Sunset hour angle (rad)

    Returns:
        Daylight hours
    """
    return (HOURS_PER_DAY / np.pi) * sunset_hour_angle_rad


def extraterrestrial_radiation(
    inverse_relative_distance,
    sunset_hour_angle_rad,
    latitude_deg,
    declination_rad
):
    """
    Daily extraterrestrial radiation.

    Args:
        inverse_relative_distance: Inverse relative distance Earth-Sun
        sunset_hour_angle_rad: Sunset hour angle (rad)
        latitude_deg: Latitude (degrees)
        declination_rad: Solar declination (rad)

    Returns:
        Extraterrestrial radiation (MJ/m²/day)
    """
    latitude_rad = np.deg2rad(latitude_deg)

    angle_term = (
        sunset_hour_angle_rad * np.sin(latitude_rad) * np.sin(declination_rad)
        + np.cos(latitude_rad) * np.cos(declination_rad) * np.sin(sunset_hour_angle_rad)
    )

    return (MINUTES_PER_DAY / np.pi) * SOLAR_CONSTANT * inverse_relative_distance * angle_term


__all__ = [
    'inverse_relative_distance_earth_sun',
    'solar_declination',
    'sunset_hour_angle',
    'daylight_hours',
    'extraterrestrial_radiation',
]
