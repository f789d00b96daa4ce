"""
Validation utilities for penman_et.

Provides range checks for station parameters and daily observations.
The ``check_*`` functions return ``(is_valid, message)`` tuples; the
``validate_*`` functions raise typed errors on the first failed check.
"""

import math
from numbers import Integral, Real
from typing import Tuple

from ..config.settings import VALIDATION_RANGES, UNIT_SYSTEMS, OUTPUT_UNITS
from .exceptions import InvalidConfigurationError, InvalidObservationError


def check_finite(value, name: str) -> Tuple[bool, str]:
    """
    Check a value is a finite real number.

    Args:
        value: Value to check
        name: Name used in the message

    Returns:
        Tuple of (is_valid, message)
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False, f"{name} must be numeric, got: {value!r}"

    if not math.isfinite(value):
        return False, f"{name} must be a finite value, got: {value}"

    return True, f"{name} is valid"


def check_albedo_range(albedo: float) -> Tuple[bool, str]:
    """
    Check albedo is within [0, 1].

    Args:
        albedo: Surface albedo (dimensionless)

    Returns:
        Tuple of (is_valid, message)
    """
    low, high = VALIDATION_RANGES["albedo"]
    if not low <= albedo <= high:
        return False, f"Albedo must be within [{low}, {high}], got: {albedo}"
    return True, "Albedo is valid"


def check_latitude_range(latitude: float) -> Tuple[bool, str]:
    """Check latitude is within [-90, 90] degrees."""
    low, high = VALIDATION_RANGES["latitude"]
    if not low <= latitude <= high:
        return False, f"Latitude must be within [{low}, {high}] degrees, got: {latitude}"
    return True, "Latitude is valid"


def check_elevation(elevation_m: float) -> Tuple[bool, str]:
    """
    Check the elevation keeps the atmospheric pressure base positive.

    Args:
        elevation_m: Elevation in meters

    Returns:
        Tuple of (is_valid, message)
    """
    limit = VALIDATION_RANGES["elevation_max"]
    if elevation_m >= limit:
        return False, (
            f"Elevation {elevation_m} m gives a non-positive pressure term "
            f"(must be below {limit:.1f} m)"
        )
    return True, "Elevation is valid"


def check_humidity_range(humidity: float) -> Tuple[bool, str]:
    """Check relative humidity is within [0, 100] percent."""
    low, high = VALIDATION_RANGES["relative_humidity"]
    if not low <= humidity <= high:
        return False, f"Relative humidity must be within [{low}, {high}] %, got: {humidity}"
    return True, "Relative humidity is valid"


def check_min_max(minimum: float, maximum: float, name: str) -> Tuple[bool, str]:
    """Check a daily minimum does not exceed its maximum."""
    if maximum < minimum:
        return False, f"Maximum {name} ({maximum}) is below minimum {name} ({minimum})"
    return True, f"{name} range is valid"


def check_wind_speed(wind_speed: float) -> Tuple[bool, str]:
    """Check wind speed is non-negative."""
    if wind_speed < VALIDATION_RANGES["wind_speed_min"]:
        return False, f"Wind speed must be non-negative, got: {wind_speed}"
    return True, "Wind speed is valid"


def check_day_of_year(day_of_year) -> Tuple[bool, str]:
    """Check day of year is an integer within [1, 366]."""
    low, high = VALIDATION_RANGES["day_of_year"]
    if isinstance(day_of_year, bool) or not isinstance(day_of_year, Integral):
        return False, f"Day of year must be an integer, got: {day_of_year!r}"
    if not low <= day_of_year <= high:
        return False, f"Day of year must be within [{low}, {high}], got: {day_of_year}"
    return True, "Day of year is valid"


def validate_unit_system(units: str) -> str:
    """
    Normalize and validate a unit system name.

    Raises:
        InvalidConfigurationError: If the name is not a known unit system
    """
    normalized = str(units).strip().lower()
    if normalized not in UNIT_SYSTEMS:
        raise InvalidConfigurationError(
            f"Unknown unit system: {units!r}. Use one of {list(UNIT_SYSTEMS)}",
            config_param="units",
            value=units
        )
    return normalized


def validate_output_unit(output_unit: str) -> str:
    """
    Normalize and validate an output depth unit.

    Raises:
        InvalidConfigurationError: If the unit is not supported
    """
    normalized = str(output_unit).strip().lower()
    if normalized in ("in", "inches"):
        normalized = "inch"
    if normalized not in OUTPUT_UNITS:
        raise InvalidConfigurationError(
            f"Unknown output unit: {output_unit!r}. Use one of {list(OUTPUT_UNITS)}",
            config_param="output_unit",
            value=output_unit
        )
    return normalized


def validate_station_parameters(elevation_m: float, latitude: float, albedo: float) -> None:
    """
    Validate metric station parameters.

    Raises:
        InvalidConfigurationError: On the first failed check
    """
    for name, value in (("elevation", elevation_m), ("latitude", latitude), ("albedo", albedo)):
        is_valid, message = check_finite(value, name)
        if not is_valid:
            raise InvalidConfigurationError(message, config_param=name, value=value)

    checks = (
        ("elevation", elevation_m, check_elevation(elevation_m)),
        ("latitude", latitude, check_latitude_range(latitude)),
        ("albedo", albedo, check_albedo_range(albedo)),
    )
    for name, value, (is_valid, message) in checks:
        if not is_valid:
            raise InvalidConfigurationError(message, config_param=name, value=value)


def validate_observation_values(
    temperature_min: float,
    temperature_max: float,
    humidity_min: float,
    humidity_max: float,
    wind_speed: float
) -> None:
    """
    Validate metric daily observation values.

    Raises:
        InvalidObservationError: On the first failed check
    """
    fields = (
        ("temperature_min", temperature_min),
        ("temperature_max", temperature_max),
        ("humidity_min", humidity_min),
        ("humidity_max", humidity_max),
        ("wind_speed", wind_speed),
    )
    for name, value in fields:
        is_valid, message = check_finite(value, name)
        if not is_valid:
            raise InvalidObservationError(message, field=name, value=value)

    checks = (
        ("humidity_min", humidity_min, check_humidity_range(humidity_min)),
        ("humidity_max", humidity_max, check_humidity_range(humidity_max)),
        ("temperature", temperature_max, check_min_max(temperature_min, temperature_max, "temperature")),
        ("humidity", humidity_max, check_min_max(humidity_min, humidity_max, "humidity")),
        ("wind_speed", wind_speed, check_wind_speed(wind_speed)),
    )
    for name, value, (is_valid, message) in checks:
        if not is_valid:
            raise InvalidObservationError(message, field=name, value=value)


def validate_day_of_year(day_of_year) -> int:
    """
    Validate the day of year passed to a calculation.

    Raises:
        InvalidObservationError: If not an integer within [1, 366]
    """
    is_valid, message = check_day_of_year(day_of_year)
    if not is_valid:
        raise InvalidObservationError(message, field="day_of_year", value=day_of_year)
    return day_of_year


def validate_sunshine_hours(sunshine_hours: float, daylight_hours: float = None) -> float:
    """
    Validate measured sunshine hours.

    Args:
        sunshine_hours: Measured duration of sunshine n (hours)
        daylight_hours: Maximum possible duration N for the day, when known

    Raises:
        InvalidObservationError: If not finite, negative or longer than the
            daylight hours (R_s/R_so must not exceed 1)
    """
    is_valid, message = check_finite(sunshine_hours, "sunshine_hours")
    if not is_valid:
        raise InvalidObservationError(message, field="sunshine_hours", value=sunshine_hours)
    if sunshine_hours < 0:
        raise InvalidObservationError(
            f"Sunshine hours must be non-negative, got: {sunshine_hours}",
            field="sunshine_hours",
            value=sunshine_hours
        )
    if daylight_hours is not None and sunshine_hours > daylight_hours:
        raise InvalidObservationError(
            f"Sunshine hours ({sunshine_hours}) exceed the daylight hours of the day ({daylight_hours:.2f})",
            field="sunshine_hours",
            value=sunshine_hours
        )
    return sunshine_hours
