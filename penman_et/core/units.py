"""
Unit conversions between the imperial inputs reported by weather stations
and the metric units used by the FAO-56 equations.

All functions accept scalars or numpy arrays.
"""

from .constants import (
    CELSIUS_TO_KELVIN,
    FEET_TO_METERS,
    MPH_TO_METERS_PER_SECOND,
    MM_TO_INCHES,
)


def fahrenheit_to_celsius(fahrenheit):
    """Convert a temperature from °F to °C."""
    return (fahrenheit - 32.0) * (5.0 / 9.0)


def celsius_to_fahrenheit(celsius):
    """Convert a temperature from °C to °F."""
    return celsius * (9.0 / 5.0) + 32.0


def celsius_to_kelvin(celsius):
    """
    Convert a temperature from °C to K.

    Uses the 273.16 offset of the longwave radiation formulation.
    """
    return celsius + CELSIUS_TO_KELVIN


def feet_to_meters(feet):
    """Convert a length from feet to meters."""
    return feet * FEET_TO_METERS


def meters_to_feet(meters):
    """Convert a length from meters to feet."""
    return meters / FEET_TO_METERS


def mph_to_meters_per_second(mph):
    """Convert a speed from miles per hour to meters per second."""
    return mph * MPH_TO_METERS_PER_SECOND


def meters_per_second_to_mph(meters_per_second):
    """Convert a speed from meters per second to miles per hour."""
    return meters_per_second / MPH_TO_METERS_PER_SECOND


def mm_to_inches(mm):
    """Convert a depth from millimeters to inches."""
    return mm * MM_TO_INCHES


__all__ = [
    'fahrenheit_to_celsius',
    'celsius_to_fahrenheit',
    'celsius_to_kelvin',
    'feet_to_meters',
    'meters_to_feet',
    'mph_to_meters_per_second',
    'meters_per_second_to_mph',
    'mm_to_inches',
]
