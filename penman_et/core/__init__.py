"""Core module for the penman_et calculator."""

from . import constants
from .constants import (
    STEFAN_BOLTZMANN,
    SOLAR_CONSTANT,
    ANGSTROM_A,
    ANGSTROM_B,
    CELSIUS_TO_KELVIN,
    DEG_TO_RAD,
    RAD_TO_DEG,
)
from .station import StationConfig, DailyObservation
from .units import (
    fahrenheit_to_celsius,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    feet_to_meters,
    meters_to_feet,
    mph_to_meters_per_second,
    meters_per_second_to_mph,
    mm_to_inches,
)

__all__ = [
    'constants',
    'STEFAN_BOLTZMANN',
    'SOLAR_CONSTANT',
    'ANGSTROM_A',
    'ANGSTROM_B',
    'CELSIUS_TO_KELVIN',
    'DEG_TO_RAD',
    'RAD_TO_DEG',
    'StationConfig',
    'DailyObservation',
    'fahrenheit_to_celsius',
    'celsius_to_fahrenheit',
    'celsius_to_kelvin',
    'feet_to_meters',
    'meters_to_feet',
    'mph_to_meters_per_second',
    'meters_per_second_to_mph',
    'mm_to_inches',
]
