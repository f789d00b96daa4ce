"""Configuration for the penman_et calculator."""

from .settings import (
    DEFAULT_ALBEDO,
    DEFAULT_OUTPUT_UNIT,
    DEFAULT_UNITS,
    RESULT_DECIMALS,
    VALIDATION_RANGES,
    LOGGING,
    read_config_file,
    load_station_config,
)

__all__ = [
    'DEFAULT_ALBEDO',
    'DEFAULT_OUTPUT_UNIT',
    'DEFAULT_UNITS',
    'RESULT_DECIMALS',
    'VALIDATION_RANGES',
    'LOGGING',
    'read_config_file',
    'load_station_config',
]
