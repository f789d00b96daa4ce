"""
Utility modules for penman_et.

Provides logging, validation, and exception handling utilities.
"""

from .logger import Logger, log_step, log_execution_time
from .validation import (
    check_finite,
    check_albedo_range,
    check_latitude_range,
    check_elevation,
    check_humidity_range,
    check_min_max,
    check_wind_speed,
    check_day_of_year,
    validate_unit_system,
    validate_output_unit,
    validate_station_parameters,
    validate_observation_values,
    validate_day_of_year,
    validate_sunshine_hours,
)
from .exceptions import (
    PenmanETError,
    InvalidConfigurationError,
    InvalidObservationError,
    ComputationError,
    IllPosedGeometryError,
    ArithmeticDegenerateError,
    handle_exception,
    create_error_context,
)

__all__ = [
    # Logger
    "Logger",
    "log_step",
    "log_execution_time",

    # Validation
    "check_finite",
    "check_albedo_range",
    "check_latitude_range",
    "check_elevation",
    "check_humidity_range",
    "check_min_max",
    "check_wind_speed",
    "check_day_of_year",
    "validate_unit_system",
    "validate_output_unit",
    "validate_station_parameters",
    "validate_observation_values",
    "validate_day_of_year",
    "validate_sunshine_hours",

    # Exceptions
    "PenmanETError",
    "InvalidConfigurationError",
    "InvalidObservationError",
    "ComputationError",
    "IllPosedGeometryError",
    "ArithmeticDegenerateError",
    "handle_exception",
    "create_error_context",
]
