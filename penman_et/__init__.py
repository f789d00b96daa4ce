"""
penman_et - FAO-56 Penman-Monteith reference evapotranspiration.

Estimates daily reference evapotranspiration (ET0) for a short grass
surface from daily weather station readings.

This package provides tools for:
- Converting imperial station readings to metric units
- Calculating atmospheric, humidity and radiation terms
- Combining them into the daily Penman-Monteith ET0

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "penman_et Developers"

# Core modules
from penman_et.core import (
    StationConfig,
    DailyObservation,
    constants
)

# Reference ET
from penman_et.et import (
    EvapotranspirationCalculator,
    ReferenceETComponents,
    configure,
    day_of_year_from_date,
    penman_monteith
)

# Errors
from penman_et.utils.exceptions import (
    PenmanETError,
    InvalidConfigurationError,
    InvalidObservationError,
    ComputationError,
    IllPosedGeometryError,
    ArithmeticDegenerateError
)

__all__ = [
    # Version
    '__version__',
    '__author__',

    # Core
    'StationConfig',
    'DailyObservation',
    'constants',

    # Reference ET
    'EvapotranspirationCalculator',
    'ReferenceETComponents',
    'configure',
    'day_of_year_from_date',
    'penman_monteith',

    # Errors
    'PenmanETError',
    'InvalidConfigurationError',
    'InvalidObservationError',
    'ComputationError',
    'IllPosedGeometryError',
    'ArithmeticDegenerateError',
]

# Library use stays silent until Logger.setup() is called
from loguru import logger as _logger

_logger.disable("penman_et")
