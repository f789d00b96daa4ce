"""Solar geometry and radiation balance terms."""

from .solar import (
    inverse_relative_distance_earth_sun,
    solar_declination,
    sunset_hour_angle,
    daylight_hours,
    extraterrestrial_radiation,
)
from .shortwave import solar_radiation, clear_sky_solar_radiation, net_shortwave_radiation
from .longwave import net_longwave_radiation
from .net_radiation import net_radiation

__all__ = [
    'inverse_relative_distance_earth_sun',
    'solar_declination',
    'sunset_hour_angle',
    'daylight_hours',
    'extraterrestrial_radiation',
    'solar_radiation',
    'clear_sky_solar_radiation',
    'net_shortwave_radiation',
    'net_longwave_radiation',
    'net_radiation',
]
