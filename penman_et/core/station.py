"""
Station configuration and daily observation value objects.

Both are frozen dataclasses holding metric values. Build them through
``create`` (or ``from_imperial``) so the inputs are validated and
converted once, before any calculation runs.
"""

from dataclasses import dataclass, replace

from ..config.settings import DEFAULT_ALBEDO, DEFAULT_UNITS
from ..utils.exceptions import InvalidConfigurationError, InvalidObservationError
from ..utils.validation import (
    check_finite,
    validate_observation_values,
    validate_station_parameters,
    validate_unit_system,
)
from .units import (
    fahrenheit_to_celsius,
    feet_to_meters,
    meters_to_feet,
    mph_to_meters_per_second,
)


@dataclass(frozen=True)
class StationConfig:
    """
    Weather station parameters.

    Attributes:
        elevation: Elevation above sea level (m)
        latitude: Latitude in decimal degrees, northern hemisphere positive
        albedo: Surface albedo (dimensionless, 0.23 for reference grass)
    """

    elevation: float
    latitude: float
    albedo: float = DEFAULT_ALBEDO

    def __post_init__(self):
        validate_station_parameters(self.elevation, self.latitude, self.albedo)

    @classmethod
    def create(
        cls,
        elevation: float,
        latitude: float,
        albedo: float = DEFAULT_ALBEDO,
        units: str = DEFAULT_UNITS
    ) -> "StationConfig":
        """
        Build a validated station configuration.

        Args:
            elevation: Elevation in meters (metric) or feet (imperial)
            latitude: Latitude in decimal degrees
            albedo: Surface albedo
            units: Unit system of ``elevation``: "metric" or "imperial"

        Returns:
            StationConfig with the elevation in meters

        Raises:
            InvalidConfigurationError: If any parameter is out of range
        """
        units = validate_unit_system(units)

        is_valid, message = check_finite(elevation, "elevation")
        if not is_valid:
            raise InvalidConfigurationError(message, config_param="elevation", value=elevation)

        if units == "imperial":
            elevation = feet_to_meters(elevation)

        return cls(elevation=float(elevation), latitude=latitude, albedo=albedo)

    @classmethod
    def from_imperial(
        cls,
        elevation_feet: float,
        latitude: float,
        albedo: float = DEFAULT_ALBEDO
    ) -> "StationConfig":
        """Build a station configuration from an elevation in feet."""
        return cls.create(elevation_feet, latitude, albedo, units="imperial")

    @property
    def elevation_feet(self) -> float:
        """Elevation in feet."""
        return meters_to_feet(self.elevation)

    def with_albedo(self, albedo: float) -> "StationConfig":
        """Return a copy with a different surface albedo."""
        return replace(self, albedo=albedo)

    def to_dict(self) -> dict:
        return {
            "elevation": self.elevation,
            "latitude": self.latitude,
            "albedo": self.albedo,
        }


@dataclass(frozen=True)
class DailyObservation:
    """
    Daily weather readings for a 24 hour period.

    Attributes:
        temperature_min: Minimum air temperature (°C)
        temperature_max: Maximum air temperature (°C)
        humidity_min: Minimum relative humidity (%)
        humidity_max: Maximum relative humidity (%)
        wind_speed: Mean wind speed at 2 m height (m/s)
    """

    temperature_min: float
    temperature_max: float
    humidity_min: float
    humidity_max: float
    wind_speed: float

    def __post_init__(self):
        validate_observation_values(
            self.temperature_min,
            self.temperature_max,
            self.humidity_min,
            self.humidity_max,
            self.wind_speed,
        )

    @classmethod
    def create(
        cls,
        temperature_min: float,
        temperature_max: float,
        humidity_min: float,
        humidity_max: float,
        wind_speed: float,
        units: str = DEFAULT_UNITS
    ) -> "DailyObservation":
        """
        Build a validated observation, converting imperial readings.

        Args:
            temperature_min: Minimum temperature in °C (metric) or °F (imperial)
            temperature_max: Maximum temperature in °C (metric) or °F (imperial)
            humidity_min: Minimum relative humidity (%)
            humidity_max: Maximum relative humidity (%)
            wind_speed: Wind speed in m/s (metric) or mph (imperial)
            units: Unit system of the readings: "metric" or "imperial"

        Returns:
            DailyObservation in metric units

        Raises:
            InvalidObservationError: If any reading is out of range
        """
        try:
            units = validate_unit_system(units)
        except InvalidConfigurationError as e:
            raise InvalidObservationError(e.message, field="units", value=units) from e

        if units == "imperial":
            for name, value in (
                ("temperature_min", temperature_min),
                ("temperature_max", temperature_max),
                ("wind_speed", wind_speed),
            ):
                is_valid, message = check_finite(value, name)
                if not is_valid:
                    raise InvalidObservationError(message, field=name, value=value)

            temperature_min = fahrenheit_to_celsius(temperature_min)
            temperature_max = fahrenheit_to_celsius(temperature_max)
            wind_speed = mph_to_meters_per_second(wind_speed)

        return cls(
            temperature_min=temperature_min,
            temperature_max=temperature_max,
            humidity_min=humidity_min,
            humidity_max=humidity_max,
            wind_speed=wind_speed,
        )

    @classmethod
    def from_imperial(
        cls,
        temperature_min_f: float,
        temperature_max_f: float,
        humidity_min: float,
        humidity_max: float,
        wind_speed_mph: float
    ) -> "DailyObservation":
        """Build an observation from °F temperatures and a wind speed in mph."""
        return cls.create(
            temperature_min_f,
            temperature_max_f,
            humidity_min,
            humidity_max,
            wind_speed_mph,
            units="imperial",
        )

    @property
    def temperature_mean(self) -> float:
        """Mean daily air temperature (°C)."""
        return (self.temperature_min + self.temperature_max) / 2.0

    def to_dict(self) -> dict:
        return {
            "temperature_min": self.temperature_min,
            "temperature_max": self.temperature_max,
            "humidity_min": self.humidity_min,
            "humidity_max": self.humidity_max,
            "wind_speed": self.wind_speed,
        }


__all__ = ['StationConfig', 'DailyObservation']
