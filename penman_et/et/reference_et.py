"""
Daily reference evapotranspiration (ET0) with the FAO-56 Penman-Monteith method.

This module combines the atmospheric, humidity and radiation terms into
the FAO-56 Penman-Monteith equation for the hypothetical grass reference
crop.

Formula (FAO-56 eq. 6):
    ET0 = [0.408 Δ R_n + γ (900 / (T + 273)) u2 (e_s - e_a)]
          / [Δ + γ (1 + 0.34 u2)]

Where:
    - ET0 = reference evapotranspiration (mm/day)
    - Δ = slope of the saturation vapour pressure curve (kPa/°C)
    - R_n = net radiation at the crop surface (MJ/m²/day)
    - γ = psychrometric constant (kPa/°C)
    - T = mean daily air temperature at 2 m (°C)
    - u2 = wind speed at 2 m (m/s)
    - e_s - e_a = vapour pressure deficit (kPa)

Assumptions:
    - 24 hour calculation period, soil heat flux G = 0
    - Actual sunshine hours default to daylight hours (clear sky); a
      measured value can be supplied per calculation
"""

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

import numpy as np

from ..atmosphere.humidity import (
    actual_vapour_pressure,
    mean,
    saturation_vapour_pressure,
    slope_of_saturation_vapour_pressure_curve,
    vapour_pressure_deficit,
)
from ..atmosphere.pressure import atmospheric_pressure, psychrometric_constant
from ..config.settings import DEFAULT_ALBEDO, DEFAULT_OUTPUT_UNIT, DEFAULT_UNITS, RESULT_DECIMALS
from ..core.constants import (
    AERODYNAMIC_KELVIN_OFFSET,
    INVERSE_LATENT_HEAT,
    REFERENCE_CROP_CD,
    REFERENCE_CROP_CN,
)
from ..core.station import DailyObservation, StationConfig
from ..core.units import mm_to_inches
from ..radiation.longwave import net_longwave_radiation
from ..radiation.net_radiation import net_radiation
from ..radiation.shortwave import clear_sky_solar_radiation, net_shortwave_radiation, solar_radiation
from ..radiation.solar import (
    daylight_hours,
    extraterrestrial_radiation,
    inverse_relative_distance_earth_sun,
    solar_declination,
    sunset_hour_angle,
)
from ..utils.exceptions import ArithmeticDegenerateError, handle_exception
from ..utils.logger import Logger, log_execution_time, log_step
from ..utils.validation import validate_day_of_year, validate_output_unit, validate_sunshine_hours


def penman_monteith(
    slope_of_saturation_curve,
    net_radiation_mj,
    psychrometric_constant_kpa,
    temperature_mean_c,
    wind_speed_ms,
    vapour_pressure_deficit_kpa
):
    """
    FAO-56 Penman-Monteith reference evapotranspiration.

    Args:
        slope_of_saturation_curve: Δ (kPa/°C)
        net_radiation_mj: R_n (MJ/m²/day)
        psychrometric_constant_kpa: γ (kPa/°C)
        temperature_mean_c: Mean daily temperature (°C)
        wind_speed_ms: Wind speed at 2 m (m/s)
        vapour_pressure_deficit_kpa: e_s - e_a (kPa)

    Returns:
        Reference evapotranspiration (mm/day)

    Raises:
        ArithmeticDegenerateError: If the denominator vanishes
    """
    numerator = (
        INVERSE_LATENT_HEAT * slope_of_saturation_curve * net_radiation_mj
        + psychrometric_constant_kpa
        * (REFERENCE_CROP_CN / (temperature_mean_c + AERODYNAMIC_KELVIN_OFFSET))
        * wind_speed_ms
        * vapour_pressure_deficit_kpa
    )

    denominator = slope_of_saturation_curve + psychrometric_constant_kpa * (1.0 + REFERENCE_CROP_CD * wind_speed_ms)

    if np.any(denominator == 0):
        raise ArithmeticDegenerateError(
            "Penman-Monteith denominator is zero",
            computation_step="penman_monteith",
            term="denominator"
        )

    return numerator / denominator


def day_of_year_from_date(value: Optional[date] = None) -> int:
    """
    Day of the year for a calendar date, 1 for January 1st.

    Args:
        value: Date or datetime; today's date when omitted

    Returns:
        Day of year (1-366)
    """
    if value is None:
        value = date.today()
    return value.timetuple().tm_yday


@dataclass(frozen=True)
class ReferenceETComponents:
    """Every intermediate quantity of one ET0 calculation."""

    day_of_year: int
    temperature_mean: float
    atmospheric_pressure: float
    psychrometric_constant: float
    saturation_vapour_pressure_min: float
    saturation_vapour_pressure_max: float
    saturation_vapour_pressure_mean: float
    slope_of_saturation_curve: float
    actual_vapour_pressure: float
    vapour_pressure_deficit: float
    inverse_relative_distance: float
    solar_declination: float
    sunset_hour_angle: float
    daylight_hours: float
    sunshine_hours: float
    extraterrestrial_radiation: float
    clear_sky_solar_radiation: float
    incoming_solar_radiation: float
    net_shortwave_radiation: float
    net_longwave_radiation: float
    net_radiation: float
    et0_mm: float
    et0_inches: float

    def to_dict(self) -> dict:
        return asdict(self)


class EvapotranspirationCalculator:
    """
    Daily reference evapotranspiration for one weather station.

    The calculator holds only the immutable station configuration; every
    call to :meth:`calculate` is independent.

    Attributes:
        station: Station configuration
        output_unit: Depth unit of :meth:`calculate` results ("inch" or "mm")

    Example:
        >>> station = StationConfig(elevation=2.0, latitude=15.0)
        >>> calculator = EvapotranspirationCalculator(station, output_unit="mm")
        >>> observation = DailyObservation(19.1, 25.0, 54.0, 87.0, 2.078)
        >>> calculator.calculate(observation, day_of_year=15)
        4.052
    """

    def __init__(self, station: StationConfig, output_unit: str = DEFAULT_OUTPUT_UNIT):
        """
        Initialize the calculator.

        Args:
            station: Validated station configuration
            output_unit: "inch" (default) or "mm"
        """
        self._station = station
        self._output_unit = validate_output_unit(output_unit)

    @property
    def station(self) -> StationConfig:
        return self._station

    @property
    def output_unit(self) -> str:
        return self._output_unit

    def with_station(self, station: StationConfig) -> "EvapotranspirationCalculator":
        """Return a calculator for another station with the same output unit."""
        return EvapotranspirationCalculator(station, output_unit=self._output_unit)

    def calculate(
        self,
        observation: DailyObservation,
        day_of_year: int,
        sunshine_hours: Optional[float] = None
    ) -> float:
        """
        Calculate ET0 for a 24 hour period.

        Args:
            observation: Daily weather readings (metric)
            day_of_year: Day of the year the readings belong to (1-366)
            sunshine_hours: Measured sunshine hours; daylight hours if omitted

        Returns:
            ET0 in the calculator's output unit, rounded to 3 decimals
        """
        components = self.calculate_components(observation, day_of_year, sunshine_hours)
        if self._output_unit == "mm":
            return components.et0_mm
        return components.et0_inches

    def calculate_imperial(
        self,
        temperature_min_f: float,
        temperature_max_f: float,
        humidity_min: float,
        humidity_max: float,
        wind_speed_mph: float,
        day_of_year: int
    ) -> float:
        """
        Calculate ET0 from imperial readings.

        Args:
            temperature_min_f: Minimum temperature (°F)
            temperature_max_f: Maximum temperature (°F)
            humidity_min: Minimum relative humidity (%)
            humidity_max: Maximum relative humidity (%)
            wind_speed_mph: Wind speed at 2 m (mph)
            day_of_year: Day of the year (1-366)

        Returns:
            ET0 in inches, rounded to 3 decimals
        """
        observation = DailyObservation.from_imperial(
            temperature_min_f, temperature_max_f, humidity_min, humidity_max, wind_speed_mph
        )
        return self.calculate_components(observation, day_of_year).et0_inches

    @log_execution_time
    def calculate_components(
        self,
        observation: DailyObservation,
        day_of_year: int,
        sunshine_hours: Optional[float] = None
    ) -> ReferenceETComponents:
        """
        Calculate ET0 and return every intermediate term.

        Args:
            observation: Daily weather readings (metric)
            day_of_year: Day of the year (1-366)
            sunshine_hours: Measured sunshine hours; daylight hours if omitted

        Returns:
            ReferenceETComponents with ET0 in mm and inches

        Raises:
            InvalidObservationError: If day_of_year or sunshine_hours is invalid
            IllPosedGeometryError: If the sun does not rise or set that day
            ArithmeticDegenerateError: If a term vanishes or is not finite
        """
        validate_day_of_year(day_of_year)
        if sunshine_hours is not None:
            validate_sunshine_hours(sunshine_hours)

        with np.errstate(divide="raise", invalid="raise", over="raise"):
            components = self._run_pipeline(observation, int(day_of_year), sunshine_hours)

        Logger.info(
            f"ET0 day {components.day_of_year} at latitude {self._station.latitude}: "
            f"{components.et0_mm:.3f} mm ({components.et0_inches:.3f} in)"
        )
        return components

    @handle_exception
    def _run_pipeline(
        self,
        observation: DailyObservation,
        day_of_year: int,
        sunshine_hours: Optional[float]
    ) -> ReferenceETComponents:
        station = self._station
        temperature_mean = observation.temperature_mean

        with log_step("Atmospheric and humidity terms"):
            pressure = atmospheric_pressure(station.elevation)
            gamma = psychrometric_constant(pressure)

            es_min = saturation_vapour_pressure(observation.temperature_min)
            es_max = saturation_vapour_pressure(observation.temperature_max)
            es_mean = mean(es_min, es_max)
            delta = slope_of_saturation_vapour_pressure_curve(temperature_mean)

            ea = actual_vapour_pressure(es_min, es_max, observation.humidity_min, observation.humidity_max)
            vpd = vapour_pressure_deficit(es_min, es_max, ea)

            Logger.debug(
                f"P={pressure:.4f} kPa, gamma={gamma:.6f}, es={es_mean:.4f}, "
                f"ea={ea:.4f}, vpd={vpd:.4f}, delta={delta:.5f}"
            )

        with log_step("Solar geometry and radiation terms"):
            dr = inverse_relative_distance_earth_sun(day_of_year)
            declination = solar_declination(day_of_year)
            omega_s = sunset_hour_angle(station.latitude, declination)
            ra = extraterrestrial_radiation(dr, omega_s, station.latitude, declination)
            n_max = daylight_hours(omega_s)

            if n_max <= 0 or ra <= 0:
                raise ArithmeticDegenerateError(
                    f"No daylight on day {day_of_year} at latitude {station.latitude}",
                    computation_step="solar_radiation",
                    term="daylight_hours"
                )

            # Clear sky assumed unless measured sunshine is supplied
            if sunshine_hours is None:
                n_actual = n_max
            else:
                n_actual = validate_sunshine_hours(sunshine_hours, daylight_hours=float(n_max))

            rso = clear_sky_solar_radiation(n_max, ra)
            rs = solar_radiation(n_actual, n_max, ra)
            rns = net_shortwave_radiation(station.albedo, rs)
            rnl = net_longwave_radiation(
                observation.temperature_min,
                observation.temperature_max,
                ea,
                rs,
                rso,
            )
            rn = net_radiation(rns, rnl)

            Logger.debug(
                f"Ra={ra:.4f}, N={n_max:.4f} h, Rso={rso:.4f}, Rs={rs:.4f}, "
                f"Rns={rns:.4f}, Rnl={rnl:.4f}, Rn={rn:.4f} MJ/m2/day"
            )

        with log_step("Penman-Monteith combination"):
            et0_mm = penman_monteith(delta, rn, gamma, temperature_mean, observation.wind_speed, vpd)

            if not np.isfinite(et0_mm):
                raise ArithmeticDegenerateError(
                    f"ET0 is not finite: {et0_mm}",
                    computation_step="penman_monteith",
                    term="et0"
                )

        return ReferenceETComponents(
            day_of_year=day_of_year,
            temperature_mean=float(temperature_mean),
            atmospheric_pressure=float(pressure),
            psychrometric_constant=float(gamma),
            saturation_vapour_pressure_min=float(es_min),
            saturation_vapour_pressure_max=float(es_max),
            saturation_vapour_pressure_mean=float(es_mean),
            slope_of_saturation_curve=float(delta),
            actual_vapour_pressure=float(ea),
            vapour_pressure_deficit=float(vpd),
            inverse_relative_distance=float(dr),
            solar_declination=float(declination),
            sunset_hour_angle=float(omega_s),
            daylight_hours=float(n_max),
            sunshine_hours=float(n_actual),
            extraterrestrial_radiation=float(ra),
            clear_sky_solar_radiation=float(rso),
            incoming_solar_radiation=float(rs),
            net_shortwave_radiation=float(rns),
            net_longwave_radiation=float(rnl),
            net_radiation=float(rn),
            et0_mm=round(float(et0_mm), RESULT_DECIMALS),
            et0_inches=round(float(mm_to_inches(et0_mm)), RESULT_DECIMALS),
        )


def configure(
    elevation: float,
    latitude: float,
    albedo: float = DEFAULT_ALBEDO,
    units: str = DEFAULT_UNITS,
    output_unit: str = DEFAULT_OUTPUT_UNIT
) -> EvapotranspirationCalculator:
    """
    Build a calculator for a station.

    Args:
        elevation: Station elevation in meters (metric) or feet (imperial)
        latitude: Latitude in decimal degrees
        albedo: Surface albedo within [0, 1]
        units: Unit system of ``elevation``
        output_unit: Depth unit of results ("inch" or "mm")

    Returns:
        EvapotranspirationCalculator

    Raises:
        InvalidConfigurationError: If any station parameter is invalid
    """
    station = StationConfig.create(elevation, latitude, albedo, units=units)
    return EvapotranspirationCalculator(station, output_unit=output_unit)


__all__ = [
    'penman_monteith',
    'day_of_year_from_date',
    'ReferenceETComponents',
    'EvapotranspirationCalculator',
    'configure',
]
