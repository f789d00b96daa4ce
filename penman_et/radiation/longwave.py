"""
Net outgoing longwave radiation for daily periods.

Formula (FAO-56 eq. 39):
    R_nl = σ [(Tmax,K⁴ + Tmin,K⁴) / 2] (0.34 - 0.14 √e_a) (1.35 R_s/R_so - 0.35)

Where:
    σ = 4.903e-9 MJ/K⁴/m²/day
"""

import numpy as np

from ..core.constants import (
    LONGWAVE_CLOUDINESS_A,
    LONGWAVE_CLOUDINESS_B,
    LONGWAVE_HUMIDITY_A,
    LONGWAVE_HUMIDITY_B,
    STEFAN_BOLTZMANN,
)
from ..core.units import celsius_to_kelvin


def net_longwave_radiation(
    temperature_min_c,
    temperature_max_c,
    actual_vapour_pressure_kpa,
    incoming_solar_radiation,
    clear_sky_solar_radiation
):
    """
    Net outgoing longwave radiation.

    Args:
        temperature_min_c: Minimum air temperature (°C)
        temperature_max_c: Maximum air temperature (°C)
        actual_vapour_pressure_kpa: Actual vapour pressure e_a (kPa)
        incoming_solar_radiation: R_s (MJ/m²/day)
        clear_sky_solar_radiation: R_so (MJ/m²/day)

    Returns:
        Net longwave radiation (MJ/m²/day)
    """
    temperature_min_k = celsius_to_kelvin(temperature_min_c)
    temperature_max_k = celsius_to_kelvin(temperature_max_c)

    temperature_fourth_power = (temperature_min_k ** 4 + temperature_max_k ** 4) / 2.0

    humidity_correction = LONGWAVE_HUMIDITY_A - LONGWAVE_HUMIDITY_B * np.sqrt(actual_vapour_pressure_kpa)

    relative_shortwave_radiation = incoming_solar_radiation / clear_sky_solar_radiation
    cloudiness_correction = LONGWAVE_CLOUDINESS_A * relative_shortwave_radiation - LONGWAVE_CLOUDINESS_B

    return STEFAN_BOLTZMANN * temperature_fourth_power * humidity_correction * cloudiness_correction


__all__ = ['net_longwave_radiation']
