"""Atmospheric and humidity terms for the Penman-Monteith equation."""

from .pressure import atmospheric_pressure, psychrometric_constant
from .humidity import (
    saturation_vapour_pressure,
    mean_saturation_vapour_pressure,
    slope_of_saturation_vapour_pressure_curve,
    actual_vapour_pressure,
    vapour_pressure_deficit,
)

__all__ = [
    'atmospheric_pressure',
    'psychrometric_constant',
    'saturation_vapour_pressure',
    'mean_saturation_vapour_pressure',
    'slope_of_saturation_vapour_pressure_curve',
    'actual_vapour_pressure',
    'vapour_pressure_deficit',
]
