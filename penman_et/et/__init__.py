"""
Reference evapotranspiration module.

Combines the atmospheric and radiation terms into the FAO-56
Penman-Monteith equation:

    ET0 = [0.408 Δ R_n + γ (900 / (T + 273)) u2 (e_s - e_a)]
          / [Δ + γ (1 + 0.34 u2)]
"""

from .reference_et import (
    penman_monteith,
    day_of_year_from_date,
    ReferenceETComponents,
    EvapotranspirationCalculator,
    configure,
)

__all__ = [
    'penman_monteith',
    'day_of_year_from_date',
    'ReferenceETComponents',
    'EvapotranspirationCalculator',
    'configure',
]
