"""Shortwave radiation terms for the daily Penman-Monteith equation."""

from ..core.constants import ANGSTROM_A, ANGSTROM_B


def solar_radiation(sunshine_hours, daylight_hours, extraterrestrial_radiation):
    """
    Solar radiation from relative sunshine duration (Angström formula).

    R_s = (a_s + b_s n / N) R_a

    With n = N this is the clear-sky radiation R_so.

    Args:
        sunshine_hours: Actual duration of sunshine n (hours)
        daylight_hours: Maximum possible duration of sunshine N (hours)
        extraterrestrial_radiation: R_a (MJ/m²/day)

    Returns:
        Solar radiation (MJ/m²/day)
    """
    return (ANGSTROM_A + ANGSTROM_B * (sunshine_hours / daylight_hours)) * extraterrestrial_radiation


def clear_sky_solar_radiation(daylight_hours, extraterrestrial_radiation):
    """Clear-sky solar radiation R_so (n = N)."""
    return solar_radiation(daylight_hours, daylight_hours, extraterrestrial_radiation)


def net_shortwave_radiation(albedo, incoming_solar_radiation):
    """
    Net solar (shortwave) radiation absorbed by the surface.

    R_ns = (1 - α) R_s

    Args:
        albedo: Surface albedo (dimensionless)
        incoming_solar_radiation: R_s (MJ/m²/day)

    Returns:
        Net shortwave radiation (MJ/m²/day)
    """
    return (1.0 - albedo) * incoming_solar_radiation


__all__ = ['solar_radiation', 'clear_sky_solar_radiation', 'net_shortwave_radiation']
