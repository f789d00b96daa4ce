"""Physical constants for the FAO-56 Penman-Monteith equation."""

import numpy as np

# ============================================================================
# RADIATION CONSTANTS
# ============================================================================

# Stefan-Boltzmann constant (MJ/K⁴/m²/day)
STEFAN_BOLTZMANN = 4.903e-9

# Solar constant (MJ/m²/min)
SOLAR_CONSTANT = 0.0820

# Angström coefficients: fraction of Ra reaching the ground on overcast days
# (a_s) and the additional fraction on clear days (b_s)
ANGSTROM_A = 0.25
ANGSTROM_B = 0.5

# Net longwave radiation coefficients (FAO-56 eq. 39)
LONGWAVE_HUMIDITY_A = 0.34
LONGWAVE_HUMIDITY_B = 0.14
LONGWAVE_CLOUDINESS_A = 1.35
LONGWAVE_CLOUDINESS_B = 0.35

# ============================================================================
# ATMOSPHERIC CONSTANTS
# ============================================================================

# Atmospheric pressure at sea level (kPa)
SEA_LEVEL_PRESSURE = 101.3

# Standard temperature used by the pressure formula (K)
PRESSURE_REFERENCE_TEMPERATURE = 293.0

# Lapse rate used by the pressure formula (K/m)
PRESSURE_LAPSE_RATE = 0.0065

# Pressure exponent g / (R * lapse rate)
PRESSURE_EXPONENT = 5.26

# Psychrometric coefficient cp / (epsilon * lambda) (1/°C)
PSYCHROMETRIC_COEF = 0.665e-3

# ============================================================================
# VAPOUR PRESSURE CONSTANTS (Tetens)
# ============================================================================

TETENS_A = 0.6108  # kPa
TETENS_B = 17.27
TETENS_C = 237.3  # °C

# Slope of saturation curve numerator (FAO-56 eq. 13)
SATURATION_SLOPE_COEF = 4098.0

# ============================================================================
# SOLAR GEOMETRY CONSTANTS
# ============================================================================

EARTH_ORBIT_ECCENTRICITY = 0.033
SOLAR_DECLINATION_AMPLITUDE = 0.409
SOLAR_DECLINATION_PHASE = 1.39  # radians
DAYS_PER_YEAR = 365.0
MINUTES_PER_DAY = 24.0 * 60.0
HOURS_PER_DAY = 24.0

# ============================================================================
# PENMAN-MONTEITH COMBINATION CONSTANTS (FAO-56 eq. 6)
# ============================================================================

# 1 / latent heat of vaporization (kg/MJ)
INVERSE_LATENT_HEAT = 0.408

# Numerator constant for the reference grass crop (K mm s³/Mg/day)
REFERENCE_CROP_CN = 900.0

# Denominator constant for the reference grass crop (s/m)
REFERENCE_CROP_CD = 0.34

# Offset used by the aerodynamic term (K)
AERODYNAMIC_KELVIN_OFFSET = 273.0

# ============================================================================
# TEMPERATURE CONSTANTS
# ============================================================================

CELSIUS_TO_KELVIN = 273.16

# ============================================================================
# UNIT CONVERSION FACTORS
# ============================================================================

FEET_TO_METERS = 0.3048
MPH_TO_METERS_PER_SECOND = 0.44704
MM_TO_INCHES = 0.0393700787

# ============================================================================
# ANGLE CONVERSIONS
# ============================================================================

DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

__all__ = [
    'STEFAN_BOLTZMANN', 'SOLAR_CONSTANT', 'ANGSTROM_A', 'ANGSTROM_B',
    'LONGWAVE_HUMIDITY_A', 'LONGWAVE_HUMIDITY_B', 'LONGWAVE_CLOUDINESS_A',
    'LONGWAVE_CLOUDINESS_B', 'SEA_LEVEL_PRESSURE', 'PRESSURE_REFERENCE_TEMPERATURE',
    'PRESSURE_LAPSE_RATE', 'PRESSURE_EXPONENT', 'PSYCHROMETRIC_COEF',
    'TETENS_A', 'TETENS_B', 'TETENS_C', 'SATURATION_SLOPE_COEF',
    'EARTH_ORBIT_ECCENTRICITY', 'SOLAR_DECLINATION_AMPLITUDE',
    'SOLAR_DECLINATION_PHASE', 'DAYS_PER_YEAR', 'MINUTES_PER_DAY', 'HOURS_PER_DAY',
    'INVERSE_LATENT_HEAT', 'REFERENCE_CROP_CN', 'REFERENCE_CROP_CD',
    'AERODYNAMIC_KELVIN_OFFSET', 'CELSIUS_TO_KELVIN', 'FEET_TO_METERS',
    'MPH_TO_METERS_PER_SECOND', 'MM_TO_INCHES', 'DEG_TO_RAD', 'RAD_TO_DEG'
]
