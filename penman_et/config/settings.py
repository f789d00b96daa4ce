"""Configuration settings for the penman_et calculator."""

import json
from pathlib import Path
from typing import Union

import yaml

# ============================================================================
# STATION DEFAULTS
# ============================================================================

# Albedo of the hypothetical grass reference crop (0.12 m clipped grass)
DEFAULT_ALBEDO = 0.23

# Unit systems accepted for station configuration and observations
UNIT_SYSTEMS = ("metric", "imperial")
DEFAULT_UNITS = "metric"

# ============================================================================
# OUTPUT
# ============================================================================

# Depth units the calculator can report
OUTPUT_UNITS = ("mm", "inch")

# Irrigation controllers consume ET0 in inches
DEFAULT_OUTPUT_UNIT = "inch"

# Decimal places of the reported ET0
RESULT_DECIMALS = 3

# ============================================================================
# VALIDATION RANGES
# ============================================================================

VALIDATION_RANGES = {
    "albedo": (0.0, 1.0),
    "latitude": (-90.0, 90.0),
    "relative_humidity": (0.0, 100.0),  # %
    "day_of_year": (1, 366),
    "wind_speed_min": 0.0,  # m/s
    # 101.3 * ((293 - 0.0065 z) / 293) ** 5.26 needs a positive base
    "elevation_max": 293.0 / 0.0065,  # m
}

# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

LOGGING = {
    "level": "INFO",
    "cli_level": "WARNING",  # console level of the CLI without --verbose
    "format": "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
    "rotation": "10 MB",
    "retention": 10,  # number of rotated files kept
    "log_file": Path("logs") / "penman_et.log",
}

# ============================================================================
# STATION CONFIGURATION FILES
# ============================================================================

STATION_KEYS = ("elevation", "latitude", "albedo", "units")


def read_config_file(config_path: Union[str, Path]) -> dict:
    """
    Read a YAML or JSON configuration file into a dictionary.

    Args:
        config_path: Path to a .yaml, .yml or .json file

    Returns:
        Parsed configuration (empty dict for an empty YAML file)

    Raises:
        InvalidConfigurationError: If the file is missing, has an unsupported
            suffix, or cannot be parsed
    """
    from ..utils.exceptions import InvalidConfigurationError

    config_path = Path(config_path)

    if not config_path.exists():
        raise InvalidConfigurationError(
            f"Configuration file not found: {config_path}",
            config_param="config_file"
        )

    try:
        if config_path.suffix in ['.yaml', '.yml']:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        else:
            raise InvalidConfigurationError(
                f"Unsupported config format: {config_path.suffix}. Use .yaml or .json",
                config_param="config_file"
            )
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InvalidConfigurationError(
            f"Error loading config {config_path}: {e}",
            config_param="config_file"
        ) from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Configuration file must contain a mapping: {config_path}",
            config_param="config_file"
        )

    return data


def load_station_config(config_path: Union[str, Path]):
    """
    Load a station configuration from a YAML or JSON file.

    The file may hold the station keys at the top level or under a
    ``station`` section::

        station:
          elevation: 2
          latitude: 13.73
          albedo: 0.23
          units: metric

    Args:
        config_path: Path to the configuration file

    Returns:
        Validated StationConfig
    """
    from ..core.station import StationConfig
    from ..utils.exceptions import InvalidConfigurationError

    data = read_config_file(config_path)
    section = data.get("station", data)

    unknown = sorted(set(section) - set(STATION_KEYS))
    if unknown:
        raise InvalidConfigurationError(
            f"Unknown station configuration keys: {unknown}",
            config_param="station"
        )

    missing = [key for key in ("elevation", "latitude") if key not in section]
    if missing:
        raise InvalidConfigurationError(
            f"Missing station configuration keys: {missing}",
            config_param="station"
        )

    return StationConfig.create(
        elevation=section["elevation"],
        latitude=section["latitude"],
        albedo=section.get("albedo", DEFAULT_ALBEDO),
        units=section.get("units", DEFAULT_UNITS),
    )


__all__ = [
    'DEFAULT_ALBEDO', 'UNIT_SYSTEMS', 'DEFAULT_UNITS',
    'OUTPUT_UNITS', 'DEFAULT_OUTPUT_UNIT', 'RESULT_DECIMALS',
    'VALIDATION_RANGES', 'LOGGING', 'STATION_KEYS',
    'read_config_file', 'load_station_config'
]
