"""
penman_et CLI Interface

Command-line interface for the FAO-56 Penman-Monteith ET0 calculator.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from penman_et import __version__
from penman_et.atmosphere import atmospheric_pressure, psychrometric_constant
from penman_et.config.settings import (
    DEFAULT_ALBEDO,
    DEFAULT_OUTPUT_UNIT,
    LOGGING,
    OUTPUT_UNITS,
    UNIT_SYSTEMS,
    load_station_config,
)
from penman_et.core.station import DailyObservation, StationConfig
from penman_et.et import EvapotranspirationCalculator, day_of_year_from_date
from penman_et.utils.exceptions import PenmanETError, create_error_context
from penman_et.utils.logger import Logger


# ============================================================================
# Utility Functions
# ============================================================================

def validate_date(ctx, param, value):
    """Validate date format YYYY-MM-DD."""
    if value is None:
        return None
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise click.BadParameter(
            f'Invalid date format: {value}. Use YYYY-MM-DD format.',
            ctx=ctx,
            param=param
        )


def resolve_station(
    ctx,
    config: Optional[Path],
    elevation: Optional[float],
    latitude: Optional[float],
    albedo: Optional[float],
    units: str
) -> StationConfig:
    """
    Build the station from a config file and/or command-line values.

    Command-line values override the file. Without a file both elevation
    and latitude are required.
    """
    config = config or ctx.obj.get('config_path')

    try:
        if config:
            station = load_station_config(config)
            Logger.debug(f'Loaded station configuration from: {config}')
            if elevation is not None or latitude is not None or albedo is not None:
                station = StationConfig.create(
                    elevation if elevation is not None else station.elevation,
                    latitude if latitude is not None else station.latitude,
                    albedo if albedo is not None else station.albedo,
                    units=units if elevation is not None else 'metric',
                )
            return station

        if elevation is None or latitude is None:
            raise click.UsageError('Provide --elevation and --latitude, or a station --config file')

        return StationConfig.create(
            elevation,
            latitude,
            albedo if albedo is not None else DEFAULT_ALBEDO,
            units=units,
        )
    except PenmanETError as e:
        raise click.ClickException(str(e)) from e


def station_options(func):
    """Attach the shared station options to a command."""
    options = [
        click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Station configuration file (YAML or JSON)'),
        click.option('--elevation', type=float, help='Station elevation (meters, or feet with --units imperial)'),
        click.option('--latitude', type=float, help='Station latitude in decimal degrees (north positive)'),
        click.option('--albedo', type=float, help=f'Surface albedo (default: {DEFAULT_ALBEDO})'),
        click.option('--units', type=click.Choice(list(UNIT_SYSTEMS), case_sensitive=False), default='metric', show_default=True, help='Unit system of the inputs'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# ============================================================================
# Main Command Group
# ============================================================================

@click.group()
@click.option('--verbose', '-v', is_flag=True, default=False, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(dir_okay=False, path_type=Path), help='Custom log file path')
@click.option('--config', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Station configuration file (YAML or JSON)')
@click.version_option(version=__version__, prog_name='penman-et')
@click.pass_context
def cli(ctx, verbose, log_file, config):
    """
    penman-et - FAO-56 Penman-Monteith reference evapotranspiration.

    Estimates daily ET0 for a short grass surface from daily minimum and
    maximum temperature, minimum and maximum relative humidity and wind
    speed at 2 m.

    \b
    Common commands:
      penman-et calculate   Calculate ET0 for one day
      penman-et station     Show station parameters

    For help on a specific command, run: penman-et COMMAND --help
    """
    ctx.ensure_object(dict)

    level = 'DEBUG' if verbose else LOGGING['cli_level']
    Logger.setup(name='penman_et', log_file=str(log_file) if log_file else None, level=level)

    if verbose:
        Logger.debug('Verbose logging enabled')
    if log_file:
        Logger.info(f'Logging to file: {log_file}')

    ctx.obj['config_path'] = config
    ctx.obj['verbose'] = verbose
    ctx.obj['log_file'] = log_file


# ============================================================================
# Calculate Command
# ============================================================================

@cli.command()
@station_options
@click.option('--tmin', type=float, required=True, help='Minimum air temperature (°C, or °F with --units imperial)')
@click.option('--tmax', type=float, required=True, help='Maximum air temperature (°C, or °F with --units imperial)')
@click.option('--rh-min', type=float, required=True, help='Minimum relative humidity (%)')
@click.option('--rh-max', type=float, required=True, help='Maximum relative humidity (%)')
@click.option('--wind', type=float, required=True, help='Wind speed at 2 m (m/s, or mph with --units imperial)')
@click.option('--day-of-year', '-d', type=click.IntRange(1, 366), help='Day of year of the readings (1-366)')
@click.option('--date', 'obs_date', type=str, callback=validate_date, help='Date of the readings (YYYY-MM-DD)')
@click.option('--sunshine-hours', type=float, help='Measured sunshine hours (default: daylight hours, clear sky)')
@click.option('--output-unit', type=click.Choice(list(OUTPUT_UNITS), case_sensitive=False), default=DEFAULT_OUTPUT_UNIT, show_default=True, help='Depth unit of the result')
@click.option('--details', is_flag=True, default=False, help='Show every intermediate term')
@click.option('--json', 'as_json', is_flag=True, default=False, help='Print the result as JSON')
@click.pass_context
def calculate(ctx, config, elevation, latitude, albedo, units, tmin, tmax, rh_min, rh_max,
              wind, day_of_year, obs_date, sunshine_hours, output_unit, details, as_json):
    """
    Calculate reference evapotranspiration for one day.

    \b
    Examples:
      penman-et calculate --elevation 2 --latitude 15 --tmin 19.1 --tmax 25 \\
          --rh-min 54 --rh-max 87 --wind 2.078 --day-of-year 15 --output-unit mm
      penman-et calculate -c station.yaml --units imperial --tmin 66 --tmax 77 \\
          --rh-min 54 --rh-max 87 --wind 4.6 --date 2024-01-15

    Without --day-of-year or --date, today's date is used.
    """
    if day_of_year is not None and obs_date is not None:
        raise click.UsageError('Use either --day-of-year or --date, not both')

    if day_of_year is None:
        day_of_year = day_of_year_from_date(obs_date)
        Logger.debug(f'Using day of year {day_of_year}')

    station = resolve_station(ctx, config, elevation, latitude, albedo, units)
    calculator = EvapotranspirationCalculator(station, output_unit=output_unit)

    try:
        observation = DailyObservation.create(tmin, tmax, rh_min, rh_max, wind, units=units)
        components = calculator.calculate_components(observation, day_of_year, sunshine_hours)
    except PenmanETError as e:
        Logger.debug(f'Calculation failed: {e}')
        if as_json:
            click.echo(json.dumps(create_error_context(e, {'day_of_year': day_of_year}), indent=2))
        raise click.ClickException(str(e)) from e

    et0 = components.et0_mm if calculator.output_unit == 'mm' else components.et0_inches

    if as_json:
        result = {
            'station': station.to_dict(),
            'observation': observation.to_dict(),
            'day_of_year': day_of_year,
            'et0': et0,
            'unit': calculator.output_unit,
        }
        if details:
            result['components'] = components.to_dict()
        click.echo(json.dumps(result, indent=2))
        return

    if details:
        click.secho('Penman-Monteith terms', fg='green', bold=True)
        for name, value in components.to_dict().items():
            click.echo(f'  {name}: {value}')
        click.echo()

    click.echo(f'ET0: {et0:.3f} {calculator.output_unit}/day')


# ============================================================================
# Station Command
# ============================================================================

@cli.command()
@station_options
@click.pass_context
def station(ctx, config, elevation, latitude, albedo, units):
    """
    Show the validated station parameters and pressure terms.

    \b
    Examples:
      penman-et station --elevation 100 --latitude 50.8
      penman-et station -c station.yaml
    """
    station_config = resolve_station(ctx, config, elevation, latitude, albedo, units)

    pressure = atmospheric_pressure(station_config.elevation)
    gamma = psychrometric_constant(pressure)

    click.secho('Station', fg='green', bold=True)
    click.echo(f'  Elevation: {station_config.elevation:.2f} m ({station_config.elevation_feet:.1f} ft)')
    click.echo(f'  Latitude: {station_config.latitude:.4f}°')
    click.echo(f'  Albedo: {station_config.albedo:.2f}')
    click.echo(f'  Atmospheric pressure: {pressure:.3f} kPa')
    click.echo(f'  Psychrometric constant: {gamma:.6f} kPa/°C')


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == '__main__':
    cli()
