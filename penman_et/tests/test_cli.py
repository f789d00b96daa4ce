"""
Tests for the penman-et command-line interface.
"""

import json
import pytest
import sys
from pathlib import Path

from click.testing import CliRunner

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

REFERENCE_ARGS = [
    "--tmin", "19.1", "--tmax", "25", "--rh-min", "54", "--rh-max", "87",
    "--wind", "2.078", "--day-of-year", "15",
]


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


class TestCalculateCommand:
    """Test the calculate command."""

    def test_calculate_mm(self, runner):
        """Test the reference scenario in mm."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--output-unit", "mm", *REFERENCE_ARGS
        ])
        assert result.exit_code == 0, result.output
        assert "ET0: 4.052 mm/day" in result.output

    def test_calculate_default_inch(self, runner):
        """Test inches are the default output unit."""
        from penman_et.cli import cli
        result = runner.invoke(cli, ["calculate", "--elevation", "2", "--latitude", "15", *REFERENCE_ARGS])
        assert result.exit_code == 0, result.output
        assert "ET0: 0.160 inch/day" in result.output

    def test_calculate_json(self, runner):
        """Test JSON output."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--output-unit", "mm", "--json", *REFERENCE_ARGS
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["et0"] == pytest.approx(4.052, abs=1e-3)
        assert data["unit"] == "mm"
        assert data["day_of_year"] == 15
        assert data["station"]["latitude"] == 15.0
        assert "components" not in data

    def test_calculate_json_details(self, runner):
        """Test JSON output with every intermediate term."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--json", "--details", *REFERENCE_ARGS
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["components"]["et0_mm"] == pytest.approx(4.052, abs=1e-3)
        assert data["components"]["daylight_hours"] == pytest.approx(11.204, abs=1e-2)

    def test_calculate_details_text(self, runner):
        """Test text output with intermediate terms."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--details", *REFERENCE_ARGS
        ])
        assert result.exit_code == 0, result.output
        assert "net_radiation" in result.output
        assert "vapour_pressure_deficit" in result.output

    def test_calculate_imperial(self, runner):
        """Test imperial station and readings."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--units", "imperial", "--elevation", "6.5617", "--latitude", "15",
            "--tmin", "66.38", "--tmax", "77", "--rh-min", "54", "--rh-max", "87",
            "--wind", "4.64835", "--day-of-year", "15",
        ])
        assert result.exit_code == 0, result.output
        assert "ET0: 0.160 inch/day" in result.output

    def test_calculate_with_date(self, runner):
        """Test --date resolves the day of year."""
        from penman_et.cli import cli
        args = [arg for arg in REFERENCE_ARGS if arg not in ("--day-of-year", "15")]
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--output-unit", "mm",
            "--date", "2024-01-15", "--json", *args
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["day_of_year"] == 15
        assert data["et0"] == pytest.approx(4.052, abs=1e-3)

    def test_calculate_config_file(self, runner, station_yaml):
        """Test station loaded from a config file."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--config", str(station_yaml), "--output-unit", "mm", *REFERENCE_ARGS
        ])
        assert result.exit_code == 0, result.output
        assert "ET0: 4.052 mm/day" in result.output

    def test_global_config_file(self, runner, station_yaml):
        """Test the group-level --config option."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "--config", str(station_yaml), "calculate", "--output-unit", "mm", *REFERENCE_ARGS
        ])
        assert result.exit_code == 0, result.output
        assert "ET0: 4.052 mm/day" in result.output

    def test_day_and_date_conflict(self, runner):
        """Test --day-of-year and --date are mutually exclusive."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--date", "2024-01-15", *REFERENCE_ARGS
        ])
        assert result.exit_code != 0

    def test_invalid_date(self, runner):
        """Test malformed dates are rejected."""
        from penman_et.cli import cli
        args = [arg for arg in REFERENCE_ARGS if arg not in ("--day-of-year", "15")]
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--date", "15/01/2024", *args
        ])
        assert result.exit_code != 0
        assert "Invalid date format" in result.output

    def test_missing_station(self, runner):
        """Test elevation and latitude are required without a config file."""
        from penman_et.cli import cli
        result = runner.invoke(cli, ["calculate", *REFERENCE_ARGS])
        assert result.exit_code != 0
        assert "--elevation" in result.output

    def test_invalid_albedo(self, runner):
        """Test station validation errors are reported."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--albedo", "1.5", *REFERENCE_ARGS
        ])
        assert result.exit_code != 0
        assert "Albedo" in result.output

    def test_invalid_humidity(self, runner):
        """Test observation validation errors are reported."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15",
            "--tmin", "19.1", "--tmax", "25", "--rh-min", "54", "--rh-max", "120",
            "--wind", "2.078", "--day-of-year", "15",
        ])
        assert result.exit_code != 0
        assert "Relative humidity" in result.output

    def test_polar_night(self, runner):
        """Test polar night is reported as an error."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "10", "--latitude", "70",
            "--tmin=-20", "--tmax=-10", "--rh-min", "60", "--rh-max", "90",
            "--wind", "3", "--day-of-year", "355",
        ])
        assert result.exit_code != 0
        assert "Sunset hour angle undefined" in result.output
        assert result.output.count("Sunset hour angle undefined") == 1

    def test_sunshine_above_daylight(self, runner):
        """Test measured sunshine longer than the day is rejected."""
        from penman_et.cli import cli
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--sunshine-hours", "20", *REFERENCE_ARGS
        ])
        assert result.exit_code != 0
        assert "exceed the daylight hours" in result.output

    def test_day_of_year_out_of_range(self, runner):
        """Test the day of year option range."""
        from penman_et.cli import cli
        args = [arg for arg in REFERENCE_ARGS if arg not in ("--day-of-year", "15")]
        result = runner.invoke(cli, [
            "calculate", "--elevation", "2", "--latitude", "15", "--day-of-year", "400", *args
        ])
        assert result.exit_code != 0


class TestStationCommand:
    """Test the station command."""

    def test_station_metric(self, runner):
        """Test station parameters and pressure terms."""
        from penman_et.cli import cli
        result = runner.invoke(cli, ["station", "--elevation", "1800", "--latitude", "50.8"])
        assert result.exit_code == 0, result.output
        assert "Atmospheric pressure: 81.756 kPa" in result.output
        assert "Albedo: 0.23" in result.output

    def test_station_config_file(self, runner, station_json):
        """Test imperial station file."""
        from penman_et.cli import cli
        result = runner.invoke(cli, ["station", "-c", str(station_json)])
        assert result.exit_code == 0, result.output
        assert "Elevation: 100.00 m" in result.output
        assert "Latitude: 50.8000" in result.output

    def test_station_override_albedo(self, runner, station_yaml):
        """Test command-line values override the file."""
        from penman_et.cli import cli
        result = runner.invoke(cli, ["station", "-c", str(station_yaml), "--albedo", "0.18"])
        assert result.exit_code == 0, result.output
        assert "Albedo: 0.18" in result.output


class TestGroupOptions:
    """Test global options."""

    def test_version(self, runner):
        """Test --version."""
        from penman_et import __version__
        from penman_et.cli import cli
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self, runner):
        """Test --help lists commands."""
        from penman_et.cli import cli
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "calculate" in result.output
        assert "station" in result.output

    def test_log_file(self, runner, tmp_path):
        """Test --log-file writes the log."""
        from penman_et.cli import cli
        from penman_et.utils.logger import Logger
        log_file = tmp_path / "cli.log"
        result = runner.invoke(cli, [
            "--verbose", "--log-file", str(log_file),
            "calculate", "--elevation", "2", "--latitude", "15", *REFERENCE_ARGS
        ])
        Logger.configure_for_testing()
        assert result.exit_code == 0, result.output
        assert "ET0 day 15" in log_file.read_text()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
