"""
Pytest configuration and fixtures for penman_et tests.

Provides common fixtures for testing.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def reference_station():
    """Station of the regression scenario: 15° N, 2 m, reference grass."""
    from penman_et.core.station import StationConfig

    return StationConfig(elevation=2.0, latitude=15.0, albedo=0.23)


@pytest.fixture
def reference_observation():
    """Daily readings of the regression scenario (metric)."""
    from penman_et.core.station import DailyObservation

    return DailyObservation(
        temperature_min=19.1,
        temperature_max=25.0,
        humidity_min=54.0,
        humidity_max=87.0,
        wind_speed=2.078,
    )


@pytest.fixture
def reference_day():
    """Day of year of the regression scenario."""
    return 15


@pytest.fixture
def calculator_mm(reference_station):
    """Calculator reporting millimeters."""
    from penman_et.et import EvapotranspirationCalculator

    return EvapotranspirationCalculator(reference_station, output_unit="mm")


@pytest.fixture
def calculator_inch(reference_station):
    """Calculator reporting inches."""
    from penman_et.et import EvapotranspirationCalculator

    return EvapotranspirationCalculator(reference_station, output_unit="inch")


@pytest.fixture
def station_yaml(tmp_path):
    """Create a station configuration file in YAML."""
    content = """station:
  elevation: 2
  latitude: 15.0
  albedo: 0.23
  units: metric
"""
    path = tmp_path / "station.yaml"
    path.write_text(content)
    return path


@pytest.fixture
def station_json(tmp_path):
    """Create an imperial station configuration file in JSON."""
    content = """{
    "elevation": 328.084,
    "latitude": 50.8,
    "units": "imperial"
}"""
    path = tmp_path / "station.json"
    path.write_text(content)
    return path


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure quiet logging for tests."""
    from penman_et.utils.logger import Logger

    Logger.configure_for_testing()
    yield
