"""
Unit tests for the ET module of penman_et.

Tests the Penman-Monteith combination and the full daily pipeline.
"""

import pytest
import numpy as np
import sys
from datetime import date, datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestPenmanMonteith:
    """Test the combination equation on its own."""

    def test_fao_example_18_terms(self):
        """Test FAO example 18 intermediate terms give about 3.9 mm/day."""
        from penman_et.et import penman_monteith
        et0 = penman_monteith(0.122, 13.28, 0.0666, 16.9, 2.078, 0.589)
        assert et0 == pytest.approx(3.879, abs=0.05)

    def test_zero_wind_is_radiation_term(self):
        """Test with no wind ET0 reduces to 0.408 Δ Rn / (Δ + γ)."""
        from penman_et.et import penman_monteith
        et0 = penman_monteith(0.122, 13.28, 0.0666, 16.9, 0.0, 0.589)
        assert et0 == pytest.approx(0.408 * 0.122 * 13.28 / (0.122 + 0.0666))

    def test_zero_denominator_raises(self):
        """Test a vanishing denominator is reported."""
        from penman_et.et import penman_monteith
        from penman_et.utils.exceptions import ArithmeticDegenerateError
        with pytest.raises(ArithmeticDegenerateError) as exc_info:
            penman_monteith(0.0, 10.0, 0.0, 20.0, 2.0, 1.0)
        assert exc_info.value.details["term"] == "denominator"


class TestEvapotranspirationCalculator:
    """Test the daily calculator end to end."""

    def test_reference_day_mm(self, calculator_mm, reference_observation, reference_day):
        """Test regression value of the reference scenario in mm."""
        assert calculator_mm.calculate(reference_observation, reference_day) == pytest.approx(4.052, abs=1e-3)

    def test_reference_day_inch(self, calculator_inch, reference_observation, reference_day):
        """Test regression value of the reference scenario in inches."""
        assert calculator_inch.calculate(reference_observation, reference_day) == pytest.approx(0.160, abs=1e-3)

    def test_default_output_is_inch(self, reference_station):
        """Test inches are reported unless mm is requested."""
        from penman_et.et import EvapotranspirationCalculator
        assert EvapotranspirationCalculator(reference_station).output_unit == "inch"

    def test_output_unit_aliases(self, reference_station):
        """Test 'in' and 'inches' normalize to inch."""
        from penman_et.et import EvapotranspirationCalculator
        assert EvapotranspirationCalculator(reference_station, output_unit="in").output_unit == "inch"
        assert EvapotranspirationCalculator(reference_station, output_unit="MM").output_unit == "mm"

    def test_invalid_output_unit(self, reference_station):
        """Test unknown output units are rejected."""
        from penman_et.et import EvapotranspirationCalculator
        from penman_et.utils.exceptions import InvalidConfigurationError
        with pytest.raises(InvalidConfigurationError):
            EvapotranspirationCalculator(reference_station, output_unit="cm")

    def test_result_has_three_decimals(self, calculator_mm, reference_observation, reference_day):
        """Test results are rounded to 3 decimals."""
        result = calculator_mm.calculate(reference_observation, reference_day)
        assert result == round(result, 3)

    def test_components(self, calculator_mm, reference_observation, reference_day):
        """Test intermediate terms of the reference scenario."""
        components = calculator_mm.calculate_components(reference_observation, reference_day)

        assert components.atmospheric_pressure == pytest.approx(101.276, abs=1e-3)
        assert components.psychrometric_constant == pytest.approx(0.06735, abs=1e-5)
        assert components.saturation_vapour_pressure_mean == pytest.approx(2.6895, abs=1e-3)
        assert components.actual_vapour_pressure == pytest.approx(1.8171, abs=1e-3)
        assert components.vapour_pressure_deficit == pytest.approx(0.8723, abs=1e-3)
        assert components.slope_of_saturation_curve == pytest.approx(0.1616, abs=1e-3)
        assert components.extraterrestrial_radiation == pytest.approx(29.409, abs=1e-2)
        assert components.daylight_hours == pytest.approx(11.204, abs=1e-2)
        assert components.incoming_solar_radiation == pytest.approx(22.057, abs=1e-2)
        assert components.net_longwave_radiation == pytest.approx(5.637, abs=1e-2)
        assert components.net_radiation == pytest.approx(11.347, abs=1e-2)
        assert components.et0_mm == pytest.approx(4.052, abs=1e-3)

    def test_clear_sky_default(self, calculator_mm, reference_observation, reference_day):
        """Test sunshine defaults to daylight hours, so R_s equals R_so."""
        components = calculator_mm.calculate_components(reference_observation, reference_day)
        assert components.sunshine_hours == components.daylight_hours
        assert components.incoming_solar_radiation == pytest.approx(components.clear_sky_solar_radiation)
        assert components.clear_sky_solar_radiation == pytest.approx(0.75 * components.extraterrestrial_radiation)

    def test_measured_sunshine_lowers_et(self, calculator_mm, reference_observation, reference_day):
        """Test fewer sunshine hours lower R_s and ET0."""
        clear = calculator_mm.calculate_components(reference_observation, reference_day)
        cloudy = calculator_mm.calculate_components(reference_observation, reference_day, sunshine_hours=4.0)

        assert cloudy.sunshine_hours == 4.0
        assert cloudy.incoming_solar_radiation < clear.incoming_solar_radiation
        assert cloudy.clear_sky_solar_radiation == pytest.approx(clear.clear_sky_solar_radiation)
        assert cloudy.et0_mm < clear.et0_mm

    def test_negative_sunshine_rejected(self, calculator_mm, reference_observation, reference_day):
        """Test negative sunshine hours are rejected."""
        from penman_et.utils.exceptions import InvalidObservationError
        with pytest.raises(InvalidObservationError):
            calculator_mm.calculate(reference_observation, reference_day, sunshine_hours=-1.0)

    def test_sunshine_above_daylight_rejected(self, calculator_mm, reference_observation, reference_day):
        """Test sunshine longer than the day is rejected, keeping R_s / R_so at most 1."""
        from penman_et.utils.exceptions import InvalidObservationError
        with pytest.raises(InvalidObservationError) as exc_info:
            calculator_mm.calculate_components(reference_observation, reference_day, sunshine_hours=20.0)
        assert exc_info.value.details["field"] == "sunshine_hours"
        assert exc_info.value.details["value"] == 20.0

    def test_sunshine_within_daylight(self, calculator_mm, reference_observation, reference_day):
        """Test sunshine up to the daylight hours is accepted."""
        components = calculator_mm.calculate_components(reference_observation, reference_day, sunshine_hours=11.0)
        assert components.incoming_solar_radiation <= components.clear_sky_solar_radiation

    def test_deterministic(self,calculator_mm, reference_observation, reference_day):
        """Test identical inputs give identical results."""
        first = calculator_mm.calculate(reference_observation, reference_day)
        second = calculator_mm.calculate(reference_observation, reference_day)
        assert first == second

    def test_wind_increases_et(self, calculator_mm, reference_day):
        """Test ET0 grows with wind speed when the air is not saturated."""
        from penman_et.core.station import DailyObservation
        results = [
            calculator_mm.calculate(DailyObservation(19.1, 25.0, 54.0, 87.0, wind), reference_day)
            for wind in (0.0, 2.078, 5.0)
        ]
        assert results == pytest.approx([3.268, 4.052, 4.787], abs=1e-3)
        assert results[0] < results[1] < results[2]

    def test_humidity_decreases_et(self, calculator_mm, reference_observation, reference_day):
        """Test more humid air gives lower ET0."""
        from penman_et.core.station import DailyObservation
        humid = DailyObservation(19.1, 25.0, 74.0, 97.0, 2.078)
        assert calculator_mm.calculate(humid, reference_day) == pytest.approx(3.579, abs=1e-3)
        assert calculator_mm.calculate(humid, reference_day) < calculator_mm.calculate(
            reference_observation, reference_day
        )

    def test_summer_day(self, calculator_mm, reference_observation):
        """Test the same readings near the June solstice."""
        assert calculator_mm.calculate(reference_observation, 172) == pytest.approx(5.280, abs=1e-3)

    def test_mid_latitude_station(self):
        """Test a mid-latitude summer day at 100 m, 50.8° N."""
        from penman_et.core.station import DailyObservation, StationConfig
        from penman_et.et import EvapotranspirationCalculator
        calculator = EvapotranspirationCalculator(StationConfig(100.0, 50.8), output_unit="mm")
        observation = DailyObservation(12.3, 21.5, 63.0, 84.0, 2.078)
        assert calculator.calculate(observation, 187) == pytest.approx(4.811, abs=1e-3)

    def test_calculate_imperial(self, reference_station, reference_day):
        """Test °F / mph readings give the same result in inches."""
        from penman_et.et import EvapotranspirationCalculator
        calculator = EvapotranspirationCalculator(reference_station, output_unit="mm")
        result = calculator.calculate_imperial(66.38, 77.0, 54.0, 87.0, 4.64835, reference_day)
        assert result == pytest.approx(0.160, abs=1e-3)

    def test_with_station(self, calculator_mm):
        """Test switching station keeps the output unit."""
        from penman_et.core.station import StationConfig
        other = calculator_mm.with_station(StationConfig(100.0, 50.8))
        assert other.output_unit == "mm"
        assert other.station.latitude == 50.8
        assert calculator_mm.station.latitude == 15.0

    @pytest.mark.parametrize("day", [0, 367, -5, 15.5, "15"])
    def test_invalid_day_of_year(self, calculator_mm, reference_observation, day):
        """Test days outside 1-366 or non-integers are rejected."""
        from penman_et.utils.exceptions import InvalidObservationError
        with pytest.raises(InvalidObservationError):
            calculator_mm.calculate(reference_observation, day)

    def test_numpy_integer_day(self, calculator_mm, reference_observation):
        """Test numpy integers are accepted as day of year."""
        assert calculator_mm.calculate(reference_observation, np.int64(15)) == pytest.approx(4.052, abs=1e-3)

    def test_leap_day(self, calculator_mm, reference_observation):
        """Test day 366 is accepted."""
        assert calculator_mm.calculate(reference_observation, 366) > 0

    def test_polar_night(self, reference_observation):
        """Test ET0 is not computed when the sun does not rise."""
        from penman_et.core.station import StationConfig
        from penman_et.et import EvapotranspirationCalculator
        from penman_et.utils.exceptions import IllPosedGeometryError
        calculator = EvapotranspirationCalculator(StationConfig(10.0, 70.0), output_unit="mm")
        with pytest.raises(IllPosedGeometryError):
            calculator.calculate(reference_observation, 355)

    def test_components_to_dict(self, calculator_mm, reference_observation, reference_day):
        """Test components serialize to a flat dictionary."""
        data = calculator_mm.calculate_components(reference_observation, reference_day).to_dict()
        assert data["day_of_year"] == 15
        assert data["et0_mm"] == pytest.approx(4.052, abs=1e-3)
        assert all(isinstance(value, (int, float)) for value in data.values())


class TestConfigure:
    """Test the configure() entry point."""

    def test_configure_metric(self, reference_observation, reference_day):
        """Test configure builds a calculator reporting inches."""
        from penman_et.et import configure
        calculator = configure(elevation=2.0, latitude=15.0)
        assert calculator.station.albedo == 0.23
        assert calculator.calculate(reference_observation, reference_day) == pytest.approx(0.160, abs=1e-3)

    def test_configure_imperial(self):
        """Test elevation in feet is converted to meters."""
        from penman_et.et import configure
        calculator = configure(elevation=6.5617, latitude=15.0, units="imperial", output_unit="mm")
        assert calculator.station.elevation == pytest.approx(2.0, abs=1e-3)

    def test_configure_invalid_albedo(self):
        """Test albedo above 1 is rejected at configuration time."""
        from penman_et.et import configure
        from penman_et.utils.exceptions import InvalidConfigurationError
        with pytest.raises(InvalidConfigurationError):
            configure(elevation=2.0, latitude=15.0, albedo=1.5)

    def test_configure_invalid_latitude(self):
        """Test latitude beyond 90° is rejected."""
        from penman_et.et import configure
        from penman_et.utils.exceptions import InvalidConfigurationError
        with pytest.raises(InvalidConfigurationError):
            configure(elevation=2.0, latitude=-91.0)

    def test_package_exports(self):
        """Test the main entry points are importable from the package."""
        import penman_et
        assert callable(penman_et.configure)
        assert penman_et.EvapotranspirationCalculator is not None
        assert penman_et.__version__


class TestDayOfYear:
    """Test day of year helper."""

    @pytest.mark.parametrize("value, expected", [
        (date(2023, 1, 1), 1),
        (date(2024, 3, 1), 61),
        (date(2023, 3, 1), 60),
        (date(2023, 12, 31), 365),
        (date(2024, 12, 31), 366),
        (datetime(2024, 1, 15, 18, 30), 15),
    ])
    def test_day_of_year_from_date(self, value, expected):
        """Test calendar dates including leap years."""
        from penman_et.et import day_of_year_from_date
        assert day_of_year_from_date(value) == expected

    def test_default_is_today(self):
        """Test no argument uses today's date."""
        from penman_et.et import day_of_year_from_date
        assert day_of_year_from_date() == date.today().timetuple().tm_yday


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
