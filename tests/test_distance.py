"""
Tests for distance from home.
"""

import pytest

from fancywalks.core.walks import (
    METERS_TO_MILES,
    distance_from_home_miles,
    geodesic_distance_m,
    meters_to_miles,
    round_to_tenth,
)
from fancywalks.models import DEFAULT_HOME, HomeLocation


class TestGeodesicDistance:
    """Tests for geodesic_distance_m."""

    def test_same_point(self):
        """Test distance to home itself is zero."""
        assert geodesic_distance_m(
            DEFAULT_HOME, DEFAULT_HOME.latitude, DEFAULT_HOME.longitude
        ) == pytest.approx(0.0, abs=1e-6)

    def test_one_degree_of_latitude(self):
        """Test one degree north is about 111 km."""
        meters = geodesic_distance_m(
            DEFAULT_HOME, DEFAULT_HOME.latitude + 1, DEFAULT_HOME.longitude
        )
        assert meters == pytest.approx(111_250, rel=0.005)

    def test_symmetric(self):
        """Test swapping the endpoints gives the same distance."""
        a = HomeLocation(latitude=51.5, longitude=-0.12)
        b = HomeLocation(latitude=50.82, longitude=-0.14)

        assert geodesic_distance_m(a, b.latitude, b.longitude) == pytest.approx(
            geodesic_distance_m(b, a.latitude, a.longitude)
        )

    def test_never_negative(self):
        """Test westward and southward points give positive distances."""
        assert geodesic_distance_m(DEFAULT_HOME, 50.0, -3.0) > 0


class TestConversions:
    """Tests for unit conversion and rounding."""

    def test_meters_to_miles(self):
        """Test one mile in meters."""
        assert METERS_TO_MILES == 0.0006213712
        assert meters_to_miles(1609.344) == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0.0),
            (12.34, 12.3),
            (12.36, 12.4),
            (0.04, 0.0),
            (99.99, 100.0),
        ],
    )
    def test_round_to_tenth(self, value, expected):
        """Test rounding to one decimal place."""
        assert round_to_tenth(value) == expected

    @pytest.mark.parametrize("value,expected", [(0.25, 0.3), (1.25, 1.3), (2.45, 2.5), (-0.25, -0.3)])
    def test_round_half_away_from_zero(self, value, expected):
        """Test exact halves round away from zero, not to even."""
        assert round_to_tenth(value) == expected


class TestDistanceFromHome:
    """Tests for distance_from_home_miles."""

    def test_home_is_zero(self):
        """Test a walk starting at home is 0.0 miles away."""
        assert (
            distance_from_home_miles(
                DEFAULT_HOME, DEFAULT_HOME.latitude, DEFAULT_HOME.longitude
            )
            == 0.0
        )

    def test_half_degree_north(self):
        """Test half a degree north is about 34.6 miles."""
        miles = distance_from_home_miles(DEFAULT_HOME, 51.597848, -0.243409)
        assert miles == pytest.approx(34.6, abs=0.2)
        assert round(miles, 1) == miles

    def test_custom_home(self):
        """Test distance is measured from the given home."""
        home = HomeLocation(latitude=50.897848, longitude=-0.243409)

        assert distance_from_home_miles(home, 50.897848, -0.243409) == 0.0
        assert distance_from_home_miles(home, 51.097848, -0.243409) == pytest.approx(
            13.8, abs=0.2
        )
