"""Unit tests for ``trackdraw.nmea.distances``."""

from trackdraw.nmea.constants import SPHERICAL_EARTH
from trackdraw.nmea.distances import haversine, initial_bearing
from trackdraw.nmea.track import TrackPoint

import unittest


class PlanetCalcDatum(object):
    """Datum that uses the same mean radius as the one on
    http://planetcalc.com/72.
    """

    MEAN_RADIUS_IN_METERS = 6372795


class HaversineTest(unittest.TestCase):
    """Unit tests for the Haversine formula."""

    def test_planetcalc(self):
        """Tests the Haversine formula using the example found at
        http://planetcalc.com/72.
        """
        first = TrackPoint(lat=55 + 45 / 60, lon=37 + 37 / 60)
        second = TrackPoint(lat=59 + 53 / 60, lon=30 + 15 / 60)

        self.assertAlmostEqual(
            633184.232, haversine(first, second, datum=PlanetCalcDatum), places=3
        )

    def test_lyon_paris(self):
        """Tests the Haversine formula for Lyon and Paris with the default
        spherical Earth model.
        """
        lyon = TrackPoint(lat=45.7597, lon=4.8422)
        paris = TrackPoint(lat=48.8567, lon=2.3508)
        self.assertAlmostEqual(392216.71780659, haversine(lyon, paris), places=6)

    def test_default_datum(self):
        """Tests that the default datum is a sphere with a mean radius of
        6371 km, where one degree along a meridian is R * pi / 180 metres.
        """
        self.assertEqual(6371000, SPHERICAL_EARTH.MEAN_RADIUS_IN_METERS)
        self.assertAlmostEqual(
            111194.926645, haversine(TrackPoint(0, 0), TrackPoint(1, 0)), places=6
        )
        self.assertAlmostEqual(
            haversine(TrackPoint(0, 0), TrackPoint(1, 0), datum=SPHERICAL_EARTH),
            haversine(TrackPoint(0, 0), TrackPoint(1, 0)),
        )

    def test_symmetry(self):
        first = TrackPoint(lat=52.537525, lon=13.365224)
        second = TrackPoint(lat=52.537525, lon=13.375224)
        self.assertAlmostEqual(haversine(first, second), haversine(second, first))
        self.assertAlmostEqual(676.334, haversine(first, second), places=3)
        self.assertEqual(0.0, haversine(first, first))


class InitialBearingTest(unittest.TestCase):
    """Unit tests for the initial bearing calculation."""

    def test_cardinal_directions(self):
        origin = TrackPoint(lat=0, lon=0)
        self.assertAlmostEqual(0.0, initial_bearing(origin, TrackPoint(1, 0)))
        self.assertAlmostEqual(90.0, initial_bearing(origin, TrackPoint(0, 1)))
        self.assertAlmostEqual(180.0, initial_bearing(origin, TrackPoint(-1, 0)))
        self.assertAlmostEqual(270.0, initial_bearing(origin, TrackPoint(0, -1)))

    def test_range(self):
        first = TrackPoint(lat=52.547525, lon=13.375224)
        second = TrackPoint(lat=52.547525, lon=13.365224)
        bearing = initial_bearing(first, second)
        self.assertTrue(0 <= bearing < 360)
        self.assertAlmostEqual(270.0, bearing, places=2)
