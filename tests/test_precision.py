"""
Unit tests for the rounding helpers.
"""

import math
import unittest

from headloss.precision import round_significant, round_fixed


class TestRoundSignificant(unittest.TestCase):
    """Test significant-figure rounding."""

    def test_basic_rounding(self):
        """Test rounding to a handful of significant figures."""
        self.assertEqual(round_significant(4 / 12, 4), 0.3333)
        self.assertEqual(round_significant(1234567, 3), 1230000.0)
        self.assertEqual(round_significant(0.000123456, 2), 0.00012)

    def test_ties_round_away_from_zero(self):
        """Exact ties go away from zero, not to even."""
        self.assertEqual(round_significant(2.5, 1), 3.0)
        self.assertEqual(round_significant(-2.5, 1), -3.0)
        self.assertEqual(round_significant(0.125, 2), 0.13)

    def test_rounding_up_to_next_decade(self):
        """Test carry into an extra digit."""
        self.assertEqual(round_significant(9.996, 3), 10.0)

    def test_returns_plain_float(self):
        """Test results are floats with no string artifacts."""
        result = round_significant(61.25, 5)
        self.assertIsInstance(result, float)
        self.assertEqual(result, 61.25)

    def test_zero_and_non_finite(self):
        """Zero and non-finite values pass through."""
        self.assertEqual(round_significant(0, 3), 0.0)
        self.assertEqual(round_significant(float('inf'), 3), float('inf'))
        self.assertTrue(math.isnan(round_significant(float('nan'), 3)))

    def test_extreme_magnitudes(self):
        """Very large and very small values keep their significant figures."""
        self.assertEqual(round_significant(1.23456e300, 3), 1.23e300)
        self.assertEqual(round_significant(1.23456e-300, 3), 1.23e-300)
        self.assertEqual(round_significant(5e-324, 10), 5e-324)


class TestRoundFixed(unittest.TestCase):
    """Test fixed decimal rounding."""

    def test_whole_number(self):
        """Test rounding to zero decimal places."""
        self.assertEqual(round_fixed(227.38, 0), 227.0)
        self.assertEqual(round_fixed(2.5, 0), 3.0)
        self.assertEqual(round_fixed(-2.5, 0), -3.0)

    def test_decimal_places(self):
        """Test rounding to several decimal places."""
        self.assertEqual(round_fixed(0.125, 2), 0.13)
        self.assertEqual(round_fixed(0.000045, 4), 0.0)
        self.assertEqual(round_fixed(0.015, 4), 0.015)

    def test_large_values(self):
        """Values beyond 28 digits round without a context error."""
        self.assertEqual(round_fixed(1e30, 0), 1e30)
        self.assertEqual(round_fixed(-1e30, 2), -1e30)
        self.assertEqual(round_fixed(1.5e300, 4), 1.5e300)


if __name__ == '__main__':
    unittest.main()
