"""
Unit tests for the Rate/Payment Calculator.

Checks the level P&I payment formula, its zero-rate branch, the bi-weekly
halving rule, agreement between the closed-form and annuity-factor forms,
the vectorized grid, and currency rounding.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import math
import unittest
import warnings
import numpy as np

from mortgage_amortization.payments import (
    annuity_factor,
    monthly_payment,
    bi_weekly_payment,
    monthly_payment_vector,
    round_currency,
)


# =============================================================================
# Test Parameters
# =============================================================================

DECIMAL_PLACES_FOR_ASSERTIONS: int = 6
CENT: float = 0.005  # half a cent, for published payment figures

# Module-level shared data (populated by setUpModule)
TEST_SCENARIOS: list[dict[str, float | int]] = []


def setUpModule():
    """Build the principal × rate × term grid."""
    TEST_SCENARIOS.clear()
    principals = [0.0, 1_000.0, 120_000.0, 400_000.0, 1_600_000.0]
    rates = [0.0, 1.0, 3.0, 6.5, 7.0, 15.0]
    terms = [1, 5, 15, 30]
    for principal in principals:
        for rate in rates:
            for term in terms:
                TEST_SCENARIOS.append({'principal': principal, 'rate': rate, 'term': term})

    if not TEST_SCENARIOS:
        raise RuntimeError("setUpModule failed: No test scenarios were created")


def tearDownModule():
    """Clean up module-level data."""
    TEST_SCENARIOS.clear()


# =============================================================================
# Test Classes
# =============================================================================

class TestMonthlyPayment(unittest.TestCase):
    """Closed-form level payment."""

    def test_known_payments(self):
        """Published payments for common loans."""
        cases = [
            (400_000, 7.0, 30, 2661.21),
            (300_000, 6.0, 15, 2531.57),
            (100_000, 15.0, 30, 1264.44),
            (100_000, 5.0, 30, 536.82),
        ]
        for principal, rate, term, expected in cases:
            with self.subTest(principal=principal, rate=rate, term=term):
                self.assertAlmostEqual(monthly_payment(principal, rate, term), expected, delta=CENT)

    def test_zero_rate_is_straight_line(self):
        """monthly_payment(P, 0, T) == P / (T × 12) exactly."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            self.assertEqual(monthly_payment(120_000, 0.0, 10), 1000.0)
            for scenario in TEST_SCENARIOS:
                principal, term = scenario['principal'], scenario['term']
                with self.subTest(principal=principal, term=term):
                    self.assertEqual(monthly_payment(principal, 0.0, term), principal / (term * 12))

    def test_zero_rate_warns(self):
        with self.assertWarns(UserWarning):
            monthly_payment(120_000, 0.0, 10)

    def test_non_negative_and_finite(self):
        """Payment is non-negative and finite for all valid inputs."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            for scenario in TEST_SCENARIOS:
                with self.subTest(**scenario):
                    payment = monthly_payment(scenario['principal'], scenario['rate'], scenario['term'])
                    self.assertTrue(math.isfinite(payment))
                    self.assertGreaterEqual(payment, 0.0)

    def test_long_term_at_high_rate_is_interest_only(self):
        """(1 + r)^-n underflows to 0, leaving P × r."""
        payment = monthly_payment(100_000, 100.0, 1000)
        self.assertTrue(math.isfinite(payment))
        self.assertAlmostEqual(payment, 100_000 * 100.0 / 1200, places=DECIMAL_PLACES_FOR_ASSERTIONS)
        self.assertAlmostEqual(bi_weekly_payment(100_000, 100.0, 1000), payment / 2,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_payment_covers_first_month_interest(self):
        """A positive-rate payment always exceeds the first month's interest."""
        for scenario in TEST_SCENARIOS:
            if scenario['principal'] == 0 or scenario['rate'] == 0:
                continue
            with self.subTest(**scenario):
                payment = monthly_payment(scenario['principal'], scenario['rate'], scenario['term'])
                interest = scenario['principal'] * scenario['rate'] / 1200
                self.assertGreater(payment, interest)

    def test_matches_annuity_factor_form(self):
        """P × r(1+r)^n / ((1+r)^n - 1) == P × r / (1 - (1+r)^-n)."""
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            for scenario in TEST_SCENARIOS:
                with self.subTest(**scenario):
                    closed_form = monthly_payment(scenario['principal'], scenario['rate'], scenario['term'])
                    factor_form = scenario['principal'] * annuity_factor(scenario['rate'], scenario['term'] * 12)
                    self.assertAlmostEqual(closed_form, factor_form, places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_invalid_inputs_raise(self):
        with self.assertRaises(ValueError):
            monthly_payment(-1.0, 7.0, 30)
        with self.assertRaises(ValueError):
            monthly_payment(400_000, -0.5, 30)
        with self.assertRaises(ValueError):
            monthly_payment(400_000, 7.0, 0)


class TestBiWeeklyPayment(unittest.TestCase):
    """Bi-weekly payment is half the monthly payment."""

    def test_half_of_monthly(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            for scenario in TEST_SCENARIOS:
                with self.subTest(**scenario):
                    monthly = monthly_payment(scenario['principal'], scenario['rate'], scenario['term'])
                    bi_weekly = bi_weekly_payment(scenario['principal'], scenario['rate'], scenario['term'])
                    self.assertEqual(bi_weekly, monthly / 2)


class TestAnnuityFactor(unittest.TestCase):
    """Payment per dollar of balance."""

    def test_zero_periods(self):
        self.assertEqual(annuity_factor(7.0, 0), 0.0)

    def test_zero_rate(self):
        with self.assertWarns(UserWarning):
            self.assertAlmostEqual(annuity_factor(0.0, 120), 1 / 120, places=15)

    def test_single_period_repays_balance_plus_interest(self):
        """With one period left the factor is 1 + r."""
        self.assertAlmostEqual(annuity_factor(12.0, 1), 1.01, places=12)

    def test_invalid_inputs_raise(self):
        with self.assertRaises(ValueError):
            annuity_factor(7.0, -1)
        with self.assertRaises(ValueError):
            annuity_factor(-7.0, 360)


class TestMonthlyPaymentVector(unittest.TestCase):
    """Vectorized payment grid."""

    def test_grid_matches_scalar(self):
        rates = np.array([0.0, 3.0, 6.5, 7.0, 15.0])
        terms = np.array([[10], [15], [30]])
        grid = monthly_payment_vector(250_000, rates, terms)
        self.assertEqual(grid.shape, (3, 5))
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            for i, term in enumerate(terms[:, 0]):
                for j, rate in enumerate(rates):
                    with self.subTest(rate=rate, term=term):
                        expected = monthly_payment(250_000, float(rate), int(term))
                        self.assertAlmostEqual(grid[i, j], expected, places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_zero_rate_cells_are_finite(self):
        grid = monthly_payment_vector([120_000, 60_000], 0.0, 10)
        self.assertTrue(np.all(np.isfinite(grid)))
        self.assertTrue(np.allclose(grid, [1000.0, 500.0]))

    def test_long_term_at_high_rate_is_finite(self):
        grid = monthly_payment_vector(100_000, [15.0, 100.0], [[500], [1000]])
        self.assertTrue(np.all(np.isfinite(grid)))
        self.assertAlmostEqual(grid[1, 1], 100_000 * 100.0 / 1200, places=DECIMAL_PLACES_FOR_ASSERTIONS)
        self.assertAlmostEqual(grid[0, 0], monthly_payment(100_000, 15.0, 500),
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_invalid_inputs_raise(self):
        with self.assertRaises(ValueError):
            monthly_payment_vector([100_000, -1], 7.0, 30)
        with self.assertRaises(ValueError):
            monthly_payment_vector(100_000, [7.0, -1.0], 30)
        with self.assertRaises(ValueError):
            monthly_payment_vector(100_000, 7.0, [30, 0])


class TestRoundCurrency(unittest.TestCase):
    """Presentation rounding to cents."""

    def test_rounds_to_two_decimals(self):
        self.assertEqual(round_currency(123.456), 123.46)
        self.assertEqual(round_currency(123.454), 123.45)
        self.assertEqual(round_currency(100), 100.0)

    def test_half_cent_rounds_away_from_zero(self):
        self.assertEqual(round_currency(0.125), 0.13)
        self.assertEqual(round_currency(-0.125), -0.13)
        self.assertEqual(round_currency(123.455), 123.46)

    def test_just_below_half_cent_rounds_down(self):
        self.assertEqual(round_currency(0.004999999995), 0.0)
        self.assertEqual(round_currency(2.344999999), 2.34)

    def test_zero(self):
        self.assertEqual(round_currency(0.0), 0.0)
        self.assertEqual(round_currency(0.001), 0.0)
        self.assertEqual(math.copysign(1.0, round_currency(-0.001)), 1.0)


if __name__ == '__main__':
    unittest.main()
