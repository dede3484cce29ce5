import unittest
import numpy as np
import scipy.special
from numpy.testing import assert_allclose

from mathfn.lib.utils import cartesian, is_integer, is_non_positive_integer
from mathfn.library_functions import beta, log_beta
from mathfn.testing import assert_approximately, assert_diverging, assert_same_function, Variable, EPS, BIG_VALUE

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


DELTA = 1e-3


def _away_from_poles(*values):
    return all(not is_non_positive_integer(v, DELTA) for v in values)


class test_Beta(unittest.TestCase):

    def test_literal_values(self):
        assert_approximately(beta(0.5, 0.5), np.pi)
        assert_approximately(beta(1.0, 1.0), 1.0)
        assert_approximately(beta(2.0, 1.0), 0.5)
        assert_approximately(beta(1.0, 2.0), 0.5)
        assert_approximately(beta(3.0, 1.0), 1.0 / 3.0)
        assert_approximately(beta(2.0, 2.0), 1.0 / 6.0)
        assert_approximately(beta(1.0, 3.0), 1.0 / 3.0)

    def test_diverging_points(self):
        self.assertTrue(np.isnan(beta(0.0, 0.0)))
        assert_diverging(beta(1.0, 0.0))
        assert_diverging(beta(0.0, 1.0))

    def test_the_beta_function_diverges_if_one_of_the_arguments_is_zero_or_a_negative_integer(self):
        rng = np.random.default_rng(0)
        for y in rng.uniform(-5, 5, 10):
            big_value = 1e8 if is_integer(y, 0.05) else BIG_VALUE
            for n in range(6):
                x = -float(n)
                assert_diverging(beta(x, y), big_value, 'B(-n, y) ~ ±∞ at (-n, y) = ({}, {})'.format(x, y))
                assert_diverging(beta(y, x), big_value, 'B(x, -n) ~ ±∞ at (x, -n) = ({}, {})'.format(y, x))

    def test_the_values_of_beta_at_the_infinities_and_nan(self):
        values = [np.nan, -np.inf, np.inf, 0.5]

        for a, b in cartesian([values, values]):
            if np.isnan(a) or np.isnan(b):
                self.assertTrue(np.isnan(beta(a, b)), 'B({}, {}) = NaN'.format(a, b))

            elif np.isinf(a) and np.isinf(b):
                if a > 0 and b > 0:
                    self.assertEqual(beta(a, b), 0)
                elif a < 0 and b < 0:
                    self.assertEqual(beta(a, b), np.inf)
                else:
                    self.assertTrue(np.isnan(beta(a, b)), 'B({}, {}) = NaN'.format(a, b))

            elif np.isinf(a) or np.isinf(b):
                infinite_arg = a if np.isinf(a) else b
                if infinite_arg > 0:
                    self.assertEqual(beta(a, b), 0)
                else:
                    self.assertEqual(beta(a, b), np.inf)

            else:
                self.assertTrue(np.isfinite(beta(a, b)))

    def test_vanishes_if_the_sum_overflows(self):
        self.assertEqual(beta(1e308, 1e308), 0)
        self.assertEqual(beta(1.7e308, 0.5e308), 0)

    def test_vanishes_if_only_the_sum_is_a_pole(self):
        self.assertEqual(beta(-0.5, -0.5), 0)
        self.assertEqual(beta(2.5, -3.5), 0)

    def test_scipy(self):
        test_params = cartesian([np.arange(-4.95, 5, 0.3), np.arange(-4.95, 5, 0.3)])
        test_params = test_params[[_away_from_poles(x, y, x + y) for x, y in test_params]]

        python_results = scipy.special.beta(test_params[:, 0], test_params[:, 1])
        mathfn_results = np.array([beta(x, y) for x, y in test_params])

        assert_allclose(mathfn_results, python_results, rtol=1e-10, atol=1e-14)

    def test_the_beta_function_properties(self):
        two_variables = [Variable('x'), Variable('y')]

        assert_same_function(
            'B(x, y) = B(y, x)',
            lambda x, y: beta(x, y),
            lambda x, y: beta(y, x),
            variables=two_variables,
            domain_filter=lambda x, y: _away_from_poles(x, y))

        assert_same_function(
            'xB(x, y+1) = yB(x+1, y)',
            lambda x, y: x * beta(x, y + 1.0),
            lambda x, y: y * beta(x + 1.0, y),
            variables=two_variables,
            domain_filter=lambda x, y: _away_from_poles(x, y, x + y),
            epsilon=1e-11)

        assert_same_function(
            'B(x, y) = B(x, y+1) + B(x+1, y)',
            lambda x, y: beta(x, y),
            lambda x, y: beta(x, y + 1.0) + beta(x + 1.0, y),
            variables=two_variables,
            domain_filter=lambda x, y: _away_from_poles(x, y, x + y),
            epsilon=1e-11)

        assert_same_function(
            'B(1, x) = 1/x',
            lambda x: beta(1.0, x),
            lambda x: np.nan if is_non_positive_integer(x, 0) else 1.0 / x,
            domain_filter=lambda x: is_non_positive_integer(x, 0) or _away_from_poles(x),
            epsilon=1e-11)

        assert_same_function(
            'B(x, 1-x) = π/sin(πx)',
            lambda x: beta(x, 1.0 - x),
            lambda x: np.pi / np.sin(np.pi * x),
            domain_filter=lambda x: not is_integer(x, DELTA),
            epsilon=1e-11)


class test_LogBeta(unittest.TestCase):

    def test_values(self):
        assert_approximately(log_beta(2.0, 3.0), np.log(1.0 / 12.0))
        assert_approximately(log_beta(0.5, 0.5), np.log(np.pi))

    def test_large_arguments(self):
        assert_allclose(log_beta(1e3, 2e3), scipy.special.betaln(1e3, 2e3), rtol=1e-12)

    def test_special_values(self):
        self.assertEqual(log_beta(np.inf, 2.0), -np.inf)
        self.assertEqual(log_beta(1e308, 1e308), -np.inf)
        self.assertTrue(np.isnan(log_beta(-1.0, 2.0)))
        self.assertTrue(np.isnan(log_beta(0.0, 2.0)))
        self.assertTrue(np.isnan(log_beta(np.nan, 2.0)))
