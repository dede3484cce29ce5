import unittest
import numpy as np
import scipy.special
from numpy.testing import assert_allclose

from mathfn.library_functions import erf, erfc, igamma, iGamma
from mathfn.library_functions.error_functions import LOG_SQRT_PI
from mathfn.testing import assert_same_function, Variable

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class test_ErrorFunctions(unittest.TestCase):

    def test_constant(self):
        self.assertAlmostEqual(LOG_SQRT_PI, 0.5 * np.log(np.pi), places=15)

    def test_erf(self):
        x = np.linspace(-5, 5, num=1001)

        python_results = scipy.special.erf(x)
        mathfn_results = np.array([erf(v) for v in x])

        assert_allclose(mathfn_results, python_results, atol=1e-14, rtol=1e-12)

    def test_erfc(self):
        x = np.linspace(-5, 10, num=1001)

        python_results = scipy.special.erfc(x)
        mathfn_results = np.array([erfc(v) for v in x])

        assert_allclose(mathfn_results, python_results, atol=1e-300, rtol=1e-10)

    def test_special_values(self):
        self.assertEqual(erf(0.0), 0)
        self.assertEqual(erf(np.inf), 1)
        self.assertEqual(erf(-np.inf), -1)
        self.assertEqual(erfc(np.inf), 0)
        self.assertEqual(erfc(-np.inf), 2)
        self.assertTrue(np.isnan(erf(np.nan)))
        self.assertTrue(np.isnan(erfc(np.nan)))

    def test_error_function_properties(self):
        sqrt_pi_inv = 1 / np.sqrt(np.pi)

        assert_same_function(
            'erfc(x) = 1 - erf(x)',
            erfc,
            lambda x: 1 - erf(x),
            variables=[Variable('x', -3, 3)])

        assert_same_function(
            'erf(x) = sgn(x)γ(1/2, x^2)/√π',
            erf,
            lambda x: np.sign(x) * igamma(0.5, x * x) * sqrt_pi_inv)

        assert_same_function(
            'erfc(x) = Γ(1/2, x^2)/√π',
            erfc,
            lambda x: iGamma(0.5, x * x) * sqrt_pi_inv,
            domain_filter=lambda x: x >= 0)
