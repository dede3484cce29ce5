import unittest
import numpy as np

from mathfn.testing import assert_approximately, assert_diverging, assert_same_function, Variable, EPS, BIG_VALUE

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class test_Assertions(unittest.TestCase):

    def test_constants(self):
        self.assertEqual(EPS, 1e-12)
        self.assertEqual(BIG_VALUE, 1e13)

    def test_assert_approximately(self):
        assert_approximately(1.0, 1.0 + 1e-13)
        assert_approximately(1e6, 1e6 * (1 + 1e-13))
        self.assertRaises(AssertionError, assert_approximately, 1.0, 1.0 + 1e-11)
        self.assertRaises(AssertionError, assert_approximately, 1e6, 1e6 + 1e-3)
        self.assertRaises(AssertionError, assert_approximately, np.nan, 1.0)

    def test_assert_diverging(self):
        assert_diverging(np.nan)
        assert_diverging(np.inf)
        assert_diverging(-np.inf)
        assert_diverging(-2e13)
        assert_diverging(1e9, big_value=1e8)
        self.assertRaises(AssertionError, assert_diverging, 1e12)


class test_Variable(unittest.TestCase):

    def test_defaults(self):
        variable = Variable()
        self.assertEqual(variable.name, 'x')
        self.assertEqual(variable.minimum, -5)
        self.assertEqual(variable.maximum, 5)

    def test_grid(self):
        self.assertEqual(len(Variable().grid()), 1001)
        self.assertEqual(len(Variable().grid(2)), 41)
        self.assertEqual(len(Variable('s', 0, 1, nmr_grid_points=4).grid()), 5)
        self.assertIn(0.1, Variable().grid())

    def test_integers_only(self):
        grid = Variable('n', 1, 10, integers_only=True).grid()
        self.assertEqual(list(grid), list(range(1, 11)))

        points = Variable('n', 1, 10, integers_only=True).random(np.random.default_rng(0), 100)
        self.assertTrue(np.all(points == np.round(points)))
        self.assertTrue(np.all((points >= 1) & (points <= 10)))


class test_AssertSameFunction(unittest.TestCase):

    def test_identity_holds(self):
        assert_same_function('(x + 1)^2 = x^2 + 2x + 1',
                             lambda x: (x + 1) ** 2,
                             lambda x: x * x + 2 * x + 1)

    def test_identity_fails(self):
        with self.assertRaises(AssertionError) as context:
            assert_same_function('x = x + 1e-6', lambda x: x, lambda x: x + 1e-6)
        self.assertIn('x = x + 1e-6', str(context.exception))

    def test_multiple_variables(self):
        assert_same_function('xy = yx',
                             lambda x, y: x * y,
                             lambda x, y: y * x,
                             variables=[Variable('x'), Variable('y', 0, 1)])

    def test_domain_filter(self):
        assert_same_function('|x| = x for x >= 0',
                             abs,
                             lambda x: x,
                             domain_filter=lambda x: x >= 0)

    def test_nans_and_infinities_match(self):
        assert_same_function('NaN = NaN', lambda x: np.nan, lambda x: np.nan)
        assert_same_function('∞ = -∞', lambda x: np.inf, lambda x: -np.inf)
        assert_same_function('∞ ~ 1e14', lambda x: np.inf, lambda x: 1e14)
        self.assertRaises(AssertionError, assert_same_function, '∞ != 1', lambda x: np.inf, lambda x: 1.0)
        self.assertRaises(AssertionError, assert_same_function, 'NaN != 1', lambda x: np.nan, lambda x: 1.0)
