"""Assertions for checking mathematical identities between two implementations.

An identity ``f(x) = g(x)`` is checked on an even grid over the domain and on uniformly random points. Points at which
the identity is not defined (for example the poles) can be excluded with a domain filter. Example:

.. code-block:: python

    from mathfn import gamma
    from mathfn.testing import assert_same_function

    assert_same_function('Γ(x + 1) = xΓ(x)',
                         lambda x: gamma(x + 1),
                         lambda x: x * gamma(x),
                         domain_filter=lambda x: not (x <= 0 and round(x) == x))
"""
from collections import namedtuple
import numpy as np

from mathfn.lib.utils import cartesian

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


EPS = 1e-12
BIG_VALUE = 1e13


class Variable(namedtuple('Variable', ['name', 'minimum', 'maximum', 'nmr_grid_points', 'integers_only'])):
    """The sampling configuration of one argument of the functions under test.

    Attributes:
        name (str): the name of the variable, used in the failure messages
        minimum (float): the lower end of the sampled domain
        maximum (float): the upper end of the sampled domain
        nmr_grid_points (int): the number of grid intervals over the domain. If None we use 1000 intervals if
            this is the only variable and 40 if there are more.
        integers_only (boolean): if we only sample integers
    """
    __slots__ = ()

    def __new__(cls, name='x', minimum=-5.0, maximum=5.0, nmr_grid_points=None, integers_only=False):
        return super().__new__(cls, name, minimum, maximum, nmr_grid_points, integers_only)

    def grid(self, nmr_variables=1):
        """Get the evenly spaced sample points of this variable.

        Args:
            nmr_variables (int): the total number of variables, used for the default grid size

        Returns:
            ndarray: the grid points, including both end points
        """
        nmr_intervals = self.nmr_grid_points
        if nmr_intervals is None:
            nmr_intervals = 1000 if nmr_variables == 1 else 40

        points = np.round(np.linspace(self.minimum, self.maximum, nmr_intervals + 1), 12)
        if self.integers_only:
            return np.unique(np.round(points))
        return points

    def random(self, rng, nmr_samples):
        """Get uniformly random sample points of this variable.

        Args:
            rng (numpy.random.Generator): the random number generator
            nmr_samples (int): the number of samples

        Returns:
            ndarray: the random points
        """
        points = rng.uniform(self.minimum, self.maximum, nmr_samples)
        if self.integers_only:
            return np.round(points)
        return points


def assert_approximately(actual, expected, epsilon=EPS, message=''):
    """Assert that two values are close.

    For expected values with a magnitude larger than one the error is relative, else it is absolute.

    Args:
        actual (float): the computed value
        expected (float): the expected value
        epsilon (float): the relative (or, near zero, absolute) tolerance
        message (str): the message to show on failure

    Raises:
        AssertionError: if the values are not within the tolerance of each other
    """
    error = abs(expected) * epsilon if abs(expected) > 1 else epsilon
    if not abs(actual - expected) < error:
        raise AssertionError('{}: {} != {} +- {}'.format(message, actual, expected, error))


def assert_diverging(value, big_value=BIG_VALUE, message=''):
    """Assert that a value represents a divergence, that is, it is NaN, infinite or very large.

    Args:
        value (float): the value to check
        big_value (float): the minimum magnitude of a finite value to count as diverging
        message (str): the message to show on failure

    Raises:
        AssertionError: if the value is finite and smaller than the big value
    """
    if not (np.isnan(value) or np.isinf(value) or abs(value) >= big_value):
        raise AssertionError('{}: {} is not diverging (big value: {})'.format(message, value, big_value))


def assert_same_function(message, f, g, variables=None, domain_filter=None, epsilon=EPS,
                         nmr_random_samples=1000, seed=0):
    """Assert that two functions agree over a sampled domain.

    The functions are evaluated on the cartesian product of the variable grids and on uniformly random points. Where
    both functions return NaN, or both return an infinity, the points match. If only one of them is infinite, the
    other should have a magnitude of at least :data:`BIG_VALUE`.

    Args:
        message (str): the description of the identity, used in the failure message
        f (callable): the first implementation, called with one positional argument per variable
        g (callable): the second implementation
        variables (list of Variable): the sampling configuration per argument, defaults to a single
            variable ``x`` in [-5, 5]
        domain_filter (callable): optional predicate with the same arguments as the functions, only points for which
            this returns True are checked
        epsilon (float): the tolerance, see :func:`assert_approximately`
        nmr_random_samples (int): the number of random points
        seed (int): the seed of the random number generator

    Raises:
        AssertionError: at the first point where the functions disagree
    """
    variables = variables or [Variable()]
    rng = np.random.default_rng(seed)

    grid = cartesian([v.grid(len(variables)) for v in variables])
    random_points = np.column_stack([v.random(rng, nmr_random_samples) for v in variables])

    for point in np.concatenate([grid, random_points]):
        args = [float(p) for p in point]
        if domain_filter is not None and not domain_filter(*args):
            continue
        _assert_same_at(message, f, g, args, variables, epsilon)


def _assert_same_at(message, f, g, args, variables, epsilon):
    yf = f(*args)
    yg = g(*args)

    if np.isnan(yf) and np.isnan(yg):
        return
    if np.isinf(yf) and np.isinf(yg):
        return

    location = ', '.join('{} = {}'.format(v.name, arg) for v, arg in zip(variables, args))
    if np.isinf(yf) or np.isinf(yg):
        if not (abs(yf) > BIG_VALUE and abs(yg) > BIG_VALUE):
            raise AssertionError('{} at {}: {} != {}'.format(message, location, yf, yg))
    else:
        assert_approximately(yf, yg, epsilon, '{} at {}'.format(message, location))
