"""The incomplete beta functions.

The regularized incomplete beta function :math:`I_x(a, b)` is evaluated with the continued fraction of the incomplete
beta function, using the modified Lentz algorithm. The continued fraction converges rapidly for
:math:`x < (a + 1) / (a + b + 2)`, for larger :math:`x` we use the symmetry :math:`I_x(a, b) = 1 - I_{1-x}(b, a)`.
"""
from itertools import count
import numpy as np

from mathfn.lib.utils import fixed_point_limit, ieee_float_arithmetic, limit_or_nan
from mathfn.library_functions.beta import beta, log_beta

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


# replaces zero denominators in the Lentz algorithm
_TINY = 1e-300


@ieee_float_arithmetic
def p_beta(x, a, b):
    r"""Compute the regularized incomplete beta function.

    .. math::

        I_x(a, b) = \frac{1}{B(a, b)} \int_0^x t^{a-1} (1 - t)^{b-1} dt

    This is the Cumulative Distribution Function of the Beta distribution. The shape parameters should be positive
    and finite, else this returns NaN. Outside of [0, 1] we return 0 or 1.

    Args:
        x (float): the upper integration limit
        a (float): the first shape parameter
        b (float): the second shape parameter

    Returns:
        float: :math:`I_x(a, b)`, NaN if the continued fraction did not converge
    """
    if np.isnan(x) or np.isnan(a) or np.isnan(b):
        return np.nan
    if not (0 < a < np.inf and 0 < b < np.inf):
        return np.nan
    if x <= 0:
        return 0.0
    if x >= 1:
        return 1.0

    prefactor = np.exp(a * np.log(x) + b * np.log1p(-x) - log_beta(a, b))

    if x < (a + 1) / (a + b + 2):
        return prefactor * _continued_fraction(x, a, b) / a
    return 1.0 - prefactor * _continued_fraction(1.0 - x, b, a) / b


@ieee_float_arithmetic
def q_beta(x, a, b):
    r"""Compute the complement of the regularized incomplete beta function, :math:`1 - I_x(a, b)`.

    Args:
        x (float): the lower integration limit
        a (float): the first shape parameter
        b (float): the second shape parameter

    Returns:
        float: :math:`1 - I_x(a, b)`
    """
    return 1.0 - p_beta(x, a, b)


@ieee_float_arithmetic
def ibeta(x, a, b):
    r"""Compute the (lower) incomplete beta function, :math:`B(x; a, b) = B(a, b) I_x(a, b)`.

    Args:
        x (float): the upper integration limit
        a (float): the first shape parameter
        b (float): the second shape parameter

    Returns:
        float: :math:`B(x; a, b)`
    """
    return beta(a, b) * p_beta(x, a, b)


@ieee_float_arithmetic
def iBeta(x, a, b):
    r"""Compute the upper incomplete beta function, :math:`B(a, b) - B(x; a, b)`.

    Args:
        x (float): the lower integration limit
        a (float): the first shape parameter
        b (float): the second shape parameter

    Returns:
        float: :math:`B(a, b) (1 - I_x(a, b))`
    """
    return beta(a, b) * q_beta(x, a, b)


def _continued_fraction(x, a, b):
    """Evaluate the continued fraction of the incomplete beta function, NaN if it did not converge."""
    result = fixed_point_limit(_lentz_approximants(x, a, b), relative_tolerance=np.finfo(np.float64).eps)
    return limit_or_nan(result, 'the continued fraction of I_{}({}, {})'.format(x, a, b))


def _lentz_approximants(x, a, b):
    """Generate the successive approximants of the incomplete beta continued fraction.

    Every approximant combines an even and an odd step of the modified Lentz algorithm.
    """
    c = 1.0
    d = _lentz_reciprocal(1.0 - (a + b) * x / (a + 1.0))
    h = d
    yield h
    for m in count(1):
        numerator = m * (b - m) * x / ((a - 1.0 + 2 * m) * (a + 2 * m))
        d = _lentz_reciprocal(1.0 + numerator * d)
        c = _lentz_floor(1.0 + numerator / c)
        h *= d * c

        numerator = -(a + m) * (a + b + m) * x / ((a + 2 * m) * (a + 1.0 + 2 * m))
        d = _lentz_reciprocal(1.0 + numerator * d)
        c = _lentz_floor(1.0 + numerator / c)
        h *= d * c
        yield h


def _lentz_floor(value):
    if np.abs(value) < _TINY:
        return _TINY
    return value


def _lentz_reciprocal(value):
    return 1.0 / _lentz_floor(value)
