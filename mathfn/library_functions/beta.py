import numpy as np

from mathfn.lib.utils import ieee_float_arithmetic, is_non_positive_integer
from mathfn.library_functions.gamma import gamma, log_gamma

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


@ieee_float_arithmetic
def beta(x, y):
    r"""Compute the beta function, :math:`B(x, y) = \Gamma(x)\Gamma(y) / \Gamma(x + y)`.

    If both arguments are positive this is evaluated in the log domain, using :func:`log_gamma`. Otherwise we use the
    direct ratio of :func:`gamma` values, such that the poles are handled by the gamma function.

    At the infinities we return 0 if one of the arguments is positive infinity, or if the sum of two positive
    arguments overflows. We return positive infinity if one (or both) of the arguments is negative infinity. Mixed
    infinities give NaN.

    Args:
        x (float): the first argument
        y (float): the second argument

    Returns:
        float: :math:`B(x, y)`
    """
    if np.isnan(x) or np.isnan(y):
        return np.nan

    if x > 0 and y > 0:
        if np.isinf(x + y):
            return 0.0
        return np.exp(log_gamma(x) + log_gamma(y) - log_gamma(x + y))

    if np.isinf(x) or np.isinf(y):
        if np.isinf(x) and np.isinf(y):
            if x < 0 and y < 0:
                return np.inf
            return np.nan

        infinite_arg = x if np.isinf(x) else y
        if infinite_arg > 0:
            return 0.0
        return np.inf

    if not (is_non_positive_integer(x) or is_non_positive_integer(y)) and is_non_positive_integer(x + y):
        return 0.0
    return gamma(x) * gamma(y) / gamma(x + y)


@ieee_float_arithmetic
def log_beta(x, y):
    r"""Compute the logarithm of the beta function, :math:`\log B(x, y)`, for positive arguments.

    Args:
        x (float): the first argument, should be positive
        y (float): the second argument, should be positive

    Returns:
        float: :math:`\log B(x, y)`, negative infinity if :math:`x + y` is infinite and NaN for NaN or
            non-positive arguments.
    """
    if not (x > 0 and y > 0):
        return np.nan
    if np.isinf(x + y):
        return -np.inf
    return log_gamma(x) + log_gamma(y) - log_gamma(x + y)
