import numpy as np

from mathfn.lib.utils import ieee_float_arithmetic
from mathfn.library_functions.error_functions import LOG_SQRT_PI
from mathfn.library_functions.incomplete_gamma import p_gamma_normalizable, q_gamma_normalizable

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


@ieee_float_arithmetic
def p_normal(x):
    r"""Compute the Cumulative Distribution Function of the standard normal distribution.

    This computes:

    .. math::

        \Phi(x) = \frac{1}{2}\left(1 + \mathrm{sgn}(x) P\left(\frac{1}{2}, \frac{x^2}{2}\right)\right)

    For negative arguments the upper incomplete gamma function is used directly, for accuracy in the lower tail.

    Args:
        x (float): the position at which to evaluate the CDF

    Returns:
        float: :math:`\Phi(x)`
    """
    if np.isnan(x):
        return np.nan
    if x >= 0:
        return 0.5 * (1.0 + p_gamma_normalizable(0.5, 0.5 * x * x, LOG_SQRT_PI))
    return 0.5 * q_gamma_normalizable(0.5, 0.5 * x * x, LOG_SQRT_PI)


@ieee_float_arithmetic
def q_normal(x):
    r"""Compute the complementary CDF (the survival function) of the standard normal distribution.

    Args:
        x (float): the position at which to evaluate

    Returns:
        float: :math:`1 - \Phi(x)`
    """
    if np.isnan(x):
        return np.nan
    if x >= 0:
        return 0.5 * q_gamma_normalizable(0.5, 0.5 * x * x, LOG_SQRT_PI)
    return 0.5 * (1.0 + p_gamma_normalizable(0.5, 0.5 * x * x, LOG_SQRT_PI))
