import numpy as np

from mathfn.lib.utils import ieee_float_arithmetic
from mathfn.library_functions.incomplete_gamma import p_gamma_normalizable, q_gamma_normalizable

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


# log(sqrt(pi)), equal to log(gamma(1/2))
LOG_SQRT_PI = 0.5723649429247001


@ieee_float_arithmetic
def erf(x):
    r"""Calculate the (Gauss) error function.

    This uses the identity :math:`\mathrm{erf}(x) = \mathrm{sgn}(x) P(1/2, x^2)` with :math:`P` the regularized
    lower incomplete gamma function.

    Args:
        x (float): the argument

    Returns:
        float: :math:`\mathrm{erf}(x)`
    """
    if np.isnan(x):
        return np.nan
    if x >= 0:
        return p_gamma_normalizable(0.5, x * x, LOG_SQRT_PI)
    return -p_gamma_normalizable(0.5, x * x, LOG_SQRT_PI)


@ieee_float_arithmetic
def erfc(x):
    r"""Calculate the complementary error function, :math:`\mathrm{erfc}(x) = 1 - \mathrm{erf}(x)`.

    For positive arguments this evaluates the upper incomplete gamma function directly, avoiding the cancellation
    of :math:`1 - \mathrm{erf}(x)` in the tail.

    Args:
        x (float): the argument

    Returns:
        float: :math:`\mathrm{erfc}(x)`
    """
    if np.isnan(x):
        return np.nan
    if x >= 0:
        return q_gamma_normalizable(0.5, x * x, LOG_SQRT_PI)
    return 1.0 + p_gamma_normalizable(0.5, x * x, LOG_SQRT_PI)
