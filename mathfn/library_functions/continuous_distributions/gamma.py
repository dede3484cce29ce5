import numpy as np

from mathfn.lib.utils import ieee_float_arithmetic
from mathfn.library_functions.incomplete_gamma import p_gamma, q_gamma

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


@ieee_float_arithmetic
def gamma_cdf(x, shape, scale=1.0):
    r"""Calculate the Cumulative Distribution Function of the Gamma distribution.

    This computes: ``lower_incomplete_gamma(k, x/theta) / gamma(k)``

    With k the shape parameter, theta the scale parameter, lower_incomplete_gamma the lower incomplete gamma
    function and gamma the complete gamma function.

    Args:
        x (float): the position at which to evaluate the CDF
        shape (float): the shape parameter, k, should be positive
        scale (float): the scale parameter, theta, should be positive

    Returns:
        float: the CDF, NaN for non-positive shape or scale
    """
    if not (shape > 0 and scale > 0) or np.isnan(x):
        return np.nan
    if x <= 0:
        return 0.0
    return p_gamma(shape, x / scale)


@ieee_float_arithmetic
def gamma_sf(x, shape, scale=1.0):
    """Calculate the survival function (one minus the CDF) of the Gamma distribution.

    Args:
        x (float): the position at which to evaluate
        shape (float): the shape parameter, k, should be positive
        scale (float): the scale parameter, theta, should be positive

    Returns:
        float: the survival function, NaN for non-positive shape or scale
    """
    if not (shape > 0 and scale > 0) or np.isnan(x):
        return np.nan
    if x <= 0:
        return 1.0
    return q_gamma(shape, x / scale)
