from mathfn.lib.utils import ieee_float_arithmetic
from mathfn.library_functions.incomplete_gamma import p_gamma, q_gamma

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


@ieee_float_arithmetic
def p_chi2(x, nmr_degrees_of_freedom):
    """Compute the Cumulative Distribution Function of the chi-square distribution.

    This computes ``P(k/2, x/2)`` with P the regularized lower incomplete gamma function and k the degrees of freedom.

    Args:
        x (float): the position at which to evaluate the CDF
        nmr_degrees_of_freedom (float): the degrees of freedom, k

    Returns:
        float: the probability of a chi-square variable with k degrees of freedom being smaller than x
    """
    return p_gamma(0.5 * nmr_degrees_of_freedom, 0.5 * x)


@ieee_float_arithmetic
def q_chi2(x, nmr_degrees_of_freedom):
    """Compute the complementary CDF of the chi-square distribution, ``Q(k/2, x/2)``.

    Args:
        x (float): the position at which to evaluate
        nmr_degrees_of_freedom (float): the degrees of freedom, k

    Returns:
        float: the probability of a chi-square variable with k degrees of freedom being larger than x
    """
    return q_gamma(0.5 * nmr_degrees_of_freedom, 0.5 * x)
