import numpy as np

from mathfn.lib.utils import ieee_float_arithmetic
from mathfn.library_functions.continuous_distributions.normal import p_normal, q_normal
from mathfn.library_functions.incomplete_beta import p_beta

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


@ieee_float_arithmetic
def p_student_t(t, nu):
    r"""Compute the Cumulative Distribution Function of the Student-t distribution.

    The probability mass beyond :math:`|t|` on one side is given by the regularized incomplete beta function:

    .. math::

        \frac{1}{2} I_{\nu / (\nu + t^2)}\left(\frac{\nu}{2}, \frac{1}{2}\right)

    For infinite degrees of freedom this is the standard normal CDF.

    Args:
        t (float): the position at which to evaluate the CDF
        nu (float): the degrees of freedom, should be positive

    Returns:
        float: the CDF
    """
    if nu == np.inf:
        return p_normal(t)
    tail = _tail_probability(t, nu)
    if t > 0:
        return 1.0 - tail
    return tail


@ieee_float_arithmetic
def q_student_t(t, nu):
    """Compute the complementary CDF (the survival function) of the Student-t distribution.

    Args:
        t (float): the position at which to evaluate
        nu (float): the degrees of freedom, should be positive

    Returns:
        float: one minus the CDF
    """
    if nu == np.inf:
        return q_normal(t)
    tail = _tail_probability(t, nu)
    if t > 0:
        return tail
    return 1.0 - tail


def _tail_probability(t, nu):
    """The probability mass of a Student-t distribution beyond ``|t|`` on one side."""
    return 0.5 * p_beta(nu / (nu + t * t), 0.5 * nu, 0.5)
