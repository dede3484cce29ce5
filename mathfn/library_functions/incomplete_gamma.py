"""The incomplete gamma functions.

The regularized lower incomplete gamma function :math:`P(s, x)` is evaluated with its power series when
:math:`x < s + 1`, the regularized upper incomplete gamma function :math:`Q(s, x)` is evaluated with a continued
fraction when :math:`x \\geq s + 1`. In each regime the other function is obtained from :math:`P + Q = 1`.

Both evaluations are normalized by a given :math:`\\log \\Gamma(s)`, this allows reusing the normalization constant
(for example in the error functions, where :math:`\\log \\Gamma(1/2) = \\log \\sqrt{\\pi}` is known in advance).
"""
from itertools import count
import numpy as np

from mathfn.lib.utils import fixed_point_limit, ieee_float_arithmetic, limit_or_nan
from mathfn.library_functions.gamma import log_gamma

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


@ieee_float_arithmetic
def p_gamma_normalizable(s, x, log_gamma_s):
    r"""Compute the regularized lower incomplete gamma function with a given normalization.

    Computes :math:`\gamma(s, x) / \exp(\log\Gamma_s)` with :math:`\log\Gamma_s` the given normalization.

    Args:
        s (float): the shape parameter
        x (float): the evaluation point
        log_gamma_s (float): the logarithm of the normalization constant, normally :math:`\log \Gamma(s)`

    Returns:
        float: the (regularized) lower incomplete gamma function, NaN if the series did not converge
    """
    infinite_value = _infinite_argument_value(s, x, log_gamma_s)
    if infinite_value is not None:
        return infinite_value

    if x >= 1.0 + s:
        return 1.0 - q_gamma_normalizable(s, x, log_gamma_s)
    if x == 0:
        return 0.0

    result = fixed_point_limit(_lower_series(s, x, log_gamma_s))
    return limit_or_nan(result, 'the series of P({}, {})'.format(s, x))


@ieee_float_arithmetic
def q_gamma_normalizable(s, x, log_gamma_s):
    r"""Compute the regularized upper incomplete gamma function with a given normalization.

    Computes :math:`\Gamma(s, x) / \exp(\log\Gamma_s)` with :math:`\log\Gamma_s` the given normalization.

    Args:
        s (float): the shape parameter
        x (float): the evaluation point
        log_gamma_s (float): the logarithm of the normalization constant, normally :math:`\log \Gamma(s)`

    Returns:
        float: the (regularized) upper incomplete gamma function, NaN if the continued fraction did not converge
    """
    infinite_value = _infinite_argument_value(s, x, log_gamma_s)
    if infinite_value is not None:
        return 1.0 - infinite_value

    if x < 1.0 + s:
        return 1.0 - p_gamma_normalizable(s, x, log_gamma_s)

    result = fixed_point_limit(_upper_continued_fraction(s, x, log_gamma_s))
    return limit_or_nan(result, 'the continued fraction of Q({}, {})'.format(s, x))


def _infinite_argument_value(s, x, log_gamma_s):
    """Get the value of P for NaN and infinite arguments, or None if all arguments are finite."""
    if np.isnan(s) or np.isnan(x) or np.isnan(log_gamma_s):
        return np.nan
    if np.isfinite(s) and np.isfinite(x):
        return None
    if x == np.inf and np.isfinite(s):
        return 1.0
    if s == np.inf and np.isfinite(x):
        return 0.0
    return np.nan


def _leading_weight(s, x, log_gamma_s):
    """Compute ``x^s e^-x / exp(log_gamma_s)``, in the log domain for positive x."""
    if x > 0:
        return np.exp(s * np.log(x) - x - log_gamma_s)
    return x ** s * np.exp(-x - log_gamma_s)


def _lower_series(s, x, log_gamma_s):
    """Generate the partial sums of the power series of P(s, x)."""
    term = _leading_weight(s, x, log_gamma_s) / s
    result = term
    yield result
    for k in count(1):
        term *= x / (s + k)
        result += term
        yield result


def _upper_continued_fraction(s, x, log_gamma_s):
    """Generate the successive approximants of the continued fraction of Q(s, x)."""
    w = _leading_weight(s, x, log_gamma_s)
    la = 1.0
    lb = 1.0 + x - s
    result = w / lb
    yield result
    for k in count(2):
        la, lb = lb, ((k - 1 - s) * (lb - la) + (k + x) * lb) / k
        w *= (k - 1 - s) / k
        result += w / (la * lb)
        yield result


@ieee_float_arithmetic
def igamma(s, x):
    r"""Compute the lower incomplete gamma function.

    .. math::

        \gamma(s, x) = \int_0^x t^{s-1} e^{-t} dt

    Args:
        s (float): the shape parameter
        x (float): the upper integration limit

    Returns:
        float: :math:`\gamma(s, x)`
    """
    log_gamma_s = log_gamma(s)
    return np.exp(log_gamma_s) * p_gamma_normalizable(s, x, log_gamma_s)


@ieee_float_arithmetic
def iGamma(s, x):
    r"""Compute the upper incomplete gamma function.

    .. math::

        \Gamma(s, x) = \int_x^\infty t^{s-1} e^{-t} dt = \Gamma(s) - \gamma(s, x)

    Args:
        s (float): the shape parameter
        x (float): the lower integration limit

    Returns:
        float: :math:`\Gamma(s, x)`
    """
    log_gamma_s = log_gamma(s)
    return np.exp(log_gamma_s) * q_gamma_normalizable(s, x, log_gamma_s)


@ieee_float_arithmetic
def p_gamma(s, x):
    r"""Compute the regularized lower incomplete gamma function, :math:`P(s, x) = \gamma(s, x) / \Gamma(s)`.

    Args:
        s (float): the shape parameter
        x (float): the upper integration limit

    Returns:
        float: :math:`P(s, x)`
    """
    return p_gamma_normalizable(s, x, log_gamma(s))


@ieee_float_arithmetic
def q_gamma(s, x):
    r"""Compute the regularized upper incomplete gamma function, :math:`Q(s, x) = \Gamma(s, x) / \Gamma(s)`.

    Args:
        s (float): the shape parameter
        x (float): the lower integration limit

    Returns:
        float: :math:`Q(s, x)`
    """
    return q_gamma_normalizable(s, x, log_gamma(s))
