import numpy as np

from mathfn.configuration import get_pole_policy, POLE_POLICY_NAN
from mathfn.lib.utils import ieee_float_arithmetic, is_non_positive_integer

__author__ = 'Robbert Harms'
__date__ = '2026-10-18'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


LOG_2PI = 1.8378770664093453

# the argument is shifted upwards until it is at least this large before we apply the asymptotic series
_SHIFT_THRESHOLD = 8.0

_B2 = 1.0 / 6.0
_B4 = -1.0 / 30.0
_B6 = 1.0 / 42.0
_B8 = -1.0 / 30.0
_B10 = 5.0 / 66.0
_B12 = -691.0 / 2730.0
_B14 = 7.0 / 6.0
_B16 = -3617.0 / 510.0


@ieee_float_arithmetic
def log_gamma(x):
    r"""Compute the logarithm of the gamma function, :math:`\log \Gamma(x)`.

    The argument is first shifted upwards by whole increments until it exceeds 8, after which the Stirling series with
    the Bernoulli numbers :math:`B_2` up to :math:`B_{16}` is evaluated. The shift is undone by subtracting the
    logarithm of the product of the shifted values.

    This is only defined for positive arguments. At zero and the negative integers (the poles of the gamma function)
    this returns positive infinity, for other negative arguments this returns NaN.

    Args:
        x (float): the argument

    Returns:
        float: :math:`\log \Gamma(x)`
    """
    if np.isnan(x) or x == -np.inf:
        return np.nan
    if x == np.inf:
        return np.inf
    if x <= 0:
        if is_non_positive_integer(x):
            return np.inf
        return np.nan

    v = 1.0
    while x < _SHIFT_THRESHOLD:
        v *= x
        x += 1.0

    w = 1.0 / (x * x)
    return ((((((((_B16 / (16.0 * 15.0)) * w + (_B14 / (14.0 * 13.0))) * w
                 + (_B12 / (12.0 * 11.0))) * w + (_B10 / (10.0 * 9.0))) * w
               + (_B8 / (8.0 * 7.0))) * w + (_B6 / (6.0 * 5.0))) * w
             + (_B4 / (4.0 * 3.0))) * w + (_B2 / (2.0 * 1.0))) / x \
        + 0.5 * LOG_2PI - np.log(v) - x + (x - 0.5) * np.log(x)


@ieee_float_arithmetic
def gamma(x):
    r"""Compute the gamma function, :math:`\Gamma(x)`.

    For positive arguments this exponentiates :func:`log_gamma`. For the other arguments we use the reflection formula:

    .. math::

        \Gamma(x) = \frac{\pi}{\sin(\pi x) \Gamma(1 - x)}

    At the poles, zero and the negative integers, the result depends on the configured pole policy (see
    :func:`mathfn.configuration.get_pole_policy`). By default we return NaN, with the ``'signed'`` policy the reflection
    formula is evaluated regardless, giving a signed infinity at zero and a large magnitude at the negative integers.

    Args:
        x (float): the argument

    Returns:
        float: :math:`\Gamma(x)`
    """
    if np.isnan(x) or x == -np.inf:
        return np.nan
    if x == np.inf:
        return np.inf
    if x > 0:
        return np.exp(log_gamma(x))
    if is_non_positive_integer(x) and get_pole_policy() == POLE_POLICY_NAN:
        return np.nan
    return np.pi / (np.sin(np.pi * x) * np.exp(log_gamma(1.0 - x)))
