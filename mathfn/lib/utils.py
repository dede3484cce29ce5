import logging
from collections import namedtuple
from functools import wraps
from itertools import islice
import numpy as np

from mathfn.configuration import get_integer_tolerance, get_max_iterations

__author__ = 'Robbert Harms'
__date__ = "2026-10-18"
__license__ = "LGPL v3"
__maintainer__ = "Robbert Harms"
__email__ = "robbert@xkls.nl"


def is_integer(value, tolerance=None):
    """Check if the given value is (numerically close to) an integer.

    Args:
        value (float): the value to check
        tolerance (float): the absolute tolerance on the distance to the nearest integer. If not given we use the
            tolerance from the runtime configuration.

    Returns:
        boolean: true if ``|value - round(value)| <= tolerance``, false otherwise and for NaN and infinities.
    """
    if tolerance is None:
        tolerance = get_integer_tolerance()
    if not np.isfinite(value):
        return False
    return bool(np.abs(value - np.rint(value)) <= tolerance)


def is_non_positive_integer(value, tolerance=None):
    """Check if the given value is (numerically close to) zero or a negative integer.

    These are the poles of the gamma function.

    Args:
        value (float): the value to check
        tolerance (float): the absolute tolerance on the distance to the nearest integer. If not given we use the
            tolerance from the runtime configuration.

    Returns:
        boolean: if the value is an integer smaller than or equal to the tolerance
    """
    if tolerance is None:
        tolerance = get_integer_tolerance()
    return is_integer(value, tolerance) and bool(value <= tolerance)


def ieee_float_arithmetic(func):
    """Decorator evaluating the decorated function with IEEE 754 floating point semantics.

    All arguments are converted to ``np.float64`` such that divisions by zero, overflows and invalid
    operations result in signed infinities and NaNs instead of Python exceptions. The accompanying floating point
    warnings are suppressed. The return value is always a ``np.float64``.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(all='ignore'):
            return np.float64(func(*[np.float64(arg) for arg in args],
                                   **{key: np.float64(value) for key, value in kwargs.items()}))
    return wrapper


class FixedPointResult(namedtuple('FixedPointResult', ['value', 'converged', 'iterations'])):
    """The outcome of a bounded fixed-point iteration.

    Attributes:
        value (float): the last computed value
        converged (boolean): if the iteration reached a fixed point, false if it diverged
        iterations (int): the number of values consumed
    """
    __slots__ = ()


def fixed_point_limit(partial_values, max_iterations=None, relative_tolerance=0):
    """Iterate over successive approximations until they stop changing.

    Args:
        partial_values (iterable): successive approximations of the limit, for example the partial sums of a series.
        max_iterations (int): the maximum number of approximations we consume. If not given we use the
            value from the runtime configuration.
        relative_tolerance (float): two consecutive values are considered equal if they differ by at most this
            tolerance times the magnitude of the last value. The default of zero demands an exact floating
            point fixed point.

    Returns:
        FixedPointResult: the limit with a flag indicating convergence. Encountering a NaN or an infinity, or running
            out of iterations, counts as a divergence.
    """
    if max_iterations is None:
        max_iterations = get_max_iterations()

    previous = np.nan
    iteration = 0
    for iteration, value in enumerate(islice(partial_values, max_iterations), 1):
        if not np.isfinite(value):
            return FixedPointResult(value, False, iteration)
        if value == previous or np.abs(value - previous) <= relative_tolerance * np.abs(value):
            return FixedPointResult(value, True, iteration)
        previous = value
    return FixedPointResult(previous, False, iteration)


def limit_or_nan(result, description):
    """Get the value of a fixed-point iteration, or NaN if it did not converge.

    Args:
        result (FixedPointResult): the result of :func:`fixed_point_limit`
        description (str): a description of the evaluated expression, used in the debug message on divergence

    Returns:
        float: the converged value or NaN
    """
    if result.converged:
        return result.value
    logging.getLogger(__name__).debug('Evaluation of {} did not converge after {} iterations.'.format(
        description, result.iterations))
    return np.nan


def cartesian(arrays, out=None):
    """Generate a cartesian product of input arrays.

    Args:
        arrays (list of array-like): 1-D arrays to form the cartesian product of.
        out (ndarray): Array to place the cartesian product in.

    Returns:
        ndarray: 2-D array of shape (M, len(arrays)) containing cartesian products formed of input arrays.

    Examples:
        >>> cartesian(([1, 2, 3], [4, 5]))
        array([[1, 4],
               [1, 5],
               [2, 4],
               [2, 5],
               [3, 4],
               [3, 5]])
    """
    arrays = [np.asarray(x) for x in arrays]
    dtype = arrays[0].dtype

    nmr_elements = int(np.prod([x.size for x in arrays]))
    if out is None:
        out = np.zeros([nmr_elements, len(arrays)], dtype=dtype)

    m = nmr_elements // arrays[0].size
    out[:, 0] = np.repeat(arrays[0], m)
    if arrays[1:]:
        cartesian(arrays[1:], out=out[0:m, 1:])
        for j in range(1, arrays[0].size):
            out[j * m:(j + 1) * m, 1:] = out[0:m, 1:]
    return out
