"""Contains the runtime configuration of mathfn.

This consists of two parts, functions to get the current runtime settings and configuration actions to update these
settings. To set a new configuration, create a new :py:class:`ConfigAction` and use this within a context environment
using :py:func:`config_context`. Example:

.. code-block:: python

    from mathfn.configuration import RuntimeConfigurationAction, config_context

    with config_context(RuntimeConfigurationAction(pole_policy='signed')):
        ...

"""
from contextlib import contextmanager
import numpy as np

__author__ = 'Robbert Harms'
__date__ = "2026-10-18"
__maintainer__ = "Robbert Harms"
__email__ = "robbert@xkls.nl"
__licence__ = 'LGPL v3'


POLE_POLICY_NAN = 'nan'
POLE_POLICY_SIGNED = 'signed'
POLE_POLICIES = (POLE_POLICY_NAN, POLE_POLICY_SIGNED)


"""The runtime configuration, this can be overwritten at run time.

The library functions only read from this configuration, they never change it. This entire module acts as a singleton
containing the current runtime configuration.
"""
_config = {
    'max_iterations': 1000,
    'pole_policy': POLE_POLICY_NAN,
    'integer_tolerance': float(np.finfo(np.float64).eps)
}


def get_max_iterations():
    """Get the maximum number of iterations of the series and continued fraction evaluations.

    If an evaluation did not converge after this many iterations it is considered to diverge and the function
    returns NaN.

    Returns:
        int: the maximum number of iterations
    """
    return _config['max_iterations']


def set_max_iterations(max_iterations):
    """Set the maximum number of iterations of the series and continued fraction evaluations.

    Please note that this will change the global configuration, i.e. this is a persistent change. If you do not want
    a persistent state change, consider using :func:`~mathfn.configuration.config_context` instead.

    Args:
        max_iterations (int): the new iteration cap, must be at least 1

    Raises:
        ValueError: if the number of iterations is smaller than one
    """
    if max_iterations < 1:
        raise ValueError('The maximum number of iterations should be at least 1, {} given.'.format(max_iterations))
    _config['max_iterations'] = int(max_iterations)


def get_pole_policy():
    """Get the policy of the gamma function at its poles (zero and the negative integers).

    Returns:
        str: either ``'nan'``, the gamma function returns NaN at a pole, or ``'signed'``, the reflection formula
            is evaluated as is, resulting in a signed infinity at zero and in a signed large magnitude value at the
            negative integers.
    """
    return _config['pole_policy']


def set_pole_policy(pole_policy):
    """Set the policy of the gamma function at its poles.

    Args:
        pole_policy (str): one of ``'nan'`` or ``'signed'``

    Raises:
        ValueError: if the given policy is not supported
    """
    if pole_policy not in POLE_POLICIES:
        raise ValueError('The pole policy "{}" is not supported, choose one of {}.'.format(
            pole_policy, ', '.join(POLE_POLICIES)))
    _config['pole_policy'] = pole_policy


def get_integer_tolerance():
    """Get the default tolerance used when checking if a value is an integer.

    Returns:
        float: the absolute tolerance, defaults to the machine epsilon of doubles
    """
    return _config['integer_tolerance']


def set_integer_tolerance(integer_tolerance):
    """Set the default tolerance used when checking if a value is an integer.

    Args:
        integer_tolerance (float): the new, non-negative, absolute tolerance

    Raises:
        ValueError: if the tolerance is negative or NaN
    """
    if not integer_tolerance >= 0:
        raise ValueError('The integer tolerance should be non-negative, {} given.'.format(integer_tolerance))
    _config['integer_tolerance'] = float(integer_tolerance)


@contextmanager
def config_context(config_action):
    """Creates a context in which the config action is applied and unapplies the configuration after execution.

    Args:
        config_action (ConfigAction): the configuration action to use
    """
    try:
        config_action.apply()
        yield
    finally:
        config_action.unapply()


class ConfigAction:

    def __init__(self):
        """Defines a configuration action for use in a configuration context.

        This should define an apply and unapply function that sets and unsets the configuration options.

        The applying action needs to remember the state before the application of the action.
        """

    def apply(self):
        """Apply the current action to the current runtime configuration."""

    def unapply(self):
        """Reset the current configuration to the previous state."""


class SimpleConfigAction(ConfigAction):

    def __init__(self):
        """Defines a default implementation of a configuration action.

        This simple config implements a default ``apply()`` method that saves the current state and a default
        ``unapply()`` that restores the previous state.

        For developers, it is easiest to implement ``_apply()`` such that you do not manually need to store the old
        configuration.
        """
        super().__init__()
        self._old_config = {}

    def apply(self):
        """Apply the current action to the current runtime configuration."""
        self._old_config = {k: v for k, v in _config.items()}
        self._apply()

    def unapply(self):
        """Reset the current configuration to the previous state."""
        for key, value in self._old_config.items():
            _config[key] = value

    def _apply(self):
        """Implement this function add apply() logic after this class saves the current config."""


class RuntimeConfigurationAction(SimpleConfigAction):

    def __init__(self, max_iterations=None, pole_policy=None, integer_tolerance=None):
        """Updates the runtime settings.

        Args:
            max_iterations (int): the iteration cap of the series and continued fraction evaluations
            pole_policy (str): the policy of the gamma function at its poles, ``'nan'`` or ``'signed'``
            integer_tolerance (float): the default tolerance of the integer checks
        """
        super().__init__()
        self._max_iterations = max_iterations
        self._pole_policy = pole_policy
        self._integer_tolerance = integer_tolerance

    def _apply(self):
        if self._max_iterations is not None:
            set_max_iterations(self._max_iterations)

        if self._pole_policy is not None:
            set_pole_policy(self._pole_policy)

        if self._integer_tolerance is not None:
            set_integer_tolerance(self._integer_tolerance)
