# -*- mode: python; coding: utf-8 -*-
# Copyright 2015-2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT license.

"""The "zero uncertainty" capability.

An uncertainty type that can construct, detect, and reset a state of no
uncertainty at all lets a :class:`~valunc.core.ValUnc` collapse to a bare
value when serialized. Arithmetic never consults it.

Support is built in for Python and Numpy numbers (but not booleans), for
Numpy arrays (zero if every element is zero), and for tuples of supported
things (zero if every component is zero; the empty tuple is always zero).
Other classes opt in by providing the methods of :class:`UncZero`.

Since there are no tuple *types* to hand around at runtime, functions that
need to construct a value from scratch take a "type spec": either a class,
or a tuple of type specs, e.g. ``(float, (Quadrature, Linear))``.

"""

__all__ = '''
UncZero
zero
zero_like
is_zero
is_zero_testable
set_zero
'''.split ()

import abc, numbers
import numpy as np

from .uncops import UncCapabilityError, check_methods, rebuild_tuple


class UncZero (metaclass=abc.ABCMeta):
    """Uncertainty types that know what "no uncertainty" means.

    """
    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def zero (cls):
        """Construct a new instance representing zero uncertainty."""
        raise NotImplementedError ()

    @abc.abstractmethod
    def is_zero (self):
        raise NotImplementedError ()

    @abc.abstractmethod
    def set_zero (self):
        """Reset this instance to zero uncertainty in place. This may be cheaper
        than constructing a new zero.

        """
        raise NotImplementedError ()

    @classmethod
    def __subclasshook__ (cls, C):
        if cls is UncZero:
            return check_methods (C, 'zero', 'is_zero', 'set_zero')
        return NotImplemented


def _is_number (x):
    return isinstance (x, numbers.Number) and not isinstance (x, (bool, np.bool_))


def _is_number_type (t):
    return issubclass (t, numbers.Number) and not issubclass (t, (bool, np.bool_))


def _unsupported (x):
    return UncCapabilityError ('uncertainty of type %s does not support zero tests',
                               x.__class__.__name__)


def zero (spec):
    """Construct the zero uncertainty for the type spec *spec*.

    """
    if isinstance (spec, tuple):
        return tuple (zero (s) for s in spec)

    if not isinstance (spec, type):
        raise UncCapabilityError ('uncertainty type specs must be classes or tuples '
                                  'of them; got %r', spec)

    if _is_number_type (spec):
        return spec (0)
    if issubclass (spec, UncZero):
        return spec.zero ()

    raise UncCapabilityError ('uncertainty type %s does not support zero tests',
                              spec.__name__)


def zero_like (x):
    """Construct a zero uncertainty with the same type (and, for tuples and
    arrays, the same shape) as *x*.

    """
    if isinstance (x, tuple):
        return rebuild_tuple (x, [zero_like (item) for item in x])
    if _is_number (x):
        return x.__class__ (0)
    if isinstance (x, np.ndarray):
        return np.zeros_like (x)
    if isinstance (x, UncZero):
        return x.__class__.zero ()
    raise _unsupported (x)


def is_zero (x):
    if isinstance (x, tuple):
        # No short-circuiting: every component must be zero-testable.
        return all ([is_zero (item) for item in x])
    if _is_number (x):
        return bool (x == 0)
    if isinstance (x, np.ndarray):
        return not bool (np.any (x))
    if isinstance (x, UncZero):
        return bool (x.is_zero ())
    raise _unsupported (x)


def is_zero_testable (x):
    try:
        is_zero (x)
    except UncCapabilityError:
        return False
    return True


def set_zero (x):
    """Reset *x* to zero uncertainty and return the result.

    Mutable uncertainties (:class:`UncZero` implementers and Numpy arrays) are
    reset in place and returned. Numbers are immutable, so for them a zero of
    the same type is returned instead. A tuple is rebuilt from its reset
    components. In all cases, calling this again on the result is a no-op.

    """
    if isinstance (x, tuple):
        return rebuild_tuple (x, [set_zero (item) for item in x])
    if _is_number (x):
        return x.__class__ (0)
    if isinstance (x, np.ndarray):
        x.fill (0)
        return x
    if isinstance (x, UncZero):
        x.set_zero ()
        return x
    raise _unsupported (x)
