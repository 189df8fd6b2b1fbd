# -*- mode: python; coding: utf-8 -*-
# Copyright 2015-2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT license.

"""Scalar uncertainty wrappers, and a couple of propagation policies built on
them.

:class:`Unc` is a thin wrapper around a single number. It knows about zero
tests and serializes as the bare number, but it has no arithmetic rules; the
subclasses :class:`Quadrature` and :class:`Linear` add those. Because each
class is its own type, they can sit side by side in a tuple payload::

  a = ValUnc (10.2, (Quadrature (4.), Linear (1.25)))
  b = ValUnc (8.5, (Quadrature (3.), Linear (1.25)))
  a + b  # -> ValUnc(18.7, (Quadrature(5.0), Linear(2.5)))

"""

__all__ = '''
Unc
Quadrature
Linear
'''.split ()

import numbers
import numpy as np


class Unc (object):
    """A single scalar uncertainty.

    """
    __slots__ = ('value', )

    def __init__ (self, value=0.):
        self.value = value

    # Zero tests

    @classmethod
    def zero (cls):
        return cls (0.)

    def is_zero (self):
        return bool (self.value == 0)

    def set_zero (self):
        self.value = self.value.__class__ (0)

    # Serialization: the wrapper is transparent.

    def to_data (self):
        if isinstance (self.value, np.generic):
            return self.value.item ()
        return self.value

    @classmethod
    def from_data (cls, data):
        if isinstance (data, bool) or not isinstance (data, numbers.Real):
            raise TypeError ('expected a real number for %s, got %r' % (cls.__name__, data))
        return cls (float (data))

    # Structural comparisons, only between instances of the same class.

    def _compatible (self, other):
        return other.__class__ is self.__class__

    def __eq__ (self, other):
        if not self._compatible (other):
            return NotImplemented
        return self.value == other.value

    def __lt__ (self, other):
        if not self._compatible (other):
            return NotImplemented
        return self.value < other.value

    def __le__ (self, other):
        if not self._compatible (other):
            return NotImplemented
        return self.value <= other.value

    def __gt__ (self, other):
        if not self._compatible (other):
            return NotImplemented
        return self.value > other.value

    def __ge__ (self, other):
        if not self._compatible (other):
            return NotImplemented
        return self.value >= other.value

    def __hash__ (self):
        return hash ((self.__class__.__name__, self.value))

    def __float__ (self):
        return float (self.value)

    def __str__ (self):
        return str (self.value)

    def __repr__ (self):
        return '%s(%r)' % (self.__class__.__name__, self.value)


class Quadrature (Unc):
    """Standard first-order propagation of independent Gaussian errors: absolute
    uncertainties add in quadrature for sums and differences, relative ones for
    products and quotients.

    Scalar values enter through Numpy so that zero divisors give infinities
    rather than exceptions.

    """
    __slots__ = ()

    def unc_add (self, self_val, other, other_val):
        return self.__class__ (float (np.hypot (self.value, other.value)))

    unc_sub = unc_add

    def unc_mul (self, self_val, other, other_val):
        return self.__class__ (float (np.hypot (self.value * other_val, other.value * self_val)))

    def unc_div (self, self_val, other, other_val):
        return self.__class__ (float (np.hypot (np.divide (self.value, other_val),
                                                np.divide (other.value * self_val, np.square (other_val)))))

    def unc_neg (self, self_val):
        return self.__class__ (self.value)


class Linear (Unc):
    """Worst-case linear propagation: absolute uncertainties simply add for sums
    and differences. This suits systematic offsets that may all push in the
    same direction.

    """
    __slots__ = ()

    def unc_add (self, self_val, other, other_val):
        return self.__class__ (self.value + other.value)

    unc_sub = unc_add

    def unc_mul (self, self_val, other, other_val):
        return self.__class__ (self.value * abs (other_val) + other.value * abs (self_val))

    def unc_div (self, self_val, other, other_val):
        return self.__class__ (float (np.divide (self.value, np.abs (other_val))
                                      + np.divide (other.value * abs (self_val), np.square (other_val))))

    def unc_neg (self, self_val):
        return self.__class__ (self.value)
