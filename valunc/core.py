# -*- mode: python; coding: utf-8 -*-
# Copyright 2015-2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT license.

"""Values paired with uncertainty payloads.

"""

__all__ = '''
random_source
default_of
ValUnc
'''.split ()

import numbers, operator
from functools import partialmethod
import numpy as np

from . import uncops, unczero
from .uncops import UncCapabilityError


random_source = np.random
"""Where :meth:`ValUnc.rand` draws its samples if not told otherwise. Anything
with a Numpy-style ``normal (loc, scale)`` method will do, e.g. a
:class:`numpy.random.Generator`.

"""


def default_of (spec):
    """Default-construct a value for the type spec *spec*: a class, or a tuple
    of type specs. Zero-testable types give their zero; other classes must be
    callable with no arguments.

    """
    if isinstance (spec, tuple):
        return tuple (default_of (s) for s in spec)

    if not isinstance (spec, type):
        raise UncCapabilityError ('type specs must be classes or tuples of them; got %r', spec)

    try:
        return unczero.zero (spec)
    except UncCapabilityError:
        pass

    try:
        return spec ()
    except TypeError as e:
        raise UncCapabilityError ('type %s cannot be default-constructed: %s',
                                  spec.__name__, e) from e


def _parse_field (spec, text):
    if not isinstance (spec, type):
        raise ValueError ('can only parse scalar fields, not %r' % (spec, ))
    if issubclass (spec, numbers.Number):
        return spec (text)
    return spec (float (text))


_scalar_ops = {
    'add': operator.add,
    'sub': operator.sub,
    'mul': operator.mul,
    'div': operator.truediv,
    'neg': operator.neg,
}


class ValUnc (object):
    """A value with uncertainties.

    `val` is the central value; `unc` is the uncertainty payload, which may be
    a scalar, an instance of some uncertainty class, or a tuple of them for
    several independent kinds of uncertainty. Arithmetic operators are
    available when the payload supports them (see :mod:`valunc.uncops`);
    otherwise the first use raises :exc:`~valunc.uncops.UncCapabilityError`.

    Instances are never modified by this library: operators always return new
    ones. Equality, ordering, and hashing compare ``(val, unc)``.

    The scalar operators are applied to `val` as they are, so dividing Python
    floats by zero raises :exc:`ZeroDivisionError`. Use numpy scalars such as
    :class:`numpy.float64` for values that should follow IEEE-754 and give
    infinities or NaNs instead.

    """
    __slots__ = ('val', 'unc')

    def __init__ (self, val, unc):
        self.val = val
        self.unc = unc

    @classmethod
    def from_scalar (cls, val, unc_type=float):
        """Construct with the default (zero) uncertainty of *unc_type*, a class
        or a tuple of classes.

        """
        return cls (val, default_of (unc_type))

    @classmethod
    def from_pair (cls, pair):
        val, unc = pair
        return cls (val, unc)

    @classmethod
    def default (cls, val_type=float, unc_type=float):
        return cls (default_of (val_type), default_of (unc_type))

    def astuple (self):
        return (self.val, self.unc)


    # Arithmetic. The uncertainty rule goes first so that it always gets to
    # see the operands, even if the scalar operation then raises (e.g.
    # ZeroDivisionError for Python floats).

    def __dispatch_binary (self, op, other):
        if not isinstance (other, ValUnc):
            return NotImplemented

        unc = uncops.dispatch_binary (op, self.unc, self.val, other.unc, other.val)
        val = _scalar_ops[op] (self.val, other.val)
        return self.__class__ (val, unc)

    __add__ = partialmethod (__dispatch_binary, 'add')
    __sub__ = partialmethod (__dispatch_binary, 'sub')
    __mul__ = partialmethod (__dispatch_binary, 'mul')
    __truediv__ = partialmethod (__dispatch_binary, 'div')

    def __neg__ (self):
        unc = uncops.dispatch_unary ('neg', self.unc, self.val)
        return self.__class__ (_scalar_ops['neg'] (self.val), unc)


    # Comparisons

    def __eq__ (self, other):
        if not isinstance (other, ValUnc):
            return NotImplemented
        return self.astuple () == other.astuple ()

    def __lt__ (self, other):
        if not isinstance (other, ValUnc):
            return NotImplemented
        return self.astuple () < other.astuple ()

    def __le__ (self, other):
        if not isinstance (other, ValUnc):
            return NotImplemented
        return self.astuple () <= other.astuple ()

    def __gt__ (self, other):
        if not isinstance (other, ValUnc):
            return NotImplemented
        return self.astuple () > other.astuple ()

    def __ge__ (self, other):
        if not isinstance (other, ValUnc):
            return NotImplemented
        return self.astuple () >= other.astuple ()

    def __hash__ (self):
        return hash (self.astuple ())


    def rand (self, rng=None):
        """Draw a new value from a normal distribution centered on this one, with
        the absolute value of the uncertainty as its standard deviation. The
        uncertainty is carried over unchanged. Only works for scalar
        uncertainties.

        If the uncertainty is exactly zero, no sample is drawn and *self* is
        returned.

        """
        # float () also parses strings, which are not uncertainties.
        if getattr (type (self.unc), '__float__', None) is None:
            raise UncCapabilityError ('can only sample values with scalar uncertainties, '
                                      'not %s', self.unc.__class__.__name__)

        try:
            scale = float (self.unc)
        except TypeError:
            raise UncCapabilityError ('can only sample values with scalar uncertainties, '
                                      'not %s', self.unc.__class__.__name__)

        if scale == 0:
            return self

        if rng is None:
            rng = random_source
        return self.__class__ (rng.normal (self.val, abs (scale)), self.unc)


    # Stringification

    def __str__ (self):
        if unczero.is_zero_testable (self.unc) and unczero.is_zero (self.unc):
            return str (self.val)
        return '%spm%s' % (self.val, self.unc)

    def __repr__ (self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.val, self.unc)


    @classmethod
    def parse (cls, text, val_type=float, unc_type=float):
        """This only handles scalar fields. Accepted formats are:

        "{val}"
        "{val}pm{unc}"

        A missing uncertainty takes the default value of *unc_type*.

        """
        pieces = text.strip ().split ('pm', 1)
        val = _parse_field (val_type, pieces[0])

        if len (pieces) == 1:
            unc = default_of (unc_type)
        else:
            unc = _parse_field (unc_type, pieces[1])

        return cls (val, unc)
