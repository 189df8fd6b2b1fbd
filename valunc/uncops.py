# -*- mode: python; coding: utf-8 -*-
# Copyright 2015-2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT license.

"""Uncertainty propagation capabilities.

There is one capability per arithmetic operator. An uncertainty type opts
into an operator by providing the matching method; each method receives the
scalar values of the operands as context, whether or not the rule needs
them:

========  ===========================================
Operator  Method
========  ===========================================
``+``     ``unc_add (self, self_val, other, other_val)``
``-``     ``unc_sub (self, self_val, other, other_val)``
``*``     ``unc_mul (self, self_val, other, other_val)``
``/``     ``unc_div (self, self_val, other, other_val)``
unary -   ``unc_neg (self, self_val)``
========  ===========================================

Each method returns a new uncertainty of the same type. Subclassing the ABCs
below is optional; they check for the methods structurally, like the ABCs in
:mod:`collections.abc`.

Tuples get every capability for free as long as their elements have it: the
rule is applied at each index independently and the results are reassembled
in order. Components are never mixed, since they are assumed to be
statistically independent, and each position may only be combined with the
same kind of uncertainty. The empty tuple supports everything and always
combines to itself.

"""

__all__ = '''
binary_ops
unary_ops
UncCapabilityError
UncAdd
UncSub
UncMul
UncDiv
UncNeg
capability_for
supports
dispatch_binary
dispatch_unary
'''.split ()

import abc
from functools import partial

from . import ValUncError


binary_ops = 'add sub mul div'.split ()
unary_ops = ['neg']

all_ops = binary_ops + unary_ops


class UncCapabilityError (ValUncError, TypeError):
    """Raised when an uncertainty payload lacks a capability that an operation
    needs, or when two payloads cannot be combined because their shapes or
    kinds disagree.

    """


def check_methods (C, *methods):
    mro = C.__mro__
    for method in methods:
        for B in mro:
            if method in B.__dict__:
                if B.__dict__[method] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class _UncCapability (metaclass=abc.ABCMeta):
    __slots__ = ()

    @classmethod
    def __subclasshook__ (cls, C):
        # Only the capability ABCs themselves do structural checks; user
        # subclasses go through the normal machinery.
        method = cls.__dict__.get ('_method')
        if method is None:
            return NotImplemented
        return check_methods (C, method)


class UncAdd (_UncCapability):
    __slots__ = ()
    _method = 'unc_add'

    @abc.abstractmethod
    def unc_add (self, self_val, other, other_val):
        """Return the uncertainty of ``self_val + other_val``."""
        raise NotImplementedError ()


class UncSub (_UncCapability):
    __slots__ = ()
    _method = 'unc_sub'

    @abc.abstractmethod
    def unc_sub (self, self_val, other, other_val):
        """Return the uncertainty of ``self_val - other_val``."""
        raise NotImplementedError ()


class UncMul (_UncCapability):
    __slots__ = ()
    _method = 'unc_mul'

    @abc.abstractmethod
    def unc_mul (self, self_val, other, other_val):
        """Return the uncertainty of ``self_val * other_val``."""
        raise NotImplementedError ()


class UncDiv (_UncCapability):
    __slots__ = ()
    _method = 'unc_div'

    @abc.abstractmethod
    def unc_div (self, self_val, other, other_val):
        """Return the uncertainty of ``self_val / other_val``."""
        raise NotImplementedError ()


class UncNeg (_UncCapability):
    __slots__ = ()
    _method = 'unc_neg'

    @abc.abstractmethod
    def unc_neg (self, self_val):
        """Return the uncertainty of ``-self_val``."""
        raise NotImplementedError ()


_capabilities = {
    'add': UncAdd,
    'sub': UncSub,
    'mul': UncMul,
    'div': UncDiv,
    'neg': UncNeg,
}


def capability_for (op):
    """Return the capability ABC for the operation named *op*, one of
    :data:`binary_ops` or :data:`unary_ops`.

    """
    try:
        return _capabilities[op]
    except KeyError:
        raise ValueError ('unknown uncertainty operation %r' % (op, ))


def rebuild_tuple (template, items):
    """Assemble *items* into a tuple of the same class as *template*, so that
    namedtuples survive component-wise operations.

    """
    if type (template) is tuple:
        return tuple (items)

    make = getattr (template, '_make', None)
    if make is not None:
        return make (items)
    return type (template) (items)


def _describe_path (path):
    if not len (path):
        return 'uncertainty'
    return 'uncertainty component ' + ''.join ('[%d]' % i for i in path)


def _check_capability (op, x, path=()):
    if isinstance (x, tuple):
        for i, item in enumerate (x):
            _check_capability (op, item, path + (i, ))
        return

    cap = capability_for (op)
    if not isinstance (x, cap):
        raise UncCapabilityError ('%s of type %s does not support the "%s" operation '
                                  '(it has no %s method)', _describe_path (path),
                                  x.__class__.__name__, op, cap._method)


def supports (op, x):
    """Return whether the uncertainty payload *x* can be combined under the
    operation named *op*. Tuples are checked component by component.

    """
    try:
        _check_capability (op, x)
    except UncCapabilityError:
        return False
    return True


def _check_pair (op, x, y, path=()):
    if isinstance (x, tuple):
        if not isinstance (y, tuple):
            raise UncCapabilityError ('cannot combine tuple %s with a non-tuple of type %s',
                                      _describe_path (path), y.__class__.__name__)
        if len (x) != len (y):
            raise UncCapabilityError ('cannot combine %s tuples of different arities (%d and %d)',
                                      _describe_path (path), len (x), len (y))
        for i, (xi, yi) in enumerate (zip (x, y)):
            _check_pair (op, xi, yi, path + (i, ))
        return

    _check_capability (op, x, path)

    # Each position only ever combines with the same kind of uncertainty.
    if not isinstance (y, x.__class__):
        raise UncCapabilityError ('cannot combine %s of type %s with one of type %s',
                                  _describe_path (path), x.__class__.__name__,
                                  y.__class__.__name__)


def _combine_binary (method, x, xval, y, yval):
    if isinstance (x, tuple):
        return rebuild_tuple (x, [_combine_binary (method, xi, xval, yi, yval)
                                  for xi, yi in zip (x, y)])
    return getattr (x, method) (xval, y, yval)


def _combine_unary (method, x, xval):
    if isinstance (x, tuple):
        return rebuild_tuple (x, [_combine_unary (method, xi, xval) for xi in x])
    return getattr (x, method) (xval)


def dispatch_binary (op, x, xval, y, yval):
    """Combine uncertainty payloads *x* and *y*, belonging to scalar values *xval*
    and *yval*, under the binary operation named *op*. Both payloads are
    checked before any combination rule runs: they must have the same shape,
    and each position of *y* must be of the same kind as that of *x*.

    """
    if op not in binary_ops:
        raise ValueError ('not a binary uncertainty operation: %r' % (op, ))
    _check_pair (op, x, y)
    return _combine_binary (capability_for (op)._method, x, xval, y, yval)


def dispatch_unary (op, x, xval):
    """Unary counterpart of :func:`dispatch_binary`."""
    if op not in unary_ops:
        raise ValueError ('not a unary uncertainty operation: %r' % (op, ))
    _check_capability (op, x)
    return _combine_unary (capability_for (op)._method, x, xval)


def _create_wrappers (namespace):
    """This function populates the global namespace with functions dispatching
    the uncertainty operations: ``unc_add (x, xval, y, yval)`` and friends,
    and ``unc_neg (x, xval)``.

    """
    for op in binary_ops:
        namespace['unc_' + op] = partial (dispatch_binary, op)

    for op in unary_ops:
        namespace['unc_' + op] = partial (dispatch_unary, op)

_create_wrappers (globals ())
__all__ += ['unc_' + op for op in all_ops]
