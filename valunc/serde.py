# -*- mode: python; coding: utf-8 -*-
# Copyright 2015-2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT license.

"""Converting values with uncertainties to and from plain data.

A :class:`~valunc.core.ValUnc` is encoded in one of two shapes:

- the bare value, if its uncertainty is zero (in the sense of
  :mod:`valunc.unczero`);
- a two-element list ``[value, uncertainty]`` otherwise.

There is no tag distinguishing the shapes, so decoding goes by structure: any
number is a bare value, and any list or tuple must be a pair. Numbers of any
width or signedness are accepted where a wider type is expected, so that
``5`` decodes into a float-valued field as ``5.0``. Tuple uncertainties are
encoded as lists, and classes can take part by providing a ``to_data``
method and a ``from_data`` classmethod.

The encoded data are made of Python lists and numbers, ready for :mod:`json`
or any other serializer that can handle those; :func:`dumps` and
:func:`loads` do the JSON step for you.

"""

__all__ = '''
DecodeError
MalformedError
TypeMismatchError
encode_field
decode_field
to_data
from_data
dumps
loads
'''.split ()

import json, logging, numbers
import numpy as np

from . import ValUncError
from .core import ValUnc, default_of
from .uncops import UncCapabilityError
from .unczero import is_zero

log = logging.getLogger (__name__)

_field_names = ['value', 'uncertainty']


class DecodeError (ValUncError, ValueError):
    """Raised when data cannot be decoded into a value with uncertainties.

    The attribute `position` identifies the offending field: 0 for the value, 1
    for the uncertainty, or None if the problem is with the data as a whole.

    """
    position = None

    def __init__ (self, position, fmt, *args):
        if len (args):
            fmt = fmt % args
        if position is not None:
            fmt = 'field %d (%s): %s' % (position, _field_names[position], fmt)
        super (DecodeError, self).__init__ (fmt)
        self.position = position


class MalformedError (DecodeError):
    """The data have the wrong shape: neither a bare value nor a pair, or a
    sequence of the wrong length.

    """


class TypeMismatchError (DecodeError):
    """An element could not be converted to the type expected for its field.

    """


def _is_number (data):
    return isinstance (data, numbers.Number) and not isinstance (data, (bool, np.bool_))


# Encoding

def encode_field (x):
    if isinstance (x, tuple):
        return [encode_field (item) for item in x]
    if isinstance (x, np.generic):
        return x.item ()
    if isinstance (x, np.ndarray):
        return x.tolist ()

    to_data = getattr (x, 'to_data', None)
    if to_data is not None:
        return to_data ()
    return x


def to_data (vu):
    """Encode *vu* as its bare value if the uncertainty is zero, or as a
    ``[value, uncertainty]`` list otherwise. The uncertainty must support zero
    tests.

    """
    if is_zero (vu.unc):
        log.debug ('encoding %r in compact form', vu)
        return encode_field (vu.val)
    return [encode_field (vu.val), encode_field (vu.unc)]


# Decoding

def _decode_number (spec, data, position):
    if not _is_number (data):
        raise TypeMismatchError (position, 'invalid type %s, expected a number',
                                 data.__class__.__name__)

    if issubclass (spec, numbers.Integral):
        if not isinstance (data, numbers.Integral):
            raise TypeMismatchError (position, 'invalid value %r, expected an integer', data)

        if issubclass (spec, np.integer):
            info = np.iinfo (spec)
            if not (info.min <= int (data) <= info.max):
                raise TypeMismatchError (position, 'integer %d out of range for %s',
                                         data, spec.__name__)
    elif issubclass (spec, numbers.Real):
        if not isinstance (data, numbers.Real):
            raise TypeMismatchError (position, 'invalid value %r, expected a real number', data)

    try:
        return spec (data)
    except (OverflowError, TypeError, ValueError) as e:
        raise TypeMismatchError (position, 'cannot convert %r to %s: %s',
                                 data, spec.__name__, e) from e


def decode_field (spec, data, position):
    """Decode one field of an encoded value according to the type spec *spec*
    (a class or a tuple of type specs). *position* is reported in errors.

    """
    if isinstance (spec, tuple):
        if not isinstance (data, (list, tuple)):
            raise TypeMismatchError (position, 'invalid type %s, expected a sequence of %d items',
                                     data.__class__.__name__, len (spec))
        if len (data) != len (spec):
            raise MalformedError (position, 'invalid length %d, expected a sequence of %d items',
                                  len (data), len (spec))
        return tuple (decode_field (s, d, position) for s, d in zip (spec, data))

    if not isinstance (spec, type):
        raise UncCapabilityError ('type specs must be classes or tuples of them; got %r', spec)

    if issubclass (spec, numbers.Number):
        return _decode_number (spec, data, position)

    decoder = getattr (spec, 'from_data', None)
    if decoder is None:
        raise UncCapabilityError ('type %s cannot be decoded (it has no from_data method)',
                                  spec.__name__)

    try:
        return decoder (data)
    except DecodeError:
        raise
    except (TypeError, ValueError) as e:
        raise TypeMismatchError (position, 'cannot decode %r as %s: %s',
                                 data, spec.__name__, e) from e


def from_data (data, val_type=float, unc_type=float):
    """Decode *data* as produced by :func:`to_data`. A bare number becomes the
    value, with the default uncertainty of *unc_type*; a two-element sequence
    is read as ``(value, uncertainty)``.

    """
    if isinstance (data, (list, tuple)):
        if len (data) != 2:
            # Point at the first missing field if the pair is short.
            position = len (data) if len (data) < 2 else None
            raise MalformedError (position, 'invalid length %d, expected a bare value '
                                  'or a [value, uncertainty] pair', len (data))

        return ValUnc (decode_field (val_type, data[0], 0),
                       decode_field (unc_type, data[1], 1))

    if _is_number (data):
        log.debug ('decoding bare value %r with default uncertainty', data)
        return ValUnc (decode_field (val_type, data, 0), default_of (unc_type))

    raise MalformedError (None, 'invalid type %s, expected a bare value or a '
                          '[value, uncertainty] pair', data.__class__.__name__)


def dumps (vu, **kwargs):
    """Encode *vu* as JSON text. Keyword arguments go to :func:`json.dumps`."""
    return json.dumps (to_data (vu), **kwargs)


def loads (text, val_type=float, unc_type=float):
    try:
        data = json.loads (text)
    except json.JSONDecodeError as e:
        raise MalformedError (None, 'not valid JSON: %s', e) from e
    return from_data (data, val_type, unc_type)
