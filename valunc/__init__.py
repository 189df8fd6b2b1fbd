# -*- mode: python; coding: utf-8 -*-
# Copyright 2015-2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT license.

"""valunc - values that carry their uncertainties along.

A :class:`ValUnc` pairs a central value with an uncertainty payload. The
library supplies no propagation formulas of its own: the payload's type
decides how it combines under each arithmetic operator (see
:mod:`valunc.uncops`), and tuples of payload types combine component-wise, so
one value can carry several independent kinds of uncertainty at once.

"""

__all__ = '''
ValUncError
ValUnc
UncCapabilityError
'''.split ()


class ValUncError (Exception):
    """A generic base class for exceptions.

    All custom exceptions raised by :mod:`valunc` modules are subclasses of
    this class.

    The constructor automatically applies old-fashioned ``printf``-like
    (``%``-based) string formatting if more than one argument is given::

      ValUncError ('my format string says %r and %d', 'hello', 12)
      # has text "my format string says 'hello' and 12"

    """
    def __init__ (self, fmt, *args):
        if not len (args):
            self.args = (str (fmt), )
        else:
            self.args = (str (fmt % args), )


from .uncops import UncCapabilityError
from .core import ValUnc
