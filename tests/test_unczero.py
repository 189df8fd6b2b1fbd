# -*- mode: python; coding: utf-8 -*-
# Copyright 2016 Peter Williams <peter@newton.cx> and collaborators.
# Licensed under the MIT License.

"""Tests for valunc.unczero."""

from collections import namedtuple

import numpy as np
from numpy import testing as nt

from valunc import unczero as uz
from valunc.uncops import UncCapabilityError
from valunc.unc import Unc, Quadrature, Linear


numeric_types = [int, float, complex, np.int8, np.int16, np.int32, np.int64,
                 np.uint8, np.uint16, np.uint32, np.uint64,
                 np.float16, np.float32, np.float64]


def test_numbers ():
    for t in numeric_types:
        z = uz.zero (t)
        assert type (z) is t
        assert uz.is_zero (z)
        assert not uz.is_zero (t (3))
        assert type (uz.zero_like (t (3))) is t

        r = uz.set_zero (t (3))
        assert type (r) is t
        assert uz.is_zero (r)
        assert uz.is_zero (uz.set_zero (r))

    assert not uz.is_zero (np.nan)
    assert not uz.is_zero (-1e-300)


def test_booleans_rejected ():
    nt.assert_raises (UncCapabilityError, lambda: uz.zero (bool))
    nt.assert_raises (UncCapabilityError, lambda: uz.is_zero (False))
    assert not uz.is_zero_testable (True)


def test_unsupported ():
    nt.assert_raises (UncCapabilityError, lambda: uz.zero (str))
    nt.assert_raises (UncCapabilityError, lambda: uz.zero ('float'))
    nt.assert_raises (UncCapabilityError, lambda: uz.is_zero ('0'))
    nt.assert_raises (UncCapabilityError, lambda: uz.set_zero (object ()))
    nt.assert_raises (UncCapabilityError, lambda: uz.zero_like ([0.]))
    assert not uz.is_zero_testable (None)
    assert uz.is_zero_testable (1.5)


def test_unc_class ():
    assert isinstance (Unc (), uz.UncZero)
    assert isinstance (Quadrature (1.), uz.UncZero)
    assert not isinstance (1.0, uz.UncZero)

    assert uz.zero (Linear) == Linear (0.)
    assert uz.is_zero (Quadrature (0.))
    assert not uz.is_zero (Quadrature (0.5))

    u = Quadrature (3.)
    r = uz.set_zero (u)
    assert r is u
    assert u.value == 0.
    assert uz.set_zero (u) is u
    assert uz.is_zero (u)


def test_arrays ():
    a = np.array ([1., 0., 2.])
    assert not uz.is_zero (a)

    z = uz.zero_like (a)
    assert z.shape == a.shape
    assert uz.is_zero (z)

    r = uz.set_zero (a)
    assert r is a
    nt.assert_array_equal (a, [0., 0., 0.])
    assert uz.is_zero (a)


def test_tuple_arities ():
    for n in range (13):
        spec = (float, ) * n
        z = uz.zero (spec)
        assert z == (0., ) * n
        assert uz.is_zero (z)
        assert uz.is_zero (uz.set_zero (z))
        assert uz.zero_like (tuple (range (1, n + 1))) == (0, ) * n

    assert uz.zero (()) == ()
    assert uz.is_zero (())
    assert uz.set_zero (()) == ()


def test_tuples ():
    spec = (Quadrature, (Linear, np.float32))
    z = uz.zero (spec)
    assert z == (Quadrature (0.), (Linear (0.), np.float32 (0)))
    assert uz.is_zero (z)

    assert not uz.is_zero ((Quadrature (0.), (Linear (0.), np.float32 (1))))
    assert not uz.is_zero ((Quadrature (2.), 0.))

    t = (Quadrature (2.), Linear (1.), 3.)
    r = uz.set_zero (t)
    assert r[0] is t[0]
    assert r[1] is t[1]
    assert r[2] == 0.
    assert uz.is_zero (r)
    assert uz.set_zero (r) == r

    # Every component is checked, even after a nonzero one.
    nt.assert_raises (UncCapabilityError, lambda: uz.is_zero ((1., 'junk')))
    assert not uz.is_zero_testable ((0., 'junk'))


def test_namedtuple ():
    Budget = namedtuple ('Budget', 'stat sys')
    b = Budget (Quadrature (1.), 2.)

    z = uz.zero_like (b)
    assert isinstance (z, Budget)
    assert z == Budget (Quadrature (0.), 0.)

    r = uz.set_zero (b)
    assert isinstance (r, Budget)
    assert uz.is_zero (r)
