#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cmsig.ecc.cornacchia` module."

from sympy import nextprime

from cmsig.ecc.cornacchia import BRUTE_FORCE_BITS, cornacchia, sqrt_minus_d


def test_brute_force() -> None:
    # 13 = 1^2 + 3*2^2
    assert cornacchia(13) == (1, 2)
    assert cornacchia(7) == (2, 1)
    assert cornacchia(19) == (4, 1)
    # 2^12 - 3 = 4093 = 1 (mod 3)
    assert cornacchia(4093) is not None

    # p = 2 (mod 3) is not c^2 + 3*d^2
    for p in (5, 11, 17, 23, 29):
        assert cornacchia(p) is None

    # other coefficients
    assert cornacchia(13, 1) == (2, 3)
    assert cornacchia(11, 2) == (3, 1)


def test_descent() -> None:
    p = 4099
    assert p.bit_length() > BRUTE_FORCE_BITS
    # 4099 = 3 (mod 4): 64^2 = -3 (mod 4099)
    assert cornacchia(p) == (64, 1)
    # 4261 = 5 (mod 8)
    assert cornacchia(4261) == (53, 22)


def test_sqrt_minus_d() -> None:
    # p = 3 (mod 4)
    u = sqrt_minus_d(3, 4099)
    assert u is not None
    assert u in (64, 4099 - 64)
    # p = 5 (mod 8)
    p = 4261
    u = sqrt_minus_d(3, p)
    assert u is not None
    assert (u * u + 3) % p == 0
    # p = 1 (mod 8) is not supported
    assert sqrt_minus_d(3, 97) is None
    # -3 is not a quadratic residue mod 11 = 2 (mod 3)
    assert sqrt_minus_d(3, 11) is None


def test_not_representable() -> None:
    # -3 is not a quadratic residue for p = 2 (mod 3)
    p = nextprime(2 ** 20)
    while p % 3 != 2:
        p = nextprime(p)
    assert cornacchia(p) is None
    # p = 1 (mod 8) is not supported by the fast square roots
    p = nextprime(2 ** 20)
    while p % 24 != 1:
        p = nextprime(p)
    assert cornacchia(p) is None


def test_representation() -> None:
    found = 0
    p = 2 ** 13
    for _ in range(300):
        p = nextprime(p)
        cd = cornacchia(p)
        if p % 3 != 1:
            assert cd is None
            continue
        if cd is None:
            continue
        c, d = cd
        assert c > 0
        assert d > 0
        assert c * c + 3 * d * d == p
        found += 1
    assert found > 30

    p = 2 ** 255
    for _ in range(20):
        p = nextprime(p)
        cd = cornacchia(p)
        if cd is not None:
            c, d = cd
            assert c * c + 3 * d * d == p
