#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve Point and CurveGroup class and functions.

Only curves with zero linear coefficient are supported,
i.e. y^2 = x^3 + b (mod p): the curves obtained by the
complex multiplication method with discriminant -3.
As a consequence, the group law does not depend on b
and it is available as plain functions of the points.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup of prime order r, see the cmsig.ecc.curve module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cmsig.alias import XY, Integer
from cmsig.ecc.number_theory import is_prime, mod_inv
from cmsig.exceptions import CMSigTypeError, CMSigValueError
from cmsig.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class Point:
    """Elliptic curve point in affine coordinates.

    A Point carries the prime modulus p of the field it belongs to:
    the point at infinity (INF) is the Point without coordinates.
    Points are immutable values: the group law always returns new points.
    """

    p: int
    xy: Optional[XY] = None

    def __post_init__(self) -> None:
        if self.xy is None:
            return
        if len(self.xy) != 2:
            raise CMSigTypeError("point must be a tuple[int, int]")
        x, y = self.xy
        if not 0 <= x < self.p:
            raise CMSigValueError(f"x-coordinate not in 0..p-1: {int_repr(x)}")
        if not 0 <= y < self.p:
            raise CMSigValueError(f"y-coordinate not in 0..p-1: {int_repr(y)}")
        # lists and other sequences become tuples
        object.__setattr__(self, "xy", (x, y))

    @property
    def is_inf(self) -> bool:
        return self.xy is None

    @property
    def x(self) -> int:
        if self.xy is None:
            raise CMSigValueError("INF has no x-coordinate")
        return self.xy[0]

    @property
    def y(self) -> int:
        if self.xy is None:
            raise CMSigValueError("INF has no y-coordinate")
        return self.xy[1]

    def __str__(self) -> str:
        if self.xy is None:
            return "INF"
        return f"({int_repr(self.xy[0])}, {int_repr(self.xy[1])})"

    def __add__(self, other: Point) -> Point:
        return add(self, other)

    def __neg__(self) -> Point:
        return negate(self)

    def __sub__(self, other: Point) -> Point:
        return subtract(self, other)

    def __rmul__(self, m: int) -> Point:
        if not isinstance(m, int):
            return NotImplemented
        return mult(m, self)


def negate(Q: Point) -> Point:
    """Return the opposite point.

    The input point is not checked to be on the curve.
    """
    if Q.xy is None:
        return Q
    return Point(Q.p, (Q.xy[0], (Q.p - Q.xy[1]) % Q.p))


def double(Q: Point) -> Point:
    # point is assumed to be on curve

    if Q.xy is None or Q.xy[1] == 0:
        return Point(Q.p)

    x, y = Q.xy
    lam = 3 * x * x * mod_inv(2 * y, Q.p)
    x_ = lam * lam - x - x
    y_ = lam * (x - x_) - y
    return Point(Q.p, (x_ % Q.p, y_ % Q.p))


def add(Q1: Point, Q2: Point) -> Point:
    """Return the sum of two points.

    Points are assumed to be on the same curve:
    an error is raised only if their moduli differ.
    """

    if Q1.p != Q2.p:
        err_msg = "points in different fields: "
        err_msg += f"{int_repr(Q1.p)} vs {int_repr(Q2.p)}"
        raise CMSigValueError(err_msg)

    if Q1.xy is None:
        return Q2
    if Q2.xy is None:
        return Q1

    if Q1.xy[0] == Q2.xy[0]:
        if Q1.xy[1] == Q2.xy[1]:  # point doubling
            return double(Q1)
        # opposite points
        return Point(Q1.p)

    x1, y1 = Q1.xy
    x2, y2 = Q2.xy
    lam = (y2 - y1) * mod_inv(x2 - x1, Q1.p)
    x = lam * lam - x1 - x2
    y = lam * (x1 - x) - y1
    return Point(Q1.p, (x % Q1.p, y % Q1.p))


def subtract(Q1: Point, Q2: Point) -> Point:
    "Return Q1 - Q2."
    return add(Q1, negate(Q2))


def mult(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    affine coordinates.

    The input point is assumed to be on curve;
    m can be any non-negative integer, not necessarily reduced
    mod the point order.
    """

    if m < 0:
        raise CMSigValueError(f"negative m: {int_repr(abs(m))}")

    # R is the running result, Q the running power-of-two multiple
    R = Point(Q.p)
    while m > 0:
        if m & 1:
            R = add(R, Q)
        # the doubling part of 'double & add'
        Q = add(Q, Q)
        m >>= 1
    return R


class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to the Weierstrass equation y^2 = x^3 + b,
    with x, y, and b in Fp (p being a prime),
    together with a point at infinity INF.
    The constant b must satisfy the relationship 27 b^2 ≠ 0.

    The group is defined by the point addition group law.
    """

    def __init__(self, p: Integer, b: Integer) -> None:
        self.p = int_from_integer(p)
        self.b = int_from_integer(b)
        self.assert_valid_group()

    def assert_valid_group(self) -> None:
        p = self.p
        b = self.b

        # 1) check that p is a prime
        if p < 2 or p % 2 == 0 or not is_prime(p):
            raise CMSigValueError(f"p is not prime: {int_repr(abs(p))}")

        # 2. check that b is an integer in the interval [0, p−1]
        if b < 0:
            raise CMSigValueError(f"negative b: {b}")
        if p <= b:
            err_msg = "p <= b: " + (
                f"'{hex_string(p)}' <= '{hex_string(b)}'"
                if p > HEX_THRESHOLD
                else f"{p} <= {b}"
            )
            raise CMSigValueError(err_msg)

        # 3. Check that 27*b^2 ≠ 0 (mod p)
        if 27 * b * b % p == 0:
            raise CMSigValueError("zero discriminant")

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.b > HEX_THRESHOLD:
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n b   = {self.b}"

        return result

    def __repr__(self) -> str:
        result = "CurveGroup("
        result += f"'{hex_string(self.p)}'" if self.p > HEX_THRESHOLD else f"{self.p}"
        result += f", '{hex_string(self.b)}'" if self.b > HEX_THRESHOLD else f", {self.b}"
        result += ")"
        return result

    @property
    def inf(self) -> Point:
        "Return the point at infinity."
        return Point(self.p)

    def y2(self, x: int) -> int:
        "Return x^3 + b (mod p), i.e. y^2 for the points with abscissa x."
        return (x * x * x + self.b) % self.p

    def point(self, x: int, y: int) -> Point:
        "Return the Point (x, y), requiring it to be on the curve."
        Q = Point(self.p, (x, y))
        self.require_on_curve(Q)
        return Q

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise CMSigValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."
        if not isinstance(Q, Point):
            raise CMSigTypeError("not a point")
        if Q.p != self.p:
            return False
        if Q.xy is None:
            return True
        return self.y2(Q.xy[0]) == Q.xy[1] * Q.xy[1] % self.p
