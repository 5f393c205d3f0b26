#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve descriptor: cyclic subgroup of prime order r.

A Curve is the immutable (p, b, Q, r) value produced by the
complex multiplication construction and then shared, read-only,
by key generation, signing, and verification.

It can be serialized as plain text (base-10 integers: p, b,
the x and y coordinates of Q on the same line, and r)
or as JSON (integers as base-10 strings).
"""

from dataclasses import InitVar, dataclass, field
from typing import Tuple, Type, TypeVar

from dataclasses_json import DataClassJsonMixin, config

from cmsig.alias import String
from cmsig.ecc.curve_group import CurveGroup, Point, mult
from cmsig.ecc.number_theory import is_prime
from cmsig.exceptions import CMSigTypeError, CMSigValueError
from cmsig.utils import HEX_THRESHOLD, hex_string, int_repr, ints_from_text

_Curve = TypeVar("_Curve", bound="Curve")

_INT_CONFIG = config(encoder=str, decoder=int)


def _encode_xy(xy: Tuple[int, int]) -> list:
    return [str(xy[0]), str(xy[1])]


def _decode_xy(xy: list) -> Tuple[int, int]:
    return int(xy[0]), int(xy[1])


@dataclass(frozen=True)
class Curve(CurveGroup, DataClassJsonMixin):
    """Prime order r subgroup of the curve y^2 = x^3 + b over Fp.

    Q is the base point, generator of the subgroup.
    """

    p: int = field(metadata=_INT_CONFIG)
    b: int = field(metadata=_INT_CONFIG)
    # affine coordinates of the base point Q
    xy_Q: Tuple[int, int] = field(
        metadata=config(field_name="Q", encoder=_encode_xy, decoder=_decode_xy)
    )
    r: int = field(metadata=_INT_CONFIG)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if isinstance(self.xy_Q, Point):
            # the base point can be provided as Point too
            object.__setattr__(self, "xy_Q", self.xy_Q.xy)
        if self.xy_Q is None or len(self.xy_Q) != 2:
            raise CMSigTypeError("base point must be a tuple[int, int]")
        object.__setattr__(self, "xy_Q", (self.xy_Q[0], self.xy_Q[1]))
        if check_validity:
            self.assert_valid()

    @property
    def Q(self) -> Point:  # pylint: disable=invalid-name
        "Return the base point."
        return Point(self.p, self.xy_Q)

    @property
    def r_size(self) -> int:
        "Return the byte-length of the subgroup order."
        return (self.r.bit_length() + 7) // 8

    def assert_valid(self) -> None:
        self.assert_valid_group()

        if not 0 <= self.xy_Q[0] < self.p or not 0 <= self.xy_Q[1] < self.p:
            raise CMSigValueError("base point coordinates not in 0..p-1")
        Q = self.Q
        if not self.is_on_curve(Q):
            raise CMSigValueError("base point is not on the curve")

        if not is_prime(self.r):
            raise CMSigValueError(f"r is not prime: {int_repr(abs(self.r))}")
        if self.r == self.p:
            raise CMSigValueError("r = p: anomalous curve")
        # Q != INF by construction, so its order is exactly r
        if not mult(self.r, Q).is_inf:
            raise CMSigValueError("r is not the base point order")

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n Qx  = {hex_string(self.xy_Q[0])}"
            result += f"\n Qy  = {hex_string(self.xy_Q[1])}"
            result += f"\n r   = {hex_string(self.r)}"
        else:
            result += f"\n Qx  = {self.xy_Q[0]}"
            result += f"\n Qy  = {self.xy_Q[1]}"
            result += f"\n r   = {self.r}"
        return result

    def __repr__(self) -> str:
        result = "Curve("
        result += int_repr(self.p)
        result += f", {int_repr(self.b)}"
        result += f", ({int_repr(self.xy_Q[0])}, {int_repr(self.xy_Q[1])})"
        result += f", {int_repr(self.r)}"
        result += ")"
        return result

    def serialize(self, check_validity: bool = True) -> str:
        "Return the plain text representation of the curve."
        if check_validity:
            self.assert_valid()
        return f"{self.p}\n{self.b}\n{self.xy_Q[0]} {self.xy_Q[1]}\n{self.r}"

    @classmethod
    def parse(
        cls: Type[_Curve], data: String, check_validity: bool = True
    ) -> _Curve:
        "Return a Curve by parsing its plain text representation."
        p, b, x_Q, y_Q, r = ints_from_text(data, 5)
        return cls(p, b, (x_Q, y_Q), r, check_validity)
