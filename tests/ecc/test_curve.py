#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cmsig.ecc.curve` module."

import json
from typing import Dict

import pytest

from cmsig.ecc.curve import Curve
from cmsig.ecc.curve_group import Point, mult
from cmsig.exceptions import CMSigTypeError, CMSigValueError

# test curves: very low cardinality
low_card_curves: Dict[str, Curve] = {}
# 13 % 4 = 1; 13 % 8 = 5; prime order group
low_card_curves["ec13_19"] = Curve(13, 2, (1, 9), 19)
# 13 % 4 = 1; 13 % 8 = 5; 21 points, cofactor 3
low_card_curves["ec13_7"] = Curve(13, 4, (8, 3), 7)
# 19 % 4 = 3; 19 % 8 = 3; prime order group
low_card_curves["ec19_13"] = Curve(19, 2, (4, 16), 13)

# a j = 0 prime order curve over a 256-bit field
secp256k1 = Curve(
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    7,
    (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)

all_curves: Dict[str, Curve] = {}
all_curves.update(low_card_curves)
all_curves["secp256k1"] = secp256k1


def test_exceptions() -> None:

    # good curve
    Curve(13, 2, (1, 9), 19)

    with pytest.raises(CMSigValueError, match="p is not prime: "):
        Curve(15, 2, (1, 9), 19)

    with pytest.raises(CMSigValueError, match="negative b: "):
        Curve(13, -2, (1, 9), 19)

    with pytest.raises(CMSigValueError, match="p <= b: "):
        Curve(13, 13, (1, 9), 19)

    with pytest.raises(CMSigValueError, match="zero discriminant"):
        Curve(13, 0, (1, 1), 19)

    err_msg = "base point must be a tuple\\[int, int\\]"
    with pytest.raises(CMSigTypeError, match=err_msg):
        Curve(13, 2, (1, 9, 1), 19)  # type: ignore

    with pytest.raises(CMSigValueError, match="base point coordinates not in 0..p-1"):
        Curve(13, 2, (13, 9), 19)

    with pytest.raises(CMSigValueError, match="base point is not on the curve"):
        Curve(13, 2, (2, 9), 19)

    with pytest.raises(CMSigValueError, match="r is not prime: "):
        Curve(13, 2, (1, 9), 20)

    with pytest.raises(CMSigValueError, match="r = p: anomalous curve"):
        Curve(13, 2, (1, 9), 13)

    with pytest.raises(CMSigValueError, match="r is not the base point order"):
        Curve(13, 2, (1, 9), 17)

    # no validation at all
    ec = Curve(13, 2, (2, 9), 17, False)
    with pytest.raises(CMSigValueError, match="base point is not on the curve"):
        ec.assert_valid()


def test_base_point() -> None:
    for ec in all_curves.values():
        assert isinstance(ec.Q, Point)
        assert ec.Q.xy == ec.xy_Q
        assert ec.is_on_curve(ec.Q)
        assert not ec.Q.is_inf
        assert mult(ec.r, ec.Q).is_inf
        # a Point is accepted as base point too
        assert Curve(ec.p, ec.b, ec.Q, ec.r) == ec

    assert secp256k1.r_size == 32
    assert low_card_curves["ec13_19"].r_size == 1


def test_immutable() -> None:
    ec = low_card_curves["ec13_19"]
    with pytest.raises(AttributeError):
        ec.b = 3  # type: ignore
    # usable as dict key
    assert {ec: 1}[Curve(13, 2, (1, 9), 19)] == 1


def test_str_and_repr() -> None:
    ec = low_card_curves["ec13_19"]
    assert str(ec) == "Curve\n p   = 13\n b   = 2\n Qx  = 1\n Qy  = 9\n r   = 19"
    assert repr(ec) == "Curve(13, 2, (1, 9), 19)"

    assert str(secp256k1).startswith("Curve\n p   = FFFFFFFF FFFFFFFF")
    assert repr(secp256k1).startswith("Curve('FFFFFFFF FFFFFFFF")


def test_serialization() -> None:
    ec = low_card_curves["ec13_19"]
    assert ec.serialize() == "13\n2\n1 9\n19"

    for ec in all_curves.values():
        assert Curve.parse(ec.serialize()) == ec
        assert Curve.parse(ec.serialize().encode("ascii")) == ec

        ec_json = ec.to_json()
        assert set(json.loads(ec_json)) == {"p", "b", "Q", "r"}
        assert Curve.from_json(ec_json) == ec
        assert Curve.from_dict(ec.to_dict()) == ec

    # one value per line is not mandatory
    assert Curve.parse("13 2 1 9 19") == low_card_curves["ec13_19"]

    with pytest.raises(CMSigValueError, match="invalid number of values: "):
        Curve.parse("13\n2\n1\n19")

    with pytest.raises(CMSigValueError, match="not a base-10 integer: "):
        Curve.parse("13\n2\n1 9\n0x13")

    with pytest.raises(CMSigValueError, match="base point is not on the curve"):
        Curve.parse("13\n2\n2 9\n19")

    ec = Curve.parse("13\n2\n2 9\n19", check_validity=False)
    with pytest.raises(CMSigValueError, match="base point is not on the curve"):
        ec.serialize()
    assert ec.serialize(check_validity=False) == "13\n2\n2 9\n19"
