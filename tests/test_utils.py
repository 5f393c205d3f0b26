#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `cmsig.utils` module."

# Standard library imports
import secrets

# Third party imports
import pytest

# Library imports
from cmsig.exceptions import CMSigValueError
from cmsig.utils import (
    bytes_from_octets,
    hex_string,
    int_from_integer,
    int_repr,
    ints_from_text,
)


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError, match="non-hexadecimal number found in fromhex"):
        hex_string(a_str)

    int_ = -1
    with pytest.raises(CMSigValueError, match="negative integer: "):
        hex_string(int_)


def test_int_repr() -> None:
    assert int_repr(13) == "13"
    assert int_repr(-13) == "-13"
    assert int_repr(0xFFFFFFFF) == "4294967295"
    assert int_repr(0x100000000) == "'01 00000000'"


def test_bytes_from_octets() -> None:
    assert bytes_from_octets("deadbeef") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(" dead beef ") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(b"\x01\x02", 2) == b"\x01\x02"
    assert bytes_from_octets(b"\x01\x02", (1, 2)) == b"\x01\x02"

    with pytest.raises(CMSigValueError, match="invalid size: 2 bytes instead of 3"):
        bytes_from_octets(b"\x01\x02", 3)


def test_ints_from_text() -> None:
    assert ints_from_text("13\n2\n1 9\n19", 5) == [13, 2, 1, 9, 19]
    assert ints_from_text(b"  42\r\n", 1) == [42]
    assert ints_from_text("-1 0", 2) == [-1, 0]

    with pytest.raises(CMSigValueError, match="invalid number of values: 0 instead of 1"):
        ints_from_text("", 1)
    with pytest.raises(CMSigValueError, match="invalid number of values: 3 instead of 2"):
        ints_from_text("1\n2\n3", 2)
    with pytest.raises(CMSigValueError, match="not a base-10 integer: "):
        ints_from_text("1\nff", 2)
    with pytest.raises(CMSigValueError, match="not an ascii text"):
        ints_from_text("1 2".encode("utf-16"), 2)
