#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Any, Callable, Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
#
# use cmsig.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for message digests
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a message to be signed
#    if isinstance(msg, str):
#        msg = msg.encode()
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Hash digest constructor: any hashlib constructor (e.g. hashlib.sha1)
HashF = Callable[[], Any]

# affine coordinates of a point which is not the point at infinity
XY = Tuple[int, int]
