#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

The signature scheme treats the hash function as a black box:
any hashlib constructor can be used, SHA-1 being the default
for its 160-bit digest.
"""

from __future__ import annotations

import hashlib

from cmsig.alias import HashF, String

DEFAULT_HF: HashF = hashlib.sha1


def bytes_from_msg(msg: String) -> bytes:
    "Return the bytes of a message, utf-8 encoding text strings."
    return msg.encode("utf-8") if isinstance(msg, str) else bytes(msg)


def reduce_to_hlen(msg: String, hf: HashF = DEFAULT_HF) -> bytes:
    "Return the hf digest of the message."
    h = hf()
    h.update(bytes_from_msg(msg))
    return bytes(h.digest())
