#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module cmsig.ecc."""

from cmsig.ecc.cm import create, gen_prime, generate
from cmsig.ecc.cornacchia import cornacchia
from cmsig.ecc.curve import Curve
from cmsig.ecc.curve_group import CurveGroup, Point, add, mult, negate, subtract
from cmsig.ecc.elgamal import Sig, gen_keys, sign, verify

__all__ = [
    "Curve",
    "CurveGroup",
    "Point",
    "Sig",
    "add",
    "cornacchia",
    "create",
    "gen_keys",
    "gen_prime",
    "generate",
    "mult",
    "negate",
    "sign",
    "subtract",
    "verify",
]
