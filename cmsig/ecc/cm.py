#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime order elliptic curves by complex multiplication (discriminant -3).

For a prime p = 1 (mod 6) decomposed as p = c^2 + 3*d^2,
the curves y^2 = x^3 + b over Fp have one of the six orders
N = p + 1 + T, with T in {±(c + 3d), ±(c - 3d), ±2c},
the actual one depending on the sextic residuosity of b.

The construction:

1. decomposes p (cmsig.ecc.cornacchia)
2. chooses N and its prime divisor r among N, N/2, N/3, N/6
3. rejects r = p and small embedding degrees (p^i = 1 mod r, i <= m)
4. searches a random point P = (x0, y0) and b = y0^2 - x0^3,
   filtering b by residuosity according to N / r
5. confirms N * P = INF
6. returns the base point Q = (N / r) * P

Unsuitable primes are signalled by None:
callers must retry with a new prime, see create.
"""

import logging
import secrets
from typing import Iterable, List, Optional, Tuple

from cmsig.ecc.cornacchia import cornacchia
from cmsig.ecc.curve import Curve
from cmsig.ecc.curve_group import Point, mult
from cmsig.ecc.number_theory import is_cubic_residue, is_prime, is_quadratic_residue
from cmsig.exceptions import CMSigValueError, SearchExhaustedError

logger = logging.getLogger(__name__)

# default security parameter: excluded embedding degrees
SECURITY_PARAMETER = 3
# default bit-length of the generated field prime
DEFAULT_BITS = 256
# random points tried for each prime before giving up on it
MAX_POINT_ATTEMPTS = 10_000
# primes tried by create before giving up
MAX_PRIME_ATTEMPTS = 1_000
# random candidates drawn by gen_prime, per bit of the prime
PRIME_DRAWS_PER_BIT = 100

# cofactors allowed for the CM curve order
_COFACTORS = (1, 2, 3, 6)


def gen_prime(bits: int, exclude: Iterable[int] = ()) -> int:
    """Return a random prime p = 1 (mod 6) of exactly the given bit-length.

    Primes in exclude (e.g. previous failed attempts) are skipped.
    SearchExhaustedError is raised if no new prime shows up
    in PRIME_DRAWS_PER_BIT * bits random candidates.
    """

    if bits < 4:
        raise CMSigValueError(f"too few bits for a p = 1 (mod 6) prime: {bits}")
    excluded = set(exclude)
    for _ in range(PRIME_DRAWS_PER_BIT * bits):
        # top bit set for the exact bit-length, p = 1 (mod 6)
        p = secrets.randbits(bits - 1) | (1 << (bits - 1))
        p += (1 - p) % 6
        if p.bit_length() != bits:
            continue
        if p not in excluded and is_prime(p):
            return p

    err_msg = f"no new p = 1 (mod 6) prime of {bits} bits"
    raise SearchExhaustedError(err_msg)


def order_candidates(p: int, c: int, d: int) -> Optional[Tuple[int, int]]:
    """Return (N, r): the curve order N and its prime divisor r.

    The first valid pair in the fixed enumeration order
    (traces, then cofactors 1, 2, 3, 6) is returned, None if none.
    """

    traces = []
    for t in (c + 3 * d, c - 3 * d, 2 * c):
        traces.extend((t, -t))
    for t in traces:
        n = p + 1 + t
        for h in _COFACTORS:
            if n % h == 0 and is_prime(n // h):
                return n, n // h
    return None


def has_small_embedding_degree(p: int, r: int, m: int) -> bool:
    "Return True if p^i = 1 (mod r) for some i in 1..m."
    p_i = 1
    for _ in range(m):
        p_i = p_i * p % r
        if p_i == 1:
            return True
    return False


def is_b_suitable(b: int, p: int, n: int, r: int) -> bool:
    "Return True if b passes the residuosity filter for the cofactor n / r."

    h = n // r
    if h == 1:
        return not is_quadratic_residue(b, p) and is_cubic_residue(b, r) is False
    if h == 6:
        return is_quadratic_residue(b, p) and is_cubic_residue(b, r) is True
    if h == 2:
        return not is_quadratic_residue(b, p) and is_cubic_residue(b, r) is True
    if h == 3:
        return (
            is_quadratic_residue(b, r)
            and is_quadratic_residue(b, 3)
            and is_cubic_residue(b, r) is False
        )
    return False


def random_point(p: int) -> Point:
    "Return a random (x, y) mod p, with both coordinates in [1, p-1]."
    x = 1 + secrets.randbelow(p - 1)
    y = 1 + secrets.randbelow(p - 1)
    return Point(p, (x, y))


def generate(
    p: int, m: int = SECURITY_PARAMETER, max_attempts: int = MAX_POINT_ATTEMPTS
) -> Optional[Curve]:
    """Return a prime order curve over Fp, None if p is not suitable.

    p must be a prime, p = 1 (mod 6);
    m is the security parameter: curves with embedding degree
    up to m are rejected.
    The random point search is abandoned after max_attempts points.
    """

    if p % 6 != 1:
        logger.debug("p = %d is not 1 mod 6", p)
        return None

    cd = cornacchia(p, 3)
    if cd is None:
        logger.debug("p = %d: no c^2 + 3d^2 decomposition", p)
        return None
    c, d = cd
    logger.debug("p = %d = (%d)^2 + 3*(%d)^2", p, c, d)

    nr = order_candidates(p, c, d)
    if nr is None:
        logger.debug("p = %d: no prime order candidate", p)
        return None
    n, r = nr
    logger.debug("N = %d, r = %d", n, r)

    if p == r:
        logger.debug("p = r: anomalous curve")
        return None
    if has_small_embedding_degree(p, r, m):
        logger.debug("p^i = 1 (mod r) for some i <= %d", m)
        return None

    h = n // r
    for _ in range(max_attempts):
        P = random_point(p)
        x0, y0 = P.xy
        b = (y0 * y0 - x0 * x0 * x0) % p
        # b = 0 is a singular curve
        if b == 0 or not is_b_suitable(b, p, n, r):
            continue
        # P is on y^2 = x^3 + b by construction: is N its order multiple?
        if not mult(n, P).is_inf:
            logger.debug("b = %d: N * P != INF", b)
            continue
        Q = mult(h, P)
        if Q.is_inf:
            continue
        curve = Curve(p, b, Q.xy, r)
        logger.debug("curve found: b = %d, Q = %s", b, Q)
        return curve

    logger.debug("p = %d: no suitable point in %d attempts", p, max_attempts)
    return None


def create(
    bits: int = DEFAULT_BITS,
    m: int = SECURITY_PARAMETER,
    max_primes: int = MAX_PRIME_ATTEMPTS,
    max_attempts: int = MAX_POINT_ATTEMPTS,
) -> Curve:
    """Return a new prime order curve over a bits-long prime field.

    Random primes are tried until one of them is suitable;
    SearchExhaustedError is raised after max_primes failures,
    or earlier when no untried prime of that bit-length is left.
    """

    failed: List[int] = []
    while len(failed) < max_primes:
        try:
            p = gen_prime(bits, failed)
        except SearchExhaustedError:
            break
        curve = generate(p, m, max_attempts)
        if curve is not None:
            return curve
        failed.append(p)

    err_msg = f"no curve found after {len(failed)} primes of {bits} bits"
    logger.warning(err_msg)
    raise SearchExhaustedError(err_msg)
