#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Representation of a prime as p = c^2 + d*e^2 (Cornacchia-like descent).

Given a square root u of -d (mod p), the sequences

    m_0 = p, u_0 = u
    m_(i+1) = (u_i^2 + d) / m_i
    u_(i+1) = min(u_i mod m_(i+1), (m_(i+1) - u_i) mod m_(i+1))

descend to m = 1; then the identity

    (a^2 + d*b^2) * (u^2 + d) = (u*a +- d*b)^2 + d*(a -+ u*b)^2

is used to climb back from (u_last, 1) to a representation of p.

None is returned whenever p is not suitable for the method:
the caller is expected to try another prime.
"""

from typing import Optional, Tuple

from cmsig.ecc.number_theory import jacobi_symbol

# primes up to this bit-length are decomposed by exhaustive search
BRUTE_FORCE_BITS = 12


def _brute_force(p: int, d: int) -> Optional[Tuple[int, int]]:
    for c in range(1, p):
        if c * c >= p:
            break
        for e in range(1, p):
            n = c * c + d * e * e
            if n == p:
                return c, e
            if n > p:
                break
    return None


def _sqrt_3_mod_4(a: int, p: int) -> Optional[int]:
    # candidate root is pow(a, (p + 1) // 4, p)
    r = pow(a, (p + 1) // 4, p)
    return r if r * r % p == a % p else None


def _sqrt_5_mod_8(a: int, p: int) -> Optional[int]:
    # candidate root is pow(a, (p + 3) // 8, p)
    r = pow(a, (p + 3) // 8, p)
    # pow(a, (p - 1) // 4, p) is a square root of legendre(a, p)
    c = pow(a, (p - 1) // 4, p)
    if c == 1:
        return r
    if c == p - 1:
        # 2 is a quadratic non-residue for p = 5 (mod 8)
        return r * pow(2, (p - 1) // 4, p) % p
    return None


def sqrt_minus_d(d: int, p: int) -> Optional[int]:
    """Return a square root of -d (mod p), or None.

    Only the fast cases p = 3 (mod 4) and p = 5 (mod 8) are supported.
    """

    if p % 4 == 3:
        return _sqrt_3_mod_4(-d, p)
    if p % 8 == 5:
        return _sqrt_5_mod_8(-d, p)
    return None


def cornacchia(p: int, d: int = 3) -> Optional[Tuple[int, int]]:
    """Return positive (c, e) such that c^2 + d*e^2 = p, or None.

    p must be a prime; for p = c^2 + 3*e^2 (the default d = 3)
    p must be 1 (mod 3).
    """

    # small primes: exhaustive search
    if p.bit_length() <= BRUTE_FORCE_BITS:
        return _brute_force(p, d)

    # -d must be a quadratic residue
    if jacobi_symbol(-d, p) == -1:
        return None

    u_0 = sqrt_minus_d(d, p)
    if u_0 is None:
        return None

    # descent
    u = [u_0]
    m = [p]
    while True:
        u_i = u[-1]
        m_i = m[-1]
        m_i1 = (u_i * u_i + d) // m_i
        if m_i1 >= m_i:
            # no descent, m = 1 will never be reached
            return None
        if u_i % m_i1 < (m_i1 - u_i) % m_i1:
            u_i1 = u_i % m_i1
        else:
            u_i1 = (m_i1 - u_i) % m_i1
        u.append(u_i1)
        m.append(m_i1)
        if m_i1 == 1:
            break

    # i is the number of steps with m != 1
    i = len(m) - 2
    a = u[i]
    b = 1
    while i > 0:
        div = a * a + d * b * b
        u_prev = u[i - 1]
        # (u*a + d*b, u*b - a) or (d*b - u*a, -u*b - a)
        a_num = u_prev * a + d * b
        b_num = -a + u_prev * b
        if a_num % div != 0 or b_num % div != 0:
            a_num = -u_prev * a + d * b
            b_num = -a - u_prev * b
            if a_num % div != 0 or b_num % div != 0:
                return None
        a, b = a_num // div, b_num // div
        i -= 1

    if a * a + d * b * b != p:
        return None
    return abs(a), abs(b)
