#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Extended Euclidean algorithm implementation originally from
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

Residue symbols and tests used by the CM curve construction:

* Jacobi symbol (equal to the Legendre symbol for prime moduli)
* quadratic residuosity (Euler's criterion)
* cubic residuosity

Primality is tested with sympy (probabilistic for large integers).
"""

from typing import Optional, Tuple

from sympy import isprime

from cmsig.exceptions import CMSigValueError
from cmsig.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(x, y).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Based on Extended Euclidean Algorithm, see:
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise CMSigValueError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")


def is_prime(n: int) -> bool:
    "Return True if n is (probably) prime."
    return bool(isprime(n))


def jacobi_symbol(a: int, n: int) -> int:
    """Return the Jacobi symbol (a|n) in {-1, 0, 1}.

    n must be an odd positive integer;
    if n is prime, then (a|n) is the Legendre symbol.
    """

    if n < 1 or n % 2 == 0:
        raise CMSigValueError(f"not an odd positive modulus: {int_repr(abs(n))}")

    if a == 0:
        return 0
    if a == 1:
        return 1
    if a < 0:
        # (-1|n) = (-1)^((n-1)/2)
        sign = 1 if n % 4 == 1 else -1
        return sign * jacobi_symbol(-a, n)

    t = 0
    while a % 2 == 0:
        a //= 2
        t += 1
    # (2|n) = (-1)^((n^2-1)/8)
    sign = 1 if t % 2 == 0 or n % 8 in (1, 7) else -1
    # quadratic reciprocity
    if n % 4 == 3 and a % 4 == 3:
        sign = -sign
    if a == 1:
        return sign
    return sign * jacobi_symbol(n % a, a)


def is_quadratic_residue(b: int, p: int) -> bool:
    "Return True if b^((p-1)/2) = 1 (mod p), p being an odd prime."
    return pow(b, (p - 1) // 2, p) == 1


def is_cubic_residue(b: int, p: int) -> Optional[bool]:
    """Return True if b is a cubic residue (mod p), p being a prime.

    If p = 2 (mod 3) every element is a cubic residue.
    None is returned when the test is not applicable (p = 3):
    callers must consider it a failed check.
    """

    if p % 3 == 1:
        return pow(b, (p - 1) // 3, p) == 1
    if p % 3 == 2:
        return True
    return None
