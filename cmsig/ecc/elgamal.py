#!/usr/bin/env python3

# Copyright (C) The cmsig developers
#
# This file is part of cmsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of cmsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ElGamal-type signature scheme over a prime order curve.

With base point Q of prime order r, private key l in [1, r-1],
and public key P = l*Q, the signature of a message m is (x_R, s):

    e = hf(m) mod r (0 is replaced by 1)
    R = k*Q, k being a random nonce in [1, r-1]
    x_R = R.x (not reduced mod r)
    s = (l*x_R + k*e) mod r

The signature is verified by computing

    R1 = (s/e)*Q - (x_R/e)*P

and checking that R1 is not INF and that R1.x = x_R.

Since only the x-coordinate of R1 is checked,
two public keys verify each signature.

The nonce must never be reused with the same private key:
two signatures sharing it disclose the private key (see crack_prv_key).
"""

import secrets
from dataclasses import InitVar, dataclass, field
from typing import Optional, Tuple, Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from cmsig.alias import HashF, Octets, String
from cmsig.ecc.curve import Curve
from cmsig.ecc.curve_group import Point, mult
from cmsig.ecc.number_theory import mod_inv
from cmsig.exceptions import CMSigRuntimeError, CMSigTypeError, CMSigValueError
from cmsig.hashes import DEFAULT_HF, reduce_to_hlen
from cmsig.utils import bytes_from_octets, int_repr, ints_from_text

_Sig = TypeVar("_Sig", bound="Sig")

_INT_CONFIG = config(encoder=str, decoder=int)

PrvKey = Union[int, String]
PubKey = Union[Point, Tuple[int, int], String]


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ElGamal signature: the (x_R, s) pair.

    x_R is the x-coordinate of the nonce commitment R = k*Q,
    so it is a field element, not reduced mod r;
    s is a scalar in [1, r-1].

    The plain text serialization is x_R and s on two lines;
    JSON serialization encodes both integers as base-10 strings.
    """

    x_R: int = field(metadata=_INT_CONFIG)  # pylint: disable=invalid-name
    s: int = field(metadata=_INT_CONFIG)
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self, ec: Optional[Curve] = None) -> None:
        """Raise an Error if the signature is not well formed.

        If a curve is provided, the scalar ranges are checked too.
        """

        if not isinstance(self.x_R, int) or not isinstance(self.s, int):
            raise CMSigTypeError("signature values must be int")
        if self.x_R < 1:
            raise CMSigValueError(f"x_R not positive: {self.x_R}")
        if self.s < 1:
            raise CMSigValueError(f"s not positive: {self.s}")
        if ec is None:
            return

        if self.x_R % ec.r == 0:
            raise CMSigValueError(f"x_R = 0 (mod r): {int_repr(self.x_R)}")
        if not self.s < ec.r:
            raise CMSigValueError(f"s not in 1..r-1: {int_repr(self.s)}")

    def serialize(self, check_validity: bool = True) -> str:
        "Return the plain text representation: x_R and s on two lines."
        if check_validity:
            self.assert_valid()
        return f"{self.x_R}\n{self.s}"

    @classmethod
    def parse(cls: Type[_Sig], data: String, check_validity: bool = True) -> _Sig:
        "Return a Sig by parsing its plain text representation."
        x_R, s = ints_from_text(data, 2)
        return cls(x_R, s, check_validity)


def int_from_prv_key(prv_key: PrvKey, ec: Curve) -> int:
    """Return a verified-as-valid private key integer.

    The private key can be an int
    or its base-10 plain text serialization.
    """

    if isinstance(prv_key, (str, bytes)):
        (q,) = ints_from_text(prv_key, 1)
    elif isinstance(prv_key, int):
        q = prv_key
    else:
        raise CMSigTypeError(f"not a private key: {prv_key!r}")
    if not 0 < q < ec.r:
        raise CMSigValueError(f"private key not in 1..r-1: {int_repr(q)}")
    return q


def serialize_prv_key(prv_key: PrvKey, ec: Curve) -> str:
    "Return the plain text representation of the private key."
    return str(int_from_prv_key(prv_key, ec))


def point_from_pub_key(pub_key: PubKey, ec: Curve) -> Point:
    """Return a verified-as-valid public key Point.

    The public key can be a Point, a (x, y) tuple,
    or its plain text serialization (x and y on two lines).
    """

    if isinstance(pub_key, Point):
        P = pub_key
    elif isinstance(pub_key, (str, bytes)):
        P = Point(ec.p, tuple(ints_from_text(pub_key, 2)))
    elif isinstance(pub_key, tuple):
        P = Point(ec.p, pub_key)
    else:
        raise CMSigTypeError(f"not a public key: {pub_key!r}")

    if P.is_inf or not ec.is_on_curve(P):
        raise CMSigValueError("not a valid public key")
    return P


def serialize_pub_key(pub_key: PubKey, ec: Curve) -> str:
    "Return the plain text representation: x and y on two lines."
    P = point_from_pub_key(pub_key, ec)
    return f"{P.x}\n{P.y}"


def gen_keys(ec: Curve, prv_key: Optional[PrvKey] = None) -> Tuple[int, Point]:
    """Return a private/public (int, Point) key-pair.

    If the private key is not provided, a random one is drawn
    in [1, r-1] until the public key is not INF.
    """

    if prv_key is not None:
        q = int_from_prv_key(prv_key, ec)
        P = mult(q, ec.Q)
        if P.is_inf:
            raise CMSigValueError("invalid private key: INF public key")
        return q, P

    while True:
        # q in the range [1, ec.r-1]
        q = 1 + secrets.randbelow(ec.r - 1)
        P = mult(q, ec.Q)
        if not P.is_inf:
            return q, P


def challenge_(msg_hash: Octets, ec: Curve) -> int:
    """Return the message digest as scalar in [1, r-1].

    The digest is read as unsigned big-endian integer and reduced mod r:
    a zero result is replaced by 1.
    """
    msg_hash = bytes_from_octets(msg_hash)
    e = int.from_bytes(msg_hash, byteorder="big", signed=False) % ec.r
    return e or 1


def challenge(msg: String, ec: Curve, hf: HashF = DEFAULT_HF) -> int:
    "Return the challenge scalar of a message."
    return challenge_(reduce_to_hlen(msg, hf), ec)


def signature_r(nonce: int, ec: Curve) -> Point:
    "Return the nonce commitment R = k*Q."
    return mult(nonce, ec.Q)


def signature_s(e: int, R: Point, prv_key: int, nonce: int, ec: Curve) -> int:
    "Return s = (l*x_R + k*e) mod r."
    return (prv_key * R.x + nonce * e) % ec.r


def _sign_(e: int, q: int, nonce: int, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge e (for low-cardinality curves).
    # It assumes that e, q, and nonce are in [1, r-1]
    R = signature_r(nonce, ec)
    if R.is_inf or R.x % ec.r == 0:
        raise CMSigRuntimeError("failed to sign: x_R = 0 (mod r)")

    s = signature_s(e, R, q, nonce, ec)
    if s == 0:
        raise CMSigRuntimeError("failed to sign: s = 0")

    return Sig(R.x, s)


def sign_(
    msg: String, prv_key: PrvKey, nonce: PrvKey, ec: Curve, hf: HashF = DEFAULT_HF
) -> Sig:
    """Sign a message with the given nonce.

    This is meant for deterministic testing only:
    production code must use sign, which never reuses a nonce.
    A degenerate nonce raises CMSigRuntimeError.
    """
    q = int_from_prv_key(prv_key, ec)
    k = int_from_prv_key(nonce, ec)
    e = challenge(msg, ec, hf)
    return _sign_(e, q, k, ec)


def get_signature_k(
    msg: String, prv_key: PrvKey, ec: Curve, hf: HashF = DEFAULT_HF
) -> int:
    """Return a random nonce leading to a non-degenerate signature.

    The nonce is drawn in [1, r-1] and redrawn
    while x_R = 0 (mod r) or s = 0.
    """
    q = int_from_prv_key(prv_key, ec)
    e = challenge(msg, ec, hf)
    while True:
        k = 1 + secrets.randbelow(ec.r - 1)
        R = signature_r(k, ec)
        if R.is_inf or R.x % ec.r == 0:
            continue
        if signature_s(e, R, q, k, ec) != 0:
            return k


def sign(msg: String, prv_key: PrvKey, ec: Curve, hf: HashF = DEFAULT_HF) -> Sig:
    """ElGamal signature of a message.

    The message msg is first processed by hf, yielding the challenge
    e = hf(msg) mod r; a fresh random nonce is used for each signature.
    """
    nonce = get_signature_k(msg, prv_key, ec, hf)
    return sign_(msg, prv_key, nonce, ec, hf)


def _assert_as_valid_(e: int, P: Point, x_R: int, s: int, ec: Curve) -> None:
    # Private function for test/dev purposes

    if not 0 < x_R % ec.r < ec.r:
        raise CMSigValueError(f"x_R = 0 (mod r): {int_repr(x_R)}")
    if not 0 < s < ec.r:
        raise CMSigValueError(f"s not in 1..r-1: {int_repr(s)}")

    e_1 = mod_inv(e, ec.r)
    u = s * e_1 % ec.r
    v = x_R * e_1 % ec.r
    R1 = mult(u, ec.Q) - mult(v, P)

    if R1.is_inf:
        raise CMSigRuntimeError("invalid (INF) commitment")
    if R1.x != x_R:
        raise CMSigRuntimeError("signature verification failed")


def assert_as_valid(
    msg: String,
    pub_key: PubKey,
    sig: Union[Sig, String],
    ec: Curve,
    hf: HashF = DEFAULT_HF,
) -> None:
    # It raises Errors, while verify should always return True or False
    if isinstance(sig, Sig):
        sig.assert_valid()
    else:
        sig = Sig.parse(sig)

    P = point_from_pub_key(pub_key, ec)
    e = challenge(msg, ec, hf)
    _assert_as_valid_(e, P, sig.x_R, sig.s, ec)


def verify(
    msg: String,
    pub_key: PubKey,
    sig: Union[Sig, String],
    ec: Curve,
    hf: HashF = DEFAULT_HF,
) -> bool:
    "ElGamal signature verification."
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, pub_key, sig, ec, hf)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def crack_prv_key(
    msg1: String,
    sig1: Union[Sig, String],
    msg2: String,
    sig2: Union[Sig, String],
    ec: Curve,
    hf: HashF = DEFAULT_HF,
) -> Tuple[int, int]:
    """Return the (private key, nonce) pair behind two signatures.

    The two signatures must have been produced with the same nonce
    (hence the same x_R) on different messages.
    """

    if isinstance(sig1, Sig):
        sig1.assert_valid(ec)
    else:
        sig1 = Sig.parse(sig1)
    if isinstance(sig2, Sig):
        sig2.assert_valid(ec)
    else:
        sig2 = Sig.parse(sig2)

    if sig1.x_R != sig2.x_R:
        raise CMSigValueError("not the same x_R in signatures")
    if sig1.s == sig2.s:
        raise CMSigValueError("identical signatures")

    e_1 = challenge(msg1, ec, hf)
    e_2 = challenge(msg2, ec, hf)
    if e_1 == e_2:
        raise CMSigValueError("identical challenges")

    nonce = (sig1.s - sig2.s) * mod_inv(e_1 - e_2, ec.r) % ec.r
    q = (sig1.s - nonce * e_1) * mod_inv(sig1.x_R, ec.r) % ec.r
    return q, nonce
