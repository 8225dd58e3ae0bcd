#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The bindings are provided by coincurve.
"""

from __future__ import annotations

from coincurve import PrivateKey, PublicKey

from ethhd.alias import Octets
from ethhd.ecc.curve import secp256k1
from ethhd.exceptions import HDValueError, InternalDerivationFailure
from ethhd.utils import bytes_from_octets

ec = secp256k1


def _secret(prv_key: Octets | int) -> bytes:
    if isinstance(prv_key, int):
        if not 0 <= prv_key < 2 ** (8 * ec.n_size):
            raise HDValueError(f"private key does not fit {ec.n_size} bytes")
        return ec.bytes_from_scalar(prv_key)
    return bytes_from_octets(prv_key, ec.n_size)


def prv_key_obj(prv_key: Octets | int) -> PrivateKey:
    """Return the libsecp256k1 private key object, usable for signing."""
    secret = _secret(prv_key)
    try:
        return PrivateKey(secret)
    except ValueError as e:
        raise InternalDerivationFailure("secp256k1 private key failure") from e


def pub_key_from_prv_key(prv_key: Octets | int, compressed: bool = True) -> bytes:
    """Derive the SEC public key from the private key."""
    secret = _secret(prv_key)
    try:
        pub_key = PrivateKey(secret).public_key
    except ValueError as e:
        raise InternalDerivationFailure("secp256k1 public key failure") from e
    return pub_key.format(compressed=compressed)


def pub_key_from_octets(pub_key: Octets, compressed: bool = True) -> bytes:
    """Return a validated SEC public key, compressed or uncompressed.

    The input can be any valid SEC encoding (33 or 65 bytes):
    the point is checked to be on the curve.
    """
    pub_key = bytes_from_octets(pub_key, (ec.p_size + 1, 2 * ec.p_size + 1))
    try:
        return PublicKey(pub_key).format(compressed=compressed)
    except ValueError as e:
        raise HDValueError(f"invalid public key: 0x{pub_key.hex()}") from e


def add_tweak(pub_key: Octets, tweak: int, compressed: bool = True) -> bytes:
    """Return the SEC encoding of pub_key + tweak*G.

    Fails if tweak is not lower than n
    or if the resulting point is the infinity point.
    """
    pub_key = bytes_from_octets(pub_key, (ec.p_size + 1, 2 * ec.p_size + 1))
    if not 0 <= tweak < ec.n:
        raise HDValueError("tweak not in 0..n-1")
    if tweak == 0:
        # coincurve only accepts tweaks in 1..n-1
        return pub_key_from_octets(pub_key, compressed)
    try:
        result = PublicKey(pub_key).add(ec.bytes_from_scalar(tweak))
    except ValueError as e:
        raise HDValueError("infinity point or invalid public key") from e
    return result.format(compressed=compressed)
