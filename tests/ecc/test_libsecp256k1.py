#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ethhd.ecc.libsecp256k1` module."

import pytest

from ethhd.ecc import libsecp256k1
from ethhd.ecc.curve import secp256k1
from ethhd.exceptions import HDValueError, InternalDerivationFailure

ec = secp256k1

G_X = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G_Y = "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
G_COMPRESSED = "02" + G_X
G_UNCOMPRESSED = "04" + G_X + G_Y
# 2G
G2_COMPRESSED = "02c6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5"


def test_pub_key_from_prv_key() -> None:

    for prv_key in (1, "00" * 31 + "01", b"\x00" * 31 + b"\x01"):
        pub_key = libsecp256k1.pub_key_from_prv_key(prv_key)
        assert pub_key.hex() == G_COMPRESSED
        pub_key = libsecp256k1.pub_key_from_prv_key(prv_key, compressed=False)
        assert pub_key.hex() == G_UNCOMPRESSED

    assert libsecp256k1.pub_key_from_prv_key(2).hex() == G2_COMPRESSED

    # opposite points share the x-coordinate
    pub_key = libsecp256k1.pub_key_from_prv_key(ec.n - 1)
    assert pub_key.hex() == "03" + G_X


def test_invalid_prv_key() -> None:

    for prv_key in (0, ec.n, b"\xff" * 32):
        with pytest.raises(InternalDerivationFailure) as exc_info:
            libsecp256k1.pub_key_from_prv_key(prv_key)
        assert isinstance(exc_info.value.__cause__, ValueError)

        with pytest.raises(InternalDerivationFailure):
            libsecp256k1.prv_key_obj(prv_key)

    # wrong size input is not a binding failure
    for prv_key in (b"\x01" * 31, b"\x01" * 33, "01" * 31):
        with pytest.raises(HDValueError, match="invalid size: ") as exc_info:
            libsecp256k1.pub_key_from_prv_key(prv_key)
        assert not isinstance(exc_info.value, InternalDerivationFailure)
        with pytest.raises(HDValueError, match="invalid size: "):
            libsecp256k1.prv_key_obj(prv_key)

    for prv_key in (-1, 2**256):
        with pytest.raises(HDValueError, match="private key does not fit 32 bytes"):
            libsecp256k1.pub_key_from_prv_key(prv_key)
        with pytest.raises(HDValueError, match="private key does not fit 32 bytes"):
            libsecp256k1.prv_key_obj(prv_key)


def test_prv_key_obj() -> None:

    prv_key_obj = libsecp256k1.prv_key_obj(1)
    assert prv_key_obj.secret == ec.bytes_from_scalar(1)
    assert prv_key_obj.public_key.format().hex() == G_COMPRESSED


def test_pub_key_from_octets() -> None:

    for pub_key in (G_COMPRESSED, G_UNCOMPRESSED, bytes.fromhex(G_COMPRESSED)):
        assert libsecp256k1.pub_key_from_octets(pub_key).hex() == G_COMPRESSED
        pub_key = libsecp256k1.pub_key_from_octets(pub_key, compressed=False)
        assert pub_key.hex() == G_UNCOMPRESSED

    # 5 is not a valid x-coordinate in secp256k1
    invalid_x = "02" + "00" * 31 + "05"
    with pytest.raises(HDValueError, match="invalid public key: "):
        libsecp256k1.pub_key_from_octets(invalid_x)

    with pytest.raises(HDValueError, match="invalid public key: "):
        libsecp256k1.pub_key_from_octets("05" + G_X)

    with pytest.raises(HDValueError, match="invalid size: "):
        libsecp256k1.pub_key_from_octets(G_X)


def test_add_tweak() -> None:

    assert libsecp256k1.add_tweak(G_COMPRESSED, 0).hex() == G_COMPRESSED
    assert libsecp256k1.add_tweak(G_COMPRESSED, 1).hex() == G2_COMPRESSED
    pub_key = libsecp256k1.add_tweak(G_COMPRESSED, 1, compressed=False)
    assert pub_key == libsecp256k1.pub_key_from_prv_key(2, compressed=False)

    # G + (n-1)G is the infinity point
    with pytest.raises(HDValueError, match="infinity point"):
        libsecp256k1.add_tweak(G_COMPRESSED, ec.n - 1)

    for tweak in (-1, ec.n):
        with pytest.raises(HDValueError, match="tweak not in 0..n-1"):
            libsecp256k1.add_tweak(G_COMPRESSED, tweak)
