#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
import hmac

from Crypto.Hash import RIPEMD160, keccak

from ethhd.alias import Octets
from ethhd.utils import bytes_from_octets


def ripemd160(octets: Octets) -> bytes:
    """Return the RIPEMD160(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return RIPEMD160.new(octets).digest()


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash160(octets: Octets) -> bytes:
    """Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."""
    return ripemd160(sha256(octets))


def keccak_256(octets: Octets) -> bytes:
    """Return the Keccak-256(*) of the input octet sequence.

    This is the original Keccak submission used by Ethereum,
    not the FIPS 202 SHA3-256 (they differ in the padding).
    """
    octets = bytes_from_octets(octets)
    return keccak.new(digest_bits=256, data=octets).digest()


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    """Return the 64 bytes HMAC-SHA512 of data, keyed with key."""
    return hmac.new(key, data, "sha512").digest()
