#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ethereum addresses.

An address is the last 20 bytes of the Keccak-256 hash
of the 64 bytes uncompressed public key x||y
(i.e. without the 0x04 SEC prefix).

Its usual text form is the EIP-55 mixed-case checksum encoding:
https://eips.ethereum.org/EIPS/eip-55
"""

from __future__ import annotations

from ethhd.alias import Octets
from ethhd.ecc import libsecp256k1
from ethhd.exceptions import InvalidAddress
from ethhd.hashes import keccak_256

ADDRESS_SIZE = 20


def address_from_pub_key(pub_key: Octets) -> bytes:
    """Return the address of a compressed or uncompressed SEC public key."""

    pub_key = libsecp256k1.pub_key_from_octets(pub_key, compressed=False)
    return keccak_256(pub_key[1:])[-ADDRESS_SIZE:]


def address_from_prv_key(prv_key: Octets | int) -> bytes:
    """Return the address of a private key."""

    pub_key = libsecp256k1.pub_key_from_prv_key(prv_key, compressed=False)
    return keccak_256(pub_key[1:])[-ADDRESS_SIZE:]


def _checksum_hex(hex_address: str) -> str:
    # the i-th hex digit is uppercased
    # if the i-th nibble of Keccak-256(lowercase hex) is >= 8
    hash_hex = keccak_256(hex_address.encode("ascii")).hex()
    return "".join(
        c.upper() if int(h, 16) >= 8 else c for c, h in zip(hex_address, hash_hex)
    )


def checksum_address(address: bytes) -> str:
    """Return the EIP-55 checksum encoding of a 20 bytes address."""

    if len(address) != ADDRESS_SIZE:
        err_msg = f"invalid address length: {len(address)} bytes"
        err_msg += f" instead of {ADDRESS_SIZE}"
        raise InvalidAddress(err_msg)
    return "0x" + _checksum_hex(address.hex())


def bytes_from_address(address: str) -> bytes:
    """Return the 20 bytes of a 0x-prefixed hex address.

    All-lowercase and all-uppercase addresses carry no checksum;
    mixed-case ones must be valid EIP-55 encodings.
    """

    address = address.strip()
    if not address.startswith(("0x", "0X")):
        raise InvalidAddress(f"missing 0x prefix: {address}")
    hex_address = address[2:]
    if len(hex_address) != 2 * ADDRESS_SIZE:
        raise InvalidAddress(f"invalid address length: {address}")
    try:
        result = bytes.fromhex(hex_address)
    except ValueError as e:
        raise InvalidAddress(f"invalid hex address: {address}") from e
    if len(result) != ADDRESS_SIZE:
        raise InvalidAddress(f"invalid hex address: {address}")

    if hex_address not in (hex_address.lower(), hex_address.upper()):
        if hex_address != _checksum_hex(hex_address.lower()):
            raise InvalidAddress(f"invalid EIP-55 checksum: {address}")
    return result
