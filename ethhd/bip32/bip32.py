#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet functions.

A deterministic wallet is a hash-chain of private/public key pairs that
derives from a single root, which is the only element requiring backup.
Moreover, there are schemes where public keys can be calculated without
accessing private keys.

A hierarchical deterministic wallet is a tree of multiple hash-chains,
derived from a single root, allowing for selective sharing of keypair
chains.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki.

Extended keys only live in memory: the 78 bytes serialization
and its base58 encoding are not supported.
The tree is never materialized: each derivation returns fresh
ExtendedKey instances, parents are never modified.

Child keys that do not exist (left half of the HMAC not lower than n,
zero private key, or infinity public key) raise InvalidChildKey;
BIP32 suggests to proceed with the next index,
but that is left to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from ethhd.alias import Octets
from ethhd.bip32.der_path import DerPath, indexes_from_der_path, str_from_der_path
from ethhd.ecc import libsecp256k1
from ethhd.ecc.curve import secp256k1
from ethhd.exceptions import (
    HDValueError,
    InvalidChildKey,
    InvalidExtendedKey,
    InvalidSeedLength,
    UnusableSeed,
)
from ethhd.hashes import hash160, hmac_sha512
from ethhd.network import HARDENED, MASTER_KEY_HMAC_KEY, MAX_SEED_BYTES, MIN_SEED_BYTES
from ethhd.utils import bytes_from_octets

logger = logging.getLogger(__name__)

ec = secp256k1


_KEY_SIZE: List[Tuple[str, int]] = [
    ("parent_fingerprint", 4),
    ("chain_code", 32),
]


@dataclass(frozen=True)
class ExtendedKey:
    depth: int
    parent_fingerprint: bytes
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes
    # 32 bytes private key or 33 bytes compressed public key
    key: bytes = field(repr=False)
    is_private: bool

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def prv_key_int(self) -> int:
        if not self.is_private:
            raise InvalidExtendedKey("not a private key")
        return int.from_bytes(self.key, byteorder="big", signed=False)

    @property
    def pub_key(self) -> bytes:
        "Return the compressed SEC public key."
        if self.is_private:
            return libsecp256k1.pub_key_from_prv_key(self.key)
        return self.key

    @property
    def pub_key_uncompressed(self) -> bytes:
        "Return the uncompressed SEC public key."
        if self.is_private:
            return libsecp256k1.pub_key_from_prv_key(self.key, compressed=False)
        return libsecp256k1.pub_key_from_octets(self.key, compressed=False)

    @property
    def identifier(self) -> bytes:
        return hash160(self.pub_key)

    @property
    def fingerprint(self) -> bytes:
        return self.identifier[:4]

    def __init__(
        self,
        depth: int,
        parent_fingerprint: Octets,
        index: int,
        chain_code: Octets,
        key: Octets,
        is_private: bool = True,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "depth", depth)
        object.__setattr__(
            self, "parent_fingerprint", bytes_from_octets(parent_fingerprint)
        )
        object.__setattr__(self, "index", index)
        object.__setattr__(self, "chain_code", bytes_from_octets(chain_code))
        object.__setattr__(self, "key", bytes_from_octets(key))
        object.__setattr__(self, "is_private", bool(is_private))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise InvalidExtendedKey(err_msg)

        if not 0 <= int(self.index) <= 0xFFFFFFFF:
            raise InvalidExtendedKey(f"invalid index: {self.index}")

        if not 0 <= int(self.depth) <= 255:
            raise InvalidExtendedKey(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise InvalidExtendedKey(err_msg)
            if self.index != 0:
                err_msg = f"zero depth with non-zero index: {self.index}"
                raise InvalidExtendedKey(err_msg)

        if self.is_private:
            if len(self.key) != ec.n_size:
                err_msg = f"invalid private key length: {len(self.key)} bytes"
                err_msg += f" instead of {ec.n_size}"
                raise InvalidExtendedKey(err_msg)
            # the private key value is not reported: it might be almost valid
            if not ec.is_valid_scalar(ec.int_from_scalar(self.key)):
                raise InvalidExtendedKey("invalid private key not in 1..n-1")
        else:
            if len(self.key) != ec.p_size + 1:
                err_msg = f"invalid public key length: {len(self.key)} bytes"
                err_msg += f" instead of {ec.p_size + 1}"
                raise InvalidExtendedKey(err_msg)
            if self.key[0] not in (2, 3):
                err_msg = "invalid public key prefix not in (0x02, 0x03): "
                err_msg += f"0x{self.key[:1].hex()}"
                raise InvalidExtendedKey(err_msg)
            try:
                libsecp256k1.pub_key_from_octets(self.key)
            except HDValueError as e:
                err_msg = f"invalid public key: 0x{self.key.hex()}"
                raise InvalidExtendedKey(err_msg) from e


def master_key_from_seed(seed: Octets) -> ExtendedKey:
    """Return BIP32 root master extended private key from seed."""

    seed = bytes_from_octets(seed)
    # the seed itself is never reported in error messages
    bitlength = len(seed) * 8
    if len(seed) < MIN_SEED_BYTES:
        raise InvalidSeedLength(f"too few bits for seed: {bitlength}")
    if len(seed) > MAX_SEED_BYTES:
        raise InvalidSeedLength(f"too many bits for seed: {bitlength}")

    hmac_ = hmac_sha512(MASTER_KEY_HMAC_KEY, seed)
    q = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    if not ec.is_valid_scalar(q):
        raise UnusableSeed("master private key not in 1..n-1")

    xkey = ExtendedKey(
        depth=0,
        parent_fingerprint=b"\x00" * 4,
        index=0,
        chain_code=hmac_[32:],
        key=hmac_[:32],
        is_private=True,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "master key 0x%s from %d bits seed", xkey.fingerprint.hex(), bitlength
        )
    return xkey


def xpub_from_xprv(xprv: ExtendedKey) -> ExtendedKey:
    """Neutered Derivation (ND).

    Derivation of the extended public key corresponding to an extended
    private key (“neutered” as it removes the ability to sign transactions).
    """

    if not xprv.is_private:
        raise InvalidExtendedKey("not a private key")

    return ExtendedKey(
        depth=xprv.depth,
        parent_fingerprint=xprv.parent_fingerprint,
        index=xprv.index,
        chain_code=xprv.chain_code,
        key=xprv.pub_key,
        is_private=False,
    )


def derive_child(xkey: ExtendedKey, index: int) -> ExtendedKey:
    """Child Key Derivation (CKD) at the given index.

    Private parents give private children (CKDpriv),
    public parents give public children (CKDpub):
    hardened derivation (index >= 0x80000000) requires a private parent.
    """

    if not 0 <= index <= 0xFFFFFFFF:
        raise InvalidExtendedKey(f"invalid index: {index}")
    if xkey.depth >= 255:
        raise InvalidExtendedKey(f"depth greater than 255: {xkey.depth + 1}")

    pub_key = xkey.pub_key
    index_bytes = index.to_bytes(4, byteorder="big", signed=False)
    if index >= HARDENED:
        if not xkey.is_private:
            raise InvalidChildKey("invalid hardened derivation from public key")
        hmac_ = hmac_sha512(xkey.chain_code, b"\x00" + xkey.key + index_bytes)
    else:
        hmac_ = hmac_sha512(xkey.chain_code, pub_key + index_bytes)

    offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    if offset >= ec.n:
        err_msg = f"invalid child key at index {index}: offset not in 0..n-1"
        raise InvalidChildKey(err_msg)

    if xkey.is_private:
        q = ec.add_scalars(xkey.prv_key_int, offset)
        if q == 0:
            err_msg = f"invalid child key at index {index}: zero private key"
            raise InvalidChildKey(err_msg)
        key = ec.bytes_from_scalar(q)
    else:
        try:
            key = libsecp256k1.add_tweak(pub_key, offset)
        except HDValueError as e:
            err_msg = f"invalid child key at index {index}: infinity point"
            raise InvalidChildKey(err_msg) from e

    return ExtendedKey(
        depth=xkey.depth + 1,
        parent_fingerprint=hash160(pub_key)[:4],
        index=index,
        chain_code=hmac_[32:],
        key=key,
        is_private=xkey.is_private,
    )


def derive(xkey: ExtendedKey, der_path: DerPath) -> ExtendedKey:
    """Derive a BIP32 key across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/44h/60'/2H/0/10"
    - iterable integer indexes
    - one single integer index
    - bytes in multiples of the 4-bytes index

    DerPath is case/blank/extra-slash insensitive
    (e.g. "M /44h / 60' /2H // 0/ 10 / ").
    """

    indexes = indexes_from_der_path(der_path)

    final_depth = xkey.depth + len(indexes)
    if final_depth > 255:
        err_msg = f"final depth greater than 255: {final_depth}"
        raise InvalidExtendedKey(err_msg)

    for index in indexes:
        xkey = derive_child(xkey, index)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "derived 0x%s at relative path %s",
            xkey.fingerprint.hex(),
            str_from_der_path(indexes),
        )
    return xkey


def crack_prv_key(parent_xpub: ExtendedKey, child_xprv: ExtendedKey) -> ExtendedKey:
    """Return the parent private key from a non-hardened child private key.

    Knowledge of the parent extended public key and of any
    non-hardened child private key is enough to compute
    the parent private key: hardened derivation prevents this.
    """

    if parent_xpub.is_private:
        raise InvalidExtendedKey("extended parent key is not a public key")

    if not child_xprv.is_private:
        raise InvalidExtendedKey("extended child key is not a private key")

    # check depth
    if child_xprv.depth != parent_xpub.depth + 1:
        raise InvalidExtendedKey("not a parent's child: wrong depths")

    # check fingerprint
    if child_xprv.parent_fingerprint != parent_xpub.fingerprint:
        raise InvalidExtendedKey("not a parent's child: wrong parent fingerprint")

    if child_xprv.is_hardened:
        raise InvalidExtendedKey("hardened child derivation")

    hmac_ = hmac_sha512(
        parent_xpub.chain_code,
        parent_xpub.key + child_xprv.index.to_bytes(4, byteorder="big", signed=False),
    )
    offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    parent_q = (child_xprv.prv_key_int - offset) % ec.n

    return ExtendedKey(
        depth=parent_xpub.depth,
        parent_fingerprint=parent_xpub.parent_fingerprint,
        index=parent_xpub.index,
        chain_code=parent_xpub.chain_code,
        key=ec.bytes_from_scalar(parent_q),
        is_private=True,
    )
