#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP44 Ethereum HD wallet.

The wallet is initialized with a seed (usually 64 bytes from a BIP39
mnemonic and passphrase) and derives its root at "m / 44h / 60h".
Addresses are then derived at
"m / 44h / 60h / account h / flag / address_index h":
note that, for compatibility with already derived addresses,
the address index is hardened and the flag is masked to its lowest bit,
so that any flag value maps to EXTERNAL or CHANGE.
Account and address index are uint32 values hardened in uint32
arithmetic: values not lower than 0x80000000 wrap around
to non-hardened indexes (e.g. account 0x80000005 derives index 5).

The wallet only stores its root, which is never modified:
derived keys are not cached and address() can be called
concurrently from multiple threads.
"""

import logging
from typing import NamedTuple

from coincurve import PrivateKey

from ethhd.address import address_from_prv_key, checksum_address
from ethhd.alias import Octets
from ethhd.bip32.bip32 import ExtendedKey, derive_child, master_key_from_seed
from ethhd.bip32.der_path import hardened_index, str_from_der_path
from ethhd.ecc import libsecp256k1
from ethhd.exceptions import InvalidExtendedKey
from ethhd.network import CHANGE, ETHEREUM, Network

logger = logging.getLogger(__name__)


class DerivedAddress(NamedTuple):
    # 20 bytes
    address: bytes
    # 32 bytes, big-endian
    prv_key: bytes
    # libsecp256k1 key object, for signing
    prv_key_obj: PrivateKey

    @property
    def checksum_address(self) -> str:
        return checksum_address(self.address)

    def __repr__(self) -> str:
        return f"DerivedAddress(address={self.checksum_address})"


class HDWallet:
    """HD wallet holding the 'm / purpose h / coin_type h' extended key."""

    __slots__ = ("_root", "_network")

    def __init__(self, root: ExtendedKey, network: Network = ETHEREUM) -> None:
        if not root.is_private:
            raise InvalidExtendedKey("wallet root must be a private key")
        self._root = root
        self._network = network

    @classmethod
    def from_seed(cls, seed: Octets, network: Network = ETHEREUM) -> "HDWallet":
        master = master_key_from_seed(seed)
        root = master
        for index in network.hardened_prefix:
            root = derive_child(root, index)
        logger.debug(
            "%s wallet initialized at m/%dh/%dh, master 0x%s",
            network.name,
            network.purpose,
            network.coin_type,
            master.fingerprint.hex(),
        )
        return cls(root, network)

    @property
    def root(self) -> ExtendedKey:
        return self._root

    @property
    def network(self) -> Network:
        return self._network

    def _indexes(self, account: int, flag: int, address_index: int) -> tuple:
        return (
            hardened_index(account),
            flag & CHANGE,
            hardened_index(address_index),
        )

    def address_path(self, account: int, flag: int, address_index: int) -> str:
        "Return the full derivation path of the address, e.g. m/44h/60h/2h/0/1h."
        indexes = self._network.hardened_prefix + self._indexes(
            account, flag, address_index
        )
        return str_from_der_path(indexes)

    def address(self, account: int, flag: int, address_index: int) -> DerivedAddress:
        """Return address, private key, and private key object.

        Any flag value is masked to its lowest bit, i.e. EXTERNAL or CHANGE.
        """

        xkey = self._root
        for index in self._indexes(account, flag, address_index):
            xkey = derive_child(xkey, index)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "derived address at %s",
                self.address_path(account, flag, address_index),
            )
        return DerivedAddress(
            address=address_from_prv_key(xkey.key),
            prv_key=xkey.key,
            prv_key_obj=libsecp256k1.prv_key_obj(xkey.key),
        )


def init(seed: Octets) -> HDWallet:
    """Initialize the Ethereum HD wallet for the given seed."""
    return HDWallet.from_seed(seed)
