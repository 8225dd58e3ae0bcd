#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Derivation constants and the BIP44 network configuration.

All values are fixed by BIP32, BIP44, and SLIP44:
they are not meant to be changed at runtime.
"""

from dataclasses import dataclass

from ethhd.exceptions import HDValueError

# BIP32 hardened derivation offset
HARDENED = 0x80000000

# BIP44 change level
EXTERNAL = 0x00  # receiving/deposit addresses
CHANGE = 0x01  # internal chain, change addresses

# BIP32 master key generation: HMAC key and accepted seed lengths
MASTER_KEY_HMAC_KEY = b"Bitcoin seed"
MIN_SEED_BYTES = 16
MAX_SEED_BYTES = 64


@dataclass(frozen=True)
class Network:
    name: str
    # BIP44 "m / purpose' / coin_type'" prefix, both hardened when used
    purpose: int
    coin_type: int

    def __init__(self, name: str, purpose: int, coin_type: int) -> None:

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "purpose", int(purpose))
        object.__setattr__(self, "coin_type", int(coin_type))

        for key in ("purpose", "coin_type"):
            value = getattr(self, key)
            if not 0 <= value < HARDENED:
                raise HDValueError(f"invalid {key}: {value}")

    @property
    def hardened_prefix(self) -> tuple:
        "Return the hardened indexes of the 'm / purpose' / coin_type'' prefix."
        return (HARDENED + self.purpose, HARDENED + self.coin_type)


# SLIP44 coin type 60
ETHEREUM = Network(name="ethereum", purpose=44, coin_type=60)
