#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The set is closed: each failure mode of the key derivation has its own
class, so that callers can discriminate on the class instead of
parsing messages.

All of them derive from HDWalletError; they are also regular
ValueError or RuntimeError, so users not interested in the details
can just catch those.
"""


class HDWalletError(Exception):
    pass


class HDValueError(HDWalletError, ValueError):
    pass


class HDRuntimeError(HDWalletError, RuntimeError):
    pass


class InvalidSeedLength(HDValueError):
    """Seed length outside the accepted BIP32 range."""


class UnusableSeed(HDValueError):
    """The master private key candidate is zero or not lower than n."""


class InvalidChildKey(HDValueError):
    """The child key for the requested index does not exist.

    Either the HMAC left half is not lower than n, or the child private
    key is zero, or the child public key is the infinity point.
    Derivation is not retried with the next index.
    """


class InvalidExtendedKey(HDValueError):
    """Malformed extended key, index, or derivation path."""


class InvalidAddress(HDValueError):
    """Malformed address or wrong EIP-55 checksum."""


class InternalDerivationFailure(HDRuntimeError):
    """Unexpected failure of the underlying elliptic curve primitive."""
