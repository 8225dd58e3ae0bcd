#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ethhd.bip32."""

from ethhd.bip32.bip32 import (
    ExtendedKey,
    crack_prv_key,
    derive,
    derive_child,
    master_key_from_seed,
    xpub_from_xprv,
)
from ethhd.bip32.der_path import (
    DerPath,
    bytes_from_der_path,
    hardened_index,
    indexes_from_der_path,
    int_from_index_str,
    str_from_der_path,
    str_from_index_int,
)

__all__ = [
    "ExtendedKey",
    "DerPath",
    "crack_prv_key",
    "derive",
    "derive_child",
    "master_key_from_seed",
    "xpub_from_xprv",
    "bytes_from_der_path",
    "hardened_index",
    "indexes_from_der_path",
    "int_from_index_str",
    "str_from_der_path",
    "str_from_index_int",
]
