#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "642ce4e20f09c9f4d285c2b336063eaafbe4cb06dece8134f3a64bdd8f8c0c24"
# "02 39a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2"
#
# use ethhd.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for seeds (16 to 64 bytes), chain codes (32 bytes),
# private keys (32 bytes), SEC public keys (33 or 65 bytes),
# parent fingerprints (4 bytes), addresses (20 bytes), etc.
Octets = Union[bytes, str]
