#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""secp256k1 domain parameters and its scalar field.

Only the scalar field is handled here, with plain integer arithmetic:
private keys are integers in [1, n-1], n being the group order.
Point arithmetic is delegated to libsecp256k1,
see ethhd.ecc.libsecp256k1.
"""

from dataclasses import dataclass

from ethhd.alias import Octets
from ethhd.utils import bytes_from_octets


@dataclass(frozen=True)
class Curve:
    name: str
    # field prime
    p: int
    # group order
    n: int
    # byte-length of field elements and of scalars
    p_size: int
    n_size: int

    def is_valid_scalar(self, q: int) -> bool:
        "Return True if q is a valid private key, i.e. 0 < q < n."
        return 0 < q < self.n

    def int_from_scalar(self, octets: Octets) -> int:
        """Return the integer of a big-endian n_size scalar.

        The value is not reduced mod n and it is not checked to be
        in [1, n-1]: use is_valid_scalar for that.
        """
        octets = bytes_from_octets(octets, self.n_size)
        return int.from_bytes(octets, byteorder="big", signed=False)

    def bytes_from_scalar(self, q: int) -> bytes:
        "Return the big-endian n_size serialization of the scalar."
        return q.to_bytes(self.n_size, byteorder="big", signed=False)

    def add_scalars(self, q1: int, q2: int) -> int:
        return (q1 + q2) % self.n


secp256k1 = Curve(
    name="secp256k1",
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    p_size=32,
    n_size=32,
)
