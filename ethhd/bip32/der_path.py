#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A BIP 32 derivation path can be represented as:

- "m/44h/60'/2H/0/10" or "44h/60'/2H/0/10" string
- sequence of integer indexes (even a single int)
- bytes (multiples of 4-bytes little-endian index)

Indexes are uint32 values: the ones not lower than 0x80000000
are hardened and rendered with a hardening symbol.
"""

from typing import List, Sequence, Union

from ethhd.exceptions import InvalidExtendedKey
from ethhd.network import HARDENED

_MAX_INDEX = 0xFFFFFFFF
_MAX_DEPTH = 255

_HARDENING_SYMBOLS = ("'", "h", "H")
# default hardening symbol
_HARDENING = "h"

DerPath = Union[str, Sequence[int], int, bytes]


def _assert_uint32(i: int) -> None:
    if not 0 <= i <= _MAX_INDEX:
        raise InvalidExtendedKey(f"invalid index: {i}")


def hardened_index(i: int) -> int:
    """Return the uint32 index i with the hardening offset added.

    The sum wraps around 32 bits, so that already hardened values
    (0x80000000 + j) map to the non-hardened j.
    """

    _assert_uint32(i)
    return (i + HARDENED) & _MAX_INDEX


def int_from_index_str(s: str) -> int:
    "Return the uint32 index from its string form, e.g. '44h' or \"60'\"."

    s = s.strip()
    is_hardened = s[-1:] in _HARDENING_SYMBOLS
    digits = s[:-1] if is_hardened else s
    try:
        index = int(digits)
    except ValueError as e:
        raise InvalidExtendedKey(f"invalid index: {s!r}") from e

    if not 0 <= index < HARDENED:
        raise InvalidExtendedKey(f"invalid index: {s!r}")
    return index + HARDENED if is_hardened else index


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in _HARDENING_SYMBOLS:
        raise InvalidExtendedKey(f"invalid hardening symbol: {hardening}")
    _assert_uint32(i)
    return f"{i - HARDENED}{hardening}" if i >= HARDENED else str(i)


def _indexes_from_der_path_str(der_path: str) -> List[int]:

    steps = [step.strip() for step in der_path.split("/")]
    if steps[0] in ("m", "M"):
        del steps[0]
    return [int_from_index_str(step) for step in steps if step]


def indexes_from_der_path(der_path: DerPath) -> List[int]:

    if isinstance(der_path, str):
        indexes = _indexes_from_der_path_str(der_path)
    elif isinstance(der_path, int):
        indexes = [der_path]
    elif isinstance(der_path, bytes):
        if len(der_path) % 4:
            err_msg = f"index are not a multiple of 4-bytes: {len(der_path)}"
            raise InvalidExtendedKey(err_msg)
        indexes = [
            int.from_bytes(der_path[n : n + 4], byteorder="little", signed=False)
            for n in range(0, len(der_path), 4)
        ]
    else:
        indexes = [int(i) for i in der_path]

    for i in indexes:
        _assert_uint32(i)

    if len(indexes) > _MAX_DEPTH:
        raise InvalidExtendedKey(f"depth greater than 255: {len(indexes)}")
    return indexes


def str_from_der_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    "Return the normalized 'm/...' string form of the derivation path."

    steps = ["m"]
    steps += [str_from_index_int(i, hardening) for i in indexes_from_der_path(der_path)]
    return "/".join(steps)


def bytes_from_der_path(der_path: DerPath) -> bytes:
    return b"".join(
        i.to_bytes(4, byteorder="little", signed=False)
        for i in indexes_from_der_path(der_path)
    )
