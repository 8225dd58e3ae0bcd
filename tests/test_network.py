#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ethhd.network` module."

import dataclasses

import pytest

from ethhd.exceptions import HDValueError
from ethhd.network import (
    CHANGE,
    ETHEREUM,
    EXTERNAL,
    HARDENED,
    MASTER_KEY_HMAC_KEY,
    MAX_SEED_BYTES,
    MIN_SEED_BYTES,
    Network,
)


def test_constants() -> None:

    assert HARDENED == 2**31
    assert (EXTERNAL, CHANGE) == (0, 1)
    assert MASTER_KEY_HMAC_KEY == b"Bitcoin seed"
    assert (MIN_SEED_BYTES, MAX_SEED_BYTES) == (16, 64)


def test_ethereum() -> None:

    assert ETHEREUM.name == "ethereum"
    assert ETHEREUM.purpose == 44
    assert ETHEREUM.coin_type == 60
    assert ETHEREUM.hardened_prefix == (0x8000002C, 0x8000003C)

    assert ETHEREUM == Network("ethereum", 44, 60)

    with pytest.raises(dataclasses.FrozenInstanceError):
        ETHEREUM.coin_type = 0  # type: ignore


def test_invalid_network() -> None:

    with pytest.raises(HDValueError, match="invalid purpose: "):
        Network("invalid", HARDENED, 60)

    with pytest.raises(HDValueError, match="invalid coin_type: "):
        Network("invalid", 44, -1)
