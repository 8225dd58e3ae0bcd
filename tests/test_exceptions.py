#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ethhd.exceptions` module."

import pytest

from ethhd.exceptions import (
    HDRuntimeError,
    HDValueError,
    HDWalletError,
    InternalDerivationFailure,
    InvalidAddress,
    InvalidChildKey,
    InvalidExtendedKey,
    InvalidSeedLength,
    UnusableSeed,
)


def test_hierarchy() -> None:

    for error in (
        InvalidSeedLength,
        UnusableSeed,
        InvalidChildKey,
        InvalidExtendedKey,
        InvalidAddress,
    ):
        assert issubclass(error, HDValueError)
        assert issubclass(error, ValueError)
        assert issubclass(error, HDWalletError)
        assert not issubclass(error, RuntimeError)

    assert issubclass(InternalDerivationFailure, HDRuntimeError)
    assert issubclass(InternalDerivationFailure, RuntimeError)
    assert issubclass(InternalDerivationFailure, HDWalletError)
    assert not issubclass(InternalDerivationFailure, ValueError)


def test_variants_are_distinct() -> None:

    variants = (
        InvalidSeedLength,
        UnusableSeed,
        InvalidChildKey,
        InvalidExtendedKey,
        InvalidAddress,
        InternalDerivationFailure,
    )
    for error in variants:
        for other in variants:
            assert issubclass(error, other) == (error is other)

    err = InvalidChildKey("invalid child key at index 0")
    with pytest.raises(InvalidChildKey, match="invalid child key at index 0"):
        raise err
