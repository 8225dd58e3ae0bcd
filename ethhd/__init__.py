#!/usr/bin/env python3

# Copyright (C) The ethhd developers
#
# This file is part of ethhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ethhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ethhd package."

name = "ethhd"
__version__ = "2026.10.19"
__author__ = "The ethhd developers"
__author_email__ = "devs@ethhd.org"
__copyright__ = "Copyright (C) 2026 The ethhd developers"
__license__ = "MIT License"
