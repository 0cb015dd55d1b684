# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# domain tags
KEY_DOMAIN_TAG = "ZKPOK|KEY|To|Scalar|v1|".encode("utf-8")
SCH_DOMAIN_TAG = "ZKPOK|SCHNORR|PROOF|v1|".encode("utf-8")

# encoding widths, in bytes
SCALAR_SIZE = 32
POINT_SIZE = 48
PROOF_SIZE = POINT_SIZE + SCALAR_SIZE
DIGEST_SIZE = 64

# entropy source limits
MAX_SHORT_READS = 3
MAX_REJECTIONS = 128
