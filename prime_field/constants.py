"""Constants for the Goldilocks prime field.

p = 2^64 - 2^32 + 1. The same value is exposed twice, mirroring the 64-bit
and widened 128-bit views used by the reduction code.
"""

# Goldilocks prime: p = 2^64 - 2^32 + 1
P64 = 0xFFFF_FFFF_0000_0001
P128 = 0xFFFF_FFFF_0000_0001

# 2^64 = p + (2^32 - 1), so 2^64 mod p = LOWER_MASK
LOWER_MASK = 0xFFFF_FFFF

U32_MASK = 0xFFFF_FFFF
U64_MASK = 0xFFFF_FFFF_FFFF_FFFF
U64_SIGN_BIT = 1 << 63
