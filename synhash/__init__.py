"""
SynHash256 - Python Implementation

Non-cryptographic 256-bit fingerprinting with Hamming-distance comparison.

Usage:
    from synhash import synhash, synhash_hex, hamming_distance

    digest = synhash(b"Hello")        # 32 bytes
    hex_str = synhash_hex(b"Hello")   # 64-char hex string

    hamming_distance(synhash_hex(b"hello, world 1"),
                     synhash_hex(b"hello, world 2"))   # bits that differ

    h = SynHash()                     # incremental, hashlib-style
    h.update(b"Hel")
    h.update(b"lo")
    h.hexdigest() == hex_str
"""

from .synhash import SynHash, Xorshift128X, hash_block, synhash, synhash_hex
from .distance import (InvalidDigestFormat, digest_distance, format_digest,
                       hamming_distance, parse_digest)

__all__ = [
    'synhash', 'synhash_hex', 'SynHash', 'Xorshift128X', 'hash_block',
    'hamming_distance', 'digest_distance', 'parse_digest', 'format_digest',
    'InvalidDigestFormat',
]
__version__ = '1.0.0'
