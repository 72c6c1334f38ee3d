"""
SynHash256 - Digest Distance

Strict hex parsing of 256-bit digests and the Hamming distance between
them. All functions here are pure and safe to call from any thread.
"""

from .synhash import DIGEST_SIZE, HEX_DIGEST_LENGTH, MASK64, NUM_LANES

LANE_HEX_DIGITS = HEX_DIGEST_LENGTH // NUM_LANES

_HEX_CHARS = frozenset('0123456789abcdefABCDEF')


class InvalidDigestFormat(ValueError):
    """Raised when a digest is not 64 hex characters (or 32 raw bytes)."""


def parse_digest(hex_digest: str) -> tuple:
    """
    Split a hex digest into its four 64-bit lanes, in rendering order.

    int(x, 16) alone would accept '0x' prefixes, signs, underscores and
    surrounding whitespace, so every character is checked first.

    Raises:
        InvalidDigestFormat: wrong type, wrong length or non-hex characters
    """
    if not isinstance(hex_digest, str):
        raise InvalidDigestFormat(
            f"digest must be a str, got {type(hex_digest).__name__}")
    if len(hex_digest) != HEX_DIGEST_LENGTH:
        raise InvalidDigestFormat(
            f"digest must be {HEX_DIGEST_LENGTH} hex characters, got {len(hex_digest)}")
    bad = set(hex_digest) - _HEX_CHARS
    if bad:
        raise InvalidDigestFormat(
            f"digest contains non-hex characters: {''.join(sorted(bad))!r}")

    return tuple(int(hex_digest[i:i + LANE_HEX_DIGITS], 16)
                 for i in range(0, HEX_DIGEST_LENGTH, LANE_HEX_DIGITS))


def format_digest(lanes) -> str:
    """Inverse of parse_digest: render four 64-bit lanes as 64 hex digits."""
    lanes = tuple(lanes)
    if len(lanes) != NUM_LANES:
        raise InvalidDigestFormat(f"expected {NUM_LANES} lanes, got {len(lanes)}")
    for lane in lanes:
        if not isinstance(lane, int) or not 0 <= lane <= MASK64:
            raise InvalidDigestFormat(f"lane out of 64-bit range: {lane!r}")
    return ''.join(f'{lane:016x}' for lane in lanes)


def _popcount(x):
    return bin(x).count('1')


def hamming_distance(hex_a: str, hex_b: str) -> int:
    """Number of differing bits between two hex digests (0..256)."""
    lanes_a = parse_digest(hex_a)
    lanes_b = parse_digest(hex_b)
    return sum(_popcount(a ^ b) for a, b in zip(lanes_a, lanes_b))


def _raw_digest_value(digest) -> int:
    if isinstance(digest, str):
        raise InvalidDigestFormat("raw digest must be bytes-like, got str")
    try:
        view = memoryview(digest).cast('B')
    except TypeError:
        raise InvalidDigestFormat(
            f"raw digest must be bytes-like, got {type(digest).__name__}") from None
    if len(view) != DIGEST_SIZE:
        raise InvalidDigestFormat(
            f"raw digest must be {DIGEST_SIZE} bytes, got {len(view)}")
    return int.from_bytes(view, 'big')


def digest_distance(digest_a: bytes, digest_b: bytes) -> int:
    """Number of differing bits between two raw 32-byte digests.

    Accepts any bytes-like object (bytes, bytearray, memoryview, ...).
    """
    diff = _raw_digest_value(digest_a) ^ _raw_digest_value(digest_b)
    return _popcount(diff)
