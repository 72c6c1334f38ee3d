"""
SynHash256 - Pure Python Implementation

Non-cryptographic 256-bit fingerprint built on the Xorshift128X generator.
Digests are meant for fast, deterministic similarity comparison (see
distance.py); they offer no collision or preimage resistance.

Construction:
  G: Xorshift128X generator, 128-bit state reset to fixed seeds per digest
  B: Block hasher, forward + reverse byte pass over an 8-byte sub-block
  M: 32-byte blocks (zero padded), sub-blocks hashed in forward and
     reverse order, XOR-accumulated into four 64-bit lanes
  R: Lanes rendered lane 3 first, big-endian, 64 hex digits

Each digest computation owns its own generator, so concurrent hashing
needs no locking.
"""

import struct

MASK64 = 0xFFFFFFFFFFFFFFFF
SEED_S0 = 0x5555555555555555
SEED_S1 = 0xAAAAAAAAAAAAAAAA

SHIFT_INPUT = 30
SHIFT_LEFT = 23
SHIFT_RIGHT_B = 18
SHIFT_RIGHT_A = 5

SUB_BLOCK_SIZE = 8
NUM_LANES = 4
BLOCK_SIZE = SUB_BLOCK_SIZE * NUM_LANES
DIGEST_SIZE = 32
HEX_DIGEST_LENGTH = DIGEST_SIZE * 2

_ZERO_BLOCK = bytes(BLOCK_SIZE)
_SUB_OFFSETS = tuple(range(0, BLOCK_SIZE, SUB_BLOCK_SIZE))
_4Q_PACK = struct.Struct('>4Q').pack


class Xorshift128X:
    """Xorshift128X mixing generator with explicit, per-instance state."""

    __slots__ = ('s0', 's1')

    def __init__(self, s0: int = SEED_S0, s1: int = SEED_S1):
        self.s0 = s0 & MASK64
        self.s1 = s1 & MASK64

    @property
    def state(self):
        return self.s0, self.s1

    def reset(self):
        self.s0 = SEED_S0
        self.s1 = SEED_S1

    def copy(self) -> 'Xorshift128X':
        return Xorshift128X(self.s0, self.s1)

    def mix(self, x: int) -> int:
        """Mix x into the state and return the pre-update sum s0 + s1."""
        c = (x << SHIFT_INPUT) & MASK64
        b = self.s0
        a = self.s1
        result = (a + b) & MASK64

        self.s0 = a ^ c
        b ^= (b << SHIFT_LEFT) & MASK64
        self.s1 = b ^ a ^ (b >> SHIFT_RIGHT_B) ^ (a >> SHIFT_RIGHT_A)
        return result

    def __repr__(self):
        return f'Xorshift128X(s0=0x{self.s0:016x}, s1=0x{self.s1:016x})'


def hash_block(generator: Xorshift128X, block) -> int:
    """Fold up to 8 bytes through the generator, forward then reverse.

    Both passes draw fresh generator outputs, so the reverse pass does not
    cancel the forward one. Short blocks are used as-is (no padding).
    """
    mix = generator.mix
    result = 0
    for byte in block:
        result ^= mix(byte)
    for byte in reversed(block):
        result ^= mix(byte)
    return result


def _absorb_block(generator, lanes, block):
    subs = [block[off:off + SUB_BLOCK_SIZE] for off in _SUB_OFFSETS]

    forward = [hash_block(generator, sub) for sub in subs]
    # Reverse sub-block order: offsets 24, 16, 8, 0
    backward = [hash_block(generator, sub) for sub in reversed(subs)]

    for i in range(NUM_LANES):
        lanes[i] ^= forward[i] ^ backward[i]


def _as_bytes(data):
    if isinstance(data, str):
        raise TypeError('Strings must be encoded before hashing')
    try:
        return memoryview(data).cast('B')
    except TypeError:
        raise TypeError(
            f"object supporting the buffer API required, got {type(data).__name__!r}"
        ) from None


class SynHash:
    """Incremental SynHash256 hasher with a hashlib-style interface.

    Any split of the message across update() calls produces the same
    digest as synhash() on the whole message. Reading the digest leaves
    the running state untouched.
    """

    name = 'synhash256'
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data=b''):
        self._generator = Xorshift128X()
        self._lanes = [0] * NUM_LANES
        self._buffer = bytearray()
        self._length = 0
        self.update(data)

    def update(self, data):
        view = _as_bytes(data)
        self._length += len(view)
        self._buffer += view

        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        if not full:
            return
        buffer = bytes(self._buffer[:full])
        for offset in range(0, full, BLOCK_SIZE):
            _absorb_block(self._generator, self._lanes,
                          buffer[offset:offset + BLOCK_SIZE])
        del self._buffer[:full]

    def _final_lanes(self):
        # An empty message still hashes one all-zero block
        if self._length and not self._buffer:
            return list(self._lanes)

        generator = self._generator.copy()
        lanes = list(self._lanes)
        tail = bytes(self._buffer)
        _absorb_block(generator, lanes, tail + _ZERO_BLOCK[len(tail):])
        return lanes

    def digest(self) -> bytes:
        lanes = self._final_lanes()
        return _4Q_PACK(lanes[3], lanes[2], lanes[1], lanes[0])

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'SynHash':
        other = SynHash.__new__(SynHash)
        other._generator = self._generator.copy()
        other._lanes = list(self._lanes)
        other._buffer = bytearray(self._buffer)
        other._length = self._length
        return other


def synhash(data: bytes) -> bytes:
    """Compute SynHash256 of the given input. Returns 32 bytes."""
    return SynHash(data).digest()


def synhash_hex(data: bytes) -> str:
    """Return the 64-character lowercase hex SynHash256 digest."""
    return SynHash(data).hexdigest()
