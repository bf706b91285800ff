"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Framing: bytes -> bits, padded to a multiple of 512 bits (padding.py)
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds of compression function
- Output: 256-bit digest rendered as 64 lowercase hex characters

Every word operation is masked to 32 bits; Python integers never overflow,
so without the mask additions and NOT would silently widen.
"""

import logging
from typing import List, Sequence

from .bits import MASK_32, bits_to_words, bytes_to_bits, decode_input, to_hex
from .constants import IV, K
from .padding import BLOCK_BITS, pad, split


logger = logging.getLogger(__name__)

SCHEDULE_LENGTH = 64
ROUNDS = 64
DIGEST_HEX_LENGTH = 64


# ============================================================================
# Word Operations
# ============================================================================

def add(*words: int) -> int:
    """Addition modulo 2**32."""
    return sum(words) & MASK_32


def rotr(n: int, x: int) -> int:
    """Right rotate a 32-bit integer by n positions."""
    return ((x >> n) | (x << (32 - n))) & MASK_32


def shr(n: int, x: int) -> int:
    """Logical right shift (zero fill)."""
    return (x & MASK_32) >> n


def sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return rotr(7, x) ^ rotr(18, x) ^ shr(3, x)


def sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return rotr(17, x) ^ rotr(19, x) ^ shr(10, x)


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return rotr(2, x) ^ rotr(13, x) ^ rotr(22, x)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return rotr(6, x) ^ rotr(11, x) ^ rotr(25, x)


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ ((~x & MASK_32) & z)


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


# ============================================================================
# Message Schedule & Compression
# ============================================================================

def build_schedule(block: str) -> List[int]:
    """
    Expand one 512-bit block into the 64-word message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    if len(block) != BLOCK_BITS:
        raise ValueError(f"Block must be {BLOCK_BITS} bits, got {len(block)}")

    w = bits_to_words(block)
    for i in range(16, SCHEDULE_LENGTH):
        w.append(add(sigma1(w[i - 2]), w[i - 7], sigma0(w[i - 15]), w[i - 16]))
    return w


def compress(
    initial: Sequence[int],
    schedule: Sequence[int],
    constants: Sequence[int] = K,
) -> List[int]:
    """
    Perform 64 rounds of compression on the state.

    Args:
        initial: Current hash state (8 32-bit words); not modified
        schedule: Message schedule (64 32-bit words)
        constants: Round constants (64 32-bit words)

    Returns:
        New hash state
    """
    a, b, c, d, e, f, g, h = initial

    for i in range(ROUNDS):
        t1 = add(schedule[i], constants[i], big_sigma1(e), ch(e, f, g), h)
        t2 = add(big_sigma0(a), maj(a, b, c))

        h = g
        g = f
        f = e
        e = add(d, t1)
        d = c
        c = b
        b = a
        a = add(t1, t2)

    return [add(s, r) for s, r in zip(initial, (a, b, c, d, e, f, g, h))]


# ============================================================================
# Public API
# ============================================================================

def sha256_hex(data: bytes) -> str:
    """
    Compute the SHA-256 hash and return it as hexadecimal text.

    Args:
        data: Input bytes to hash

    Returns:
        64-character lowercase hexadecimal string

    Example:
        >>> sha256_hex(b"hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    blocks = split(pad(bytes_to_bits(data)))
    logger.debug(f"Hashing {len(data)} bytes in {len(blocks)} block(s)")

    state = list(IV)
    for block in blocks:
        state = compress(state, build_schedule(block), K)

    return ''.join(to_hex(word) for word in state)


def sha256(data: bytes) -> bytes:
    """Compute the 32-byte SHA-256 digest of data."""
    return bytes.fromhex(sha256_hex(data))


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """Compute the SHA-256 digest of a string."""
    return sha256(text.encode(encoding))


def hash_input(text: str, encoding: str = "ascii") -> str:
    """
    Hash caller-supplied text.

    Args:
        text: Text to hash, or a "0x"-prefixed hex string
        encoding: "ascii" or "hex"

    Returns:
        64-character lowercase hexadecimal digest

    Raises:
        MalformedInput: If hex input cannot be decoded
    """
    return sha256_hex(decode_input(text, encoding))


# Self-test when run directly
if __name__ == "__main__":
    test_cases = [
        ("", "ascii", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        ("abc", "ascii", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        ("0x616263", "hex", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        ("abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq", "ascii",
         "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    ]

    print("SHA-256 Implementation Test")
    print("=" * 60)

    all_passed = True
    for text, encoding, expected in test_cases:
        result = hash_input(text, encoding)
        passed = result == expected
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\nInput:    {text[:50]!r} ({encoding})")
        print(f"Expected: {expected}")
        print(f"Got:      {result}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
