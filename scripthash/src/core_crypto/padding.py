"""
SHA-256 Message Framing

Pads a bit string according to FIPS 180-4 section 5.1.1 and cuts it into
512-bit blocks:
1. Append a single '1' bit
2. Append k zero bits, k the smallest value with (L + 1 + k) ≡ 448 (mod 512)
3. Append L as a 64-bit big-endian integer
"""

from typing import List

from .bits import to_bits


BLOCK_BITS = 512
LENGTH_FIELD_BITS = 64
MAX_MESSAGE_BITS = (1 << LENGTH_FIELD_BITS) - 1


class MessageTooLarge(ValueError):
    """Raised when a message length does not fit the 64-bit length field."""
    pass


def zero_padding_length(bit_length: int) -> int:
    """Number of zero bits appended after the '1' bit for a message of bit_length."""
    return (448 - bit_length - 1) % BLOCK_BITS


def pad(bits: str) -> str:
    """
    Pad a message bit string to a multiple of 512 bits.

    Args:
        bits: Message as a '0'/'1' string

    Returns:
        Padded bit string (length is a positive multiple of 512)

    Raises:
        MessageTooLarge: If the message is longer than 2**64 - 1 bits
    """
    length = len(bits)
    if length > MAX_MESSAGE_BITS:
        raise MessageTooLarge(
            f"Message of {length} bits exceeds the {LENGTH_FIELD_BITS}-bit length field"
        )

    k = zero_padding_length(length)
    return bits + '1' + '0' * k + to_bits(length, LENGTH_FIELD_BITS)


def split(bits: str, block_size: int = BLOCK_BITS) -> List[str]:
    """Cut a bit string into consecutive blocks of block_size bits."""
    if len(bits) % block_size != 0:
        raise ValueError(
            f"Bit length {len(bits)} is not a multiple of the block size {block_size}"
        )
    return [bits[i:i + block_size] for i in range(0, len(bits), block_size)]
