"""
Bit and Hex Conversion Helpers

Converts between the representations used by the SHA-256 pipeline:
- Unsigned integers -> fixed-width binary text (MSB first)
- Byte sequences -> bit strings
- 32-bit binary slices -> words
- Words -> 8-digit lowercase hex
- Caller text ("ascii" or "0x"-prefixed "hex") -> bytes

Bits are computed one at a time so negative inputs (e.g. the result of
Python's ``~``) render as their two's-complement pattern over the requested
width instead of a signed ``-0b...`` form.
"""

import string
from typing import List


MASK_32 = 0xFFFFFFFF
WORD_BITS = 32

SUPPORTED_ENCODINGS = ("ascii", "hex")
HEX_PREFIXES = ("0x", "0X")

_HEX_DIGITS = frozenset(string.hexdigits)


class MalformedInput(ValueError):
    """Raised when hex-encoded input cannot be decoded into bytes."""
    pass


def to_bits(value: int, width: int = WORD_BITS) -> str:
    """
    Render an integer as ``width``-bit binary text, most significant bit first.

    Args:
        value: Integer to render. Negative values are shown as their
            two's-complement bit pattern over ``width`` bits.
        width: Number of output bits

    Returns:
        String of exactly ``width`` '0'/'1' characters

    Raises:
        ValueError: If ``value`` does not fit in ``width`` unsigned bits
    """
    if width <= 0:
        raise ValueError("Width must be positive")
    if value >= (1 << width):
        raise ValueError(f"Value {value} does not fit in {width} bits")

    return ''.join(
        '1' if (value >> i) & 1 else '0'
        for i in range(width - 1, -1, -1)
    )


def bytes_to_bits(data: bytes) -> str:
    """Convert bytes to a bit string (8 bits per byte, MSB first)."""
    return ''.join(to_bits(b, 8) for b in data)


def bits_to_word(bit_slice: str) -> int:
    """Parse a 32-character binary string into an unsigned word."""
    if len(bit_slice) != WORD_BITS or set(bit_slice) - {'0', '1'}:
        raise ValueError("Word slice must be exactly 32 binary digits")
    return int(bit_slice, 2)


def bits_to_words(bits: str) -> List[int]:
    """Split a bit string into consecutive 32-bit words."""
    return [
        bits_to_word(bits[i:i + WORD_BITS])
        for i in range(0, len(bits), WORD_BITS)
    ]


def to_hex(word: int) -> str:
    """Render a 32-bit word as 8 lowercase hex digits."""
    return format(word & MASK_32, '08x')


def decode_input(text: str, encoding: str = "ascii") -> bytes:
    """
    Convert caller-supplied text into the byte sequence to hash.

    Encodings:
    - "ascii": the text's UTF-8 bytes (one byte per ASCII character)
    - "hex": a "0x"-prefixed string of hex digit pairs, one byte per pair

    Args:
        text: Input text
        encoding: "ascii" or "hex"

    Returns:
        Decoded bytes

    Raises:
        MalformedInput: If hex input lacks the prefix, has an odd number of
            digits, or contains a non-hex character
        ValueError: If the encoding is not supported
    """
    if encoding == "ascii":
        return text.encode("utf-8")

    if encoding != "hex":
        raise ValueError(
            f"Unsupported encoding {encoding!r}; expected one of {SUPPORTED_ENCODINGS}"
        )

    if not text.startswith(HEX_PREFIXES):
        raise MalformedInput("Hex input must start with a '0x' prefix")

    digits = text[2:]
    if len(digits) % 2 != 0:
        raise MalformedInput(f"Hex input has an odd number of digits ({len(digits)})")

    bad = [c for c in digits if c not in _HEX_DIGITS]
    if bad:
        raise MalformedInput(f"Hex input contains non-hex character {bad[0]!r}")

    return bytes(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2))
