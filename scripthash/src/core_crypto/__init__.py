# Core Cryptography Module
"""
From-scratch SHA-256 implementation including:
- Bit/hex conversion and input decoding - bits.py
- Message padding and block splitting - padding.py
- Round constants and initial hash values - constants.py
- Message schedule, compression and hashing - sha256.py
"""

from .bits import (
    MalformedInput,
    to_bits,
    bytes_to_bits,
    bits_to_word,
    to_hex,
    decode_input,
)

from .padding import (
    MessageTooLarge,
    pad,
    split,
)

from .constants import IV, K

from .sha256 import (
    build_schedule,
    compress,
    sha256,
    sha256_hex,
    sha256_string,
    hash_input,
)

__all__ = [
    # Errors
    'MalformedInput',
    'MessageTooLarge',
    # Conversion
    'to_bits',
    'bytes_to_bits',
    'bits_to_word',
    'to_hex',
    'decode_input',
    # Framing
    'pad',
    'split',
    # Tables
    'IV',
    'K',
    # Hashing
    'build_schedule',
    'compress',
    'sha256',
    'sha256_hex',
    'sha256_string',
    'hash_input',
]
