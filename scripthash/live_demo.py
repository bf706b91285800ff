#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                         SCRIPTHASH LIVE DEMO                                  ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through the from-scratch SHA-256 pipeline and the cart
line-item integrity check:
- Byte to bit conversion and padding
- Message schedule expansion
- Block compression and the final digest
- Verifying storefront-tagged line items at checkout
"""

import sys

from src.core_crypto.bits import bytes_to_bits, decode_input, to_hex
from src.core_crypto.constants import IV, K
from src.core_crypto.padding import pad, split
from src.core_crypto.sha256 import build_schedule, compress, hash_input
from src.integrity.line_item import IntegrityChecker, LineItem, INTEGRITY_PROPERTY


DEMO_SECRET = "thisisyoursupersecreykeystring"


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if sys.stdin.isatty():
        print(f"\n  [PAUSE] {message}")
        input()


def main():
    message = "abc"

    print_header("PART 1: PREPROCESSING")

    print_step("1.1", f"Converting {message!r} to bits")
    data = decode_input(message, "ascii")
    bits = bytes_to_bits(data)
    print(f"\n  Bytes: {list(data)}")
    print(f"  Bits:  {bits}")

    print_step("1.2", "Padding to a multiple of 512 bits")
    padded = pad(bits)
    blocks = split(padded)
    print(f"\n  Message length: {len(bits)} bits")
    print(f"  Padded length:  {len(padded)} bits ({len(blocks)} block)")
    print(f"  Length field:   {padded[-64:]}")

    pause()

    print_header("PART 2: MESSAGE SCHEDULE")

    schedule = build_schedule(blocks[0])
    for i in (0, 1, 15, 16, 17, 63):
        print(f"  W[{i:2d}] = {to_hex(schedule[i])}")

    pause()

    print_header("PART 3: COMPRESSION")

    print(f"\n  Initial hash values: {' '.join(to_hex(w) for w in IV)}")
    state = compress(list(IV), schedule, K)
    print(f"  Final hash values:   {' '.join(to_hex(w) for w in state)}")
    print(f"\n  SHA-256({message!r}) = {''.join(to_hex(w) for w in state)}")

    pause()

    print_header("PART 4: CART LINE-ITEM INTEGRITY")

    checker = IntegrityChecker(DEMO_SECRET)
    variant_id, price = 39882981146667, 1999

    print_step("4.1", "Storefront tags the line item")
    tag = checker.compute(variant_id, price)
    item = LineItem(variant_id, price, {INTEGRITY_PROPERTY: tag})
    print(f"\n  Variant: {variant_id}  Price: {price}")
    print(f"  {INTEGRITY_PROPERTY}: {tag}")

    print_step("4.2", "Checkout verifies the untouched item")
    result = checker.check_line_item(item)
    print(f"\n  Verified: {'[OK]' if result.verified else '[X]'}")

    print_step("4.3", "Checkout verifies a tampered price")
    item.final_price = 1
    result = checker.check_line_item(item)
    print(f"\n  Verified: {'[OK]' if result.verified else '[X] TAMPERED'}")

    print_step("4.4", "Hex input is equivalent to its ASCII text")
    print(f"\n  hash('0x616263', hex) == hash('abc', ascii): "
          f"{hash_input('0x616263', 'hex') == hash_input('abc')}")

    print("\n\n" + "═" * 70)
    print("  DEMONSTRATION COMPLETE!")
    print("═" * 70)


if __name__ == "__main__":
    main()
