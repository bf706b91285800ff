# scripthash Test Suite
"""
Test suite including:
- Unit tests (bit conversion, padding, schedule, compression)
- Integration tests (cart integrity, CLI, cross-check against a native SHA-256)
- Security tests (malformed inputs, tampering)

Run with: pytest
"""
