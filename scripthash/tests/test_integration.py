"""
Integration tests for scripthash.

Tests end-to-end workflows: the storefront computes a hash with an
independent SHA-256 implementation, the checkout recomputes it from scratch.
"""

import logging
import os

import pytest
from cryptography.hazmat.primitives import hashes

from src.core_crypto.sha256 import hash_input, sha256_hex
from src.integrity.line_item import (
    IntegrityChecker, IntegrityConfigError, IntegrityResult, LineItem,
    load_secret_key, INTEGRITY_PROPERTY, SECRET_KEY_ENV
)
from src.main import main


SECRET_KEY = "thisisyoursupersecreykeystring"


def storefront_hash(data: bytes) -> str:
    """SHA-256 computed by an independent library, as the storefront would."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize().hex()


def storefront_line_item(variant_id, price, secret=SECRET_KEY):
    payload = f"{variant_id}{secret}{price}".encode()
    return {
        'variant_id': variant_id,
        'final_price': price,
        'properties': {INTEGRITY_PROPERTY: storefront_hash(payload)},
    }


class TestAgainstIndependentImplementation:
    """The from-scratch hash must agree with a native implementation."""

    @pytest.mark.parametrize("length", [0, 1, 54, 55, 56, 63, 64, 65, 119, 120, 128, 300])
    def test_block_boundaries(self, length):
        """Lengths around the 55/56-byte padding boundary and multi-block sizes."""
        data = bytes((i * 7 + 3) % 256 for i in range(length))
        assert sha256_hex(data) == storefront_hash(data)

    def test_random_inputs(self):
        for length in (10, 100, 1000):
            data = os.urandom(length)
            assert sha256_hex(data) == storefront_hash(data)

    def test_hex_encoding(self):
        data = bytes(range(256))
        assert hash_input("0x" + data.hex(), "hex") == storefront_hash(data)

    def test_utf8_text(self):
        text = "prix: 19,99 €"
        assert hash_input(text) == storefront_hash(text.encode("utf-8"))


class TestCartIntegrityWorkflow:
    """Storefront-tagged cart checked at checkout."""

    def test_untampered_cart_verifies(self):
        cart = [
            storefront_line_item(39882981146667, 1999),
            storefront_line_item(39882981179435, 4500),
        ]
        results = IntegrityChecker(SECRET_KEY).check_cart(cart)
        assert len(results) == 2
        assert all(r.verified for r in results)
        assert all(isinstance(r, IntegrityResult) for r in results)

    def test_tampered_price_flagged(self):
        cart = [
            storefront_line_item(1, 1999),
            storefront_line_item(2, 4500),
        ]
        cart[1]['final_price'] = 1
        results = IntegrityChecker(SECRET_KEY).check_cart(cart)
        assert [r.verified for r in results] == [True, False]
        assert results[1].expected != results[1].supplied

    def test_missing_property_flagged(self):
        item = LineItem(variant_id=7, final_price=100)
        result = IntegrityChecker(SECRET_KEY).check_line_item(item)
        assert not result.verified
        assert result.supplied is None

    def test_line_item_from_dict(self):
        item = LineItem.from_dict({'variant_id': 5, 'final_price': 10})
        assert item.properties == {}
        assert item.supplied_hash is None

    def test_payload_order(self):
        checker = IntegrityChecker("KEY")
        assert checker.build_payload(123, 456) == "123KEY456"

    def test_mismatch_logged_without_secret(self, caplog):
        item = LineItem.from_dict(storefront_line_item(1, 1999))
        item.final_price = 5
        with caplog.at_level(logging.INFO, logger="src.integrity.line_item"):
            IntegrityChecker(SECRET_KEY).check_line_item(item)
        assert "mismatch" in caplog.text
        assert SECRET_KEY not in caplog.text


class TestConfiguration:
    """Shared secret configuration."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(SECRET_KEY_ENV, SECRET_KEY)
        checker = IntegrityChecker.from_env()
        item = storefront_line_item(42, 999)
        assert checker.check_line_item(LineItem.from_dict(item)).verified

    def test_explicit_environ(self):
        assert load_secret_key({SECRET_KEY_ENV: "abc"}) == "abc"

    def test_missing_secret(self):
        with pytest.raises(IntegrityConfigError):
            load_secret_key({})
        with pytest.raises(IntegrityConfigError):
            IntegrityChecker.from_env({SECRET_KEY_ENV: ""})


class TestCommandLine:
    """scripthash CLI."""

    def test_prints_digest(self, capsys):
        assert main(["abc"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_hex_encoding(self, capsys):
        assert main(["--encoding", "hex", "0x616263"]) == 0
        assert capsys.readouterr().out.strip() == hash_input("abc")

    def test_expect_match(self, capsys):
        assert main(["abc", "--expect", hash_input("abc")]) == 0

    def test_expect_mismatch(self, capsys):
        assert main(["abc", "--expect", hash_input("abd")]) == 1
        assert "mismatch" in capsys.readouterr().err

    def test_malformed_hex(self, capsys):
        assert main(["-e", "hex", "0x6"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error" in captured.err
