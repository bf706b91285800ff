"""
Line Item Integrity Check

Verifies that a cart line item's price was not tampered with between the
storefront and checkout. The storefront template hashes

    variant_id + SECRET_KEY + final_price

with its own SHA-256 filter and attaches the hex digest to the line item as
the `_product_integrity` property. The checkout script recomputes the same
hash with the from-scratch implementation and compares the two strings.

Security considerations:
- The shared secret must be identical on both sides and never sent to clients
- Comparison is exact: no case folding or whitespace stripping
- Never log the secret or the full payload
"""

import hmac
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..core_crypto.sha256 import hash_input


logger = logging.getLogger(__name__)

# Configuration
INTEGRITY_PROPERTY = "_product_integrity"
SECRET_KEY_ENV = "SCRIPTHASH_SECRET_KEY"


class IntegrityConfigError(RuntimeError):
    """Raised when the shared secret is not configured."""
    pass


@dataclass
class LineItem:
    """A cart line item as seen by the checkout script."""
    variant_id: Any
    final_price: Any
    properties: Dict[str, str] = field(default_factory=dict)

    @property
    def supplied_hash(self) -> Optional[str]:
        return self.properties.get(INTEGRITY_PROPERTY)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LineItem':
        return cls(
            variant_id=data['variant_id'],
            final_price=data['final_price'],
            properties=dict(data.get('properties') or {}),
        )


@dataclass
class IntegrityResult:
    """Outcome of checking one line item."""
    variant_id: Any
    expected: str
    supplied: Optional[str]
    verified: bool


def secure_compare(a: str, b: str) -> bool:
    """
    Exact string comparison in constant time.

    Args:
        a: First string
        b: Second string

    Returns:
        True if strings are equal, False otherwise
    """
    return hmac.compare_digest(a.encode(), b.encode())


def load_secret_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Read the shared secret from the environment.

    Raises:
        IntegrityConfigError: If the variable is missing or empty
    """
    env = os.environ if environ is None else environ
    secret = env.get(SECRET_KEY_ENV, "")
    if not secret:
        raise IntegrityConfigError(f"{SECRET_KEY_ENV} is not set")
    return secret


class IntegrityChecker:
    """
    Recomputes and verifies line-item integrity hashes.

    Example:
        >>> checker = IntegrityChecker("s3cret")
        >>> digest = checker.compute(123, 1999)
        >>> checker.verify(123, 1999, digest)
        True
    """

    def __init__(self, secret_key: str):
        if not secret_key:
            raise IntegrityConfigError("Secret key cannot be empty")
        self._secret_key = secret_key

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'IntegrityChecker':
        return cls(load_secret_key(environ))

    def build_payload(self, variant_id: Any, final_price: Any) -> str:
        """Concatenate identifier, secret and price in the storefront's order."""
        return f"{variant_id}{self._secret_key}{final_price}"

    def compute(self, variant_id: Any, final_price: Any) -> str:
        """Compute the integrity hash for a variant and price."""
        return hash_input(self.build_payload(variant_id, final_price), "ascii")

    def verify(self, variant_id: Any, final_price: Any, supplied: Optional[str]) -> bool:
        """Check a supplied hash against the recomputed one."""
        if not isinstance(supplied, str):
            return False
        return secure_compare(self.compute(variant_id, final_price), supplied)

    def check_line_item(self, item: LineItem) -> IntegrityResult:
        """Verify one line item and report the outcome."""
        expected = self.compute(item.variant_id, item.final_price)
        supplied = item.supplied_hash
        verified = isinstance(supplied, str) and secure_compare(expected, supplied)

        if verified:
            logger.info(f"Integrity verified for variant {item.variant_id}")
        elif supplied is None:
            logger.warning(f"Missing {INTEGRITY_PROPERTY} for variant {item.variant_id}")
        else:
            logger.warning(f"Integrity mismatch for variant {item.variant_id}")

        return IntegrityResult(
            variant_id=item.variant_id,
            expected=expected,
            supplied=supplied,
            verified=verified,
        )

    def check_cart(self, items: Iterable[Any]) -> List[IntegrityResult]:
        """
        Verify every line item in a cart.

        Args:
            items: LineItem instances or mappings accepted by LineItem.from_dict

        Returns:
            One IntegrityResult per item, in order
        """
        results = []
        for item in items:
            if not isinstance(item, LineItem):
                item = LineItem.from_dict(item)
            results.append(self.check_line_item(item))
        return results
