# Integrity Module
"""
Cart line-item integrity checking:
- Payload: variant id + shared secret + final price
- SHA-256 (from-scratch implementation) of the payload
- Exact comparison against the storefront-supplied property
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import line_item
    return getattr(line_item, name)

__all__ = [
    'IntegrityChecker',
    'IntegrityConfigError',
    'IntegrityResult',
    'LineItem',
    'load_secret_key',
    'secure_compare',
    'INTEGRITY_PROPERTY',
    'SECRET_KEY_ENV',
]
