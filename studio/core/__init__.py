"""
Core package initializer.

This package provides the access-token and passphrase helpers used by
private album delivery.
"""

from .security import (
    generate_access_token,
    verify_passphrase,
)

__all__ = [
    "generate_access_token",
    "verify_passphrase",
]
