"""Utility functions for case normalization and batch address filtering."""

from email_syntax.utils.email_utils import (
    get_valid_addresses,
    normalize_email,
    split_addresses,
)

__all__ = [
    "get_valid_addresses",
    "normalize_email",
    "split_addresses",
]
