"""Helpers around the syntax core: case normalization and batch filtering.

No SMTP, no network calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from email_syntax.core.validator import EmailSyntaxValidator


def normalize_email(email: str) -> str:
    """Lowercase *email*; nothing else is rewritten."""
    if not email or not isinstance(email, str):
        return ""
    return email.lower()


def split_addresses(text: str) -> list[str]:
    """Split a comma-separated string into stripped, de-duplicated entries.

    Order of first appearance is kept. Empty entries are dropped.
    """
    if not text or not isinstance(text, str):
        return []
    seen: set[str] = set()
    result: list[str] = []
    for raw in text.split(","):
        address = raw.strip()
        if address and address not in seen:
            seen.add(address)
            result.append(address)
    return result


def get_valid_addresses(text: str, validator: EmailSyntaxValidator) -> list[str]:
    """Full pipeline: split → validate.

    Returns only the entries *validator* accepts.
    """
    return [a for a in split_addresses(text) if validator.validate(a)]
