"""Core scanning modules."""

from email_syntax.core.scanner import (
    LocalState,
    find_route_host,
    find_separator,
    scan_address,
    scan_domain,
    scan_local,
)
from email_syntax.core.tlds import KNOWN_TLDS, is_known_tld
from email_syntax.core.validator import EmailSyntaxValidator, ValidationResult

__all__ = [
    "KNOWN_TLDS",
    "EmailSyntaxValidator",
    "LocalState",
    "ValidationResult",
    "find_route_host",
    "find_separator",
    "is_known_tld",
    "scan_address",
    "scan_domain",
    "scan_local",
]
