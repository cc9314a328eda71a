"""Offline, configurable email address syntax validation."""

from email_syntax.config import EffectiveRules, resolve_rules
from email_syntax.core import EmailSyntaxValidator, ValidationResult

__all__ = [
    "EffectiveRules",
    "EmailSyntaxValidator",
    "ValidationResult",
    "resolve_rules",
]
