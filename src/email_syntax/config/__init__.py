"""Configuration module — rule resolution and ENV-driven settings."""

from email_syntax.config.rules import (
    DomainRules,
    EffectiveRules,
    LocalRules,
    SanitizeRules,
    resolve_rules,
)
from email_syntax.config.settings import Settings, get_settings

__all__ = [
    "DomainRules",
    "EffectiveRules",
    "LocalRules",
    "SanitizeRules",
    "Settings",
    "get_settings",
    "resolve_rules",
]
