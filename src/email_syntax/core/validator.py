"""Public validator — resolves rules once, then scans any number of inputs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from email_syntax.config.rules import EffectiveRules, resolve_rules
from email_syntax.core.scanner import find_separator, scan_address
from email_syntax.core.tlds import KNOWN_TLDS
from email_syntax.utils.email_utils import normalize_email

if TYPE_CHECKING:
    from email_syntax.config.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one ``check`` call."""

    valid: bool
    reason: str = ""
    local_part: str = ""
    domain: str = ""


class EmailSyntaxValidator:
    """Offline syntax validator for ``local@domain`` addresses.

    Rules are resolved exactly once, at construction, and never change
    afterwards; one instance is safe to share between threads.
    """

    def __init__(
        self,
        params: Mapping[str, Any] | EffectiveRules | None = None,
        *,
        known_tlds: Iterable[str] | None = None,
    ) -> None:
        self._rules = resolve_rules(params)
        if known_tlds is None:
            self._known_tlds = KNOWN_TLDS
        else:
            self._known_tlds = frozenset(label.lower() for label in known_tlds)
        logger.debug(
            "Validator rules resolved: %r (%d known TLDs)",
            self._rules,
            len(self._known_tlds),
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> EmailSyntaxValidator:
        """Build a validator from environment settings.

        ``extra_tlds`` extend the built-in table rather than replace it.
        """
        if settings is None:
            from email_syntax.config.settings import get_settings

            settings = get_settings()
        return cls(
            settings.to_params(),
            known_tlds=KNOWN_TLDS | frozenset(settings.extra_tlds),
        )

    @property
    def rules(self) -> EffectiveRules:
        return self._rules

    @property
    def known_tlds(self) -> frozenset[str]:
        return self._known_tlds

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, email: str) -> bool:
        """Return True if *email* is syntactically acceptable."""
        return self.check(email).valid

    async def avalidate(self, email: str) -> bool:
        """Awaitable form of ``validate``; the scan itself never suspends."""
        return self.validate(email)

    def check(self, email: str) -> ValidationResult:
        """Validate *email* and report why it was rejected, if it was."""
        if not isinstance(email, str):
            return ValidationResult(valid=False, reason="not a string")

        text = normalize_email(email) if self._rules.sanitize.lowercase else email
        valid, reason = scan_address(text, self._rules, self._known_tlds)
        if not valid:
            logger.debug("Rejected %r: %s", email, reason)
            return ValidationResult(valid=False, reason=reason)

        separator = find_separator(text)
        return ValidationResult(
            valid=True,
            local_part=text[:separator],
            domain=text[separator + 1 :],
        )
