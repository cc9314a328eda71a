"""Character-by-character syntax scanner for ``local@domain`` addresses.

Pure functions of (text, rules). No I/O, no DNS, no case folding. Each
scan returns ``(accepted, reason)`` where *reason* is empty on success
and a short human-readable explanation on rejection.

The local-part is walked with a small state machine because the
legality of a period or a quote depends on its neighbours::

    START ──plain──▶ PLAIN_RUN ──"."──▶ AFTER_PERIOD ──plain──▶ PLAIN_RUN
      │                                     │
      └────────────'"'──▶ IN_QUOTE ◀──'"'───┘
                             │
                            '"'
                             ▼
                      AFTER_QUOTE_CLOSE ──"."──▶ AFTER_PERIOD
"""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum
from typing import TYPE_CHECKING

from email_syntax.config.defaults import (
    BACKSLASH,
    HYPHEN,
    MAX_DOMAIN_LENGTH,
    MAX_LABEL_LENGTH,
    MAX_LOCAL_LENGTH,
    PERIOD,
    PRINTABLE_SYMBOLS,
    QUOTE,
    ROUTE_MARKER,
    SEPARATOR,
    SPACE,
)
from email_syntax.core.tlds import KNOWN_TLDS, is_known_tld

if TYPE_CHECKING:
    from email_syntax.config.rules import DomainRules, EffectiveRules, LocalRules


class LocalState(Enum):
    """Cursor states of the local-part scan."""

    START = "start"
    PLAIN_RUN = "plain_run"
    AFTER_PERIOD = "after_period"
    IN_QUOTE = "in_quote"
    AFTER_QUOTE_CLOSE = "after_quote_close"


# Only these states may open a quoted segment.
_QUOTE_OPENERS = (LocalState.START, LocalState.AFTER_PERIOD)


# ---------------------------------------------------------------------------
# Character classes (ASCII only)
# ---------------------------------------------------------------------------


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _local_char_allowed(ch: str, rules: LocalRules) -> bool:
    """Check *ch* against the enabled local-part classes (period excluded)."""
    if _is_upper(ch):
        return rules.alpha_upper
    if _is_lower(ch):
        return rules.alpha_lower
    if _is_digit(ch):
        return rules.numeric
    if ch == HYPHEN:
        return rules.hyphen
    if ch in PRINTABLE_SYMBOLS:
        return rules.printable
    return False


def _domain_char_allowed(ch: str, rules: DomainRules) -> bool:
    """Check *ch* against the enabled domain label classes."""
    if _is_upper(ch):
        return rules.alpha_upper
    if _is_lower(ch):
        return rules.alpha_lower
    if _is_digit(ch):
        return rules.numeric
    if ch == HYPHEN:
        return rules.hyphen
    return False


# ---------------------------------------------------------------------------
# Separator
# ---------------------------------------------------------------------------


def find_separator(text: str) -> int:
    """Return the index of the single unquoted, unescaped ``@``, or -1.

    Returns -1 when there are zero or several qualifying separators.
    """
    index = -1
    count = 0
    within_quotes = False
    escaped = False

    for position, ch in enumerate(text):
        if escaped:
            escaped = False
        elif ch == BACKSLASH:
            escaped = True
        elif ch == QUOTE:
            within_quotes = not within_quotes
        elif ch == SEPARATOR and not within_quotes:
            count += 1
            index = position

    return index if count == 1 else -1


# ---------------------------------------------------------------------------
# Local-part
# ---------------------------------------------------------------------------


def scan_local(local: str, rules: LocalRules) -> tuple[bool, str]:
    """Scan the local-part left to right, rejecting on the first violation.

    Rules:
    1. Length 1 to 64, whatever the flags.
    2. A period may not lead, trail, or follow another period outside quotes.
    3. A quoted segment opens only at the start or after a period, and is
       followed only by the end or a period.
    4. Inside quotes: enabled classes, periods, spaces (if enabled) and any
       backslash-escaped character.
    5. Outside quotes: spaces and backslashes are never accepted.
    """
    if not local:
        return False, "empty local-part"
    if len(local) > MAX_LOCAL_LENGTH:
        return False, f"local-part longer than {MAX_LOCAL_LENGTH} characters"

    state = LocalState.START
    escaped = False

    for ch in local:
        if state is LocalState.IN_QUOTE:
            if escaped:
                escaped = False
            elif ch == BACKSLASH:
                escaped = True
            elif ch == QUOTE:
                state = LocalState.AFTER_QUOTE_CLOSE
            elif ch == SPACE:
                if not rules.spaces:
                    return False, "spaces not allowed"
            elif ch == PERIOD:
                if not rules.period:
                    return False, "periods not allowed in local-part"
            elif not _local_char_allowed(ch, rules):
                return False, f"character {ch!r} not allowed inside quotes"
            continue

        if ch == QUOTE:
            if not rules.quote:
                return False, "quoted segments not allowed"
            if state not in _QUOTE_OPENERS:
                return False, "quoted segment must start the local-part or follow a period"
            state = LocalState.IN_QUOTE
        elif state is LocalState.AFTER_QUOTE_CLOSE and ch != PERIOD:
            return False, "quoted segment must end the local-part or precede a period"
        elif ch == PERIOD:
            if not rules.period:
                return False, "periods not allowed in local-part"
            if state is LocalState.START:
                return False, "local-part starts with a period"
            if state is LocalState.AFTER_PERIOD:
                return False, "consecutive periods outside quotes"
            state = LocalState.AFTER_PERIOD
        elif ch == BACKSLASH:
            return False, "backslash outside quotes"
        elif ch == SPACE:
            return False, "space outside quotes"
        elif _local_char_allowed(ch, rules):
            state = LocalState.PLAIN_RUN
        else:
            return False, f"character {ch!r} not allowed"

    if state is LocalState.IN_QUOTE:
        return False, "unterminated quoted segment"
    if state is LocalState.AFTER_PERIOD:
        return False, "local-part ends with a period"
    return True, ""


def find_route_host(local: str) -> str | None:
    """Return the relay host after the last unquoted ``%``, if any.

    ``user%example.com`` routes through ``example.com``. Returns None when
    the local-part carries no unquoted ``%``.
    """
    marker = -1
    within_quotes = False
    escaped = False

    for position, ch in enumerate(local):
        if within_quotes:
            if escaped:
                escaped = False
            elif ch == BACKSLASH:
                escaped = True
            elif ch == QUOTE:
                within_quotes = False
        elif ch == QUOTE:
            within_quotes = True
        elif ch == ROUTE_MARKER:
            marker = position

    if marker < 0:
        return None
    return local[marker + 1 :]


# ---------------------------------------------------------------------------
# Domain-part
# ---------------------------------------------------------------------------


def _scan_label(label: str, rules: DomainRules) -> tuple[bool, str]:
    if not label:
        return False, "empty domain label"
    if len(label) > MAX_LABEL_LENGTH:
        return False, f"domain label longer than {MAX_LABEL_LENGTH} characters"
    if label[0] == HYPHEN or label[-1] == HYPHEN:
        return False, f"domain label {label!r} starts or ends with a hyphen"
    for ch in label:
        if not _domain_char_allowed(ch, rules):
            return False, f"character {ch!r} not allowed in domain"
    return True, ""


def scan_domain(
    domain: str,
    rules: DomainRules,
    known_tlds: Collection[str] = KNOWN_TLDS,
) -> tuple[bool, str]:
    """Scan the domain-part label by label.

    A domain with no period passes only when ``rules.localhost`` is set,
    and then skips the threshold and TLD checks.
    """
    if not domain:
        return False, "empty domain"
    if len(domain) > MAX_DOMAIN_LENGTH:
        return False, f"domain longer than {MAX_DOMAIN_LENGTH} characters"

    if PERIOD not in domain:
        if not rules.localhost:
            return False, "domain has no period"
        return _scan_label(domain, rules)

    if not rules.period:
        return False, "periods not allowed in domain"

    for label in domain.split(PERIOD):
        ok, reason = _scan_label(label, rules)
        if not ok:
            return False, reason

    last_dot = domain.rfind(PERIOD)
    if rules.chars_before_dot >= 0 and last_dot < rules.chars_before_dot:
        return (
            False,
            f"fewer than {rules.chars_before_dot} characters before the last period",
        )
    if rules.chars_after_dot >= 0 and len(domain) - last_dot - 1 < rules.chars_after_dot:
        return (
            False,
            f"fewer than {rules.chars_after_dot} characters after the last period",
        )

    tld = domain[last_dot + 1 :]
    if rules.tld and not is_known_tld(tld, known_tlds):
        return False, f"unknown top-level domain {tld!r}"
    return True, ""


# ---------------------------------------------------------------------------
# Full address
# ---------------------------------------------------------------------------


def scan_address(
    text: str,
    rules: EffectiveRules,
    known_tlds: Collection[str] = KNOWN_TLDS,
) -> tuple[bool, str]:
    """Split *text* at its separator and scan both halves.

    Returns ``(True, "")`` when the address is acceptable.
    """
    separator = find_separator(text)
    if separator < 0:
        return False, "address needs exactly one unquoted, unescaped @"
    if separator == 0:
        return False, "empty local-part"
    if separator == len(text) - 1:
        return False, "empty domain"

    local = text[:separator]
    domain = text[separator + 1 :]

    ok, reason = scan_local(local, rules.local)
    if not ok:
        return False, reason

    route = find_route_host(local)
    if route is not None:
        ok, reason = scan_domain(route, rules.domain, known_tlds)
        if not ok:
            return False, f"mail route host: {reason}"

    return scan_domain(domain, rules.domain, known_tlds)
