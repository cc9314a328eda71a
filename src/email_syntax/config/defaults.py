"""Default constants for email-syntax.

Protocol limits are fixed; the flag defaults are the values every rule
group falls back to when a caller (or the environment) leaves a field
unset.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Protocol limits (not configurable)
# ---------------------------------------------------------------------------
MAX_LOCAL_LENGTH: int = 64
MAX_DOMAIN_LENGTH: int = 255
MAX_LABEL_LENGTH: int = 63

# ---------------------------------------------------------------------------
# Character classes
# Hyphen and period have their own flags, so neither is listed here.
# ---------------------------------------------------------------------------
PRINTABLE_SYMBOLS: frozenset[str] = frozenset("!#$%&'*+/=?^_`{|}~")

SEPARATOR: str = "@"
QUOTE: str = '"'
BACKSLASH: str = "\\"
PERIOD: str = "."
HYPHEN: str = "-"
SPACE: str = " "
ROUTE_MARKER: str = "%"

# ---------------------------------------------------------------------------
# Local-part flag defaults
# ---------------------------------------------------------------------------
DEFAULT_LOCAL_FLAGS: dict[str, bool] = {
    "alpha_upper": True,
    "alpha_lower": True,
    "numeric": True,
    "period": True,
    "printable": True,
    "quote": True,
    "hyphen": True,
    "spaces": True,
}

# ---------------------------------------------------------------------------
# Domain-part flag defaults
# -1 disables a character-count threshold.
# ---------------------------------------------------------------------------
DISABLED: int = -1

DEFAULT_DOMAIN_FLAGS: dict[str, bool | int] = {
    "alpha_upper": True,
    "alpha_lower": True,
    "numeric": True,
    "period": True,
    "hyphen": True,
    "tld": True,
    "localhost": False,
    "chars_before_dot": 1,
    "chars_after_dot": 2,
}

# ---------------------------------------------------------------------------
# Pre-processing defaults
# ---------------------------------------------------------------------------
DEFAULT_SANITIZE_FLAGS: dict[str, bool] = {
    "lowercase": False,
}
