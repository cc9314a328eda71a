"""Check address syntax from the command line.

Validates each argument, or each stdin line when no arguments are
given, with a validator built from EMAIL_SYNTAX_* environment settings.

Usage:
    uv run python scripts/check_addresses.py simple@example.com "john..doe"@example.com
    cat addresses.txt | uv run python scripts/check_addresses.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure src/ is on sys.path when running as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from email_syntax.config.settings import get_settings  # noqa: E402
from email_syntax.core.validator import EmailSyntaxValidator  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    validator = EmailSyntaxValidator.from_settings(settings)
    args = sys.argv[1:] if argv is None else argv
    addresses = args or [line.rstrip("\n") for line in sys.stdin if line.strip()]

    invalid = 0
    for address in addresses:
        result = validator.check(address)
        if result.valid:
            print(f"VALID    {address}")
        else:
            invalid += 1
            print(f"INVALID  {address}  ({result.reason})")

    print("-" * 60)
    print(f"{len(addresses) - invalid} valid, {invalid} invalid")
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
