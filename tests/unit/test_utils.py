"""Tests for email_syntax.utils — normalization and batch filtering."""

from __future__ import annotations

import pytest

from email_syntax.core.validator import EmailSyntaxValidator
from email_syntax.utils.email_utils import (
    get_valid_addresses,
    normalize_email,
    split_addresses,
)


# ── email_utils: normalize_email ─────────────────────────────────────────────


class TestNormalizeEmail:
    """Tests for normalize_email — lowercase only."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("USER@EXAMPLE.COM", "user@example.com"),
            ('"John Doe"@Example.org', '"john doe"@example.org'),
            ("already@lower.com", "already@lower.com"),
        ],
    )
    def test_lowercases(self, raw: str, expected: str) -> None:
        assert normalize_email(raw) == expected

    def test_does_not_strip(self) -> None:
        assert normalize_email("  A@B.COM ") == "  a@b.com "

    def test_empty_string(self) -> None:
        assert normalize_email("") == ""

    def test_none_returns_empty(self) -> None:
        assert normalize_email(None) == ""  # type: ignore[arg-type]


# ── email_utils: split_addresses ─────────────────────────────────────────────


class TestSplitAddresses:
    """Tests for split_addresses — CSV string to list."""

    def test_single(self) -> None:
        assert split_addresses("user@example.com") == ["user@example.com"]

    def test_multiple(self) -> None:
        assert split_addresses("a@b.com, c@d.com,e@f.org") == [
            "a@b.com",
            "c@d.com",
            "e@f.org",
        ]

    def test_drops_empty_entries(self) -> None:
        assert split_addresses("a@b.com,, ,c@d.com") == ["a@b.com", "c@d.com"]

    def test_deduplicates_keeping_order(self) -> None:
        assert split_addresses("b@x.com, a@x.com, b@x.com") == ["b@x.com", "a@x.com"]

    def test_case_preserved(self) -> None:
        assert split_addresses("A@B.COM, a@b.com") == ["A@B.COM", "a@b.com"]

    def test_empty_string(self) -> None:
        assert split_addresses("") == []

    def test_non_string(self) -> None:
        assert split_addresses(None) == []  # type: ignore[arg-type]


# ── email_utils: get_valid_addresses ─────────────────────────────────────────


class TestGetValidAddresses:
    """Tests for get_valid_addresses — split then validate."""

    def test_filters_invalid(self, validator: EmailSyntaxValidator) -> None:
        result = get_valid_addresses(
            "good@email.com, john..doe@example.com, another@ok.org, admin@mailserver1",
            validator,
        )
        assert result == ["good@email.com", "another@ok.org"]

    def test_respects_validator_rules(self) -> None:
        v = EmailSyntaxValidator({"domain": {"localhost": True}})
        assert get_valid_addresses("admin@mailserver1, bad@", v) == [
            "admin@mailserver1"
        ]

    def test_all_invalid(self, validator: EmailSyntaxValidator) -> None:
        assert get_valid_addresses("bad, also-bad, @nope", validator) == []

    def test_empty(self, validator: EmailSyntaxValidator) -> None:
        assert get_valid_addresses("", validator) == []
