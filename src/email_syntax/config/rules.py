"""Rule groups and the resolver that merges partial overrides over defaults.

Resolution never fails: a missing field, or one holding a value of the
wrong type, takes its documented default. The result is frozen and is
meant to be resolved once and shared by every scan.

Usage::

    from email_syntax.config import resolve_rules
    rules = resolve_rules({"domain": {"localhost": True}})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from email_syntax.config.defaults import (
    DEFAULT_DOMAIN_FLAGS,
    DEFAULT_LOCAL_FLAGS,
    DEFAULT_SANITIZE_FLAGS,
)


class _RuleGroup(BaseModel):
    """Frozen, strictly-typed flag group with per-field default fallback."""

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def fallback_to_default(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        """Replace an invalid value with the field default instead of raising."""
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].default


class LocalRules(_RuleGroup):
    """Character classes accepted in the local-part."""

    alpha_upper: bool = DEFAULT_LOCAL_FLAGS["alpha_upper"]
    alpha_lower: bool = DEFAULT_LOCAL_FLAGS["alpha_lower"]
    numeric: bool = DEFAULT_LOCAL_FLAGS["numeric"]
    period: bool = DEFAULT_LOCAL_FLAGS["period"]
    printable: bool = DEFAULT_LOCAL_FLAGS["printable"]
    quote: bool = DEFAULT_LOCAL_FLAGS["quote"]
    hyphen: bool = DEFAULT_LOCAL_FLAGS["hyphen"]
    spaces: bool = DEFAULT_LOCAL_FLAGS["spaces"]


class DomainRules(_RuleGroup):
    """Character classes and shape thresholds for the domain-part.

    ``chars_before_dot`` / ``chars_after_dot`` are minimum lengths around
    the last period; any negative value disables the check.
    """

    alpha_upper: bool = DEFAULT_DOMAIN_FLAGS["alpha_upper"]
    alpha_lower: bool = DEFAULT_DOMAIN_FLAGS["alpha_lower"]
    numeric: bool = DEFAULT_DOMAIN_FLAGS["numeric"]
    period: bool = DEFAULT_DOMAIN_FLAGS["period"]
    hyphen: bool = DEFAULT_DOMAIN_FLAGS["hyphen"]
    tld: bool = DEFAULT_DOMAIN_FLAGS["tld"]
    localhost: bool = DEFAULT_DOMAIN_FLAGS["localhost"]
    chars_before_dot: int = DEFAULT_DOMAIN_FLAGS["chars_before_dot"]
    chars_after_dot: int = DEFAULT_DOMAIN_FLAGS["chars_after_dot"]


class SanitizeRules(_RuleGroup):
    """Pre-processing applied to the raw input before scanning."""

    lowercase: bool = DEFAULT_SANITIZE_FLAGS["lowercase"]


class EffectiveRules(BaseModel):
    """Fully-populated rule set for one validator."""

    model_config = ConfigDict(frozen=True)

    local: LocalRules = LocalRules()
    domain: DomainRules = DomainRules()
    sanitize: SanitizeRules = SanitizeRules()


def _group(params: Mapping[str, Any], name: str) -> dict[str, Any]:
    """Pull one override group out of *params* as a plain dict."""
    value = params.get(name)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, Mapping):
        return {k: v for k, v in value.items() if isinstance(k, str)}
    return {}


def resolve_rules(
    params: Mapping[str, Any] | EffectiveRules | None = None,
) -> EffectiveRules:
    """Merge partial overrides over the built-in defaults.

    *params* may hold ``local``, ``domain`` and ``sanitize`` groups, each a
    mapping (or rule model) of flag overrides. Anything else, including
    ``None``, resolves to the defaults.
    """
    if isinstance(params, EffectiveRules):
        return params
    if not isinstance(params, Mapping):
        params = {}

    return EffectiveRules(
        local=LocalRules.model_validate(_group(params, "local")),
        domain=DomainRules.model_validate(_group(params, "domain")),
        sanitize=SanitizeRules.model_validate(_group(params, "sanitize")),
    )
