# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .enums import TenantMatchPolicyEnum
from .model import Model
from .types import DayOfMonth


class FormattingSettings(Model):
    """Settings related to currency, date and placeholder display."""

    currency_symbol: str = Field(default="R$", description="Symbol prefixed to amounts.")
    thousands_separator: str = Field(default=".", description="Digit group separator.")
    decimal_separator: str = Field(default=",", description="Fractional separator.")
    placeholder: str = Field(
        default="-", description="Shown in place of absent text or date values."
    )

    @model_validator(mode="after")
    def check_separators(self) -> "FormattingSettings":
        """Ensure amounts stay unambiguous."""
        if self.thousands_separator == self.decimal_separator:
            raise ValueError(
                "thousands_separator and decimal_separator must be different"
            )
        return self


class ContractSettings(Model):
    """
    Defaults applied while assembling lease contracts and income reports.

    Usage Examples:
        # Standard brokerage defaults
        contract = ContractSettings()

        # Different signing city and an earlier due day
        contract = ContractSettings(signing_city="Curitiba", default_due_day=10)
    """

    default_due_day: DayOfMonth = Field(
        default=20, description="Payment due day used when the lease does not set one."
    )
    signing_city: str = Field(
        default="São Paulo", description="City printed on the place/date line."
    )
    brokerage_name: str = Field(
        default="Nascimento Negócios Imobiliários",
        description="Brokerage shown as administrator on generated documents.",
    )
    tenant_match_policy: TenantMatchPolicyEnum = Field(
        default=TenantMatchPolicyEnum.MOST_RECENT_BY_ID,
        description="Tie-break when several clients share a property interest.",
    )


class GlobalSettings(Model):
    """
    Global settings container for document generation.

    Every public generation function accepts an optional instance and falls
    back to ``GlobalSettings()`` when none is supplied.
    """

    formatting: FormattingSettings = Field(default_factory=FormattingSettings)
    contract: ContractSettings = Field(default_factory=ContractSettings)
