"""
Visit Fee Policy Configuration
Tunable billing constants for the visit fee calculator.
Source: Design Document Section 9 - Design Notes
Verified: 2026-10-19
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeePolicySettings(BaseSettings):
    """
    Fee policy settings.

    Every amount and day threshold used by the fee tiering lives here so the
    policy can be tuned per deployment without touching the calculator.
    Source: https://docs.pydantic.dev/latest/concepts/pydantic_settings/
    Verified: 2026-10-19
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="VISIT_FEE_",  # All fee settings prefixed with VISIT_FEE_
    )

    # =========================================================================
    # Amounts
    # =========================================================================
    DEFAULT_DOCTOR_FEE: Decimal = Field(
        default=Decimal("500"),
        ge=0,
        description="Standard consultation fee for doctors without their own default",
    )
    REVISIT_FEE: Decimal = Field(
        default=Decimal("100"),
        ge=0,
        description="Flat fee charged inside the revisit window (doctor fee waived)",
    )
    DOCTOR_CHANGE_FEE: Decimal = Field(
        default=Decimal("200"),
        ge=0,
        description="Surcharge when the assigned doctor differs from the last visit",
    )

    # =========================================================================
    # Day Thresholds (left-inclusive)
    # =========================================================================
    REVISIT_WINDOW_DAYS: int = Field(
        default=7,
        ge=0,
        description="First elapsed day on which the revisit fee applies",
    )
    FULL_FEE_AFTER_DAYS: int = Field(
        default=30,
        ge=1,
        description="First elapsed day on which the full doctor fee applies again",
    )

    # =========================================================================
    # Display
    # =========================================================================
    CURRENCY_CODE: str = Field(default="INR", description="ISO 4217 currency code")
    CURRENCY_SYMBOL: str = Field(default="₹", description="Symbol used in fee explanations")

    # =========================================================================
    # Validators
    # =========================================================================
    @model_validator(mode="after")
    def validate_thresholds(self) -> "FeePolicySettings":
        """Ensure the revisit window opens before the full-fee tier starts."""
        if self.REVISIT_WINDOW_DAYS >= self.FULL_FEE_AFTER_DAYS:
            raise ValueError(
                "REVISIT_WINDOW_DAYS must be smaller than FULL_FEE_AFTER_DAYS "
                f"(got {self.REVISIT_WINDOW_DAYS} >= {self.FULL_FEE_AFTER_DAYS})"
            )
        return self

    def format_amount(self, amount: Decimal) -> str:
        """Render an amount for display, e.g. ``₹100``."""
        return f"{self.CURRENCY_SYMBOL}{amount.normalize():f}"


# Singleton instance
_fee_settings: Optional[FeePolicySettings] = None


def get_fee_settings() -> FeePolicySettings:
    """
    Get cached fee policy settings instance.

    Returns:
        FeePolicySettings instance
    """
    global _fee_settings
    if _fee_settings is None:
        _fee_settings = FeePolicySettings()
    return _fee_settings
