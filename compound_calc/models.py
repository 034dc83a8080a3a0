from __future__ import annotations

from typing import List, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from compound_calc.core.parsing import coerce_number


class InvestmentParameters(BaseModel):
    """User-editable calculator inputs. Every field is coerced, never rejected."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    initialAmount: float = 0.0
    monthlyContribution: float = 0.0
    annualReturnPercent: float = Field(
        default=0.0,
        validation_alias=AliasChoices("annualReturnPercent", "annualReturn"),
    )
    years: float = 0.0
    inflationRatePercent: float = Field(
        default=0.0,
        validation_alias=AliasChoices("inflationRatePercent", "inflationRate"),
    )

    @field_validator("*", mode="before")
    @classmethod
    def parse_or_zero(cls, value: object) -> float:
        return coerce_number(value)


class ScenarioPreset(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    returnPercent: float = Field(validation_alias=AliasChoices("returnPercent", "return"))
    color: str = "#3b82f6"

    @field_validator("returnPercent", mode="before")
    @classmethod
    def parse_return(cls, value: object) -> float:
        return coerce_number(value)


DEFAULT_PARAMETERS = InvestmentParameters(
    initialAmount=10000,
    monthlyContribution=500,
    annualReturnPercent=7,
    years=20,
    inflationRatePercent=2.5,
)

DEFAULT_PRESETS: Tuple[ScenarioPreset, ...] = (
    ScenarioPreset(name="Conservative", returnPercent=4, color="#10b981"),
    ScenarioPreset(name="Moderate", returnPercent=7, color="#3b82f6"),
    ScenarioPreset(name="Aggressive", returnPercent=10, color="#f59e0b"),
)


def default_presets() -> List[ScenarioPreset]:
    return list(DEFAULT_PRESETS)
