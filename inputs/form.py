"""
Form inputs — the boundary between UI fields and the engine.

Every editable field in the app maps one-to-one onto a ProjectionInputs
attribute. Rates are entered as percentages (3.0 == 3 %), the way the form
shows them; to_config() converts them to the fractions ProjectionConfig uses.
Numeric parsing and range checks happen here, once, so the engine can treat
its configuration as already valid.
"""

from __future__ import annotations

import logging
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from core.config import Dependent, ProjectionConfig
from core.utils import pct_to_fraction
from policies import build_public_policy

logger = logging.getLogger(__name__)

PolicyName = Literal["flat", "halve_after_first_adult", "pension"]


class InputError(ValueError):
    """Raised when raw form values cannot be turned into a configuration."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid projection inputs:\n" + "\n".join(f"  - {e}" for e in self.errors))


class ProjectionInputs(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    # Temporal anchors
    start_year: int = Field(2024, ge=1900, le=2200)
    current_age: int = Field(41, ge=0, le=120)
    adult_1_life_expectancy: int = Field(81, ge=0, le=120)
    adult_2_life_expectancy: int = Field(88, ge=0, le=120)

    # Dependents
    dependent_1_age: int = Field(19, ge=0, le=120)
    dependent_2_age: int = Field(16, ge=0, le=120)
    dependent_1_premium: float = Field(223.75, ge=0)
    dependent_2_premium: float = Field(223.75, ge=0)
    dependent_growth_pct: float = Field(3.0, ge=-100, le=100)
    dependent_leave_age: int = Field(25, ge=0, le=120)

    # Adult premium
    adult_base_premium: float = Field(680.36, ge=0)
    adult_growth_pct: float = Field(3.0, ge=-100, le=100)
    adult_growth_after_cutoff_pct: Optional[float] = Field(2.0, ge=-100, le=100)
    one_time_surcharge_pct: float = Field(0.0, ge=0, le=100)

    # Surcharge fund
    fund_cutoff_age: int = Field(60, ge=0, le=120)
    fund_loading_pct: float = Field(10.0, ge=0, le=100)
    stabilize_age: int = Field(65, ge=0, le=120)
    stabilization_annual_amount: float = Field(1200.0, ge=0)
    fund_interest_pct: float = Field(2.0, ge=-100, le=100)

    # Public scheme
    public_policy: PolicyName = "flat"
    public_base_monthly: float = Field(2200.0, ge=0)
    public_growth_pct: float = Field(3.0, ge=-100, le=100)
    retirement_age: int = Field(67, ge=0, le=120)
    pension_1: float = Field(2200.0, ge=0)
    pension_2: float = Field(1400.0, ge=0)
    rate_1_pct: float = Field(16.3, ge=0, le=100)
    rate_2_pct: float = Field(3.4, ge=0, le=100)

    deductible_per_person: float = Field(800.0, ge=0)

    @model_validator(mode="after")
    def _check_horizon(self) -> "ProjectionInputs":
        if self.adult_2_life_expectancy < self.current_age:
            raise ValueError(
                f"adult_2_life_expectancy ({self.adult_2_life_expectancy}) must be >= "
                f"current_age ({self.current_age}); the projection would be empty."
            )
        return self

    def to_config(self) -> ProjectionConfig:
        dep_growth = pct_to_fraction(self.dependent_growth_pct)
        dependents = (
            Dependent(
                current_age=self.dependent_1_age,
                initial_premium=self.dependent_1_premium,
                growth_rate=dep_growth,
                leave_age=self.dependent_leave_age,
            ),
            Dependent(
                current_age=self.dependent_2_age,
                initial_premium=self.dependent_2_premium,
                growth_rate=dep_growth,
                leave_age=self.dependent_leave_age,
            ),
        )
        policy = build_public_policy(
            self.public_policy,
            base_monthly=self.public_base_monthly,
            growth_rate=pct_to_fraction(self.public_growth_pct),
            retirement_age=self.retirement_age,
            pension_1=self.pension_1,
            pension_2=self.pension_2,
            rate_1_pct=self.rate_1_pct,
            rate_2_pct=self.rate_2_pct,
        )
        after = self.adult_growth_after_cutoff_pct
        return ProjectionConfig(
            start_year=self.start_year,
            current_age=self.current_age,
            adult_1_life_expectancy=self.adult_1_life_expectancy,
            adult_2_life_expectancy=self.adult_2_life_expectancy,
            dependents=dependents,
            adult_base_premium=self.adult_base_premium,
            adult_growth_rate=pct_to_fraction(self.adult_growth_pct),
            adult_growth_rate_after_cutoff=None if after is None else pct_to_fraction(after),
            one_time_surcharge_pct=self.one_time_surcharge_pct,
            fund_cutoff_age=self.fund_cutoff_age,
            fund_loading=pct_to_fraction(self.fund_loading_pct),
            stabilize_age=self.stabilize_age,
            stabilization_annual_amount=self.stabilization_annual_amount,
            fund_interest_rate=pct_to_fraction(self.fund_interest_pct),
            public_policy=policy,
            deductible_per_person=self.deductible_per_person,
        )


def _format_errors(exc: ValidationError) -> List[str]:
    out = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "inputs"
        out.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return out


def parse_inputs(raw: Mapping[str, Any]) -> ProjectionConfig:
    """
    Validate raw form values (strings or numbers) and build a ProjectionConfig.

    Raises
    ------
    InputError
        If any field fails parsing or range checks.
    """
    try:
        inputs = ProjectionInputs.model_validate(dict(raw))
    except ValidationError as exc:
        errors = _format_errors(exc)
        logger.warning("Rejected projection inputs: %s", "; ".join(errors))
        raise InputError(errors) from exc
    return inputs.to_config()
