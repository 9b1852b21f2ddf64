"""
Projection configuration.

Everything the engine needs for one run, as immutable values. Rates are
annual fractions (0.03 == 3 %), except one_time_surcharge_pct, which is a
percentage (10.0 == 10 %) applied once to the initial adult premium.
Amounts are monthly unless the name says otherwise. Defaults reproduce the
household the model was built for.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from policies.base import PublicSchemePolicy
from policies.flat import FlatGrowthPolicy


@dataclass(frozen=True)
class Dependent:
    current_age: int
    initial_premium: float = 223.75
    growth_rate: float = 0.03
    leave_age: int = 25  # coverage ends the year this age is reached

    def leave_year(self, start_year: int) -> int:
        return start_year + (self.leave_age - self.current_age)


def _default_dependents() -> Tuple[Dependent, Dependent]:
    return (Dependent(current_age=19), Dependent(current_age=16))


@dataclass(frozen=True)
class ProjectionConfig:
    start_year: int = 2024
    current_age: int = 41
    adult_1_life_expectancy: int = 81
    adult_2_life_expectancy: int = 88

    dependents: Tuple[Dependent, Dependent] = field(default_factory=_default_dependents)

    # adult premium (base excludes the fund loading)
    adult_base_premium: float = 680.36
    adult_growth_rate: float = 0.03
    adult_growth_rate_after_cutoff: Optional[float] = 0.02  # None -> single rate
    one_time_surcharge_pct: float = 0.0

    # surcharge fund (GBZ) lifecycle
    fund_cutoff_age: int = 60
    fund_loading: float = 0.10
    stabilize_age: int = 65
    stabilization_annual_amount: float = 1200.0  # per adult, drawn from the fund
    fund_interest_rate: float = 0.02

    public_policy: PublicSchemePolicy = field(default_factory=FlatGrowthPolicy)

    deductible_per_person: float = 800.0  # annual

    @property
    def total_years(self) -> int:
        """Number of year offsets after the first; the run covers total_years + 1 records."""
        return self.adult_2_life_expectancy - self.current_age

    @property
    def end_year(self) -> int:
        return self.start_year + self.total_years

    @property
    def adjusted_initial_premium(self) -> float:
        """Initial adult base after the one-time surcharge."""
        return float(self.adult_base_premium) * (1.0 + float(self.one_time_surcharge_pct) / 100.0)

    @property
    def monthly_stabilization_discount(self) -> float:
        return float(self.stabilization_annual_amount) / 12.0

    @property
    def stabilization_start_age(self) -> int:
        """First age of the stabilisation band; the loading band wins where they overlap."""
        return max(self.stabilize_age, self.fund_cutoff_age + 1)

    def year_at_age(self, age: int) -> int:
        return self.start_year + (age - self.current_age)

    def replace(self, **changes) -> "ProjectionConfig":
        return replace(self, **changes)
