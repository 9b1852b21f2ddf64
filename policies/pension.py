"""
PensionBasedPolicy — GKV contributions recomputed from pension income at retirement.

Before retirement the contribution follows the flat growth curve on the
pre-retirement base. From the retirement age onward a new base is derived
from the household's two statutory pension components:

    new_base = (pension_1 + pension_2) × (rate_1_pct + rate_2_pct) / 100

and that base keeps growing at the same annual rate for (age − retirement_age)
years. rate_1_pct / rate_2_pct are typically the health contribution rate
(incl. supplementary contribution) and the long-term care rate.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import PublicSchemePolicy


@dataclass(frozen=True)
class PensionBasedPolicy(PublicSchemePolicy):
    base_monthly: float = 2200.00
    growth_rate: float = 0.03
    retirement_age: int = 67
    pension_1: float = 2200.00
    pension_2: float = 1400.00
    rate_1_pct: float = 16.3
    rate_2_pct: float = 3.4

    name = "pension"

    @property
    def retirement_base(self) -> float:
        """Monthly contribution in the first retirement year."""
        income = float(self.pension_1) + float(self.pension_2)
        return income * (float(self.rate_1_pct) + float(self.rate_2_pct)) / 100.0

    def monthly_cost(self, offset: int, age: int, *, adult_1_covered: bool = True) -> float:
        g = 1.0 + float(self.growth_rate)
        if age < self.retirement_age:
            return float(self.base_monthly) * g ** max(int(offset), 0)
        return self.retirement_base * g ** (int(age) - int(self.retirement_age))

    def describe(self) -> str:
        return (
            f"GKV: {self.growth_rate:.1%} growth, recomputed from pensions "
            f"at age {self.retirement_age}"
        )
