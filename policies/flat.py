"""
Flat-growth GKV policies.

FlatGrowthPolicy: the base monthly contribution grows at a fixed rate forever.
HalveAfterFirstAdultPolicy: same curve, but the household pays half once the
first adult drops out of coverage (earliest model, before pensions).
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import PublicSchemePolicy


@dataclass(frozen=True)
class FlatGrowthPolicy(PublicSchemePolicy):
    """GKV cost = base × (1 + growth)^offset."""

    base_monthly: float = 2200.00
    growth_rate: float = 0.03

    name = "flat"

    def monthly_cost(self, offset: int, age: int, *, adult_1_covered: bool = True) -> float:
        return float(self.base_monthly) * (1.0 + float(self.growth_rate)) ** max(int(offset), 0)

    def describe(self) -> str:
        return f"GKV: {self.growth_rate:.1%} growth, no changes"


@dataclass(frozen=True)
class HalveAfterFirstAdultPolicy(PublicSchemePolicy):
    base_monthly: float = 2200.00
    growth_rate: float = 0.03

    name = "halve_after_first_adult"

    def monthly_cost(self, offset: int, age: int, *, adult_1_covered: bool = True) -> float:
        cost = float(self.base_monthly) * (1.0 + float(self.growth_rate)) ** max(int(offset), 0)
        return cost if adult_1_covered else cost * 0.5

    def describe(self) -> str:
        return f"GKV: {self.growth_rate:.1%} growth, halved once adult 1 coverage ends"
