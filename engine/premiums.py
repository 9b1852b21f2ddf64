"""
Private-scheme (PKV) premium helpers.

Adult premiums are banded by age:
  age <= fund_cutoff_age            base × (1 + loading)     loading goes to the fund
  cutoff < age < stabilize_age      base
  age >= stabilize_age              max(base − discount, 0)  discount only if the fund can pay

If stabilize_age <= fund_cutoff_age the loading band takes precedence and the
middle band is empty.
"""

from __future__ import annotations

from core.config import Dependent, ProjectionConfig
from core.utils import compound, two_phase_compound


def adult_base_premium(config: ProjectionConfig, age: int) -> float:
    """Monthly base premium (no loading, no discount) at `age`."""
    cfg = config
    years = age - cfg.current_age
    return two_phase_compound(
        cfg.adjusted_initial_premium,
        rate=cfg.adult_growth_rate,
        years=years,
        switch_after=cfg.fund_cutoff_age - cfg.current_age,
        rate_after=cfg.adult_growth_rate_after_cutoff,
    )


def in_loading_band(config: ProjectionConfig, age: int) -> bool:
    return age <= config.fund_cutoff_age


def in_stabilization_band(config: ProjectionConfig, age: int) -> bool:
    return age >= config.stabilization_start_age


def billed_adult_premium(
    config: ProjectionConfig,
    base: float,
    age: int,
    *,
    covered: bool,
    discount: float = 0.0,
) -> float:
    """Monthly premium billed to one adult; `discount` only matters in the stabilisation band."""
    if not covered:
        return 0.0
    if in_loading_band(config, age):
        return base * (1.0 + config.fund_loading)
    if in_stabilization_band(config, age):
        return max(base - discount, 0.0)
    return base


def dependent_premium(dependent: Dependent, offset: int, *, covered: bool) -> float:
    if not covered:
        return 0.0
    return compound(dependent.initial_premium, dependent.growth_rate, offset)


def monthly_deductible(covered_members: int, deductible_per_person: float) -> float:
    """Annual per-person deductible spread over twelve months."""
    return covered_members * float(deductible_per_person) / 12.0
