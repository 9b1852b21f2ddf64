"""
Sanity checks for a projection configuration before it enters the engine.

None of these stop the engine from running — degenerate configurations
(inverted age bands, dependents already gone, zero premiums) still produce a
well-defined projection. They are surfaced to the user so the result is not
misread:
- Age bands that are empty or overlap
- Coverage windows already closed at the start year
- Growth rates that wipe out or explode a premium
- Horizons that run past plausible ages
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from core.config import ProjectionConfig
from policies import PensionBasedPolicy

logger = logging.getLogger(__name__)

MAX_HORIZON_YEARS = 100


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a configuration."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_config(config: ProjectionConfig) -> ValidationResult:
    """
    Run all checks on a configuration.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    cfg = config
    result = ValidationResult()

    # --- Horizon ---
    if cfg.total_years < 0:
        result.errors.append(
            f"Adult 2 life expectancy ({cfg.adult_2_life_expectancy}) is below the "
            f"current age ({cfg.current_age}); nothing to project."
        )
        return result
    if cfg.total_years + 1 > MAX_HORIZON_YEARS:
        result.warnings.append(f"Projection spans {cfg.total_years + 1} years.")
    if cfg.adult_1_life_expectancy > cfg.adult_2_life_expectancy:
        result.warnings.append(
            "Adult 1 life expectancy exceeds adult 2's; the projection stops at adult 2's "
            "and adult 1's later years are not shown."
        )
    if cfg.adult_1_life_expectancy < cfg.current_age:
        result.warnings.append("Adult 1 is not covered in any projected year.")

    # --- Age bands ---
    if cfg.stabilize_age <= cfg.fund_cutoff_age:
        result.warnings.append(
            f"Stabilisation age ({cfg.stabilize_age}) is not after the fund cutoff age "
            f"({cfg.fund_cutoff_age}); the loading band takes precedence and the "
            f"no-loading band is empty."
        )
    if cfg.fund_cutoff_age < cfg.current_age:
        result.warnings.append("Fund cutoff age is already passed; no fund contributions are made.")
    if cfg.stabilization_annual_amount > 0 and cfg.fund_loading == 0:
        result.warnings.append("Fund loading is 0 %; the stabilisation discount can never be funded.")

    # --- Dependents ---
    for n, dep in enumerate(cfg.dependents, start=1):
        if dep.leave_year(cfg.start_year) <= cfg.start_year:
            result.warnings.append(f"Child {n} is already at or past leave age {dep.leave_age}.")
        if dep.growth_rate <= -1.0:
            result.warnings.append(f"Child {n} growth rate of {dep.growth_rate:.0%} zeroes the premium.")

    # --- Growth rates ---
    for label, rate in (
        ("Adult premium growth", cfg.adult_growth_rate),
        ("Adult premium growth after cutoff", cfg.adult_growth_rate_after_cutoff),
        ("Fund interest", cfg.fund_interest_rate),
    ):
        if rate is None:
            continue
        if rate <= -1.0:
            result.warnings.append(f"{label} of {rate:.0%} zeroes the amount.")
        elif rate < 0:
            result.warnings.append(f"{label} is negative ({rate:.1%}).")
        elif rate > 0.25:
            result.warnings.append(f"{label} of {rate:.1%} is unusually high.")

    # --- Public scheme ---
    policy = cfg.public_policy
    if isinstance(policy, PensionBasedPolicy):
        if policy.retirement_age < cfg.current_age:
            result.warnings.append(
                f"Retirement age {policy.retirement_age} is already passed; GKV is "
                f"pension-based from the first year."
            )
        if policy.retirement_base == 0:
            result.warnings.append("Pension-based GKV contribution is 0 after retirement.")

    for w in result.warnings:
        logger.warning("Config check: %s", w)
    for e in result.errors:
        logger.error("Config check: %s", e)
    return result
