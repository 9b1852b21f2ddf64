from __future__ import annotations

from typing import Dict, Tuple

# Canonical yearly-record columns, in the order the engine emits them.
# Chart and table consumers index into frames built from these names only.
RECORD_COLUMNS: Tuple[str, ...] = (
    "year",
    "age",
    "adult_1_covered",
    "adult_2_covered",
    "dependent_1_covered",
    "dependent_2_covered",
    "covered_members",
    "base_premium",
    "adult_1_premium",
    "adult_2_premium",
    "dependent_1_premium",
    "dependent_2_premium",
    "monthly_deductible",
    "monthly_surcharge",
    "discount_applied",
    "monthly_private",
    "annual_private",
    "monthly_public",
    "annual_public",
    "cumulative_private",
    "cumulative_public",
    "difference",
    "fund_contribution",
    "fund_withdrawal",
    "fund_interest",
    "fund_balance",
    "cumulative_fund_contributions",
    "comment",
)

# Monthly / fund amounts kept at full precision in records; rounded for display.
CURRENCY_COLUMNS: Tuple[str, ...] = (
    "base_premium",
    "adult_1_premium",
    "adult_2_premium",
    "dependent_1_premium",
    "dependent_2_premium",
    "monthly_deductible",
    "monthly_surcharge",
    "monthly_private",
    "monthly_public",
    "fund_contribution",
    "fund_withdrawal",
    "fund_interest",
    "fund_balance",
)

TABLE_LABELS: Dict[str, str] = {
    "year": "Year",
    "age": "Age",
    "monthly_private": "Monthly PKV",
    "monthly_public": "Monthly GKV",
    "monthly_surcharge": "Monthly GBZ",
    "fund_balance": "Fund Balance",
    "cumulative_fund_contributions": "Total GBZ",
    "annual_private": "Annual PKV",
    "annual_public": "Annual GKV",
    "cumulative_private": "Cumulative PKV",
    "cumulative_public": "Cumulative GKV",
    "adult_1_premium": "Adult 1",
    "adult_2_premium": "Adult 2",
    "dependent_1_premium": "Child 1",
    "dependent_2_premium": "Child 2",
    "monthly_deductible": "Deductible",
    "covered_members": "Covered",
    "comment": "Comments",
}
