"""Headline figures and filtered views over projection records."""

from __future__ import annotations

from typing import List, Sequence

from compound_calc.domain.projection import StepPlan
from compound_calc.models import ProjectionConfig
from compound_calc.schemas.projection import PeriodRecord, ProjectionSummary


def summarize(records: Sequence[PeriodRecord], config: ProjectionConfig, plan: StepPlan) -> ProjectionSummary:
    """Collapse a projection into its final totals.

    An empty run reports the untouched initial investment.
    """
    deposits = sum(1 for record in records if record.depositNum is not None)
    if records:
        last = records[-1]
        final_value, total_interest, total_invested = last.currentValue, last.totalInterest, last.totalInvested
    else:
        final_value = total_invested = float(config.initialInvestment)
        total_interest = 0.0

    return ProjectionSummary(
        algorithm=plan.algorithm.value,
        records=len(records),
        deposits=deposits,
        finalValue=final_value,
        totalInterest=total_interest,
        totalInvested=total_invested,
    )


def year_end_records(records: Sequence[PeriodRecord]) -> List[PeriodRecord]:
    return [record for record in records if record.isYearEnd]


def non_empty_records(records: Sequence[PeriodRecord]) -> List[PeriodRecord]:
    """Keep only steps that both take a deposit and close a compounding cycle."""
    return [record for record in records if record.periodNum is not None and record.depositNum is not None]
