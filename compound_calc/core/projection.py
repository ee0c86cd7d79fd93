"""Compound interest projection engine.

The three projection algorithms (aligned, compounding faster than deposits,
annualized fallback) only differ in how often a deposit lands, how many
steps make up a compounding cycle and which periodic rates apply, so they
all run through ``run_stepper`` with a ``StepPlan`` from
``prepare_projection``.

Order of operations per step:
  1) Deposit (if one is due this step) joins the current cycle.
  2) Mid-cycle: the deposit goes straight into the balance and a partial
     interest share accrues on it, pending until the cycle closes.
  3) Cycle close: interest is charged on the balance as it stood before
     the cycle's deposits, plus the last deposit, plus the pending
     partial shares. Only then does it count towards ``totalInterest``.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Union

from compound_calc.core.frequency import check_occurrence_table
from compound_calc.domain.projection import StepPlan, coerce_config, prepare_projection
from compound_calc.models import ProjectionConfig
from compound_calc.schemas.projection import PeriodRecord

logger = logging.getLogger(__name__)

check_occurrence_table()


def run_stepper(config: ProjectionConfig, plan: StepPlan) -> List[PeriodRecord]:
    amount = float(config.regularDepositAmount)

    current_value = float(config.initialInvestment)
    total_invested = float(config.initialInvestment)
    total_interest = 0.0
    deposits_made = 0

    # state of the compounding cycle in progress
    cycle_index = 1
    cycle_steps = 0
    cycle_deposits = 0
    cycle_deposit = 0.0
    cycle_interest = 0.0

    records: List[PeriodRecord] = []
    for step in range(1, plan.total_steps + 1):
        deposits_now = step % plan.deposit_every == 0
        deposit = amount if deposits_now else 0.0
        if deposits_now:
            deposits_made += 1
            cycle_deposits += 1
            cycle_deposit += deposit
            total_invested += deposit
        cycle_steps += 1

        if cycle_steps == plan.cycle_length:
            cycle_interest += (current_value - cycle_deposit + deposit) * plan.closing_rate
            total_interest += cycle_interest
            current_value += deposit + cycle_interest

            period_num = cycle_index
            period_deposit = cycle_deposit if cycle_deposits else None
            period_interest = cycle_interest

            cycle_index += 1
            cycle_steps = 0
            cycle_deposits = 0
            cycle_deposit = 0.0
            cycle_interest = 0.0
        else:
            cycle_interest += deposit * plan.partial_rate * (cycle_steps / plan.cycle_length)
            current_value += deposit

            period_num = None
            period_deposit = None
            period_interest = None

        records.append(
            PeriodRecord(
                depositNum=deposits_made if deposits_now else None,
                deposit=deposit if deposits_now else None,
                periodNum=period_num,
                periodDeposit=period_deposit,
                periodInterest=period_interest,
                totalInterest=total_interest,
                totalInvested=total_invested,
                currentValue=current_value,
                isYearEnd=step % plan.steps_per_year == 0,
            )
        )

    return records


def project(config: Union[ProjectionConfig, Mapping[str, object]]) -> List[PeriodRecord]:
    """Run a projection and return one record per simulated step.

    Raises ``ConfigurationError`` before any simulation work if the
    configuration is unusable.
    """
    config = coerce_config(config)
    plan = prepare_projection(config)
    logger.debug(
        "projecting %s: %d steps, %d per year, cycle of %d, deposit every %d",
        plan.algorithm.value,
        plan.total_steps,
        plan.steps_per_year,
        plan.cycle_length,
        plan.deposit_every,
    )
    return run_stepper(config, plan)


__all__ = [
    "project",
    "run_stepper",
]
