from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Union

from pydantic import ValidationError

from compound_calc.core.frequency import (
    Frequency,
    occurrences_within,
    periodic_rate,
)
from compound_calc.domain.errors import ConfigurationError
from compound_calc.models import ProjectionConfig

ANNUALIZED_CYCLES_PER_YEAR = 13


class Algorithm(str, Enum):
    ALIGNED = "aligned"
    COMPOUNDING_FASTER = "compounding-faster"
    ANNUALIZED = "annualized"


@dataclass(frozen=True)
class StepPlan:
    """Resolved iteration parameters for one projection run.

    Every algorithm is expressed as the same walk: ``total_steps`` steps,
    a compounding boundary every ``cycle_length`` steps, a deposit every
    ``deposit_every`` steps.
    """

    algorithm: Algorithm
    total_steps: int
    steps_per_year: int
    cycle_length: int
    deposit_every: int
    closing_rate: float
    partial_rate: float


def coerce_config(config: Union[ProjectionConfig, Mapping[str, object]]) -> ProjectionConfig:
    if isinstance(config, ProjectionConfig):
        return config
    try:
        return ProjectionConfig.model_validate(config)
    except ValidationError as exc:
        raise ConfigurationError(
            [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()]
        ) from exc


def check_config(config: ProjectionConfig) -> List[str]:
    """Return every problem found in ``config``.

    Models built with ``model_construct`` skip pydantic validation, so the
    numeric constraints are checked again here.
    """
    errors: List[str] = []

    for name in ("initialInvestment", "regularDepositAmount", "interestRate"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{name} must be a number")
        elif not math.isfinite(value):
            errors.append(f"{name} must be finite")
        elif name != "interestRate" and value < 0:
            errors.append(f"{name} must not be negative")

    timeframe = config.timeframe
    if isinstance(timeframe, bool) or not isinstance(timeframe, int):
        errors.append("timeframe must be a whole number of years")
    elif timeframe < 1:
        errors.append("timeframe must be at least one year")

    for name in ("regularDepositInterval", "compoundInterval"):
        try:
            Frequency.parse(getattr(config, name))
        except ConfigurationError as exc:
            errors.extend(f"{name}: {message}" for message in exc.errors)

    return errors


def select_algorithm(deposit: Frequency, compound: Frequency) -> Algorithm:
    if deposit.rank < Frequency.MONTHLY.rank and compound is Frequency.MONTHLY:
        return Algorithm.ANNUALIZED
    if deposit.rank > compound.rank:
        return Algorithm.COMPOUNDING_FASTER
    return Algorithm.ALIGNED


def annualized_deposits_per_cycle(deposit: Frequency) -> int:
    if deposit is Frequency.DAILY:
        return 28
    if deposit is Frequency.WEEKLY:
        return 4
    return 2


def prepare_projection(config: ProjectionConfig) -> StepPlan:
    errors = check_config(config)
    if errors:
        raise ConfigurationError(errors)

    deposit = Frequency.parse(config.regularDepositInterval)
    compound = Frequency.parse(config.compoundInterval)
    algorithm = select_algorithm(deposit, compound)
    rate = periodic_rate(config.interestRate, compound)

    if algorithm is Algorithm.ANNUALIZED:
        cycle_length = annualized_deposits_per_cycle(deposit)
        steps_per_year = ANNUALIZED_CYCLES_PER_YEAR * cycle_length
        closing_rate = config.interestRate / ANNUALIZED_CYCLES_PER_YEAR / 100.0
        return StepPlan(
            algorithm=algorithm,
            total_steps=steps_per_year * config.timeframe,
            steps_per_year=steps_per_year,
            cycle_length=cycle_length,
            deposit_every=1,
            closing_rate=closing_rate,
            partial_rate=closing_rate if config.uniformAnnualizedRate else rate,
        )

    if algorithm is Algorithm.COMPOUNDING_FASTER:
        steps_per_year = compound.periods_per_year
        return StepPlan(
            algorithm=algorithm,
            total_steps=steps_per_year * config.timeframe,
            steps_per_year=steps_per_year,
            cycle_length=1,
            deposit_every=occurrences_within(compound, deposit),
            closing_rate=rate,
            partial_rate=rate,
        )

    steps_per_year = deposit.periods_per_year
    return StepPlan(
        algorithm=algorithm,
        total_steps=steps_per_year * config.timeframe,
        steps_per_year=steps_per_year,
        cycle_length=occurrences_within(deposit, compound),
        deposit_every=1,
        closing_rate=rate,
        partial_rate=rate,
    )
