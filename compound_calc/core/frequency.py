"""Frequency tags and the calendar lookups between them.

The occurrence table is a lookup rather than a formula because calendar
conventions are not uniform (a quarter is taken as 91 days, a month as
4 weeks, and so on).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Tuple

from compound_calc.domain.errors import ConfigurationError


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: object) -> "Frequency":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise ConfigurationError([f"unsupported frequency {value!r}"]) from exc

    @property
    def rank(self) -> int:
        """Position in the finest-to-coarsest order (daily=0 ... yearly=6)."""
        return _ORDER.index(self)

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]

    @property
    def period_label(self) -> str:
        return _PERIOD_LABELS[self]


_ORDER: List[Frequency] = list(Frequency)

_PERIODS_PER_YEAR: Dict[Frequency, int] = {
    Frequency.DAILY: 365,
    Frequency.WEEKLY: 52,
    Frequency.BI_WEEKLY: 26,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.SEMI_ANNUALLY: 2,
    Frequency.YEARLY: 1,
}

_PERIOD_LABELS: Dict[Frequency, str] = {
    Frequency.DAILY: "Day",
    Frequency.WEEKLY: "Week",
    Frequency.BI_WEEKLY: "Bi-week",
    Frequency.MONTHLY: "Month",
    Frequency.QUARTERLY: "Quarter",
    Frequency.SEMI_ANNUALLY: "Semi-annual",
    Frequency.YEARLY: "Year",
}

# (inner, outer) -> how many inner periods fit inside one outer period
_OCCURRENCES: Dict[Tuple[Frequency, Frequency], int] = {
    (Frequency.DAILY, Frequency.DAILY): 1,
    (Frequency.DAILY, Frequency.WEEKLY): 7,
    (Frequency.DAILY, Frequency.BI_WEEKLY): 14,
    (Frequency.DAILY, Frequency.MONTHLY): 30,
    (Frequency.DAILY, Frequency.QUARTERLY): 91,
    (Frequency.DAILY, Frequency.SEMI_ANNUALLY): 182,
    (Frequency.DAILY, Frequency.YEARLY): 365,
    (Frequency.WEEKLY, Frequency.WEEKLY): 1,
    (Frequency.WEEKLY, Frequency.BI_WEEKLY): 2,
    (Frequency.WEEKLY, Frequency.MONTHLY): 4,
    (Frequency.WEEKLY, Frequency.QUARTERLY): 13,
    (Frequency.WEEKLY, Frequency.SEMI_ANNUALLY): 26,
    (Frequency.WEEKLY, Frequency.YEARLY): 52,
    (Frequency.BI_WEEKLY, Frequency.BI_WEEKLY): 1,
    (Frequency.BI_WEEKLY, Frequency.MONTHLY): 2,
    (Frequency.BI_WEEKLY, Frequency.QUARTERLY): 6,
    (Frequency.BI_WEEKLY, Frequency.SEMI_ANNUALLY): 13,
    (Frequency.BI_WEEKLY, Frequency.YEARLY): 26,
    (Frequency.MONTHLY, Frequency.MONTHLY): 1,
    (Frequency.MONTHLY, Frequency.QUARTERLY): 3,
    (Frequency.MONTHLY, Frequency.SEMI_ANNUALLY): 6,
    (Frequency.MONTHLY, Frequency.YEARLY): 12,
    (Frequency.QUARTERLY, Frequency.QUARTERLY): 1,
    (Frequency.QUARTERLY, Frequency.SEMI_ANNUALLY): 2,
    (Frequency.QUARTERLY, Frequency.YEARLY): 4,
    (Frequency.SEMI_ANNUALLY, Frequency.SEMI_ANNUALLY): 1,
    (Frequency.SEMI_ANNUALLY, Frequency.YEARLY): 2,
    (Frequency.YEARLY, Frequency.YEARLY): 1,
}


def occurrences_within(inner: Frequency, outer: Frequency) -> int:
    """Return how many ``inner`` periods make up one ``outer`` period.

    Only defined when ``inner`` is at least as fine as ``outer``; any other
    pair is a configuration error.
    """
    try:
        return _OCCURRENCES[(inner, outer)]
    except KeyError as exc:
        raise ConfigurationError(
            [f"no calendar mapping from {inner.value} into {outer.value}"]
        ) from exc


def periodic_rate(interest_rate: float, frequency: Frequency) -> float:
    """Annual nominal percentage rate spread over one ``frequency`` period."""
    return interest_rate / frequency.periods_per_year / 100.0


def reachable_pairs() -> Iterator[Tuple[Frequency, Frequency]]:
    """Yield every (inner, outer) pair the dispatcher can look up.

    Deposits finer than monthly into monthly compounding are annualized
    and never reach the table as an aligned pair, but the same pair is
    still queried when compounding daily/weekly/bi-weekly against
    monthly deposits.
    """
    for deposit in Frequency:
        for compound in Frequency:
            if deposit.rank < 3 and compound is Frequency.MONTHLY:
                continue
            if deposit.rank > compound.rank:
                yield compound, deposit
            else:
                yield deposit, compound


def check_occurrence_table() -> None:
    missing = sorted(
        {
            f"{inner.value}->{outer.value}"
            for inner, outer in reachable_pairs()
            if (inner, outer) not in _OCCURRENCES
        }
    )
    if missing:
        raise RuntimeError(f"occurrence table incomplete: {', '.join(missing)}")
