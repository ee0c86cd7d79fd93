from __future__ import annotations

import pytest

from compound_calc.core import frequency
from compound_calc.core.frequency import (
    Frequency,
    check_occurrence_table,
    occurrences_within,
    periodic_rate,
    reachable_pairs,
)
from compound_calc.domain.errors import ConfigurationError


def test_rank_orders_finest_to_coarsest():
    assert [freq.rank for freq in Frequency] == list(range(7))
    assert Frequency.DAILY.rank < Frequency.MONTHLY.rank < Frequency.YEARLY.rank


def test_periods_per_year():
    assert {freq.value: freq.periods_per_year for freq in Frequency} == {
        "daily": 365,
        "weekly": 52,
        "bi-weekly": 26,
        "monthly": 12,
        "quarterly": 4,
        "semi-annually": 2,
        "yearly": 1,
    }


def test_period_labels():
    assert Frequency.BI_WEEKLY.period_label == "Bi-week"
    assert Frequency.SEMI_ANNUALLY.period_label == "Semi-annual"


def test_parse_accepts_tags_and_rejects_unknown():
    assert Frequency.parse("bi-weekly") is Frequency.BI_WEEKLY
    assert Frequency.parse(Frequency.YEARLY) is Frequency.YEARLY

    with pytest.raises(ConfigurationError) as excinfo:
        Frequency.parse("fortnightly")
    assert "fortnightly" in excinfo.value.errors[0]


def test_occurrences_follow_calendar_conventions():
    assert occurrences_within(Frequency.DAILY, Frequency.QUARTERLY) == 91
    assert occurrences_within(Frequency.DAILY, Frequency.SEMI_ANNUALLY) == 182
    assert occurrences_within(Frequency.DAILY, Frequency.MONTHLY) == 30
    assert occurrences_within(Frequency.WEEKLY, Frequency.MONTHLY) == 4
    assert occurrences_within(Frequency.BI_WEEKLY, Frequency.QUARTERLY) == 6
    assert occurrences_within(Frequency.BI_WEEKLY, Frequency.YEARLY) == 26
    assert occurrences_within(Frequency.MONTHLY, Frequency.YEARLY) == 12


def test_occurrences_reject_coarser_into_finer():
    with pytest.raises(ConfigurationError):
        occurrences_within(Frequency.YEARLY, Frequency.MONTHLY)


def test_occurrence_table_covers_every_reachable_pair():
    check_occurrence_table()
    pairs = list(reachable_pairs())
    assert pairs
    for inner, outer in pairs:
        assert inner.rank <= outer.rank
        assert occurrences_within(inner, outer) >= 1


def test_periodic_rate():
    assert periodic_rate(12, Frequency.MONTHLY) == pytest.approx(0.01)
    assert periodic_rate(5, Frequency.YEARLY) == pytest.approx(0.05)
    assert periodic_rate(0, Frequency.DAILY) == 0.0


def test_occurrence_table_check_reports_missing_pair(monkeypatch):
    monkeypatch.delitem(frequency._OCCURRENCES, (Frequency.DAILY, Frequency.MONTHLY))

    with pytest.raises(RuntimeError, match="daily->monthly"):
        check_occurrence_table()
