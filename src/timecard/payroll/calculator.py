"""Pay breakdown from a sequence of daily hours.

Two overtime notions run side by side over the same hours and must stay
separate:

* the daily rule pays every hour past 8 in a day at 1.5x and produces
  ``regular_pay``;
* the period rule pays every hour past ``period_threshold_hours`` at the
  policy multiplier and produces ``overtime_pay``.

The per-row regular/overtime split shown to the user follows the period
threshold. Tax is taken from each pay stream separately.
"""
from __future__ import annotations
from collections.abc import Sequence
from timecard.payroll.models import DailyBreakdown, PayBreakdown, PayParameters, PayTotals

DAILY_BASE_HOURS = 8.0
DAILY_TIME_AND_HALF_MULTIPLIER = 1.5


def split_day(hours: float, threshold: float) -> DailyBreakdown:
    return DailyBreakdown(
        hours=hours,
        regular_hours=min(hours, threshold),
        overtime_hours=max(0.0, hours - threshold),
    )


def daily_rule_pay(hours: Sequence[float], pay_rate: float) -> float:
    total = 0.0
    for h in hours:
        base_hours = min(h, DAILY_BASE_HOURS)
        time_and_half_hours = max(0.0, h - DAILY_BASE_HOURS)
        total += base_hours * pay_rate + time_and_half_hours * pay_rate * DAILY_TIME_AND_HALF_MULTIPLIER
    return total


def period_overtime_hours(hours: Sequence[float], threshold: float) -> float:
    return sum(max(0.0, h - threshold) for h in hours)


def compute_pay(hours: Sequence[float], params: PayParameters) -> PayBreakdown:
    """Itemize pay for ``hours``.

    Expects non-negative finite hours; never raises for that domain.
    """
    threshold = params.period_threshold_hours
    multiplier = params.overtime_policy.multiplier

    rows = [split_day(float(h), threshold) for h in hours]
    total_regular_hours = sum(r.regular_hours for r in rows)
    total_overtime_hours = period_overtime_hours([r.hours for r in rows], threshold)

    regular_pay = daily_rule_pay([r.hours for r in rows], params.pay_rate)
    overtime_pay = total_overtime_hours * params.pay_rate * multiplier

    tax_rate = params.tax_percent / 100
    regular_tax = regular_pay * tax_rate
    overtime_tax = overtime_pay * tax_rate
    regular_total = regular_pay - regular_tax
    overtime_total = overtime_pay - overtime_tax

    return PayBreakdown(
        threshold=threshold,
        multiplier=multiplier,
        rows=rows,
        totals=PayTotals(
            total_regular_hours=total_regular_hours,
            total_overtime_hours=total_overtime_hours,
            regular_pay=regular_pay,
            regular_tax=regular_tax,
            regular_total=regular_total,
            overtime_pay=overtime_pay,
            overtime_tax=overtime_tax,
            overtime_total=overtime_total,
            gross_subtotal=regular_pay + overtime_pay,
            tax=regular_tax + overtime_tax,
            net_total=regular_total + overtime_total,
        ),
    )
