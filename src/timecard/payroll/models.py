"""Payroll value types: pure Pydantic, no I/O."""
from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

DEFAULT_PERIOD_THRESHOLD = 9.5


class OvertimePolicy(str, Enum):
    STANDARD = "standard"
    EXTENDED = "extended"

    @property
    def multiplier(self) -> float:
        return 1.5 if self is OvertimePolicy.STANDARD else 2.5


class PayParameters(BaseModel):
    model_config = {"frozen": True}

    pay_rate: float = Field(ge=0)
    tax_percent: float = Field(default=0.0, ge=0)
    overtime_policy: OvertimePolicy = OvertimePolicy.STANDARD
    period_threshold_hours: float = Field(default=DEFAULT_PERIOD_THRESHOLD, ge=0)


class DailyBreakdown(BaseModel):
    hours: float
    regular_hours: float
    overtime_hours: float


class PayTotals(BaseModel):
    total_regular_hours: float
    total_overtime_hours: float
    regular_pay: float
    regular_tax: float
    regular_total: float
    overtime_pay: float
    overtime_tax: float
    overtime_total: float
    gross_subtotal: float
    tax: float
    net_total: float


class PayBreakdown(BaseModel):
    threshold: float
    multiplier: float
    rows: list[DailyBreakdown]
    totals: PayTotals
