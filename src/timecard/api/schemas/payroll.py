"""Payroll DTOs: pure Pydantic."""
from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from timecard.payroll.models import (
    DEFAULT_PERIOD_THRESHOLD, OvertimePolicy, PayBreakdown, PayParameters,
)


class PayRequest(BaseModel):
    hours: list[float] = Field(default_factory=list)
    pay_rate: float = Field(ge=0, allow_inf_nan=False)
    tax_percent: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    overtime_policy: OvertimePolicy = OvertimePolicy.STANDARD
    period_threshold_hours: float = Field(default=DEFAULT_PERIOD_THRESHOLD, ge=0, allow_inf_nan=False)

    @field_validator("hours")
    @classmethod
    def hours_in_domain(cls, v: list[float]) -> list[float]:
        for i, h in enumerate(v, start=1):
            if not 0 <= h < float("inf"):
                raise ValueError(f"hours[{i}] must be a non-negative finite number")
        return v

    def parameters(self) -> PayParameters:
        return PayParameters(
            pay_rate=self.pay_rate,
            tax_percent=self.tax_percent,
            overtime_policy=self.overtime_policy,
            period_threshold_hours=self.period_threshold_hours,
        )


class PayrollResponse(PayBreakdown):
    overtime_policy: OvertimePolicy
    pay_rate: float
    tax_percent: float
