"""Payroll computation use-case service."""
from __future__ import annotations
from timecard.api.schemas.payroll import PayRequest, PayrollResponse
from timecard.payroll.calculator import compute_pay


class PayrollService:
    def compute(self, request: PayRequest) -> PayrollResponse:
        breakdown = compute_pay(request.hours, request.parameters())
        return PayrollResponse(
            overtime_policy=request.overtime_policy,
            pay_rate=request.pay_rate,
            tax_percent=request.tax_percent,
            **breakdown.model_dump(),
        )
