"""Payroll computation endpoint."""
from fastapi import APIRouter, Depends
from timecard.api.deps import get_payroll_service
from timecard.api.schemas.payroll import PayRequest, PayrollResponse
from timecard.services.payroll_service import PayrollService

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.post("/compute", response_model=PayrollResponse)
def compute_payroll(
    payload: PayRequest, service: PayrollService = Depends(get_payroll_service),
) -> PayrollResponse:
    return service.compute(payload)
