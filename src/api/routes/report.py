"""Sales report endpoint."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_generate_report_use_case
from src.application.dto.responses import ErrorResponse, ReportResponse
from src.application.use_cases.generate_report import GenerateReportUseCase

router = APIRouter(prefix="/api/report", tags=["report"])


@router.get(
    "",
    response_model=ReportResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_report(
    use_case: GenerateReportUseCase = Depends(get_generate_report_use_case),
) -> ReportResponse:
    """Total sales count, revenue and profit over the whole journal."""
    report = await use_case.execute()
    return use_case.to_response(report)
