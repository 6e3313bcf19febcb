import os
from fastapi import APIRouter, Depends, Query
from typing import Optional

from ...common.schemas import MessageResponse
from ..auth.security import get_current_active_admin_user
from .schemas import DailyReportResponse
from . import export as report_export
from . import service as report_service

router = APIRouter(
    prefix="/admin/reports",
    tags=["Reports"],
    # Apply the admin gate to all routes in this router
    dependencies=[Depends(get_current_active_admin_user)],
    responses={500: {"model": MessageResponse, "description": "Store or file-system failure"}},
)


@router.get("", response_model=DailyReportResponse, summary="Daily donation and expense totals")
async def get_daily_report():
    return await report_service.generate_daily_report()


@router.get(
    "/excel",
    response_class=report_export.ReportFileResponse,
    summary="Download a collection as a spreadsheet",
    responses={
        200: {"content": {report_export.XLSX_MEDIA_TYPE: {}}},
        400: {"model": MessageResponse, "description": "Unknown report type"},
    },
)
async def download_excel_report(
    report_type: Optional[str] = Query(
        None,
        alias="type",
        description="One of donation, expense, volunteer, crisis",
    ),
):
    path = await report_export.generate_excel_report(report_type)
    return report_export.ReportFileResponse(
        path,
        filename=os.path.basename(path),
        media_type=report_export.XLSX_MEDIA_TYPE,
    )
