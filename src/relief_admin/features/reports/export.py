"""
Spreadsheet exports.

Each export type maps one collection onto a fixed column layout. The workbook
is written to ``config.REPORTS_DIR`` under a per-request unique name, sent
back to the caller and then removed, so no export outlives its response.
"""

import datetime
import logging
import os
from typing import Any, Callable, NamedTuple, Optional, Sequence, Type

from fastapi import HTTPException, status
from fastapi.responses import FileResponse
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from starlette.concurrency import run_in_threadpool
from tortoise.exceptions import BaseORMException
from tortoise.models import Model

from ...common.models import generate_ksuid
from ...core import config
from ..crises.models import Crisis
from ..finance.models import Donation, Expense
from ..volunteers.models import Volunteer
from .service import format_day

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ExportLayout(NamedTuple):
    model: Type[Model]
    headers: Sequence[str]
    to_row: Callable[[Any], Sequence[Any]]


EXPORT_LAYOUTS: dict[str, ExportLayout] = {
    "donation": ExportLayout(
        Donation,
        ("Date", "Amount", "Donor"),
        lambda d: (format_day(d.date), d.amount, d.donor),
    ),
    "expense": ExportLayout(
        Expense,
        ("Date", "Amount", "Details"),
        lambda e: (format_day(e.date), e.amount, e.details),
    ),
    "volunteer": ExportLayout(
        Volunteer,
        ("Name", "Age", "Mobile", "Assigned Task"),
        lambda v: (v.name, v.age, v.mobile, v.assigned_task),
    ),
    "crisis": ExportLayout(
        Crisis,
        ("Title", "Description", "Severity", "Location"),
        lambda c: (c.title, c.description, c.severity, c.location),
    ),
}


def resolve_layout(report_type: Optional[str]) -> ExportLayout:
    layout = EXPORT_LAYOUTS.get(report_type or "")
    if layout is None:
        logger.info(f"Rejected export request for report type {report_type!r}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid report type",
        )
    return layout


def build_report_path(report_type: str) -> str:
    """Creates the reports directory if needed and returns a fresh file path in it."""
    os.makedirs(config.REPORTS_DIR, exist_ok=True)
    timestamp = datetime.datetime.now(datetime.timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    file_name = f"report_{timestamp}_{generate_ksuid()}.{report_type}.xlsx"
    return os.path.join(config.REPORTS_DIR, file_name)


def _cell_value(value: Any) -> Any:
    # Control characters are valid in the store but not in an xlsx worksheet
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def write_workbook(path: str, headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Report"
    worksheet.append(list(headers))
    for cell in worksheet[1]:
        cell.font = Font(bold=True)
    for row in rows:
        worksheet.append([_cell_value(value) for value in row])
    workbook.save(path)


def discard_report_file(path: str) -> None:
    """Removes an export file. Failures are logged, never raised."""
    try:
        os.remove(path)
        logger.debug(f"Removed export file {path}")
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove export file {path}: {e}")


async def generate_excel_report(report_type: Optional[str]) -> str:
    """
    Writes the requested collection to a new spreadsheet file.

    Args:
        report_type: One of "donation", "expense", "volunteer" or "crisis".

    Returns:
        The path of the written file. The caller owns it and must discard it.

    Raises:
        HTTPException: 400 for an unknown or missing type, before anything
            touches the file system. 500 for store or file-system faults.
    """
    layout = resolve_layout(report_type)
    path = None
    try:
        path = build_report_path(report_type)
        logger.info(f"Generating {report_type} export at {path}")
        records = await layout.model.all().order_by("id")
        rows = [layout.to_row(record) for record in records]
        await run_in_threadpool(write_workbook, path, layout.headers, rows)
    except (BaseORMException, OSError) as e:
        logger.error(f"Error generating {report_type} export: {e}", exc_info=True)
        if path is not None:
            discard_report_file(path)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    logger.info(f"Export {path} written with {len(rows)} row(s)")
    return path


class ReportFileResponse(FileResponse):
    """A file attachment whose file is removed once the response cycle ends, however it ends."""

    async def __call__(self, scope, receive, send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            discard_report_file(self.path)
