import datetime
import io
import os
from pathlib import Path

import pytest
from fastapi import HTTPException
from httpx import AsyncClient
from openpyxl import load_workbook
from tortoise.exceptions import OperationalError

from relief_admin.features.crises.models import Crisis
from relief_admin.features.finance.models import Donation, Expense
from relief_admin.features.reports import export
from relief_admin.features.reports.router import download_excel_report
from relief_admin.features.volunteers.models import Volunteer

EXCEL_URL = "/api/v1/admin/reports/excel"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def read_rows(content: bytes) -> list[tuple]:
    workbook = load_workbook(io.BytesIO(content))
    worksheet = workbook["Report"]
    return [tuple(row) for row in worksheet.iter_rows(values_only=True)]


def http_scope() -> dict:
    return {"type": "http", "method": "GET", "path": EXCEL_URL, "headers": [], "query_string": b""}


async def receive_disconnect() -> dict:
    return {"type": "http.disconnect"}


@pytest.mark.asyncio
async def test_volunteer_export(admin_client: AsyncClient, reports_dir: Path):
    await Volunteer.create(name="Amina Yusuf", age=29, mobile="+254700000001", assigned_task="Water")
    await Volunteer.create(name="Tomas Ruiz", age=41, mobile="+34600000002", assigned_task="Logistics")
    await Volunteer.create(name="Li Wei", age=35, mobile="+8613800000003")

    response = await admin_client.get(EXCEL_URL, params={"type": "volunteer"})
    assert response.status_code == 200, response.text
    assert response.headers["content-type"] == XLSX_MEDIA_TYPE
    assert response.headers["content-disposition"].startswith("attachment;")
    assert ".volunteer.xlsx" in response.headers["content-disposition"]

    rows = read_rows(response.content)
    assert rows[0] == ("Name", "Age", "Mobile", "Assigned Task")
    assert len(rows) - 1 == await Volunteer.all().count()
    assert rows[1] == ("Amina Yusuf", 29, "+254700000001", "Water")
    assert rows[3] == ("Li Wei", 35, "+8613800000003", None)

    # The directory was created on demand, and the export was removed after download
    assert reports_dir.is_dir()
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_donation_export_formats_dates(admin_client: AsyncClient, reports_dir: Path):
    await Donation.create(
        date=datetime.datetime(2024, 1, 1, 9, 15, tzinfo=datetime.timezone.utc),
        amount=10.0,
        donor="Red Cross",
    )

    response = await admin_client.get(EXCEL_URL, params={"type": "donation"})
    assert response.status_code == 200
    rows = read_rows(response.content)
    assert rows == [("Date", "Amount", "Donor"), ("2024-01-01", 10, "Red Cross")]
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_expense_and_crisis_exports_use_their_headers(admin_client: AsyncClient, reports_dir: Path):
    await Expense.create(
        date=datetime.datetime(2024, 2, 3, 12, tzinfo=datetime.timezone.utc),
        amount=250.0,
        details="Generator fuel",
    )
    await Crisis.create(title="Quake", description="M6.1 tremor", severity="high", location="North Ridge")

    expense_rows = read_rows((await admin_client.get(EXCEL_URL, params={"type": "expense"})).content)
    assert expense_rows == [("Date", "Amount", "Details"), ("2024-02-03", 250, "Generator fuel")]

    crisis_rows = read_rows((await admin_client.get(EXCEL_URL, params={"type": "crisis"})).content)
    assert crisis_rows == [
        ("Title", "Description", "Severity", "Location"),
        ("Quake", "M6.1 tremor", "high", "North Ridge"),
    ]
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_empty_collection_exports_header_only(admin_client: AsyncClient):
    response = await admin_client.get(EXCEL_URL, params={"type": "crisis"})
    assert response.status_code == 200
    assert read_rows(response.content) == [("Title", "Description", "Severity", "Location")]


@pytest.mark.asyncio
@pytest.mark.parametrize("query", [{"type": "unknown"}, {"type": ""}, {}])
async def test_invalid_export_type_returns_400_without_files(
    admin_client: AsyncClient, reports_dir: Path, query: dict
):
    response = await admin_client.get(EXCEL_URL, params=query)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid report type"}
    assert not reports_dir.exists()


@pytest.mark.asyncio
async def test_generate_excel_report_returns_unique_paths(reports_dir: Path):
    first = await export.generate_excel_report("volunteer")
    second = await export.generate_excel_report("volunteer")
    try:
        assert first != second
        assert os.path.dirname(first) == str(reports_dir)
        assert os.path.basename(first).startswith("report_")
        assert first.endswith(".volunteer.xlsx")
    finally:
        export.discard_report_file(first)
        export.discard_report_file(second)
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_report_file_removed_after_successful_transfer(reports_dir: Path):
    await Volunteer.create(name="Amina Yusuf", age=29, mobile="+254700000001")
    response = await download_excel_report(report_type="volunteer")
    assert len(list(reports_dir.iterdir())) == 1

    messages = []

    async def send(message):
        messages.append(message)

    await response(http_scope(), receive_disconnect, send)

    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")
    assert read_rows(body)[1] == ("Amina Yusuf", 29, "+254700000001", None)
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_report_file_removed_when_transfer_fails(reports_dir: Path):
    response = await download_excel_report(report_type="volunteer")

    async def broken_send(message):
        raise OSError("Connection reset by peer")

    # The client is gone before the first byte, so the body is never read
    with pytest.raises(OSError):
        await response(http_scope(), receive_disconnect, broken_send)
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_export_strips_characters_illegal_in_worksheets(admin_client: AsyncClient, reports_dir: Path):
    response = await admin_client.post(
        "/api/v1/admin/volunteers",
        json={"name": "Ami\x01na", "age": 29, "mobile": "+254700000001", "assigned_task": "Water\x1f"},
    )
    assert response.status_code == 201

    response = await admin_client.get(EXCEL_URL, params={"type": "volunteer"})
    assert response.status_code == 200, response.text
    assert read_rows(response.content)[1] == ("Amina", 29, "+254700000001", "Water")
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_export_file_system_fault_returns_500_without_leftovers(
    admin_client: AsyncClient, reports_dir: Path, monkeypatch: pytest.MonkeyPatch
):
    def write_partially(path, headers, rows):
        Path(path).write_bytes(b"partial")
        raise OSError("No space left on device")

    monkeypatch.setattr(export, "write_workbook", write_partially)

    response = await admin_client.get(EXCEL_URL, params={"type": "crisis"})
    assert response.status_code == 500
    assert response.json() == {"message": "No space left on device"}
    assert list(reports_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_export_store_fault_returns_500_without_leftovers(
    admin_client: AsyncClient, reports_dir: Path, monkeypatch: pytest.MonkeyPatch
):
    def broken_all(*args, **kwargs):
        raise OperationalError("database is locked")

    monkeypatch.setattr(Volunteer, "all", broken_all)

    response = await admin_client.get(EXCEL_URL, params={"type": "volunteer"})
    assert response.status_code == 500
    assert response.json() == {"message": "database is locked"}
    assert list(reports_dir.iterdir()) == []


def test_discard_report_file_swallows_errors(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    export.discard_report_file(str(tmp_path / "never-written.xlsx"))

    # Removing a directory with os.remove fails; the failure is only logged
    export.discard_report_file(str(tmp_path))
    assert tmp_path.exists()
    assert "Could not remove export file" in caplog.text


def test_resolve_layout_rejects_unknown_type():
    with pytest.raises(HTTPException) as exc_info:
        export.resolve_layout("invoice")
    assert exc_info.value.status_code == 400
