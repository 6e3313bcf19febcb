"""CLI commands for recording donations and expenses."""
import asyncio
import datetime
from typing import Optional

import typer

from ...features.finance import service as finance_service
from ..db import DBConnection

donations_app = typer.Typer(name="donations", help="Record incoming donations.")
expenses_app = typer.Typer(name="expenses", help="Record relief expenses.")


def _parse_day(value: Optional[str]) -> Optional[datetime.datetime]:
    if value is None:
        return None
    try:
        day = datetime.date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"'{value}' is not a YYYY-MM-DD date")
    # Noon UTC keeps the record on the same calendar day in the daily report
    return datetime.datetime(day.year, day.month, day.day, 12, tzinfo=datetime.timezone.utc)


@donations_app.command("add")
def add_donation_command(
    amount: float = typer.Option(..., min=0, help="Donated amount."),
    donor: str = typer.Option(..., help="Name of the donor."),
    date: Optional[str] = typer.Option(None, help="Day received (YYYY-MM-DD). Defaults to now."),
):
    """Records a donation."""
    asyncio.run(_add_donation(amount, donor, _parse_day(date)))


async def _add_donation(amount: float, donor: str, date: Optional[datetime.datetime]):
    async with DBConnection():
        donation = await finance_service.record_donation(amount=amount, donor=donor, date=date)
        typer.secho(f"Donation {donation.public_id} recorded: {donation}", fg=typer.colors.GREEN)


@expenses_app.command("add")
def add_expense_command(
    amount: float = typer.Option(..., min=0, help="Spent amount."),
    details: str = typer.Option(..., help="What the money was spent on."),
    date: Optional[str] = typer.Option(None, help="Day spent (YYYY-MM-DD). Defaults to now."),
):
    """Records an expense."""
    asyncio.run(_add_expense(amount, details, _parse_day(date)))


async def _add_expense(amount: float, details: str, date: Optional[datetime.datetime]):
    async with DBConnection():
        expense = await finance_service.record_expense(amount=amount, details=details, date=date)
        typer.secho(f"Expense {expense.public_id} recorded: {expense}", fg=typer.colors.GREEN)
