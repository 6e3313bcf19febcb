"""
Reports Service Module

Builds the daily report: donation and expense amounts summed per calendar day.
"""

import datetime
import logging
from typing import List, Type

from fastapi import HTTPException, status
from tortoise.exceptions import BaseORMException
from tortoise.models import Model

from ..finance.models import Donation, Expense
from .schemas import DailyTotal, DailyReportResponse

logger = logging.getLogger(__name__)


def format_day(value: datetime.datetime) -> str:
    """Truncates a stored date to its UTC calendar day, formatted YYYY-MM-DD."""
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.strftime("%Y-%m-%d")


async def _daily_totals(model: Type[Model]) -> List[DailyTotal]:
    """
    Groups every record of ``model`` by day and sums its amounts.

    Only days that have at least one record appear in the result. The order
    of the entries is not part of the contract.
    """
    totals: dict[str, float] = {}
    for record in await model.all():
        day = format_day(record.date)
        totals[day] = totals.get(day, 0.0) + record.amount
    return [DailyTotal(day=day, total_amount=total) for day, total in totals.items()]


async def generate_daily_report() -> DailyReportResponse:
    """
    Generates the daily donations and expenses report.

    Returns:
        DailyReportResponse: per-day totals for donations and for expenses.

    Raises:
        HTTPException: 500 carrying the store's message if either collection
            cannot be read. No partial report is returned.
    """
    try:
        donations = await _daily_totals(Donation)
        expenses = await _daily_totals(Expense)
    except BaseORMException as e:
        logger.error(f"Error generating daily report: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    logger.info(f"Daily report covers {len(donations)} donation day(s) and {len(expenses)} expense day(s)")
    return DailyReportResponse(donations=donations, expenses=expenses)
