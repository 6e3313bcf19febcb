import datetime
import logging
from typing import Optional

from .models import Donation, Expense

logger = logging.getLogger(__name__)


def _resolve_date(date: Optional[datetime.datetime]) -> datetime.datetime:
    if date is None:
        return datetime.datetime.now(datetime.timezone.utc)
    if date.tzinfo is None:
        return date.replace(tzinfo=datetime.timezone.utc)
    return date


async def record_donation(
    amount: float, donor: str, date: Optional[datetime.datetime] = None
) -> Donation:
    """
    Stores a donation.

    Args:
        amount: The donated amount.
        donor: Who gave it.
        date: When it was received. Naive values are taken as UTC; defaults to now.

    Returns:
        The persisted Donation.
    """
    donation = await Donation.create(date=_resolve_date(date), amount=amount, donor=donor)
    logger.info(f"Recorded donation {donation.public_id} of {amount} from {donor}")
    return donation


async def record_expense(
    amount: float, details: str, date: Optional[datetime.datetime] = None
) -> Expense:
    """Stores an expense. Same date handling as record_donation."""
    expense = await Expense.create(date=_resolve_date(date), amount=amount, details=details)
    logger.info(f"Recorded expense {expense.public_id} of {amount}")
    return expense
