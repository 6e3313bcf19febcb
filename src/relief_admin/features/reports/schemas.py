"""Daily Report API Schemas

Pydantic models for the daily financial report. Keys follow the public
contract of the report: each entry is ``{"day": "YYYY-MM-DD", "totalAmount": n}``."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class DailyTotal(BaseModel):
    day: str = Field(..., description="Calendar day in UTC (YYYY-MM-DD)")
    total_amount: float = Field(..., alias="totalAmount", description="Sum of amounts recorded that day")

    model_config = ConfigDict(populate_by_name=True)


class DailyReportResponse(BaseModel):
    donations: List[DailyTotal]
    expenses: List[DailyTotal]
