"""Data models for money coming in (donations) and going out (expenses)."""

from tortoise import fields
from ...common.models import PublicRecord


class Donation(PublicRecord):
    date = fields.DatetimeField(db_index=True)
    amount = fields.FloatField(description="Donated amount")
    donor = fields.CharField(max_length=255)

    def __str__(self):
        return f"{self.donor}: {self.amount:.2f} on {self.date:%Y-%m-%d}"

    class Meta:
        table = "donations"
        ordering = ["id"]


class Expense(PublicRecord):
    date = fields.DatetimeField(db_index=True)
    amount = fields.FloatField(description="Spent amount")
    details = fields.TextField()

    def __str__(self):
        return f"{self.amount:.2f} on {self.date:%Y-%m-%d}: {self.details}"

    class Meta:
        table = "expenses"
        ordering = ["id"]
