"""Data model for volunteers managed from the admin back office."""

from tortoise import fields
from ...common.models import PublicRecord


class Volunteer(PublicRecord):
    name = fields.CharField(max_length=255)
    age = fields.IntField()
    mobile = fields.CharField(max_length=32)
    assigned_task = fields.CharField(max_length=255, null=True)

    def __str__(self):
        return f"{self.name} ({self.assigned_task or 'unassigned'})"

    class Meta:
        table = "volunteers"
        ordering = ["id"]
