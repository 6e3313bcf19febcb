from tortoise import fields
from ...common.models import PublicRecord


class Crisis(PublicRecord):
    title = fields.CharField(max_length=255)
    description = fields.TextField()
    severity = fields.CharField(max_length=50)
    location = fields.CharField(max_length=255)

    def __str__(self):
        return f"{self.title} [{self.severity}] @ {self.location}"

    class Meta:
        table = "crises"
        ordering = ["id"]
