from tortoise import fields

from ...common.models import PublicRecord


class User(PublicRecord):
    username = fields.CharField(max_length=100, unique=True, db_index=True)
    email = fields.CharField(max_length=255, unique=True, db_index=True)
    hashed_password = fields.CharField(max_length=255)
    role = fields.CharField(max_length=50, default="staff")  # E.g., "staff", "admin"
    is_active = fields.BooleanField(default=True)

    def __str__(self):
        return f"{self.username} ({self.role})"

    class Meta:
        table = "users"
