from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime


class CrisisBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255, description="Short title of the crisis")
    description: str = Field(..., description="What happened and what is needed")
    severity: str = Field(..., min_length=1, max_length=50, description="Severity level, e.g. low, medium, high")
    location: str = Field(..., min_length=1, max_length=255, description="Where the crisis is happening")


class CrisisCreate(CrisisBase):
    model_config = ConfigDict(extra="forbid")


class CrisisUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    severity: Optional[str] = Field(None, min_length=1, max_length=50)
    location: Optional[str] = Field(None, min_length=1, max_length=255)

    model_config = ConfigDict(extra="forbid")

    @field_validator("title", "description", "severity", "location")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class CrisisResponse(CrisisBase):
    public_id: str = Field(..., description="Public unique identifier for the crisis (KSUID)")
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(
        from_attributes=True,
        protected_namespaces=(),
    )
