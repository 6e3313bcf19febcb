from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime


class VolunteerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Full name of the volunteer")
    age: int = Field(..., ge=0, le=150, description="Age in years")
    mobile: str = Field(..., min_length=1, max_length=32, description="Mobile phone number")
    assigned_task: Optional[str] = Field(None, max_length=255, description="Task the volunteer is assigned to")


class VolunteerCreate(VolunteerBase):
    model_config = ConfigDict(extra="forbid")


class VolunteerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="New name of the volunteer")
    age: Optional[int] = Field(None, ge=0, le=150, description="New age in years")
    mobile: Optional[str] = Field(None, min_length=1, max_length=32, description="New mobile phone number")
    assigned_task: Optional[str] = Field(None, max_length=255, description="New assigned task")

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "age", "mobile")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class VolunteerResponse(VolunteerBase):
    public_id: str = Field(..., description="Public unique identifier for the volunteer (KSUID)")
    created_at: datetime.datetime = Field(..., description="Timestamp of when the volunteer was created")
    updated_at: datetime.datetime = Field(..., description="Timestamp of when the volunteer was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        protected_namespaces=(),
    )
