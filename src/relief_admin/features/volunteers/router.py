"""API routes for managing volunteers."""
from fastapi import APIRouter, status, Depends
from typing import List

from ...common.schemas import MessageResponse
from ..auth.security import get_current_active_admin_user
from .schemas import VolunteerCreate, VolunteerUpdate, VolunteerResponse
from . import service

router = APIRouter(
    prefix="/admin/volunteers",
    tags=["Volunteers"],
    # Every volunteer route is restricted to administrators
    dependencies=[Depends(get_current_active_admin_user)],
    responses={
        404: {"model": MessageResponse, "description": "Not found"},
        500: {"model": MessageResponse, "description": "Store failure"},
    },
)


@router.get("", response_model=List[VolunteerResponse], summary="List all volunteers")
async def list_volunteers():
    return await service.list_volunteers()


@router.post(
    "",
    response_model=VolunteerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new volunteer",
)
async def create_volunteer(volunteer_in: VolunteerCreate):
    return await service.create_volunteer(volunteer_in)


@router.get(
    "/{volunteer_public_id}",
    response_model=VolunteerResponse,
    summary="Get a specific volunteer",
)
async def get_volunteer(volunteer_public_id: str):
    return await service.get_volunteer(volunteer_public_id)


@router.put(
    "/{volunteer_public_id}",
    response_model=VolunteerResponse,
    summary="Update a volunteer",
)
async def update_volunteer(volunteer_public_id: str, volunteer_in: VolunteerUpdate):
    return await service.update_volunteer(volunteer_public_id, volunteer_in)


@router.delete(
    "/{volunteer_public_id}",
    response_model=MessageResponse,
    summary="Delete a volunteer",
)
async def delete_volunteer(volunteer_public_id: str):
    return await service.delete_volunteer(volunteer_public_id)
