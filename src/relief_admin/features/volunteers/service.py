import logging
from typing import List
from fastapi import HTTPException, status
from tortoise.exceptions import BaseORMException

from .models import Volunteer
from .schemas import VolunteerCreate, VolunteerUpdate, VolunteerResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Volunteer not found"


def _to_volunteer_response(volunteer: Volunteer) -> VolunteerResponse:
    """Converts a Volunteer model instance to a VolunteerResponse schema."""
    return VolunteerResponse.model_validate(volunteer)


def _store_failure(action: str, exc: Exception) -> HTTPException:
    logger.error(f"Error trying to {action}: {exc}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )


async def _get_volunteer_or_404(volunteer_public_id: str) -> Volunteer:
    try:
        volunteer = await Volunteer.get_or_none(public_id=volunteer_public_id)
    except BaseORMException as e:
        raise _store_failure("fetch volunteer", e)
    if not volunteer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE
        )
    return volunteer


async def list_volunteers() -> List[VolunteerResponse]:
    """
    Lists every volunteer in insertion order.

    Returns:
        A list of all volunteers.
    """
    try:
        volunteers = await Volunteer.all().order_by("id")
    except BaseORMException as e:
        raise _store_failure("list volunteers", e)
    return [_to_volunteer_response(volunteer) for volunteer in volunteers]


async def create_volunteer(volunteer_in: VolunteerCreate) -> VolunteerResponse:
    """
    Creates a new volunteer.

    Args:
        volunteer_in: The validated volunteer fields.

    Returns:
        The persisted volunteer, including its newly assigned public_id.
    """
    try:
        volunteer = await Volunteer.create(**volunteer_in.model_dump())
    except BaseORMException as e:
        raise _store_failure("create volunteer", e)
    logger.info(f"Created volunteer {volunteer.public_id}")
    return _to_volunteer_response(volunteer)


async def get_volunteer(volunteer_public_id: str) -> VolunteerResponse:
    volunteer = await _get_volunteer_or_404(volunteer_public_id)
    return _to_volunteer_response(volunteer)


async def update_volunteer(
    volunteer_public_id: str, volunteer_in: VolunteerUpdate
) -> VolunteerResponse:
    """
    Updates a volunteer with the fields present in the payload.

    Fields left out of the payload keep their stored values. An empty
    payload leaves the record untouched.

    Args:
        volunteer_public_id: The public ID of the volunteer to update.
        volunteer_in: The partial volunteer fields.

    Returns:
        The updated volunteer.
    """
    volunteer = await _get_volunteer_or_404(volunteer_public_id)
    update_data = volunteer_in.model_dump(exclude_unset=True)
    if not update_data:
        return _to_volunteer_response(volunteer)

    for key, value in update_data.items():
        setattr(volunteer, key, value)
    try:
        await volunteer.save()
    except BaseORMException as e:
        raise _store_failure("update volunteer", e)
    return _to_volunteer_response(volunteer)


async def delete_volunteer(volunteer_public_id: str) -> dict:
    """
    Deletes a volunteer.

    Args:
        volunteer_public_id: The public ID of the volunteer to delete.

    Returns:
        A confirmation message.
    """
    try:
        deleted_count = await Volunteer.filter(public_id=volunteer_public_id).delete()
    except BaseORMException as e:
        raise _store_failure("delete volunteer", e)
    if not deleted_count:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE
        )
    logger.info(f"Deleted volunteer {volunteer_public_id}")
    return {"message": "Volunteer deleted"}
