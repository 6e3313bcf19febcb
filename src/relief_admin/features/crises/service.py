import logging
from typing import List
from fastapi import HTTPException, status
from tortoise.exceptions import BaseORMException

from .models import Crisis
from .schemas import CrisisCreate, CrisisUpdate, CrisisResponse

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Crisis not found"


def _store_failure(action: str, exc: Exception) -> HTTPException:
    logger.error(f"Error trying to {action}: {exc}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )


async def _get_crisis_or_404(crisis_public_id: str) -> Crisis:
    try:
        crisis = await Crisis.get_or_none(public_id=crisis_public_id)
    except BaseORMException as e:
        raise _store_failure("fetch crisis", e)
    if not crisis:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE
        )
    return crisis


async def list_crises() -> List[CrisisResponse]:
    """Lists every crisis in insertion order."""
    try:
        crises = await Crisis.all().order_by("id")
    except BaseORMException as e:
        raise _store_failure("list crises", e)
    return [CrisisResponse.model_validate(crisis) for crisis in crises]


async def create_crisis(crisis_in: CrisisCreate) -> CrisisResponse:
    """
    Creates a new crisis record.

    Args:
        crisis_in: The validated crisis fields.

    Returns:
        The persisted crisis, including its newly assigned public_id.
    """
    try:
        crisis = await Crisis.create(**crisis_in.model_dump())
    except BaseORMException as e:
        raise _store_failure("create crisis", e)
    logger.info(f"Created crisis {crisis.public_id} ({crisis.severity})")
    return CrisisResponse.model_validate(crisis)


async def get_crisis(crisis_public_id: str) -> CrisisResponse:
    crisis = await _get_crisis_or_404(crisis_public_id)
    return CrisisResponse.model_validate(crisis)


async def update_crisis(crisis_public_id: str, crisis_in: CrisisUpdate) -> CrisisResponse:
    """
    Updates a crisis with the fields present in the payload.

    Args:
        crisis_public_id: The public ID of the crisis to update.
        crisis_in: The partial crisis fields.

    Returns:
        The updated crisis.
    """
    crisis = await _get_crisis_or_404(crisis_public_id)
    update_data = crisis_in.model_dump(exclude_unset=True)
    if not update_data:
        return CrisisResponse.model_validate(crisis)

    for key, value in update_data.items():
        setattr(crisis, key, value)
    try:
        await crisis.save()
    except BaseORMException as e:
        raise _store_failure("update crisis", e)
    return CrisisResponse.model_validate(crisis)


async def delete_crisis(crisis_public_id: str) -> dict:
    """
    Deletes a crisis.

    Args:
        crisis_public_id: The public ID of the crisis to delete.

    Returns:
        A confirmation message.
    """
    try:
        deleted_count = await Crisis.filter(public_id=crisis_public_id).delete()
    except BaseORMException as e:
        raise _store_failure("delete crisis", e)
    if not deleted_count:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE
        )
    logger.info(f"Deleted crisis {crisis_public_id}")
    return {"message": "Crisis deleted"}
