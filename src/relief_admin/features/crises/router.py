"""API routes for managing crises."""
from fastapi import APIRouter, status, Depends
from typing import List

from ...common.schemas import MessageResponse
from ..auth.security import get_current_active_admin_user
from .schemas import CrisisCreate, CrisisUpdate, CrisisResponse
from . import service

router = APIRouter(
    prefix="/admin/crises",
    tags=["Crises"],
    dependencies=[Depends(get_current_active_admin_user)],
    responses={
        404: {"model": MessageResponse, "description": "Not found"},
        500: {"model": MessageResponse, "description": "Store failure"},
    },
)


@router.get("", response_model=List[CrisisResponse], summary="List all crises")
async def list_crises():
    return await service.list_crises()


@router.post(
    "",
    response_model=CrisisResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a new crisis",
)
async def create_crisis(crisis_in: CrisisCreate):
    return await service.create_crisis(crisis_in)


@router.get("/{crisis_public_id}", response_model=CrisisResponse, summary="Get a specific crisis")
async def get_crisis(crisis_public_id: str):
    return await service.get_crisis(crisis_public_id)


@router.put("/{crisis_public_id}", response_model=CrisisResponse, summary="Update a crisis")
async def update_crisis(crisis_public_id: str, crisis_in: CrisisUpdate):
    return await service.update_crisis(crisis_public_id, crisis_in)


@router.delete("/{crisis_public_id}", response_model=MessageResponse, summary="Delete a crisis")
async def delete_crisis(crisis_public_id: str):
    return await service.delete_crisis(crisis_public_id)
