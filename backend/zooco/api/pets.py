"""
Pet endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from zooco.api.deps import get_pet_service
from zooco.core.errors import NotFoundError
from zooco.schemas.pet import Pet, PetCreate, PetUpdate
from zooco.services.pets import PetService

router = APIRouter()


@router.get("", response_model=List[Pet])
async def list_pets(service: PetService = Depends(get_pet_service)):
    """List all pets."""
    return await service.list_pets()


@router.post("", response_model=Pet, status_code=status.HTTP_201_CREATED)
async def create_pet(
    pet_data: PetCreate,
    service: PetService = Depends(get_pet_service),
):
    """Create a new pet."""
    return await service.create_pet(pet_data)


@router.get("/{pet_id}", response_model=Pet)
async def get_pet(pet_id: str, service: PetService = Depends(get_pet_service)):
    """Get a specific pet."""
    return await service.get_pet(pet_id)


@router.patch("/{pet_id}", response_model=Pet)
async def update_pet(
    pet_id: str,
    pet_data: PetUpdate,
    service: PetService = Depends(get_pet_service),
):
    """Update a pet."""
    return await service.update_pet(pet_id, pet_data)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(pet_id: str, service: PetService = Depends(get_pet_service)):
    """Delete a pet."""
    if not await service.delete_pet(pet_id):
        raise NotFoundError("Pet not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
