"""
Pet schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PetCreate(BaseModel):
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Species, e.g. dog or cat")
    breed: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    owner: str = Field(..., min_length=1)

    class Config:
        str_strip_whitespace = True


class PetUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    breed: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    owner: Optional[str] = Field(None, min_length=1)

    class Config:
        str_strip_whitespace = True


class Pet(BaseModel):
    """A stored pet. `id` is assigned by the repository on insert."""

    id: Optional[str] = None
    name: str
    type: str
    breed: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    owner: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
