"""
Pydantic schemas for company requests.

Field names are the public camelCase keys; unknown keys are rejected.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CompanyCreateRequest(BaseModel):
    """Schema for creating a company"""
    model_config = ConfigDict(extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")


class CompanyUpdateRequest(BaseModel):
    """Schema for a partial company update. The handle cannot be changed."""
    model_config = ConfigDict(extra="forbid")

    # Omitted fields are left alone; explicit nulls are rejected
    name: str = Field(None, min_length=1)
    description: str = None
    num_employees: int = Field(None, ge=0, alias="numEmployees")
    logo_url: str = Field(None, alias="logoUrl")


class CompanySearchFilters(BaseModel):
    """Query-string filters for listing companies"""
    model_config = ConfigDict(extra="forbid")

    name_like: Optional[str] = Field(None, min_length=1, alias="nameLike")
    min_employees: Optional[int] = Field(None, ge=0, alias="minEmployees")
    max_employees: Optional[int] = Field(None, ge=0, alias="maxEmployees")
