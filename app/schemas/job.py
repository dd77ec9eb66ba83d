from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional
from decimal import Decimal
from enum import Enum


class EquityFilter(str, Enum):
    """
    hasEquity search filter.

    - ANY: hasEquity not given
    - REQUIRE_EQUITY: hasEquity=true, only jobs with equity > 0
    - ONLY_ZERO_EQUITY: hasEquity=false, which does not restrict results
    """
    ANY = "ANY"
    REQUIRE_EQUITY = "REQUIRE_EQUITY"
    ONLY_ZERO_EQUITY = "ONLY_ZERO_EQUITY"


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25, alias="companyHandle")


class JobUpdateRequest(BaseModel):
    """Schema for a partial job update. The company cannot be changed."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


class JobSearchFilters(BaseModel):
    """Query-string filters for listing jobs"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    min_salary: Optional[int] = Field(None, ge=0, alias="minSalary")
    has_equity: EquityFilter = Field(EquityFilter.ANY, alias="hasEquity")

    @field_validator("has_equity", mode="before")
    @classmethod
    def parse_has_equity(cls, v: Any) -> Any:
        """Map the boolean hasEquity (or its query-string form) onto EquityFilter"""
        if v is None:
            return EquityFilter.ANY
        if isinstance(v, EquityFilter):
            return v
        # Any string other than "true" (case-insensitive) means false
        if isinstance(v, str):
            v = v.lower() == "true"
        if isinstance(v, bool):
            return EquityFilter.REQUIRE_EQUITY if v else EquityFilter.ONLY_ZERO_EQUITY
        return v
