"""
CRUD operations for companies.

Rows are returned in their public shape:
{ handle, name, description, numEmployees, logoUrl }
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import query
from app.core.exceptions import DuplicateEntityError, InvalidRangeError, NotFoundError
from app.crud.sql import ProjectedColumn, Projection, SqlFragment, sql_for_partial_update
from app.schemas.company import CompanyCreateRequest, CompanySearchFilters

COMPANY_PROJECTION = Projection(
    ProjectedColumn("handle", "handle"),
    ProjectedColumn("name", "name"),
    ProjectedColumn("description", "description"),
    ProjectedColumn("num_employees", "numEmployees"),
    ProjectedColumn("logo_url", "logoUrl"),
)

COMPANY_FIELD_MAPPING = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def build_search_query(filters: CompanySearchFilters) -> SqlFragment:
    """
    Build the WHERE clause for listing companies.

    Checks run in a fixed order: nameLike, minEmployees, maxEmployees.

    Returns:
        SqlFragment("WHERE name ILIKE $1 AND num_employees >= $2", ["%an%", 10]),
        or SqlFragment("", []) when no filter is set
    """
    terms: List[str] = []
    values: List[Any] = []

    if filters.name_like is not None:
        values.append(f"%{filters.name_like}%")
        terms.append(f"name ILIKE ${len(values)}")
    if filters.min_employees is not None:
        values.append(filters.min_employees)
        terms.append(f"num_employees >= ${len(values)}")
    if filters.max_employees is not None:
        values.append(filters.max_employees)
        terms.append(f"num_employees <= ${len(values)}")

    if not terms:
        return SqlFragment("", [])
    return SqlFragment("WHERE " + " AND ".join(terms), values)


def create(db: Session, company_data: CompanyCreateRequest) -> Dict[str, Any]:
    """
    Create a company.

    Args:
        db: Database session
        company_data: Validated company data

    Returns:
        { handle, name, description, numEmployees, logoUrl }

    Raises:
        DuplicateEntityError: If the handle or name is already taken
    """
    duplicate_check = query(
        db,
        """SELECT handle
           FROM companies
           WHERE handle = $1""",
        [company_data.handle],
    )
    if duplicate_check:
        raise DuplicateEntityError(f"Duplicate company: {company_data.handle}")

    # Company names are unique as well
    duplicate_name = query(
        db,
        """SELECT handle
           FROM companies
           WHERE name = $1""",
        [company_data.name],
    )
    if duplicate_name:
        raise DuplicateEntityError(f"Duplicate company name: {company_data.name}")

    rows = query(
        db,
        f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_PROJECTION.select_list}""",
        [
            company_data.handle,
            company_data.name,
            company_data.description,
            company_data.num_employees,
            company_data.logo_url,
        ],
    )
    db.commit()

    return COMPANY_PROJECTION.shape(rows[0])


def find_all(db: Session, filters: Optional[CompanySearchFilters] = None) -> List[Dict[str, Any]]:
    """
    List companies ordered by name, optionally filtered.

    Raises:
        InvalidRangeError: If minEmployees > maxEmployees
    """
    if filters is None:
        filters = CompanySearchFilters()

    if (
        filters.min_employees is not None
        and filters.max_employees is not None
        and filters.min_employees > filters.max_employees
    ):
        raise InvalidRangeError("Minimum employees cannot exceed maximum employees")

    where = build_search_query(filters)
    rows = query(
        db,
        f"""SELECT {COMPANY_PROJECTION.select_list}
            FROM companies
            {where.fragment}
            ORDER BY name""",
        where.values,
    )
    return COMPANY_PROJECTION.shape_all(rows)


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Retrieve a company by handle.

    Raises:
        NotFoundError: If no such company
    """
    rows = query(
        db,
        f"""SELECT {COMPANY_PROJECTION.select_list}
            FROM companies
            WHERE handle = $1""",
        [handle],
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    return COMPANY_PROJECTION.shape(rows[0])


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a company; only the fields in data change.

    Args:
        db: Database session
        handle: Company to update
        data: Any of {name, description, numEmployees, logoUrl}

    Raises:
        InvalidUpdateRequest: If data is empty
        NotFoundError: If no such company
    """
    set_clause = sql_for_partial_update(data, COMPANY_FIELD_MAPPING)
    handle_idx = len(set_clause.values) + 1

    rows = query(
        db,
        f"""UPDATE companies
            SET {set_clause.fragment}
            WHERE handle = ${handle_idx}
            RETURNING {COMPANY_PROJECTION.select_list}""",
        [*set_clause.values, handle],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")
    db.commit()

    return COMPANY_PROJECTION.shape(rows[0])


def remove(db: Session, handle: str) -> None:
    """
    Delete a company by handle.

    Raises:
        NotFoundError: If no such company
    """
    rows = query(
        db,
        """DELETE
           FROM companies
           WHERE handle = $1
           RETURNING handle""",
        [handle],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")
    db.commit()
