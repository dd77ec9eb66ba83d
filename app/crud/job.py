"""
CRUD operations for jobs.

Rows are returned in their public shape:
{ id, title, salary, equity, companyHandle }
where equity is a decimal string (or None).
"""

from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.database import query
from app.core.exceptions import NotFoundError
from app.crud.sql import ProjectedColumn, Projection, SqlFragment, decimal_string, sql_for_partial_update
from app.schemas.job import EquityFilter, JobCreateRequest, JobSearchFilters

JOB_PROJECTION = Projection(
    ProjectedColumn("id", "id"),
    ProjectedColumn("title", "title"),
    ProjectedColumn("salary", "salary"),
    ProjectedColumn("equity", "equity", decimal_string),
    ProjectedColumn("company_handle", "companyHandle"),
)

# title, salary and equity are stored under their public names
JOB_FIELD_MAPPING: Dict[str, str] = {}


def build_search_query(filters: JobSearchFilters) -> SqlFragment:
    """
    Build the WHERE clause for listing jobs.

    Checks run in a fixed order: title, minSalary, hasEquity.
    hasEquity=true adds "equity > 0" without a parameter; hasEquity=false
    adds nothing, so {hasEquity: false} alone yields an empty clause.

    Returns:
        SqlFragment("WHERE title ILIKE $1 AND salary >= $2 AND equity > 0", ["%j%", 1100000])
    """
    terms: List[str] = []
    values: List[Any] = []

    if filters.title is not None:
        values.append(f"%{filters.title}%")
        terms.append(f"title ILIKE ${len(values)}")
    if filters.min_salary is not None:
        values.append(filters.min_salary)
        terms.append(f"salary >= ${len(values)}")
    if filters.has_equity is EquityFilter.REQUIRE_EQUITY:
        terms.append("equity > 0")

    if not terms:
        return SqlFragment("", [])
    return SqlFragment("WHERE " + " AND ".join(terms), values)


def create(db: Session, job_data: JobCreateRequest) -> Dict[str, Any]:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        { id, title, salary, equity, companyHandle }
    """
    rows = query(
        db,
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_PROJECTION.select_list}""",
        [
            job_data.title,
            job_data.salary,
            job_data.equity,
            job_data.company_handle,
        ],
    )
    db.commit()

    return JOB_PROJECTION.shape(rows[0])


def find_all(db: Session, filters: Optional[JobSearchFilters] = None) -> List[Dict[str, Any]]:
    """
    List jobs ordered by id, optionally filtered.
    """
    where = build_search_query(filters or JobSearchFilters())
    rows = query(
        db,
        f"""SELECT {JOB_PROJECTION.select_list}
            FROM jobs
            {where.fragment}
            ORDER BY id""",
        where.values,
    )
    return JOB_PROJECTION.shape_all(rows)


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no such job
    """
    rows = query(
        db,
        f"""SELECT {JOB_PROJECTION.select_list}
            FROM jobs
            WHERE id = $1""",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    return JOB_PROJECTION.shape(rows[0])


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job; only the fields in data change.

    Args:
        db: Database session
        job_id: Job to update
        data: Any of {title, salary, equity}

    Raises:
        InvalidUpdateRequest: If data is empty
        NotFoundError: If no such job
    """
    set_clause = sql_for_partial_update(data, JOB_FIELD_MAPPING)
    id_idx = len(set_clause.values) + 1

    rows = query(
        db,
        f"""UPDATE jobs
            SET {set_clause.fragment}
            WHERE id = ${id_idx}
            RETURNING {JOB_PROJECTION.select_list}""",
        [*set_clause.values, job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")
    db.commit()

    return JOB_PROJECTION.shape(rows[0])


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no such job
    """
    rows = query(
        db,
        """DELETE
           FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")
    db.commit()
