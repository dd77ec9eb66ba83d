import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, search_filters
from app.crud import job as job_crud
from app.schemas.job import JobCreateRequest, JobSearchFilters, JobUpdateRequest

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Create a new job posting.

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job = job_crud.create(db, request)
    logger.info(f"Created job {job['id']}: {job['title']} for {job['companyHandle']}")
    return {"job": job}


@router.get("/")
def list_jobs(
    filters: JobSearchFilters = Depends(search_filters(JobSearchFilters)),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by id.

    Optional query filters:
    - title: case-insensitive partial match
    - minSalary: jobs paying at least this much
    - hasEquity: "true" for jobs with non-zero equity; "false" does not filter

    Authorization required: none
    """
    return {"jobs": job_crud.find_all(db, filters)}


@router.get("/{job_id}")
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}")
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Partially update a job.

    Fields can be: { title, salary, equity }

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.model_dump(exclude_unset=True, by_alias=True))
    logger.info(f"Updated job {job_id}")
    return {"job": job}


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    logger.info(f"Deleted job {job_id}")
    return {"deleted": job_id}
