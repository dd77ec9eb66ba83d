import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, search_filters
from app.crud import company as company_crud
from app.schemas.company import CompanyCreateRequest, CompanySearchFilters, CompanyUpdateRequest

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Create a company.

    Returns { company: { handle, name, description, numEmployees, logoUrl } }

    Authorization required: admin
    """
    company = company_crud.create(db, request)
    logger.info(f"Admin {admin_user['username']} created company {company['handle']}")
    return {"company": company}


@router.get("/")
def list_companies(
    filters: CompanySearchFilters = Depends(search_filters(CompanySearchFilters)),
    db: Session = Depends(get_db)
):
    """
    List companies ordered by name.

    Optional query filters:
    - nameLike: case-insensitive partial match on name
    - minEmployees / maxEmployees: inclusive bounds on numEmployees

    Authorization required: none
    """
    return {"companies": company_crud.find_all(db, filters)}


@router.get("/{handle}")
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company by handle."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}")
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Partially update a company.

    Fields can be: { name, description, numEmployees, logoUrl }

    Authorization required: admin
    """
    company = company_crud.update(db, handle, request.model_dump(exclude_unset=True, by_alias=True))
    logger.info(f"Admin {admin_user['username']} updated company {handle}")
    return {"company": company}


@router.delete("/{handle}")
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin_user: dict = Depends(ensure_admin)
):
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    company_crud.remove(db, handle)
    logger.info(f"Admin {admin_user['username']} deleted company {handle}")
    return {"deleted": handle}
