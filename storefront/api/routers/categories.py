# storefront/api/routers/categories.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, sessionmaker

from storefront.api.deps import get_invalidation_service
from storefront.data.database import get_db, get_session_factory
from storefront.domain.schemas import ActionResult, CategoriesOut, UpdateCategoriesIn
from storefront.services.category_service import CategoryService
from storefront.services.invalidation_service import InvalidationService

router = APIRouter(prefix="/admin/categories", tags=["categories"])


def get_service(session_factory: sessionmaker, invalidation_service: InvalidationService):
    return CategoryService(session_factory=session_factory, invalidation_service=invalidation_service)


@router.get("", response_model=CategoriesOut)
def list_categories(
    db: Session = Depends(get_db),
    session_factory: sessionmaker = Depends(get_session_factory),
    invalidation_service: InvalidationService = Depends(get_invalidation_service),
):
    svc = get_service(session_factory, invalidation_service)
    return svc.list_categories(db)


@router.put("", response_model=ActionResult)
def update_categories(
    payload: UpdateCategoriesIn,
    session_factory: sessionmaker = Depends(get_session_factory),
    invalidation_service: InvalidationService = Depends(get_invalidation_service),
):
    """
    Zmienia widocznosc kategorii i sekcji kategorii.
    Zapisy rownolegle, bez rollbacku - przy bledzie czesc zmian moze zostac.
    """
    svc = get_service(session_factory, invalidation_service)
    return svc.update_categories(payload)
