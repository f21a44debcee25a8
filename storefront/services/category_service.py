# storefront/services/category_service.py
from concurrent.futures import ThreadPoolExecutor, as_completed

from sqlalchemy.orm import Session, sessionmaker

from storefront.data.models.store_settings import DEFAULT_SETTINGS_ID
from storefront.domain.errors import CategoryWriteError, PartialWriteError
from storefront.domain.schemas import (
    ActionResult,
    AlertMessageType,
    CategoriesOut,
    CategoryOut,
    UpdateCategoriesIn,
    Visibility,
)
from storefront.repos.category_repo import CategoryRepo, SettingsRepo
from storefront.services.invalidation_service import InvalidationService
from storefront.utils.settings import CATEGORY_UPDATE_WORKERS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORIES_UPDATED_MESSAGE = "Categories updated successfully"
CATEGORIES_FAILED_MESSAGE = "Failed to update categories"


class CategoryService:
    """
    Widocznosc kategorii + widocznosc sekcji kategorii na stronie glownej.

    Kazdy zapis idzie osobno i rownolegle (osobna sesja, osobny commit).
    Nie ma transakcji obejmujacej wszystkie dokumenty: jesli czesc zapisow
    sie nie uda, te ktore przeszly zostaja (PartialWriteError).
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        invalidation_service: InvalidationService,
        max_workers: int = CATEGORY_UPDATE_WORKERS,
    ):
        self.session_factory = session_factory
        self.invalidation_service = invalidation_service
        self.max_workers = max_workers

    #query
    def list_categories(self, db: Session) -> CategoriesOut:
        settings = SettingsRepo(db).get_settings()
        section = settings.category_section_visibility if settings else Visibility.PUBLISHED.value

        return CategoriesOut(
            category_section_visibility=section,
            categories=[
                CategoryOut.model_validate(c) for c in CategoryRepo(db).list_categories()
            ],
        )

    #command
    def update_categories(self, payload: UpdateCategoriesIn) -> ActionResult:
        try:
            self._write_all(payload)
        except CategoryWriteError as e:
            logger.error(
                f"Error updating categories and settings: {type(e).__name__}: {e} "
                f"(failed: {sorted(e.failed)})"
            )
            return ActionResult(kind=AlertMessageType.ERROR, message=CATEGORIES_FAILED_MESSAGE)

        self.invalidation_service.invalidate_categories()

        return ActionResult(kind=AlertMessageType.SUCCESS, message=CATEGORIES_UPDATED_MESSAGE)

    def _write_all(self, payload: UpdateCategoriesIn) -> list[str]:
        # klucz -> (funkcja, argumenty); powtorzone id kategorii: wygrywa ostatnie
        writes = {
            f"categories/{c.id}": (self._write_category, c.id, c.visibility.value)
            for c in payload.categories
        }
        writes[f"settings/{DEFAULT_SETTINGS_ID}"] = (
            self._write_section_visibility,
            payload.category_section_visibility.value,
        )

        succeeded: list[str] = []
        failed: dict[str, str] = {}

        with ThreadPoolExecutor(max_workers=max(1, min(self.max_workers, len(writes)))) as pool:
            futures = {pool.submit(fn, *args): key for key, (fn, *args) in writes.items()}

            for future in as_completed(futures):
                key = futures[future]
                try:
                    future.result()
                    succeeded.append(key)
                except Exception as e:
                    # kazdy nieudany zapis liczy sie jako blad, reszta zostaje
                    logger.error(f"Write {key} failed: {type(e).__name__}: {e}")
                    failed[key] = str(e)

        if not failed:
            logger.info(f"Updated {len(succeeded)} documents")
            return succeeded

        if succeeded:
            raise PartialWriteError(
                f"{len(failed)} of {len(writes)} writes failed, {len(succeeded)} kept",
                succeeded=sorted(succeeded),
                failed=failed,
            )

        raise CategoryWriteError(f"All {len(writes)} writes failed", failed=failed)

    def _write_category(self, category_id: str, visibility: str) -> None:
        with self.session_factory() as db:
            CategoryRepo(db).set_visibility(category_id, visibility)

    def _write_section_visibility(self, visibility: str) -> None:
        with self.session_factory() as db:
            SettingsRepo(db).set_category_section_visibility(visibility)
