# storefront/repos/category_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.category import CategoryModel
from storefront.data.models.store_settings import StoreSettingsModel, DEFAULT_SETTINGS_ID
from storefront.domain.errors import CategoryNotFoundError, SettingsNotFoundError


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> list[CategoryModel]:
        return list(
            self.db.execute(select(CategoryModel).order_by(CategoryModel.name)).scalars().all()
        )

    def create_category(self, category: CategoryModel) -> CategoryModel:
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    def set_visibility(self, category_id: str, visibility: str) -> None:
        #jak update dokumentu - brak dokumentu = blad, nie tworzymy nowego
        result = self.db.execute(
            update(CategoryModel)
            .where(CategoryModel.id == category_id)
            .values(visibility=visibility)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise CategoryNotFoundError(category_id)
        self.db.commit()


class SettingsRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_settings(self, settings_id: str = DEFAULT_SETTINGS_ID) -> StoreSettingsModel | None:
        return self.db.get(StoreSettingsModel, settings_id)

    def set_category_section_visibility(
        self, visibility: str, settings_id: str = DEFAULT_SETTINGS_ID
    ) -> None:
        result = self.db.execute(
            update(StoreSettingsModel)
            .where(StoreSettingsModel.id == settings_id)
            .values(category_section_visibility=visibility)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise SettingsNotFoundError(settings_id)
        self.db.commit()
