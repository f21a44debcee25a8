# storefront/data/seed.py
from storefront.data.database import SessionLocal
from storefront.data.models import StoreSettingsModel
from storefront.data.models.store_settings import DEFAULT_SETTINGS_ID
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def seed(session_factory=SessionLocal):
    db = session_factory()
    try:
        # not forcing: only seed if missing
        if db.get(StoreSettingsModel, DEFAULT_SETTINGS_ID):
            return
        db.add(StoreSettingsModel(id=DEFAULT_SETTINGS_ID, category_section_visibility="PUBLISHED"))
        db.commit()
        logger.info(f"Seeded settings document {DEFAULT_SETTINGS_ID}")
    finally:
        db.close()
