from sqlalchemy import Column, String

from storefront.data.database import Base

DEFAULT_SETTINGS_ID = "defaultSettings"


class StoreSettingsModel(Base):
    __tablename__ = "store_settings"

    id = Column(String(64), primary_key=True, default=DEFAULT_SETTINGS_ID)
    category_section_visibility = Column(String(20), nullable=False, default="PUBLISHED")
