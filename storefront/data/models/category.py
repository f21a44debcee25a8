from sqlalchemy import Column, String

from storefront.data.database import Base


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(64), primary_key=True)
    name = Column(String, nullable=False)
    visibility = Column(String(20), nullable=False, default="DRAFT")  # DRAFT, PUBLISHED, HIDDEN
