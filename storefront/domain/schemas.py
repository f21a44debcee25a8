# storefront/domain/schemas.py
from enum import Enum
from typing import List
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


class AlertMessageType(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class Visibility(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    HIDDEN = "HIDDEN"


class ActionResult(BaseModel):
    """Wynik akcji (koszyk, kategorie) - tylko rodzaj i komunikat dla uzytkownika."""

    kind: AlertMessageType
    message: str


class LineItem(BaseModel):
    """Pojedynczy wybor produktu w koszyku."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    size: str
    color: str


class AddToCartIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    model_config = ConfigDict(str_strip_whitespace=True)

    product_id: str = Field(..., min_length=1, description="ID produktu")
    size: str = Field(..., min_length=1, description="Wybrany rozmiar")
    color: str = Field(..., min_length=1, description="Wybrany kolor")


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: str
    device_identifier: str
    products: List[LineItem]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryVisibilityIn(BaseModel):
    id: str = Field(..., min_length=1)
    visibility: Visibility


class UpdateCategoriesIn(BaseModel):
    """Schema dla zmiany widocznosci kategorii i sekcji kategorii."""

    category_section_visibility: Visibility
    categories: List[CategoryVisibilityIn] = Field(default_factory=list)


class CategoryOut(BaseModel):
    id: str
    name: str
    visibility: Visibility

    model_config = ConfigDict(from_attributes=True)


class CategoriesOut(BaseModel):
    category_section_visibility: Visibility
    categories: List[CategoryOut]
