# storefront/domain/cart_rules.py
"""
Czyste reguly koszyka, bez bazy:
- upsert pozycji po product_id (podmiana w miejscu albo dopisanie na koniec)
- wydanie nowego tokenu urzadzenia + instrukcja ustawienia ciasteczka
"""
import secrets
from dataclasses import dataclass
from typing import List, Sequence

from storefront.domain.errors import InvalidLineItemError
from storefront.domain.schemas import LineItem
from storefront.utils.settings import (
    DEVICE_COOKIE_NAME,
    DEVICE_COOKIE_MAX_AGE,
    DEVICE_COOKIE_SECURE,
)


@dataclass(frozen=True)
class SetCookie:
    """Instrukcja dla warstwy http - ustaw ciasteczko z tokenem urzadzenia."""

    name: str
    value: str
    max_age: int = DEVICE_COOKIE_MAX_AGE
    path: str = "/"
    httponly: bool = True
    secure: bool = DEVICE_COOKIE_SECURE
    samesite: str = "strict"


def issue_device_identifier() -> str:
    # 16 bajtow z CSPRNG -> 22 znaki url-safe
    return secrets.token_urlsafe(16)


def device_cookie(token: str) -> SetCookie:
    return SetCookie(name=DEVICE_COOKIE_NAME, value=token)


def make_line_item(product_id, size, color) -> LineItem:
    fields = {"product_id": product_id, "size": size, "color": color}
    missing = [k for k, v in fields.items() if not isinstance(v, str) or not v.strip()]
    if missing:
        raise InvalidLineItemError(f"Missing line item fields: {', '.join(missing)}")
    return LineItem(**fields)


def upsert_line_item(products: Sequence[LineItem], item: LineItem) -> List[LineItem]:
    """
    Zwraca nowa liste:
    - jesli product_id juz jest -> cala pozycja podmieniona na tym samym indeksie
    - jesli nie ma -> dopisana na koniec
    Wejsciowa sekwencja nie jest modyfikowana.
    """
    result = list(products)
    for i, existing in enumerate(result):
        if existing.product_id == item.product_id:
            result[i] = item
            return result
    result.append(item)
    return result


def products_from_document(raw: list | None) -> List[LineItem]:
    return [LineItem(**p) for p in (raw or [])]


def products_to_document(products: Sequence[LineItem]) -> list:
    return [p.model_dump() for p in products]
