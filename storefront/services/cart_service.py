# storefront/services/cart_service.py
from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel, generate_cart_id
from storefront.domain.cart_rules import (
    SetCookie,
    device_cookie,
    issue_device_identifier,
    make_line_item,
    products_from_document,
    products_to_document,
    upsert_line_item,
)
from storefront.domain.errors import (
    CartConflictError,
    CartLookupError,
    CartWriteError,
    StorefrontError,
)
from storefront.domain.schemas import ActionResult, AlertMessageType, LineItem
from storefront.repos.cart_repo import CartRepo
from storefront.services.invalidation_service import InvalidationService
from storefront.utils.retry import conflict_retry
from storefront.utils.settings import CART_UPDATE_MAX_ATTEMPTS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ITEM_ADDED_MESSAGE = "Item added to cart"
RELOAD_MESSAGE = "Please reload the page and try again"


@dataclass(frozen=True)
class AddToCartOutcome:
    result: ActionResult
    cookie: SetCookie | None = None


class CartService:
    """
    Koszyk identyfikowany tokenem urzadzenia (ciasteczko).
    command add_to_cart - tworzy koszyk albo robi upsert pozycji
    query get_cart - tylko odczyt
    Token wchodzi jako parametr, nowe ciasteczko wraca w AddToCartOutcome.
    """

    def __init__(
        self,
        db: Session,
        invalidation_service: InvalidationService,
        max_attempts: int = CART_UPDATE_MAX_ATTEMPTS,
    ):
        self.repo = CartRepo(db)
        self.invalidation_service = invalidation_service
        self._apply_line_item = conflict_retry(max_attempts)(self._apply_line_item_once)

    #query - odczyt
    def get_cart(self, device_identifier: str | None) -> CartModel | None:
        if not device_identifier:
            return None
        return self.repo.get_cart_by_device(device_identifier)

    #command
    def add_to_cart(
        self,
        device_identifier: str | None,
        product_id: str,
        size: str,
        color: str,
    ) -> AddToCartOutcome:
        cookie = None
        try:
            item = make_line_item(product_id, size, color)

            if not device_identifier:
                cookie = self._create_cart(item)
            else:
                cart = self._find_cart(device_identifier)
                if cart is None:
                    # stary token bez koszyka - nowy koszyk i nowy token, stary porzucamy
                    logger.info(f"No cart for device {device_identifier}, creating a new one")
                    cookie = self._create_cart(item)
                else:
                    self._apply_line_item(cart.id, item)

        except StorefrontError as e:
            logger.error(f"Error adding product {product_id} to cart: {type(e).__name__}: {e}")
            return AddToCartOutcome(
                result=ActionResult(kind=AlertMessageType.ERROR, message=RELOAD_MESSAGE)
            )

        self.invalidation_service.invalidate_storefront()

        return AddToCartOutcome(
            result=ActionResult(kind=AlertMessageType.SUCCESS, message=ITEM_ADDED_MESSAGE),
            cookie=cookie,
        )

    def _find_cart(self, device_identifier: str) -> CartModel | None:
        try:
            return self.repo.get_cart_by_device(device_identifier)
        except SQLAlchemyError as e:
            self.repo.rollback()
            raise CartLookupError(f"Cart lookup failed: {e}") from e

    def _create_cart(self, item: LineItem) -> SetCookie:
        token = issue_device_identifier()
        now = datetime.now(timezone.utc)

        new_cart = CartModel(
            id=generate_cart_id(),
            device_identifier=token,
            products=products_to_document([item]),
            version=1,
            created_at=now,
            updated_at=now,
        )

        try:
            created = self.repo.create_cart(new_cart)
        except SQLAlchemyError as e:
            self.repo.rollback()
            raise CartWriteError(f"Cart creation failed: {e}") from e

        logger.info(f"Utworzono nowy koszyk {created.id} z produktem {item.product_id}")

        return device_cookie(token)

    def _apply_line_item_once(self, cart_id: str, item: LineItem) -> None:
        # kazda proba czyta koszyk od nowa, po konflikcie widzimy zmiane drugiego pisarza
        try:
            cart = self.repo.get_cart(cart_id)
        except SQLAlchemyError as e:
            self.repo.rollback()
            raise CartLookupError(f"Cart lookup failed: {e}") from e

        if cart is None:
            raise CartLookupError(f"Cart {cart_id} no longer exists")

        try:
            stored = products_from_document(cart.products)
        except (ValidationError, TypeError) as e:
            raise CartLookupError(f"Cart {cart.id} holds an unreadable products list: {e}") from e

        products = upsert_line_item(stored, item)

        try:
            # Optimistic locking
            # np w bazie update set version 2 where id 'abc' and version 1
            rowcount = self.repo.update_cart_version(
                cart_id=cart.id,
                old_version=cart.version,
                new_data={
                    "products": products_to_document(products),
                    "version": cart.version + 1,
                    "updated_at": datetime.now(timezone.utc),
                },
            )

            if rowcount == 0:
                self.repo.rollback()
                logger.warning(
                    f"Konflikt wspolbieznosci na koszyku {cart.id} (wersja {cart.version}), ponawiam"
                )
                raise CartConflictError(
                    f"Cart {cart.id} was modified by another operation"
                )

            self.repo.commit()

        except SQLAlchemyError as e:
            self.repo.rollback()
            raise CartWriteError(f"Cart update failed: {e}") from e

        logger.info(
            f"Produkt {item.product_id} zapisany w koszyku {cart.id}, "
            f"nowa wersja: {cart.version + 1}"
        )
