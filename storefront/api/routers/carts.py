#storefront/api/routers/carts.py
from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_invalidation_service
from storefront.data.database import get_db
from storefront.domain.schemas import ActionResult, AddToCartIn, CartOut
from storefront.services.cart_service import CartService
from storefront.services.invalidation_service import InvalidationService
from storefront.utils.settings import DEVICE_COOKIE_NAME

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session, invalidation_service: InvalidationService):
    return CartService(db=db, invalidation_service=invalidation_service)


@router.post("/items", response_model=ActionResult)
def add_item(
    payload: AddToCartIn,
    response: Response,
    device_identifier: str | None = Cookie(None, alias=DEVICE_COOKIE_NAME),
    db: Session = Depends(get_db),
    invalidation_service: InvalidationService = Depends(get_invalidation_service),
):
    svc = get_service(db, invalidation_service)
    outcome = svc.add_to_cart(
        device_identifier=device_identifier,
        product_id=payload.product_id,
        size=payload.size,
        color=payload.color,
    )

    if outcome.cookie:
        cookie = outcome.cookie
        response.set_cookie(
            key=cookie.name,
            value=cookie.value,
            max_age=cookie.max_age,
            path=cookie.path,
            httponly=cookie.httponly,
            secure=cookie.secure,
            samesite=cookie.samesite,
        )

    return outcome.result


@router.get("", response_model=CartOut)
def get_cart(
    device_identifier: str | None = Cookie(None, alias=DEVICE_COOKIE_NAME),
    db: Session = Depends(get_db),
    invalidation_service: InvalidationService = Depends(get_invalidation_service),
):
    svc = get_service(db, invalidation_service)
    cart = svc.get_cart(device_identifier)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart
