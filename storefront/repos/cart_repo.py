# storefront/repos/cart_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart(self, cart_id: str) -> CartModel | None:
        #populate_existing - po konflikcie chcemy swiezy stan z bazy, nie z identity map
        return self.db.get(CartModel, cart_id, populate_existing=True)

    def get_cart_by_device(self, device_identifier: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.device_identifier == device_identifier)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        #jedna transakcja, jeden dokument
        self.db.add(cart)
        self.db.commit()
        self.db.refresh(cart)
        return cart

    def update_cart_version(self, cart_id: str, old_version: int, new_data: dict) -> int:
        # update carts set ... where id = :id and version = :old_version
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(**new_data)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
