#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from storefront.data.models.cart import CartModel
from storefront.data.models.category import CategoryModel
from storefront.data.models.store_settings import StoreSettingsModel

__all__ = ["CartModel", "CategoryModel", "StoreSettingsModel"]
