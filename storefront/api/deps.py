# storefront/api/deps.py
from storefront.services.invalidation_service import InvalidationService


def get_invalidation_service() -> InvalidationService:
    return InvalidationService()
