# storefront/services/invalidation_service.py
from storefront.celery_worker import celery_app
from storefront.services.revalidate_client import RevalidateClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# wzorce sciezek jak w routingu frontendu
HOME_PATH = "/"
PRODUCT_DETAIL_PATH = "/[slug]"
ADMIN_SHOP_PATH = "/admin/shop"


class InvalidationService:
    """
    Serwis do oznaczania stron sklepu jako nieaktualne po udanej zmianie.
    Uzywa Celery, zeby request nie czekal na frontend.
    """

    def invalidate(self, path: str, kind: str = "layout"):
        try:
            revalidate_path_task.delay(path, kind)
        except Exception as e:
            # zmiana w bazie juz jest zapisana, brak brokera nie cofa jej
            logger.warning(f"Failed to dispatch invalidation of {path} ({kind}): {e}")

    def invalidate_storefront(self):
        """Strona glowna + wszystkie strony produktow / kolekcji."""
        self.invalidate(HOME_PATH)
        self.invalidate(PRODUCT_DETAIL_PATH, "page")

    def invalidate_categories(self):
        self.invalidate(ADMIN_SHOP_PATH)
        self.invalidate(HOME_PATH)


@celery_app.task(name="storefront.services.invalidation_service.revalidate_path_task")
def revalidate_path_task(path: str, kind: str = "layout"):
    """
    Celery task - loguje zdarzenie i jesli jest skonfigurowany webhook,
    wysyla go do frontendu.
    """
    logger.info(f"[INVALIDATE] {path} ({kind})")

    client = RevalidateClient()
    if not client.enabled:
        return {"path": path, "type": kind, "status": "logged"}

    client.revalidate(path, kind)
    return {"path": path, "type": kind, "status": "sent"}
