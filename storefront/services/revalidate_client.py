# storefront/services/revalidate_client.py
import requests

from storefront.utils.retry import http_retry
from storefront.utils.settings import REVALIDATE_URL, REVALIDATE_SECRET
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class RevalidateClient:
    """Klient webhooka frontendu, ktory oznacza wyrenderowane strony jako nieaktualne."""

    def __init__(self, url: str | None = None, secret: str | None = None, timeout: int = 2):
        self.url = (url if url is not None else REVALIDATE_URL).rstrip("/")
        self.secret = secret if secret is not None else REVALIDATE_SECRET
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    @http_retry()
    def revalidate(self, path: str, kind: str) -> dict:
        logger.info(f"RevalidateClient POST {self.url} path={path} type={kind}")

        headers = {"x-revalidate-secret": self.secret} if self.secret else {}
        resp = requests.post(
            self.url,
            json={"path": path, "type": kind},
            headers=headers,
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return resp.json()
