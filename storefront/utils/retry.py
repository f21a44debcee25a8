# storefront/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import requests

from storefront.domain.errors import CartConflictError
from storefront.utils.settings import CART_UPDATE_MAX_ATTEMPTS


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(requests.RequestException),
    )


#konflikt wersji koszyka -> ponow odczyt + upsert + warunkowy update
def conflict_retry(attempts: int = CART_UPDATE_MAX_ATTEMPTS):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=0.5),
        retry=retry_if_exception_type(CartConflictError),
    )
