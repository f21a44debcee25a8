# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://redis:6379/2")
CELERY_TASK_ALWAYS_EAGER = _env_bool("CELERY_TASK_ALWAYS_EAGER", False)

# webhook frontendu (np. next.js revalidate), pusty = tylko logowanie
REVALIDATE_URL = os.getenv("REVALIDATE_URL", "")
REVALIDATE_SECRET = os.getenv("REVALIDATE_SECRET", "")

DEVICE_COOKIE_NAME = os.getenv("DEVICE_COOKIE_NAME", "device_identifier")
DEVICE_COOKIE_MAX_AGE = int(os.getenv("DEVICE_COOKIE_MAX_AGE", 30 * 24 * 60 * 60))
DEVICE_COOKIE_SECURE = _env_bool("DEVICE_COOKIE_SECURE", True)

CART_UPDATE_MAX_ATTEMPTS = int(os.getenv("CART_UPDATE_MAX_ATTEMPTS", 3))
CATEGORY_UPDATE_WORKERS = int(os.getenv("CATEGORY_UPDATE_WORKERS", 8))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
