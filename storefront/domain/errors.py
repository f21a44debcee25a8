# storefront/domain/errors.py
"""
Wewnetrzne rodzaje bledow.
Na zewnatrz (ActionResult) zawsze idzie jeden ogolny komunikat,
rozroznienie zostaje w logach i w testach.
"""


class StorefrontError(Exception):
    pass


class InvalidLineItemError(StorefrontError):
    """Brak product_id / size / color."""


class CartLookupError(StorefrontError):
    """Nie udalo sie wyszukac koszyka po device_identifier."""


class CartWriteError(StorefrontError):
    """Nie udalo sie utworzyc / zaktualizowac koszyka."""


class CartConflictError(CartWriteError):
    """Warunkowy update (version) nie trafil w zaden wiersz."""


class CategoryNotFoundError(StorefrontError):
    def __init__(self, category_id: str):
        super().__init__(f"Category {category_id} does not exist")
        self.category_id = category_id


class SettingsNotFoundError(StorefrontError):
    def __init__(self, settings_id: str):
        super().__init__(f"Settings document {settings_id} does not exist")
        self.settings_id = settings_id


class CategoryWriteError(StorefrontError):
    """Zaden zapis kategorii / ustawien sie nie powiodl."""

    def __init__(self, message: str, failed: dict | None = None):
        super().__init__(message)
        self.failed = failed or {}


class PartialWriteError(CategoryWriteError):
    """Czesc zapisow przeszla, czesc nie. Brak rollbacku."""

    def __init__(self, message: str, succeeded: list, failed: dict):
        super().__init__(message, failed)
        self.succeeded = succeeded
