"""Exceptions raised by the catalog services."""

from sqlalchemy.exc import SQLAlchemyError

# Failures of the underlying store are never wrapped: callers catch
# SQLAlchemy's own hierarchy under this name.
StoreError = SQLAlchemyError


class CatalogError(Exception):
    """Base class for catalog errors."""


class NotFoundError(CatalogError):
    """Raised when a record looked up by key does not exist."""

    def __init__(self, message: str, key=None):
        super().__init__(message)
        self.key = key


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found.", key=product_id)
        self.product_id = product_id
