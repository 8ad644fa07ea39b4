from .product import Product, products_table

__all__ = ["Product", "products_table"]
