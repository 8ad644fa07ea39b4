from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Товар каталога. Цена хранится как NUMERIC(10, 2).
    """
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = Field(default=None, nullable=True)
    price: Decimal = Field(max_digits=10, decimal_places=2)
    stock_quantity: int = Field(default=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"


products_table = Product.__table__
