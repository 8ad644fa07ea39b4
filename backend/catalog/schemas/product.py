from collections.abc import Mapping
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ProductCreate(BaseModel):
    name: str
    description: Optional[str]  # ключ обязателен, значение может быть null
    price: float = Field(gt=0, allow_inf_nan=False)
    stock_quantity: int = Field(ge=0)


class ProductPatch(BaseModel):
    """
    Поля частичного обновления товара.

    Ключ, отсутствующий во входных данных, не попадает в model_fields_set
    и означает "не менять". Явный null допустим только для description.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    stock_quantity: Optional[int] = Field(default=None, ge=0)

    @field_validator("name", "price", "stock_quantity")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} may be omitted but not null")
        return v


class ProductUpdate(ProductPatch):
    id: int


class ProductRead(BaseModel):
    id: int
    name: str
    description: Optional[str]
    price: float
    stock_quantity: int
    created_at: datetime

    @classmethod
    def from_record(cls, record) -> "ProductRead":
        """Build from a result row mapping or a Product instance; NUMERIC price becomes float."""
        data = dict(record) if isinstance(record, Mapping) else record.model_dump()
        data["price"] = float(data["price"])
        return cls(**data)
