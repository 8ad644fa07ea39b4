import logging
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, Union

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.exceptions import ProductNotFoundError
from catalog.models import Product, products_table
from catalog.schemas.product import ProductCreate, ProductPatch, ProductRead, ProductUpdate

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for a field the request did not mention."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()


def to_price(value: float) -> Decimal:
    """Fixed-point form of a price. Goes through str() so that 99.99 stays 99.99."""
    return Decimal(str(value))


@dataclass(frozen=True)
class ProductChanges:
    """
    Набор изменений товара.

    Каждое поле принимает одно из трех состояний:
        UNSET - поле не передано, значение в базе не меняется
        None  - очистить поле (допустимо только для description)
        иначе - записать новое значение
    """
    name: Union[str, _Unset] = UNSET
    description: Union[str, None, _Unset] = UNSET
    price: Union[Decimal, _Unset] = UNSET
    stock_quantity: Union[int, _Unset] = UNSET

    @classmethod
    def from_request(cls, request: ProductPatch) -> "ProductChanges":
        supplied = request.model_fields_set
        changes = {}
        if "name" in supplied:
            changes["name"] = request.name
        if "description" in supplied:
            # и текст, и явный null
            changes["description"] = request.description
        if "price" in supplied:
            changes["price"] = to_price(request.price)
        if "stock_quantity" in supplied:
            changes["stock_quantity"] = request.stock_quantity
        return cls(**changes)

    def values(self) -> Dict[str, Any]:
        """Columns to write, mapped to their new values."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.values()


async def get_product(session: AsyncSession, product_id: int) -> ProductRead:
    statement = select(products_table).where(products_table.c.id == product_id)
    result = await session.execute(statement)
    row = result.mappings().first()
    if row is None:
        raise ProductNotFoundError(product_id)
    return ProductRead.from_record(row)


async def create_product(session: AsyncSession, data: ProductCreate) -> ProductRead:
    product = Product(
        name=data.name,
        description=data.description,
        price=to_price(data.price),
        stock_quantity=data.stock_quantity,
    )
    try:
        session.add(product)
        await session.commit()
        await session.refresh(product)
    except SQLAlchemyError as e:
        logger.error(f"Ошибка при создании товара '{data.name}': {e}", exc_info=True)
        raise
    logger.info(f"Создан товар {product!r}")
    return ProductRead.from_record(product)


async def update_product(session: AsyncSession, request: ProductUpdate) -> ProductRead:
    """
    Частичное обновление товара.

    Записываются только переданные поля. Если не передано ни одного поля,
    возвращается текущая запись без обращения на запись.

    Args:
        session: Сессия базы данных
        request: Идентификатор товара и поля для обновления

    Returns:
        ProductRead: Запись товара после обновления

    Raises:
        ProductNotFoundError: Если товара с таким ID нет
    """
    changes = ProductChanges.from_request(request)
    try:
        if changes.is_empty():
            logger.debug(f"Нет полей для обновления товара {request.id}, возвращаем текущую запись")
            return await get_product(session, request.id)

        statement = (
            update(products_table)
            .where(products_table.c.id == request.id)
            .values(**changes.values())
            .returning(*products_table.c)
        )
        result = await session.execute(statement)
        row = result.mappings().first()
        if row is None:
            raise ProductNotFoundError(request.id)
        updated = ProductRead.from_record(row)
        await session.commit()

        logger.info(f"Товар {request.id} обновлен, поля: {sorted(changes.values())}")
        return updated
    except ProductNotFoundError:
        logger.warning(f"Товар с ID {request.id} не найден")
        raise
    except SQLAlchemyError as e:
        logger.error(f"Ошибка при обновлении товара с ID {request.id}: {e}", exc_info=True)
        raise
