import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.database import async_session, init_db
from catalog.schemas.product import ProductCreate
from catalog.services.products import create_product

logger = logging.getLogger(__name__)

# Данные для заполнения
products_data = [
    {
        "name": "Труба металлическая",
        "description": "Труба из нержавеющей стали, диаметр 50мм",
        "price": 1500.0,
        "stock_quantity": 100
    },
    {
        "name": "Труба пластиковая",
        "description": "Полипропиленовая труба, диаметр 32мм",
        "price": 250.0,
        "stock_quantity": 200
    },
    {
        "name": "Фитинг",
        "description": "Угловой фитинг 90 градусов, диаметр 32мм",
        "price": 45.5,
        "stock_quantity": 500
    },
    {
        "name": "Клапан",
        "description": None,
        "price": 1200.0,
        "stock_quantity": 50
    }
]

async def populate(session: AsyncSession) -> int:
    """Добавляет тестовые товары, возвращает их количество."""
    for product_data in products_data:
        await create_product(session, ProductCreate(**product_data))
    return len(products_data)

async def main():
    # Создаем таблицу, если она не существует
    await init_db()

    async with async_session() as session:
        count = await populate(session)

    logger.info(f"Тестовые товары успешно добавлены в базу данных: {count}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
