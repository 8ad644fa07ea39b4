from sqlalchemy import select

from catalog.models import products_table
from scripts.populate_products import populate, products_data


async def test_populate(session, session_factory):
    count = await populate(session)

    assert count == len(products_data)
    async with session_factory() as check:
        rows = (await check.execute(select(products_table).order_by(products_table.c.id))).mappings().all()
    assert [row["name"] for row in rows] == [p["name"] for p in products_data]
    assert rows[-1]["description"] is None
