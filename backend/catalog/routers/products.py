from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from catalog.database import get_session
from catalog.exceptions import NotFoundError
from catalog.schemas.product import ProductCreate, ProductPatch, ProductRead, ProductUpdate
from catalog.services.products import create_product, get_product, update_product
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("", response_model=ProductRead, status_code=201)
async def add_product(data: ProductCreate, session: AsyncSession = Depends(get_session)):
    return await create_product(session, data)

@router.get("/{product_id}", response_model=ProductRead)
async def read_product(product_id: int, session: AsyncSession = Depends(get_session)):
    try:
        return await get_product(session, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.patch("/{product_id}", response_model=ProductRead)
async def patch_product(product_id: int, patch: ProductPatch, session: AsyncSession = Depends(get_session)):
    """
    Частичное обновление товара: меняются только переданные поля
    """
    logger.info(f"Получен запрос на обновление товара {product_id}")
    # exclude_unset сохраняет разницу между "не передано" и null
    request = ProductUpdate(id=product_id, **patch.model_dump(exclude_unset=True))
    try:
        return await update_product(session, request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
