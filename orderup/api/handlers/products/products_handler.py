from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, status

from orderup.container import Container
from orderup.api.mappers import to_product_summary
from orderup.api.handlers_exceptions import raise_http_from_app_error
from orderup.api.schemas.response_schemas.schemas import ProductSummary
from orderup.usecase.products.products_usecase import ProductUseCase
from orderup.entity.products import ProductId
from orderup.exceptions import AppError

router = APIRouter(
    prefix="/api/v1",
    tags=["Товары"]
)


@router.get(
    "/products/{product_id}",
    response_model=ProductSummary,
    status_code=status.HTTP_200_OK
)
@inject
async def get_product(
        product_id: int = Path(..., description="ID товара"),
        uc: ProductUseCase = Depends(Provide[Container.usecase.product_usecase])
):
    """
    Endpoint получения краткой информации о товаре
    """
    try:
        product = await uc.get_product(ProductId(product_id))
    except AppError as e:
        raise_http_from_app_error("get_product", e)
    return to_product_summary(product)
