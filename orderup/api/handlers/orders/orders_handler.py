from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, Query, status

from orderup.container import Container
from orderup.api.handlers_exceptions import raise_http_from_app_error
from orderup.api.mappers import to_order_response
from orderup.api.schemas.response_schemas.schemas import OrderResponse
from orderup.usecase.orders.orders_usecase import OrderUseCase
from orderup.entity.orders import OrderId
from orderup.exceptions import AppError

router = APIRouter(
    prefix="/api/v1",
    tags=["Заказы"]
)


@router.get(
    "/orders/{order_id}",
    response_model=OrderResponse,
    status_code=status.HTTP_200_OK
)
@inject
async def get_order(
        order_id: int = Path(..., description="ID заказа"),
        uc: OrderUseCase = Depends(Provide[Container.usecase.order_usecase])
):
    """
    Endpoint получения заказа вместе с товаром
    """
    try:
        order = await uc.get_order(OrderId(order_id))
    except AppError as e:
        raise_http_from_app_error("get_order", e)
    return to_order_response(order)


@router.get(
    "/orders",
    response_model=list[OrderResponse],
    status_code=status.HTTP_200_OK
)
@inject
async def list_orders(
        limit: int = Query(50, ge=1, le=500, description="Размер страницы"),
        offset: int = Query(0, ge=0, description="Смещение"),
        uc: OrderUseCase = Depends(Provide[Container.usecase.order_usecase])
):
    """
    Endpoint списка заказов
    """
    try:
        orders = await uc.list_orders(limit=limit, offset=offset)
    except AppError as e:
        raise_http_from_app_error("list_orders", e)
    return [to_order_response(order) for order in orders]
