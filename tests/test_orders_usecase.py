"""
Тесты для usecase сервиса заказов.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from orderup.usecase.orders.orders_usecase import OrderUseCase
from orderup.usecase.products.products_usecase import ProductUseCase
from orderup.entity.orders import OrderId
from orderup.entity.products import ProductId
from orderup.exceptions import OrderNotFoundError, ProductNotFoundError


@pytest.fixture
def mock_repositories():
    repos = MagicMock()
    repos.orders = AsyncMock()
    repos.products = AsyncMock()
    return repos


@pytest.fixture
def mock_uow(mock_repositories):
    context_manager = AsyncMock()
    context_manager.__aenter__ = AsyncMock(return_value=mock_repositories)
    context_manager.__aexit__ = AsyncMock(return_value=None)

    uow = MagicMock()
    uow.init = MagicMock(return_value=context_manager)
    return uow


@pytest.mark.asyncio
async def test_get_order_success(mock_uow, mock_repositories, sample_order):
    """
    Тест успешного получения заказа через usecase.
    """
    mock_repositories.orders.get_order_by_id = AsyncMock(return_value=sample_order)
    usecase = OrderUseCase(uow=mock_uow)

    result = await usecase.get_order(OrderId(1))

    assert result is sample_order
    mock_repositories.orders.get_order_by_id.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_get_order_not_found(mock_uow, mock_repositories):
    """
    Тест обработки случая, когда заказ не найден.
    """
    mock_repositories.orders.get_order_by_id = AsyncMock(
        side_effect=OrderNotFoundError(order_id=42)
    )
    usecase = OrderUseCase(uow=mock_uow)

    with pytest.raises(OrderNotFoundError):
        await usecase.get_order(OrderId(42))


@pytest.mark.asyncio
async def test_list_orders_passes_paging(mock_uow, mock_repositories, sample_order):
    mock_repositories.orders.list_orders = AsyncMock(return_value=[sample_order])
    usecase = OrderUseCase(uow=mock_uow)

    result = await usecase.list_orders(limit=10, offset=20)

    assert result == [sample_order]
    mock_repositories.orders.list_orders.assert_called_once_with(limit=10, offset=20)


@pytest.mark.asyncio
async def test_get_product_success(mock_uow, mock_repositories, sample_product):
    mock_repositories.products.get_product_by_id = AsyncMock(return_value=sample_product)
    usecase = ProductUseCase(uow=mock_uow)

    result = await usecase.get_product(ProductId(10))

    assert result is sample_product
    mock_repositories.products.get_product_by_id.assert_called_once_with(10)


@pytest.mark.asyncio
async def test_get_product_not_found(mock_uow, mock_repositories):
    mock_repositories.products.get_product_by_id = AsyncMock(
        side_effect=ProductNotFoundError(product_id=99)
    )
    usecase = ProductUseCase(uow=mock_uow)

    with pytest.raises(ProductNotFoundError):
        await usecase.get_product(ProductId(99))
