from orderup.entity.orders import Order, OrderId
from orderup.infrastructure.persistence.uow import UnitOfWork


class OrderUseCase:
    """
    Чтение заказов через unit of work.

    Статусы и остатки здесь не пересчитываются: заказ отдаётся в том виде,
    в котором его сохранил сервис оформления.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def get_order(self, order_id: OrderId) -> Order:
        async with self._uow.init() as repositories:
            return await repositories.orders.get_order_by_id(int(order_id))

    async def list_orders(self, limit: int = 50, offset: int = 0) -> list[Order]:
        async with self._uow.init() as repositories:
            return await repositories.orders.list_orders(limit=limit, offset=offset)
