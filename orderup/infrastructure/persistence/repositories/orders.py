import datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from orderup.entity.orders import Order, OrderId
from orderup.exceptions import OrderNotFoundError, RepositoryError
from orderup.infrastructure.persistence.db.schema import Order as OrderModel
from orderup.infrastructure.persistence.repositories.products import ProductRepository


class OrderRepository:
    """
    Чтение заказов вместе с товаром.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session: AsyncSession = session

    async def get_order_by_id(
            self,
            order_id: int
    ) -> Order:
        """
        Получить заказ по ID
        """
        try:
            stmt = (
                select(OrderModel)
                .options(selectinload(OrderModel.product))
                .where(OrderModel.id == order_id)
            )
            result = await self._session.execute(stmt)
            db_order = result.scalar_one_or_none()

            if db_order is None:
                raise OrderNotFoundError(order_id=order_id)

            return self._to_entity(db_order)
        except OrderNotFoundError:
            raise
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to get order by id") from exc

    async def list_orders(
            self,
            limit: int = 50,
            offset: int = 0
    ) -> list[Order]:
        """
        Получить страницу заказов, упорядоченных по ID
        """
        try:
            stmt = (
                select(OrderModel)
                .options(selectinload(OrderModel.product))
                .order_by(OrderModel.id.asc())
                .limit(limit)
                .offset(offset)
            )
            result = await self._session.execute(stmt)
            return [self._to_entity(db_order) for db_order in result.scalars().all()]
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to list orders") from exc

    @staticmethod
    def _to_entity(order: OrderModel) -> Order:
        """
        Преобразование модели ORM в объект entity.

        В базе время хранится без зоны, в entity оно всегда в UTC.
        """
        created_at = order.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=datetime.UTC)
        else:
            created_at = created_at.astimezone(datetime.UTC)

        return Order(
            id=OrderId(order.id),
            quantity=order.quantity,
            created_at=created_at,
            status=order.status,
            product=ProductRepository.to_entity(order.product),
        )
