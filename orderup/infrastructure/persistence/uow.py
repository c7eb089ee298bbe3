import contextlib
import dataclasses
from collections.abc import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError

from orderup.exceptions import UnitOfWorkError, RepositoryError
from orderup.infrastructure.persistence.db import Database
from orderup.infrastructure.persistence.repositories.orders import OrderRepository
from orderup.infrastructure.persistence.repositories.products import ProductRepository


@dataclasses.dataclass
class Repository:
    """
    repo доступные для UOW
    """

    orders: OrderRepository
    products: ProductRepository


class UnitOfWork:
    """
    Одна сессия и одна транзакция на все репозитории внутри блока.
    """

    def __init__(self, db: Database) -> None:
        self.db: Database = db

    @contextlib.asynccontextmanager
    async def init(self) -> AsyncGenerator[Repository, None]:
        async with self.db.connection() as session:
            async with session.begin():
                try:
                    yield Repository(
                        orders=OrderRepository(session),
                        products=ProductRepository(session),
                    )
                except (SQLAlchemyError, RepositoryError) as exc:
                    await session.rollback()
                    raise UnitOfWorkError("UnitOfWork transaction failed") from exc
