import datetime

import pytest

from orderup.entity.orders import Order, OrderId
from orderup.entity.products import Product, ProductId
from orderup.infrastructure.persistence.db import Database
from orderup.infrastructure.persistence.db.schema import (
    Order as OrderModel,
    Product as ProductModel,
)


@pytest.fixture
def sample_product():
    return Product(id=ProductId(10), name="Widget", stock=50)


@pytest.fixture
def sample_order(sample_product):
    return Order(
        id=OrderId(1),
        quantity=3,
        created_at=datetime.datetime(2024, 1, 1, tzinfo=datetime.UTC),
        status="PENDING",
        product=sample_product,
    )


@pytest.fixture
async def db(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'orderup.db'}")
    await database.create_database()
    yield database
    await database.dispose()


@pytest.fixture
async def empty_db(tmp_path):
    """
    База без таблиц: любой запрос падает с SQLAlchemyError.
    """
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield database
    await database.dispose()


@pytest.fixture
async def seeded(db):
    """
    Товар и два заказа на него; возвращает их ID.
    """
    async with db.connection() as session:
        product = ProductModel(name="Widget", stock=50)
        session.add(product)
        await session.flush()

        first = OrderModel(
            product_id=product.id,
            quantity=3,
            status="PENDING",
            created_at=datetime.datetime(2024, 1, 1),
        )
        second = OrderModel(
            product_id=product.id,
            quantity=0,
            status="",
            created_at=datetime.datetime(2024, 1, 2, 12, 30),
        )
        session.add_all([first, second])
        await session.commit()

        return {"product_id": product.id, "order_ids": [first.id, second.id]}
