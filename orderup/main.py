from contextlib import asynccontextmanager

import fastapi

from orderup.api.handlers.orders.orders_handler import router as orders_router
from orderup.api.handlers.products.products_handler import router as products_router
from orderup.container import Container
from orderup.settings import settings
from orderup.logger import logger


def create_container() -> Container:
    container = Container()
    container.config.from_pydantic(settings)

    container.init_resources()

    return container


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """
    Управление жизненным циклом приложения
    """
    container = app.container
    db = container.infrastructure.db()

    if settings.DB_CREATE_SCHEMA:
        await db.create_database()

    logger.info("Order service started")
    try:
        yield
    finally:
        await db.dispose()
        container.shutdown_resources()
        logger.info("Order service stopped")


def create_app() -> fastapi.FastAPI:
    app = fastapi.FastAPI(title="orderup", lifespan=lifespan)
    app.container = create_container()
    app.include_router(orders_router)
    app.include_router(products_router)
    return app


app = create_app()
