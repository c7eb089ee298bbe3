"""
Контейнер для usecase слоя
"""

from dependency_injector import containers, providers

from orderup.infrastructure.persistence.uow import UnitOfWork
from orderup.usecase.orders.orders_usecase import OrderUseCase
from orderup.usecase.products.products_usecase import ProductUseCase


class UseCaseContainer(containers.DeclarativeContainer):

    uow: providers.Dependency[UnitOfWork] = providers.Dependency()

    order_usecase = providers.Factory(
        OrderUseCase,
        uow=uow,
    )

    product_usecase = providers.Factory(
        ProductUseCase,
        uow=uow,
    )
