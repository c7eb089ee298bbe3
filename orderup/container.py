"""
Корневой контейнер, который подключает все подконтейнеры.
"""

from dependency_injector import containers, providers

from orderup.infrastructure.container import InfrastructureContainer
from orderup.usecase.container import UseCaseContainer


class Container(containers.DeclarativeContainer):

    config = providers.Configuration()
    wiring_config = containers.WiringConfiguration(
        modules=[
            "orderup.api.handlers.orders.orders_handler",
            "orderup.api.handlers.products.products_handler",
        ],
    )

    infrastructure = providers.Container(
        InfrastructureContainer,
        config=config,
    )

    usecase = providers.Container(
        UseCaseContainer,
        uow=infrastructure.uow,
    )
