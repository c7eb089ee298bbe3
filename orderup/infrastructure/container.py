"""
Контейнер для infrastructure уровня.
"""

from dependency_injector import containers, providers

from orderup.infrastructure.persistence.db import Database
from orderup.infrastructure.persistence.uow import UnitOfWork


def get_db_url(
    pg_user: str,
    pg_password: str,
    pg_host: str,
    pg_port: str,
    pg_db: str,
) -> str:
    return f"postgresql+asyncpg://{pg_user}:{pg_password}@{pg_host}:{pg_port}/{pg_db}"


class InfrastructureContainer(containers.DeclarativeContainer):

    config = providers.Configuration()

    db = providers.Singleton(
        Database,
        db_url=providers.Resource(
            get_db_url,
            pg_user=config.DB_USER,
            pg_password=config.DB_PASS,
            pg_host=config.DB_HOST,
            pg_port=config.DB_PORT,
            pg_db=config.DB_NAME,
        ),
        echo=config.DB_ECHO,
    )

    uow = providers.Singleton(
        UnitOfWork,
        db=db,
    )
