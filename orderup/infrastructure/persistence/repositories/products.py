from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from orderup.entity.products import Product, ProductId
from orderup.exceptions import ProductNotFoundError, RepositoryError
from orderup.infrastructure.persistence.db.schema import Product as ProductModel


class ProductRepository:
    """
    Чтение товаров из базы.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session: AsyncSession = session

    async def get_product_by_id(self, product_id: int) -> Product:
        """
        Получить товар по ID
        """
        try:
            stmt = select(ProductModel).where(ProductModel.id == product_id)
            result = await self._session.execute(stmt)
            db_product = result.scalar_one_or_none()

            if db_product is None:
                raise ProductNotFoundError(product_id=product_id)

            return self.to_entity(db_product)
        except ProductNotFoundError:
            raise
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to get product by id") from exc

    @staticmethod
    def to_entity(product: ProductModel) -> Product:
        return Product(
            id=ProductId(product.id),
            name=product.name,
            stock=product.stock,
        )
