from orderup.entity.products import Product, ProductId
from orderup.infrastructure.persistence.uow import UnitOfWork


class ProductUseCase:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def get_product(self, product_id: ProductId) -> Product:
        async with self._uow.init() as repositories:
            return await repositories.products.get_product_by_id(int(product_id))
