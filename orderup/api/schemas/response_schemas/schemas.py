from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class ProductSummary(BaseModel):
    """
    Краткая информация о товаре в ответе API.

    Значения не проверяются: неотрицательный остаток и непустой id
    обеспечивает вызывающая сторона.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int = Field(..., description="ID товара")
    name: str = Field(..., description="Название товара")
    stock: int = Field(..., description="Остаток на складе")


class OrderResponse(BaseModel):
    """
    Снимок заказа вместе с товаром для сериализации в тело ответа.

    Поля фиксируются при создании, модель ничего не вычисляет и не
    подставляет значений по умолчанию.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True, populate_by_name=True)

    id: int = Field(..., description="ID заказа")
    quantity: int = Field(..., description="Количество единиц товара")
    created_at: AwareDatetime = Field(..., alias="createdAt", description="Время создания заказа")
    status: str = Field(..., description="Статус заказа")
    product: ProductSummary
