from orderup.api.schemas.response_schemas.schemas import OrderResponse, ProductSummary
from orderup.entity.orders import Order
from orderup.entity.products import Product


def to_product_summary(product: Product) -> ProductSummary:
    return ProductSummary(
        id=product.id,
        name=product.name,
        stock=product.stock,
    )


def to_order_response(order: Order) -> OrderResponse:
    """
    Собирает ответ из заказа и его товара без каких-либо вычислений.
    """
    return OrderResponse(
        id=order.id,
        quantity=order.quantity,
        created_at=order.created_at,
        status=order.status,
        product=to_product_summary(order.product),
    )
