from __future__ import annotations

import typing
from dataclasses import dataclass
from datetime import datetime

from orderup.entity.products import Product

OrderId = typing.NewType("OrderId", int)


@dataclass(slots=True)
class Order:
    id: OrderId
    quantity: int
    created_at: datetime
    status: str
    product: Product
