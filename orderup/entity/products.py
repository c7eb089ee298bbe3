from __future__ import annotations

import typing
from dataclasses import dataclass

ProductId = typing.NewType("ProductId", int)


@dataclass(slots=True)
class Product:
    id: ProductId
    name: str
    stock: int
