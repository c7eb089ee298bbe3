from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Исключение базового уровня приложения.

    Должно использоваться для всех ожидаемых, контролируемых сценариев ошибок в
    приложении.
    """
    def __init__(self, message: str = "", *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context or {}

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message or self.__class__.__name__


class RepositoryError(AppError):
    """
    Базовая класс ошибок для persistence/repository слоя.
    """


class UnitOfWorkError(AppError):
    """
    Ошибка для UOW при которой падает транзакция
    """


@dataclass
class OrderNotFoundError(AppError):
    """
    Возникает, когда заказ с заданным ID не существует.
    """
    order_id: Any
    message: str = "Order not found"

    def __post_init__(self) -> None:
        self.context = {"order_id": str(self.order_id)}


@dataclass
class ProductNotFoundError(AppError):
    """
    Возникает, когда товар с заданным ID не существует.
    """
    product_id: Any
    message: str = "Product not found"

    def __post_init__(self) -> None:
        self.context = {"product_id": str(self.product_id)}
