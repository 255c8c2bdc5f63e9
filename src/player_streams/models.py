"""
Plain data models: ranked players, products and order requests.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Player:
    """A ranked tennis player. Lower rank is better."""
    id: int
    name: str
    rank: int
    country: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Player name must not be empty")
        if self.rank < 1:
            raise ValueError(f"Player rank must be positive, got {self.rank}")

    def __str__(self) -> str:
        return f"{self.rank}. {self.name} ({self.country})"


@dataclass
class Product:
    """Catalogue product."""
    id: int
    name: str
    price: Decimal
    category: str
    stock: int

    def with_discount(self, percentage: Decimal) -> 'Product':
        """Return a copy priced at ``price * (1 - percentage)``."""
        return replace(self, price=self.price * (1 - percentage))


@dataclass
class ProductDTO:
    """Transfer shape for ``Product``."""
    id: int
    name: str
    price: Decimal
    category: str
    stock: int

    @classmethod
    def from_product(cls, product: Product) -> 'ProductDTO':
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            category=product.category,
            stock=product.stock,
        )

    def to_product(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            category=self.category,
            stock=self.stock,
        )


@dataclass
class OrderItemRequest:
    """A single line of an order request."""
    product_id: int
    quantity: int


@dataclass
class OrderCreateRequest:
    """Request to create an order from an ordered list of items."""
    items: List[OrderItemRequest] = field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> 'OrderCreateRequest':
        """Build a request from ``(product_id, quantity)`` pairs, keeping order."""
        return cls(items=[OrderItemRequest(product_id, quantity) for product_id, quantity in pairs])
