"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple

from giftcart.errors import ERROR_NEGATIVE_PRICE
from giftcart.services.money import to_decimal, multiply


@dataclass(frozen=True)
class Product:
    """Purchasable item from the catalog."""
    id: int
    name: str
    price: Decimal

    def __post_init__(self):
        # Normalize numeric fields
        object.__setattr__(self, "id", int(self.id))
        object.__setattr__(self, "price", to_decimal(self.price))
        if self.price < 0:
            raise ValueError(f"{ERROR_NEGATIVE_PRICE}: {self.name}")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Create from dictionary."""
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            price=to_decimal(data["price"]),
        )


@dataclass(frozen=True)
class CartLine:
    """One product's presence in the cart."""
    id: int
    name: str
    price: Decimal
    quantity: int

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))

    @classmethod
    def for_product(cls, product: Product, quantity: int = 1) -> "CartLine":
        """New line copying the product's id, name and price."""
        return cls(id=product.id, name=product.name, price=product.price, quantity=quantity)

    @property
    def line_total(self) -> Decimal:
        """Price for all units."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        """Create from dictionary."""
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            price=to_decimal(data["price"]),
            quantity=int(data["quantity"]),
        )


@dataclass(frozen=True)
class CartView:
    """Derived, read-only view of the cart for renderers."""
    lines: Tuple[CartLine, ...]
    subtotal: Decimal
    threshold: Decimal
    progress: Decimal
    remaining: Decimal
    gift_id: int
    gift_message_visible: bool = False
    has_gift: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self, "has_gift", any(line.id == self.gift_id for line in self.lines)
        )

    @property
    def total_items(self) -> int:
        """Total number of units in the cart, gift included."""
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "lines": [
                {**line.to_dict(), "is_gift": line.id == self.gift_id}
                for line in self.lines
            ],
            "subtotal": str(self.subtotal),
            "threshold": str(self.threshold),
            "progress": str(self.progress),
            "remaining": str(self.remaining),
            "has_gift": self.has_gift,
            "gift_message_visible": self.gift_message_visible,
            "total_items": self.total_items,
            "is_empty": self.is_empty,
        }
