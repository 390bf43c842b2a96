"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, List

from shopcart.services.money import to_decimal, round_money, multiply


@dataclass
class CartItem:
    """Single product line in the cart."""
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    added_at: str = ""

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()
        self.unit_price = to_decimal(self.unit_price)

    @property
    def total_price(self) -> Decimal:
        """Total price for all units."""
        return round_money(multiply(self.unit_price, self.quantity))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from dictionary."""
        return cls(
            product_id=int(data["product_id"]),
            product_name=data["product_name"],
            quantity=int(data["quantity"]),
            unit_price=to_decimal(data["unit_price"]),
            added_at=data.get("added_at", ""),
        )


@dataclass
class Cart:
    """Shopping cart owned by one session.

    Items keep insertion order and hold at most one line per product.
    """
    session_id: str
    items: List[CartItem] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""

    def __post_init__(self):
        now = datetime.now(timezone.utc).isoformat()
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_items(self) -> int:
        """Total number of units in cart (header cart counter)."""
        return sum(item.quantity for item in self.items)

    @property
    def subtotal(self) -> Decimal:
        """Sum of line totals, computed from the current lines."""
        return sum((item.total_price for item in self.items), Decimal("0.00"))

    def find(self, product_id: int) -> Optional[CartItem]:
        """Get the line for a product, if present."""
        return next((item for item in self.items if item.product_id == product_id), None)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "session_id": self.session_id,
            "items": [item.to_dict() for item in self.items],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """Create from dictionary."""
        items = [CartItem.from_dict(item) for item in data.get("items", [])]
        return cls(
            session_id=data["session_id"],
            items=items,
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
        )
