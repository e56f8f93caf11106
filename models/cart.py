# models/cart.py
import logging
from dataclasses import dataclass
from decimal import Decimal

logger = logging.getLogger("shopping_cart.cart")

# Cart model representing a shopping cart line.
# No validation here: zero or negative values are accepted as-is.
@dataclass
class CartItem:
    name: str
    unit_price: Decimal
    quantity: int

    def __post_init__(self):
        # 2.00 -> Decimal("2.0")
        if not isinstance(self.unit_price, Decimal):
            self.unit_price = Decimal(str(self.unit_price))


class Cart:
    # Minimum number of cart lines to get a discount
    DISCOUNT_THRESHOLD_QUANTITY = 5

    def __init__(self):
        self.items: list[CartItem] = []

    def add_item(self, item: CartItem) -> None:
        self.items.append(item)
        logger.debug("Added %r (lines=%d)", item, len(self.items))

    def remove_item(self, item: CartItem) -> bool:
        # Removes the first equal entry only. Missing item is a no-op.
        try:
            self.items.remove(item)
        except ValueError:
            logger.debug("Remove skipped, %r not in cart", item)
            return False
        logger.debug("Removed %r (lines=%d)", item, len(self.items))
        return True

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def is_discount_eligible(self) -> bool:
        # counts lines, not summed quantity
        return len(self.items) >= self.DISCOUNT_THRESHOLD_QUANTITY

    def calculate_total_price_without_discount(self) -> Decimal:
        return sum((it.unit_price * it.quantity for it in self.items), Decimal("0"))

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Cart(lines={len(self.items)})"
