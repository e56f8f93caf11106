import logging
from decimal import Decimal

import pytest

from models.cart import Cart, CartItem


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def make_item():
    def _make(name: str = "Apple", price: str = "2.00", quantity: int = 1) -> CartItem:
        return CartItem(name=name, unit_price=Decimal(price), quantity=quantity)
    return _make


@pytest.fixture
def clean_logger():
    """Detach handlers from the shared "shopping_cart" logger around a test."""
    logger = logging.getLogger("shopping_cart")
    saved = logger.handlers[:]
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = saved
    logger.setLevel(saved_level)
