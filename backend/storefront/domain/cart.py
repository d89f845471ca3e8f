"""
Cart Domain Models

CartItem is a line of the cart; Cart is the ordered collection a customer
builds before checkout.

Author: TM3
Date: 2025-10-17
"""
from typing import Iterator, List, Tuple

from pydantic import BaseModel, Field, ConfigDict

from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.product import Product


class CartItem(BaseModel):
    """
    Cart Item domain model - a product reference plus requested quantity

    The product is shared, not owned: it is the catalog instance itself.
    """

    product: Product = Field(..., description="Catalog product (shared reference)")
    quantity: int = Field(..., description="Units requested", gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def line_total(self) -> float:
        """Price of this line before shipping"""
        return self.product.price * self.quantity

    @property
    def shipping_weight(self) -> float:
        """Weight this line adds to the parcel (0 for digital products)"""
        if not self.product.requires_shipping():
            return 0.0
        return self.product.weight * self.quantity


class Cart:
    """
    Cart domain model - insertion-ordered cart items

    The cart owns its item list; callers get read-only views through
    get_items() or iteration.
    """

    def __init__(self):
        self._items: List[CartItem] = []

    def add_item(self, product: Product, quantity: int) -> None:
        """
        Append a line for product

        Stock is checked against the product's current stock but not
        reserved; checkout re-validates.

        Raises:
            InvalidArgumentError: if the product has fewer than quantity units
        """
        if product.stock < quantity:
            raise InvalidArgumentError(f"Not enough stock for {product.name}")
        self._items.append(CartItem(product=product, quantity=quantity))

    def get_items(self) -> Tuple[CartItem, ...]:
        """Snapshot of the cart lines in insertion order"""
        return tuple(self._items)

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def __iter__(self) -> Iterator[CartItem]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Cart(items={list(self._items)!r})"
