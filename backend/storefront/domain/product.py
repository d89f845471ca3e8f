"""
Product Domain Model

Represents a sellable product in the storefront catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict

from storefront.core.exceptions import InvalidArgumentError


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Product instances are shared by reference: the same object may sit in
    several carts at once, and only a successful checkout mutates it.

    Fields:
        name: Product name (used in every customer-facing message)
        price: Unit price in currency units
        stock: Units currently available
        expired: Whether the product can no longer be sold
        digital: Digital products are never shipped
        weight: Unit weight in kg (only matters for shipped products)
    """

    name: str = Field(..., description="Product name", frozen=True)
    price: float = Field(..., description="Unit price", ge=0, frozen=True)
    stock: int = Field(0, description="Units in stock", ge=0)
    expired: bool = Field(False, description="Whether product is expired", frozen=True)
    digital: bool = Field(False, description="Digital products need no shipping", frozen=True)
    weight: float = Field(0.0, description="Unit weight in kg", ge=0, frozen=True)

    # Re-run field constraints when stock is assigned
    model_config = ConfigDict(validate_assignment=True)

    def reduce_stock(self, amount: int) -> None:
        """
        Take units out of stock

        Raises:
            InvalidArgumentError: if amount exceeds the current stock
        """
        if amount > self.stock:
            raise InvalidArgumentError(f"Not enough stock for {self.name}")
        self.stock -= amount

    def requires_shipping(self) -> bool:
        """Physical (non-digital) products are shipped"""
        return not self.digital

    @property
    def is_out_of_stock(self) -> bool:
        """Check if product is out of stock"""
        return self.stock <= 0

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump()
        data['requires_shipping'] = self.requires_shipping()
        data['is_out_of_stock'] = self.is_out_of_stock
        return data
