"""
Product Repository - In-memory catalog of Products

Products are registered once and always handed out by reference, so every
cart sees the same stock the checkout mutates.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Dict, List, Optional

from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Repository for Product lookup

    Returns the registered Product instances, never copies.
    """

    def __init__(self):
        self._products: Dict[str, Product] = {}

    def add(self, product: Product) -> Product:
        """
        Register a product in the catalog

        Args:
            product: Product to register

        Returns:
            The same product instance

        Raises:
            InvalidArgumentError: if a product with that name is already registered
        """
        if product.name in self._products:
            raise InvalidArgumentError(f"Product already registered: {product.name}")
        self._products[product.name] = product
        logger.debug("Registered product %s (stock %d)", product.name, product.stock)
        return product

    def find_by_name(self, name: str) -> Optional[Product]:
        """
        Find product by name

        Returns:
            Product or None if not registered
        """
        return self._products.get(name)

    def list_all(self) -> List[Product]:
        """All products in registration order"""
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, name: str) -> bool:
        return name in self._products
