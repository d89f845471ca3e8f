"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
These models enforce type safety and validation across the application.

Author: TM3
Date: 2025-10-17
"""
from storefront.domain.product import Product
from storefront.domain.customer import Customer
from storefront.domain.cart import Cart, CartItem
from storefront.domain.receipt import Receipt, ReceiptLine

__all__ = ['Product', 'Customer', 'Cart', 'CartItem', 'Receipt', 'ReceiptLine']
