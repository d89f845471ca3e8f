"""
Repository Layer - Data Access

Repositories hand out domain models and hide where they are kept.

Author: TM3
Date: 2025-10-17
"""
from storefront.repositories.product_repository import ProductRepository

__all__ = [
    'ProductRepository',
]
