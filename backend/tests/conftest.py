"""
Pytest fixtures and configuration for Storefront tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-10-17
"""
import pytest

from storefront.domain.cart import Cart
from storefront.domain.customer import Customer
from storefront.domain.product import Product
from storefront.repositories.product_repository import ProductRepository
from storefront.services.checkout_service import CheckoutService


@pytest.fixture
def milk():
    return Product(name="Milk", price=100, stock=10, weight=0.4)


@pytest.fixture
def biscuits():
    return Product(name="Biscuits", price=150, stock=5, weight=0.7)


@pytest.fixture
def tv():
    return Product(name="TV", price=20000, stock=3, weight=15.5)


@pytest.fixture
def mobile():
    return Product(name="Mobile", price=15000, stock=8, weight=0)


@pytest.fixture
def scratch_card():
    """Digital product: never shipped"""
    return Product(name="Scratch Card", price=50, stock=100, digital=True)


@pytest.fixture
def expired_milk():
    return Product(name="Expired Milk", price=100, stock=5, expired=True, weight=0.4)


@pytest.fixture
def customer():
    return Customer(name="Ahmed", balance=50000)


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def lines():
    """
    Collects printed receipt lines instead of writing to stdout
    """
    return []


@pytest.fixture
def checkout_service(lines):
    """
    CheckoutService with the default fee pinned, independent of the environment
    """
    return CheckoutService(shipping_fee_per_kg=30.0, writer=lines.append)


@pytest.fixture
def catalog(milk, biscuits, tv, mobile, scratch_card):
    repo = ProductRepository()
    for product in (milk, biscuits, tv, mobile, scratch_card):
        repo.add(product)
    return repo
