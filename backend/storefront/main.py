"""
Storefront - Checkout demo
Builds a small catalog and runs the five scripted checkout scenarios
"""
import logging
import sys
from typing import Callable, List, Tuple

from storefront.core.logging_config import setup_logging
from storefront.domain.cart import Cart
from storefront.domain.customer import Customer
from storefront.domain.product import Product
from storefront.repositories.product_repository import ProductRepository
from storefront.services.checkout_service import CheckoutService

logger = logging.getLogger(__name__)

Scenario = Callable[[], None]


def build_catalog() -> ProductRepository:
    """Sample catalog used by the demo"""
    catalog = ProductRepository()
    catalog.add(Product(name="Milk", price=100, stock=10, weight=0.4))
    catalog.add(Product(name="Biscuits", price=150, stock=5, weight=0.7))
    catalog.add(Product(name="TV", price=20000, stock=3, weight=15.5))
    catalog.add(Product(name="Mobile", price=15000, stock=8, weight=0))
    catalog.add(Product(name="Scratch Card", price=50, stock=100, digital=True))
    return catalog


def build_scenarios(
    catalog: ProductRepository,
    customer: Customer,
    checkout: CheckoutService,
) -> List[Scenario]:
    """The scripted scenarios, in run order"""

    def groceries():
        cart = Cart()
        cart.add_item(catalog.find_by_name("Milk"), 2)
        cart.add_item(catalog.find_by_name("Biscuits"), 1)
        checkout.checkout(customer, cart)

    def digital_and_weightless():
        cart = Cart()
        cart.add_item(catalog.find_by_name("Scratch Card"), 3)
        cart.add_item(catalog.find_by_name("Mobile"), 1)
        checkout.checkout(customer, cart)

    def expired_product():
        expired_milk = Product(name="Expired Milk", price=100, stock=5, expired=True, weight=0.4)
        cart = Cart()
        cart.add_item(expired_milk, 1)
        checkout.checkout(customer, cart)

    def over_budget():
        cart = Cart()
        cart.add_item(catalog.find_by_name("TV"), 3)
        checkout.checkout(customer, cart)

    def empty_cart():
        checkout.checkout(customer, Cart())

    return [groceries, digital_and_weightless, expired_product, over_budget, empty_cart]


def run_scenarios(scenarios: List[Scenario]) -> Tuple[int, int]:
    """
    Run each scenario, reporting failures without stopping

    Returns:
        (succeeded, failed) counts
    """
    succeeded = failed = 0
    for number, scenario in enumerate(scenarios, start=1):
        if number > 1:
            print()
        print(f"== Test Case {number} ==")
        try:
            scenario()
            succeeded += 1
        except Exception as e:
            print(f"Error: {e}")
            failed += 1
    logger.info("Scenarios finished: %d succeeded, %d failed", succeeded, failed)
    return succeeded, failed


def main() -> int:
    setup_logging()
    catalog = build_catalog()
    customer = Customer(name="Ahmed", balance=50000)
    checkout = CheckoutService()
    run_scenarios(build_scenarios(catalog, customer, checkout))
    return 0


if __name__ == "__main__":
    sys.exit(main())
