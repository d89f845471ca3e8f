"""
Checkout Service
Validates a cart, charges the customer and takes the goods out of stock

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from storefront.core.config import settings
from storefront.core.exceptions import IllegalStateError, InvalidArgumentError
from storefront.domain.cart import Cart, CartItem
from storefront.domain.customer import Customer
from storefront.domain.product import Product
from storefront.domain.receipt import Receipt, ReceiptLine

logger = logging.getLogger(__name__)

# (product, combined quantity) in first-seen cart order
SettlementPlan = List[Tuple[Product, int]]


class CheckoutService:
    """
    Service for settling carts

    Handles:
    - Cart validation (empty cart, expired products, stock)
    - Subtotal and weight-based shipping
    - Balance check and charge
    - Stock reduction
    - Receipt printing

    Every check runs before the first mutation, so a rejected checkout
    leaves customer, products and cart untouched.
    """

    def __init__(
        self,
        shipping_fee_per_kg: Optional[float] = None,
        writer: Callable[[str], None] = print,
    ):
        if shipping_fee_per_kg is None:
            shipping_fee_per_kg = settings.SHIPPING_FEE_PER_KG
        if shipping_fee_per_kg < 0:
            raise InvalidArgumentError("shipping_fee_per_kg must be >= 0")
        self.shipping_fee_per_kg = shipping_fee_per_kg
        self.writer = writer

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """
        Settle a cart for a customer

        Steps:
        1. Reject an empty cart
        2. Validate items in cart order (expired, then stock)
        3. Compute subtotal, shipping and total
        4. Reject if the customer cannot afford the total
        5. Charge the customer and reduce stock
        6. Print the receipt
        7. Clear the cart

        Args:
            customer: Customer paying for the cart
            cart: Cart to settle

        Returns:
            Receipt of the settled checkout

        Raises:
            IllegalStateError: if the cart is rejected (nothing is mutated)
        """
        if cart.is_empty():
            logger.warning("Checkout rejected for %s: cart is empty", customer.name)
            raise IllegalStateError("Cart is empty")

        items = cart.get_items()
        logger.debug("Validating %d cart items for %s", len(items), customer.name)
        plan = self.build_settlement_plan(items)

        subtotal = self.calculate_subtotal(items)
        shipping = self.calculate_shipping(items)
        total = subtotal + shipping

        if customer.balance < total:
            logger.warning(
                "Checkout rejected for %s: balance %s below total %s",
                customer.name, customer.balance, total
            )
            raise IllegalStateError("Insufficient balance")

        self._settle(customer, total, plan)

        receipt = Receipt(
            customer_name=customer.name,
            lines=[
                ReceiptLine(quantity=item.quantity, name=item.product.name, line_total=item.line_total)
                for item in items
            ],
            subtotal=subtotal,
            shipping=shipping,
            total=total,
            remaining_balance=customer.balance,
        )
        # Settled: the cart is emptied even if printing fails
        try:
            self.print_receipt(receipt)
        finally:
            cart.clear()

        logger.info(
            "Checkout completed for %s: %d items, total %s, remaining balance %s",
            customer.name, len(items), total, customer.balance
        )
        return receipt

    def build_settlement_plan(self, items: Iterable[CartItem]) -> SettlementPlan:
        """
        Validate cart items and aggregate quantities per product

        The same product may appear on several lines; its combined
        quantity must fit in stock, otherwise the line that crosses the
        limit is reported.

        Raises:
            IllegalStateError: "<name> is expired" or "<name> is out of stock"
        """
        plan: Dict[int, Tuple[Product, int]] = {}

        for item in items:
            product = item.product
            if product.expired:
                logger.warning("Checkout rejected: %s is expired", product.name)
                raise IllegalStateError(f"{product.name} is expired")

            key = id(product)
            requested = item.quantity + (plan[key][1] if key in plan else 0)
            if product.stock < requested:
                logger.warning(
                    "Checkout rejected: %s is out of stock (requested %d, available %d)",
                    product.name, requested, product.stock
                )
                raise IllegalStateError(f"{product.name} is out of stock")

            plan[key] = (product, requested)

        return list(plan.values())

    @staticmethod
    def calculate_subtotal(items: Iterable[CartItem]) -> float:
        """Sum of price x quantity over all items"""
        return sum(item.line_total for item in items)

    @staticmethod
    def calculate_shipping_weight(items: Iterable[CartItem]) -> float:
        """Sum of weight x quantity over items that need shipping"""
        return sum(item.shipping_weight for item in items)

    def calculate_shipping(self, items: Iterable[CartItem]) -> float:
        """Shipping fee for the physical items"""
        return self.calculate_shipping_weight(items) * self.shipping_fee_per_kg

    def print_receipt(self, receipt: Receipt) -> None:
        for line in receipt.render_lines():
            self.writer(line)

    @staticmethod
    def _settle(customer: Customer, total: float, plan: SettlementPlan) -> None:
        # Plan was validated against current stock; these calls cannot fail
        customer.deduct(total)
        for product, quantity in plan:
            product.reduce_stock(quantity)
