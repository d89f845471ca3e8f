"""
Unit tests for Cart and CartItem

Author: TM3
Date: 2025-10-17
"""
import pytest
from pydantic import BaseModel, ValidationError

from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.cart import Cart, CartItem


class TestCartItem:

    def test_keeps_the_same_product_instance(self, milk):
        item = CartItem(product=milk, quantity=2)

        assert item.product is milk

    def test_line_total(self, milk):
        assert CartItem(product=milk, quantity=2).line_total == 200.0

    def test_shipping_weight(self, milk, scratch_card):
        assert CartItem(product=milk, quantity=2).shipping_weight == pytest.approx(0.8)
        assert CartItem(product=scratch_card, quantity=3).shipping_weight == 0.0

    def test_quantity_must_be_positive(self, milk):
        with pytest.raises(ValidationError):
            CartItem(product=milk, quantity=0)

    def test_is_frozen(self, milk):
        item = CartItem(product=milk, quantity=1)

        with pytest.raises(ValidationError):
            item.quantity = 5


class TestCart:

    def test_new_cart_is_empty(self, cart):
        assert cart.is_empty()
        assert len(cart) == 0
        assert cart.get_items() == ()

    def test_add_item_keeps_insertion_order(self, cart, milk, biscuits):
        cart.add_item(milk, 2)
        cart.add_item(biscuits, 1)

        items = cart.get_items()
        assert [item.product.name for item in items] == ["Milk", "Biscuits"]
        assert [item.quantity for item in items] == [2, 1]
        assert not cart.is_empty()

    def test_same_product_twice_gives_two_lines(self, cart, milk):
        cart.add_item(milk, 2)
        cart.add_item(milk, 3)

        assert len(cart) == 2

    def test_add_item_does_not_reserve_stock(self, cart, milk):
        cart.add_item(milk, 4)

        assert milk.stock == 10

    def test_add_item_beyond_stock_raises(self, cart, biscuits):
        with pytest.raises(InvalidArgumentError, match="Not enough stock for Biscuits"):
            cart.add_item(biscuits, 6)

        assert cart.is_empty()

    def test_add_item_up_to_stock(self, cart, biscuits):
        cart.add_item(biscuits, 5)

        assert len(cart) == 1

    def test_get_items_is_a_snapshot(self, cart, milk, biscuits):
        cart.add_item(milk, 1)
        snapshot = cart.get_items()

        cart.add_item(biscuits, 1)

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_iteration(self, cart, milk, biscuits):
        cart.add_item(milk, 1)
        cart.add_item(biscuits, 2)

        assert [item.quantity for item in cart] == [1, 2]

    def test_clear(self, cart, milk):
        cart.add_item(milk, 1)

        cart.clear()

        assert cart.is_empty()

    def test_repr_shows_items(self, cart, milk):
        cart.add_item(milk, 2)

        text = repr(cart)
        assert text.startswith("Cart(items=[")
        assert "Milk" in text
        assert "quantity=2" in text

    def test_cart_is_not_a_pydantic_model(self, cart):
        assert not isinstance(cart, BaseModel)

    def test_carts_do_not_share_items(self, milk):
        first, second = Cart(), Cart()
        first.add_item(milk, 1)

        assert second.is_empty()
