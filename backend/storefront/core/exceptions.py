"""
Storefront exceptions

Two kinds of failure reach callers:
- InvalidArgumentError: an entity was asked to do something its state
  does not allow (reduce stock, deduct balance, add to cart)
- IllegalStateError: checkout refused a cart
"""


class StorefrontError(Exception):
    """Base class for all storefront errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(StorefrontError, ValueError):
    """Raised by entity operations given an amount they cannot honour"""


class IllegalStateError(StorefrontError, RuntimeError):
    """Raised when a cart cannot be checked out"""
