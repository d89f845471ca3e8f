"""
Customer Domain Model

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict

from storefront.core.exceptions import InvalidArgumentError


class Customer(BaseModel):
    """
    Customer domain model (lightweight, checkout context)

    The balance is spent only by a successful checkout.
    """

    name: str = Field(..., description="Customer name", frozen=True)
    balance: float = Field(..., description="Available balance", ge=0)

    model_config = ConfigDict(validate_assignment=True)

    def deduct(self, amount: float) -> None:
        """
        Charge the customer

        Raises:
            InvalidArgumentError: if amount exceeds the balance
        """
        if self.balance < amount:
            raise InvalidArgumentError("Insufficient balance")
        self.balance -= amount
