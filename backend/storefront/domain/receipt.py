"""
Receipt Domain Models

Value objects describing a settled checkout. The text layout is the one
printed at the till.

Author: TM3
Date: 2025-10-17
"""
from typing import List

from pydantic import BaseModel, Field, ConfigDict

RECEIPT_HEADER = "=== Receipt ==="
RECEIPT_SEPARATOR = "-----------------------"


class ReceiptLine(BaseModel):
    """One purchased cart line"""

    quantity: int = Field(..., description="Units bought", gt=0)
    name: str = Field(..., description="Product name at checkout time")
    line_total: float = Field(..., description="price x quantity", ge=0)

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return f"{self.quantity}X{self.name}\t{self.line_total}"


class Receipt(BaseModel):
    """
    Receipt domain model - result of a successful checkout

    Fields:
        customer_name: Who paid
        lines: Purchased lines in cart order
        subtotal: Sum of line totals
        shipping: Shipping fee for physical items
        total: subtotal + shipping
        remaining_balance: Customer balance after the charge
    """

    customer_name: str = Field(..., description="Customer name")
    lines: List[ReceiptLine] = Field(default_factory=list, description="Purchased lines")
    subtotal: float = Field(..., description="Sum of line totals", ge=0)
    shipping: float = Field(..., description="Shipping fee", ge=0)
    total: float = Field(..., description="Amount charged", ge=0)
    remaining_balance: float = Field(..., description="Balance after the charge", ge=0)

    model_config = ConfigDict(frozen=True)

    def render_lines(self) -> List[str]:
        """Receipt text, one entry per printed line"""
        rendered = [RECEIPT_HEADER]
        rendered.extend(line.render() for line in self.lines)
        rendered.append(RECEIPT_SEPARATOR)
        rendered.append(f"Subtotal: {self.subtotal}")
        rendered.append(f"Shipping: {self.shipping}")
        rendered.append(f"Total: {self.total}")
        rendered.append(f"Remaining Balance:{self.remaining_balance}")
        return rendered

    def render(self) -> str:
        return "\n".join(self.render_lines())
