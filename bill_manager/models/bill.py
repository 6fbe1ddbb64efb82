"""
Core Data Model for Bill Manager

A bill is a name plus the amount owed. The name is the bill's identity:
it is the key in the bill store and never changes once the bill exists.
Only the amount can be edited.

DESIGN DECISION: Amounts are plain floats. Currency precision is not
something this tool promises, so we don't pay for Decimal handling.
"""

from pydantic import BaseModel, ConfigDict, Field


class Bill(BaseModel):
    """
    A named amount owed.

    Whitespace around the name is stripped, so "  Rent " and "Rent"
    refer to the same bill.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Bill name (unique key in the store)"
    )
    amount: float = Field(
        ...,
        description="Amount owed. Sign and precision are not restricted."
    )

    def display(self, currency_symbol: str = "") -> str:
        """Render the bill as a single listing line."""
        return f"{self.name}: {currency_symbol}{self.amount:.2f}"
