"""Domain type definitions for gastos.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- CategoryName: Name of an expense category
- Payer: Household member who paid for an expense
- ExpenseId: Opaque identifier of an expense record
"""

from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Category label, only produced through the taxonomy
CategoryName = NewType("CategoryName", str)

# Free-form payer label (e.g., "Tomi", "Gabi")
Payer = NewType("Payer", str)

# Random hex identifier, never reused
ExpenseId = NewType("ExpenseId", str)
