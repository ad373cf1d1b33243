"""JSON text encoding of expense records and category labels.

Expenses are stored as a JSON array of objects:

    [{"id": "...", "amount": 12050, "category": "Nafta", "payer": "Tomi",
      "date": "2024-03-01T00:00:00"}]

Amounts are whole cents and dates are ISO 8601, so decoding an encoded ledger
gives back equal records. Decoders raise ValueError on anything malformed; the
callers treat that as absent data.
"""

import json
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from gastos.domain.expenses import ExpenseRecord, naive_datetime
from gastos.domain.models import CategoryName, ExpenseId, Money, Payer


def expense_to_dict(record: ExpenseRecord) -> dict[str, Any]:
    """Convert an expense record to a JSON-ready dictionary."""
    return {
        "id": record.id,
        "amount": record.amount,
        "category": record.category,
        "payer": record.payer,
        "date": record.date.isoformat(),
    }


def expense_from_dict(data: Any) -> ExpenseRecord:
    """Build an expense record from a decoded dictionary.

    Raises:
        ValueError: If fields are missing or have the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expense entry must be an object, got {type(data).__name__}")

    try:
        expense_id = data["id"]
        amount = data["amount"]
        category = data["category"]
        payer = data["payer"]
        raw_date = data["date"]
    except KeyError as e:
        raise ValueError(f"Expense entry is missing {e.args[0]!r}") from None

    if not isinstance(expense_id, str) or not expense_id:
        raise ValueError(f"Invalid expense id: {expense_id!r}")
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise ValueError(f"Invalid amount for expense {expense_id}: {amount!r}")
    if not isinstance(category, str) or not isinstance(payer, str) or not isinstance(raw_date, str):
        raise ValueError(f"Invalid text field in expense {expense_id}")

    return ExpenseRecord(
        id=ExpenseId(expense_id),
        amount=Money(amount),
        category=CategoryName(category),
        payer=Payer(payer),
        date=naive_datetime(datetime.fromisoformat(raw_date)),
    )


def encode_expenses(records: Iterable[ExpenseRecord]) -> str:
    """Serialize expense records to JSON text."""
    return json.dumps([expense_to_dict(record) for record in records], ensure_ascii=False)


def decode_expenses(text: str) -> list[ExpenseRecord]:
    """Parse JSON text into expense records.

    Raises:
        ValueError: If the text is not a JSON array of valid expense objects,
            or if two entries share an id.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("Expenses payload must be a JSON array")

    records = [expense_from_dict(item) for item in data]

    ids = {record.id for record in records}
    if len(ids) != len(records):
        raise ValueError("Expenses payload contains duplicate ids")

    return records


def encode_categories(labels: Iterable[str]) -> str:
    """Serialize category labels to JSON text."""
    return json.dumps(list(labels), ensure_ascii=False)


def decode_categories(text: str) -> list[str]:
    """Parse JSON text into category labels.

    Raises:
        ValueError: If the text is not a JSON array of strings.
    """
    data = json.loads(text)
    if not isinstance(data, list) or not all(isinstance(label, str) for label in data):
        raise ValueError("Categories payload must be a JSON array of strings")
    return data
