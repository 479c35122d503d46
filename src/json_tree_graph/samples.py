"""SAMPLE_JSON: placeholder document offered to users of the viewer."""

from __future__ import annotations

from typing import Any

__all__ = ["SAMPLE_JSON"]

SAMPLE_JSON: dict[str, Any] = {
    "user": {
        "id": 1,
        "name": "John Doe",
        "email": "john.doe@example.com",
        "address": {
            "street": "123 Main St",
            "city": "San Francisco",
            "state": "CA",
            "zipCode": "94102",
        },
        "isActive": True,
    },
    "items": [
        {"id": 101, "name": "Laptop", "price": 1299.99, "inStock": True},
        {"id": 102, "name": "Mouse", "price": 29.99, "inStock": False},
        {"id": 103, "name": "Keyboard", "price": 89.99, "inStock": True},
    ],
    "metadata": {
        "version": "1.0.0",
        "lastUpdated": "2025-10-27T10:00:00Z",
        "tags": ["demo", "sample", "json"],
    },
}
