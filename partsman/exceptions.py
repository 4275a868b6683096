"""Partsman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "ITEM_NOT_FOUND": "Catalog item not found",
    "INVALID_PRICE": "Price must not be negative",
    "INVALID_STOCK": "Stock must not be negative",
    "INVALID_CATEGORY": "Unknown catalog category",
}


class CatalogError(Exception):
    """
    Structured exception for catalog operations.

    Usage:
        try:
            item = CatalogService.get_info(item_id)
        except CatalogError as e:
            if e.code == "ITEM_NOT_FOUND":
                print(f"Item {e.item_id} does not exist")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    @property
    def item_id(self) -> str | None:
        return self.data.get("item_id")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
