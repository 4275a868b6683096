"""Catalog protocols."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from partsman.specifications import parse_specifications


@dataclass(frozen=True)
class ItemInfo:
    """Read-only catalog item as seen by the query engine.

    `specifications` keys are free-form and compared case-insensitively;
    values are always strings.
    """

    id: str
    name: str
    category: str | None = None
    description: str = ""
    price: Decimal = Decimal("0")
    specifications: dict[str, str] = field(default_factory=dict)
    stock: int = 0
    image_url: str | None = None

    def as_dict(self) -> dict:
        """JSON shape served by the listing endpoint."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "specs": dict(self.specifications),
            "price": float(self.price),
            "imageUrl": self.image_url,
            "stock": self.stock,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ItemInfo":
        """Build from a listing payload (accepts `specs` or `specifications`)."""
        raw_specs = payload.get("specs", payload.get("specifications"))
        return cls(
            id=str(payload["id"]),
            name=payload.get("name") or "",
            category=payload.get("category"),
            description=payload.get("description") or "",
            price=Decimal(str(payload.get("price") or 0)),
            specifications=parse_specifications(raw_specs),
            stock=int(payload.get("stock") or 0),
            image_url=payload.get("imageUrl", payload.get("image_url")),
        )


@runtime_checkable
class CatalogBackend(Protocol):
    """Interface for fetching catalog items."""

    def list_items(self, category: str | None = None) -> list[ItemInfo]:
        """Return every published item, optionally pre-filtered by category."""
        ...

    def get_item(self, item_id: str) -> ItemInfo | None:
        """Return item by id."""
        ...
