"""
Filter and query types.

FilterGroups describe what can be filtered for a category; QueryState is the
complete input of one filtering pass. Both are immutable configuration/state
snapshots: a change produces a new instance.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any


PRICE_GROUP = "price"
CATEGORY_GROUP = "category"


class FilterKind(str, Enum):
    """How a filter group is rendered and selected."""

    RANGE = "range"
    CHECKBOX = "checkbox"
    RADIO = "radio"


class SortKey(str, Enum):
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"


@dataclass(frozen=True)
class FilterOption:
    """Selectable option of a checkbox/radio group."""

    id: str
    label: Any

    def as_dict(self) -> dict:
        return {"id": self.id, "label": str(self.label)}


@dataclass(frozen=True)
class RangeBounds:
    """Slider bounds of a range group."""

    min: Decimal | int | float
    max: Decimal | int | float
    step: Decimal | int | float = 1
    unit: str = ""

    def as_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "step": self.step, "unit": self.unit}


@dataclass(frozen=True)
class FilterGroup:
    """
    One filterable dimension.

    `title` is the key of the group in the active selection; `label` is the
    (lazily translated) display text.
    """

    title: str
    kind: FilterKind
    label: Any = ""
    range: RangeBounds | None = None
    options: tuple[FilterOption, ...] = ()

    def as_dict(self) -> dict:
        data: dict[str, Any] = {
            "title": self.title,
            "type": self.kind.value,
            "label": str(self.label or self.title),
        }
        if self.range is not None:
            data["range"] = self.range.as_dict()
        if self.options:
            data["options"] = [option.as_dict() for option in self.options]
        return data


def to_decimal(value) -> Decimal | None:
    """Finite Decimal from a number or numeric string (`"4,5"` too), else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip().replace(",", "."))
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


@dataclass(frozen=True)
class PriceRange:
    """
    Inclusive price bounds.

    Bounds arrive from UI state and may be strings or None; they are stored
    as Decimal, and a missing or unparseable bound leaves that side open.
    """

    min: Decimal | None = Decimal("0")
    max: Decimal | None = Decimal("5000")

    def __post_init__(self):
        object.__setattr__(self, "min", to_decimal(self.min))
        object.__setattr__(self, "max", to_decimal(self.max))

    def contains(self, price) -> bool:
        price = to_decimal(price)
        if price is None:
            return False
        if self.min is not None and price < self.min:
            return False
        if self.max is not None and price > self.max:
            return False
        return True


@dataclass(frozen=True)
class QueryState:
    """Complete input of one filtering pass."""

    search_text: str = ""
    active_filters: Mapping[str, Any] = field(default_factory=dict)
    sort_key: str = SortKey.PRICE_ASC.value
    price_range: PriceRange = field(default_factory=PriceRange)

    @classmethod
    def initial(cls) -> "QueryState":
        """Default state from configuration."""
        from partsman.conf import partsman_settings

        return cls(
            sort_key=partsman_settings.DEFAULT_SORT,
            price_range=PriceRange(partsman_settings.PRICE_MIN, partsman_settings.PRICE_MAX),
        )
