"""Filter options discovered from catalog data."""

import re
from collections.abc import Iterable

from partsman.protocols import FilterOption, ItemInfo
from partsman.query.aliases import get_valid_keys_for_spec

_VALUE_SEPARATORS = re.compile(r"[,;]")


def extract_options(items: Iterable[ItemInfo], dimension: str) -> list[FilterOption]:
    """
    Collect the distinct values of `dimension` across `items`.

    A spec key counts when its lower-cased form is one of the dimension's
    aliases. Values holding several entries ("16GB DDR5; 2x 8GB") are split
    on `,`/`;`. Order is first-seen; dedup is case-sensitive.
    """
    valid_keys = set(get_valid_keys_for_spec(dimension))
    seen: dict[str, None] = {}

    for item in items:
        for key, value in (item.specifications or {}).items():
            if key.lower() not in valid_keys or not value:
                continue
            for part in _VALUE_SEPARATORS.split(str(value)):
                part = part.strip()
                if part:
                    seen.setdefault(part, None)

    return [FilterOption(id=value, label=value) for value in seen]
