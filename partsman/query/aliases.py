"""
Specification key aliases.

Catalog data is entered by hand, so the same dimension shows up under
several spec keys ("GPU", "Graphics Card", "video card"). Each canonical
dimension maps to the lower-cased keys treated as equivalent, in priority
order.
"""

SPEC_ALIASES: dict[str, tuple[str, ...]] = {
    "cpu": ("cpu", "processor", "processors"),
    "gpu": ("gpu", "graphics", "graphicscard", "graphics card", "video card"),
    "ram": ("ram", "memory", "memories"),
    "storage": ("storage", "drive", "disk", "ssd", "hdd"),
    "motherboard": ("motherboard", "mb", "mainboard", "system board"),
    "psu": ("psu", "powersupply", "power supply", "power"),
    "case": ("case", "chassis", "tower", "enclosure"),
    "cooling": ("cooling", "cooler", "fan", "radiator"),
}

DIMENSIONS: tuple[str, ...] = tuple(SPEC_ALIASES)


def get_valid_keys_for_spec(dimension: str) -> list[str]:
    """
    Return the aliases of `dimension`, or `[dimension.lower()]` when the
    dimension is not a canonical one.
    """
    key = (dimension or "").lower()
    return list(SPEC_ALIASES.get(key, (key,)))
