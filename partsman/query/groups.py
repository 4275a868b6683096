"""
Filter groups per configurator category.

The configurator groups are static configuration keyed by category; only
the price group is shared by every category. Shop listings (ready-made PCs)
have no category to key on, so their groups are discovered from the data
instead (see `get_shop_filter_groups`).
"""

from collections.abc import Iterable

from django.utils.translation import gettext_lazy as _

from partsman.conf import partsman_settings
from partsman.protocols import (
    CATEGORY_GROUP,
    PRICE_GROUP,
    FilterGroup,
    FilterKind,
    FilterOption,
    ItemInfo,
    RangeBounds,
)
from partsman.query.aliases import DIMENSIONS
from partsman.query.options import extract_options


def _range(title, label, min, max, step=1, unit=""):
    return FilterGroup(
        title=title,
        kind=FilterKind.RANGE,
        label=label,
        range=RangeBounds(min=min, max=max, step=step, unit=unit),
    )


def _choices(kind, title, label, *options):
    return FilterGroup(
        title=title,
        kind=kind,
        label=label,
        options=tuple(FilterOption(id=option_id, label=name) for option_id, name in options),
    )


def _checkbox(title, label, *options):
    return _choices(FilterKind.CHECKBOX, title, label, *options)


def _radio(title, label, *options):
    return _choices(FilterKind.RADIO, title, label, *options)


_SOCKET = _checkbox("socket", _("Socket"), ("lga1700", "LGA 1700"), ("am5", "AM5"), ("am4", "AM4"))
_MAX_RAM = _range("max_ram", _("Max RAM"), 32, 256, 32, "GB")
_RAM_FREQUENCY = _range("ram_frequency", _("RAM frequency"), 2400, 6000, 100, "MHz")


CATEGORY_FILTER_GROUPS: dict[str, tuple[FilterGroup, ...]] = {
    "cpu": (
        _radio("manufacturer", _("Manufacturer"), ("intel", "Intel"), ("amd", "AMD")),
        _range("cores", _("Cores"), 2, 32, 2),
        _range("threads", _("Threads"), 2, 64, 2),
        _SOCKET,
        _range("frequency", _("Frequency"), 2, 6, 0.1, "GHz"),
        _MAX_RAM,
        _RAM_FREQUENCY,
        _checkbox("tech_process", _("Technology process"), ("5nm", "5nm"), ("7nm", "7nm"), ("10nm", "10nm")),
    ),
    "gpu": (
        _radio("manufacturer", _("Manufacturer"), ("nvidia", "NVIDIA"), ("amd", "AMD")),
        _range("vram", _("VRAM"), 4, 24, 2, "GB"),
        _checkbox(
            "cooling",
            _("Cooling"),
            ("triple-fan", "3 Fans"),
            ("dual-fan", "2 Fans"),
            ("single-fan", "1 Fan"),
        ),
    ),
    "ram": (
        _checkbox(
            "manufacturer",
            _("Manufacturer"),
            ("corsair", "Corsair"),
            ("gskill", "G.Skill"),
            ("kingston", "Kingston"),
            ("crucial", "Crucial"),
        ),
        _range("frequency", _("Frequency"), 2400, 6000, 100, "MHz"),
        _checkbox("rgb", _("RGB"), ("rgb", "RGB Lighting")),
    ),
    "motherboard": (
        _checkbox(
            "manufacturer",
            _("Manufacturer"),
            ("asus", "ASUS"),
            ("msi", "MSI"),
            ("gigabyte", "Gigabyte"),
            ("asrock", "ASRock"),
        ),
        _SOCKET,
        _range("memory_slots", _("Memory slots"), 2, 8, 2),
        _radio("cpu_support", _("CPU support"), ("intel", "Intel"), ("amd", "AMD")),
        _checkbox("memory_type", _("Memory type"), ("ddr5", "DDR5"), ("ddr4", "DDR4")),
        _MAX_RAM,
        _RAM_FREQUENCY,
        _range("gpu_slots", _("GPU slots"), 1, 4),
        _range("sata_ports", _("SATA ports"), 2, 8),
        _range("m2_slots", _("M.2 slots"), 1, 4),
        _checkbox(
            "features",
            _("Features"),
            ("sli-crossfire", "SLI/CrossFire"),
            ("wifi-bt", "Wi-Fi + Bluetooth"),
            ("nvme", "NVMe Support"),
        ),
        _radio("format", _("Form factor"), ("atx", "ATX"), ("micro-atx", "Micro-ATX"), ("mini-itx", "Mini-ITX")),
    ),
    "storage": (
        _checkbox(
            "manufacturer",
            _("Manufacturer"),
            ("samsung", "Samsung"),
            ("crucial", "Crucial"),
            ("western-digital", "Western Digital"),
            ("seagate", "Seagate"),
        ),
        _range("capacity", _("Capacity"), 250, 4000, 250, "GB"),
        _checkbox("nvme", _("NVMe"), ("nvme", "NVMe Drive")),
    ),
    "cooling": (
        _checkbox(
            "manufacturer",
            _("Manufacturer"),
            ("noctua", "Noctua"),
            ("corsair", "Corsair"),
            ("be-quiet", "be quiet!"),
            ("cooler-master", "Cooler Master"),
        ),
        _range("tdp", _("TDP"), 65, 360, 5, "W"),
        _range("heatpipes", _("Heatpipes"), 2, 8),
    ),
    "psu": (
        _checkbox(
            "manufacturer",
            _("Manufacturer"),
            ("corsair", "Corsair"),
            ("seasonic", "Seasonic"),
            ("evga", "EVGA"),
            ("be-quiet", "be quiet!"),
        ),
        _range("wattage", _("Wattage"), 450, 1600, 50, "W"),
    ),
    "case": (
        _checkbox(
            "manufacturer",
            _("Manufacturer"),
            ("lian-li", "Lian Li"),
            ("phanteks", "Phanteks"),
            ("fractal", "Fractal Design"),
            ("corsair", "Corsair"),
        ),
        _checkbox("watercooling", _("Water cooling"), ("water-cooling", "Water Cooling Support")),
    ),
    "additional-services": (
        _checkbox(
            "services",
            _("Services"),
            ("assembly", "PC Assembly"),
            ("warranty", "Extended Warranty"),
            ("overclocking", "Overclocking Setup"),
            ("windows", "Windows Installation"),
        ),
    ),
}

SHOP_GROUP_LABELS = {
    CATEGORY_GROUP: _("Category"),
    "cpu": _("Processor"),
    "gpu": _("Graphics card"),
    "ram": _("Memory"),
    "storage": _("Storage"),
    "motherboard": _("Motherboard"),
    "psu": _("Power supply"),
    "case": _("Case"),
    "cooling": _("Cooling"),
}


def get_price_group() -> FilterGroup:
    """The price slider shared by every category."""
    return _range(
        PRICE_GROUP,
        _("Price"),
        partsman_settings.PRICE_MIN,
        partsman_settings.PRICE_MAX,
        partsman_settings.PRICE_STEP,
        partsman_settings.CURRENCY_UNIT,
    )


def get_filter_groups(category: str | None) -> list[FilterGroup]:
    """
    Return the filter groups of a configurator category.

    Unknown categories only get the price group.
    """
    specific = CATEGORY_FILTER_GROUPS.get((category or "").lower(), ())
    return [get_price_group(), *specific]


def get_shop_filter_groups(items: Iterable[ItemInfo]) -> list[FilterGroup]:
    """
    Return checkbox groups discovered from `items`: the categories present,
    then one group per canonical dimension. Empty groups are left out.
    """
    items = list(items)
    categories: dict[str, None] = {}
    for item in items:
        if item.category:
            categories.setdefault(item.category, None)

    groups = [
        FilterGroup(
            title=CATEGORY_GROUP,
            kind=FilterKind.CHECKBOX,
            label=SHOP_GROUP_LABELS[CATEGORY_GROUP],
            options=tuple(FilterOption(id=cat, label=cat) for cat in categories),
        )
    ]
    for dimension in DIMENSIONS:
        groups.append(
            FilterGroup(
                title=dimension,
                kind=FilterKind.CHECKBOX,
                label=SHOP_GROUP_LABELS[dimension],
                options=tuple(extract_options(items, dimension)),
            )
        )
    return [group for group in groups if group.options]
