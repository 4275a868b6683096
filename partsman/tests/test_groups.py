"""Tests for filter group derivation."""

import pytest

from partsman.protocols import CATEGORY_GROUP, PRICE_GROUP, FilterKind, ItemInfo, QueryState
from partsman.query.engine import filter_items
from partsman.query.groups import CATEGORY_FILTER_GROUPS, get_filter_groups, get_shop_filter_groups
from partsman.seeds import SEED_ITEMS


class TestGetFilterGroups:
    def test_price_group_always_first(self):
        price = get_filter_groups("cpu")[0]
        assert price.title == PRICE_GROUP
        assert price.kind == FilterKind.RANGE
        assert (price.range.min, price.range.max, price.range.step, price.range.unit) == (0, 5000, 10, "€")

    @pytest.mark.parametrize("category", sorted(CATEGORY_FILTER_GROUPS))
    def test_every_category_starts_with_price(self, category):
        groups = get_filter_groups(category)
        assert groups[0].title == PRICE_GROUP
        assert len(groups) == 1 + len(CATEGORY_FILTER_GROUPS[category])

    def test_cpu_groups(self):
        titles = [group.title for group in get_filter_groups("cpu")]
        assert titles == [
            "price",
            "manufacturer",
            "cores",
            "threads",
            "socket",
            "frequency",
            "max_ram",
            "ram_frequency",
            "tech_process",
        ]

    def test_cpu_manufacturer_is_radio(self):
        manufacturer = get_filter_groups("cpu")[1]
        assert manufacturer.kind == FilterKind.RADIO
        assert [option.id for option in manufacturer.options] == ["intel", "amd"]

    def test_frequency_range(self):
        frequency = next(group for group in get_filter_groups("cpu") if group.title == "frequency")
        assert frequency.range.step == 0.1
        assert frequency.range.unit == "GHz"

    def test_unknown_category_only_price(self):
        groups = get_filter_groups("toaster")
        assert [group.title for group in groups] == [PRICE_GROUP]

    def test_none_category_only_price(self):
        assert [group.title for group in get_filter_groups(None)] == [PRICE_GROUP]

    def test_category_is_case_insensitive(self):
        assert get_filter_groups("GPU") == get_filter_groups("gpu")

    def test_price_bounds_from_settings(self, settings):
        settings.PARTSMAN = {"PRICE_MAX": 8000, "CURRENCY_UNIT": "$"}
        price = get_filter_groups("ram")[0]
        assert price.range.max == 8000
        assert price.range.unit == "$"

    def test_as_dict(self):
        data = get_filter_groups("gpu")[1].as_dict()
        assert data["title"] == "manufacturer"
        assert data["type"] == "radio"
        assert data["label"] == "Manufacturer"
        assert data["options"] == [{"id": "nvidia", "label": "NVIDIA"}, {"id": "amd", "label": "AMD"}]


class TestGetShopFilterGroups:
    def test_groups_from_data(self, ready_made):
        groups = get_shop_filter_groups(ready_made)
        titles = [group.title for group in groups]
        assert titles == [CATEGORY_GROUP, "cpu", "gpu", "ram", "storage", "psu", "cooling"]
        assert all(group.kind == FilterKind.CHECKBOX for group in groups)

    def test_category_options_first_seen(self, ready_made):
        category = get_shop_filter_groups(ready_made)[0]
        assert [option.id for option in category.options] == ["gaming-pc", "office-pc", "workstation"]

    def test_empty_items(self):
        assert get_shop_filter_groups([]) == []


def _seeded(category):
    return [ItemInfo.from_dict({"id": data["name"], **data}) for data in SEED_ITEMS if data["category"] == category]


class TestGroupsAgainstSeedCatalog:
    """Every configurator group must select something in the demo catalog."""

    @pytest.mark.parametrize("category", sorted(CATEGORY_FILTER_GROUPS))
    def test_every_group_matches_seeded_items(self, category):
        items = _seeded(category)
        assert items

        for group in get_filter_groups(category):
            if group.range is not None:
                selections = [{"min": group.range.min, "max": group.range.max}]
            else:
                selections = [option.id for option in group.options]
            matched = [
                selection
                for selection in selections
                if filter_items(items, QueryState(active_filters={group.title: selection}))
            ]
            assert matched, f"{category}.{group.title} matches no seeded item"

    @pytest.mark.parametrize(
        "selection",
        [
            {"frequency": {"min": 2, "max": 6}},
            {"threads": {"min": 2, "max": 64}},
            {"max_ram": {"min": 32, "max": 256}},
            {"ram_frequency": {"min": 2400, "max": 6000}},
            {"tech_process": ["5nm", "10nm"]},
        ],
    )
    def test_cpu_spec_groups_keep_all_cpus(self, selection):
        assert len(filter_items(_seeded("cpu"), QueryState(active_filters=selection))) == 2
