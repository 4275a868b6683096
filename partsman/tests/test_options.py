"""Tests for filter options extracted from catalog data."""

from decimal import Decimal

from partsman.protocols import FilterOption, ItemInfo
from partsman.query.options import extract_options


def _item(item_id, **specs):
    return ItemInfo(id=item_id, name=item_id, price=Decimal("1"), specifications=specs)


class TestExtractOptions:
    def test_alias_tolerance(self):
        """Values under differently named keys are all surfaced."""
        items = [
            _item("a", **{"Graphics Card": "RTX 4080"}),
            _item("b", GPU="RX 7900 XT"),
        ]
        options = extract_options(items, "gpu")
        assert [option.id for option in options] == ["RTX 4080", "RX 7900 XT"]

    def test_option_shape(self):
        options = extract_options([_item("a", cpu="Intel i5")], "cpu")
        assert options == [FilterOption(id="Intel i5", label="Intel i5")]

    def test_splits_on_comma_and_semicolon(self):
        items = [_item("a", storage="512GB SSD; 1TB HDD, 2TB HDD")]
        options = extract_options(items, "storage")
        assert [option.id for option in options] == ["512GB SSD", "1TB HDD", "2TB HDD"]

    def test_dedup_keeps_first_seen_order(self):
        items = [
            _item("a", ram="32GB DDR5"),
            _item("b", memory="16GB DDR4"),
            _item("c", RAM="32GB DDR5"),
        ]
        assert [option.id for option in extract_options(items, "ram")] == ["32GB DDR5", "16GB DDR4"]

    def test_dedup_is_case_sensitive(self):
        items = [_item("a", storage="Samsung"), _item("b", storage="samsung")]
        assert [option.id for option in extract_options(items, "storage")] == ["Samsung", "samsung"]

    def test_key_must_equal_an_alias(self):
        """Option extraction does not accept keys that only contain an alias."""
        items = [_item("a", **{"CPU Cooler": "Noctua"})]
        assert extract_options(items, "cpu") == []

    def test_skips_empty_values_and_parts(self):
        items = [_item("a", cpu=""), _item("b", cpu=" ; ,"), _item("c")]
        assert extract_options(items, "cpu") == []

    def test_empty_item_list(self):
        assert extract_options([], "gpu") == []

    def test_unknown_dimension_uses_identity(self):
        items = [_item("a", socket="AM5"), _item("b", Socket="LGA1700")]
        assert [option.id for option in extract_options(items, "socket")] == ["AM5", "LGA1700"]
