"""
Unit Tests for the Normalizer

These tests validate parsing and field resolution in isolation, without
network or database access.

Test Organization:
- TestResolveField: Candidate-key priority and null short-circuit
- TestNormalizeCapacity / TestNormalizeColor: Value coercion
- TestParseDevices: Payload decoding, dropping and error handling
- TestRecordBuilder: ParsedDevice -> DeviceEntity mapping
"""

from decimal import Decimal

import pytest

from device_sync.errors import ParseError
from device_sync.normalizer import build_device_entities, parse_catalog, parse_devices
from device_sync.normalizer.field_normalizer import (
    CAPACITY_KEYS,
    COLOR_KEYS,
    normalize_capacity,
    normalize_color,
    resolve_field,
    to_text,
)
from device_sync.normalizer.parser import ParsedDevice


# ============================================================================
# Field Normalizer Tests
# ============================================================================

class TestResolveField:
    """Tests for candidate key resolution"""

    def test_lowercase_color_beats_capitalized(self):
        """Earlier candidates win regardless of dict order"""
        assert resolve_field({"Color": "Red", "color": "Blue"}, COLOR_KEYS) == "Blue"

    def test_null_value_does_not_fall_through(self):
        """A present key with a null value resolves to None"""
        assert resolve_field({"color": None, "Colour": "Red"}, COLOR_KEYS) is None

    def test_no_candidate_present(self):
        assert resolve_field({"price": 10}, CAPACITY_KEYS) is None

    @pytest.mark.parametrize("key", COLOR_KEYS)
    def test_every_color_spelling_is_recognised(self, key):
        assert normalize_color({key: "Elderberry"}) == "Elderberry"

    @pytest.mark.parametrize("key", CAPACITY_KEYS)
    def test_every_capacity_spelling_is_recognised(self, key):
        assert normalize_capacity({key: "256 GB"}) == "256 GB"

    def test_candidate_order(self):
        """Priority lists must keep their exact order"""
        assert COLOR_KEYS == ("color", "Color", "Colour", "Strap Colour", "strap_colour")
        assert CAPACITY_KEYS == (
            "capacity", "Capacity", "capacity GB", "Capacity GB", "storage", "Storage",
        )

    def test_storage_only_used_when_capacity_keys_absent(self):
        data = {"Storage": "1 TB", "Capacity GB": 512}
        assert normalize_capacity(data) == "512 GB"


class TestNormalizeCapacity:
    """Tests for capacity value coercion"""

    @pytest.mark.parametrize("value,expected", [
        (512, "512 GB"),
        (Decimal("256.5"), "256.5 GB"),
        (256.5, "256.5 GB"),
        (Decimal("1E+2"), "100 GB"),
        ("128 GB", "128 GB"),
        ("", ""),
    ])
    def test_capacity_values(self, value, expected):
        assert normalize_capacity({"capacity": value}) == expected

    def test_null_capacity(self):
        assert normalize_capacity({"capacity": None, "storage": "1 TB"}) is None

    def test_boolean_is_not_numeric(self):
        assert normalize_capacity({"capacity": True}) == "true"

    def test_other_types_render_as_json(self):
        assert normalize_capacity({"capacity": [64, 128]}) == "[64, 128]"


class TestNormalizeColor:
    """Tests for color value coercion"""

    def test_string_color(self):
        assert normalize_color({"Colour": "Purple"}) == "Purple"

    def test_numeric_color_is_stringified(self):
        assert normalize_color({"color": 7}) == "7"

    def test_missing_color(self):
        assert normalize_color({"capacity": "64 GB"}) is None

    def test_to_text_passthrough(self):
        assert to_text("Cloudy White") == "Cloudy White"
        assert to_text(False) == "false"


# ============================================================================
# Parser Tests
# ============================================================================

class TestParseDevices:
    """Tests for catalog payload parsing"""

    def test_blank_name_is_dropped(self):
        devices = parse_devices('[{"name":""},{"name":"X"}]')
        assert devices == [ParsedDevice(name="X")]

    @pytest.mark.parametrize("entry", [
        '{"id": "1"}',
        '{"name": null}',
        '{"name": "   "}',
        '{"name": "\\t\\n"}',
    ])
    def test_missing_or_blank_names_are_dropped(self, entry):
        assert parse_devices(f"[{entry}]") == []

    def test_name_is_kept_as_sent(self):
        assert parse_devices('[{"name": "  Pixel  "}]')[0].name == "  Pixel  "

    def test_null_data_leaves_fields_unset(self):
        devices = parse_devices('[{"id": "2", "name": "iPhone", "data": null}]')
        assert devices == [ParsedDevice(name="iPhone", color=None, capacity=None)]

    def test_missing_data_leaves_fields_unset(self):
        devices = parse_devices('[{"name": "iPhone"}]')
        assert devices[0].color is None
        assert devices[0].capacity is None

    def test_non_object_data_is_ignored(self):
        devices = parse_devices('[{"name": "iPhone", "data": "n/a"}]')
        assert devices == [ParsedDevice(name="iPhone")]

    def test_decimal_capacity_keeps_its_text(self):
        devices = parse_devices('[{"name": "Drive", "data": {"capacity": 256.5}}]')
        assert devices[0].capacity == "256.5 GB"

    def test_order_is_preserved(self):
        devices = parse_devices('[{"name": "B"}, {"name": ""}, {"name": "A"}, {"name": "C"}]')
        assert [d.name for d in devices] == ["B", "A", "C"]

    def test_accepts_bytes(self):
        assert parse_devices(b'[{"name": "X"}]') == [ParsedDevice(name="X")]

    def test_sample_catalog(self, sample_payload):
        devices = parse_devices(sample_payload)
        by_name = {d.name: d for d in devices}

        assert len(devices) == 7
        assert by_name["Apple iPhone 12 Mini, 256GB, Blue"].color is None
        assert by_name["Apple iPhone 12 Pro Max"].capacity == "512 GB"
        assert by_name["Apple Watch Series 8"].color == "Elderberry"
        assert by_name["Apple iPad Mini 5th Gen"].capacity == "64 GB"
        assert by_name["Google Pixel 6 Pro"] == ParsedDevice(
            name="Google Pixel 6 Pro", color="Cloudy White", capacity="128 GB"
        )

    def test_malformed_json_raises(self):
        with pytest.raises(ParseError) as exc_info:
            parse_devices("invalid json")
        assert exc_info.value.detail

    @pytest.mark.parametrize("body", [
        '{"name": "X"}',
        '"just a string"',
        "42",
        "null",
    ])
    def test_top_level_must_be_array(self, body):
        with pytest.raises(ParseError, match="expected a JSON array"):
            parse_devices(body)

    def test_non_object_element_fails_whole_parse(self):
        with pytest.raises(ParseError, match="element 1 is not an object"):
            parse_devices('[{"name": "X"}, "Y"]')

    def test_deeply_nested_array_raises_parse_error(self):
        body = "[" * 100000 + "]" * 100000

        with pytest.raises(ParseError) as exc_info:
            parse_devices(body)

        assert isinstance(exc_info.value.__cause__, RecursionError)

    def test_empty_array(self):
        assert parse_devices("[]") == []

    def test_catalog_counts_entries_and_dropped(self):
        catalog = parse_catalog('[{"name": ""}, {"name": "X"}, {"id": "3"}]')

        assert catalog.entries == 3
        assert catalog.dropped == 2
        assert catalog.devices == [ParsedDevice(name="X")]


# ============================================================================
# Record Builder Tests
# ============================================================================

class TestRecordBuilder:
    """Tests for DeviceEntity construction"""

    def test_fields_are_copied_and_price_is_fixed(self):
        devices = [
            ParsedDevice(name="A", color="Red", capacity="64 GB"),
            ParsedDevice(name="B"),
        ]

        entities = build_device_entities(devices, Decimal("2025.07"))

        assert [e.name for e in entities] == ["A", "B"]
        assert entities[0].color == "Red"
        assert entities[0].capacity == "64 GB"
        assert entities[1].color is None
        assert all(e.price == Decimal("2025.07") for e in entities)
        assert all(e.id is None for e in entities)

    def test_empty_input(self):
        assert build_device_entities([], Decimal("1")) == []
