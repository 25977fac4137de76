"""
Tests for form encoding
"""
from stripe_sdk.encoding import encode_form


class TestEncodeForm:
    """Tests for flattening payloads into form fields."""

    def test_flat_values(self):
        """Should stringify scalars in order."""
        assert encode_form({"amount": 2000, "currency": "usd"}) == [
            ("amount", "2000"),
            ("currency", "usd"),
        ]

    def test_nested_mappings(self):
        """Should use bracket notation for nesting."""
        assert encode_form({"owner": {"address": {"city": "Paris"}, "name": "Jenny"}}) == [
            ("owner[address][city]", "Paris"),
            ("owner[name]", "Jenny"),
        ]

    def test_lists(self):
        """Should index list items."""
        assert encode_form({"expand": ["balance_transaction", "destination"]}) == [
            ("expand[0]", "balance_transaction"),
            ("expand[1]", "destination"),
        ]

    def test_booleans(self):
        """Should encode booleans as lowercase words."""
        assert encode_form({"a": True, "b": False}) == [("a", "true"), ("b", "false")]

    def test_empty_mapping(self):
        """Should send an empty mapping as an empty value."""
        assert encode_form({"metadata": {}}) == [("metadata", "")]

    def test_none_dropped(self):
        """Should drop None values at any depth."""
        assert encode_form({"a": None, "b": {"c": None, "d": "x"}}) == [("b[d]", "x")]

    def test_empty_input(self):
        """Should return no fields for None or an empty payload."""
        assert encode_form(None) == []
        assert encode_form({}) == []
