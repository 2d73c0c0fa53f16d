"""Tests for option construction and boolean flags"""
import pytest

from fieldmetadata.models.schemas import OptionSchema, normalize_boolean
from fieldmetadata.services.normalization import get_empty_option, mock_boolean_options


class TestMockBooleanOptions:
    """Test cases for mock_boolean_options"""

    def test_yes_no_options(self):
        """Two options, Yes then No, named after the custom field"""
        options = mock_boolean_options({"id": 42, "default_value": "0"})
        assert [o.label for o in options] == ["Yes", "No"]
        assert [o.value for o in options] == ["1", "0"]
        assert [o.order for o in options] == [0, 1]
        assert [o.name for o in options] == ["custom_42[1]", "custom_42[0]"]
        assert [o.default for o in options] == ["0", "1"]
        assert all(o.is_active == "1" for o in options)

    def test_default_yes(self):
        options = mock_boolean_options({"id": "7", "default_value": "1"})
        assert [o.default for o in options] == ["1", "0"]

    def test_no_default(self):
        """Without a default value neither option is the default"""
        options = mock_boolean_options({"id": 7, "default_value": None})
        assert [o.default for o in options] == ["0", "0"]

    def test_rendered_shape(self):
        option = mock_boolean_options({"id": 1, "default_value": "1"})[0]
        data = option.model_dump()
        assert data["is_active"] == "1"
        assert data["preText"] == ""
        assert data["postText"] == ""


class TestOptionSchema:
    """Test cases for option flags and values"""

    @pytest.mark.parametrize("raw, expected", [
        (True, "1"), (False, "0"), (None, "0"), ("", "0"), ("0", "0"),
        (0, "0"), (1, "1"), ("1", "1"), ("yes", "1"),
    ])
    def test_normalize_boolean(self, raw, expected):
        assert normalize_boolean(raw) == expected

    def test_values_are_strings(self):
        """Option values never stay ints or booleans"""
        assert OptionSchema(value=3).value == "3"
        assert OptionSchema(value=True).value == "1"
        option = get_empty_option()
        option.value = 5
        assert option.value == "5"

    def test_flags_are_strings(self):
        option = OptionSchema(default=True, required=0)
        assert option.default == "1"
        assert option.required == "0"
