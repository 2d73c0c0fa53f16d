"""Tests for widget mapping"""
import pytest

from fieldmetadata.core.exceptions import WidgetContextError
from fieldmetadata.models.schemas import FieldSchema
from fieldmetadata.services.normalization import WidgetMapper, get_angular_widget


class TestAngularWidgets:
    """Test cases for get_angular_widget"""

    @pytest.mark.parametrize("html_type, widget", [
        ("Select State/Province", "crm-render-select"),
        ("Select Country", "crm-render-select"),
        ("RichTextEditor", "crm-ui-richtext"),
        ("advcheckbox", "crm-render-checkbox"),
        ("ChainSelect", "crm-render-chain-select"),
        ("Date", "crm-ui-datepicker"),
        ("DateTime", "crm-ui-datepicker"),
        ("Select Date", "crm-ui-datepicker"),
        ("Autocomplete-Select", "crm-entityref"),
    ])
    def test_explicit_mappings(self, html_type, widget):
        assert get_angular_widget(html_type) == widget

    def test_default_rule(self):
        """Unknown types are lower-cased and prefixed"""
        assert get_angular_widget("Foo Bar") == "crm-render-foo bar"
        assert get_angular_widget("Text") == "crm-render-text"


class TestWidgetMapper:
    """Test cases for WidgetMapper"""

    def test_set_widget_types_by_context(self):
        fields = [FieldSchema(name="a", widget="Radio"), FieldSchema(name="b", widget="Date")]
        WidgetMapper().set_widget_types_by_context(fields, "Angular")
        assert [f.widget for f in fields] == ["crm-render-radio", "crm-ui-datepicker"]

    def test_unknown_context_raises(self):
        """Requesting an unregistered context is an error"""
        fields = [FieldSchema(name="a", widget="Radio")]
        with pytest.raises(WidgetContextError):
            WidgetMapper().set_widget_types_by_context(fields, "Backbone")
        assert fields[0].widget == "Radio"

    def test_register_context(self):
        mapper = WidgetMapper()
        mapper.register_context("Plain", lambda html_type: html_type.upper())
        assert mapper.map_widget("Text", "Plain") == "TEXT"
        assert mapper.map_widget("Text") == "crm-render-text"

    def test_empty_mapper(self):
        with pytest.raises(WidgetContextError):
            WidgetMapper(contexts={}).map_widget("Text", "Angular")
