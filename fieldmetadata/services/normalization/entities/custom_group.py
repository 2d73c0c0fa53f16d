"""Normalizer for custom data groups"""
from typing import Any, Dict, List, Mapping, Set

from fieldmetadata.core.config import settings
from fieldmetadata.models.schemas import FieldMetadataSchema, FieldSchema, OptionSchema

from ..normalizer import Normalizer

# Separator CiviCRM uses for multi-valued custom field data
VALUE_SEPARATOR = "\x01"

MULTI_VALUE_HTML_TYPES = {"CheckBox", "Multi-Select"}


def _split_default(default_value: Any) -> Set[str]:
    if default_value is None or default_value == "":
        return set()
    return {value for value in str(default_value).strip(VALUE_SEPARATOR).split(VALUE_SEPARATOR) if value}


class CustomGroupNormalizer(Normalizer):
    """
    Normalizes a custom group and its custom fields.

    Expected data: the custom group (id, title, extends) with its custom
    fields under "fields", each carrying its option values under "options".
    """

    entity = "CustomGroup"

    def normalize_data(self, data: Mapping[str, Any], params: Dict[str, Any]) -> FieldMetadataSchema:
        fields = []
        for custom_field in data.get("fields") or []:
            if self.normalize_boolean(custom_field.get("is_active", 1)) == "0":
                continue
            fields.append(self._normalize_field(custom_field, data.get("extends")))

        context = params.get("context")
        if context:
            self.set_widget_types_by_context(fields, context)

        return FieldMetadataSchema(
            id=data.get("id"),
            title=data.get("title") or "",
            fields=fields
        )

    def _normalize_field(self, custom_field: Mapping[str, Any], extends: Any) -> FieldSchema:
        field = self.get_empty_field()
        field.entity = extends
        field.name = f"{settings.custom_field_prefix}{custom_field['id']}"
        field.label = custom_field.get("label") or ""
        field.order = custom_field.get("weight") or 0
        field.required = self.normalize_boolean(custom_field.get("is_required"))
        field.preText = custom_field.get("help_pre") or ""
        field.postText = custom_field.get("help_post") or ""
        field.widget = custom_field.get("html_type")

        default_value = custom_field.get("default_value")
        field.default = "" if default_value is None else str(default_value)

        if custom_field.get("data_type") == "Boolean":
            field.options = self.mock_boolean_options(custom_field)
        else:
            field.options = self._normalize_options(field, custom_field)
        return field

    def _normalize_options(self, field: FieldSchema, custom_field: Mapping[str, Any]) -> List[OptionSchema]:
        defaults = _split_default(custom_field.get("default_value"))
        multi_value = custom_field.get("html_type") in MULTI_VALUE_HTML_TYPES

        options = []
        for raw_option in custom_field.get("options") or []:
            if self.normalize_boolean(raw_option.get("is_active", 1)) == "0":
                continue
            option = self.get_empty_option()
            option.label = raw_option.get("label") or ""
            option.value = raw_option.get("value")
            option.order = raw_option.get("weight") or 0
            option.default = self.normalize_boolean(option.value in defaults)
            option.name = f"{field.name}[{option.value}]" if multi_value else field.name
            options.append(option)
        return options
