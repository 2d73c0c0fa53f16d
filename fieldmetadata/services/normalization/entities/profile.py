"""Normalizer for profiles (UFGroup)"""
from typing import Any, Dict, Mapping

from fieldmetadata.models.schemas import FieldMetadataSchema, FieldSchema

from ..normalizer import Normalizer


class ProfileNormalizer(Normalizer):
    """
    Normalizes a profile and its profile fields.

    Profile fields carry their visibility as the legacy label stored on the
    profile field, which the shared pipeline turns into a tag.
    """

    entity = "UFGroup"

    def normalize_data(self, data: Mapping[str, Any], params: Dict[str, Any]) -> FieldMetadataSchema:
        fields = [
            self._normalize_field(uf_field)
            for uf_field in data.get("fields") or []
            if self.normalize_boolean(uf_field.get("is_active", 1)) == "1"
        ]

        context = params.get("context")
        if context:
            self.set_widget_types_by_context(fields, context)

        return FieldMetadataSchema(
            id=data.get("id"),
            title=data.get("title") or "",
            fields=fields
        )

    def _normalize_field(self, uf_field: Mapping[str, Any]) -> FieldSchema:
        field = self.get_empty_field()
        field.entity = uf_field.get("field_type")
        field.name = uf_field.get("field_name") or ""
        field.label = uf_field.get("label") or ""
        field.order = uf_field.get("weight") or 0
        field.required = self.normalize_boolean(uf_field.get("is_required"))
        field.preText = uf_field.get("help_pre") or ""
        field.postText = uf_field.get("help_post") or ""
        field.widget = uf_field.get("html_type") or "Text"
        field.visibility = uf_field.get("visibility")

        options = []
        for raw_option in uf_field.get("options") or []:
            option = self.get_empty_option()
            option.label = raw_option.get("label") or ""
            option.value = raw_option.get("value")
            option.order = raw_option.get("weight") or 0
            option.default = self.normalize_boolean(raw_option.get("is_default"))
            option.name = field.name
            options.append(option)
        field.options = options
        return field
