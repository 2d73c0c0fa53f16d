"""Pytest configuration and fixtures"""
import pytest
from datetime import date
from typing import Dict, List, Optional

from fieldmetadata.core.exceptions import CrmRecordNotFoundError
from fieldmetadata.models.schemas import CustomFieldConfigSchema, DatePreferenceSchema
from fieldmetadata.services.normalization import LookupCache


class FakeLookupService:
    """In-memory CrmLookupService that records every call"""

    def __init__(
        self,
        option_values: Optional[Dict[str, str]] = None,
        custom_fields: Optional[Dict[str, Dict]] = None,
        format_types: Optional[Dict[tuple, str]] = None,
        date_preferences: Optional[Dict[str, Dict]] = None,
        contact_types: Optional[List[str]] = None
    ):
        self.option_values = option_values or {}
        self.custom_fields = custom_fields or {}
        self.format_types = format_types or {}
        self.date_preferences = date_preferences or {}
        self.contact_types = contact_types if contact_types is not None else ["Individual", "Organization", "Household"]
        self.calls: List[tuple] = []
        self.format_type_error: Optional[Exception] = None

    def count(self, method: str) -> int:
        return sum(1 for call in self.calls if call[0] == method)

    def get_option_values(self, option_group: str) -> Dict[str, str]:
        self.calls.append(("get_option_values", option_group))
        return dict(self.option_values)

    def get_custom_field(self, field_id: str) -> CustomFieldConfigSchema:
        self.calls.append(("get_custom_field", field_id))
        if field_id not in self.custom_fields:
            raise CrmRecordNotFoundError("Expected one CustomField but found 0")
        return CustomFieldConfigSchema(id=field_id, **self.custom_fields[field_id])

    def get_field_format_type(self, entity: str, field_name: str) -> Optional[str]:
        self.calls.append(("get_field_format_type", entity, field_name))
        if self.format_type_error is not None:
            raise self.format_type_error
        return self.format_types.get((entity, field_name))

    def get_date_preferences(self, format_type: str) -> DatePreferenceSchema:
        self.calls.append(("get_date_preferences", format_type))
        return DatePreferenceSchema(name=format_type, **self.date_preferences[format_type])

    def get_contact_types(self) -> List[str]:
        self.calls.append(("get_contact_types",))
        return list(self.contact_types)


@pytest.fixture
def lookup():
    """Fake lookup service with a visibility option group"""
    return FakeLookupService(option_values={
        "1": "Public Pages",
        "2": "Public Pages and Listings",
        "3": "User and User Admin Only",
        "7": "Custom",
    })


@pytest.fixture
def cache():
    """Fresh lookup cache, isolated from the process-wide one"""
    return LookupCache()


@pytest.fixture
def today():
    """Clock fixed in 2024"""
    return lambda: date(2024, 6, 15)
