"""Option list construction"""
from typing import Any, List, Mapping

from fieldmetadata.models.schemas import OptionSchema, normalize_boolean

# Boolean custom fields have no option group; these stand in for one.
BOOLEAN_OPTIONS = (
    {"label": "Yes", "weight": 0, "value": "1"},
    {"label": "No", "weight": 1, "value": "0"},
)


def get_empty_option() -> OptionSchema:
    """Option with every key a field option needs"""
    return OptionSchema()


def mock_boolean_options(custom_field: Mapping[str, Any]) -> List[OptionSchema]:
    """
    Simulate the Yes/No options of a boolean custom field.

    Args:
        custom_field: Custom field definition with at least "id" and
            "default_value" (the shape of CustomField.getsingle)

    Returns:
        The "Yes" and "No" options, in that order
    """
    default_value = custom_field.get("default_value")
    if default_value is not None:
        default_value = str(default_value)

    result = []
    for field_option in BOOLEAN_OPTIONS:
        value = field_option["value"]
        result.append(OptionSchema(
            label=field_option["label"],
            name=f"custom_{custom_field['id']}[{value}]",
            value=value,
            order=field_option["weight"],
            default=normalize_boolean(default_value == value),
            is_active=normalize_boolean(1)
        ))

    return result
